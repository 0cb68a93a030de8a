import pytest

from pushswap.memory import (
    allocate_zeroed,
    compare_bytes,
    copy_bytes,
    fill,
    find_byte,
    move_bytes,
    zero,
)


def test_fill_sets_only_the_first_count_bytes():
    buffer = bytearray(b"xxxx")
    result = fill(buffer, ord("A"), 3)
    assert result is buffer
    assert buffer == b"AAAx"


def test_fill_takes_value_modulo_256():
    buffer = bytearray(2)
    fill(buffer, 0x141, 2)
    assert buffer == b"AA"


def test_fill_rejects_count_past_end():
    with pytest.raises(ValueError):
        fill(bytearray(2), 1, 3)


def test_zero_clears_prefix():
    buffer = bytearray(b"abcd")
    zero(buffer, 2)
    assert buffer == b"\x00\x00cd"


def test_zero_with_zero_count_leaves_buffer():
    buffer = bytearray(b"abcd")
    zero(buffer, 0)
    assert buffer == b"abcd"


def test_allocate_zeroed_has_product_length_and_zeroes():
    buffer = allocate_zeroed(3, 4)
    assert len(buffer) == 3 * 4
    assert all(byte == 0 for byte in buffer)


@pytest.mark.parametrize("count,size", [(0, 5), (5, 0), (0, 0)])
def test_allocate_zeroed_with_zero_gives_one_byte(count, size):
    assert allocate_zeroed(count, size) == bytearray(1)


def test_allocate_zeroed_rejects_negative():
    with pytest.raises(ValueError):
        allocate_zeroed(-1, 2)


def test_find_byte_finds_first_occurrence():
    assert find_byte(b"hello", ord("l"), 5) == b"hello".index(b"l")


def test_find_byte_respects_count():
    assert find_byte(b"hello", ord("o"), 4) is None


def test_find_byte_masks_value():
    assert find_byte(b"xA", 0x141, 2) == 1


def test_compare_bytes_equal_prefix_is_zero():
    assert compare_bytes(b"abcX", b"abcY", 3) == 0


def test_compare_bytes_sign_and_antisymmetry():
    forward = compare_bytes(b"abc", b"abd", 3)
    backward = compare_bytes(b"abd", b"abc", 3)
    assert forward < 0
    assert backward == -forward


def test_compare_bytes_is_unsigned():
    assert compare_bytes(b"\xff", b"\x01", 1) > 0


def test_copy_bytes_copies_prefix():
    destination = bytearray(b"......")
    result = copy_bytes(destination, b"abc", 3)
    assert result is destination
    assert destination == b"abc..."


def test_copy_bytes_rejects_short_source():
    with pytest.raises(ValueError):
        copy_bytes(bytearray(5), b"ab", 3)


def test_move_bytes_forward_overlap():
    buffer = bytearray(b"abcdef")
    move_bytes(buffer, 2, 0, 4)
    assert buffer == b"ababcd"


def test_move_bytes_backward_overlap():
    buffer = bytearray(b"abcdef")
    move_bytes(buffer, 0, 2, 4)
    assert buffer == b"cdefef"


def test_move_bytes_rejects_out_of_range():
    with pytest.raises(ValueError):
        move_bytes(bytearray(4), 2, 0, 3)