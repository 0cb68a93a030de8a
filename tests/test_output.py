import io

import pytest

from pushswap.conversions import int_to_str, to_hex
from pushswap.output import (
    format_string,
    printf,
    put_char,
    put_line,
    put_number,
    put_str,
)


def test_plain_text_is_unchanged():
    text = "hello, world"
    assert format_string(text) == text


@pytest.mark.parametrize("number", [0, 42, -42, 2147483647, -2147483648])
def test_d_and_i_format_decimal(number):
    assert format_string("%d", number) == int_to_str(number)
    assert format_string("%i", number) == int_to_str(number)


@pytest.mark.parametrize("number", [0, 17, 4294967295])
def test_u_formats_unsigned(number):
    assert int(format_string("%u", number)) == number


def test_u_wraps_negative():
    assert format_string("%u", -1) == format_string("%u", 4294967295)


@pytest.mark.parametrize("number", [0, 26, 3735928559])
def test_x_and_upper_x(number):
    assert format_string("%x", number) == to_hex(number)
    assert format_string("%X", number) == to_hex(number, True)


def test_c_accepts_char_and_code():
    assert format_string("%c", "z") == "z"
    assert format_string("%c", ord("z")) == "z"


def test_s_formats_string_and_null():
    assert format_string("<%s>", "abc") == "<abc>"
    assert format_string("%s", None) == "(null)"


def test_p_formats_pointer():
    result = format_string("%p", 48879)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 48879


def test_p_of_null_pointer():
    assert format_string("%p", 0) == "(nil)"


def test_percent_escape():
    assert format_string("100%%") == "100%"


def test_unknown_conversion_is_dropped_and_takes_no_argument():
    assert format_string("a%qb%d", 5) == "ab" + int_to_str(5)


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_string("%d %d", 1)


def test_several_conversions_in_order():
    assert format_string("%s=%d", "n", 12) == "n=" + int_to_str(12)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s-%d", "ab", -3, stream=stream)
    assert stream.getvalue() == format_string("%s-%d", "ab", -3)
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("ra\n")
    assert capsys.readouterr().out == "ra\n"
    assert count == len("ra\n")


def test_put_char():
    stream = io.StringIO()
    assert put_char("q", stream) == 1
    assert stream.getvalue() == "q"


def test_put_char_rejects_long_text():
    with pytest.raises(ValueError):
        put_char("qq", io.StringIO())


def test_put_str_and_null():
    stream = io.StringIO()
    assert put_str("abc", stream) == len("abc")
    assert put_str(None, stream) == 6
    assert stream.getvalue() == "abc(null)"


def test_put_line_appends_newline():
    stream = io.StringIO()
    count = put_line("Error", stream)
    assert stream.getvalue() == "Error\n"
    assert count == len("Error\n")


@pytest.mark.parametrize("number", [0, -7, 2147483647, -2147483648])
def test_put_number(number):
    stream = io.StringIO()
    count = put_number(number, stream)
    assert stream.getvalue() == int_to_str(number)
    assert count == len(stream.getvalue())


def test_put_number_rejects_out_of_range():
    with pytest.raises(ValueError):
        put_number(2**31, io.StringIO())