"""Two-stack integer sorting with a restricted instruction set, plus small string, byte, list and output helpers."""

__version__ = "0.1.0"