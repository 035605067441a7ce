"""Conversion of binary signals to 4B3T and FOMOT ternary line codes, with an interactive terminal menu."""

__version__ = "1.0.0"