"""Constants used across the term-markup package."""

LINE_TERMINATOR = "\n"
DECIMAL_POINT = "."
