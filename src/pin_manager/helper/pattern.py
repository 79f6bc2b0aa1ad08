"""
Fixed-width format checks for birth dates and personal identity numbers
"""

import regex


# A birth date: YYYYMMDD (only the digit count is checked)
_DATE_PATTERN = r"[0-9]{8}"

# A full personal identity number: YYYYMMDD, separator, birth number & check digit
_PIN_PATTERN = r"[0-9]{8} [-+] [0-9]{4}"

_REGEX_DATE = regex.compile(_DATE_PATTERN, flags=regex.X | regex.VERSION0)
_REGEX_PIN = regex.compile(_PIN_PATTERN, flags=regex.X | regex.VERSION0)


def is_date_format(value: str) -> bool:
    """
    Check that a string is exactly 8 ASCII digits
    """
    return isinstance(value, str) and _REGEX_DATE.fullmatch(value) is not None


def is_pin_format(value: str) -> bool:
    """
    Check that a string has the shape YYYYMMDD-NNNN (or YYYYMMDD+NNNN)
    """
    return isinstance(value, str) and _REGEX_PIN.fullmatch(value) is not None
