"""
Validation of personal identity numbers, and queries on valid ones.

Each check comes in two flavours: the validate*() functions return the
number unchanged or raise an exception describing why it was rejected, while
the is_*() functions just return a boolean
"""

import logging
from datetime import date
from typing import Callable

from ..sexenum import Sex
from ..helper.pattern import is_pin_format
from ..helper.checksum import compute_check_digit
from ..helper.exception import (
    PinManagerException,
    PinFormatError,
    PinChecksumError,
    PinWrongSexError,
)

logger = logging.getLogger(__name__)


# Position of the separator in a personal identity number
_SEP_POS = 8


def validate(pin: str) -> str:
    """
    Check the format and the check digit of a personal identity number
    """
    if not is_pin_format(pin):
        raise PinFormatError(
            "{} is not a valid personal identity number, expects format YYYYMMDD-NNNN",
            pin,
        )

    # Remove the century and the separator: YYMMDDNNNC
    digits = pin[2:_SEP_POS] + pin[_SEP_POS + 1 :]

    if compute_check_digit(digits[:9]) != digits[9]:
        logger.debug(f"check digit mismatch for {pin}")
        raise PinChecksumError(
            "{} is not a valid personal identity number (wrong check digit)", pin
        )
    return pin


def validate_male(pin: str) -> str:
    """
    Check that a personal identity number is valid and belongs to a man
    """
    validate(pin)
    # The last birth number digit: odd for men
    if int(pin[-2]) % 2 == 0:
        raise PinWrongSexError("{} is not a valid male personal identity number", pin)
    return pin


def validate_female(pin: str) -> str:
    """
    Check that a personal identity number is valid and belongs to a woman
    """
    validate(pin)
    try:
        validate_male(pin)
    except PinWrongSexError:
        return pin
    raise PinWrongSexError("{} is not a valid female personal identity number", pin)


def _check(func: Callable, pin: str) -> bool:
    try:
        func(pin)
        return True
    except PinManagerException:
        return False


def is_valid(pin: str) -> bool:
    """
    Return True if the personal identity number is valid
    """
    return _check(validate, pin)


def is_male(pin: str) -> bool:
    """
    Return True if the personal identity number is valid and belongs to a man
    """
    return _check(validate_male, pin)


def is_female(pin: str) -> bool:
    """
    Return True if the personal identity number is valid and belongs to a woman
    """
    return _check(validate_female, pin)


def get_sex(pin: str) -> Sex:
    """
    Return the sex encoded in a valid personal identity number
    """
    validate(pin)
    return Sex.MALE if int(pin[-2]) % 2 else Sex.FEMALE


def is_centenarian(pin: str) -> bool:
    """
    Return True if a valid personal identity number uses the '+' separator,
    which marks people aged 100 or more
    """
    validate(pin)
    return pin[_SEP_POS] == "+"


def get_birth_date(pin: str) -> date:
    """
    Return the birth date of a valid personal identity number. Validation
    only checks that the date part has 8 digits, so this can still fail if
    those digits are not a calendar date
    """
    validate(pin)
    try:
        return date(int(pin[0:4]), int(pin[4:6]), int(pin[6:8]))
    except ValueError as e:
        raise PinFormatError("{} does not contain a valid birth date: {}", pin, e) from e
