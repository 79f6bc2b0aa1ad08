from .exception import (
    PinManagerException,
    InvArgException,
    PinFormatError,
    PinChecksumError,
    PinWrongSexError,
)
from .pattern import is_date_format, is_pin_format
from .checksum import compute_check_digit
