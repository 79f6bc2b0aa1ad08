import time
from logging import getLogger

from .helper.exception import InvArgException


logger = getLogger(__name__)


SEPARATORS = ("-", "+")


class PinConfig:
    """Settings used when generating personal identity numbers

    Parameters:

        - min_timestamp: 0 (UNIX time of the earliest random birth date;
          the latest one is always the current moment, so this cannot be
          in the future)
        - serial_min: 100
        - serial_max: 999 (birth numbers are drawn from the closed range)
        - separator: "-" (use "+" for people aged 100 or more)

    """

    def __init__(self, **kwargs):
        self.min_timestamp = kwargs.pop("min_timestamp", 0)
        self.serial_min = kwargs.pop("serial_min", 100)
        self.serial_max = kwargs.pop("serial_max", 999)
        self.separator = kwargs.pop("separator", "-")

        for key, value in kwargs.items():
            logger.error(f"Can't set {key} with value {value} for {self}")
            raise InvArgException("unknown configuration option: {}", key)

        self.check()

    def check(self):
        """
        Verify that the settings can produce valid identity numbers
        """
        if self.separator not in SEPARATORS:
            raise InvArgException("invalid separator: {!r}", self.separator)
        if not 100 <= self.serial_min <= self.serial_max <= 999:
            raise InvArgException(
                "invalid birth number range: [{}, {}]", self.serial_min, self.serial_max
            )
        if not 0 <= self.min_timestamp <= time.time():
            raise InvArgException(
                "invalid minimum timestamp: {} (must be between 0 and now)",
                self.min_timestamp,
            )

    def __repr__(self) -> str:
        return (
            f"<PinConfig serial=[{self.serial_min}, {self.serial_max}] "
            f"separator={self.separator!r} min_timestamp={self.min_timestamp}>"
        )


DEFAULT_CONFIG = PinConfig()
