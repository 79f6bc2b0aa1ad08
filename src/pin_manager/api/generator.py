"""
Generation of random (but valid) personal identity numbers
"""

import logging
import random
import time
from datetime import datetime, timezone

from ..config import PinConfig, DEFAULT_CONFIG
from ..helper.pattern import is_date_format
from ..helper.checksum import compute_check_digit
from ..helper.exception import PinFormatError

logger = logging.getLogger(__name__)


def _get_rng(rng: random.Random = None) -> random.Random:
    """
    Use the given random generator, or create a new one seeded from the
    system entropy source
    """
    return rng if rng is not None else random.Random()


def random_date(rng: random.Random = None, config: PinConfig = None) -> str:
    """
    Return a random date, formatted as YYYYMMDD, between the configured
    minimum timestamp and the current moment
    """
    if config is None:
        config = DEFAULT_CONFIG
    rng = _get_rng(rng)
    now = int(time.time())
    ts = rng.randint(int(config.min_timestamp), now)
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y%m%d")


def generate_from_date(
    date: str, rng: random.Random = None, config: PinConfig = None
) -> str:
    """
    Generate a personal identity number for the given birth date (YYYYMMDD),
    with a random birth number
    """
    if not is_date_format(date):
        raise PinFormatError("{} is not a valid date, expects format YYYYMMDD", date)
    if config is None:
        config = DEFAULT_CONFIG
    rng = _get_rng(rng)

    birth_number = str(rng.randint(config.serial_min, config.serial_max))

    # The check digit does not use the century: 1984 counts as 84
    check = compute_check_digit(date[2:] + birth_number)

    pin = f"{date}{config.separator}{birth_number}{check}"
    logger.debug(f"generated {pin}")
    return pin


def generate(rng: random.Random = None, config: PinConfig = None) -> str:
    """
    Generate a personal identity number for a random birth date
    """
    rng = _get_rng(rng)
    return generate_from_date(random_date(rng, config), rng, config)
