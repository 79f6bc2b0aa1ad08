"""
Test generation of personal identity numbers
"""

import random
import time
from datetime import datetime, timezone

import pytest

from pin_manager.config import PinConfig
from pin_manager.helper.exception import PinFormatError
from pin_manager.api import validate, is_valid
import pin_manager.api.generator as mod


TEST_DATES = ["19901121", "19840707", "20000229", "00000000", "99999999"]


def test10_from_date():
    for d in TEST_DATES:
        pin = mod.generate_from_date(d)
        assert len(pin) == 13
        assert pin[:8] == d
        assert pin[8] == "-"
        assert 100 <= int(pin[9:12]) <= 999
        assert validate(pin) == pin


@pytest.mark.parametrize("date", ["1990112", "199011211", "1990-11-21", "abcdefgh", ""])
def test20_from_date_invalid(date):
    with pytest.raises(PinFormatError) as e:
        mod.generate_from_date(date)
    assert "YYYYMMDD" in str(e.value)


def test30_seeded():
    """
    The same seed produces the same numbers
    """
    got1 = [mod.generate(rng=random.Random(42)) for _ in range(3)]
    got2 = [mod.generate(rng=random.Random(42)) for _ in range(3)]
    assert got1 == got2

    rng1, rng2 = random.Random(7), random.Random(7)
    for d in TEST_DATES:
        assert mod.generate_from_date(d, rng1) == mod.generate_from_date(d, rng2)


def test40_generate():
    rng = random.Random(1)
    for _ in range(200):
        assert is_valid(mod.generate(rng))
    for _ in range(20):
        assert is_valid(mod.generate())


def test50_random_date():
    today = datetime.now(timezone.utc).strftime("%Y%m%d")
    rng = random.Random(3)
    for _ in range(200):
        d = mod.random_date(rng)
        assert len(d) == 8 and d.isdigit()
        assert "19700101" <= d <= today


def test60_config():
    config = PinConfig(serial_min=123, serial_max=123)
    assert mod.generate_from_date("19840707", config=config) == "19840707-1235"

    config = PinConfig(serial_min=123, serial_max=123, separator="+")
    pin = mod.generate_from_date("19840707", config=config)
    assert pin == "19840707+1235"
    assert is_valid(pin)


def test61_config_min_timestamp():
    ts = int(datetime(2020, 1, 1, tzinfo=timezone.utc).timestamp())
    config = PinConfig(min_timestamp=ts)
    rng = random.Random(11)
    for _ in range(50):
        pin = mod.generate(rng, config)
        assert pin[:8] >= "20200101"
        assert is_valid(pin)


def test62_config_recent_timestamp():
    """
    A minimum timestamp right at the current moment still produces a
    valid number dated today
    """
    config = PinConfig(min_timestamp=int(time.time()))
    pin = mod.generate(random.Random(5), config)
    assert is_valid(pin)
    start = datetime.fromtimestamp(config.min_timestamp, timezone.utc)
    assert pin[:8] >= start.strftime("%Y%m%d")
