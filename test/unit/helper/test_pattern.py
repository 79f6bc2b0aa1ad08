import pytest

import pin_manager.helper.pattern as mod


@pytest.mark.parametrize(
    "value,exp",
    [
        ("19901121", True),
        ("00000000", True),
        ("99999999", True),
        ("1990112", False),
        ("199011211", False),
        ("1990-1121", False),
        ("1990112a", False),
        ("19901121\n", False),
        ("", False),
        (None, False),
        (19901121, False),
    ],
)
def test10_date(value, exp):
    assert mod.is_date_format(value) is exp


@pytest.mark.parametrize(
    "value,exp",
    [
        ("19901121-8774", True),
        ("19901121+8774", True),
        ("19901121-0000", True),
        ("9011218774", False),
        ("901121-8774", False),
        ("901121+8774", False),
        ("199011218774", False),
        ("19901121 8774", False),
        ("19901121*8774", False),
        ("19901121-877", False),
        ("19901121-87745", False),
        (" 19901121-8774", False),
        ("19901121-8774\n", False),
        (None, False),
    ],
)
def test20_pin(value, exp):
    assert mod.is_pin_format(value) is exp
