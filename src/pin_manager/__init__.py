VERSION = "0.1.0"

from .sexenum import Sex
from .api import (
    generate,
    generate_from_date,
    validate,
    validate_male,
    validate_female,
    is_valid,
    is_male,
    is_female,
    get_sex,
    is_centenarian,
    get_birth_date,
)
from .helper.checksum import compute_check_digit
