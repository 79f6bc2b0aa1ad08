from .generator import generate, generate_from_date, random_date
from .validator import (
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
