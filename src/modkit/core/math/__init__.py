"""
Core math modules для ModKit

Числовые хелперы: степень, знак, цифры, округление, углы, единицы времени.
"""

# Numeric
from modkit.core.math.numeric import (
    SIGN_EPS_DEFAULT,
    bool_to_int,
    is_negative,
    is_positive,
    is_zero,
    raised,
    repeat,
    times,
    to_bool,
    to_string,
    toggled,
)

# Integers
from modkit.core.math.integers import (
    digits as integer_digits,
    is_even,
    is_odd,
    to_double,
)

# Floats
from modkit.core.math.floats import (
    TIME_UNIT_FACTORS,
    RoundingRule,
    TimeUnit,
    ceil,
    converted_time,
    degrees_to_radians,
    digit_count,
    digits as float_digits,
    floor,
    radians_to_degrees,
    rounded,
    to_int,
)

__all__ = [
    # Numeric — Constants
    "SIGN_EPS_DEFAULT",
    # Numeric — Functions
    "bool_to_int",
    "is_negative",
    "is_positive",
    "is_zero",
    "raised",
    "repeat",
    "times",
    "to_bool",
    "to_string",
    "toggled",
    # Integers
    "integer_digits",
    "is_even",
    "is_odd",
    "to_double",
    # Floats — Constants
    "TIME_UNIT_FACTORS",
    # Floats — Types
    "RoundingRule",
    "TimeUnit",
    # Floats — Functions
    "ceil",
    "converted_time",
    "degrees_to_radians",
    "digit_count",
    "float_digits",
    "floor",
    "radians_to_degrees",
    "rounded",
    "to_int",
]
