"""
Check — проверки значений и индексов на попадание в диапазон

Возвращают типизированную ошибку OutOfRangeError вместо bool.
"""

# Errors
from src.core.check.errors import (
    CONTRACT_MAX_LESS_THAN_MIN_MSG,
    CONTRACT_NAN_BOUNDARY_MSG,
    OutOfRangeError,
    RangeContractViolation,
    is_out_of_range,
)

# Range Check
from src.core.check.range_check import (
    EMPTY_SEQUENCE_MSG,
    OUT_OF_RANGE_MSG,
    SupportsLessThan,
    check_in_range,
    check_index,
    require_in_range,
    require_index,
    validate_bounds,
)

# Bounds
from src.core.check.bounds import InclusiveRange

__all__ = [
    # Errors — Constants
    "CONTRACT_MAX_LESS_THAN_MIN_MSG",
    "CONTRACT_NAN_BOUNDARY_MSG",
    # Errors — Exceptions
    "OutOfRangeError",
    "RangeContractViolation",
    # Errors — Functions
    "is_out_of_range",
    # Range Check — Constants
    "EMPTY_SEQUENCE_MSG",
    "OUT_OF_RANGE_MSG",
    # Range Check — Types
    "SupportsLessThan",
    # Range Check — Functions
    "check_in_range",
    "check_index",
    "require_in_range",
    "require_index",
    "validate_bounds",
    # Bounds — Types
    "InclusiveRange",
]
