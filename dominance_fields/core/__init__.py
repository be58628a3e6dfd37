"""
Core building blocks: three-valued logic, strict comparison results and errors.
"""

from .comparison import ComparisonResult
from .errors import (
    FieldError,
    FieldParseError,
    InvalidTypeError,
    InvalidValueError,
    NullArgumentError,
    UncomparableError,
)
from .ternary import TernaryLogicValue

__all__ = [
    "ComparisonResult",
    "FieldError",
    "FieldParseError",
    "InvalidTypeError",
    "InvalidValueError",
    "NullArgumentError",
    "TernaryLogicValue",
    "UncomparableError",
]
