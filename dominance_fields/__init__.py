"""
dominance-fields

Evaluation fields of a dominance-based rough set engine: typed values with a
preference direction, missing values and intervals, compared in three-valued
logic.
"""

import importlib.metadata

__version__ = importlib.metadata.version("dominance-fields")

from .core import (
    ComparisonResult,
    FieldError,
    FieldParseError,
    InvalidTypeError,
    InvalidValueError,
    NullArgumentError,
    TernaryLogicValue,
    UncomparableError,
)
from .data import EvaluationAttribute, EvaluationParser
from .fields import (
    ElementList,
    EnumerationField,
    EvaluationField,
    FieldCache,
    IntegerField,
    MissingValueType,
    PairField,
    PreferenceType,
    RealField,
    UnknownSimpleFieldMV2,
    UnknownSimpleFieldMV15,
    ValueKind,
)

__all__ = [
    "ComparisonResult",
    "ElementList",
    "EnumerationField",
    "EvaluationAttribute",
    "EvaluationField",
    "EvaluationParser",
    "FieldCache",
    "FieldError",
    "FieldParseError",
    "IntegerField",
    "InvalidTypeError",
    "InvalidValueError",
    "MissingValueType",
    "NullArgumentError",
    "PairField",
    "PreferenceType",
    "RealField",
    "TernaryLogicValue",
    "UncomparableError",
    "UnknownSimpleFieldMV15",
    "UnknownSimpleFieldMV2",
    "ValueKind",
]
