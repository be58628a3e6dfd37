"""
Evaluation fields: the value layer compared by dominance.
"""

from .caching import (
    EnumerationFieldCachingFactory,
    FieldCache,
    IntegerFieldCachingFactory,
    RealFieldCachingFactory,
)
from .element_list import ElementList
from .enums import AttributeType, CachingType, MissingValueType, PreferenceType, ValueKind
from .factories import (
    EnumerationFieldFactory,
    IntegerFieldFactory,
    PairFieldFactory,
    RealFieldFactory,
    UnknownFieldFactory,
    get_factory,
    get_unknown_factory,
)
from .field import EvaluationField, KnownSimpleField, SimpleField, UnknownSimpleField
from .known import EnumerationField, IntegerField, RealField
from .pair import PairField
from .unknown import UnknownSimpleFieldMV2, UnknownSimpleFieldMV15, get_missing_value

__all__ = [
    "AttributeType",
    "CachingType",
    "ElementList",
    "EnumerationField",
    "EnumerationFieldCachingFactory",
    "EnumerationFieldFactory",
    "EvaluationField",
    "FieldCache",
    "IntegerField",
    "IntegerFieldCachingFactory",
    "IntegerFieldFactory",
    "KnownSimpleField",
    "MissingValueType",
    "PairField",
    "PairFieldFactory",
    "PreferenceType",
    "RealField",
    "RealFieldCachingFactory",
    "RealFieldFactory",
    "SimpleField",
    "UnknownFieldFactory",
    "UnknownSimpleField",
    "UnknownSimpleFieldMV15",
    "UnknownSimpleFieldMV2",
    "ValueKind",
    "get_factory",
    "get_missing_value",
    "get_unknown_factory",
]
