"""
Canonical enums for evaluation fields and the attributes that own them.
"""

from enum import Enum


class PreferenceType(str, Enum):
    """Direction of preference of an attribute."""

    GAIN = "gain"  # higher is better
    COST = "cost"  # lower is better
    NONE = "none"  # no order, only equality


class ValueKind(str, Enum):
    """Primitive kind of a simple evaluation."""

    INTEGER = "integer"
    REAL = "real"
    ENUMERATION = "enumeration"


class MissingValueType(str, Enum):
    """Formal treatment of a missing evaluation."""

    MV15 = "mv1.5"
    MV2 = "mv2"


class AttributeType(str, Enum):
    """Role of an attribute in a decision table."""

    CONDITION = "condition"
    DECISION = "decision"
    DESCRIPTION = "description"


class CachingType(str, Enum):
    """How the evaluation parser reuses field instances."""

    NONE = "none"
    VOLATILE = "volatile"
    PERSISTENT = "persistent"
