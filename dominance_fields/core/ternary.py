"""
Three-valued logic used by every dominance comparison.
"""

from enum import Enum


class TernaryLogicValue(str, Enum):
    """Result of a comparison that is not guaranteed to be total.

    UNCOMPARABLE is an ordinary outcome, not an error. Every member is truthy,
    so test results with ``is TernaryLogicValue.TRUE``.
    """

    TRUE = "true"
    FALSE = "false"
    UNCOMPARABLE = "uncomparable"

    @classmethod
    def from_bool(cls, flag: bool) -> "TernaryLogicValue":
        return cls.TRUE if flag else cls.FALSE

    def negate(self) -> "TernaryLogicValue":
        """Swap TRUE and FALSE; UNCOMPARABLE stays UNCOMPARABLE."""
        if self is TernaryLogicValue.TRUE:
            return TernaryLogicValue.FALSE
        if self is TernaryLogicValue.FALSE:
            return TernaryLogicValue.TRUE
        return TernaryLogicValue.UNCOMPARABLE
