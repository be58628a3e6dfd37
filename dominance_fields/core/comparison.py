"""
Strict (total-order) comparison support.
"""

from enum import Enum


class ComparisonResult(str, Enum):
    """Outcome of a strict comparison expressed as a value instead of a signal."""

    GREATER_THAN = "greater_than"
    SMALLER_THAN = "smaller_than"
    EQUAL = "equal"
    UNCOMPARABLE = "uncomparable"

    @classmethod
    def from_int(cls, result: int) -> "ComparisonResult":
        if result > 0:
            return cls.GREATER_THAN
        if result < 0:
            return cls.SMALLER_THAN
        return cls.EQUAL


def sign(left, right) -> int:
    """Three-way compare two plain values: -1, 0 or 1."""
    return (left > right) - (left < right)
