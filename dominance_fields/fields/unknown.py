"""
Missing-value evaluations.

Two published treatments of missing values under dominance:

- mv2 treats a missing value as consistent with everything: it is at least
  as good as, at most as good as and equal to any simple field, in both
  directions.
- mv1.5 lets a missing value dominate any simple field, but a known field is
  never at least as good as (nor at most as good as, nor equal to) a missing
  one. Strict comparison follows the same split: forward gives 0, reverse
  raises UncomparableError.

Both classes are stateless; get_instance() returns a shared instance.
"""

from __future__ import annotations

from typing import ClassVar

from ..core.errors import InvalidTypeError, UncomparableError
from ..core.precondition import not_null
from ..core.ternary import TernaryLogicValue
from .enums import MissingValueType
from .field import EvaluationField, KnownSimpleField, UnknownSimpleField


def _known(other: KnownSimpleField) -> KnownSimpleField:
    return not_null(other, "Field is null.")


class UnknownSimpleFieldMV15(UnknownSimpleField):
    """Missing value of type 1.5 (asymmetric)."""

    missing_value_type: ClassVar[MissingValueType] = MissingValueType.MV15

    @classmethod
    def get_instance(cls) -> UnknownSimpleFieldMV15:
        return MV15

    def _forward(self, other: EvaluationField) -> TernaryLogicValue:
        if self.can_be_compared_with(other):
            return TernaryLogicValue.TRUE
        return TernaryLogicValue.UNCOMPARABLE

    def is_at_least_as_good_as(self, other: EvaluationField) -> TernaryLogicValue:
        return self._forward(other)

    def is_at_most_as_good_as(self, other: EvaluationField) -> TernaryLogicValue:
        return self._forward(other)

    def is_equal_to(self, other: EvaluationField) -> TernaryLogicValue:
        return self._forward(other)

    def compare_strict(self, other: EvaluationField) -> int:
        if self.can_be_compared_with(other):
            return 0
        raise UncomparableError("Other field cannot be compared with this missing value.")

    def reverse_is_at_least_as_good_as(self, other: KnownSimpleField) -> TernaryLogicValue:
        _known(other)
        return TernaryLogicValue.FALSE

    def reverse_is_at_most_as_good_as(self, other: KnownSimpleField) -> TernaryLogicValue:
        _known(other)
        return TernaryLogicValue.FALSE

    def reverse_is_equal_to(self, other: KnownSimpleField) -> TernaryLogicValue:
        _known(other)
        return TernaryLogicValue.FALSE

    def reverse_compare_strict(self, other: KnownSimpleField) -> int:
        _known(other)
        raise UncomparableError("A known field cannot be compared with a missing value of type 1.5.")

    def equal_when_compared_to_any_evaluation(self) -> bool:
        return True

    def equal_when_reverse_compared_to_any_evaluation(self) -> bool:
        return False

    @property
    def type_descriptor(self) -> str:
        return "mv1.5"


class UnknownSimpleFieldMV2(UnknownSimpleField):
    """Missing value of type 2 (symmetric)."""

    missing_value_type: ClassVar[MissingValueType] = MissingValueType.MV2

    @classmethod
    def get_instance(cls) -> UnknownSimpleFieldMV2:
        return MV2

    def _forward(self, other: EvaluationField) -> TernaryLogicValue:
        if self.can_be_compared_with(other):
            return TernaryLogicValue.TRUE
        return TernaryLogicValue.UNCOMPARABLE

    def is_at_least_as_good_as(self, other: EvaluationField) -> TernaryLogicValue:
        return self._forward(other)

    def is_at_most_as_good_as(self, other: EvaluationField) -> TernaryLogicValue:
        return self._forward(other)

    def is_equal_to(self, other: EvaluationField) -> TernaryLogicValue:
        return self._forward(other)

    def compare_strict(self, other: EvaluationField) -> int:
        if self.can_be_compared_with(other):
            return 0
        raise UncomparableError("Other field is not a simple field.")

    def reverse_is_at_least_as_good_as(self, other: KnownSimpleField) -> TernaryLogicValue:
        return self._forward(_known(other))

    def reverse_is_at_most_as_good_as(self, other: KnownSimpleField) -> TernaryLogicValue:
        return self._forward(_known(other))

    def reverse_is_equal_to(self, other: KnownSimpleField) -> TernaryLogicValue:
        return self._forward(_known(other))

    def reverse_compare_strict(self, other: KnownSimpleField) -> int:
        _known(other)
        return 0

    def equal_when_compared_to_any_evaluation(self) -> bool:
        return True

    def equal_when_reverse_compared_to_any_evaluation(self) -> bool:
        return True

    @property
    def type_descriptor(self) -> str:
        return "mv2"


MV15 = UnknownSimpleFieldMV15()
MV2 = UnknownSimpleFieldMV2()


def get_missing_value(missing_value_type: MissingValueType) -> UnknownSimpleField:
    """Shared missing-value instance for a missing value type."""
    not_null(missing_value_type, "Missing value type is null.")
    if missing_value_type is MissingValueType.MV15:
        return UnknownSimpleFieldMV15.get_instance()
    if missing_value_type is MissingValueType.MV2:
        return UnknownSimpleFieldMV2.get_instance()
    raise InvalidTypeError(f"Unsupported missing value type: {missing_value_type}.")
