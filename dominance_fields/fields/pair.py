"""
Pair (interval) evaluation.

A PairField represents the interval [first, second] built from two simple
fields of the same kind. Pair A is at least as good as pair B when A.first
is at least as good as B.first and A.second is at most as good as B.second.

The strict order combines the member comparisons: both zero gives 0, a
non-negative first with a non-positive second gives 1, the mirror case
gives -1, anything else raises UncomparableError. Dominance answers
UNCOMPARABLE exactly when the strict order raises.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from ..core.errors import InvalidTypeError, NullArgumentError, UncomparableError
from ..core.ternary import TernaryLogicValue
from .field import EvaluationField, KnownSimpleField, SimpleField, UnknownSimpleField, require_field


class PairField(EvaluationField):
    """Interval evaluation with two simple members."""

    first: SimpleField = Field(..., description="Lower bound of the interval")
    second: SimpleField = Field(..., description="Upper bound of the interval")

    @model_validator(mode="before")
    @classmethod
    def require_members(cls, data: Any) -> Any:
        if isinstance(data, dict):
            if data.get("first") is None:
                raise NullArgumentError("The first value in the pair is null.")
            if data.get("second") is None:
                raise NullArgumentError("The second value in the pair is null.")
        return data

    @model_validator(mode="after")
    def check_member_kinds(self) -> PairField:
        first, second = self.first, self.second
        if isinstance(first, KnownSimpleField) and isinstance(second, KnownSimpleField):
            if not first.is_comparable_with(second):
                raise InvalidTypeError(
                    f"Types of fields in a pair have to be the same, got "
                    f"{first.type_descriptor} and {second.type_descriptor}."
                )
        return self

    def _has_definite_order(self, other: EvaluationField) -> bool:
        try:
            self.compare_strict(other)
        except UncomparableError:
            return False
        return True

    def is_at_least_as_good_as(self, other: EvaluationField) -> TernaryLogicValue:
        if not self._has_definite_order(other):
            return TernaryLogicValue.UNCOMPARABLE
        return TernaryLogicValue.from_bool(
            self.first.is_at_least_as_good_as(other.first) is TernaryLogicValue.TRUE
            and self.second.is_at_most_as_good_as(other.second) is TernaryLogicValue.TRUE
        )

    def is_at_most_as_good_as(self, other: EvaluationField) -> TernaryLogicValue:
        if not self._has_definite_order(other):
            return TernaryLogicValue.UNCOMPARABLE
        return TernaryLogicValue.from_bool(
            self.first.is_at_most_as_good_as(other.first) is TernaryLogicValue.TRUE
            and self.second.is_at_least_as_good_as(other.second) is TernaryLogicValue.TRUE
        )

    def is_equal_to(self, other: EvaluationField) -> TernaryLogicValue:
        if not isinstance(require_field(other), PairField):
            return TernaryLogicValue.UNCOMPARABLE
        results = (self.first.is_equal_to(other.first), self.second.is_equal_to(other.second))
        if all(result is TernaryLogicValue.TRUE for result in results):
            return TernaryLogicValue.TRUE
        if TernaryLogicValue.UNCOMPARABLE in results:
            return TernaryLogicValue.UNCOMPARABLE
        return TernaryLogicValue.FALSE

    def compare_strict(self, other: EvaluationField) -> int:
        if not isinstance(require_field(other), PairField):
            raise UncomparableError("This pair field cannot be compared with a non-pair field.")
        first = self.first.compare_strict(other.first)
        second = self.second.compare_strict(other.second)
        if first == 0 and second == 0:
            return 0
        if first >= 0 and second <= 0:
            return 1
        if first <= 0 and second >= 0:
            return -1
        raise UncomparableError(f"Pair {self} cannot be compared with pair {other}.")

    def is_unknown(self) -> bool:
        return isinstance(self.first, UnknownSimpleField) and isinstance(
            self.second, UnknownSimpleField
        )

    @property
    def type_descriptor(self) -> str:
        return f"pair({self.first.type_descriptor};{self.second.type_descriptor})"

    def get_unknown_evaluation(self, missing_value: UnknownSimpleField) -> PairField:
        member = self.first.get_unknown_evaluation(missing_value)
        return PairField(first=member, second=member)

    def __str__(self) -> str:
        return f"({self.first},{self.second})"
