"""
Evaluation field protocol.

Every evaluation answers four ternary questions about another evaluation:
is_at_least_as_good_as, is_at_most_as_good_as, is_equal_to and
is_different_than (always the negation of is_equal_to). Evaluations also
offer compare_strict, a total order within one domain that raises
UncomparableError exactly where it has no answer.

Evaluations form a closed family:
- KnownSimpleField: integer, real and enumeration values tagged with a preference type
- UnknownSimpleField: the mv1.5 and mv2 missing values
- PairField: an interval built from two simple fields

A known field compared with a missing one hands the question over to the
missing field's reverse_* method, passing itself as the argument. The
reverse result is not the forward result with operands swapped; mv1.5
depends on this.
"""

from __future__ import annotations

import operator
from abc import abstractmethod
from typing import Any, Callable, ClassVar, Dict

from pydantic import BaseModel, ConfigDict, Field

from ..core.comparison import ComparisonResult, sign
from ..core.errors import InvalidTypeError, UncomparableError
from ..core.precondition import not_null
from ..core.ternary import TernaryLogicValue
from .enums import PreferenceType, ValueKind

# Dominance predicates keyed by preference direction. NONE carries no order,
# so both directions collapse to equality.
AT_LEAST: Dict[PreferenceType, Callable[[Any, Any], bool]] = {
    PreferenceType.GAIN: operator.ge,
    PreferenceType.COST: operator.le,
    PreferenceType.NONE: operator.eq,
}
AT_MOST: Dict[PreferenceType, Callable[[Any, Any], bool]] = {
    PreferenceType.GAIN: operator.le,
    PreferenceType.COST: operator.ge,
    PreferenceType.NONE: operator.eq,
}


def require_field(other: Any) -> Any:
    return not_null(other, "Compared field is null.")


class EvaluationField(BaseModel):
    """Abstract evaluation of an object on an attribute. Immutable."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @abstractmethod
    def is_at_least_as_good_as(self, other: EvaluationField) -> TernaryLogicValue:
        """Whether this evaluation is at least as good as other."""

    @abstractmethod
    def is_at_most_as_good_as(self, other: EvaluationField) -> TernaryLogicValue:
        """Whether this evaluation is at most as good as other."""

    @abstractmethod
    def is_equal_to(self, other: EvaluationField) -> TernaryLogicValue:
        """Whether this evaluation is equal to other."""

    def is_different_than(self, other: EvaluationField) -> TernaryLogicValue:
        return self.is_equal_to(other).negate()

    @abstractmethod
    def compare_strict(self, other: EvaluationField) -> int:
        """
        Compare within one domain.

        Returns:
            Negative, zero or positive number

        Raises:
            UncomparableError: If the two evaluations have no definite order
            NullArgumentError: If other is None
        """

    def compare(self, other: EvaluationField) -> ComparisonResult:
        """compare_strict with the uncomparable signal turned into a value."""
        try:
            result = self.compare_strict(other)
        except UncomparableError:
            return ComparisonResult.UNCOMPARABLE
        return ComparisonResult.from_int(result)

    @abstractmethod
    def is_unknown(self) -> bool:
        """Whether this evaluation represents a missing value."""

    @property
    @abstractmethod
    def type_descriptor(self) -> str:
        """Short textual name of the concrete kind, e.g. gainInt."""

    @abstractmethod
    def get_unknown_evaluation(self, missing_value: UnknownSimpleField) -> EvaluationField:
        """Missing counterpart of this evaluation built from missing_value."""


class SimpleField(EvaluationField):
    """Evaluation holding a single value, known or missing."""

    def get_unknown_evaluation(self, missing_value: UnknownSimpleField) -> EvaluationField:
        if not isinstance(not_null(missing_value, "Missing value type is null."), UnknownSimpleField):
            raise InvalidTypeError(
                f"Expected a missing value, got {type(missing_value).__name__}."
            )
        return missing_value


class KnownSimpleField(SimpleField):
    """
    Known value tagged with a preference type.

    Concrete kinds only supply their value kind, descriptor suffix and
    order_key; the comparison directions live in the AT_LEAST/AT_MOST tables.
    Two known fields are comparable when they share concrete kind and
    preference type.
    """

    kind: ClassVar[ValueKind]
    descriptor_suffix: ClassVar[str]

    preference_type: PreferenceType = Field(..., description="Direction of preference")

    @property
    @abstractmethod
    def order_key(self) -> Any:
        """Plain value ordered by the dominance predicates."""

    @abstractmethod
    def clone(self, preference_type: PreferenceType) -> KnownSimpleField:
        """Same value under another preference type."""

    def is_comparable_with(self, other: KnownSimpleField) -> bool:
        return type(other) is type(self) and other.preference_type is self.preference_type

    def _compare_known(
        self, other: EvaluationField, predicate: Dict[PreferenceType, Callable[[Any, Any], bool]]
    ) -> TernaryLogicValue:
        if isinstance(other, KnownSimpleField) and self.is_comparable_with(other):
            return TernaryLogicValue.from_bool(
                predicate[self.preference_type](self.order_key, other.order_key)
            )
        return TernaryLogicValue.UNCOMPARABLE

    def is_at_least_as_good_as(self, other: EvaluationField) -> TernaryLogicValue:
        if isinstance(require_field(other), UnknownSimpleField):
            return other.reverse_is_at_least_as_good_as(self)
        return self._compare_known(other, AT_LEAST)

    def is_at_most_as_good_as(self, other: EvaluationField) -> TernaryLogicValue:
        if isinstance(require_field(other), UnknownSimpleField):
            return other.reverse_is_at_most_as_good_as(self)
        return self._compare_known(other, AT_MOST)

    def is_equal_to(self, other: EvaluationField) -> TernaryLogicValue:
        if isinstance(require_field(other), UnknownSimpleField):
            return other.reverse_is_equal_to(self)
        if isinstance(other, KnownSimpleField) and self.is_comparable_with(other):
            return TernaryLogicValue.from_bool(self.order_key == other.order_key)
        return TernaryLogicValue.UNCOMPARABLE

    def compare_strict(self, other: EvaluationField) -> int:
        if isinstance(require_field(other), UnknownSimpleField):
            return other.reverse_compare_strict(self)
        if isinstance(other, KnownSimpleField) and self.is_comparable_with(other):
            return sign(self.order_key, other.order_key)
        raise UncomparableError(
            f"{self.type_descriptor} field {self} cannot be compared with {other!r}."
        )

    def is_unknown(self) -> bool:
        return False

    @property
    def type_descriptor(self) -> str:
        return f"{self.preference_type.value}{self.descriptor_suffix}"


class UnknownSimpleField(SimpleField):
    """
    Missing value.

    Missing values carry no data, so every instance of a class is
    interchangeable and compares equal to every other one.
    """

    def is_unknown(self) -> bool:
        return True

    def can_be_compared_with(self, other: EvaluationField) -> bool:
        """Missing values are comparable with simple fields only."""
        return isinstance(require_field(other), SimpleField)

    @abstractmethod
    def reverse_is_at_least_as_good_as(self, other: KnownSimpleField) -> TernaryLogicValue:
        """Answer other.is_at_least_as_good_as(self)."""

    @abstractmethod
    def reverse_is_at_most_as_good_as(self, other: KnownSimpleField) -> TernaryLogicValue:
        """Answer other.is_at_most_as_good_as(self)."""

    @abstractmethod
    def reverse_is_equal_to(self, other: KnownSimpleField) -> TernaryLogicValue:
        """Answer other.is_equal_to(self)."""

    @abstractmethod
    def reverse_compare_strict(self, other: KnownSimpleField) -> int:
        """Answer other.compare_strict(self)."""

    @abstractmethod
    def equal_when_compared_to_any_evaluation(self) -> bool:
        """Whether forward equality holds against any simple field."""

    @abstractmethod
    def equal_when_reverse_compared_to_any_evaluation(self) -> bool:
        """Whether reverse equality holds against any known field."""

    def __str__(self) -> str:
        return "?"
