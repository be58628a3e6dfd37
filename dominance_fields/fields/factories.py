"""
Plain (non-caching) evaluation field factories.

Downstream code never builds fields directly: it asks the factory for the
attribute's value kind, either with a parsed value and a preference type or
with the text of a decision-table cell.

Factories:
- IntegerFieldFactory: literals matching [+-]?[0-9]+
- RealFieldFactory: anything float() accepts except NaN and digit separators
- EnumerationFieldFactory: labels of the attribute's element list
- UnknownFieldFactory: the shared missing value of one missing value type
- PairFieldFactory: "(first,second)" literals of composite attributes
"""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Tuple

from ..core.errors import FieldParseError, InvalidTypeError, InvalidValueError
from ..core.precondition import not_null
from .element_list import DEFAULT_INDEX, ElementList
from .enums import MissingValueType, PreferenceType, ValueKind
from .field import EvaluationField, KnownSimpleField, SimpleField, UnknownSimpleField
from .known import EnumerationField, IntegerField, RealField
from .pair import PairField
from .unknown import get_missing_value

if TYPE_CHECKING:
    from ..data.attribute import EvaluationAttribute

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


def _require_preference(preference_type: Optional[PreferenceType]) -> PreferenceType:
    return not_null(preference_type, "Attribute's preference type is null.")


class EvaluationFieldFactory(ABC):
    """Builds evaluation fields from decision-table text."""

    @abstractmethod
    def create_from_text(self, text: str, attribute: EvaluationAttribute) -> EvaluationField:
        """
        Parse text as an evaluation of attribute.

        Raises:
            InvalidTypeError: If the attribute's value kind does not fit this factory
            FieldParseError: If text is not a valid literal
        """


class KnownFieldFactory(EvaluationFieldFactory):
    """Factory for one primitive value kind."""

    kind: ValueKind

    def check_attribute(self, attribute: EvaluationAttribute) -> EvaluationAttribute:
        not_null(attribute, f"Attribute used to construct {self.kind.value} field is null.")
        if attribute.value_kind is not self.kind:
            raise InvalidTypeError(
                f"Attribute '{attribute.name}' holds {attribute.value_kind.value} values, "
                f"not {self.kind.value} values."
            )
        return attribute

    def parse_error(self, text: str, attribute: EvaluationAttribute, reason: str) -> FieldParseError:
        return FieldParseError(
            f"Incorrect value '{text}' of {self.kind.value} attribute {attribute.name}. {reason}",
            text=text,
            attribute_name=attribute.name,
        )

    @abstractmethod
    def parse_value(self, text: str, attribute: EvaluationAttribute) -> Any:
        """Parse text into the plain value stored by the field."""

    @abstractmethod
    def create_for_attribute(self, value: Any, attribute: EvaluationAttribute) -> KnownSimpleField:
        """Build a field holding a parsed value under the attribute's preference type."""

    def create_from_text(self, text: str, attribute: EvaluationAttribute) -> KnownSimpleField:
        return self.create_for_attribute(self.parse_value(text, attribute), attribute)


class IntegerFieldFactory(KnownFieldFactory):
    kind = ValueKind.INTEGER

    def check_value(self, value: int) -> int:
        not_null(value, "Value of constructed integer field is null.")
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidValueError(f"Integer field needs an int, got {value!r}.")
        return value

    def create(self, value: int, preference_type: PreferenceType) -> IntegerField:
        return IntegerField(
            value=self.check_value(value), preference_type=_require_preference(preference_type)
        )

    def parse_value(self, text: str, attribute: EvaluationAttribute) -> int:
        self.check_attribute(attribute)
        if text is None or not _INTEGER_LITERAL.fullmatch(text):
            raise self.parse_error(text, attribute, "Not an integer literal.")
        return int(text)

    def create_for_attribute(self, value: int, attribute: EvaluationAttribute) -> IntegerField:
        return self.create(value, attribute.preference_type)


class RealFieldFactory(KnownFieldFactory):
    kind = ValueKind.REAL

    def check_value(self, value: float) -> float:
        """Widen value to float; None, non-numbers and NaN are rejected."""
        not_null(value, "Value of constructed real field is null.")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidValueError(f"Real field needs a number, got {value!r}.")
        value = float(value)
        if math.isnan(value):
            raise InvalidValueError("Real field cannot hold NaN.")
        return value

    def create(self, value: float, preference_type: PreferenceType) -> RealField:
        return RealField(
            value=self.check_value(value), preference_type=_require_preference(preference_type)
        )

    def parse_value(self, text: str, attribute: EvaluationAttribute) -> float:
        self.check_attribute(attribute)
        if text is None or "_" in text:
            raise self.parse_error(text, attribute, "Not a real literal.")
        try:
            value = float(text)
        except ValueError as exc:
            raise self.parse_error(text, attribute, str(exc)) from exc
        if math.isnan(value):
            raise self.parse_error(text, attribute, "NaN is not a valid evaluation.")
        return value

    def create_for_attribute(self, value: float, attribute: EvaluationAttribute) -> RealField:
        return self.create(value, attribute.preference_type)


class EnumerationFieldFactory(KnownFieldFactory):
    kind = ValueKind.ENUMERATION

    def check_index(self, index: int) -> int:
        not_null(index, "Index of constructed enumeration field is null.")
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidValueError(f"Enumeration index must be an int, got {index!r}.")
        return index

    def create(
        self, element_list: ElementList, index: int, preference_type: PreferenceType
    ) -> EnumerationField:
        not_null(element_list, "Element list of constructed enumeration field is null.")
        return EnumerationField(
            element_list=element_list,
            index=self.check_index(index),
            preference_type=_require_preference(preference_type),
        )

    def parse_value(self, text: str, attribute: EvaluationAttribute) -> int:
        self.check_attribute(attribute)
        index = attribute.element_list.get_index(text)
        if index == DEFAULT_INDEX:
            raise self.parse_error(
                text, attribute, f"Allowed labels: {attribute.element_list.serialize()}."
            )
        return index

    def create_for_attribute(self, value: int, attribute: EvaluationAttribute) -> EnumerationField:
        return self.create(attribute.element_list, value, attribute.preference_type)


class UnknownFieldFactory(EvaluationFieldFactory):
    """Returns the shared missing value of one missing value type."""

    def __init__(self, missing_value_type: MissingValueType):
        self.missing_value_type = missing_value_type

    def create(self) -> UnknownSimpleField:
        return get_missing_value(self.missing_value_type)

    def create_from_text(self, text: str, attribute: EvaluationAttribute) -> UnknownSimpleField:
        not_null(attribute, "Attribute used to construct a missing value is null.")
        if attribute.missing_value_type is not self.missing_value_type:
            raise InvalidTypeError(
                f"Attribute '{attribute.name}' uses {attribute.missing_value_type.value} "
                f"missing values, not {self.missing_value_type.value}."
            )
        return self.create()


class PairFieldFactory(EvaluationFieldFactory):
    """Builds pair fields of composite attributes."""

    def create(self, first: SimpleField, second: SimpleField) -> PairField:
        return PairField(first=first, second=second)

    def split_literal(self, text: str, attribute: EvaluationAttribute) -> Tuple[str, str]:
        """Split "(first,second)" into its two trimmed member texts."""
        stripped = text.strip() if text is not None else ""
        if not (stripped.startswith("(") and stripped.endswith(")")):
            raise FieldParseError(
                f"Incorrect value '{text}' of pair attribute {attribute.name}. "
                "Expected (first,second).",
                text=text,
                attribute_name=attribute.name,
            )
        parts = [part.strip() for part in stripped[1:-1].split(",")]
        if len(parts) != 2 or not all(parts):
            raise FieldParseError(
                f"Incorrect value '{text}' of pair attribute {attribute.name}. "
                "Expected exactly two members.",
                text=text,
                attribute_name=attribute.name,
            )
        return parts[0], parts[1]

    def default_member_parser(
        self, attribute: EvaluationAttribute
    ) -> Callable[[str], SimpleField]:
        """
        Member parser reading missing-value markers (case-insensitive, from
        settings) as the attribute's missing value and anything else through
        the plain factory of the attribute's value kind.
        """
        # Lazy import to avoid circular imports with the config module
        from ..config import get_settings

        markers = {marker.lower() for marker in get_settings().missing_value_markers()}
        member_factory = get_factory(attribute.value_kind)

        def parse_member(member_text: str) -> SimpleField:
            if member_text.lower() in markers:
                return attribute.missing_value()
            return member_factory.create_from_text(member_text, attribute)

        return parse_member

    def create_from_text(
        self,
        text: str,
        attribute: EvaluationAttribute,
        member_parser: Optional[Callable[[str], SimpleField]] = None,
    ) -> PairField:
        not_null(attribute, "Attribute used to construct pair field is null.")
        if not attribute.composite:
            raise InvalidTypeError(f"Attribute '{attribute.name}' does not hold pair values.")
        first_text, second_text = self.split_literal(text, attribute)
        if member_parser is None:
            member_parser = self.default_member_parser(attribute)
        return self.create(member_parser(first_text), member_parser(second_text))


integer_field_factory = IntegerFieldFactory()
real_field_factory = RealFieldFactory()
enumeration_field_factory = EnumerationFieldFactory()
pair_field_factory = PairFieldFactory()

_FACTORIES: Dict[ValueKind, KnownFieldFactory] = {
    ValueKind.INTEGER: integer_field_factory,
    ValueKind.REAL: real_field_factory,
    ValueKind.ENUMERATION: enumeration_field_factory,
}

_UNKNOWN_FACTORIES: Dict[MissingValueType, UnknownFieldFactory] = {
    missing_value_type: UnknownFieldFactory(missing_value_type)
    for missing_value_type in MissingValueType
}


def get_factory(kind: ValueKind) -> KnownFieldFactory:
    """Factory function to get the plain factory for a value kind.

    Raises:
        InvalidTypeError: If the value kind is not supported
    """
    try:
        return _FACTORIES[kind]
    except KeyError:
        raise InvalidTypeError(
            f"Unsupported value kind: {kind}. "
            f"Supported: {', '.join(k.value for k in _FACTORIES)}"
        ) from None


def get_unknown_factory(missing_value_type: MissingValueType) -> UnknownFieldFactory:
    """Factory for the missing values of one missing value type."""
    return _UNKNOWN_FACTORIES[not_null(missing_value_type, "Missing value type is null.")]
