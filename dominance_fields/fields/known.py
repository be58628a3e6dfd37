"""
Known evaluation kinds: integer, real and enumeration.

One class per primitive kind; the preference type is an ordinary field, and
its effect on comparisons comes from the dominance tables in field.py.
"""

from __future__ import annotations

import math
from typing import Any, ClassVar

from pydantic import Field, StrictInt, field_validator, model_validator

from ..core.errors import InvalidValueError
from ..core.precondition import not_null
from .element_list import ElementList
from .enums import PreferenceType, ValueKind
from .field import KnownSimpleField


class IntegerField(KnownSimpleField):
    """Integer evaluation."""

    kind: ClassVar[ValueKind] = ValueKind.INTEGER
    descriptor_suffix: ClassVar[str] = "Int"

    value: StrictInt = Field(..., description="Integer value")

    @property
    def order_key(self) -> int:
        return self.value

    def clone(self, preference_type: PreferenceType) -> IntegerField:
        not_null(preference_type, "Attribute's preference type is null.")
        return IntegerField(value=self.value, preference_type=preference_type)

    def __str__(self) -> str:
        return str(self.value)


class RealField(KnownSimpleField):
    """Real (floating point) evaluation. NaN is rejected."""

    kind: ClassVar[ValueKind] = ValueKind.REAL
    descriptor_suffix: ClassVar[str] = "Real"

    value: float = Field(..., description="Real value")

    @field_validator("value", mode="before")
    @classmethod
    def reject_non_numbers(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidValueError(f"Real field needs a number, got {value!r}.")
        return float(value)

    @field_validator("value")
    @classmethod
    def reject_nan(cls, value: float) -> float:
        if math.isnan(value):
            raise InvalidValueError("Real field cannot hold NaN.")
        return value

    @property
    def order_key(self) -> float:
        return self.value

    def clone(self, preference_type: PreferenceType) -> RealField:
        not_null(preference_type, "Attribute's preference type is null.")
        return RealField(value=self.value, preference_type=preference_type)

    def __str__(self) -> str:
        return repr(self.value)


class EnumerationField(KnownSimpleField):
    """
    Evaluation holding an index into an element list.

    Order follows list positions. Two enumeration fields are comparable only
    when their element lists describe the same domain (see ElementList.matches).
    """

    kind: ClassVar[ValueKind] = ValueKind.ENUMERATION
    descriptor_suffix: ClassVar[str] = "Enum"

    element_list: ElementList = Field(..., description="Domain of the attribute")
    index: StrictInt = Field(..., description="Position of the label in element_list")

    @model_validator(mode="after")
    def check_index(self) -> EnumerationField:
        if not 0 <= self.index < self.element_list.size:
            raise InvalidValueError(
                f"Index {self.index} is out of range for element list "
                f"{self.element_list.serialize()}."
            )
        return self

    @property
    def order_key(self) -> int:
        return self.index

    @property
    def element(self) -> str:
        return self.element_list.elements[self.index]

    def is_comparable_with(self, other: KnownSimpleField) -> bool:
        return super().is_comparable_with(other) and self.element_list.matches(other.element_list)

    def clone(self, preference_type: PreferenceType) -> EnumerationField:
        not_null(preference_type, "Attribute's preference type is null.")
        return EnumerationField(
            element_list=self.element_list, index=self.index, preference_type=preference_type
        )

    def __str__(self) -> str:
        return self.element
