"""
Evaluation attribute descriptor.

Describes one column of a decision table as far as evaluation fields care:
the primitive value kind, the preference type, the missing value treatment
and, for enumerations, the element list shared by all of its evaluations.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, constr, model_validator

from ..core.errors import InvalidTypeError
from ..fields.element_list import ElementList
from ..fields.enums import AttributeType, MissingValueType, PreferenceType, ValueKind
from ..fields.field import UnknownSimpleField
from ..fields.unknown import get_missing_value


class EvaluationAttribute(BaseModel):
    """Attribute whose values are evaluation fields.

    Invariants:
    - element_list is set exactly when value_kind is ENUMERATION
    - composite attributes hold pair evaluations whose members have value_kind
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: constr(min_length=1, max_length=256) = Field(..., description="Attribute name")
    active: bool = Field(default=True, description="Whether the attribute is used")
    attribute_type: AttributeType = Field(
        default=AttributeType.CONDITION, description="Role in the decision table"
    )
    value_kind: ValueKind = Field(..., description="Primitive kind of the evaluations")
    preference_type: PreferenceType = Field(..., description="Direction of preference")
    missing_value_type: MissingValueType = Field(
        default=MissingValueType.MV2, description="Treatment of missing evaluations"
    )
    element_list: Optional[ElementList] = Field(
        None, description="Domain of an enumeration attribute"
    )
    composite: bool = Field(default=False, description="Evaluations are (first,second) pairs")

    @model_validator(mode="after")
    def check_element_list(self) -> EvaluationAttribute:
        if self.value_kind is ValueKind.ENUMERATION and self.element_list is None:
            raise InvalidTypeError(f"Enumeration attribute '{self.name}' needs an element list.")
        if self.value_kind is not ValueKind.ENUMERATION and self.element_list is not None:
            raise InvalidTypeError(
                f"Attribute '{self.name}' of kind {self.value_kind.value} cannot have an element list."
            )
        return self

    def missing_value(self) -> UnknownSimpleField:
        """Shared missing evaluation for this attribute."""
        return get_missing_value(self.missing_value_type)

    def __str__(self) -> str:
        parts = [
            ("+ " if self.active else "- ") + f"{self.name}: {self.attribute_type.value}",
            self.preference_type.value,
            ("pair of " if self.composite else "") + self.value_kind.value,
            self.missing_value_type.value,
        ]
        if self.element_list is not None:
            parts.append(self.element_list.serialize())
        return ", ".join(parts)
