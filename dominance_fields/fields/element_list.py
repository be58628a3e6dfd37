"""
Element list: the interned, digest-identified domain of an enumeration attribute.

An ElementList is an immutable ordered sequence of distinct labels. Its digest
is computed once at construction and identifies the content, so enumeration
evaluations loaded independently (e.g. from two tables) can still be compared
as long as their lists carry equal digests.

Equality:
- identical objects are equal
- lists hashed with the same algorithm are equal when their digests are equal
  (a digest collision is accepted on this fast path)
- lists hashed with different algorithms are compared label by label
"""

from __future__ import annotations

import hashlib
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from ..core.errors import InvalidValueError, NullArgumentError
from ..core.precondition import not_null_with_contents
from ..core.ternary import TernaryLogicValue

DEFAULT_ELEMENT: Optional[str] = None
DEFAULT_INDEX = -1


def _default_algorithm() -> str:
    """
    Get the default digest algorithm from settings.

    Loaded lazily to avoid circular imports with the config module.
    """
    from ..config import get_settings

    return get_settings().hash_algorithm


class ElementList(BaseModel):
    """Ordered, deduplicated labels of an enumeration domain plus their digest."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    elements: Tuple[str, ...] = Field(..., description="Labels in domain order")
    algorithm: str = Field(
        default_factory=_default_algorithm,
        description="hashlib algorithm used for the digest",
    )

    _digest: bytes = PrivateAttr(default=b"")
    _index: Dict[str, int] = PrivateAttr(default_factory=dict)
    _hash_code: int = PrivateAttr(default=0)

    @field_validator("elements", mode="before")
    @classmethod
    def require_elements(cls, value: Any) -> Any:
        if isinstance(value, str):
            raise InvalidValueError("Elements must be a sequence of labels, not a single string.")
        return not_null_with_contents(
            value, "Element list cannot be built from None.", "Label at position {index} is null."
        )

    @field_validator("elements")
    @classmethod
    def check_labels(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        seen = set()
        for position, label in enumerate(value):
            if label == "":
                raise InvalidValueError(f"Empty label at position {position}.")
            if label in seen:
                raise InvalidValueError(f"Duplicate label '{label}' at position {position}.")
            seen.add(label)
        return value

    def model_post_init(self, __context: Any) -> None:
        try:
            digest = hashlib.new(self.algorithm)
            for label in self.elements:
                encoded = label.encode("utf-8")
                digest.update(len(encoded).to_bytes(8, "big"))
                digest.update(encoded)
            self._digest = digest.digest()
        except (ValueError, TypeError) as exc:
            raise InvalidValueError(
                f"Unsupported digest algorithm '{self.algorithm}'."
            ) from exc
        self._index = {label: position for position, label in enumerate(self.elements)}
        self._hash_code = hash((ElementList, self.elements))

    @property
    def digest(self) -> bytes:
        return self._digest

    @property
    def size(self) -> int:
        return len(self.elements)

    def get_element(self, index: int) -> Optional[str]:
        """Label at index, or None when index is out of range."""
        if 0 <= index < len(self.elements):
            return self.elements[index]
        return DEFAULT_ELEMENT

    def get_index(self, label: Optional[str]) -> int:
        """Position of label, or -1 when the label is not in the list."""
        if label is None:
            return DEFAULT_INDEX
        return self._index.get(label, DEFAULT_INDEX)

    def is_equal_to(self, other: ElementList) -> TernaryLogicValue:
        """Exact, label-by-label comparison."""
        if other is None:
            raise NullArgumentError("Compared element list is null.")
        return TernaryLogicValue.from_bool(self.elements == other.elements)

    def has_equal_hash(self, other: ElementList) -> TernaryLogicValue:
        """Compare digests byte by byte. Different algorithms never match."""
        if other is None:
            raise NullArgumentError("Compared element list is null.")
        return TernaryLogicValue.from_bool(self._digest == other._digest)

    def matches(self, other: ElementList, verify: bool = False) -> bool:
        """
        Decide whether two lists describe the same domain.

        Args:
            other: The list to compare with
            verify: Confirm a digest hit with an exact comparison
        """
        if other is None:
            raise NullArgumentError("Compared element list is null.")
        if other is self:
            return True
        if self.algorithm == other.algorithm:
            if self.has_equal_hash(other) is not TernaryLogicValue.TRUE:
                return False
            return not verify or self.is_equal_to(other) is TernaryLogicValue.TRUE
        return self.is_equal_to(other) is TernaryLogicValue.TRUE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementList):
            return NotImplemented
        return self.matches(other)

    def __hash__(self) -> int:
        return self._hash_code

    def serialize(self) -> str:
        return "(" + ",".join(self.elements) + ")"

    def __str__(self) -> str:
        return self.serialize()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the list to a dictionary, digest included."""
        return {
            "elements": list(self.elements),
            "algorithm": self.algorithm,
            "digest": self._digest.hex(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ElementList:
        """
        Rebuild a list from to_dict() output.

        Raises:
            InvalidValueError: If the stored digest does not match the content
        """
        element_list = cls(elements=data["elements"], algorithm=data["algorithm"])
        stored = data.get("digest")
        if stored is not None and stored != element_list.digest.hex():
            raise InvalidValueError(
                f"Stored digest {stored[:16]}... does not match element list "
                f"{element_list.serialize()}."
            )
        return element_list
