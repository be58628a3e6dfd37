"""
Caching field factories and the per-session cache context.

A caching factory hands out the same field object for the same key, so two
evaluations obtained with equal keys from the same tier are identical (``is``),
not merely equal. Values are checked before any lookup, so a bad value fails
the same way whether or not the cache is warm. Each factory keeps two
independent tiers:

- persistent: grows monotonically; the API never clears it
- volatile: bounds memory during one bulk load; clear_volatile_cache()
  empties it and reports how many fields were evicted

Keys:
- integer fields: (value, preference type)
- real fields: (sign, value, preference type), so 0.0 and -0.0 stay apart
- enumeration fields: (element list hash, index, preference type); a bucket
  is scanned for a field with the same index and a matching element list

Caches are not shared between threads. A loader creates its own FieldCache
for a loading session and passes it to the parser explicitly.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, Hashable, List, Optional

import structlog

from ..core.precondition import not_null
from .element_list import ElementList
from .enums import PreferenceType, ValueKind
from .factories import (
    KnownFieldFactory,
    enumeration_field_factory,
    integer_field_factory,
    real_field_factory,
)
from .known import EnumerationField, IntegerField, RealField

if TYPE_CHECKING:
    from ..data.attribute import EvaluationAttribute
    from .field import KnownSimpleField

logger = structlog.get_logger()

_Store = Dict[Hashable, List[Any]]


class KnownFieldCachingFactory(ABC):
    """Caching factory for one primitive value kind."""

    kind: ValueKind
    factory: KnownFieldFactory

    def __init__(self):
        self._persistent: _Store = {}
        self._volatile: _Store = {}

    def _lookup(
        self,
        persistent: bool,
        key: Hashable,
        build: Callable[[], KnownSimpleField],
        matches: Optional[Callable[[Any], bool]] = None,
    ) -> KnownSimpleField:
        store = self._persistent if persistent else self._volatile
        bucket = store.get(key, [])
        for field in bucket:
            if matches is None or matches(field):
                return field
        field = build()
        store.setdefault(key, []).append(field)
        logger.debug(
            "field_cached",
            kind=self.kind.value,
            tier="persistent" if persistent else "volatile",
            field=str(field),
        )
        return field

    @abstractmethod
    def create_for_attribute(
        self, value: Any, attribute: EvaluationAttribute, persistent: bool
    ) -> KnownSimpleField:
        """Cached field for an already parsed value."""

    def create_with_persistent_cache(
        self, text: str, attribute: EvaluationAttribute
    ) -> KnownSimpleField:
        value = self.factory.parse_value(text, attribute)
        return self.create_for_attribute(value, attribute, persistent=True)

    def create_with_volatile_cache(
        self, text: str, attribute: EvaluationAttribute
    ) -> KnownSimpleField:
        value = self.factory.parse_value(text, attribute)
        return self.create_for_attribute(value, attribute, persistent=False)

    @staticmethod
    def _count(store: _Store) -> int:
        return sum(len(bucket) for bucket in store.values())

    @property
    def volatile_cache_size(self) -> int:
        return self._count(self._volatile)

    @property
    def persistent_cache_size(self) -> int:
        return self._count(self._persistent)

    def clear_volatile_cache(self) -> int:
        """Drop every volatile entry; returns the number of evicted fields."""
        evicted = self.volatile_cache_size
        self._volatile = {}
        logger.debug("volatile_cache_cleared", kind=self.kind.value, evicted=evicted)
        return evicted


class IntegerFieldCachingFactory(KnownFieldCachingFactory):
    kind = ValueKind.INTEGER
    factory = integer_field_factory

    def create(
        self, value: int, preference_type: PreferenceType, persistent: bool = False
    ) -> IntegerField:
        value = self.factory.check_value(value)
        not_null(preference_type, "Attribute's preference type is null.")
        return self._lookup(
            persistent,
            (value, preference_type),
            lambda: self.factory.create(value, preference_type),
        )

    def create_for_attribute(
        self, value: int, attribute: EvaluationAttribute, persistent: bool
    ) -> IntegerField:
        return self.create(value, attribute.preference_type, persistent)


class RealFieldCachingFactory(KnownFieldCachingFactory):
    kind = ValueKind.REAL
    factory = real_field_factory

    def create(
        self, value: float, preference_type: PreferenceType, persistent: bool = False
    ) -> RealField:
        value = self.factory.check_value(value)
        not_null(preference_type, "Attribute's preference type is null.")
        # 0.0 == -0.0, so the sign is part of the key
        return self._lookup(
            persistent,
            (math.copysign(1.0, value), value, preference_type),
            lambda: self.factory.create(value, preference_type),
        )

    def create_for_attribute(
        self, value: float, attribute: EvaluationAttribute, persistent: bool
    ) -> RealField:
        return self.create(value, attribute.preference_type, persistent)


class EnumerationFieldCachingFactory(KnownFieldCachingFactory):
    kind = ValueKind.ENUMERATION
    factory = enumeration_field_factory

    def create(
        self,
        element_list: ElementList,
        index: int,
        preference_type: PreferenceType,
        persistent: bool = False,
    ) -> EnumerationField:
        not_null(element_list, "Element list of constructed enumeration field is null.")
        index = self.factory.check_index(index)
        not_null(preference_type, "Attribute's preference type is null.")
        return self._lookup(
            persistent,
            (hash(element_list), index, preference_type),
            lambda: self.factory.create(element_list, index, preference_type),
            lambda field: field.index == index and field.element_list.matches(element_list),
        )

    def create_for_attribute(
        self, value: int, attribute: EvaluationAttribute, persistent: bool
    ) -> EnumerationField:
        return self.create(attribute.element_list, value, attribute.preference_type, persistent)


class FieldCache:
    """Cache context of one loading session: one caching factory per value kind."""

    def __init__(self):
        self.integers = IntegerFieldCachingFactory()
        self.reals = RealFieldCachingFactory()
        self.enumerations = EnumerationFieldCachingFactory()
        self._by_kind: Dict[ValueKind, KnownFieldCachingFactory] = {
            ValueKind.INTEGER: self.integers,
            ValueKind.REAL: self.reals,
            ValueKind.ENUMERATION: self.enumerations,
        }

    def for_kind(self, kind: ValueKind) -> KnownFieldCachingFactory:
        return self._by_kind[not_null(kind, "Value kind is null.")]

    def clear_volatile_cache(self) -> int:
        """Clear the volatile tier of every factory; returns the total evicted."""
        return sum(factory.clear_volatile_cache() for factory in self._by_kind.values())

    @property
    def volatile_cache_size(self) -> int:
        return sum(factory.volatile_cache_size for factory in self._by_kind.values())

    @property
    def persistent_cache_size(self) -> int:
        return sum(factory.persistent_cache_size for factory in self._by_kind.values())
