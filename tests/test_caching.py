"""Unit tests for caching factories and the cache context."""

import pytest

from dominance_fields.core.errors import (
    FieldParseError,
    InvalidTypeError,
    InvalidValueError,
    NullArgumentError,
)
from dominance_fields.fields.caching import (
    EnumerationFieldCachingFactory,
    FieldCache,
    IntegerFieldCachingFactory,
    RealFieldCachingFactory,
)
from dominance_fields.fields.element_list import ElementList
from dominance_fields.fields.enums import PreferenceType, ValueKind


class TestIntegerFieldCachingFactory:
    """Tests for identity guarantees of cached integer fields."""

    def test_same_key_same_instance(self):
        factory = IntegerFieldCachingFactory()
        first = factory.create(7, PreferenceType.GAIN, persistent=True)
        second = factory.create(7, PreferenceType.GAIN, persistent=True)
        assert first is second

    def test_other_preference_other_instance(self):
        factory = IntegerFieldCachingFactory()
        gain = factory.create(7, PreferenceType.GAIN, persistent=True)
        cost = factory.create(7, PreferenceType.COST, persistent=True)
        assert gain is not cost
        assert cost.preference_type is PreferenceType.COST

    def test_tiers_are_independent(self):
        factory = IntegerFieldCachingFactory()
        persistent = factory.create(7, PreferenceType.GAIN, persistent=True)
        volatile = factory.create(7, PreferenceType.GAIN, persistent=False)
        assert persistent is not volatile
        assert persistent == volatile

    def test_clear_volatile_cache_counts_evictions(self):
        factory = IntegerFieldCachingFactory()
        for value in range(5):
            factory.create(value, PreferenceType.GAIN)
        factory.create(0, PreferenceType.GAIN)
        assert factory.volatile_cache_size == 5
        assert factory.clear_volatile_cache() == 5
        assert factory.volatile_cache_size == 0
        assert factory.clear_volatile_cache() == 0

    def test_clear_keeps_persistent_tier(self):
        factory = IntegerFieldCachingFactory()
        kept = factory.create(7, PreferenceType.GAIN, persistent=True)
        factory.create(7, PreferenceType.GAIN)
        factory.clear_volatile_cache()
        assert factory.persistent_cache_size == 1
        assert factory.create(7, PreferenceType.GAIN, persistent=True) is kept

    def test_volatile_entries_are_rebuilt_after_clear(self):
        factory = IntegerFieldCachingFactory()
        before = factory.create(7, PreferenceType.GAIN)
        factory.clear_volatile_cache()
        assert factory.create(7, PreferenceType.GAIN) is not before

    def test_text_entry_points(self, int_attribute):
        factory = IntegerFieldCachingFactory()
        first = factory.create_with_persistent_cache("12", int_attribute)
        assert factory.create_with_persistent_cache("12", int_attribute) is first
        volatile = factory.create_with_volatile_cache("12", int_attribute)
        assert volatile is factory.create_with_volatile_cache("+12", int_attribute)
        assert volatile is not first

    def test_text_entry_points_validate(self, int_attribute, real_attribute):
        factory = IntegerFieldCachingFactory()
        with pytest.raises(FieldParseError):
            factory.create_with_volatile_cache("1.5", int_attribute)
        with pytest.raises(InvalidTypeError):
            factory.create_with_volatile_cache("1", real_attribute)
        assert factory.volatile_cache_size == 0

    def test_requires_preference_type(self):
        with pytest.raises(NullArgumentError):
            IntegerFieldCachingFactory().create(7, None)


class TestRealFieldCachingFactory:
    """Tests for cached real fields."""

    def test_int_and_float_share_entry(self):
        factory = RealFieldCachingFactory()
        assert factory.create(2, PreferenceType.COST) is factory.create(2.0, PreferenceType.COST)

    def test_text_entry_point(self, real_attribute):
        factory = RealFieldCachingFactory()
        first = factory.create_with_volatile_cache("2.50", real_attribute)
        assert factory.create_with_volatile_cache("2.5", real_attribute) is first


class TestEnumerationFieldCachingFactory:
    """Tests for cached enumeration fields."""

    def test_same_list_same_instance(self, sizes):
        factory = EnumerationFieldCachingFactory()
        first = factory.create(sizes, 1, PreferenceType.GAIN, persistent=True)
        assert factory.create(sizes, 1, PreferenceType.GAIN, persistent=True) is first

    def test_equal_lists_share_entry(self):
        factory = EnumerationFieldCachingFactory()
        first = factory.create(ElementList(elements=["a", "b"]), 0, PreferenceType.GAIN)
        second = factory.create(ElementList(elements=["a", "b"]), 0, PreferenceType.GAIN)
        assert first is second

    def test_other_list_other_instance(self):
        factory = EnumerationFieldCachingFactory()
        first = factory.create(ElementList(elements=["a", "b"]), 0, PreferenceType.GAIN)
        second = factory.create(ElementList(elements=["a", "c"]), 0, PreferenceType.GAIN)
        assert first is not second
        assert factory.volatile_cache_size == 2

    def test_text_entry_point(self, enum_attribute):
        factory = EnumerationFieldCachingFactory()
        first = factory.create_with_persistent_cache("medium", enum_attribute)
        assert factory.create_with_persistent_cache("medium", enum_attribute) is first
        assert first.index == 1

    def test_requires_list(self):
        with pytest.raises(NullArgumentError):
            EnumerationFieldCachingFactory().create(None, 0, PreferenceType.GAIN)


class TestValueChecksBeforeLookup:
    """Tests that bad values fail alike on cold and warm caches."""

    @pytest.mark.parametrize("value", [1.0, True])
    def test_integer_rejects_non_int_on_warm_cache(self, value):
        factory = IntegerFieldCachingFactory()
        factory.create(1, PreferenceType.GAIN)
        with pytest.raises(InvalidValueError):
            factory.create(value, PreferenceType.GAIN)

    @pytest.mark.parametrize(
        "factory_class", [IntegerFieldCachingFactory, RealFieldCachingFactory]
    )
    def test_none_value(self, factory_class):
        with pytest.raises(NullArgumentError):
            factory_class().create(None, PreferenceType.GAIN)

    @pytest.mark.parametrize("value", ["abc", True, float("nan")])
    def test_real_rejects_non_numbers(self, value):
        factory = RealFieldCachingFactory()
        factory.create(1.0, PreferenceType.GAIN)
        with pytest.raises(InvalidValueError):
            factory.create(value, PreferenceType.GAIN)
        assert factory.volatile_cache_size == 1

    def test_enumeration_rejects_bool_index_on_warm_cache(self, sizes):
        factory = EnumerationFieldCachingFactory()
        factory.create(sizes, 1, PreferenceType.GAIN)
        with pytest.raises(InvalidValueError):
            factory.create(sizes, True, PreferenceType.GAIN)

    def test_negative_zero_keeps_its_sign(self):
        factory = RealFieldCachingFactory()
        positive = factory.create(0.0, PreferenceType.GAIN)
        negative = factory.create(-0.0, PreferenceType.GAIN)
        assert positive is not negative
        assert str(negative) == "-0.0"
        assert factory.create(-0.0, PreferenceType.GAIN) is negative


class TestFailedBuilds:
    """Tests that failed constructions leave nothing behind."""

    def test_out_of_range_indices_leave_no_keys(self, sizes):
        factory = EnumerationFieldCachingFactory()
        for index in range(3, 103):
            with pytest.raises(InvalidValueError):
                factory.create(sizes, index, PreferenceType.GAIN)
        assert factory._volatile == {}
        assert factory.clear_volatile_cache() == 0

    def test_clear_drops_every_key(self, sizes):
        factory = EnumerationFieldCachingFactory()
        factory.create(sizes, 0, PreferenceType.GAIN)
        with pytest.raises(InvalidValueError):
            factory.create(sizes, 9, PreferenceType.GAIN)
        assert factory.clear_volatile_cache() == 1
        assert factory._volatile == {}


class TestFieldCache:
    """Tests for the per-session cache context."""

    @pytest.mark.parametrize(
        "kind,factory_class",
        [
            (ValueKind.INTEGER, IntegerFieldCachingFactory),
            (ValueKind.REAL, RealFieldCachingFactory),
            (ValueKind.ENUMERATION, EnumerationFieldCachingFactory),
        ],
    )
    def test_for_kind(self, kind, factory_class):
        assert isinstance(FieldCache().for_kind(kind), factory_class)

    def test_for_kind_requires_kind(self):
        with pytest.raises(NullArgumentError):
            FieldCache().for_kind(None)

    def test_contexts_are_isolated(self):
        first, second = FieldCache(), FieldCache()
        assert first.integers.create(7, PreferenceType.GAIN) is not second.integers.create(
            7, PreferenceType.GAIN
        )

    def test_clear_volatile_cache_sums_kinds(self, sizes):
        cache = FieldCache()
        cache.integers.create(1, PreferenceType.GAIN)
        cache.integers.create(2, PreferenceType.GAIN)
        cache.reals.create(1.5, PreferenceType.GAIN)
        cache.enumerations.create(sizes, 0, PreferenceType.GAIN)
        cache.enumerations.create(sizes, 0, PreferenceType.GAIN, persistent=True)
        assert cache.volatile_cache_size == 4
        assert cache.persistent_cache_size == 1
        assert cache.clear_volatile_cache() == 4
        assert cache.volatile_cache_size == 0
        assert cache.persistent_cache_size == 1
