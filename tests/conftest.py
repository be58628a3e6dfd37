"""Test configuration and fixtures."""

import pytest

from dominance_fields.config import reset_settings
from dominance_fields.data.attribute import EvaluationAttribute
from dominance_fields.fields.element_list import ElementList
from dominance_fields.fields.enums import MissingValueType, PreferenceType, ValueKind


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from DOMINANCE_* variables and cached settings."""
    for name in (
        "DOMINANCE_MISSING_VALUE_STRINGS",
        "DOMINANCE_DEFAULT_CACHING_TYPE",
        "DOMINANCE_HASH_ALGORITHM",
        "DOMINANCE_LOG_LEVEL",
        "DOMINANCE_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sizes() -> ElementList:
    """Element list of an ordered enumeration domain."""
    return ElementList(elements=["small", "medium", "large"])


@pytest.fixture
def int_attribute() -> EvaluationAttribute:
    return EvaluationAttribute(
        name="age", value_kind=ValueKind.INTEGER, preference_type=PreferenceType.GAIN
    )


@pytest.fixture
def real_attribute() -> EvaluationAttribute:
    return EvaluationAttribute(
        name="price",
        value_kind=ValueKind.REAL,
        preference_type=PreferenceType.COST,
        missing_value_type=MissingValueType.MV15,
    )


@pytest.fixture
def enum_attribute(sizes) -> EvaluationAttribute:
    return EvaluationAttribute(
        name="size",
        value_kind=ValueKind.ENUMERATION,
        preference_type=PreferenceType.GAIN,
        element_list=sizes,
    )


@pytest.fixture
def pair_attribute() -> EvaluationAttribute:
    return EvaluationAttribute(
        name="range",
        value_kind=ValueKind.INTEGER,
        preference_type=PreferenceType.GAIN,
        composite=True,
    )
