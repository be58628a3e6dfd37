"""Unit tests for element lists (enumeration domains)."""

import hashlib

import pytest

from dominance_fields.core.errors import InvalidValueError, NullArgumentError
from dominance_fields.core.ternary import TernaryLogicValue
from dominance_fields.fields.element_list import DEFAULT_INDEX, ElementList


class TestConstruction:
    """Tests for building element lists."""

    def test_keeps_label_order(self):
        element_list = ElementList(elements=["low", "mid", "high"])
        assert element_list.elements == ("low", "mid", "high")
        assert element_list.size == 3

    def test_default_algorithm_is_sha256(self):
        assert ElementList(elements=["a"]).algorithm == "sha256"

    def test_default_algorithm_from_settings(self, monkeypatch):
        monkeypatch.setenv("DOMINANCE_HASH_ALGORITHM", "md5")
        from dominance_fields.config import reset_settings

        reset_settings()
        assert ElementList(elements=["a"]).algorithm == "md5"

    def test_rejects_none(self):
        with pytest.raises(NullArgumentError):
            ElementList(elements=None)

    def test_rejects_none_label(self):
        with pytest.raises(NullArgumentError, match="position 1"):
            ElementList(elements=["a", None])

    def test_rejects_duplicate_labels(self):
        with pytest.raises(InvalidValueError, match="Duplicate label 'a'"):
            ElementList(elements=["a", "b", "a"])

    def test_rejects_empty_label(self):
        with pytest.raises(InvalidValueError, match="Empty label"):
            ElementList(elements=["a", ""])

    def test_rejects_single_string(self):
        with pytest.raises(InvalidValueError):
            ElementList(elements="abc")

    def test_rejects_unknown_algorithm(self):
        with pytest.raises(InvalidValueError, match="no-such-hash"):
            ElementList(elements=["a"], algorithm="no-such-hash")

    def test_empty_list_is_allowed(self):
        assert ElementList(elements=[]).size == 0


class TestLookup:
    """Tests for label and index lookup."""

    def test_get_element(self, sizes):
        assert sizes.get_element(0) == "small"
        assert sizes.get_element(2) == "large"

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_get_element_out_of_range(self, sizes, index):
        assert sizes.get_element(index) is None

    def test_get_index(self, sizes):
        assert sizes.get_index("medium") == 1

    @pytest.mark.parametrize("label", ["huge", "Small", None])
    def test_get_index_absent(self, sizes, label):
        assert sizes.get_index(label) == DEFAULT_INDEX

    def test_serialize(self, sizes):
        assert sizes.serialize() == "(small,medium,large)"
        assert str(sizes) == "(small,medium,large)"


class TestDigest:
    """Tests for the eagerly computed digest and hash."""

    def test_digest_matches_length_prefixed_labels(self):
        expected = hashlib.sha256()
        for label in ("ab", "c"):
            encoded = label.encode("utf-8")
            expected.update(len(encoded).to_bytes(8, "big"))
            expected.update(encoded)
        assert ElementList(elements=["ab", "c"]).digest == expected.digest()

    def test_label_boundaries_change_digest(self):
        assert ElementList(elements=["ab", "c"]).digest != ElementList(elements=["a", "bc"]).digest

    def test_order_changes_digest(self):
        assert ElementList(elements=["a", "b"]).digest != ElementList(elements=["b", "a"]).digest

    def test_hash_is_content_based(self):
        assert hash(ElementList(elements=["a", "b"])) == hash(ElementList(elements=["a", "b"]))

    def test_hash_ignores_algorithm(self):
        first = ElementList(elements=["a", "b"], algorithm="sha256")
        second = ElementList(elements=["a", "b"], algorithm="md5")
        assert hash(first) == hash(second)


class TestEquality:
    """Tests for content, digest and domain matching."""

    def test_same_labels_are_equal(self):
        first = ElementList(elements=["a", "b", "c"])
        second = ElementList(elements=["a", "b", "c"])
        assert first.is_equal_to(second) is TernaryLogicValue.TRUE
        assert first.has_equal_hash(second) is TernaryLogicValue.TRUE
        assert first == second

    def test_same_labels_different_algorithms(self):
        first = ElementList(elements=["a", "b", "c"], algorithm="sha256")
        second = ElementList(elements=["a", "b", "c"], algorithm="sha1")
        assert first.is_equal_to(second) is TernaryLogicValue.TRUE
        assert first.has_equal_hash(second) is TernaryLogicValue.FALSE
        assert first.matches(second)

    def test_one_position_differs(self):
        first = ElementList(elements=["a", "b", "c"])
        second = ElementList(elements=["a", "x", "c"])
        assert first.is_equal_to(second) is TernaryLogicValue.FALSE
        assert first.has_equal_hash(second) is TernaryLogicValue.FALSE
        assert not first.matches(second)
        assert first != second

    def test_different_lengths(self):
        first = ElementList(elements=["a", "b"])
        second = ElementList(elements=["a", "b", "c"])
        assert first.is_equal_to(second) is TernaryLogicValue.FALSE
        assert not first.matches(second, verify=True)

    def test_identity_matches(self, sizes):
        assert sizes.matches(sizes)

    def test_verify_confirms_digest_hit(self):
        first = ElementList(elements=["a", "b"])
        assert first.matches(ElementList(elements=["a", "b"]), verify=True)

    def test_none_partner(self, sizes):
        with pytest.raises(NullArgumentError):
            sizes.is_equal_to(None)
        with pytest.raises(NullArgumentError):
            sizes.has_equal_hash(None)
        with pytest.raises(NullArgumentError):
            sizes.matches(None)

    def test_not_equal_to_other_types(self, sizes):
        assert sizes != ("small", "medium", "large")

    def test_usable_as_dict_key(self):
        registry = {ElementList(elements=["a", "b"]): "ab"}
        assert registry[ElementList(elements=["a", "b"])] == "ab"


class TestSerialization:
    """Tests for dict round-trips."""

    def test_to_dict(self):
        element_list = ElementList(elements=["a", "b"])
        data = element_list.to_dict()
        assert data["elements"] == ["a", "b"]
        assert data["algorithm"] == "sha256"
        assert data["digest"] == element_list.digest.hex()

    def test_round_trip_keeps_digest(self):
        element_list = ElementList(elements=["a", "b"], algorithm="sha512")
        restored = ElementList.from_dict(element_list.to_dict())
        assert restored.digest == element_list.digest
        assert restored.has_equal_hash(element_list) is TernaryLogicValue.TRUE

    def test_from_dict_without_digest(self):
        restored = ElementList.from_dict({"elements": ["a"], "algorithm": "sha256"})
        assert restored.elements == ("a",)

    def test_from_dict_rejects_tampered_digest(self):
        data = ElementList(elements=["a", "b"]).to_dict()
        data["elements"] = ["a", "c"]
        with pytest.raises(InvalidValueError, match="does not match"):
            ElementList.from_dict(data)
