import pytest

from syndication_toolkit.core.comparison import (
    compare_entity_sequence,
    compare_mapping,
    compare_sequence,
    compare_text,
    compare_values,
    ensure_comparable,
)
from syndication_toolkit.core.exceptions import ComparisonTypeError
from syndication_toolkit.core.opml import OpmlOutline, OpmlOwner


class TestScalarComparison:
    def test_text_ignores_case_by_default(self):
        assert compare_text("Title", "TITLE") == 0
        assert compare_text("Title", "TITLE", ignore_case=False) != 0

    def test_text_none_is_empty(self):
        assert compare_text(None, "") == 0

    def test_values_null_policy(self):
        assert compare_values(None, None) == 0
        assert compare_values(None, 1) == -1
        assert compare_values(1, None) == 1
        assert compare_values(2, 1) == 1


class TestSequenceComparison:
    def test_length_dominates(self):
        assert compare_sequence(["b"], ["a", "a"]) == -1
        assert compare_sequence(["a", "a"], ["b"]) == 1

    def test_equal_sequences(self):
        assert compare_sequence(["a", "B"], ["A", "b"]) == 0

    def test_entity_sequence_length_dominates(self):
        longer = [OpmlOutline("a"), OpmlOutline("a")]
        shorter = [OpmlOutline("z")]
        assert compare_entity_sequence(longer, shorter) == 1
        assert compare_entity_sequence(shorter, longer) == -1


class TestMappingComparison:
    def test_insertion_order_does_not_matter(self):
        assert compare_mapping({"a": "1", "b": "2"}, {"b": "2", "a": "1"}) == 0

    def test_different_values(self):
        assert compare_mapping({"a": "1"}, {"a": "2"}) != 0

    def test_missing_key(self):
        assert compare_mapping({"a": "1"}, {"b": "1"}) != 0

    def test_size_dominates(self):
        assert compare_mapping({"a": "1"}, {}) == 1


class TestComparableOperators:
    """Operators derived from compare_to."""

    def test_equality_and_hash(self):
        first = OpmlOwner("Dave", "dave@example.com")
        second = OpmlOwner("dave", "DAVE@example.com")
        assert first == second
        assert not first != second

    def test_equal_serialisation_hashes_equal(self):
        assert hash(OpmlOwner("Dave")) == hash(OpmlOwner("Dave"))

    def test_none_sorts_first(self):
        owner = OpmlOwner("Dave")
        assert owner > None
        assert not owner < None
        assert owner != None  # noqa: E711

    def test_foreign_type_is_not_equal(self):
        assert OpmlOwner("Dave") != "Dave"

    def test_compare_to_type_mismatch(self):
        with pytest.raises(ComparisonTypeError) as info:
            OpmlOwner("Dave").compare_to(OpmlOutline("x"))
        assert "OpmlOwner" in str(info.value)
        assert "OpmlOutline" in str(info.value)

    def test_type_mismatch_is_type_error(self):
        with pytest.raises(TypeError):
            ensure_comparable("x", OpmlOwner)
