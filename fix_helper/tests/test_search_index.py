"""
Tests for Tag Search Index

Tests cover:
- Sorting by tag number
- Substring filtering over the composite text
- Order preservation, idempotence and case-insensitivity
"""

import pytest

from fix_helper.dictionary.models import TagDefinition, VersionCatalog
from fix_helper.search.index import (
    TagSearchIndex,
    build_sorted_list,
    composite_text,
    filter_tags,
)


def _is_subsequence(subset, full):
    it = iter(full)
    return all(any(item is candidate for candidate in it) for item in subset)


@pytest.fixture
def side_symbol_list(sample_catalog):
    return build_sorted_list(sample_catalog.get_version("FIX.4.4"))


class TestBuildSortedList:
    """Tests for sorting a version's tags."""

    def test_sorted_ascending(self, sample_catalog):
        """Test tags come out in ascending tag-number order."""
        tags = build_sorted_list(sample_catalog.get_version("FIX.4.2"))
        assert [t.tag_number for t in tags] == [8, 35, 40]

    def test_bundled_versions_strictly_increasing(self, bundled_catalog):
        """Test every bundled version sorts strictly increasing."""
        for version_id in bundled_catalog.get_versions():
            numbers = [t.tag_number for t in build_sorted_list(bundled_catalog.get_version(version_id))]
            assert numbers
            assert all(a < b for a, b in zip(numbers, numbers[1:]))

    def test_empty_version(self):
        """Test sorting an empty version."""
        assert build_sorted_list(VersionCatalog(version_id="FIX.X", tags={})) == []


class TestCompositeText:
    """Tests for the searchable text of a tag."""

    def test_full_text(self):
        """Test number, name, type and enum descriptions are all included."""
        tag = TagDefinition(54, "Side", "CHAR", {"1": "Buy", "2": "Sell"})
        assert composite_text(tag) == "54 side char buy sell"

    def test_missing_type_and_enums(self):
        """Test optional parts render as empty."""
        tag = TagDefinition(55, "Symbol")
        assert composite_text(tag) == "55 symbol  "

    def test_enum_codes_not_included(self):
        """Test enum codes are not part of the text, only descriptions."""
        tag = TagDefinition(43, "PossDupFlag", "BOOLEAN", {"QQ": "Possible duplicate"})
        assert "qq" not in composite_text(tag)


class TestFilterTags:
    """Tests for filtering a sorted list."""

    def test_match_enum_description(self, side_symbol_list):
        """Test a query matching an enum description."""
        result = filter_tags(side_symbol_list, "sell")
        assert [t.tag_number for t in result] == [54]

    def test_match_tag_number(self, side_symbol_list):
        """Test a query matching a tag number."""
        result = filter_tags(side_symbol_list, "55")
        assert [t.tag_number for t in result] == [55]

    def test_no_match(self, side_symbol_list):
        """Test a query without matches."""
        assert filter_tags(side_symbol_list, "zzz") == []

    def test_empty_query_returns_everything(self, side_symbol_list):
        """Test the empty query is the identity."""
        assert filter_tags(side_symbol_list, "") == side_symbol_list

    def test_empty_list(self):
        """Test filtering an empty list."""
        assert filter_tags([], "side") == []
        assert filter_tags([], "") == []

    def test_case_insensitive(self, side_symbol_list):
        """Test upper and lower case queries agree."""
        assert filter_tags(side_symbol_list, "BUY") == filter_tags(side_symbol_list, "buy")
        assert [t.tag_number for t in filter_tags(side_symbol_list, "SyMbOl")] == [55]

    def test_substring_not_tokenized(self, side_symbol_list):
        """Test matching spans field boundaries of the composite text."""
        assert [t.tag_number for t in filter_tags(side_symbol_list, "54 side")] == [54]
        assert [t.tag_number for t in filter_tags(side_symbol_list, "ymb")] == [55]

    def test_match_type(self, side_symbol_list):
        """Test a query matching the data type."""
        assert [t.tag_number for t in filter_tags(side_symbol_list, "char")] == [54]

    @pytest.mark.parametrize("query", ["", "s", "5", "sell", "buy", "x", "55", "char"])
    def test_subsequence_and_idempotent(self, bundled_catalog, query):
        """Test results are an ordered subsequence and filtering twice is a no-op."""
        full = build_sorted_list(bundled_catalog.get_version("FIX.4.4"))
        once = filter_tags(full, query)
        assert _is_subsequence(once, full)
        assert filter_tags(once, query) == once

    def test_bundled_side_search(self, bundled_catalog):
        """Test searching the bundled FIX.4.4 data for an enum description."""
        full = build_sorted_list(bundled_catalog.get_version("FIX.4.4"))
        numbers = [t.tag_number for t in filter_tags(full, "sell short exempt")]
        assert numbers == [54]


class TestTagSearchIndex:
    """Tests for the per-version index."""

    def test_entries_sorted_once(self, sample_catalog):
        """Test the index exposes the sorted list."""
        index = TagSearchIndex(sample_catalog.get_version("FIX.4.2"))
        assert [t.tag_number for t in index.entries] == [8, 35, 40]
        assert len(index) == 3
        assert index.version_id == "FIX.4.2"

    def test_search_matches_filter_tags(self, bundled_catalog):
        """Test the index agrees with filter_tags."""
        version = bundled_catalog.get_version("FIX.4.4")
        index = TagSearchIndex(version)
        for query in ["", "order", "LIMIT", "35", "qty", "nothing-here"]:
            assert index.search(query) == filter_tags(build_sorted_list(version), query)

    def test_entries_are_copies(self, sample_catalog):
        """Test callers cannot reorder the index."""
        index = TagSearchIndex(sample_catalog.get_version("FIX.4.2"))
        entries = index.entries
        entries.reverse()
        assert [t.tag_number for t in index.entries] == [8, 35, 40]

    @pytest.mark.parametrize("version_id", ["FIX.4.2", "FIX.4.4", "FIX.5.0SP2"])
    @pytest.mark.parametrize("query", ["", "SeLL", "char", "54 side", "ymb", "market"])
    def test_search_shares_matching_rule(self, bundled_catalog, version_id, query):
        """Test the precomputed index and filter_tags select the same tags."""
        version = bundled_catalog.get_version(version_id)
        index = TagSearchIndex(version)
        assert index.search(query) == filter_tags(index.entries, query)
