"""
Unit Tests for the Inverted Index

Covers postings, the term dictionary's prefix and fuzzy lookups, and
serialization of a single field index.
"""

import pytest

from lexsuggest_core.index.inverted import (
    InvertedIndex,
    Posting,
    PostingList,
    TermDictionary,
    edit_distance,
)


# ---------------------------------------------------------------------------
# POSTINGS
# ---------------------------------------------------------------------------


class TestPostingList:
    """Test posting list maintenance."""

    def test_postings_stay_sorted(self):
        """Out-of-order adds are inserted by document number."""
        plist = PostingList("nda")
        plist.add(Posting(3))
        plist.add(Posting(1))
        plist.add(Posting(2))
        assert [p.doc_num for p in plist] == [1, 2, 3]
        assert plist.get(2).doc_num == 2

    def test_same_document_merges_frequency(self):
        """Adding the same document again accumulates term frequency."""
        plist = PostingList("nda")
        plist.add(Posting(0, term_freq=1))
        plist.add(Posting(0, term_freq=2))
        assert plist.doc_freq == 1
        assert plist.get(0).term_freq == 3

    def test_merge_rejects_other_document(self):
        """Postings from different documents cannot merge."""
        with pytest.raises(ValueError):
            Posting(0).merge_with(Posting(1))

    def test_list_round_trip(self):
        """Postings serialize to compact pairs."""
        plist = PostingList("nda", [Posting(0, 2), Posting(4, 1)])
        restored = PostingList.from_list("nda", plist.to_list())
        assert restored.to_list() == [[0, 2], [4, 1]]
        assert restored.doc_nums() == {0, 4}


# ---------------------------------------------------------------------------
# TERM DICTIONARY
# ---------------------------------------------------------------------------


class TestTermDictionary:
    """Test prefix and fuzzy term lookups."""

    @pytest.fixture
    def terms(self):
        return TermDictionary(["contract", "contracts", "contour", "compel", "motion"])

    def test_prefix_search(self, terms):
        """Prefix search returns matching terms in sorted order."""
        assert terms.prefix_search("contr") == ["contract", "contracts"]

    def test_prefix_includes_exact_term(self, terms):
        """A complete term is its own prefix."""
        assert "motion" in terms.prefix_search("motion")

    def test_prefix_limit(self, terms):
        """Prefix results respect the limit."""
        assert terms.prefix_search("con", limit=1) == ["contour"]

    def test_empty_prefix(self, terms):
        """An empty prefix matches nothing."""
        assert terms.prefix_search("") == []

    def test_fuzzy_search_sorted_by_distance(self, terms):
        """Fuzzy results are ordered by distance, then term."""
        results = terms.fuzzy_search("contrakt", 2)
        assert results[0] == ("contract", 1)
        assert ("contracts", 2) in results

    def test_fuzzy_zero_distance_disabled(self, terms):
        """A zero distance disables fuzzy lookup."""
        assert terms.fuzzy_search("motion", 0) == []

    def test_add_is_idempotent(self, terms):
        """Adding a known term does not duplicate it."""
        terms.add("motion")
        assert terms.all_terms().count("motion") == 1
        assert len(terms) == 5


class TestEditDistance:
    """Test Levenshtein distance."""

    @pytest.mark.parametrize("a,b,expected", [
        ("kitten", "sitting", 3),
        ("contract", "contract", 0),
        ("contract", "contrct", 1),
        ("", "abc", 3),
    ])
    def test_distances(self, a, b, expected):
        assert edit_distance(a, b) == expected


# ---------------------------------------------------------------------------
# FIELD INDEX
# ---------------------------------------------------------------------------


class TestInvertedIndex:
    """Test a single-field inverted index."""

    @pytest.fixture
    def index(self):
        index = InvertedIndex("title")
        index.index_document(0, ["contract", "review", "contract"])
        index.index_document(1, ["motion", "outline"])
        return index

    def test_term_frequencies(self, index):
        """Term frequency counts repeats within one field."""
        assert index.get_posting_list("contract").get(0).term_freq == 2

    def test_field_lengths(self, index):
        """Field lengths and their average are tracked."""
        assert index.get_field_length(0) == 3
        assert index.get_field_length(1) == 2
        assert index.average_field_length == pytest.approx(2.5)

    def test_empty_field_not_counted(self, index):
        """Documents with no terms do not count toward field statistics."""
        index.index_document(2, [])
        assert index.document_count == 2

    def test_stats(self, index):
        """Stats summarize terms and documents."""
        stats = index.get_stats()
        assert stats["document_count"] == 2
        assert stats["term_count"] == 4

    def test_dict_round_trip(self, index):
        """Serialization preserves postings and lengths."""
        restored = InvertedIndex.from_dict(index.to_dict())
        assert restored.field_name == "title"
        assert restored.get_posting_list("contract").to_list() == [[0, 2]]
        assert restored.average_field_length == pytest.approx(index.average_field_length)
        assert restored.prefix_terms("mo") == ["motion"]
