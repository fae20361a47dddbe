"""LexSuggest Inverted Index - Per-Field Full-Text Index.

The inverted index maps terms to their occurrences in documents,
enabling token lookups with exact, prefix, and fuzzy term expansion.
Documents are referenced by a dense integer number assigned in
corpus order, which keeps the serialized form compact.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import bisect
import logging
import threading
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)


@dataclass
class Posting:
    """A posting (term occurrence) in a document.

    Attributes:
        doc_num: Dense document number
        term_freq: Term frequency in the field
    """

    doc_num: int
    term_freq: int = 1

    def __lt__(self, other: "Posting") -> bool:
        """Compare by doc_num for sorting."""
        return self.doc_num < other.doc_num

    def merge_with(self, other: "Posting") -> None:
        """Merge another posting into this one."""
        if self.doc_num != other.doc_num:
            raise ValueError("Cannot merge postings from different documents")
        self.term_freq += other.term_freq


class PostingList:
    """A list of postings for a term, ordered by document number."""

    def __init__(self, term: str, postings: Optional[List[Posting]] = None):
        """Initialize posting list.

        Args:
            term: The term text
            postings: Initial postings
        """
        self.term = term
        self._postings: List[Posting] = sorted(postings or [])
        self._doc_index: Dict[int, int] = {}
        self._rebuild_index()

    def _rebuild_index(self) -> None:
        """Rebuild document number index."""
        self._doc_index = {p.doc_num: i for i, p in enumerate(self._postings)}

    def add(self, posting: Posting) -> None:
        """Add a posting, merging with an existing one for the same document."""
        idx = self._doc_index.get(posting.doc_num)
        if idx is not None:
            self._postings[idx].merge_with(posting)
            return
        if self._postings and posting.doc_num < self._postings[-1].doc_num:
            bisect.insort(self._postings, posting)
            self._rebuild_index()
        else:
            self._postings.append(posting)
            self._doc_index[posting.doc_num] = len(self._postings) - 1

    def get(self, doc_num: int) -> Optional[Posting]:
        """Get posting for document."""
        idx = self._doc_index.get(doc_num)
        if idx is not None:
            return self._postings[idx]
        return None

    @property
    def doc_freq(self) -> int:
        """Number of documents containing the term."""
        return len(self._postings)

    def doc_nums(self) -> Set[int]:
        """Get all document numbers."""
        return set(self._doc_index.keys())

    def __len__(self) -> int:
        return len(self._postings)

    def __iter__(self) -> Iterator[Posting]:
        return iter(self._postings)

    def to_list(self) -> List[List[int]]:
        """Serialize to ``[[doc_num, term_freq], ...]``."""
        return [[p.doc_num, p.term_freq] for p in self._postings]

    @classmethod
    def from_list(cls, term: str, data: List[List[int]]) -> "PostingList":
        """Deserialize from ``[[doc_num, term_freq], ...]``."""
        return cls(term, [Posting(doc_num=int(d), term_freq=int(tf)) for d, tf in data])


class TermDictionary:
    """Sorted term dictionary supporting prefix and fuzzy lookups."""

    def __init__(self, terms: Optional[List[str]] = None):
        self._terms: List[str] = sorted(set(terms or []))
        self._term_set: Set[str] = set(self._terms)
        self._lock = threading.RLock()

    def add(self, term: str) -> None:
        """Add term to dictionary."""
        with self._lock:
            if term in self._term_set:
                return
            bisect.insort(self._terms, term)
            self._term_set.add(term)

    def __contains__(self, term: str) -> bool:
        return term in self._term_set

    def __len__(self) -> int:
        return len(self._terms)

    def prefix_search(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """Search for terms by prefix.

        Args:
            prefix: Term prefix
            limit: Maximum results

        Returns:
            Matching terms in sorted order, including ``prefix`` itself
        """
        if not prefix:
            return []
        with self._lock:
            results = []
            start = bisect.bisect_left(self._terms, prefix)
            for term_text in self._terms[start:]:
                if not term_text.startswith(prefix):
                    break  # Past possible matches
                results.append(term_text)
                if limit is not None and len(results) >= limit:
                    break
            return results

    def fuzzy_search(self, text: str, max_distance: int) -> List[Tuple[str, int]]:
        """Search for terms by edit distance.

        Args:
            text: Target text
            max_distance: Maximum edit distance

        Returns:
            List of (term, distance) tuples sorted by distance then term
        """
        if max_distance <= 0 or not text:
            return []
        with self._lock:
            results = []
            for term_text in self._terms:
                if abs(len(term_text) - len(text)) > max_distance:
                    continue
                distance = edit_distance(text, term_text)
                if distance <= max_distance:
                    results.append((term_text, distance))
            results.sort(key=lambda x: (x[1], x[0]))
            return results

    def all_terms(self) -> List[str]:
        """Get all terms in sorted order."""
        return list(self._terms)


def edit_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance."""
    if len(s1) < len(s2):
        return edit_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


class InvertedIndex:
    """Inverted index for a single field."""

    def __init__(self, field_name: str):
        """Initialize inverted index.

        Args:
            field_name: Field name for this index
        """
        self.field_name = field_name

        self._posting_lists: Dict[str, PostingList] = {}
        self._term_dictionary = TermDictionary()
        self._field_lengths: Dict[int, int] = {}  # doc_num -> token count
        self._total_terms = 0
        self._lock = threading.RLock()

    def index_document(self, doc_num: int, terms: List[str]) -> None:
        """Index analyzed terms from one document's field.

        Args:
            doc_num: Dense document number
            terms: Analyzed terms, in field order
        """
        with self._lock:
            if not terms:
                return

            for term_text, freq in Counter(terms).items():
                posting_list = self._posting_lists.get(term_text)
                if posting_list is None:
                    posting_list = PostingList(term_text)
                    self._posting_lists[term_text] = posting_list
                    self._term_dictionary.add(term_text)
                posting_list.add(Posting(doc_num=doc_num, term_freq=freq))

            self._field_lengths[doc_num] = len(terms)
            self._total_terms += len(terms)

    def get_posting_list(self, term: str) -> Optional[PostingList]:
        """Get posting list for term."""
        return self._posting_lists.get(term)

    def get_field_length(self, doc_num: int) -> int:
        """Get field length (token count) for document."""
        return self._field_lengths.get(doc_num, 0)

    def prefix_terms(self, prefix: str) -> List[str]:
        """Get terms starting with prefix."""
        return self._term_dictionary.prefix_search(prefix)

    def fuzzy_terms(self, text: str, max_distance: int) -> List[Tuple[str, int]]:
        """Get terms within an edit distance of text."""
        return self._term_dictionary.fuzzy_search(text, max_distance)

    def has_term(self, term: str) -> bool:
        return term in self._term_dictionary

    def referenced_doc_nums(self) -> Set[int]:
        """Document numbers named by field lengths or postings."""
        doc_nums = set(self._field_lengths)
        for posting_list in self._posting_lists.values():
            doc_nums |= posting_list.doc_nums()
        return doc_nums

    @property
    def document_count(self) -> int:
        """Number of documents with a non-empty field."""
        return len(self._field_lengths)

    @property
    def term_count(self) -> int:
        """Get unique term count."""
        return len(self._posting_lists)

    @property
    def average_field_length(self) -> float:
        """Get average field length."""
        return self._total_terms / max(1, len(self._field_lengths))

    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        return {
            "field_name": self.field_name,
            "document_count": self.document_count,
            "term_count": self.term_count,
            "total_terms": self._total_terms,
            "avg_field_length": self.average_field_length,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        with self._lock:
            return {
                "field": self.field_name,
                "lengths": [[d, n] for d, n in sorted(self._field_lengths.items())],
                "postings": {
                    term: self._posting_lists[term].to_list()
                    for term in self._term_dictionary.all_terms()
                },
            }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InvertedIndex":
        """Deserialize from :meth:`to_dict` output."""
        index = cls(str(data["field"]))
        for doc_num, length in data.get("lengths", []):
            index._field_lengths[int(doc_num)] = int(length)
            index._total_terms += int(length)
        postings = data.get("postings", {})
        for term, entries in postings.items():
            index._posting_lists[term] = PostingList.from_list(term, entries)
        index._term_dictionary = TermDictionary(list(postings.keys()))
        return index


__all__ = [
    "InvertedIndex",
    "Posting",
    "PostingList",
    "TermDictionary",
    "edit_distance",
]
