"""LexSuggest Search Index - Multi-Field Boosted Index.

Wraps one InvertedIndex per configured field behind a narrow interface
(add, search, serialize, deserialize) so the rest of the system never
touches postings directly.

Query tokens are expanded to index terms three ways:

- exact match, weight 1.0
- prefix match, weight ``prefix_weight * n / (n + 0.3 * extra)``
- fuzzy match, weight ``fuzzy_weight * n / (n + distance)``

where ``n`` is the query token length. Each matched term contributes a
BM25 score multiplied by its field boost and its expansion weight.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from lexsuggest_core.analyzers.base import Analyzer
from lexsuggest_core.analyzers.standard import QueryTermAnalyzer, StandardAnalyzer
from lexsuggest_core.index.inverted import InvertedIndex
from lexsuggest_core.ranking.bm25 import BM25Parameters, BM25Scorer
from lexsuggest_core.ranking.boosting import FieldBooster
from lexsuggest_core.ranking.scorer import ScoringContext

logger = logging.getLogger(__name__)

INDEX_FORMAT = "lexsuggest-index"

DEFAULT_FIELDS = ["title", "description", "tags", "categories"]
DEFAULT_BOOSTS = {"title": 4.0, "tags": 2.0, "categories": 2.0, "description": 1.0}


class CombineMode(Enum):
    """How per-token hit sets are combined."""

    AND = "AND"
    OR = "OR"

    @classmethod
    def parse(cls, value: Any) -> "CombineMode":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper())


@dataclass
class IndexSettings:
    """Index configuration, stored inside the serialized index.

    Attributes:
        fields: Indexed field names
        boosts: Per-field score multipliers
        fuzzy: Edit distance tolerance; a fraction of token length when
            below 1, an absolute distance otherwise, 0 disables
        prefix: Match index terms that start with a query token
        combine_with: Default combination of per-token hit sets
        max_fuzzy: Upper bound on the edit distance
        prefix_weight: Weight of prefix-expanded terms
        fuzzy_weight: Weight of fuzzy-expanded terms
        bm25: BM25 parameters
    """

    fields: List[str] = field(default_factory=lambda: list(DEFAULT_FIELDS))
    boosts: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_BOOSTS))
    fuzzy: float = 0.2
    prefix: bool = True
    combine_with: CombineMode = CombineMode.OR
    max_fuzzy: int = 6
    prefix_weight: float = 0.375
    fuzzy_weight: float = 0.45
    bm25: BM25Parameters = field(default_factory=BM25Parameters)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "fields": list(self.fields),
            "boosts": dict(self.boosts),
            "fuzzy": self.fuzzy,
            "prefix": self.prefix,
            "combine_with": self.combine_with.value,
            "max_fuzzy": self.max_fuzzy,
            "prefix_weight": self.prefix_weight,
            "fuzzy_weight": self.fuzzy_weight,
            "bm25": self.bm25.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IndexSettings":
        """Create from dictionary."""
        defaults = cls()
        return cls(
            fields=list(data.get("fields", defaults.fields)),
            boosts={k: float(v) for k, v in data.get("boosts", defaults.boosts).items()},
            fuzzy=float(data.get("fuzzy", defaults.fuzzy)),
            prefix=bool(data.get("prefix", defaults.prefix)),
            combine_with=CombineMode.parse(data.get("combine_with", defaults.combine_with)),
            max_fuzzy=int(data.get("max_fuzzy", defaults.max_fuzzy)),
            prefix_weight=float(data.get("prefix_weight", defaults.prefix_weight)),
            fuzzy_weight=float(data.get("fuzzy_weight", defaults.fuzzy_weight)),
            bm25=BM25Parameters.from_dict(data.get("bm25", {})),
        )


@dataclass
class SearchOptions:
    """Per-call overrides of the index's default search behavior.

    Attributes:
        combine_with: AND (intersection) or OR (union)
        prefix: Enable prefix expansion
        fuzzy: Fuzzy tolerance (see IndexSettings.fuzzy)
        limit: Keep only the top N hits
    """

    combine_with: Optional[CombineMode] = None
    prefix: Optional[bool] = None
    fuzzy: Optional[float] = None
    limit: Optional[int] = None


@dataclass
class SearchHit:
    """A scored document id.

    Attributes:
        id: Document ID
        score: Relevance score, comparable only within one search
        terms: Query tokens that matched the document
    """

    id: str
    score: float
    terms: List[str] = field(default_factory=list)


def max_edit_distance(token: str, fuzzy: float, max_fuzzy: int) -> int:
    """Resolve a fuzzy setting to an edit distance for one token."""
    if fuzzy <= 0:
        return 0
    if fuzzy < 1:
        # Round half up
        distance = int(len(token) * fuzzy + 0.5)
    else:
        distance = int(fuzzy)
    return min(distance, max_fuzzy)


class SearchIndex:
    """Boosted multi-field inverted index."""

    def __init__(
        self,
        settings: Optional[IndexSettings] = None,
        analyzer: Optional[Analyzer] = None,
        query_analyzer: Optional[Analyzer] = None,
    ):
        """Initialize search index.

        Args:
            settings: Index configuration
            analyzer: Analyzer for indexed field text
            query_analyzer: Analyzer for query strings
        """
        self.settings = settings or IndexSettings()
        self._analyzer = analyzer or StandardAnalyzer()
        self._query_analyzer = query_analyzer or QueryTermAnalyzer()
        self._booster = FieldBooster(self.settings.boosts)
        self._scorer = BM25Scorer(self.settings.bm25)

        self._doc_ids: List[str] = []
        self._doc_nums: Dict[str, int] = {}
        self._fields: Dict[str, InvertedIndex] = {
            name: InvertedIndex(name) for name in self.settings.fields
        }
        self._lock = threading.RLock()

    def add(self, doc_id: str, record: Dict[str, str]) -> int:
        """Index one document record.

        Args:
            doc_id: Unique document ID
            record: Field name to text; unknown fields are ignored

        Returns:
            Dense document number

        Raises:
            ValueError: If the ID is empty or already indexed
        """
        if not doc_id:
            raise ValueError("Document id must not be empty")
        with self._lock:
            if doc_id in self._doc_nums:
                raise ValueError(f"Duplicate document id: {doc_id}")
            doc_num = len(self._doc_ids)
            self._doc_ids.append(doc_id)
            self._doc_nums[doc_id] = doc_num

            for field_name, field_index in self._fields.items():
                text = record.get(field_name) or ""
                field_index.index_document(doc_num, self._analyzer.get_terms(text))

            return doc_num

    def add_all(self, records: Iterable[Tuple[str, Dict[str, str]]]) -> int:
        """Index many (doc_id, record) pairs, returning the count added."""
        count = 0
        for doc_id, record in records:
            self.add(doc_id, record)
            count += 1
        return count

    @property
    def document_count(self) -> int:
        return len(self._doc_ids)

    def doc_ids(self) -> List[str]:
        """Indexed document IDs in corpus order."""
        return list(self._doc_ids)

    def has_document(self, doc_id: str) -> bool:
        return doc_id in self._doc_nums

    def tokenize_query(self, query: str) -> List[str]:
        """Tokenize a query exactly as search() does."""
        return self._query_analyzer.get_terms(query or "")

    def search(self, query: str, options: Optional[SearchOptions] = None) -> List[SearchHit]:
        """Search the index.

        Args:
            query: Free-text query
            options: Per-call overrides

        Returns:
            Hits ordered by score descending, ties in corpus order.
            Empty for an empty or whitespace-only query.
        """
        return self.search_terms(self.tokenize_query(query), options)

    def search_terms(
        self,
        tokens: List[str],
        options: Optional[SearchOptions] = None,
    ) -> List[SearchHit]:
        """Search for pre-tokenized query terms."""
        options = options or SearchOptions()
        combine = options.combine_with or self.settings.combine_with
        prefix = self.settings.prefix if options.prefix is None else options.prefix
        fuzzy = self.settings.fuzzy if options.fuzzy is None else options.fuzzy

        tokens = [t for t in tokens if t]
        if not tokens or not self._doc_ids:
            return []

        per_token: List[Dict[int, float]] = [
            self._score_token(token, prefix, fuzzy) for token in tokens
        ]

        if combine == CombineMode.AND:
            candidates = set(per_token[0])
            for scores in per_token[1:]:
                candidates &= set(scores)
        else:
            candidates = set()
            for scores in per_token:
                candidates |= set(scores)

        hits = []
        for doc_num in candidates:
            matched = [tok for tok, scores in zip(tokens, per_token) if doc_num in scores]
            total = sum(scores.get(doc_num, 0.0) for scores in per_token)
            hits.append((doc_num, total, matched))

        hits.sort(key=lambda h: (-h[1], h[0]))
        if options.limit is not None:
            hits = hits[:options.limit]

        return [
            SearchHit(id=self._doc_ids[doc_num], score=score, terms=matched)
            for doc_num, score, matched in hits
        ]

    def _expand(self, field_index: InvertedIndex, token: str, prefix: bool, fuzzy: float) -> Dict[str, float]:
        """Map index terms matching a token to their expansion weight."""
        n = len(token)
        weights: Dict[str, float] = {}
        if field_index.has_term(token):
            weights[token] = 1.0

        if prefix:
            for term in field_index.prefix_terms(token):
                if term == token:
                    continue
                extra = len(term) - n
                weight = self.settings.prefix_weight * n / (n + 0.3 * extra)
                weights[term] = max(weights.get(term, 0.0), weight)

        distance_limit = max_edit_distance(token, fuzzy, self.settings.max_fuzzy)
        if distance_limit > 0:
            for term, distance in field_index.fuzzy_terms(token, distance_limit):
                if distance == 0:
                    continue
                weight = self.settings.fuzzy_weight * n / (n + distance)
                weights[term] = max(weights.get(term, 0.0), weight)

        return weights

    def _score_token(self, token: str, prefix: bool, fuzzy: float) -> Dict[int, float]:
        """Score every document matching one query token."""
        scores: Dict[int, float] = {}
        total_docs = len(self._doc_ids)

        for field_name, field_index in self._fields.items():
            boost = self._booster.get_boost(field_name)
            avg_len = field_index.average_field_length
            for term, weight in self._expand(field_index, token, prefix, fuzzy).items():
                posting_list = field_index.get_posting_list(term)
                if posting_list is None:
                    continue
                doc_freq = posting_list.doc_freq
                for posting in posting_list:
                    context = ScoringContext(
                        total_docs=total_docs,
                        avg_field_length=avg_len,
                        field_length=field_index.get_field_length(posting.doc_num),
                        boost=boost * weight,
                    )
                    score = self._scorer.score(posting.term_freq, doc_freq, context)
                    scores[posting.doc_num] = scores.get(posting.doc_num, 0.0) + score

        return scores

    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        return {
            "document_count": self.document_count,
            "fields": {name: fi.get_stats() for name, fi in self._fields.items()},
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        with self._lock:
            return {
                "format": INDEX_FORMAT,
                "settings": self.settings.to_dict(),
                "documents": list(self._doc_ids),
                "fields": {name: fi.to_dict() for name, fi in self._fields.items()},
            }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchIndex":
        """Deserialize from :meth:`to_dict` output.

        Raises:
            ValueError: If the structure is not a serialized search index
        """
        if not isinstance(data, dict) or data.get("format") != INDEX_FORMAT:
            raise ValueError("Not a serialized search index")
        try:
            index = cls(IndexSettings.from_dict(data.get("settings", {})))
            index._doc_ids = [str(d) for d in data["documents"]]
            index._doc_nums = {d: i for i, d in enumerate(index._doc_ids)}
            fields = data.get("fields", {})
            index._fields = {
                name: InvertedIndex.from_dict(fields[name]) if name in fields else InvertedIndex(name)
                for name in index.settings.fields
            }
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ValueError(f"Malformed search index: {e}") from e

        doc_count = len(index._doc_ids)
        for name, field_index in index._fields.items():
            stray = sorted(
                d for d in field_index.referenced_doc_nums()
                if not 0 <= d < doc_count
            )
            if stray:
                raise ValueError(
                    f"Malformed search index: field '{name}' references "
                    f"unknown document number(s) {stray[:5]}"
                )
        return index

    def serialize(self) -> bytes:
        """Serialize to UTF-8 JSON bytes."""
        return json.dumps(self.to_dict(), separators=(",", ":")).encode("utf-8")

    @classmethod
    def deserialize(cls, data: bytes) -> "SearchIndex":
        """Deserialize from :meth:`serialize` output.

        Raises:
            ValueError: If the bytes are not a serialized search index
        """
        try:
            parsed = json.loads(data.decode("utf-8") if isinstance(data, bytes) else data)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"Malformed search index: {e}") from e
        return cls.from_dict(parsed)


__all__ = [
    "CombineMode",
    "DEFAULT_BOOSTS",
    "DEFAULT_FIELDS",
    "IndexSettings",
    "SearchHit",
    "SearchIndex",
    "SearchOptions",
    "max_edit_distance",
]
