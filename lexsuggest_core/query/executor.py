"""LexSuggest Query Executor - Multi-Pass Retrieval.

Runs one analyzed query through several retrieval passes against the
same loaded index and merges the hits into a single candidate list:

    strict    raw query, AND, top 18, weight 1.15
    loose     raw query, OR,  top 24, weight 1.0
    expanded  expanded query, OR, top 24, weight 0.95
              (only when the expansion differs from the normalized query)

A candidate's merged score is the sum of ``pass_score * pass_weight``
over every pass it appeared in. Candidates keep first-appearance order,
which later serves as the stable tiebreak.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from lexsuggest_core.index.document import DisplayDocument
from lexsuggest_core.index.runtime import IndexRuntime
from lexsuggest_core.index.searchable import CombineMode, SearchOptions
from lexsuggest_core.query.analyzer import AnalyzedQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetrievalPass:
    """One retrieval strategy.

    Attributes:
        name: Pass name, used in explanations
        combine_with: AND (intersection) or OR (union)
        weight: Multiplier on this pass's hit scores
        limit: Keep only the pass's top N hits
        use_expanded: Search the expanded query instead of the raw one
    """

    name: str
    combine_with: CombineMode
    weight: float
    limit: Optional[int] = None
    use_expanded: bool = False

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "combine_with": self.combine_with.value,
            "weight": self.weight,
            "limit": self.limit,
            "use_expanded": self.use_expanded,
        }


DEFAULT_PASSES = (
    RetrievalPass("strict", CombineMode.AND, 1.15, limit=18),
    RetrievalPass("loose", CombineMode.OR, 1.0, limit=24),
    RetrievalPass("expanded", CombineMode.OR, 0.95, limit=24, use_expanded=True),
)


@dataclass
class Candidate:
    """A resolved document with its merged retrieval score.

    Attributes:
        document: Display document
        score: Accumulated weighted score
        passes: Names of the passes that returned the document
    """

    document: DisplayDocument
    score: float = 0.0
    passes: List[str] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.document.id


@dataclass
class RetrievalStats:
    """Statistics about one multi-pass retrieval.

    Attributes:
        pass_hits: Hits kept per pass
        unresolved: Hit IDs with no document, dropped
        took_ms: Retrieval time in milliseconds
    """

    pass_hits: Dict[str, int] = field(default_factory=dict)
    unresolved: int = 0
    took_ms: float = 0.0


class MultiPassRetriever:
    """Blends several searches of one index into one candidate list."""

    def __init__(
        self,
        runtime: IndexRuntime,
        passes: Sequence[RetrievalPass] = DEFAULT_PASSES,
    ):
        """Initialize retriever.

        Args:
            runtime: Loaded index runtime
            passes: Retrieval passes, run in order
        """
        self.runtime = runtime
        self.passes = list(passes)

    def retrieve(self, query: AnalyzedQuery) -> Tuple[List[Candidate], RetrievalStats]:
        """Run every applicable pass and merge the hits.

        Args:
            query: Analyzed query

        Returns:
            Candidates in first-appearance order with unresolvable IDs
            dropped, and the statistics of this call
        """
        start_time = time.time()
        stats = RetrievalStats()
        merged: Dict[str, Candidate] = {}

        if query.is_empty:
            return [], stats

        for retrieval_pass in self.passes:
            if retrieval_pass.use_expanded:
                if not query.has_expansion:
                    continue
                text = query.expanded_query
            else:
                text = query.raw

            hits = self.runtime.search(
                text,
                SearchOptions(combine_with=retrieval_pass.combine_with, limit=retrieval_pass.limit),
            )
            stats.pass_hits[retrieval_pass.name] = len(hits)

            for hit in hits:
                candidate = merged.get(hit.id)
                if candidate is None:
                    document = self.runtime.get_document(hit.id)
                    if document is None:
                        stats.unresolved += 1
                        continue
                    candidate = Candidate(document=document)
                    merged[hit.id] = candidate
                candidate.score += hit.score * retrieval_pass.weight
                candidate.passes.append(retrieval_pass.name)

        stats.took_ms = (time.time() - start_time) * 1000

        logger.debug(
            f"Retrieved {len(merged)} candidates for '{query.normalized}' "
            f"(passes {stats.pass_hits}) in {stats.took_ms:.1f}ms"
        )
        return list(merged.values()), stats


__all__ = [
    "Candidate",
    "DEFAULT_PASSES",
    "MultiPassRetriever",
    "RetrievalPass",
    "RetrievalStats",
]
