"""LexSuggest Core Engine - Curated Suggestions.

The SuggestEngine is the externally consumed entry point. It composes
the query analyzer, multi-pass retrieval, re-ranking, and curation over
one explicitly owned IndexRuntime, and reports which of the three UI
states a caller is in:

- NOT_READY: the index is loading or unavailable
- NO_MATCHES: the pipeline ran and nothing survived curation
- OK: results are available

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import os
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generator, List, Optional, Sequence, Tuple, Union

from lexsuggest_core.curation.curator import CurationPolicy, ResultCurator, SuggestContext
from lexsuggest_core.index.builder import DEFAULT_ARTIFACT_KEY
from lexsuggest_core.index.document import DisplayDocument, DocumentType
from lexsuggest_core.index.runtime import IndexRuntime
from lexsuggest_core.index.searchable import CombineMode, SearchOptions
from lexsuggest_core.query.analyzer import AnalyzedQuery, QueryAnalyzer
from lexsuggest_core.query.executor import (
    DEFAULT_PASSES,
    MultiPassRetriever,
    RetrievalPass,
    RetrievalStats,
)
from lexsuggest_core.ranking.rerank import IntentReranker, RankedResult
from lexsuggest_core.storage.backend import StorageConfig
from lexsuggest_core.storage.file import FileStorage

logger = logging.getLogger(__name__)

NOT_READY_MESSAGE = "Search index not available."
NO_MATCHES_MESSAGE = "No matches. Try different wording (or a specific task like 'contract review')."


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in ("true", "1", "yes")


@dataclass
class SuggestConfig:
    """Suggestion engine configuration.

    Attributes:
        index_path: Artifact location on disk
        content_root: Content directory read by the builder
        production_root: Fallback for subdirectories missing from a
            preview content root
        strict_build: Abort builds on invalid documents
        include_playbooks: Index playbooks as well as tools, prompts, skills
        compression: Gzip the artifact on write
        passes: Retrieval passes, run in order
        curation: Caps and per-context exclusions
    """

    index_path: str = os.path.join("public", DEFAULT_ARTIFACT_KEY)
    content_root: str = "content"
    production_root: str = "content"
    strict_build: bool = False
    include_playbooks: bool = False
    compression: bool = False
    passes: Sequence[RetrievalPass] = DEFAULT_PASSES
    curation: CurationPolicy = field(default_factory=CurationPolicy)

    @classmethod
    def from_env(cls) -> "SuggestConfig":
        """Load config from environment variables."""
        defaults = cls()
        production_root = os.environ.get("LEXSUGGEST_PRODUCTION_ROOT", "").strip() or defaults.production_root
        return cls(
            index_path=os.environ.get("LEXSUGGEST_INDEX_PATH", "").strip() or defaults.index_path,
            content_root=os.environ.get("LEXSUGGEST_CONTENT_ROOT", "").strip() or production_root,
            production_root=production_root,
            strict_build=_env_flag("LEXSUGGEST_STRICT_BUILD"),
        )

    def artifact_storage(self) -> Tuple[FileStorage, str]:
        """File storage rooted at the artifact's directory, plus its key."""
        directory, key = os.path.split(self.index_path)
        return FileStorage(StorageConfig(path=directory, compression=self.compression)), key


class SuggestStatus(Enum):
    """Outcome of a suggestion request."""

    NOT_READY = "not_ready"
    EMPTY_QUERY = "empty_query"
    NO_MATCHES = "no_matches"
    OK = "ok"


@dataclass
class SuggestResult:
    """Curated suggestions with their status.

    Attributes:
        status: Which UI state the result maps to
        items: Curated documents, best first
        message: User-facing status text, empty when there is nothing to say
        generation: Caller-supplied generation, echoed back
        took_ms: Time spent in milliseconds
    """

    status: SuggestStatus
    items: List[DisplayDocument] = field(default_factory=list)
    message: str = ""
    generation: Optional[int] = None
    took_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status == SuggestStatus.OK

    def __len__(self) -> int:
        """Return number of items."""
        return len(self.items)

    def __iter__(self) -> Generator[DisplayDocument, None, None]:
        """Iterate over items."""
        yield from self.items

    def __getitem__(self, index: int) -> DisplayDocument:
        """Get item by index."""
        return self.items[index]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "status": self.status.value,
            "message": self.message,
            "generation": self.generation,
            "took_ms": self.took_ms,
            "items": [d.to_dict() for d in self.items],
        }


class GenerationTracker:
    """Hands out request generations for last-issued-wins callers."""

    def __init__(self):
        self._latest = 0
        self._lock = threading.Lock()

    def issue(self) -> int:
        """Issue the next generation number."""
        with self._lock:
            self._latest += 1
            return self._latest

    @property
    def latest(self) -> int:
        return self._latest

    def is_current(self, result: Union[SuggestResult, int, None]) -> bool:
        """True if a result (or generation) is the latest one issued."""
        generation = result.generation if isinstance(result, SuggestResult) else result
        return generation is not None and generation == self._latest


class SuggestEngine:
    """Curated suggestion engine over one index runtime."""

    def __init__(
        self,
        runtime: IndexRuntime,
        config: Optional[SuggestConfig] = None,
        analyzer: Optional[QueryAnalyzer] = None,
        reranker: Optional[IntentReranker] = None,
    ):
        """Initialize suggestion engine.

        Args:
            runtime: Index runtime, loaded or lazily loadable
            config: Engine configuration
            analyzer: Query analyzer
            reranker: Re-ranker
        """
        self.runtime = runtime
        self.config = config or SuggestConfig()
        self.analyzer = analyzer or QueryAnalyzer()
        self.retriever = MultiPassRetriever(runtime, self.config.passes)
        self.reranker = reranker or IntentReranker()
        self.curator = ResultCurator(self.config.curation)

    @classmethod
    def from_config(cls, config: Optional[SuggestConfig] = None) -> "SuggestEngine":
        """Create an engine that lazily loads the configured artifact."""
        config = config or SuggestConfig.from_env()
        storage, key = config.artifact_storage()
        return cls(IndexRuntime.from_storage(storage, key), config)

    def warm(self) -> threading.Thread:
        """Start loading the index in the background."""
        return self.runtime.warm_in_background()

    def _rank(self, query: AnalyzedQuery) -> Tuple[List[RankedResult], RetrievalStats]:
        if query.is_empty or not self.runtime.ensure_loaded():
            return [], RetrievalStats()
        candidates, stats = self.retriever.retrieve(query)
        return self.reranker.rerank(query, candidates), stats

    def rank(self, raw_query: str) -> List[RankedResult]:
        """Analyze, retrieve, and re-rank without curation.

        Returns:
            Ranked results; empty for a blank query or unavailable index
        """
        ranked, _ = self._rank(self.analyzer.analyze(raw_query))
        return ranked

    def suggest(
        self,
        raw_query: str,
        context: Union[SuggestContext, str] = SuggestContext.HOMEPAGE,
        generation: Optional[int] = None,
    ) -> SuggestResult:
        """Get curated suggestions for a free-text query.

        Args:
            raw_query: User input
            context: ``homepage`` (no playbooks) or ``global``
            generation: Caller's request generation, echoed back

        Returns:
            SuggestResult; never raises for blank input or a missing index
        """
        start_time = time.time()

        def result(status: SuggestStatus, items=None, message: str = "") -> SuggestResult:
            return SuggestResult(
                status=status,
                items=items or [],
                message=message,
                generation=generation,
                took_ms=(time.time() - start_time) * 1000,
            )

        context = SuggestContext.parse(context)
        if not (raw_query or "").strip():
            return result(SuggestStatus.EMPTY_QUERY)

        if not self.runtime.ensure_loaded():
            return result(SuggestStatus.NOT_READY, message=NOT_READY_MESSAGE)

        curated = self.curator.curate(self.rank(raw_query), context)
        if not curated:
            return result(SuggestStatus.NO_MATCHES, message=NO_MATCHES_MESSAGE)

        logger.debug(f"Suggested {len(curated)} results for '{raw_query}'")
        return result(SuggestStatus.OK, curated)

    def _strict_prefix_search(self, query: str, limit: int) -> List[DisplayDocument]:
        if not self.runtime.ensure_loaded():
            return []
        hits = self.runtime.search(
            query,
            SearchOptions(combine_with=CombineMode.AND, prefix=True, limit=limit),
        )
        return self.runtime.resolve(hits)

    def search_all(self, query: str, limit: int = 8) -> List[DisplayDocument]:
        """Global search box: all query tokens must match, prefixes allowed.

        Returns:
            At most ``limit`` documents (fewer if hits are unresolvable)
        """
        return self._strict_prefix_search(query, limit)

    def search_tools(self, query: str, limit: int = 1000) -> List[str]:
        """Slugs of matching tools, for filtering a tool listing."""
        return [
            d.slug for d in self._strict_prefix_search(query, limit)
            if d.type == DocumentType.TOOL
        ]

    def explain(self, raw_query: str) -> Dict[str, Any]:
        """Explain how a query was analyzed and each candidate scored."""
        query = self.analyzer.analyze(raw_query)
        ranked, stats = self._rank(query)
        return {
            "query": query.to_dict(),
            "ready": self.runtime.is_ready,
            "passes": dict(stats.pass_hits),
            "candidates": [r.to_dict() for r in ranked],
        }


__all__ = [
    "GenerationTracker",
    "NOT_READY_MESSAGE",
    "NO_MATCHES_MESSAGE",
    "SuggestConfig",
    "SuggestEngine",
    "SuggestResult",
    "SuggestStatus",
]
