"""LexSuggest - Intent-Aware Search for a Legal Tools Directory.

Pre-built full-text search over tools, prompts, skills, and playbooks,
plus a curated suggestion layer that blends several retrieval passes,
re-ranks by drafting/assessment intent, and returns a short,
type-balanced list.

Architecture:
┌─────────────────────────────────────────────────────────────────────────────┐
│                             LexSuggest                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                     Build (offline, batch)                          │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │  Content   │→ │   Index    │→ │  Artifact  │→ │  Storage   │    │   │
│   │  │  Loader    │  │  Builder   │  │   (JSON)   │  │  Backend   │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                     Index Runtime (load once)                       │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │  Analyzer  │  │  Inverted  │  │   BM25 +   │  │  Display   │    │   │
│   │  │  Pipeline  │  │   Index    │  │   Boosts   │  │  Documents │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                     Suggest Pipeline (per query)                    │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │   Query    │→ │ Multi-Pass │→ │   Intent   │→ │   Result   │    │   │
│   │  │  Analyzer  │  │ Retrieval  │  │  Reranker  │  │  Curator   │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Key Features:
- Field-boosted BM25 with prefix and typo-tolerant fuzzy matching
- Self-describing JSON index artifact, built once and loaded anywhere
- Rule-table intent detection and motion-aware query expansion
- Strict, loose, and expanded retrieval passes blended by weight
- Per-type caps and context-specific exclusions for curated results

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Core engine
from lexsuggest_core.engine import (
    GenerationTracker,
    SuggestConfig,
    SuggestEngine,
    SuggestResult,
    SuggestStatus,
)

# Index components
from lexsuggest_core.index.document import (
    DisplayDocument,
    Document,
    DocumentType,
)
from lexsuggest_core.index.searchable import (
    CombineMode,
    IndexSettings,
    SearchHit,
    SearchIndex,
    SearchOptions,
)
from lexsuggest_core.index.artifact import (
    ArtifactFormatError,
    IndexArtifact,
)
from lexsuggest_core.index.builder import (
    IndexBuildError,
    IndexBuilder,
)
from lexsuggest_core.index.runtime import (
    IndexRuntime,
    RuntimeState,
)

# Query components
from lexsuggest_core.query.analyzer import (
    AnalyzedQuery,
    QueryAnalyzer,
)
from lexsuggest_core.query.executor import (
    MultiPassRetriever,
    RetrievalPass,
)

# Analyzers
from lexsuggest_core.analyzers.standard import (
    StandardAnalyzer,
    normalize_text,
)

# Ranking
from lexsuggest_core.ranking.rerank import (
    IntentReranker,
    RankedResult,
)

# Curation
from lexsuggest_core.curation.curator import (
    CurationPolicy,
    ResultCurator,
    SuggestContext,
)

# Content
from lexsuggest_core.content.loader import (
    ContentError,
    ContentLoader,
)

# Storage
from lexsuggest_core.storage.backend import (
    StorageBackend,
    StorageConfig,
)
from lexsuggest_core.storage.memory import MemoryStorage
from lexsuggest_core.storage.file import FileStorage

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Core
    "GenerationTracker",
    "SuggestConfig",
    "SuggestEngine",
    "SuggestResult",
    "SuggestStatus",
    # Index
    "DisplayDocument",
    "Document",
    "DocumentType",
    "CombineMode",
    "IndexSettings",
    "SearchHit",
    "SearchIndex",
    "SearchOptions",
    "ArtifactFormatError",
    "IndexArtifact",
    "IndexBuildError",
    "IndexBuilder",
    "IndexRuntime",
    "RuntimeState",
    # Query
    "AnalyzedQuery",
    "QueryAnalyzer",
    "MultiPassRetriever",
    "RetrievalPass",
    # Analyzers
    "StandardAnalyzer",
    "normalize_text",
    # Ranking
    "IntentReranker",
    "RankedResult",
    # Curation
    "CurationPolicy",
    "ResultCurator",
    "SuggestContext",
    # Content
    "ContentError",
    "ContentLoader",
    # Storage
    "StorageBackend",
    "StorageConfig",
    "MemoryStorage",
    "FileStorage",
]
