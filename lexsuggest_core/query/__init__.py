"""LexSuggest Query Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsuggest_core.query.analyzer import (
    AnalyzedQuery,
    DEFAULT_INTENT_RULES,
    IntentRule,
    QueryAnalyzer,
)
from lexsuggest_core.query.executor import (
    Candidate,
    DEFAULT_PASSES,
    MultiPassRetriever,
    RetrievalPass,
    RetrievalStats,
)

__all__ = [
    "AnalyzedQuery",
    "DEFAULT_INTENT_RULES",
    "IntentRule",
    "QueryAnalyzer",
    "Candidate",
    "DEFAULT_PASSES",
    "MultiPassRetriever",
    "RetrievalPass",
    "RetrievalStats",
]
