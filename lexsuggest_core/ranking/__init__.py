"""LexSuggest Ranking Components.

Index-time scoring lives here alongside the query-time re-ranker.
Import the re-ranker from ``lexsuggest_core.ranking.rerank``; it
depends on the index layer, which itself depends on these scorers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsuggest_core.ranking.scorer import Scorer, ScoringContext
from lexsuggest_core.ranking.bm25 import BM25Scorer, BM25Parameters
from lexsuggest_core.ranking.boosting import FieldBooster, FunctionScorer

__all__ = ["Scorer", "ScoringContext", "BM25Scorer", "BM25Parameters", "FieldBooster", "FunctionScorer"]
