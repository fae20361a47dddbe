"""LexSuggest Scorer - Base Scoring Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass

@dataclass
class ScoringContext:
    """Context for scoring one field of one document."""
    total_docs: int = 0
    avg_field_length: float = 0.0
    field_length: int = 0
    boost: float = 1.0

class Scorer(ABC):
    """Base scorer class."""

    @abstractmethod
    def score(self, term_freq: int, doc_freq: int, context: ScoringContext) -> float:
        pass

__all__ = ["Scorer", "ScoringContext"]
