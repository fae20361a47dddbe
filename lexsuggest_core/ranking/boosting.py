"""LexSuggest Boosting - Score Boosting Functions.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Tuple

class FieldBooster:
    """Field-based score boosting."""

    def __init__(self, field_boosts: Optional[Dict[str, float]] = None):
        self.field_boosts = dict(field_boosts or {})

    def get_boost(self, field: str) -> float:
        return self.field_boosts.get(field, 1.0)

class FunctionScorer:
    """Custom function scoring.

    Each function maps a context object to a factor. With the default
    ``multiply`` modes the factors are multiplied together and then into
    the base score, so a function returning 1.0 leaves the score alone.
    """

    def __init__(self, score_mode: str = "multiply", boost_mode: str = "multiply"):
        self.functions: List[Tuple[str, Callable[[Any], float], float]] = []
        self.score_mode = score_mode
        self.boost_mode = boost_mode

    def add_function(self, name: str, func: Callable[[Any], float], weight: float = 1.0) -> None:
        self.functions.append((name, func, weight))

    def factors(self, context: Any) -> List[Tuple[str, float]]:
        """Evaluate every function, returning (name, factor) pairs."""
        return [(name, weight * func(context)) for name, func, weight in self.functions]

    def combine(self, factors: List[float]) -> float:
        if not factors:
            return 1.0
        if self.score_mode == "sum":
            return sum(factors)
        elif self.score_mode == "max":
            return max(factors)
        elif self.score_mode == "min":
            return min(factors)
        combined = 1.0
        for f in factors:
            combined *= f
        return combined

    def compute(self, context: Any, base_score: float) -> float:
        if not self.functions:
            return base_score

        combined = self.combine([f for _, f in self.factors(context)])

        if self.boost_mode == "replace":
            return combined
        elif self.boost_mode == "sum":
            return base_score + combined
        else:  # multiply
            return base_score * combined

__all__ = ["FieldBooster", "FunctionScorer"]
