"""LexSuggest Re-ranker - Intent-Aware Score Adjustments.

Every adjustment is an independent multiplier registered on a
FunctionScorer, so the order they run in does not matter and each one
can be inspected by name in an explanation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from lexsuggest_core.analyzers.standard import normalize_text
from lexsuggest_core.index.document import DisplayDocument, DocumentType
from lexsuggest_core.query.analyzer import AnalyzedQuery
from lexsuggest_core.query.executor import Candidate
from lexsuggest_core.ranking.boosting import FunctionScorer

logger = logging.getLogger(__name__)

DRAFTY_TITLE = re.compile(r"\b(starter|outline|template|draft)\b")
ASSESSY_TITLE = re.compile(r"\b(assess|viability|strengths? and weaknesses?|analysis)\b")


@dataclass
class RerankContext:
    """Signals shared by every adjustment for one candidate.

    Attributes:
        query: Analyzed query
        document: Candidate document
        title: Normalized title
        description: Normalized description
        in_title: Number of query tokens found in the title
    """

    query: AnalyzedQuery
    document: DisplayDocument
    title: str
    description: str
    in_title: int

    @classmethod
    def build(cls, query: AnalyzedQuery, document: DisplayDocument) -> "RerankContext":
        title = normalize_text(document.title)
        return cls(
            query=query,
            document=document,
            title=title,
            description=normalize_text(document.description),
            in_title=sum(1 for t in query.tokens if t in title),
        )

    @property
    def is_prompt(self) -> bool:
        return self.document.type == DocumentType.PROMPT

    @property
    def title_looks_drafty(self) -> bool:
        return bool(DRAFTY_TITLE.search(self.title))

    @property
    def title_looks_assessy(self) -> bool:
        return bool(ASSESSY_TITLE.search(self.title))


def _when(condition: bool, factor: float) -> float:
    return factor if condition else 1.0


def exact_title_match(ctx: RerankContext) -> float:
    q = ctx.query.normalized
    return _when(bool(q) and q in ctx.title, 1.6)


def title_coverage(ctx: RerankContext) -> float:
    n = len(ctx.query.tokens)
    return _when(n >= 2 and ctx.in_title >= min(3, n), 1.18)


def full_title_coverage(ctx: RerankContext) -> float:
    n = len(ctx.query.tokens)
    return _when(n > 0 and ctx.in_title == n, 1.25)


def draft_prompt(ctx: RerankContext) -> float:
    return _when(ctx.query.has_draft_intent and ctx.is_prompt, 1.12)


def motion_drafty_prompt(ctx: RerankContext) -> float:
    q = ctx.query
    return _when(
        q.has_draft_intent and q.looks_like_motion_subtype and ctx.is_prompt and ctx.title_looks_drafty,
        1.35,
    )


def motion_assessy_mismatch(ctx: RerankContext) -> float:
    q = ctx.query
    return _when(
        q.has_draft_intent and q.looks_like_motion_subtype
        and ctx.title_looks_assessy and not q.has_assess_intent,
        0.65,
    )


def assess_prompt(ctx: RerankContext) -> float:
    return _when(ctx.query.has_assess_intent and ctx.is_prompt, 1.06)


def assess_assessy_title(ctx: RerankContext) -> float:
    return _when(ctx.query.has_assess_intent and ctx.title_looks_assessy, 1.18)


def assess_drafty_title(ctx: RerankContext) -> float:
    return _when(ctx.query.has_assess_intent and ctx.title_looks_drafty, 0.85)


def _no_intent(ctx: RerankContext) -> bool:
    return not ctx.query.has_assess_intent and not ctx.query.has_draft_intent


def generic_drafty_title(ctx: RerankContext) -> float:
    return _when(_no_intent(ctx) and ctx.title_looks_drafty, 1.12)


def generic_assessy_title(ctx: RerankContext) -> float:
    return _when(_no_intent(ctx) and ctx.title_looks_assessy, 0.9)


def description_only(ctx: RerankContext) -> float:
    if ctx.in_title:
        return 1.0
    return _when(any(t in ctx.description for t in ctx.query.tokens), 0.92)


def motion_tool(ctx: RerankContext) -> float:
    return _when(ctx.query.looks_like_motion and ctx.document.type == DocumentType.TOOL, 0.95)


def motion_skill(ctx: RerankContext) -> float:
    return _when(ctx.query.looks_like_motion and ctx.document.type == DocumentType.SKILL, 1.02)


DEFAULT_ADJUSTMENTS = (
    ("exact_title_match", exact_title_match),
    ("title_coverage", title_coverage),
    ("full_title_coverage", full_title_coverage),
    ("draft_prompt", draft_prompt),
    ("motion_drafty_prompt", motion_drafty_prompt),
    ("motion_assessy_mismatch", motion_assessy_mismatch),
    ("assess_prompt", assess_prompt),
    ("assess_assessy_title", assess_assessy_title),
    ("assess_drafty_title", assess_drafty_title),
    ("generic_drafty_title", generic_drafty_title),
    ("generic_assessy_title", generic_assessy_title),
    ("description_only", description_only),
    ("motion_tool", motion_tool),
    ("motion_skill", motion_skill),
)


@dataclass
class RankedResult:
    """A re-ranked candidate.

    Attributes:
        document: Display document
        score: Final score, comparable only within one query
        base_score: Merged retrieval score before adjustments
        adjustments: Applied multipliers other than 1.0, by name
    """

    document: DisplayDocument
    score: float
    base_score: float = 0.0
    adjustments: List[Tuple[str, float]] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.document.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.document.id,
            "type": self.document.type.value,
            "title": self.document.title,
            "base_score": self.base_score,
            "score": self.score,
            "adjustments": [{"name": n, "factor": f} for n, f in self.adjustments],
        }


class IntentReranker:
    """Re-scores candidates with title-match and intent multipliers."""

    def __init__(self, adjustments: Sequence[Tuple[str, Any]] = DEFAULT_ADJUSTMENTS):
        self._scorer = FunctionScorer(score_mode="multiply", boost_mode="multiply")
        for name, func in adjustments:
            self._scorer.add_function(name, func)

    def rerank(self, query: AnalyzedQuery, candidates: List[Candidate]) -> List[RankedResult]:
        """Re-score and sort candidates.

        Args:
            query: Analyzed query
            candidates: Merged candidates in first-appearance order

        Returns:
            Results by final score descending; equal scores keep input order
        """
        results = []
        for candidate in candidates:
            ctx = RerankContext.build(query, candidate.document)
            applied = [(n, f) for n, f in self._scorer.factors(ctx) if f != 1.0]
            results.append(RankedResult(
                document=candidate.document,
                score=self._scorer.compute(ctx, candidate.score),
                base_score=candidate.score,
                adjustments=applied,
            ))

        # sort() is stable
        results.sort(key=lambda r: r.score, reverse=True)
        return results


__all__ = [
    "ASSESSY_TITLE",
    "DEFAULT_ADJUSTMENTS",
    "DRAFTY_TITLE",
    "IntentReranker",
    "RankedResult",
    "RerankContext",
]
