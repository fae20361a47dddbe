"""LexSuggest Query Analyzer - Intent Signals and Query Expansion.

Pure pattern matching over the normalized query. Each intent flag is
one row of an explicit rule table, so the whole heuristic can be read
(and tested) at a glance:

    assess           evaluative wording (assess, viability, risk, ...)
    draft            production wording (draft, outline, motion, ...)
    motion           a legal filing is mentioned
    motion_subtype   "motion to X", "opposition to X", "reply to X"

Motion-shaped queries get drafting-adjacent expansion terms, used as an
auxiliary retrieval pass rather than a replacement for the query.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Pattern, Sequence

from lexsuggest_core.analyzers.base import Analyzer
from lexsuggest_core.analyzers.standard import QueryTermAnalyzer, normalize_text


@dataclass(frozen=True)
class IntentRule:
    """A named intent flag raised when any pattern matches.

    Attributes:
        name: Flag name
        patterns: Regexes tried against the normalized query
    """

    name: str
    patterns: Sequence[str]

    def compiled(self) -> List[Pattern[str]]:
        return [re.compile(p) for p in self.patterns]


ASSESS = "assess"
DRAFT = "draft"
MOTION = "motion"
MOTION_SUBTYPE = "motion_subtype"

DEFAULT_INTENT_RULES = (
    IntentRule(ASSESS, (
        r"\b(assess|evaluate|viability|strengths?|weakness(es)?|analysis|risk|likelihood)\b",
    )),
    IntentRule(DRAFT, (
        r"\b(draft|write|generate|outline|template|starter|motion|brief|opposition|reply|memo)\b",
        r"\bmotion to\b",
    )),
    IntentRule(MOTION, (
        r"\b(motion|brief|opposition|reply)\b",
    )),
    IntentRule(MOTION_SUBTYPE, (
        r"\bmotion to\b",
        r"\b(opposition|reply) to\b",
    )),
)

MOTION_SUBTYPE_EXPANSIONS = ("draft", "outline", "starter", "template", "brief", "headings", "drafting")
MOTION_EXPANSIONS = ("outline", "drafting")


@dataclass
class AnalyzedQuery:
    """A query with its derived signals.

    Attributes:
        raw: The user's input, unchanged
        normalized: Lowercased, punctuation-collapsed, trimmed
        tokens: Deduplicated tokens of ``normalized``
        flags: Intent flag name to value
        expansions: Terms appended for the expanded pass
    """

    raw: str
    normalized: str
    tokens: List[str] = field(default_factory=list)
    flags: Dict[str, bool] = field(default_factory=dict)
    expansions: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    @property
    def has_assess_intent(self) -> bool:
        return self.flags.get(ASSESS, False)

    @property
    def has_draft_intent(self) -> bool:
        return self.flags.get(DRAFT, False)

    @property
    def looks_like_motion(self) -> bool:
        return self.flags.get(MOTION, False)

    @property
    def looks_like_motion_subtype(self) -> bool:
        return self.flags.get(MOTION_SUBTYPE, False)

    @property
    def expanded_query(self) -> str:
        """Tokens followed by expansions, deduplicated, space-joined."""
        terms: List[str] = []
        for term in self.tokens + self.expansions:
            if term not in terms:
                terms.append(term)
        return " ".join(terms)

    @property
    def has_expansion(self) -> bool:
        """True if the expanded query adds anything to the normalized one."""
        return bool(self.expanded_query) and self.expanded_query != self.normalized

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary."""
        return {
            "raw": self.raw,
            "normalized": self.normalized,
            "tokens": list(self.tokens),
            "flags": dict(self.flags),
            "expanded_query": self.expanded_query,
        }


class QueryAnalyzer:
    """Normalizes a query, detects intent flags, and derives an expansion."""

    def __init__(
        self,
        rules: Sequence[IntentRule] = DEFAULT_INTENT_RULES,
        term_analyzer: Optional[Analyzer] = None,
    ):
        """Initialize query analyzer.

        Args:
            rules: Intent rule table
            term_analyzer: Analyzer producing deduplicated tokens
        """
        self.rules = list(rules)
        self._compiled = {rule.name: rule.compiled() for rule in self.rules}
        self._term_analyzer = term_analyzer or QueryTermAnalyzer()

    def analyze(self, raw: str) -> AnalyzedQuery:
        """Analyze a raw query string.

        Args:
            raw: User input; may be empty

        Returns:
            The analyzed query. Empty input yields no tokens and no flags set.
        """
        raw = raw or ""
        normalized = normalize_text(raw)
        tokens = self._term_analyzer.get_terms(normalized)

        flags = {
            name: any(p.search(normalized) for p in patterns)
            for name, patterns in self._compiled.items()
        }

        query = AnalyzedQuery(raw=raw, normalized=normalized, tokens=tokens, flags=flags)
        query.expansions = self.expansions_for(query)
        return query

    def expansions_for(self, query: AnalyzedQuery) -> List[str]:
        """Expansion terms for an analyzed query."""
        if query.looks_like_motion_subtype:
            return list(MOTION_SUBTYPE_EXPANSIONS)
        if query.looks_like_motion:
            return list(MOTION_EXPANSIONS)
        return []


__all__ = [
    "ASSESS",
    "DRAFT",
    "MOTION",
    "MOTION_SUBTYPE",
    "AnalyzedQuery",
    "DEFAULT_INTENT_RULES",
    "IntentRule",
    "QueryAnalyzer",
]
