"""LexSuggest Result Curator - Type-Balanced Short Lists.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Set

from lexsuggest_core.index.document import DisplayDocument, DocumentType
from lexsuggest_core.ranking.rerank import RankedResult

logger = logging.getLogger(__name__)

class SuggestContext(Enum):
    """Where suggestions are shown."""

    HOMEPAGE = "homepage"
    GLOBAL = "global"

    @classmethod
    def parse(cls, value: Any) -> "SuggestContext":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

def _default_caps() -> Dict[DocumentType, int]:
    return {
        DocumentType.TOOL: 4,
        DocumentType.PROMPT: 3,
        DocumentType.SKILL: 3,
        DocumentType.PLAYBOOK: 3,
    }

def _default_exclusions() -> Dict[SuggestContext, Set[DocumentType]]:
    return {
        SuggestContext.HOMEPAGE: {DocumentType.PLAYBOOK},
        SuggestContext.GLOBAL: set(),
    }

@dataclass
class CurationPolicy:
    """Per-type caps, global cap, and per-context type exclusions."""

    type_caps: Dict[DocumentType, int] = field(default_factory=_default_caps)
    max_results: int = 10
    excluded_types: Dict[SuggestContext, Set[DocumentType]] = field(default_factory=_default_exclusions)

    def cap_for(self, doc_type: DocumentType) -> int:
        return self.type_caps.get(doc_type, self.max_results)

    def is_excluded(self, doc_type: DocumentType, context: SuggestContext) -> bool:
        return doc_type in self.excluded_types.get(context, set())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type_caps": {t.value: c for t, c in self.type_caps.items()},
            "max_results": self.max_results,
            "excluded_types": {
                c.value: sorted(t.value for t in types)
                for c, types in self.excluded_types.items()
            },
        }

class ResultCurator:
    """Dedupes, excludes, caps per type, and truncates ranked results."""

    def __init__(self, policy: Optional[CurationPolicy] = None):
        self.policy = policy or CurationPolicy()

    def curate(
        self,
        ranked: Iterable[RankedResult],
        context: SuggestContext = SuggestContext.HOMEPAGE,
    ) -> List[DisplayDocument]:
        context = SuggestContext.parse(context)
        curated: List[DisplayDocument] = []
        seen: Set[str] = set()
        buckets: Dict[DocumentType, int] = {}

        for result in ranked:
            doc = result.document
            if doc.id in seen or self.policy.is_excluded(doc.type, context):
                continue
            if buckets.get(doc.type, 0) >= self.policy.cap_for(doc.type):
                continue
            curated.append(doc)
            seen.add(doc.id)
            buckets[doc.type] = buckets.get(doc.type, 0) + 1
            if len(curated) >= self.policy.max_results:
                break

        counts = {t.value: c for t, c in buckets.items()}
        logger.debug(f"Curated {len(curated)} results for {context.value}: {counts}")
        return curated

__all__ = ["CurationPolicy", "ResultCurator", "SuggestContext"]
