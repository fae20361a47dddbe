"""LexSuggest Documents - Corpus and Display Document Types.

A Document is one indexable directory entry (tool, prompt, skill, or
playbook). The index only needs a display subset of it at query time.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class DocumentType(Enum):
    """Directory entry types."""

    TOOL = "tool"
    PROMPT = "prompt"
    SKILL = "skill"
    PLAYBOOK = "playbook"

    @classmethod
    def parse(cls, value: Any) -> "DocumentType":
        """Parse a type from its string value.

        Raises:
            ValueError: If the value is not a known type
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


REQUIRED_FIELDS = ("id", "type", "slug", "title")


def make_document_id(doc_type: DocumentType, slug: str) -> str:
    """Build the stable document id ``type:slug``."""
    return f"{doc_type.value}:{slug}"


def _unique_labels(labels: Optional[List[str]]) -> List[str]:
    """Strip, drop empties, and collapse duplicates preserving order."""
    seen = set()
    result = []
    for label in labels or []:
        text = str(label).strip()
        key = text.lower()
        if not text or key in seen:
            continue
        seen.add(key)
        result.append(text)
    return result


@dataclass
class DisplayDocument:
    """The subset of a document needed to render and route a result.

    Attributes:
        id: Document ID (``type:slug``)
        type: Document type
        slug: Slug, unique within type
        title: Display title
        description: Display description
    """

    id: str
    type: DocumentType
    slug: str
    title: str
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "type": self.type.value,
            "slug": self.slug,
            "title": self.title,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DisplayDocument":
        """Create from dictionary."""
        return cls(
            id=str(data["id"]),
            type=DocumentType.parse(data["type"]),
            slug=str(data["slug"]),
            title=str(data["title"]),
            description=str(data.get("description") or ""),
        )


@dataclass
class Document:
    """A corpus document for indexing.

    Attributes:
        id: Unique document identifier, derived from type and slug
        type: Document type
        slug: Slug, unique within type
        title: Human-authored title
        description: Human-authored description
        tags: Free-text labels
        categories: Free-text taxonomy labels
    """

    type: DocumentType
    slug: str
    title: str
    description: str = ""
    tags: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    id: str = ""

    def __post_init__(self):
        """Derive ID from type and slug if not provided."""
        if not self.id and self.slug and isinstance(self.type, DocumentType):
            self.id = make_document_id(self.type, self.slug)

    def missing_fields(self) -> List[str]:
        """List required fields that are absent or blank."""
        missing = []
        for name in REQUIRED_FIELDS:
            value = getattr(self, name)
            if name == "type":
                if not isinstance(value, DocumentType):
                    missing.append(name)
            elif not isinstance(value, str) or not value.strip():
                missing.append(name)
        return missing

    def to_record(self) -> Dict[str, str]:
        """Build the synthetic record of indexed fields."""
        return {
            "title": self.title,
            "description": self.description or "",
            "tags": " ".join(_unique_labels(self.tags)),
            "categories": " ".join(_unique_labels(self.categories)),
        }

    def to_display(self) -> DisplayDocument:
        """Project to the display subset."""
        return DisplayDocument(
            id=self.id,
            type=self.type,
            slug=self.slug,
            title=self.title,
            description=self.description or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "type": self.type.value,
            "slug": self.slug,
            "title": self.title,
            "description": self.description,
            "tags": list(self.tags),
            "categories": list(self.categories),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        """Create from dictionary.

        Raises:
            ValueError: If ``type`` is not a known document type
        """
        return cls(
            id=str(data.get("id") or ""),
            type=DocumentType.parse(data.get("type")),
            slug=str(data.get("slug") or ""),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            tags=list(data.get("tags") or []),
            categories=list(data.get("categories") or []),
        )


__all__ = [
    "DisplayDocument",
    "Document",
    "DocumentType",
    "REQUIRED_FIELDS",
    "make_document_id",
]
