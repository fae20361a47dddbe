"""LexSuggest Index Artifact - Serialized Index Distribution Format.

An artifact is built once per corpus and consumed many times. It holds
the serialized search index plus the display subset of every document,
so a runtime needs nothing else to answer queries.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from lexsuggest_core.index.document import DisplayDocument

logger = logging.getLogger(__name__)

ARTIFACT_VERSION = 1


class ArtifactFormatError(ValueError):
    """Raised when artifact bytes or structure are malformed."""


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class IndexArtifact:
    """Serialized Index Artifact.

    Attributes:
        version: Artifact format version
        built_at: ISO-8601 build timestamp, informational only
        index: The search index's own serialization
        docs: Display documents, in corpus order
    """

    index: Dict[str, Any]
    docs: List[DisplayDocument] = field(default_factory=list)
    version: int = ARTIFACT_VERSION
    built_at: str = field(default_factory=utc_now_iso)

    @property
    def doc_count(self) -> int:
        return len(self.docs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "version": self.version,
            "built_at": self.built_at,
            "doc_count": self.doc_count,
            "index": self.index,
            "docs": [d.to_dict() for d in self.docs],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IndexArtifact":
        """Create from dictionary.

        Raises:
            ArtifactFormatError: On unsupported versions or missing keys
        """
        if not isinstance(data, dict):
            raise ArtifactFormatError("Artifact must be a JSON object")

        version = data.get("version")
        if not isinstance(version, int):
            raise ArtifactFormatError("Artifact version missing or not an integer")
        if version > ARTIFACT_VERSION:
            raise ArtifactFormatError(
                f"Artifact version {version} is newer than supported version {ARTIFACT_VERSION}"
            )

        if "index" not in data or "docs" not in data:
            raise ArtifactFormatError("Artifact must contain 'index' and 'docs'")

        try:
            docs = [DisplayDocument.from_dict(d) for d in data["docs"]]
        except (KeyError, TypeError, ValueError) as e:
            raise ArtifactFormatError(f"Malformed document entry: {e}") from e

        doc_count = data.get("doc_count")
        if doc_count is not None and doc_count != len(docs):
            logger.warning(f"Artifact doc_count {doc_count} does not match {len(docs)} docs")

        return cls(
            version=version,
            built_at=str(data.get("built_at") or data.get("built_at_iso") or ""),
            index=data["index"],
            docs=docs,
        )

    def to_bytes(self) -> bytes:
        """Serialize to UTF-8 JSON bytes with a trailing newline."""
        return (json.dumps(self.to_dict(), separators=(",", ":")) + "\n").encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> "IndexArtifact":
        """Deserialize from :meth:`to_bytes` output.

        Raises:
            ArtifactFormatError: If the bytes are not a valid artifact
        """
        try:
            parsed = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ArtifactFormatError(f"Artifact is not valid JSON: {e}") from e
        return cls.from_dict(parsed)


__all__ = [
    "ARTIFACT_VERSION",
    "ArtifactFormatError",
    "IndexArtifact",
    "utc_now_iso",
]
