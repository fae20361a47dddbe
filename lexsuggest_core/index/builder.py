"""LexSuggest Index Builder - Corpus to Artifact.

Turns a corpus of documents into a self-describing IndexArtifact and
writes it to a storage backend. Writing is the only side effect.

Invalid documents (missing id, type, slug, or title, or a duplicate id)
are handled by mode:

- lenient (default): skip the document and log a warning
- strict: raise IndexBuildError and abort the build

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from lexsuggest_core.index.artifact import IndexArtifact
from lexsuggest_core.index.document import DisplayDocument, Document
from lexsuggest_core.index.searchable import IndexSettings, SearchIndex
from lexsuggest_core.storage.backend import StorageBackend

logger = logging.getLogger(__name__)

DEFAULT_ARTIFACT_KEY = "search-index.json"


class IndexBuildError(ValueError):
    """Raised in strict mode when a document cannot be indexed."""


@dataclass
class BuildReport:
    """Outcome of one build.

    Attributes:
        indexed: Number of documents indexed
        skipped: IDs (or slugs) of skipped documents with reasons
        took_ms: Build time in milliseconds
    """

    indexed: int = 0
    skipped: List[str] = field(default_factory=list)
    took_ms: float = 0.0


class IndexBuilder:
    """Builds index artifacts from a corpus."""

    def __init__(
        self,
        settings: Optional[IndexSettings] = None,
        strict: bool = False,
    ):
        """Initialize builder.

        Args:
            settings: Field, boost, and matching configuration
            strict: Abort on the first invalid document
        """
        self.settings = settings or IndexSettings()
        self.strict = strict
        self.last_report = BuildReport()

    def build(self, corpus: Iterable[Document]) -> IndexArtifact:
        """Build an artifact from a corpus.

        Args:
            corpus: Documents to index; may be empty

        Returns:
            The built artifact

        Raises:
            IndexBuildError: In strict mode, on an invalid document
        """
        start_time = time.time()
        report = BuildReport()
        index = SearchIndex(self.settings)
        docs: List[DisplayDocument] = []
        seen: Set[str] = set()

        for doc in corpus:
            problem = self._validate(doc, seen)
            if problem:
                label = getattr(doc, "id", "") or getattr(doc, "slug", "") or "<unknown>"
                if self.strict:
                    raise IndexBuildError(f"Cannot index document {label}: {problem}")
                logger.warning(f"Skipping document {label}: {problem}")
                report.skipped.append(f"{label}: {problem}")
                continue

            index.add(doc.id, doc.to_record())
            docs.append(doc.to_display())
            seen.add(doc.id)

        report.indexed = len(docs)
        report.took_ms = (time.time() - start_time) * 1000
        self.last_report = report

        logger.info(
            f"Built index with {report.indexed} documents "
            f"({len(report.skipped)} skipped) in {report.took_ms:.1f}ms"
        )
        return IndexArtifact(index=index.to_dict(), docs=docs)

    def _validate(self, doc: Document, seen: Set[str]) -> Optional[str]:
        """Return a problem description, or None if the document is valid."""
        if not isinstance(doc, Document):
            return f"not a Document ({type(doc).__name__})"
        missing = doc.missing_fields()
        if missing:
            return f"missing required field(s): {', '.join(missing)}"
        if doc.id in seen:
            return "duplicate id"
        return None

    def write(
        self,
        artifact: IndexArtifact,
        storage: StorageBackend,
        key: str = DEFAULT_ARTIFACT_KEY,
    ) -> bool:
        """Write an artifact to its distribution target.

        Args:
            artifact: Artifact to write
            storage: Target storage backend
            key: Storage key

        Returns:
            True if written
        """
        ok = storage.write(key, artifact.to_bytes())
        if ok:
            logger.info(f"Wrote {artifact.doc_count} docs to {key}")
        else:
            logger.error(f"Failed to write index artifact to {key}")
        return ok

    def build_and_write(
        self,
        corpus: Iterable[Document],
        storage: StorageBackend,
        key: str = DEFAULT_ARTIFACT_KEY,
    ) -> IndexArtifact:
        """Build an artifact and write it.

        Raises:
            IndexBuildError: On strict-mode data errors or a failed write
        """
        artifact = self.build(corpus)
        if not self.write(artifact, storage, key):
            raise IndexBuildError(f"Could not write index artifact to {key}")
        return artifact


__all__ = [
    "BuildReport",
    "DEFAULT_ARTIFACT_KEY",
    "IndexBuildError",
    "IndexBuilder",
]
