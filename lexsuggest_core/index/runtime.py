"""LexSuggest Index Runtime - Loaded Index Lifecycle and Search.

An IndexRuntime owns one loaded artifact. It is constructed explicitly
and passed to whatever needs it; there is no module-level singleton.

Lifecycle::

    NOT_LOADED --ensure_loaded()--> LOADING --> READY
                                           \\-> UNAVAILABLE

Loading is the only step that may block. Load failures never propagate:
the runtime moves to UNAVAILABLE and every search returns no hits.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
import time
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Union

from lexsuggest_core.index.artifact import ArtifactFormatError, IndexArtifact
from lexsuggest_core.index.document import DisplayDocument, DocumentType
from lexsuggest_core.index.searchable import SearchHit, SearchIndex, SearchOptions
from lexsuggest_core.storage.backend import StorageBackend

logger = logging.getLogger(__name__)

ArtifactLoader = Callable[[], Optional[bytes]]


class RuntimeState(Enum):
    """Index runtime state."""

    NOT_LOADED = auto()
    LOADING = auto()
    READY = auto()
    UNAVAILABLE = auto()


def storage_loader(storage: StorageBackend, key: str) -> ArtifactLoader:
    """Build a loader that reads artifact bytes from a storage backend."""
    def load() -> Optional[bytes]:
        return storage.read(key)
    return load


class IndexRuntime:
    """Loads an artifact once and answers token queries against it."""

    def __init__(self, loader: Optional[ArtifactLoader] = None):
        """Initialize runtime.

        Args:
            loader: Zero-argument callable returning artifact bytes,
                or None when the artifact does not exist
        """
        self._loader = loader
        self._state = RuntimeState.NOT_LOADED
        self._index: Optional[SearchIndex] = None
        self._docs_by_id: Dict[str, DisplayDocument] = {}
        self._artifact_version: Optional[int] = None
        self._built_at: Optional[str] = None
        self._last_error: Optional[str] = None
        self._lock = threading.RLock()
        self._warm_thread: Optional[threading.Thread] = None

    @classmethod
    def from_artifact(cls, artifact: IndexArtifact) -> "IndexRuntime":
        """Create a runtime already loaded with an artifact."""
        runtime = cls()
        runtime.load(artifact)
        return runtime

    @classmethod
    def from_storage(cls, storage: StorageBackend, key: str) -> "IndexRuntime":
        """Create a runtime that lazily loads from storage."""
        return cls(storage_loader(storage, key))

    @property
    def state(self) -> RuntimeState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state == RuntimeState.READY

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    @property
    def built_at(self) -> Optional[str]:
        return self._built_at

    def load(self, artifact: Union[IndexArtifact, bytes]) -> bool:
        """Load an artifact.

        A second load after a successful one is a no-op. Malformed
        artifacts leave the runtime UNAVAILABLE instead of raising.

        Args:
            artifact: Parsed artifact or its serialized bytes

        Returns:
            True if the runtime is READY afterwards
        """
        with self._lock:
            if self._state == RuntimeState.READY:
                return True

            self._state = RuntimeState.LOADING
            start_time = time.time()
            try:
                if isinstance(artifact, (bytes, bytearray)):
                    artifact = IndexArtifact.from_bytes(bytes(artifact))
                try:
                    index = SearchIndex.from_dict(artifact.index)
                except ValueError as e:
                    raise ArtifactFormatError(str(e)) from e
            except ArtifactFormatError as e:
                self._fail(f"Malformed index artifact: {e}")
                return False

            self._index = index
            self._docs_by_id = {doc.id: doc for doc in artifact.docs}
            self._artifact_version = artifact.version
            self._built_at = artifact.built_at
            self._last_error = None
            self._state = RuntimeState.READY

            logger.info(
                f"Loaded search index: {len(self._docs_by_id)} docs, "
                f"built {artifact.built_at or 'unknown'}, "
                f"{(time.time() - start_time) * 1000:.1f}ms"
            )
            return True

    def ensure_loaded(self) -> bool:
        """Run the loader once if nothing is loaded yet.

        Returns:
            True if the runtime is READY
        """
        with self._lock:
            if self._state == RuntimeState.READY:
                return True
            if self._state == RuntimeState.UNAVAILABLE:
                return False
            if self._loader is None:
                self._fail("No artifact loader configured")
                return False

            self._state = RuntimeState.LOADING
            try:
                data = self._loader()
            except Exception as e:
                # Loader failures (I/O, network) are recoverable by contract
                self._fail(f"Failed to load index artifact: {e}")
                return False

            if data is None:
                self._fail("Index artifact not found")
                return False
            return self.load(data)

    def warm_in_background(self) -> threading.Thread:
        """Start loading on a daemon thread so the first query is fast."""
        with self._lock:
            if self._warm_thread is None:
                self._warm_thread = threading.Thread(
                    target=self.ensure_loaded,
                    name="lexsuggest-index-warm",
                    daemon=True,
                )
                self._warm_thread.start()
            return self._warm_thread

    def reset(self) -> None:
        """Forget a failed load so the next ensure_loaded() retries."""
        with self._lock:
            if self._state == RuntimeState.UNAVAILABLE:
                self._state = RuntimeState.NOT_LOADED
                self._last_error = None
                self._warm_thread = None

    def _fail(self, message: str) -> None:
        self._state = RuntimeState.UNAVAILABLE
        self._last_error = message
        logger.warning(message)

    def search(self, query: str, options: Optional[SearchOptions] = None) -> List[SearchHit]:
        """Search the loaded index.

        Args:
            query: Free-text query
            options: combine_with / prefix / fuzzy / limit overrides

        Returns:
            Scored hits; empty when not ready or the query is blank
        """
        index = self._index
        if self._state != RuntimeState.READY or index is None:
            return []
        if not query or not query.strip():
            return []
        return index.search(query, options)

    def get_document(self, doc_id: str) -> Optional[DisplayDocument]:
        """Resolve an ID to its display document, or None."""
        return self._docs_by_id.get(doc_id)

    def resolve(self, hits: List[SearchHit]) -> List[DisplayDocument]:
        """Resolve hits to documents, silently dropping unknown IDs."""
        docs = []
        for hit in hits:
            doc = self._docs_by_id.get(hit.id)
            if doc is not None:
                docs.append(doc)
        return docs

    def documents(self, doc_type: Optional[DocumentType] = None) -> List[DisplayDocument]:
        """All loaded documents in corpus order, optionally of one type."""
        return [
            d for d in self._docs_by_id.values()
            if doc_type is None or d.type == doc_type
        ]

    def tokenize(self, query: str) -> List[str]:
        """Tokenize a query the way the loaded index does."""
        if self._index is None:
            return []
        return self._index.tokenize_query(query)

    def get_stats(self) -> Dict[str, object]:
        """Get runtime statistics."""
        return {
            "state": self._state.name,
            "doc_count": len(self._docs_by_id),
            "artifact_version": self._artifact_version,
            "built_at": self._built_at,
            "last_error": self._last_error,
            "index": self._index.get_stats() if self._index else None,
        }


__all__ = [
    "ArtifactLoader",
    "IndexRuntime",
    "RuntimeState",
    "storage_loader",
]
