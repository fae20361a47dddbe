"""LexSuggest Index Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsuggest_core.index.document import (
    DisplayDocument,
    Document,
    DocumentType,
    make_document_id,
)
from lexsuggest_core.index.inverted import (
    InvertedIndex,
    Posting,
    PostingList,
    TermDictionary,
)
from lexsuggest_core.index.searchable import (
    CombineMode,
    IndexSettings,
    SearchHit,
    SearchIndex,
    SearchOptions,
)
from lexsuggest_core.index.artifact import (
    ARTIFACT_VERSION,
    ArtifactFormatError,
    IndexArtifact,
)
from lexsuggest_core.index.builder import (
    DEFAULT_ARTIFACT_KEY,
    BuildReport,
    IndexBuildError,
    IndexBuilder,
)
from lexsuggest_core.index.runtime import (
    IndexRuntime,
    RuntimeState,
    storage_loader,
)

__all__ = [
    "DisplayDocument",
    "Document",
    "DocumentType",
    "make_document_id",
    "InvertedIndex",
    "Posting",
    "PostingList",
    "TermDictionary",
    "CombineMode",
    "IndexSettings",
    "SearchHit",
    "SearchIndex",
    "SearchOptions",
    "ARTIFACT_VERSION",
    "ArtifactFormatError",
    "IndexArtifact",
    "DEFAULT_ARTIFACT_KEY",
    "BuildReport",
    "IndexBuildError",
    "IndexBuilder",
    "IndexRuntime",
    "RuntimeState",
    "storage_loader",
]
