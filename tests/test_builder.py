"""
Unit Tests for the Index Builder

Tests lenient and strict handling of invalid documents, the display
subset stored in the artifact, and writing to storage.
"""

import json

import pytest

from conftest import make_doc
from lexsuggest_core.index.artifact import IndexArtifact
from lexsuggest_core.index.builder import DEFAULT_ARTIFACT_KEY, IndexBuildError, IndexBuilder
from lexsuggest_core.index.searchable import SearchIndex
from lexsuggest_core.storage.backend import StorageBackend
from lexsuggest_core.storage.memory import MemoryStorage


class FailingStorage(StorageBackend):
    """Storage whose writes always fail."""

    def write(self, key, data):
        return False

    def read(self, key):
        return None

    def delete(self, key):
        return False

    def exists(self, key):
        return False

    def list_keys(self, prefix=""):
        return []


# ---------------------------------------------------------------------------
# BUILD
# ---------------------------------------------------------------------------


class TestBuild:
    """Test building artifacts from a corpus."""

    def test_indexes_every_valid_document(self, corpus):
        """All documents in a clean corpus are indexed in order."""
        builder = IndexBuilder()
        artifact = builder.build(corpus)
        assert artifact.doc_count == len(corpus)
        assert [d.id for d in artifact.docs] == [d.id for d in corpus]
        assert builder.last_report.indexed == len(corpus)
        assert builder.last_report.skipped == []

    def test_display_subset_only(self, corpus):
        """Stored documents carry only display fields."""
        artifact = IndexBuilder().build(corpus)
        stored = artifact.to_dict()["docs"][0]
        assert set(stored) == {"id", "type", "slug", "title", "description"}
        assert stored == {
            "id": "tool:contract-review",
            "type": "tool",
            "slug": "contract-review",
            "title": "Contract Review and Drafting",
            "description": "Redline vendor agreements and flag unusual clauses.",
        }

    def test_empty_corpus(self):
        """An empty corpus builds a valid empty artifact."""
        artifact = IndexBuilder().build([])
        assert artifact.doc_count == 0
        assert SearchIndex.from_dict(artifact.index).document_count == 0

    def test_index_is_searchable(self, corpus):
        """The embedded index answers queries by document id."""
        index = SearchIndex.from_dict(IndexBuilder().build(corpus).index)
        assert index.search("interrogatories")[0].id == "skill:discovery-responses"

    def test_tags_and_categories_indexed(self):
        """Tag-only words still find the document."""
        doc = make_doc("tool", "nda", "NDA Builder", tags=["confidentiality"], categories=["Corporate"])
        index = SearchIndex.from_dict(IndexBuilder().build([doc]).index)
        assert [h.id for h in index.search("confidentiality")] == ["tool:nda"]
        assert [h.id for h in index.search("corporate")] == ["tool:nda"]


class TestInvalidDocuments:
    """Test lenient and strict handling of bad input."""

    def test_lenient_skips_missing_title(self, corpus):
        """Lenient builds skip documents missing required fields."""
        bad = make_doc("prompt", "untitled", "")
        builder = IndexBuilder()
        artifact = builder.build(corpus + [bad])
        assert artifact.doc_count == len(corpus)
        assert len(builder.last_report.skipped) == 1
        assert "title" in builder.last_report.skipped[0]

    def test_lenient_skips_duplicates(self, corpus):
        """The first document with an id wins."""
        duplicate = make_doc("tool", "contract-review", "Another Title")
        builder = IndexBuilder()
        artifact = builder.build(corpus + [duplicate])
        titles = [d.title for d in artifact.docs if d.id == "tool:contract-review"]
        assert titles == ["Contract Review and Drafting"]
        assert "duplicate id" in builder.last_report.skipped[0]

    def test_lenient_skips_non_documents(self, corpus):
        """Objects that are not documents are skipped."""
        builder = IndexBuilder()
        artifact = builder.build(corpus + [{"title": "dict"}])
        assert artifact.doc_count == len(corpus)
        assert "not a Document" in builder.last_report.skipped[0]

    def test_strict_raises(self, corpus):
        """Strict builds abort on the first invalid document."""
        bad = make_doc("skill", "", "No Slug")
        with pytest.raises(IndexBuildError):
            IndexBuilder(strict=True).build(corpus + [bad])

    def test_strict_raises_on_duplicate(self, corpus):
        """Duplicate ids are errors in strict mode."""
        with pytest.raises(IndexBuildError):
            IndexBuilder(strict=True).build(corpus + [corpus[0]])


# ---------------------------------------------------------------------------
# WRITE
# ---------------------------------------------------------------------------


class TestWrite:
    """Test writing artifacts to storage."""

    def test_build_and_write(self, corpus):
        """The artifact lands under the default key."""
        storage = MemoryStorage()
        IndexBuilder().build_and_write(corpus, storage)
        data = storage.read(DEFAULT_ARTIFACT_KEY)
        assert data.endswith(b"\n")
        assert json.loads(data)["doc_count"] == len(corpus)
        assert IndexArtifact.from_bytes(data).doc_count == len(corpus)

    def test_custom_key(self, corpus):
        """Artifacts can be written under any key."""
        storage = MemoryStorage()
        IndexBuilder().build_and_write(corpus, storage, key="public/index.json")
        assert storage.exists("public/index.json")

    def test_failed_write_raises(self, corpus):
        """A storage failure surfaces as a build error."""
        with pytest.raises(IndexBuildError):
            IndexBuilder().build_and_write(corpus, FailingStorage())

    def test_write_returns_false_on_failure(self, artifact):
        """write() reports failure without raising."""
        assert IndexBuilder().write(artifact, FailingStorage()) is False
