"""
Unit Tests for the Content Loader

Tests reading tools, prompts, skills, and playbooks from a content
directory, preview overlays, and lenient versus strict error handling.
"""

import pytest

from conftest import write_mdx, write_playbook, write_tool
from lexsuggest_core.content import ContentError, ContentLoader, parse_front_matter
from lexsuggest_core.index.builder import IndexBuilder
from lexsuggest_core.index.document import DocumentType


# ---------------------------------------------------------------------------
# FRONT MATTER
# ---------------------------------------------------------------------------


class TestFrontMatter:
    """Test YAML front matter parsing."""

    def test_parses_mapping_and_body(self):
        meta, body = parse_front_matter("---\ntitle: Memo Starter\ntags: [memo]\n---\n\n# Body\n")
        assert meta == {"title": "Memo Starter", "tags": ["memo"]}
        assert body == "\n# Body\n"

    def test_no_front_matter(self):
        meta, body = parse_front_matter("# Just a heading\n")
        assert meta == {}
        assert body == "# Just a heading\n"

    def test_byte_order_mark(self):
        meta, _ = parse_front_matter("\ufeff---\ntitle: X\n---\n")
        assert meta["title"] == "X"

    def test_empty_front_matter(self):
        meta, _ = parse_front_matter("---\n---\nbody")
        assert meta == {}

    def test_unterminated(self):
        with pytest.raises(ContentError):
            parse_front_matter("---\ntitle: X\n")

    def test_invalid_yaml(self):
        with pytest.raises(ContentError):
            parse_front_matter("---\ntitle: [unclosed\n---\n")

    def test_not_a_mapping(self):
        with pytest.raises(ContentError):
            parse_front_matter("---\n- a\n- b\n---\n")


# ---------------------------------------------------------------------------
# LOADING
# ---------------------------------------------------------------------------


class TestLoad:
    """Test loading a content directory."""

    def test_loads_every_type_in_order(self, content_root):
        corpus = ContentLoader(str(content_root)).load()
        assert [d.id for d in corpus] == [
            "tool:contract-review",
            "prompt:motion-outline-starter",
            "skill:discovery-responses",
            "playbook:motion-practice",
        ]

    def test_tool_fields(self, content_root):
        tool = ContentLoader(str(content_root)).load_tools()[0]
        assert tool.title == "Contract Review and Drafting"
        assert tool.description == "Redline vendor agreements."
        assert tool.tags == ["contracts", "web"]
        assert tool.categories == ["Contracts"]

    def test_prompt_fields(self, content_root):
        prompt = ContentLoader(str(content_root)).load_prompts()[0]
        assert prompt.type == DocumentType.PROMPT
        assert prompt.slug == "motion-outline-starter"
        assert prompt.title == "Motion Outline Starter"
        assert prompt.tags == ["litigation"]

    def test_playbook_matter_types_as_tags(self, content_root):
        playbook = ContentLoader(str(content_root)).load_playbooks()[0]
        assert playbook.tags == ["litigation"]

    def test_playbooks_optional(self, content_root):
        corpus = ContentLoader(str(content_root), include_playbooks=False).load()
        assert all(d.type != DocumentType.PLAYBOOK for d in corpus)

    def test_sorted_and_hidden_files_skipped(self, tmp_path):
        root = tmp_path / "content"
        write_tool(root, "zeta", "Zeta", "z")
        write_tool(root, "alpha", "Alpha", "a")
        (root / "tools" / ".draft.json").write_text("{broken", encoding="utf-8")
        (root / "tools" / "notes.txt").write_text("ignore me", encoding="utf-8")
        loader = ContentLoader(str(root))
        assert [d.slug for d in loader.load_tools()] == ["alpha", "zeta"]
        assert loader.skipped == []

    def test_missing_directories(self, tmp_path):
        assert ContentLoader(str(tmp_path / "nowhere")).load() == []

    def test_preview_overlay(self, content_root, tmp_path):
        """A preview root replaces only the subdirectories it has."""
        preview = tmp_path / "preview"
        write_mdx(preview, "prompts", "reply-brief-starter", "Reply Brief Starter", "Start a reply.")
        loader = ContentLoader(str(preview), production_root=str(content_root))
        corpus = loader.load()
        assert [d.id for d in corpus if d.type == DocumentType.PROMPT] == ["prompt:reply-brief-starter"]
        assert "tool:contract-review" in [d.id for d in corpus]


class TestErrors:
    """Test handling of unreadable content."""

    @pytest.fixture
    def broken_root(self, content_root):
        (content_root / "tools" / "broken.json").write_text("{not json", encoding="utf-8")
        (content_root / "prompts" / "bad.mdx").write_text("---\ntitle: X\n", encoding="utf-8")
        return content_root

    def test_lenient_skips(self, broken_root):
        loader = ContentLoader(str(broken_root))
        corpus = loader.load()
        assert len(corpus) == 4
        assert len(loader.skipped) == 2

    def test_strict_raises(self, broken_root):
        with pytest.raises(ContentError):
            ContentLoader(str(broken_root), strict=True).load()

    def test_tool_must_be_object(self, tmp_path):
        root = tmp_path / "content"
        (root / "tools").mkdir(parents=True)
        (root / "tools" / "list.json").write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ContentError):
            ContentLoader(str(root), strict=True).load_tools()

    def test_missing_title_reaches_builder(self, tmp_path):
        """Files without a title load, and the builder skips them."""
        root = tmp_path / "content"
        (root / "skills").mkdir(parents=True)
        (root / "skills" / "untitled.mdx").write_text("# No front matter\n", encoding="utf-8")
        write_playbook(root, "p", "Playbook", "A playbook.")
        corpus = ContentLoader(str(root)).load()
        builder = IndexBuilder()
        artifact = builder.build(corpus)
        assert [d.id for d in artifact.docs] == ["playbook:p"]
        assert len(builder.last_report.skipped) == 1


# ---------------------------------------------------------------------------
# PIPELINE
# ---------------------------------------------------------------------------


class TestPipeline:
    """Test content through to a searchable artifact."""

    def test_platform_is_searchable(self, content_root):
        from lexsuggest_core.index.runtime import IndexRuntime

        runtime = IndexRuntime.from_artifact(IndexBuilder().build(ContentLoader(str(content_root)).load()))
        assert [h.id for h in runtime.search("web")] == ["tool:contract-review"]
