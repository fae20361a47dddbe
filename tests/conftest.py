"""
Shared fixtures for the LexSuggest test suite.

The sample corpus is small enough to reason about by hand: two tools,
two prompts (one drafting, one assessment), one skill, and one playbook.
"""

import json

import pytest

from lexsuggest_core.engine import SuggestEngine
from lexsuggest_core.index.builder import IndexBuilder
from lexsuggest_core.index.document import Document, DocumentType
from lexsuggest_core.index.runtime import IndexRuntime


def make_doc(doc_type, slug, title, description="", tags=None, categories=None):
    """Build a corpus document with sensible defaults."""
    return Document(
        type=DocumentType.parse(doc_type),
        slug=slug,
        title=title,
        description=description,
        tags=list(tags or []),
        categories=list(categories or []),
    )


# ---------------------------------------------------------------------------
# CORPUS FIXTURES
# ---------------------------------------------------------------------------


@pytest.fixture
def corpus():
    """A small mixed-type corpus."""
    return [
        make_doc(
            "tool", "contract-review", "Contract Review and Drafting",
            "Redline vendor agreements and flag unusual clauses.",
            tags=["contracts", "redlines"], categories=["Contracts"],
        ),
        make_doc(
            "tool", "legal-research", "Legal Research Assistant",
            "Find case law and statutes quickly.",
            tags=["research"], categories=["Research"],
        ),
        make_doc(
            "prompt", "motion-outline-starter", "Motion Outline Starter",
            "Build a structured outline for a motion with headings and argument slots.",
            tags=["litigation", "motion"],
        ),
        make_doc(
            "prompt", "strengths-weaknesses", "Strengths and Weaknesses Analysis",
            "Assess the strengths and weaknesses of a case before filing motions.",
            tags=["litigation", "assessment"],
        ),
        make_doc(
            "skill", "discovery-responses", "Discovery Response Drafting",
            "Draft responses and objections to interrogatories.",
            tags=["discovery", "litigation"],
        ),
        make_doc(
            "playbook", "motion-practice", "Motion Practice Playbook",
            "End-to-end workflow for litigating a motion.",
            tags=["litigation"],
        ),
    ]


@pytest.fixture
def balanced_corpus():
    """Six tools, five prompts, and five skills that all mention contracts."""
    names = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot"]
    docs = []
    for name in names:
        docs.append(make_doc("tool", f"contract-tool-{name}", f"Contract Tool {name.title()}"))
    for name in names[:5]:
        docs.append(make_doc("prompt", f"contract-prompt-{name}", f"Contract Prompt {name.title()}"))
    for name in names[:5]:
        docs.append(make_doc("skill", f"contract-skill-{name}", f"Contract Skill {name.title()}"))
    return docs


# ---------------------------------------------------------------------------
# INDEX FIXTURES
# ---------------------------------------------------------------------------


@pytest.fixture
def artifact(corpus):
    """Artifact built from the sample corpus."""
    return IndexBuilder().build(corpus)


@pytest.fixture
def runtime(artifact):
    """A READY runtime over the sample corpus."""
    return IndexRuntime.from_artifact(artifact)


@pytest.fixture
def engine(runtime):
    """Suggestion engine over the sample corpus."""
    return SuggestEngine(runtime)


@pytest.fixture
def balanced_engine(balanced_corpus):
    """Suggestion engine over the balanced corpus."""
    return SuggestEngine(IndexRuntime.from_artifact(IndexBuilder().build(balanced_corpus)))


# ---------------------------------------------------------------------------
# CONTENT FIXTURES
# ---------------------------------------------------------------------------


def write_tool(root, slug, name, description, tags=(), platform=(), categories=()):
    path = root / "tools"
    path.mkdir(parents=True, exist_ok=True)
    (path / f"{slug}.json").write_text(json.dumps({
        "slug": slug,
        "name": name,
        "description": description,
        "tags": list(tags),
        "platform": list(platform),
        "categories": list(categories),
    }), encoding="utf-8")


def write_mdx(root, subdir, slug, title, description, tags=()):
    path = root / subdir
    path.mkdir(parents=True, exist_ok=True)
    tag_lines = "".join(f"  - {t}\n" for t in tags)
    (path / f"{slug}.mdx").write_text(
        f"---\ntitle: {title}\ndescription: {description}\ntags:\n{tag_lines}---\n\n# {title}\n",
        encoding="utf-8",
    )


def write_playbook(root, slug, title, description, matter_types=()):
    path = root / "playbooks"
    path.mkdir(parents=True, exist_ok=True)
    (path / f"{slug}.json").write_text(json.dumps({
        "slug": slug,
        "title": title,
        "description": description,
        "conditions": {"matter_types": list(matter_types)},
    }), encoding="utf-8")


@pytest.fixture
def content_root(tmp_path):
    """A content directory with one file of every type."""
    root = tmp_path / "content"
    write_tool(
        root, "contract-review", "Contract Review and Drafting",
        "Redline vendor agreements.", tags=["contracts"], platform=["web"], categories=["Contracts"],
    )
    write_mdx(root, "prompts", "motion-outline-starter", "Motion Outline Starter",
              "Outline a motion with headings.", tags=["litigation"])
    write_mdx(root, "skills", "discovery-responses", "Discovery Response Drafting",
              "Draft discovery responses.", tags=["discovery"])
    write_playbook(root, "motion-practice", "Motion Practice Playbook",
                   "Workflow for motions.", matter_types=["litigation"])
    return root


@pytest.fixture
def clean_env(monkeypatch):
    """Remove LexSuggest environment overrides."""
    for name in (
        "LEXSUGGEST_INDEX_PATH",
        "LEXSUGGEST_CONTENT_ROOT",
        "LEXSUGGEST_PRODUCTION_ROOT",
        "LEXSUGGEST_STRICT_BUILD",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
