"""
Unit Tests for Intent Re-ranking

Each adjustment is a plain function of a RerankContext, so most tests
score one candidate with a base score of 1.0 and check the product.
"""

import pytest

from conftest import make_doc
from lexsuggest_core.query.analyzer import QueryAnalyzer
from lexsuggest_core.query.executor import Candidate
from lexsuggest_core.ranking.rerank import (
    DEFAULT_ADJUSTMENTS,
    IntentReranker,
    RerankContext,
    description_only,
    motion_assessy_mismatch,
)


@pytest.fixture
def analyzer():
    return QueryAnalyzer()


@pytest.fixture
def reranker():
    return IntentReranker()


def candidate(doc_type, title, description="", score=1.0, slug=None):
    slug = slug or title.lower().replace(" ", "-")
    return Candidate(document=make_doc(doc_type, slug, title, description).to_display(), score=score)


def rescore(reranker, analyzer, query, cand):
    return reranker.rerank(analyzer.analyze(query), [cand])[0]


# ---------------------------------------------------------------------------
# ADJUSTMENTS
# ---------------------------------------------------------------------------


class TestAdjustments:
    """Test individual multipliers through the reranker."""

    def test_exact_title_prompt(self, reranker, analyzer):
        """Exact title, full coverage, and draft intent stack up."""
        result = rescore(reranker, analyzer, "motion outline starter", candidate("prompt", "Motion Outline Starter"))
        assert result.score == pytest.approx(1.6 * 1.18 * 1.25 * 1.12)
        assert [name for name, _ in result.adjustments] == [
            "exact_title_match", "title_coverage", "full_title_coverage", "draft_prompt",
        ]

    def test_generic_drafty_title(self, reranker, analyzer):
        """With no intent, drafting-looking titles get a small lift."""
        result = rescore(reranker, analyzer, "vendor checklist", candidate("tool", "NDA Template", "Mutual NDA."))
        assert result.score == pytest.approx(1.12)

    def test_generic_assessy_title(self, reranker, analyzer):
        """With no intent, assessment-looking titles are damped."""
        result = rescore(reranker, analyzer, "vendor checklist", candidate("tool", "Deal Analysis"))
        assert result.score == pytest.approx(0.9)

    def test_generic_bias_needs_no_intent(self, reranker, analyzer):
        """Draft intent switches the generic title bias off."""
        result = rescore(reranker, analyzer, "memo", candidate("tool", "NDA Template"))
        assert result.score == pytest.approx(1.0)

    def test_motion_tool_and_skill(self, reranker, analyzer):
        """Motion queries nudge tools down and skills up."""
        tool = rescore(reranker, analyzer, "reply brief", candidate("tool", "Brief Checker"))
        skill = rescore(reranker, analyzer, "reply brief", candidate("skill", "Brief Checker"))
        assert tool.score == pytest.approx(0.95)
        assert skill.score == pytest.approx(1.02)

    def test_motion_assessy_mismatch(self, reranker, analyzer):
        """Assessment titles are penalized for motion drafting queries."""
        result = rescore(reranker, analyzer, "motion to dismiss", candidate("prompt", "Case Viability Review"))
        assert result.score == pytest.approx(1.12 * 0.65)

    def test_mismatch_applies_to_any_type(self, analyzer):
        """The motion/assessment mismatch is not limited to prompts."""
        doc = make_doc("skill", "viability", "Case Viability Review").to_display()
        ctx = RerankContext.build(analyzer.analyze("motion to dismiss"), doc)
        assert motion_assessy_mismatch(ctx) == 0.65

    def test_mismatch_skipped_with_assess_intent(self, analyzer):
        """Asking for an assessment removes the mismatch penalty."""
        doc = make_doc("prompt", "viability", "Case Viability Review").to_display()
        ctx = RerankContext.build(analyzer.analyze("motion to dismiss viability"), doc)
        assert motion_assessy_mismatch(ctx) == 1.0

    def test_motion_drafty_prompt(self, reranker, analyzer):
        """Drafting prompts win for motion subtypes."""
        result = rescore(reranker, analyzer, "motion to compel", candidate("prompt", "Discovery Outline"))
        assert dict(result.adjustments)["motion_drafty_prompt"] == 1.35

    def test_assess_adjustments(self, reranker, analyzer):
        """Assessment queries favor assessment titles over drafting ones."""
        assessy = rescore(reranker, analyzer, "risk", candidate("prompt", "Strengths and Weaknesses"))
        drafty = rescore(reranker, analyzer, "risk", candidate("prompt", "Complaint Template"))
        assert assessy.score == pytest.approx(1.06 * 1.18)
        assert drafty.score == pytest.approx(1.06 * 0.85)

    def test_description_only(self, analyzer):
        """Matches confined to the description are damped."""
        doc = make_doc("tool", "x", "Clause Library", "Find indemnity language.").to_display()
        assert description_only(RerankContext.build(analyzer.analyze("indemnity"), doc)) == 0.92

    def test_title_tokens_are_substrings(self, analyzer):
        """A query token counts as in the title when it is a substring."""
        doc = make_doc("tool", "x", "Contracts Hub").to_display()
        assert RerankContext.build(analyzer.analyze("contract"), doc).in_title == 1


# ---------------------------------------------------------------------------
# ORDERING
# ---------------------------------------------------------------------------


class TestOrdering:
    """Test sorting of re-ranked results."""

    def test_sorted_by_final_score(self, reranker, analyzer):
        candidates = [
            candidate("tool", "Deal Analysis", score=1.0),
            candidate("tool", "NDA Template", score=1.0),
        ]
        results = reranker.rerank(analyzer.analyze("vendor checklist"), candidates)
        assert [r.document.title for r in results] == ["NDA Template", "Deal Analysis"]

    def test_ties_keep_input_order(self, reranker, analyzer):
        """Equal final scores stay in candidate order."""
        candidates = [
            candidate("tool", "Alpha Tool", slug="alpha"),
            candidate("tool", "Bravo Tool", slug="bravo"),
            candidate("tool", "Charlie Tool", slug="charlie"),
        ]
        results = reranker.rerank(analyzer.analyze("vendor checklist"), candidates)
        assert [r.id for r in results] == ["tool:alpha", "tool:bravo", "tool:charlie"]

    def test_base_score_kept(self, reranker, analyzer):
        result = rescore(reranker, analyzer, "vendor checklist", candidate("tool", "NDA Template", score=2.0))
        assert result.base_score == 2.0
        assert result.score == pytest.approx(2.24)
        assert result.to_dict()["adjustments"] == [{"name": "generic_drafty_title", "factor": 1.12}]

    def test_no_adjustments(self, analyzer):
        """An empty adjustment list leaves scores unchanged."""
        results = IntentReranker(adjustments=()).rerank(
            analyzer.analyze("motion outline starter"), [candidate("prompt", "Motion Outline Starter", score=3.0)],
        )
        assert results[0].score == 3.0
        assert results[0].adjustments == []

    def test_every_adjustment_named(self):
        names = [name for name, _ in DEFAULT_ADJUSTMENTS]
        assert len(names) == len(set(names)) == 14
