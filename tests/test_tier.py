from datetime import UTC, datetime

import pytest

from issue_slo.analytics.metrics.tier import classify, satisfies
from issue_slo.core.config import LabelVocabulary
from issue_slo.core.models import IssueModel, SloTier
from issue_slo.core.per_repo import TriageRules


def _issue(labels=(), is_draft=False, repository="w3c/csswg-drafts"):
    return IssueModel(
        url="https://github.com/w3c/csswg-drafts/issues/1",
        repository=repository,
        created=datetime(2024, 1, 1, tzinfo=UTC),
        author="reporter",
        is_draft=is_draft,
        labels=list(labels),
    )


@pytest.mark.parametrize(
    ("labels", "is_draft", "expected"),
    [
        ((), False, SloTier.TRIAGE),
        (("bug",), False, SloTier.TRIAGE),
        (("priority: urgent",), True, SloTier.NONE),
        (("Needs Reporter Feedback", "priority: urgent"), False, SloTier.NONE),
        (("priority: soon", "Priority: Urgent"), False, SloTier.URGENT),
        (("Priority: Soon",), False, SloTier.SOON),
        (("priority: eventually",), False, SloTier.NONE),
        (("priority: eventually", "priority: soon"), False, SloTier.SOON),
    ],
)
def test_classify_decision_order(labels, is_draft, expected):
    assert classify(_issue(labels, is_draft)) is expected


def test_classify_consults_custom_triage_predicate():
    rules = TriageRules({"W3C/csswg-drafts": lambda issue: "css" in issue.labels})
    assert classify(_issue(("css",)), rules) is SloTier.NONE
    assert classify(_issue(("html",)), rules) is SloTier.TRIAGE
    # Priority labels win over the custom predicate.
    assert classify(_issue(("css", "priority: soon")), rules) is SloTier.SOON
    # Other repositories are unaffected.
    assert classify(_issue(("css",), repository="whatwg/html"), rules) is SloTier.TRIAGE


def test_satisfies_per_tier():
    assert satisfies(set(), SloTier.NONE) is False
    assert satisfies({"priority: urgent"}, SloTier.NONE) is False
    assert satisfies(set(), SloTier.TRIAGE) is True
    assert satisfies({"priority: soon"}, SloTier.SOON) is True
    assert satisfies({"priority: urgent"}, SloTier.SOON) is True
    assert satisfies({"priority: eventually"}, SloTier.SOON) is False
    assert satisfies({"priority: urgent"}, SloTier.URGENT) is True
    assert satisfies({"priority: soon"}, SloTier.URGENT) is False
    assert satisfies({"priority: urgent"}, "urgent") is True


def test_custom_vocabulary_is_respected():
    vocab = LabelVocabulary(priority_urgent="p0", priority_soon="p1")
    assert classify(_issue(("P0",)), labels=vocab) is SloTier.URGENT
    assert classify(_issue(("priority: urgent",)), labels=vocab) is SloTier.TRIAGE
    assert satisfies({"p1"}, SloTier.SOON, vocab) is True


def test_vocabulary_must_be_lowercase():
    with pytest.raises(ValueError):
        LabelVocabulary(priority_urgent="Priority: Urgent")
