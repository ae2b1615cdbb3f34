import pytest

from issue_slo.core.per_repo import TriageRules, has_label_triage


def test_has_label_triage_via_eventually_label():
    assert has_label_triage("example/repo", ["bug", "Priority: Eventually"])
    assert not has_label_triage("example/repo", ["bug", "priority: soon"])


def test_has_label_triage_via_predicate():
    rules = TriageRules()
    rules.register("Example/Repo", lambda issue: True)
    assert rules.has_predicate("example/repo")
    assert has_label_triage("example/repo", [], rules)
    assert not has_label_triage("example/other", [], rules)


def test_register_rejects_empty_repo():
    with pytest.raises(ValueError):
        TriageRules().register("  ", lambda issue: True)
