from datetime import UTC, datetime, timedelta

import pandas as pd
import pytest

from issue_slo.core.errors import DataIntegrityError
from issue_slo.core.models import EventKind, IssueModel, TimelineEvent
from issue_slo.core.service import REPORT_COLUMNS, SloService

T0 = datetime(2024, 9, 1, tzinfo=UTC)
NOW = T0 + timedelta(days=10)


def _issue(number, labels=(), events=(), repository="example/repo"):
    return IssueModel(
        url=f"https://github.com/{repository}/issues/{number}",
        repository=repository,
        created=T0,
        author="reporter",
        labels=list(labels),
        timeline=[TimelineEvent(kind=k, created=T0 + timedelta(days=n), label=lbl) for k, n, lbl in events],
    )


def test_evaluate_builds_sorted_report():
    urgent = _issue(1, ["priority: urgent"], [(EventKind.LABELED, 6, "priority: urgent")])
    untriaged = _issue(2, ["agenda+"], [(EventKind.LABELED, 7, "agenda+")])
    df = SloService().evaluate([urgent, untriaged], NOW)
    assert list(df.columns) == list(REPORT_COLUMNS)
    assert list(df["tier"]) == ["triage", "urgent"]
    assert list(df["slo_days"]) == [10.0, 4.0]
    assert df.loc[0, "agenda_days"] == 3.0
    assert pd.isna(df.loc[1, "agenda_days"])
    assert pd.isna(df.loc[0, "needs_edits_days"])


def test_repository_without_label_triage_gets_no_slo():
    issue = _issue(3)
    df = SloService().evaluate([issue], NOW, repo_labels={"example/repo": ["bug"]})
    assert df.loc[0, "tier"] == "none"
    assert df.loc[0, "slo_days"] == 0.0
    df = SloService().evaluate([issue], NOW, repo_labels={"example/repo": ["priority: eventually"]})
    assert df.loc[0, "tier"] == "triage"


def test_integrity_fault_propagates():
    issue = _issue(4, ["needs edits"])
    with pytest.raises(DataIntegrityError):
        SloService().evaluate([issue], NOW)


def test_empty_input_gives_empty_frame():
    df = SloService().evaluate([], NOW)
    assert df.empty
    assert list(df.columns) == list(REPORT_COLUMNS)
