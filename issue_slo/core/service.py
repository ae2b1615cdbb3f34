"""SloService: evaluates SLO clocks and tracked-label ages for batches of items."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd

from issue_slo.analytics.metrics.durations import duration_days, to_instant
from issue_slo.analytics.metrics.labeled_time import count_labeled_time
from issue_slo.analytics.metrics.slo_clock import count_slo_time
from issue_slo.analytics.metrics.tier import classify

from .config import DEFAULT_LABELS, SETTINGS, LabelVocabulary, SloSettings
from .errors import DataIntegrityError
from .models import IssueModel, SloTier
from .per_repo import TriageRules, has_label_triage

logger = logging.getLogger(__name__)

REPORT_COLUMNS = (
    "url",
    "repository",
    "tier",
    "slo_time",
    "slo_days",
    "agenda_time",
    "agenda_days",
    "needs_edits_time",
    "needs_edits_days",
)


class SloService:
    def __init__(
        self,
        rules: TriageRules | None = None,
        labels: LabelVocabulary = DEFAULT_LABELS,
        settings: SloSettings | None = None,
    ):
        self.rules = rules or TriageRules()
        self.labels = labels
        self.settings = settings or SETTINGS

    def tier_for(self, issue: IssueModel, repo_label_names: Iterable[str] | None = None) -> SloTier:
        """Classify ``issue``; repositories without label triage never get a timed SLO."""
        if repo_label_names is not None and not has_label_triage(
            issue.repository, repo_label_names, self.rules, self.labels
        ):
            return SloTier.NONE
        return classify(issue, self.rules, self.labels)

    def evaluate_issue(
        self,
        issue: IssueModel,
        now,
        repo_label_names: Iterable[str] | None = None,
    ) -> dict[str, Any]:
        tier = self.tier_for(issue, repo_label_names)
        slo_time = count_slo_time(issue, now, tier, self.labels, check_order=self.settings.check_order)
        agenda_time = count_labeled_time(issue, "agenda", now, self.labels)
        needs_edits_time = count_labeled_time(issue, "needs_edits", now, self.labels)
        return {
            "url": issue.url,
            "repository": issue.repository,
            "tier": tier.value,
            "slo_time": slo_time,
            "slo_days": duration_days(slo_time),
            "agenda_time": agenda_time,
            "agenda_days": duration_days(agenda_time),
            "needs_edits_time": needs_edits_time,
            "needs_edits_days": duration_days(needs_edits_time),
        }

    def evaluate(
        self,
        issues: Iterable[IssueModel],
        now,
        repo_labels: Mapping[str, Iterable[str]] | None = None,
    ) -> pd.DataFrame:
        """Evaluate every item at ``now`` and return one row per item.

        ``repo_labels`` optionally maps ``owner/name`` to the label names the
        repository defines; when given, repositories that don't use label-based
        triage are reported with tier ``none``.
        """
        now_ts = to_instant(now)
        records: list[dict[str, Any]] = []
        for issue in issues:
            repo_label_names = None
            if repo_labels is not None:
                repo_label_names = repo_labels.get(issue.repository or "", ())
            try:
                records.append(self.evaluate_issue(issue, now_ts, repo_label_names))
            except DataIntegrityError as exc:
                logger.error("Cannot evaluate %s: %s", issue.url, exc)
                raise
        logger.debug("Evaluated %s items at %s", len(records), now_ts)
        if not records:
            return pd.DataFrame(columns=list(REPORT_COLUMNS))
        df = pd.DataFrame(records, columns=list(REPORT_COLUMNS))
        return df.sort_values(by="slo_days", ascending=False, na_position="last").reset_index(drop=True)
