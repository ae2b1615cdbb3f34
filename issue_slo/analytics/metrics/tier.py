"""SLO tier classification and tier membership."""

from __future__ import annotations

from collections.abc import Iterable

from issue_slo.core.config import DEFAULT_LABELS, LabelVocabulary
from issue_slo.core.labels import label_set
from issue_slo.core.models import IssueModel, SloTier
from issue_slo.core.per_repo import TriageRules


def classify(
    issue: IssueModel,
    rules: TriageRules | None = None,
    labels: LabelVocabulary = DEFAULT_LABELS,
) -> SloTier:
    """Decide which SLO tier applies to ``issue`` from its current labels.

    The first matching rule wins:

    1. drafts and items awaiting reporter feedback have no SLO;
    2. ``priority: urgent`` -> urgent;
    3. ``priority: soon`` -> soon;
    4. ``priority: eventually``, or a repository predicate saying the item is
       already triaged -> no SLO;
    5. anything else still needs triage.
    """
    current = label_set(issue.labels)
    if issue.is_draft or labels.needs_reporter_feedback in current:
        return SloTier.NONE
    if labels.priority_urgent in current:
        return SloTier.URGENT
    if labels.priority_soon in current:
        return SloTier.SOON
    if labels.priority_eventually in current:
        return SloTier.NONE
    if rules is not None and rules.is_triaged(issue.repository, issue):
        return SloTier.NONE
    return SloTier.TRIAGE


def accepted_labels(tier: SloTier, labels: LabelVocabulary = DEFAULT_LABELS) -> tuple[str, ...]:
    """Labels that keep the clock running for a priority-qualified tier."""
    if tier is SloTier.SOON:
        return (labels.priority_soon, labels.priority_urgent)
    if tier is SloTier.URGENT:
        return (labels.priority_urgent,)
    return ()


def satisfies(
    active_labels: Iterable[str],
    tier: SloTier,
    labels: LabelVocabulary = DEFAULT_LABELS,
) -> bool:
    """Return whether the currently active labels satisfy ``tier``.

    ``active_labels`` is expected to be lowercased already. ``none`` is never
    satisfied and ``triage`` always is, because the absence of a priority label
    is exactly what triage waits on.
    """
    tier = SloTier(tier)
    if tier is SloTier.NONE:
        return False
    if tier is SloTier.TRIAGE:
        return True
    active = set(active_labels)
    return any(label in active for label in accepted_labels(tier, labels))
