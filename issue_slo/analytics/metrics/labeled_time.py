"""Time since a tracked label was most recently applied."""

from __future__ import annotations

import logging

import pandas as pd

from issue_slo.core.config import DEFAULT_LABELS, LabelVocabulary, tracked_label_name
from issue_slo.core.errors import DataIntegrityError
from issue_slo.core.labels import has_label, normalize_label
from issue_slo.core.models import EventKind, IssueModel

from .durations import normalize_duration, to_instant

logger = logging.getLogger(__name__)


def count_labeled_time(
    issue: IssueModel,
    label_key: str,
    now,
    labels: LabelVocabulary = DEFAULT_LABELS,
) -> pd.Timedelta | None:
    """Return how long ``issue`` has had a tracked label, or None without it.

    This counts from the most recent time the label was added: an item can
    acquire the label several times, and it isn't late this time just because
    the previous round took a while to handle.

    Raises
    ------
    DataIntegrityError
        If the label is present but the timeline never applies it.
    """
    label_name = tracked_label_name(label_key, labels)
    if not has_label(issue.labels, label_name):
        return None
    last_applied = None
    for event in reversed(issue.timeline):
        if event.kind is EventKind.LABELED and normalize_label(event.label) == label_name:
            last_applied = event
            break
    if last_applied is None:
        logger.error("Label/timeline mismatch on %s for %r", issue.url, label_name)
        raise DataIntegrityError(issue.url, label_name)
    return normalize_duration(to_instant(now) - to_instant(last_applied.created))
