"""SLO clock: replay an item's timeline and total the time the clock ran.

The clock runs only while no pause reason is active. Pause reasons overlap
freely (a closed draft awaiting feedback holds three at once), so they are
tracked as a set and only the empty/non-empty transitions touch the
accumulated time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pandas as pd

from issue_slo.core.config import DEFAULT_LABELS, SETTINGS, LabelVocabulary
from issue_slo.core.errors import TimelineOrderError
from issue_slo.core.labels import is_needs_reporter_feedback, normalize_label
from issue_slo.core.models import EventKind, IssueModel, PauseReason, SloTier

from .durations import normalize_duration, to_instant
from .tier import satisfies

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ClockState:
    """Mutable replay state for a single computation."""

    segment_start: pd.Timestamp
    elapsed: pd.Timedelta = field(default_factory=lambda: pd.Timedelta(0))
    paused_by: set[PauseReason] = field(default_factory=set)
    active_labels: set[str] = field(default_factory=set)
    draft_changed: bool = False

    @property
    def running(self) -> bool:
        return not self.paused_by

    def pause(self, reason: PauseReason, at: pd.Timestamp) -> None:
        if self.running:
            self.elapsed += at - self.segment_start
        self.paused_by.add(reason)

    def unpause(self, reason: PauseReason, at: pd.Timestamp) -> None:
        if reason not in self.paused_by:
            return
        self.paused_by.discard(reason)
        if self.running:
            self.segment_start = at

    def rebase(self, at: pd.Timestamp) -> None:
        """Forget everything accumulated so far and start counting from ``at``."""
        self.elapsed = pd.Timedelta(0)
        self.segment_start = at


def check_chronological(issue: IssueModel) -> None:
    """Raise :class:`TimelineOrderError` if the timeline goes backwards in time."""
    previous = None
    for index, event in enumerate(issue.timeline):
        current = to_instant(event.created)
        if previous is not None and current < previous:
            raise TimelineOrderError(issue.url, index, previous, current)
        previous = current


def count_slo_time(
    issue: IssueModel,
    now,
    tier: SloTier,
    labels: LabelVocabulary = DEFAULT_LABELS,
    *,
    check_order: bool | None = None,
) -> pd.Timedelta:
    """Return how long the SLO clock has run for ``issue`` up to ``now``.

    Parameters
    ----------
    issue : IssueModel
        Item with its full timeline, oldest event first.
    now : datetime-like
        Evaluation instant; a still-running segment is clipped here.
    tier : SloTier
        Tier from :func:`issue_slo.analytics.metrics.tier.classify`.
    labels : LabelVocabulary
        Recognized label names.
    check_order : bool, optional
        Reject out-of-order timelines. Defaults to ``SETTINGS.check_order``.

    Returns
    -------
    pd.Timedelta
        Accumulated running time, largest unit days.
    """
    tier = SloTier(tier)
    if SETTINGS.check_order if check_order is None else check_order:
        check_chronological(issue)

    state = ClockState(segment_start=to_instant(issue.created))
    if not satisfies(state.active_labels, tier, labels):
        state.paused_by.add(PauseReason.NO_SLO_LABEL)

    for event in issue.timeline:
        at = to_instant(event.created)
        kind = event.kind
        if kind is EventKind.READY_FOR_REVIEW:
            if not state.draft_changed:
                # Becoming ready as the first draft change means the item was a
                # draft from creation, so nothing before now counted.
                logger.debug("Rebasing SLO clock for %s at %s", issue.url, at)
                state.rebase(at)
                state.draft_changed = True
            state.unpause(PauseReason.DRAFT, at)
        elif kind is EventKind.CONVERTED_TO_DRAFT:
            state.draft_changed = True
            state.pause(PauseReason.DRAFT, at)
        elif kind is EventKind.LABELED:
            state.active_labels.add(normalize_label(event.label))
            if is_needs_reporter_feedback(event.label, labels):
                state.pause(PauseReason.NEED_FEEDBACK, at)
            if satisfies(state.active_labels, tier, labels):
                state.unpause(PauseReason.NO_SLO_LABEL, at)
        elif kind is EventKind.UNLABELED:
            state.active_labels.discard(normalize_label(event.label))
            if is_needs_reporter_feedback(event.label, labels):
                state.unpause(PauseReason.NEED_FEEDBACK, at)
            if not satisfies(state.active_labels, tier, labels):
                state.pause(PauseReason.NO_SLO_LABEL, at)
        elif kind is EventKind.CLOSED:
            state.pause(PauseReason.CLOSED, at)
        elif kind is EventKind.REOPENED:
            state.unpause(PauseReason.CLOSED, at)
        elif kind is EventKind.COMMENT:
            # Feedback labels are often left in place after the reporter answers.
            if event.author == issue.author:
                state.unpause(PauseReason.NEED_FEEDBACK, at)

    if state.running:
        state.elapsed += to_instant(now) - state.segment_start
    return normalize_duration(state.elapsed)
