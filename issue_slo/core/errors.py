"""Exceptions raised while computing SLO durations."""

from __future__ import annotations

from typing import Any


class SloError(Exception):
    """Base exception for all issue_slo errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DataIntegrityError(SloError):
    """An item's label snapshot disagrees with its timeline snapshot.

    Raised when an item currently carries a tracked label but no ``labeled``
    event for it exists in the visible timeline. Callers usually resolve this
    by re-fetching a fuller timeline.
    """

    def __init__(self, issue_url: str, label: str):
        self.issue_url = issue_url
        self.label = label
        super().__init__(
            f"Issue {issue_url} has the '{label}' label but no timeline item adding that label.",
            {"issue_url": issue_url, "label": label},
        )


class TimelineOrderError(SloError):
    """A timeline was supplied out of chronological order."""

    def __init__(self, issue_url: str, index: int, previous: Any, current: Any):
        self.issue_url = issue_url
        self.index = index
        super().__init__(
            f"Timeline of {issue_url} goes backwards at event {index}: {current} < {previous}",
            {"issue_url": issue_url, "index": index, "previous": previous, "current": current},
        )


class MalformedTimelineError(SloError):
    """A recognized timeline item carries no usable instant."""

    def __init__(self, issue_url: str, typename: str, raw_created: Any):
        self.issue_url = issue_url
        self.typename = typename
        super().__init__(
            f"Timeline item {typename} on {issue_url} has no usable createdAt: {raw_created!r}",
            {"issue_url": issue_url, "typename": typename, "createdAt": raw_created},
        )
