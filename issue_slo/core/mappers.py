"""Mapping raw tracker issue/pull-request JSON into IssueModel instances."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import pandas as pd

from issue_slo.analytics.metrics.durations import normalize_timestamp

from .errors import MalformedTimelineError
from .models import EventKind, IssueModel, TimelineEvent

logger = logging.getLogger(__name__)

TIMELINE_KINDS: dict[str, EventKind] = {
    "LabeledEvent": EventKind.LABELED,
    "UnlabeledEvent": EventKind.UNLABELED,
    "ConvertToDraftEvent": EventKind.CONVERTED_TO_DRAFT,
    "ReadyForReviewEvent": EventKind.READY_FOR_REVIEW,
    "ClosedEvent": EventKind.CLOSED,
    "ReopenedEvent": EventKind.REOPENED,
    "IssueComment": EventKind.COMMENT,
    "PullRequestReview": EventKind.COMMENT,
    "PullRequestReviewThread": EventKind.COMMENT,
}


def parse_dt(val):
    ts = normalize_timestamp(val)
    return None if ts is None else ts.to_pydatetime()


def _login(node: dict[str, Any] | None) -> str | None:
    return (node or {}).get("login")


def _nodes(container: dict[str, Any] | None) -> list[dict[str, Any]]:
    return list((container or {}).get("nodes") or [])


def map_timeline_item(raw: dict[str, Any], issue_url: str = "") -> TimelineEvent | None:
    typename = raw.get("__typename")
    kind = TIMELINE_KINDS.get(typename)
    if kind is None:
        logger.debug("Skipping unsupported timeline item %s", typename)
        return None
    created = parse_dt(raw.get("createdAt"))
    if created is None:
        raise MalformedTimelineError(issue_url, typename, raw.get("createdAt"))
    label = None
    if kind in (EventKind.LABELED, EventKind.UNLABELED):
        label = (raw.get("label") or {}).get("name")
    return TimelineEvent(kind=kind, created=created, label=label, author=_login(raw.get("author")))


def map_issue(raw: dict[str, Any], repository: str | None = None) -> IssueModel:
    created = parse_dt(raw.get("createdAt"))
    if created is None:
        raise ValueError(f"Issue {raw.get('url')!r} has no usable createdAt")
    url = raw.get("url") or ""
    timeline = []
    for node in _nodes(raw.get("timelineItems")):
        event = map_timeline_item(node, url)
        if event is not None:
            timeline.append(event)
    return IssueModel(
        url=url,
        repository=repository or (raw.get("repository") or {}).get("nameWithOwner"),
        created=created,
        author=_login(raw.get("author")),
        is_draft=bool(raw.get("isDraft", False)),
        labels=[n.get("name") for n in _nodes(raw.get("labels")) if n.get("name")],
        timeline=timeline,
    )


def issues_to_dataframe(issues: Iterable[IssueModel]) -> pd.DataFrame:
    rows = []
    for i in issues:
        rows.append(
            {
                "url": i.url,
                "repository": i.repository,
                "created": i.created,
                "author": i.author or "ghost",
                "is_draft": i.is_draft,
                "labels": i.labels,
                "timeline_events": len(i.timeline),
            }
        )
    df = pd.DataFrame(rows)
    # Normalize labels list to a stable, comma-separated string for display
    if "labels" in df.columns:

        def _format_labels(val):
            if not val:
                return ""
            unique = {v for v in val if v}
            return ", ".join(sorted(unique, key=lambda s: s.lower()))

        df["labels"] = df["labels"].apply(_format_labels)
    return df
