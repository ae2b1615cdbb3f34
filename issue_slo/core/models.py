"""Domain data models for tracked issues, pull requests, and their timelines."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class EventKind(str, Enum):
    LABELED = "labeled"
    UNLABELED = "unlabeled"
    CONVERTED_TO_DRAFT = "converted-to-draft"
    READY_FOR_REVIEW = "ready-for-review"
    CLOSED = "closed"
    REOPENED = "reopened"
    # Issue comments, reviews, and review-thread comments.
    COMMENT = "comment-like"


class SloTier(str, Enum):
    NONE = "none"
    TRIAGE = "triage"
    SOON = "soon"
    URGENT = "urgent"


class PauseReason(str, Enum):
    DRAFT = "draft"
    NEED_FEEDBACK = "need-feedback"
    CLOSED = "closed"
    NO_SLO_LABEL = "no-slo-label"


@dataclass(slots=True)
class TimelineEvent:
    kind: EventKind
    created: datetime
    label: str | None = None
    author: str | None = None


@dataclass(slots=True)
class IssueModel:
    url: str
    repository: str | None
    created: datetime
    author: str | None = None
    is_draft: bool = False
    labels: list[str] = field(default_factory=list)
    # Oldest first.
    timeline: list[TimelineEvent] = field(default_factory=list)
