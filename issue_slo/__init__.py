"""Service-level-objective clocks for issue tracker items."""

from issue_slo.analytics.metrics.labeled_time import count_labeled_time
from issue_slo.analytics.metrics.slo_clock import count_slo_time
from issue_slo.analytics.metrics.tier import classify, satisfies
from issue_slo.core.config import DEFAULT_LABELS, LabelVocabulary
from issue_slo.core.errors import DataIntegrityError, SloError, TimelineOrderError
from issue_slo.core.models import EventKind, IssueModel, PauseReason, SloTier, TimelineEvent
from issue_slo.core.per_repo import TriageRules, has_label_triage
from issue_slo.core.service import SloService

__all__ = [
    "DEFAULT_LABELS",
    "DataIntegrityError",
    "EventKind",
    "IssueModel",
    "LabelVocabulary",
    "PauseReason",
    "SloError",
    "SloService",
    "SloTier",
    "TimelineEvent",
    "TimelineOrderError",
    "TriageRules",
    "classify",
    "count_labeled_time",
    "count_slo_time",
    "has_label_triage",
    "satisfies",
]
