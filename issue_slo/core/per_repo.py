"""Per-repository triage configuration.

Some repositories mark issues as triaged by means other than the priority
labels (a milestone, a project column, a bespoke label). They register a
predicate here; the tier classifier consults it as a fallback.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from .config import DEFAULT_LABELS, LabelVocabulary
from .labels import has_label
from .models import IssueModel

logger = logging.getLogger(__name__)

TriagePredicate = Callable[[IssueModel], bool]


def _repo_key(name_with_owner: str | None) -> str:
    return (name_with_owner or "").strip().lower()


class TriageRules:
    """Registry of custom ``is_triaged`` predicates keyed by ``owner/name``."""

    def __init__(self, predicates: dict[str, TriagePredicate] | None = None):
        self._predicates: dict[str, TriagePredicate] = {}
        for repo, predicate in (predicates or {}).items():
            self.register(repo, predicate)

    def register(self, name_with_owner: str, predicate: TriagePredicate) -> None:
        key = _repo_key(name_with_owner)
        if not key:
            raise ValueError("Repository name must not be empty")
        self._predicates[key] = predicate

    def has_predicate(self, name_with_owner: str | None) -> bool:
        return _repo_key(name_with_owner) in self._predicates

    def is_triaged(self, name_with_owner: str | None, issue: IssueModel) -> bool:
        predicate = self._predicates.get(_repo_key(name_with_owner))
        if predicate is None:
            return False
        triaged = bool(predicate(issue))
        logger.debug("Custom triage predicate for %s on %s -> %s", name_with_owner, issue.url, triaged)
        return triaged


def has_label_triage(
    name_with_owner: str | None,
    repo_label_names: Iterable[str | None],
    rules: TriageRules | None = None,
    labels: LabelVocabulary = DEFAULT_LABELS,
) -> bool:
    """Return whether a repository has enough configuration to mark issues as triaged.

    Repositories adopt different subsets of the recognized labels, so only the
    smallest signal is required: the ``priority: eventually`` label, or a
    custom predicate registered for the repository.
    """
    if rules is not None and rules.has_predicate(name_with_owner):
        return True
    return has_label(repo_label_names, labels.priority_eventually)
