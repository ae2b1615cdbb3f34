"""Label name normalization and membership helpers.

Every label comparison in the package goes through these functions so that
matching is consistently case-insensitive.
"""

from __future__ import annotations

from collections.abc import Iterable

from .config import DEFAULT_LABELS, LabelVocabulary


def normalize_label(value: str | None) -> str:
    """Lowercase a label name; empty/null values become ``""``.

    Parameters
    ----------
    value : str | None
        Raw label name from the tracker.

    Returns
    -------
    str
        Normalized label name.

    Examples
    --------
    >>> normalize_label("Priority: Urgent")
    'priority: urgent'
    >>> normalize_label(None)
    ''
    """
    if not value:
        return ""
    return str(value).lower()


def label_set(names: Iterable[str | None]) -> frozenset[str]:
    """Normalize a collection of label names into a lookup set."""
    return frozenset(n for n in (normalize_label(v) for v in names) if n)


def has_label(names: Iterable[str | None], label: str) -> bool:
    """Check whether ``label`` appears in ``names`` (case-insensitive)."""
    target = normalize_label(label)
    return any(normalize_label(n) == target for n in names)


def is_needs_reporter_feedback(label: str | None, labels: LabelVocabulary = DEFAULT_LABELS) -> bool:
    return normalize_label(label) == labels.needs_reporter_feedback
