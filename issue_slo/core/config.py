"""Central configuration: recognized label vocabulary, tracked labels, and settings."""

from __future__ import annotations

from dataclasses import dataclass, fields

# =============================================================================
# Time Settings
# =============================================================================
# All instants are normalized into this zone before any arithmetic.
TIMEZONE = "UTC"

# =============================================================================
# Label Vocabulary
# =============================================================================


@dataclass(frozen=True, slots=True)
class LabelVocabulary:
    """Label names that drive SLO decisions.

    Values must be lowercase; every comparison against an item's labels is
    case-insensitive and happens on the lowercased label name.
    """

    priority_urgent: str = "priority: urgent"
    priority_soon: str = "priority: soon"
    priority_eventually: str = "priority: eventually"
    agenda: str = "agenda+"
    needs_edits: str = "needs edits"
    needs_reporter_feedback: str = "needs reporter feedback"

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value != value.lower():
                raise ValueError(f"Label vocabulary entry {f.name!r} must be lowercase: {value!r}")


DEFAULT_LABELS = LabelVocabulary()

# Labels whose most recent application is timed independently of the SLO clock.
# Keys are the public identifiers; values name the LabelVocabulary attribute.
TRACKED_LABELS: dict[str, str] = {
    "agenda": "agenda",
    "needs_edits": "needs_edits",
}


def tracked_label_name(key: str, labels: LabelVocabulary = DEFAULT_LABELS) -> str:
    """Resolve a tracked label key (e.g. ``"agenda"``) to its label name."""
    try:
        attr = TRACKED_LABELS[key]
    except KeyError:
        raise KeyError(f"Unknown tracked label {key!r}; expected one of {sorted(TRACKED_LABELS)}") from None
    return getattr(labels, attr)


# =============================================================================
# Runtime Settings
# =============================================================================


@dataclass(slots=True)
class SloSettings:
    # Reject timelines whose events go backwards in time before replaying them.
    check_order: bool = True


SETTINGS = SloSettings()
