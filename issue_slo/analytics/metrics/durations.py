"""Instant and duration normalization shared by the SLO metrics."""

from __future__ import annotations

from datetime import timedelta

import pandas as pd
import pytz

from issue_slo.core.config import TIMEZONE

SECONDS_PER_DAY = 86400.0


def normalize_timestamp(value, target_tz=None) -> pd.Timestamp | None:
    """Normalize a timestamp-like value into ``target_tz`` (default ``TIMEZONE``).

    Naive values are assumed to be UTC. Returns None when the input cannot be
    parsed.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    ts = pd.to_datetime(value, errors="coerce")
    if not isinstance(ts, pd.Timestamp) or pd.isna(ts):
        return None
    zone = target_tz or pytz.timezone(TIMEZONE)
    try:
        aware = ts if ts.tzinfo is not None else ts.tz_localize(pytz.UTC)
        return aware.tz_convert(zone)
    except (TypeError, ValueError):
        return None


def to_instant(value) -> pd.Timestamp:
    """Like :func:`normalize_timestamp` but raises on unparseable input."""
    ts = normalize_timestamp(value)
    if ts is None:
        raise ValueError(f"Cannot interpret {value!r} as an instant")
    return ts


def normalize_duration(delta: timedelta | pd.Timedelta | None = None) -> pd.Timedelta:
    """Rebalance a duration so its largest unit is whole days.

    Sub-day precision is preserved; ``pd.Timedelta`` keeps days plus a
    sub-day remainder, exposed through ``.days`` and ``.components``.
    """
    if delta is None:
        return pd.Timedelta(0)
    return pd.Timedelta(delta)


def duration_days(delta: timedelta | pd.Timedelta | None) -> float | None:
    """Fractional days for tabular output; None passes through."""
    if delta is None or pd.isna(delta):
        return None
    return pd.Timedelta(delta).total_seconds() / SECONDS_PER_DAY
