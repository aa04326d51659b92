"""
Timestamp utilities (stdlib-only).

Optional timestamps show up everywhere in scheduler introspection: a
trigger that never fired has no previous fire time, a finished trigger has
no next fire time. ``latest()`` and ``earliest()`` fold such values while
ignoring the absent ones.

Both combinators seed from the candidate whenever nothing has been recorded
yet, and afterwards only move on a strictly better value, so ties keep the
value recorded first.

STDLIB ONLY - NO PYDANTIC.
"""

from datetime import UTC, datetime


def latest(current: datetime | None, candidate: datetime | None) -> datetime | None:
    """Return the later of two optional timestamps.

    >>> a, b = datetime(2026, 1, 1, tzinfo=UTC), datetime(2026, 1, 2, tzinfo=UTC)
    >>> latest(a, b) == b
    True
    >>> latest(b, None) == b
    True
    >>> latest(None, None) is None
    True
    """
    if current is None:
        return candidate
    if candidate is not None and candidate > current:
        return candidate
    return current


def earliest(current: datetime | None, candidate: datetime | None) -> datetime | None:
    """Return the sooner of two optional timestamps.

    >>> a, b = datetime(2026, 1, 1, tzinfo=UTC), datetime(2026, 1, 2, tzinfo=UTC)
    >>> earliest(b, a) == a
    True
    >>> earliest(None, b) == b
    True
    """
    if current is None:
        return candidate
    if candidate is not None and candidate < current:
        return candidate
    return current
