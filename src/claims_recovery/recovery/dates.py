"""Day arithmetic relative to an injectable "now"."""

from datetime import datetime, timedelta, timezone

from ..schemas.common import parse_timestamp, to_utc

__all__ = ["utc_now", "resolve_now", "days_since", "days_overdue", "parse_timestamp"]

ONE_DAY = timedelta(days=1)


def utc_now() -> datetime:
    """Current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


def resolve_now(now: datetime | None) -> datetime:
    """Return ``now`` normalized to UTC, or the wall clock when not given."""
    return utc_now() if now is None else to_utc(now)


def _whole_days(start: datetime, now: datetime) -> int:
    # Floor division of timedeltas rounds towards negative infinity.
    return (to_utc(now) - to_utc(start)) // ONE_DAY


def days_since(value: datetime | None, now: datetime) -> int:
    """Whole days elapsed since ``value``; 0 when absent or in the future."""
    if value is None:
        return 0
    return max(_whole_days(value, now), 0)


def days_overdue(expected: datetime | None, now: datetime) -> int:
    """Whole days past ``expected``; 0 when absent or not yet due."""
    if expected is None:
        return 0
    return max(_whole_days(expected, now), 0)
