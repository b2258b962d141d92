"""Shared types and boundary coercions for recovery ledger schemas."""

import logging
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_PAYER = "private"
UNKNOWN_PATIENT_NAME = "Unknown"
UNKNOWN_PAYER = "Unknown"


class BillStatus(str, Enum):
    """Lifecycle status derived for a single bill."""

    PENDING = "pending"
    RECEIVED = "received"
    PARTIAL = "partial"
    NMI = "nmi"
    OVERDUE = "overdue"


class AgingBucket(str, Enum):
    """Overdue-day buckets, in ascending order."""

    NOT_DUE = "-"
    DAYS_0_30 = "0-30"
    DAYS_31_60 = "31-60"
    DAYS_61_90 = "61-90"
    DAYS_91_180 = "91-180"
    DAYS_181_365 = "181-365"
    DAYS_365_PLUS = "365+"


def to_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC. Naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a store value into a UTC datetime.

    Accepts datetimes, dates (midnight UTC) and ISO 8601 strings. Anything
    else, including blank or malformed strings, is treated as absent.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return to_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return to_utc(datetime.fromisoformat(text))
        except ValueError:
            logger.debug("Treating unparseable timestamp %r as absent", value)
            return None
    logger.debug("Treating unsupported timestamp value %r as absent", value)
    return None


def is_blank(value: str | None) -> bool:
    """True when a free-text field is absent or whitespace only."""
    return value is None or value.strip() == ""


def optional_text(value: Any) -> str | None:
    """Coerce an optional store value to text, keeping None."""
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)
