"""Follow-up task and contact schemas."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .common import parse_timestamp


class FollowUpType(str, Enum):
    """Reason a follow-up was raised against a claim."""

    MISSING_DOCUMENTS = "missing_documents"
    APPEAL_DEADLINE = "appeal_deadline"
    PAYMENT_OVERDUE = "payment_overdue"
    VERIFICATION_PENDING = "verification_pending"
    ESCALATION = "escalation"
    CUSTOM = "custom"


class FollowUpStatus(str, Enum):
    """Progress of a follow-up task."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class Contact(BaseModel):
    """A payer or TPA contact used for follow-up communication."""

    id: str
    name: str
    phone: str = ""
    email: str = ""
    role: str = ""
    organization: str | None = None
    notes: str | None = None
    created_at: datetime | None = None

    @field_validator("created_at", mode="before")
    @classmethod
    def _coerce_timestamp(cls, value: Any) -> datetime | None:
        return parse_timestamp(value)


class FollowUp(BaseModel):
    """A follow-up task for chasing one claim."""

    id: str
    claim_id: str
    hospital_id: str
    follow_up_type: FollowUpType = FollowUpType.CUSTOM
    priority_score: int = Field(default=5, ge=0, le=10)
    status: FollowUpStatus = FollowUpStatus.PENDING
    assigned_to: str | None = None
    due_date: datetime
    description: str = ""
    action_required: str = ""
    contact_person: str | None = None
    contact_phone: str | None = None
    contact_email: str | None = None
    whatsapp_sent: bool = False
    email_sent: bool = False
    phone_attempted: bool = False
    last_contact_date: datetime | None = None
    next_follow_up_date: datetime | None = None
    escalation_level: int = 1
    resolution_notes: str | None = None
    auto_generated: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("due_date", mode="before")
    @classmethod
    def _coerce_due_date(cls, value: Any) -> Any:
        # Leave unparseable values for pydantic to reject; a due date is required.
        return parse_timestamp(value) or value

    @field_validator(
        "last_contact_date",
        "next_follow_up_date",
        "created_at",
        "updated_at",
        mode="before",
    )
    @classmethod
    def _coerce_timestamp(cls, value: Any) -> datetime | None:
        return parse_timestamp(value)


class FollowUpMetrics(BaseModel):
    """Dashboard counters for follow-up tasks."""

    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    overdue: int = 0
    high_priority: int = 0


class FollowUpQuery(BaseModel):
    """Filters and 1-based page window for the follow-up list."""

    hospital_id: str | None = None
    status: FollowUpStatus | None = None
    follow_up_type: FollowUpType | None = None
    priority_min: int | None = None
    overdue: bool = False
    search: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, gt=0)


class FollowUpPage(BaseModel):
    """One page of follow-ups."""

    data: list[FollowUp] = []
    total: int = 0
    has_more: bool = False
