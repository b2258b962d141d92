"""Company-level "need more information" (NMI) collection records."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .common import UNKNOWN_PAYER, parse_timestamp


class NMIRecord(BaseModel):
    """A payer query tracked against a corporate collection account."""

    id: str
    corporate_company: str = UNKNOWN_PAYER
    contract_type: str = ""
    disposition: str = ""
    sub_disposition: str = ""
    disposition_date: datetime | None = None
    disposition_notes: str | None = None
    corporate_response: str | None = None
    reason_for_delay: str | None = None
    promised_clearance_date: datetime | None = None
    collection_officer: str | None = None
    report_date: datetime | None = None
    remarks: str | None = None
    action_required: str | None = None
    next_steps: str | None = None
    management_escalation: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("corporate_company", mode="before")
    @classmethod
    def _default_company(cls, value: Any) -> str:
        return str(value) if value else UNKNOWN_PAYER

    @field_validator("contract_type", "disposition", "sub_disposition", mode="before")
    @classmethod
    def _default_blank(cls, value: Any) -> str:
        return str(value) if value else ""

    @field_validator(
        "disposition_notes",
        "corporate_response",
        "reason_for_delay",
        "collection_officer",
        "remarks",
        "action_required",
        "next_steps",
        "management_escalation",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value: Any) -> str | None:
        return str(value) if value else None

    @field_validator(
        "disposition_date",
        "promised_clearance_date",
        "report_date",
        "created_at",
        "updated_at",
        mode="before",
    )
    @classmethod
    def _coerce_timestamp(cls, value: Any) -> datetime | None:
        return parse_timestamp(value)

    @model_validator(mode="after")
    def _default_updated_at(self) -> "NMIRecord":
        if self.updated_at is None:
            self.updated_at = self.created_at
        return self


class NMIPayerCount(BaseModel):
    """NMI totals for one payer."""

    payer: str
    count: int = 0
    pending_count: int = 0


class NMISummary(BaseModel):
    """Headline NMI metrics with a per-payer breakdown."""

    total_nmis: int = 0
    pending_nmis: int = 0
    resolved_nmis: int = 0
    by_payer: list[NMIPayerCount] = []


class NMIQuery(BaseModel):
    """Filters and pagination window for the NMI tracker."""

    payer: str | None = None
    disposition: str | None = None
    search: str | None = None
    limit: int = Field(default=20, gt=0)
    offset: int = Field(default=0, ge=0)


class NMIPage(BaseModel):
    """One page of NMI records plus the post-filter total."""

    data: list[NMIRecord] = []
    count: int = 0
