"""Bill ledger schemas: raw store rows, enriched bills and bill queries."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import (
    DEFAULT_PAYER,
    UNKNOWN_PATIENT_NAME,
    AgingBucket,
    BillStatus,
    optional_text,
    parse_timestamp,
)


class RawBill(BaseModel):
    """A bill preparation row as supplied by the data store.

    Store column names (``nmi``, ``nmi_date``, ``nmi_answered``, ``corporate``)
    are accepted as aliases for the query and payer fields.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    visit_id: str = ""
    # Amounts
    bill_amount: float = 0.0
    expected_amount: float | None = None
    received_amount: float | None = None
    deduction_amount: float | None = None
    # Dates
    date_of_submission: datetime | None = None
    expected_payment_date: datetime | None = None
    received_date: datetime | None = None
    # Payer query for more information
    info_query: str | None = Field(default=None, alias="nmi")
    info_query_date: datetime | None = Field(default=None, alias="nmi_date")
    info_query_answered_at: str | None = Field(default=None, alias="nmi_answered")
    payer_type: str = Field(default=DEFAULT_PAYER, alias="corporate")
    created_at: datetime | None = None

    @field_validator("id", "visit_id", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("bill_amount", mode="before")
    @classmethod
    def _default_bill_amount(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    @field_validator(
        "date_of_submission",
        "expected_payment_date",
        "received_date",
        "info_query_date",
        "created_at",
        mode="before",
    )
    @classmethod
    def _coerce_timestamp(cls, value: Any) -> datetime | None:
        return parse_timestamp(value)

    @field_validator("info_query", "info_query_answered_at", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return optional_text(value)

    @field_validator("payer_type", mode="before")
    @classmethod
    def _default_payer(cls, value: Any) -> str:
        return str(value) if value else DEFAULT_PAYER


class RawVisit(BaseModel):
    """A hospital visit row linking bills to patients and claims."""

    visit_id: str
    patient_id: str | None = None
    claim_id: str | None = None

    @field_validator("visit_id", mode="before")
    @classmethod
    def _coerce_visit_id(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("patient_id", "claim_id", mode="before")
    @classmethod
    def _coerce_optional_id(cls, value: Any) -> str | None:
        return optional_text(value) or None


class RawPatient(BaseModel):
    """A patient row; only the identity and display name are used."""

    id: str
    name: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return "" if value is None else str(value)


class EnrichedBill(RawBill):
    """A bill joined with its patient and visit, plus derived recovery fields."""

    patient_name: str = UNKNOWN_PATIENT_NAME
    patient_id: str = ""
    claim_id: str | None = None
    status: BillStatus
    bill_age_days: int = Field(default=0, ge=0)
    overdue_days: int = Field(default=0, ge=0)
    aging_bucket: AgingBucket = AgingBucket.NOT_DUE


BillSortKey = Literal[
    "created_at",
    "bill_amount",
    "date_of_submission",
    "bill_age_days",
    "overdue_days",
]


class BillQuery(BaseModel):
    """Filters and pagination window for the bills table."""

    payer_type: str | None = None
    status: BillStatus | None = None
    search: str | None = None
    limit: int = Field(default=20, gt=0)
    offset: int = Field(default=0, ge=0)
    sort_by: BillSortKey | None = None
    descending: bool = True


class BillPage(BaseModel):
    """One page of bills plus the post-filter total."""

    data: list[EnrichedBill] = []
    count: int = 0
