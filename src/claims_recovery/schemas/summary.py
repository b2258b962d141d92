"""Aggregate schemas for recovery summary cards."""

from pydantic import BaseModel

from .common import AgingBucket


class PayerSummary(BaseModel):
    """Totals for all bills sharing one payer type."""

    payer_type: str
    total_bills: int = 0
    total_amount: float = 0.0
    pending_count: int = 0
    received_count: int = 0
    pending_amount: float = 0.0
    received_amount: float = 0.0
    patient_count: int = 0
    nmi_count: int = 0


class RecoverySummary(BaseModel):
    """Hospital-wide recovery metrics."""

    total_bills: int = 0
    total_amount: float = 0.0
    pending_bills: int = 0
    pending_amount: float = 0.0
    received_bills: int = 0
    received_amount: float = 0.0
    deduction_amount: float = 0.0
    nmi_count: int = 0


class AgingBucketSummary(BaseModel):
    """Bill count and billed amount falling into one aging bucket."""

    bucket: AgingBucket
    bill_count: int = 0
    total_amount: float = 0.0
