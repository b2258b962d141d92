"""Output schemas for the recovery dashboard."""

from datetime import datetime

from pydantic import BaseModel

from .ledger import BillPage
from .summary import AgingBucketSummary, PayerSummary, RecoverySummary


class RecoveryDashboard(BaseModel):
    """Everything the recovery dashboard renders for one request."""

    generated_at: datetime
    summary: RecoverySummary
    payers: list[PayerSummary] = []
    aging: list[AgingBucketSummary] = []
    overdue_bills: int = 0
    bills: BillPage = BillPage()
    rejected_rows: list[str] = []
