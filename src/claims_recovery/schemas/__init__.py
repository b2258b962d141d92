"""Recovery ledger schemas for bills, summaries, NMI records and follow-ups."""

from .common import (
    DEFAULT_PAYER,
    UNKNOWN_PATIENT_NAME,
    UNKNOWN_PAYER,
    AgingBucket,
    BillStatus,
)
from .dashboard import RecoveryDashboard
from .follow_up import (
    Contact,
    FollowUp,
    FollowUpMetrics,
    FollowUpPage,
    FollowUpQuery,
    FollowUpStatus,
    FollowUpType,
)
from .ledger import (
    BillPage,
    BillQuery,
    BillSortKey,
    EnrichedBill,
    RawBill,
    RawPatient,
    RawVisit,
)
from .nmi import NMIPage, NMIPayerCount, NMIQuery, NMIRecord, NMISummary
from .summary import AgingBucketSummary, PayerSummary, RecoverySummary

__all__ = [
    # Common
    "DEFAULT_PAYER",
    "UNKNOWN_PATIENT_NAME",
    "UNKNOWN_PAYER",
    "BillStatus",
    "AgingBucket",
    # Ledger
    "RawBill",
    "RawVisit",
    "RawPatient",
    "EnrichedBill",
    "BillSortKey",
    "BillQuery",
    "BillPage",
    # Summaries
    "PayerSummary",
    "RecoverySummary",
    "AgingBucketSummary",
    # NMI
    "NMIRecord",
    "NMIPayerCount",
    "NMISummary",
    "NMIQuery",
    "NMIPage",
    # Follow-ups
    "Contact",
    "FollowUpType",
    "FollowUpStatus",
    "FollowUp",
    "FollowUpMetrics",
    "FollowUpQuery",
    "FollowUpPage",
    # Output
    "RecoveryDashboard",
]
