"""Aging and recovery-summarization pipeline for the hospital bill ledger."""

import logging
from datetime import datetime

from ..schemas.common import UNKNOWN_PATIENT_NAME, BillStatus
from ..schemas.dashboard import RecoveryDashboard
from ..schemas.ledger import BillQuery, RawBill, RawPatient, RawVisit
from .aging import AGING_BUCKETS, aging_breakdown, aging_bucket
from .dates import days_overdue, days_since, resolve_now
from .enrichment import enrich_bills, get_bill_detail
from .follow_ups import follow_up_metrics, query_follow_ups
from .nmi import (
    disposition_options,
    payer_options,
    query_nmi,
    summarize_nmi,
)
from .payers import summarize_by_payer
from .query import query_bills
from .status import classify_status, has_info_query, has_open_info_query
from .summary import summarize_recovery

logger = logging.getLogger(__name__)

__all__ = [
    "build_dashboard",
    "days_since",
    "days_overdue",
    "classify_status",
    "has_info_query",
    "has_open_info_query",
    "AGING_BUCKETS",
    "aging_bucket",
    "aging_breakdown",
    "enrich_bills",
    "get_bill_detail",
    "summarize_by_payer",
    "summarize_recovery",
    "query_bills",
    "summarize_nmi",
    "query_nmi",
    "disposition_options",
    "payer_options",
    "follow_up_metrics",
    "query_follow_ups",
]


def build_dashboard(
    bills: list[RawBill],
    visits: list[RawVisit],
    patients: list[RawPatient],
    query: BillQuery | None = None,
    now: datetime | None = None,
    unknown_patient_name: str = UNKNOWN_PATIENT_NAME,
) -> RecoveryDashboard:
    """Compute every recovery dashboard panel from one snapshot of the ledger.

    - Summary cards: hospital-wide totals from the raw bills
    - Payer cards: per-payer totals, largest first
    - Aging chart: bill counts per aging bucket over all enriched bills
    - Overdue count: enriched bills whose status is overdue
    - Bills table: one filtered page of enriched bills
    """
    now = resolve_now(now)

    enriched = enrich_bills(bills, visits, patients, now, unknown_patient_name)
    page = query_bills(enriched, query)

    logger.debug(
        "Built dashboard over %d bills (%d matched the bills query)",
        len(bills),
        page.count,
    )

    return RecoveryDashboard(
        generated_at=now,
        summary=summarize_recovery(bills),
        payers=summarize_by_payer(bills, visits),
        aging=aging_breakdown(enriched),
        overdue_bills=sum(1 for bill in enriched if bill.status == BillStatus.OVERDUE),
        bills=page,
    )
