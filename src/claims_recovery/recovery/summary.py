"""Hospital-wide recovery summary."""

from ..schemas.ledger import RawBill
from ..schemas.summary import RecoverySummary
from .status import has_info_query


def summarize_recovery(bills: list[RawBill]) -> RecoverySummary:
    """Reduce the bill ledger to headline recovery metrics.

    Pending and received are a binary split on the receipt date. The NMI count
    includes every bill with a payer query, answered or not; use the enriched
    bill status for open queries only.
    """
    summary = RecoverySummary(total_bills=len(bills))

    for bill in bills:
        summary.total_amount += bill.bill_amount
        summary.deduction_amount += bill.deduction_amount or 0

        if bill.received_date is not None:
            summary.received_bills += 1
            summary.received_amount += bill.received_amount or 0
        else:
            summary.pending_bills += 1
            summary.pending_amount += bill.bill_amount

        if has_info_query(bill):
            summary.nmi_count += 1

    return summary
