"""Bill lifecycle status classification."""

from ..schemas.common import BillStatus, is_blank
from ..schemas.ledger import RawBill


def has_info_query(bill: RawBill) -> bool:
    """True when the payer raised a query, whether or not it was answered."""
    return not is_blank(bill.info_query)


def has_open_info_query(bill: RawBill) -> bool:
    """True when the payer raised a query that has not been answered yet."""
    return has_info_query(bill) and not bill.info_query_answered_at


def has_receipt(bill: RawBill) -> bool:
    """True when both a receipt date and a non-zero received amount are recorded."""
    return bill.received_date is not None and bool(bill.received_amount)


def classify_status(bill: RawBill, overdue_days: int) -> BillStatus:
    """Derive the lifecycle status of a bill.

    The first matching rule wins:
    1. An open payer query blocks the claim regardless of payment -> NMI
    2. A recorded receipt -> RECEIVED when it covers the bill, else PARTIAL
    3. Past the expected payment date -> OVERDUE
    4. Otherwise -> PENDING
    """
    if has_open_info_query(bill):
        return BillStatus.NMI

    if has_receipt(bill):
        if bill.received_amount >= bill.bill_amount:
            return BillStatus.RECEIVED
        return BillStatus.PARTIAL

    if overdue_days > 0:
        return BillStatus.OVERDUE

    return BillStatus.PENDING
