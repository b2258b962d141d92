"""Filtering, search, sorting and pagination for the bills table."""

from ..schemas.ledger import BillPage, BillQuery, EnrichedBill


def query_bills(enriched: list[EnrichedBill], query: BillQuery | None = None) -> BillPage:
    """Apply the query's filters, then return one page and the filtered count.

    Filters combine with AND; empty filter values are ignored. ``count`` is the
    number of matching bills before the limit/offset window is applied.
    """
    query = query or BillQuery()
    matched = [bill for bill in enriched if _matches(bill, query)]

    if query.sort_by:
        matched = _sort_bills(matched, query.sort_by, query.descending)

    return BillPage(
        data=matched[query.offset : query.offset + query.limit],
        count=len(matched),
    )


def _matches(bill: EnrichedBill, query: BillQuery) -> bool:
    if query.payer_type and bill.payer_type != query.payer_type:
        return False
    if query.status and bill.status != query.status:
        return False
    if query.search:
        needle = query.search.lower()
        haystacks = (bill.patient_name, bill.visit_id, bill.payer_type)
        if not any(needle in value.lower() for value in haystacks):
            return False
    return True


def _sort_bills(
    bills: list[EnrichedBill], key: str, descending: bool
) -> list[EnrichedBill]:
    """Sort by one field; bills missing that field always go last."""
    present = [b for b in bills if getattr(b, key) is not None]
    missing = [b for b in bills if getattr(b, key) is None]
    present.sort(key=lambda b: getattr(b, key), reverse=descending)
    return present + missing
