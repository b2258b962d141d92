"""NMI tracker: summaries and listing of company-level payer queries."""

from datetime import datetime, timezone

from ..schemas.nmi import NMIPage, NMIPayerCount, NMIQuery, NMIRecord, NMISummary

PENDING_DISPOSITION_MARKERS = ("pending", "process", "open")

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def is_pending_disposition(disposition: str | None) -> bool:
    """True when a disposition still awaits the payer or the hospital."""
    if not disposition:
        return False
    lowered = disposition.lower()
    return any(marker in lowered for marker in PENDING_DISPOSITION_MARKERS)


def summarize_nmi(records: list[NMIRecord]) -> NMISummary:
    """Count NMI records overall and per payer, busiest payer first."""
    by_payer: dict[str, NMIPayerCount] = {}
    pending = 0

    for record in records:
        group = by_payer.setdefault(
            record.corporate_company, NMIPayerCount(payer=record.corporate_company)
        )
        group.count += 1
        if is_pending_disposition(record.disposition):
            group.pending_count += 1
            pending += 1

    return NMISummary(
        total_nmis=len(records),
        pending_nmis=pending,
        resolved_nmis=len(records) - pending,
        by_payer=sorted(by_payer.values(), key=lambda g: g.count, reverse=True),
    )


def query_nmi(records: list[NMIRecord], query: NMIQuery | None = None) -> NMIPage:
    """Filter NMI records, newest first, and return one page."""
    query = query or NMIQuery()
    matched = [record for record in records if _matches(record, query)]
    matched.sort(key=lambda r: r.created_at or _OLDEST, reverse=True)

    return NMIPage(
        data=matched[query.offset : query.offset + query.limit],
        count=len(matched),
    )


def disposition_options(records: list[NMIRecord]) -> list[str]:
    """Distinct non-empty dispositions, sorted, for filter dropdowns."""
    return sorted({r.disposition for r in records if r.disposition})


def payer_options(records: list[NMIRecord]) -> list[str]:
    """Distinct non-empty payer names, sorted, for filter dropdowns."""
    return sorted({r.corporate_company for r in records if r.corporate_company})


def _matches(record: NMIRecord, query: NMIQuery) -> bool:
    if query.payer and record.corporate_company != query.payer:
        return False
    if query.disposition and record.disposition != query.disposition:
        return False
    if query.search:
        needle = query.search.lower()
        haystacks = (
            record.corporate_company,
            record.disposition,
            record.sub_disposition,
            record.remarks or "",
        )
        if not any(needle in value.lower() for value in haystacks):
            return False
    return True
