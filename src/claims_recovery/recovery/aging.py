"""Aging buckets for overdue bills."""

from ..schemas.common import AgingBucket
from ..schemas.ledger import EnrichedBill
from ..schemas.summary import AgingBucketSummary

AGING_BUCKETS: list[AgingBucket] = list(AgingBucket)

# Inclusive upper bound of each bucket after NOT_DUE
_BUCKET_LIMITS: list[tuple[int, AgingBucket]] = [
    (30, AgingBucket.DAYS_0_30),
    (60, AgingBucket.DAYS_31_60),
    (90, AgingBucket.DAYS_61_90),
    (180, AgingBucket.DAYS_91_180),
    (365, AgingBucket.DAYS_181_365),
]


def aging_bucket(overdue_days: int) -> AgingBucket:
    """Map a count of overdue days to its aging bucket."""
    if overdue_days <= 0:
        return AgingBucket.NOT_DUE
    for limit, bucket in _BUCKET_LIMITS:
        if overdue_days <= limit:
            return bucket
    return AgingBucket.DAYS_365_PLUS


def aging_breakdown(bills: list[EnrichedBill]) -> list[AgingBucketSummary]:
    """Count bills and billed amounts per aging bucket, in bucket order.

    Every bucket is present in the result, including empty ones.
    """
    totals = {bucket: AgingBucketSummary(bucket=bucket) for bucket in AGING_BUCKETS}

    for bill in bills:
        entry = totals[bill.aging_bucket]
        entry.bill_count += 1
        entry.total_amount += bill.bill_amount

    return [totals[bucket] for bucket in AGING_BUCKETS]
