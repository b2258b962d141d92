"""Follow-up task metrics and listing."""

from datetime import datetime

from ..schemas.follow_up import (
    FollowUp,
    FollowUpMetrics,
    FollowUpPage,
    FollowUpQuery,
    FollowUpStatus,
)
from .dates import resolve_now

HIGH_PRIORITY_THRESHOLD = 8


def is_overdue(follow_up: FollowUp, now: datetime) -> bool:
    """A follow-up is overdue once its due date passes without completion."""
    return follow_up.due_date < now and follow_up.status != FollowUpStatus.COMPLETED


def follow_up_metrics(
    follow_ups: list[FollowUp],
    now: datetime | None = None,
    hospital_id: str | None = None,
    high_priority_threshold: int = HIGH_PRIORITY_THRESHOLD,
) -> FollowUpMetrics:
    """Count follow-ups by status, overdue and high priority."""
    now = resolve_now(now)
    if hospital_id:
        follow_ups = [f for f in follow_ups if f.hospital_id == hospital_id]

    metrics = FollowUpMetrics(total=len(follow_ups))

    for follow_up in follow_ups:
        if follow_up.status == FollowUpStatus.PENDING:
            metrics.pending += 1
        elif follow_up.status == FollowUpStatus.IN_PROGRESS:
            metrics.in_progress += 1
        elif follow_up.status == FollowUpStatus.COMPLETED:
            metrics.completed += 1

        if follow_up.priority_score >= high_priority_threshold:
            metrics.high_priority += 1

        if is_overdue(follow_up, now):
            metrics.overdue += 1

    return metrics


def query_follow_ups(
    follow_ups: list[FollowUp],
    query: FollowUpQuery | None = None,
    now: datetime | None = None,
) -> FollowUpPage:
    """Filter follow-ups, highest priority and earliest due first, and page them."""
    query = query or FollowUpQuery()
    now = resolve_now(now)

    matched = [f for f in follow_ups if _matches(f, query, now)]
    matched.sort(key=lambda f: (-f.priority_score, f.due_date))

    start = (query.page - 1) * query.limit
    return FollowUpPage(
        data=matched[start : start + query.limit],
        total=len(matched),
        has_more=len(matched) > query.page * query.limit,
    )


def _matches(follow_up: FollowUp, query: FollowUpQuery, now: datetime) -> bool:
    if query.hospital_id and follow_up.hospital_id != query.hospital_id:
        return False
    if query.status and follow_up.status != query.status:
        return False
    if query.follow_up_type and follow_up.follow_up_type != query.follow_up_type:
        return False
    if query.priority_min is not None and follow_up.priority_score < query.priority_min:
        return False
    if query.overdue and not is_overdue(follow_up, now):
        return False
    if query.search:
        needle = query.search.lower()
        if (
            needle not in follow_up.description.lower()
            and needle not in follow_up.action_required.lower()
        ):
            return False
    return True
