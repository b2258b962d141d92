"""Per-payer aggregation of the bill ledger."""

from ..schemas.ledger import RawBill, RawVisit
from ..schemas.summary import PayerSummary
from .status import has_info_query


def summarize_by_payer(
    bills: list[RawBill], visits: list[RawVisit]
) -> list[PayerSummary]:
    """Group bills by payer type and total them.

    Bills are split into received (a receipt date exists) and pending
    (no receipt date). Patients are counted once per payer and only when the
    bill's visit resolves to a patient.

    Results are sorted by total billed amount, largest first.
    """
    patient_by_visit = {
        visit.visit_id: visit.patient_id for visit in visits if visit.patient_id
    }

    groups: dict[str, PayerSummary] = {}
    patients_by_payer: dict[str, set[str]] = {}

    for bill in bills:
        group = groups.get(bill.payer_type)
        if group is None:
            group = groups[bill.payer_type] = PayerSummary(payer_type=bill.payer_type)
            patients_by_payer[bill.payer_type] = set()

        group.total_bills += 1
        group.total_amount += bill.bill_amount

        patient_id = patient_by_visit.get(bill.visit_id)
        if patient_id:
            patients_by_payer[bill.payer_type].add(patient_id)

        if bill.received_date is not None:
            group.received_count += 1
            group.received_amount += bill.received_amount or 0
        else:
            group.pending_count += 1
            group.pending_amount += bill.bill_amount

        if has_info_query(bill):
            group.nmi_count += 1

    for payer_type, group in groups.items():
        group.patient_count = len(patients_by_payer[payer_type])

    # sorted() is stable, so equal totals keep first-seen order
    return sorted(groups.values(), key=lambda g: g.total_amount, reverse=True)
