"""Join bills with visits and patients and derive recovery fields."""

from datetime import datetime

from ..schemas.common import UNKNOWN_PATIENT_NAME
from ..schemas.ledger import EnrichedBill, RawBill, RawPatient, RawVisit
from .aging import aging_bucket
from .dates import days_overdue, days_since, resolve_now
from .status import classify_status


def enrich_bills(
    bills: list[RawBill],
    visits: list[RawVisit],
    patients: list[RawPatient],
    now: datetime | None = None,
    unknown_patient_name: str = UNKNOWN_PATIENT_NAME,
) -> list[EnrichedBill]:
    """Produce one enriched bill per raw bill, preserving input order.

    Bills whose visit or patient cannot be found are kept with sentinel
    patient fields rather than dropped.
    """
    now = resolve_now(now)
    visits_by_id = {visit.visit_id: visit for visit in visits}
    names_by_patient = {patient.id: patient.name for patient in patients}

    return [
        _enrich_bill(bill, visits_by_id, names_by_patient, now, unknown_patient_name)
        for bill in bills
    ]


def get_bill_detail(
    bill_id: str,
    bills: list[RawBill],
    visits: list[RawVisit],
    patients: list[RawPatient],
    now: datetime | None = None,
    unknown_patient_name: str = UNKNOWN_PATIENT_NAME,
) -> EnrichedBill | None:
    """Enrich the single bill with ``bill_id``, or return None if absent."""
    bill = next((b for b in bills if b.id == str(bill_id)), None)
    if bill is None:
        return None
    return enrich_bills([bill], visits, patients, now, unknown_patient_name)[0]


def _enrich_bill(
    bill: RawBill,
    visits_by_id: dict[str, RawVisit],
    names_by_patient: dict[str, str],
    now: datetime,
    unknown_patient_name: str,
) -> EnrichedBill:
    visit = visits_by_id.get(bill.visit_id)
    patient_id = (visit.patient_id if visit else None) or ""
    claim_id = visit.claim_id if visit else None
    patient_name = names_by_patient.get(patient_id) or unknown_patient_name

    overdue_days = days_overdue(bill.expected_payment_date, now)

    return EnrichedBill.model_validate(
        {
            **bill.model_dump(),
            "patient_name": patient_name,
            "patient_id": patient_id,
            "claim_id": claim_id,
            "status": classify_status(bill, overdue_days),
            "bill_age_days": days_since(bill.date_of_submission, now),
            "overdue_days": overdue_days,
            "aging_bucket": aging_bucket(overdue_days),
        }
    )
