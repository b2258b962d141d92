"""Recovery Dashboard workflow.

A 2-step pipeline that:
1. Validates raw bill, visit and patient rows handed over by the data store
2. Builds the dashboard: summary cards, payer cards, aging chart and one page
   of the bills table
"""

import logging
from datetime import datetime
from typing import Annotated, Any, Literal, TypeVar

from pydantic import BaseModel, ValidationError
from workflows import Context, Workflow, step
from workflows.events import Event, StartEvent, StopEvent
from workflows.resource import Resource

from .config import RecoveryAppConfig, load_config
from .recovery import build_dashboard
from .recovery.dates import resolve_now
from .recovery.status import has_open_info_query
from .schemas import BillQuery, RawBill, RawPatient, RawVisit

logger = logging.getLogger(__name__)

RowModel = TypeVar("RowModel", bound=BaseModel)


# --- Events ---


class RecoveryStartEvent(StartEvent):
    """Start event carrying one snapshot of the ledger as store rows."""

    bills: list[dict[str, Any]] = []
    visits: list[dict[str, Any]] = []
    patients: list[dict[str, Any]] = []
    query: BillQuery | None = None
    now: datetime | None = None


class StatusEvent(Event):
    """Progress status update for the client."""

    message: str
    level: Literal["info", "warning", "error"] = "info"


class RecordsLoadedEvent(Event):
    """Emitted after all rows are validated."""

    pass


# --- Workflow State ---


class WorkflowState(BaseModel):
    """State persisted across workflow steps."""

    now: datetime | None = None
    query: BillQuery | None = None
    bills: list[RawBill] = []
    visits: list[RawVisit] = []
    patients: list[RawPatient] = []
    rejected_rows: list[str] = []


# --- Workflow ---


class RecoveryDashboardWorkflow(Workflow):
    """Turn a ledger snapshot into the recovery dashboard."""

    @step()
    async def load_records(
        self,
        event: RecoveryStartEvent,
        ctx: Context[WorkflowState],
    ) -> RecordsLoadedEvent:
        """Validate store rows; rows that fail validation are skipped and reported."""
        ctx.write_event_to_stream(
            StatusEvent(message=f"Loading {len(event.bills)} bills...")
        )

        bills, rejected_bills = _validate_rows(event.bills, RawBill, "bill")
        visits, rejected_visits = _validate_rows(event.visits, RawVisit, "visit")
        patients, rejected_patients = _validate_rows(
            event.patients, RawPatient, "patient"
        )
        rejected = rejected_bills + rejected_visits + rejected_patients

        if rejected:
            ctx.write_event_to_stream(
                StatusEvent(
                    message=f"Skipped {len(rejected)} invalid rows: {', '.join(rejected)}",
                    level="warning",
                )
            )

        async with ctx.store.edit_state() as state:
            state.now = resolve_now(event.now)
            state.query = event.query
            state.bills = bills
            state.visits = visits
            state.patients = patients
            state.rejected_rows = rejected

        return RecordsLoadedEvent()

    @step()
    async def assemble_dashboard(
        self,
        event: RecordsLoadedEvent,
        ctx: Context[WorkflowState],
        config: Annotated[RecoveryAppConfig, Resource(load_config)],
    ) -> StopEvent:
        """Enrich bills, aggregate them and page the bills table."""
        state = await ctx.store.get_state()

        ctx.write_event_to_stream(StatusEvent(message="Computing recovery metrics..."))

        query = state.query or BillQuery(limit=config.recovery.page_size)
        dashboard = build_dashboard(
            state.bills,
            state.visits,
            state.patients,
            query=query,
            now=state.now,
            unknown_patient_name=config.recovery.unknown_patient_name,
        )
        dashboard.rejected_rows = state.rejected_rows

        open_queries = sum(1 for bill in state.bills if has_open_info_query(bill))

        if dashboard.overdue_bills > 0:
            ctx.write_event_to_stream(
                StatusEvent(
                    message=(
                        f"{dashboard.overdue_bills} unpaid bills are past "
                        "their expected payment date"
                    ),
                    level="warning",
                )
            )
        if open_queries > 0:
            ctx.write_event_to_stream(
                StatusEvent(
                    message=f"{open_queries} bills have open payer queries",
                    level="warning",
                )
            )

        ctx.write_event_to_stream(StatusEvent(message="Dashboard ready"))

        return StopEvent(result=dashboard.model_dump(mode="json"))


# --- Helper Functions ---


def _validate_rows(
    rows: list[dict[str, Any]], model: type[RowModel], kind: str
) -> tuple[list[RowModel], list[str]]:
    """Validate rows into ``model``, returning the valid records and rejected row labels."""
    records: list[RowModel] = []
    rejected: list[str] = []

    for index, row in enumerate(rows):
        try:
            records.append(model.model_validate(row))
        except ValidationError as exc:
            label = f"{kind}:{row.get('id') or row.get('visit_id') or index}"
            logger.warning("Rejected %s row %s: %s", kind, label, exc)
            rejected.append(label)

    return records, rejected


workflow = RecoveryDashboardWorkflow(timeout=None)
