"""
Leave request form state machine.

    idle --valid submit--> submitting --ok--> success --delay--> idle (+ history view)
                                     +--fail--> error --reset--> idle

The controller owns the field values, runs the two client-side checks
(required fields, date order) and drives the sheets client. Listeners are
called after every status change so the page can redraw while submit()
is still waiting on the network or the redirect delay.
"""
import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timezone

from shared.history_store import SessionHistory
from shared.model_schema import LeaveRequest, LeaveType, SubmissionStatus
from shared.sheets_client import SheetsClient
from shared.view_router import ViewRouter

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "All fields are required."
DATE_ORDER_MESSAGE = "End date cannot be before start date."
SETUP_FAILURE_MESSAGE = "Submission failed. Please check your Google Apps Script setup."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


@dataclass
class LeaveFormFields:
    employee_name: str = ""
    employee_id: str = ""
    leave_type: LeaveType = LeaveType.CASUAL
    start_date: date | None = None
    end_date: date | None = None
    reason: str = ""

    def missing(self) -> list[str]:
        missing = []
        for name in ("employee_name", "employee_id", "reason"):
            if not getattr(self, name).strip():
                missing.append(name)
        if self.start_date is None:
            missing.append("start_date")
        if self.end_date is None:
            missing.append("end_date")
        return missing

    def to_request(self, submitted_at: datetime) -> LeaveRequest:
        return LeaveRequest(
            employee_name=self.employee_name,
            employee_id=self.employee_id,
            leave_type=self.leave_type,
            start_date=self.start_date,
            end_date=self.end_date,
            reason=self.reason,
            submission_date=submitted_at,
        )


def validate_fields(fields: LeaveFormFields) -> str | None:
    """Return the inline validation message, or None when the form can be sent."""
    if fields.missing():
        return REQUIRED_FIELDS_MESSAGE
    if fields.end_date < fields.start_date:
        return DATE_ORDER_MESSAGE
    return None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


StatusListener = Callable[["LeaveFormController"], None]


class LeaveFormController:
    def __init__(
        self,
        client: SheetsClient,
        history: SessionHistory,
        router: ViewRouter,
        success_delay: float = 2.0,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.client = client
        self.history = history
        self.router = router
        self.success_delay = success_delay
        self._clock = clock

        self.fields = LeaveFormFields()
        self.status = SubmissionStatus.IDLE
        self.error: str | None = None
        self.form_error = ""
        self._listeners: list[StatusListener] = []

    def subscribe(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: StatusListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- presentation guards ---

    @staticmethod
    def min_start_date(today: date | None = None) -> date:
        return today or date.today()

    def min_end_date(self) -> date | None:
        return self.fields.start_date

    @property
    def end_date_enabled(self) -> bool:
        return self.fields.start_date is not None

    @property
    def is_submitting(self) -> bool:
        return self.status is SubmissionStatus.SUBMITTING

    # --- transitions ---

    def validate(self) -> bool:
        self.form_error = validate_fields(self.fields) or ""
        return not self.form_error

    async def submit(self) -> bool:
        if self.is_submitting:
            logger.debug("Submit ignored: a submission is already in flight")
            return False
        if not self.validate():
            return False

        request = self.fields.to_request(self._clock())
        self.error = None
        self._set_status(SubmissionStatus.SUBMITTING)

        try:
            ok = await self.client.submit(request)
            if not ok:
                raise RuntimeError(SETUP_FAILURE_MESSAGE)
        except Exception as exc:
            logger.warning("Leave request submission failed: %s", exc)
            self.error = str(exc) or UNKNOWN_ERROR_MESSAGE
            self._set_status(SubmissionStatus.ERROR)
            return False

        self.history.append(request)
        self._set_status(SubmissionStatus.SUCCESS)

        await asyncio.sleep(self.success_delay)
        self.fields = LeaveFormFields()
        self.router.show_history()
        self._set_status(SubmissionStatus.IDLE)
        return True

    def reset(self) -> None:
        self.error = None
        self._set_status(SubmissionStatus.IDLE)

    def _set_status(self, status: SubmissionStatus) -> None:
        logger.debug("Submission status %s -> %s", self.status.value, status.value)
        self.status = status
        for listener in list(self._listeners):
            listener(self)
