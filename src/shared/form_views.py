from dataclasses import dataclass
from datetime import date, datetime

from shared.model_schema import LeaveRequest, SubmissionStatus

HEADER_TITLE = "Employee Leave Request"
NAV_FORM_LABEL = "New Request"
NAV_HISTORY_LABEL = "History"

EMPTY_HISTORY_TITLE = "No Requests Yet"
EMPTY_HISTORY_MESSAGE = "Your submitted leave requests will appear here."
HISTORY_TITLE = "Submission History"
SUBMITTED_BADGE = "Submitted"

SUBMIT_LABEL = "Submit Request"
SUBMITTING_LABEL = "Submitting..."
RETRY_LABEL = "Try Again"


@dataclass(frozen=True)
class StatusView:
    status: SubmissionStatus
    show_fields: bool
    submit_label: str | None = None
    submit_disabled: bool = False
    show_progress: bool = False
    title: str | None = None
    message: str | None = None
    retry_label: str | None = None


@dataclass(frozen=True)
class HistoryCard:
    leave_type: str
    employee: str
    badge: str
    dates: str
    reason: str
    submitted_on: str


def describe_status(status: SubmissionStatus, error: str | None = None) -> StatusView:
    """Map a submission status to what the form area shows."""
    status = SubmissionStatus(status)
    if status is SubmissionStatus.SUBMITTING:
        return StatusView(
            status=status,
            show_fields=True,
            submit_label=SUBMITTING_LABEL,
            submit_disabled=True,
            show_progress=True,
        )
    if status is SubmissionStatus.SUCCESS:
        return StatusView(
            status=status,
            show_fields=False,
            title="Request Submitted!",
            message="Your leave request has been sent for approval.",
        )
    if status is SubmissionStatus.ERROR:
        return StatusView(
            status=status,
            show_fields=False,
            title="Submission Failed",
            message=error or "An unknown error occurred.",
            retry_label=RETRY_LABEL,
        )
    return StatusView(status=status, show_fields=True, submit_label=SUBMIT_LABEL)


def _fmt_date(d: date) -> str:
    return d.strftime("%b %d, %Y")


def _fmt_timestamp(ts: datetime) -> str:
    # shown in the viewer's local time when the stamp is zone-aware
    if ts.tzinfo is not None:
        ts = ts.astimezone()
    return ts.strftime("%b %d, %Y %H:%M")


def history_card(req: LeaveRequest) -> HistoryCard:
    return HistoryCard(
        leave_type=req.leave_type.value,
        employee=f"{req.employee_name} ({req.employee_id})",
        badge=SUBMITTED_BADGE,
        dates=f"{_fmt_date(req.start_date)} - {_fmt_date(req.end_date)}",
        reason=req.reason,
        submitted_on=f"Submitted on: {_fmt_timestamp(req.submission_date)}",
    )
