from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class LeaveType(str, Enum):
    HOME = "Home Leave"
    CASUAL = "Casual Leave"
    SICK = "Sick Leave"
    ANNUAL = "Annual Leave"


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class LeaveRequest(BaseModel):
    """
    One leave request as it is sent to the sheet.
    Date order and non-empty fields are checked by the form controller,
    not here.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    employee_name: str
    employee_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    submission_date: datetime

    def to_payload(self) -> dict:
        # camelCase keys, enum display value, ISO dates
        return self.model_dump(mode="json", by_alias=True)


class SheetResponse(BaseModel):
    status: str | None = Field(None, description="'success' or 'error'")
    message: str | None = None

    @field_validator("status", "message", mode="before")
    @classmethod
    def _as_text(cls, v):
        return None if v is None else str(v)
