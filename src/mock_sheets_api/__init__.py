"""
Local stand-in for the Google Apps Script web app.

Mirrors the script's doPost: parse the JSON body, append one row, and always
answer HTTP 200 with {"status": "success"} or {"status": "error", "message"}.
Point GOOGLE_SCRIPT_URL at http://127.0.0.1:9001/exec to use it.
"""
import json
import logging

import uvicorn
from fastapi import FastAPI, Request

from shared.model_schema import LeaveRequest
from shared.settings import settings

logger = logging.getLogger(__name__)

COLUMNS = ["SubmissionDate", "EmployeeName", "EmployeeID", "LeaveType", "StartDate", "EndDate", "Reason"]


class SheetLockedError(RuntimeError):
    pass


class MockSheet:
    """In-memory "spreadsheet"."""

    def __init__(self):
        self.rows: list[list] = []
        self.locked = False

    def append_row(self, req: LeaveRequest) -> list:
        if self.locked:
            raise SheetLockedError("Sheet locked")
        # order MUST match COLUMNS
        row = [
            req.submission_date.isoformat(),
            req.employee_name,
            req.employee_id,
            req.leave_type.value,
            req.start_date.isoformat(),
            req.end_date.isoformat(),
            req.reason,
        ]
        self.rows.append(row)
        return row

    def clear(self) -> None:
        self.rows.clear()
        self.locked = False


SHEET = MockSheet()

app = FastAPI(title="Mock Sheets Script", version="0.1.0")


@app.post("/exec")
async def do_post(request: Request):
    try:
        data = json.loads(await request.body())
        req = LeaveRequest.model_validate(data)
        SHEET.append_row(req)
    except Exception as e:
        logger.warning("Rejected leave request: %s", e)
        return {"status": "error", "message": str(e)}

    return {"status": "success", "data": json.dumps(data)}


@app.get("/rows")
def rows():
    return {"columns": COLUMNS, "rows": SHEET.rows}


@app.post("/admin/lock")
def lock():
    SHEET.locked = True
    return {"locked": True}


@app.post("/admin/unlock")
def unlock():
    SHEET.locked = False
    return {"locked": False}


def main():
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=settings.mock_sheets_host, port=settings.mock_sheets_port)

