"""
Pytest configuration and fixtures.
Shared leave requests, form fields and wired-up controllers.
"""

from datetime import date, datetime, timezone
from unittest.mock import AsyncMock

import pytest

from shared.form_controller import LeaveFormController, LeaveFormFields
from shared.history_store import SessionHistory
from shared.model_schema import LeaveRequest, LeaveType
from shared.sheets_client import SheetsClient
from shared.view_router import ViewRouter

FIXED_NOW = datetime(2025, 6, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def jane_fields():
    """Return a complete, valid form for Jane Doe."""
    return LeaveFormFields(
        employee_name="Jane Doe",
        employee_id="E100",
        leave_type=LeaveType.SICK,
        start_date=date(2025, 6, 10),
        end_date=date(2025, 6, 12),
        reason="flu",
    )


@pytest.fixture
def sample_request():
    """Return a fully populated leave request."""
    return LeaveRequest(
        employee_name="Jane Doe",
        employee_id="E100",
        leave_type=LeaveType.SICK,
        start_date=date(2025, 6, 10),
        end_date=date(2025, 6, 12),
        reason="flu",
        submission_date=FIXED_NOW,
    )


@pytest.fixture
def mock_mode_client():
    """Unconfigured client: simulates success without network I/O."""
    return SheetsClient("https://script.google.com/macros/s/YOUR_DEPLOYMENT_ID/exec", simulated_delay=0.01)


@pytest.fixture
def fake_client():
    """Client double whose submit() is an AsyncMock returning True."""
    client = AsyncMock(spec=SheetsClient)
    client.submit.return_value = True
    return client


@pytest.fixture
def history():
    return SessionHistory()


@pytest.fixture
def router():
    return ViewRouter()


@pytest.fixture
def make_controller(history, router):
    """Factory building a controller around a given client with a short redirect delay."""

    def _make(client, success_delay=0.01):
        return LeaveFormController(
            client=client,
            history=history,
            router=router,
            success_delay=success_delay,
            clock=lambda: FIXED_NOW,
        )

    return _make


@pytest.fixture
def fixed_now():
    """Timestamp the controller clock reports in tests."""
    return FIXED_NOW
