"""
Client for the Google Apps Script web app that appends leave requests
to the spreadsheet.

The script replies with {"status": "success"} or
{"status": "error", "message": "..."}; HTTP status codes are not
interpreted.
"""
import asyncio
import logging

import httpx

from shared.model_schema import LeaveRequest, SheetResponse
from shared.settings import Settings

logger = logging.getLogger(__name__)

PLACEHOLDER_MARKER = "YOUR_DEPLOYMENT_ID"

CORS_HINT = (
    "Submission failed. This could be a CORS issue. Please ensure your Google Apps Script "
    "is deployed correctly for 'Anyone' access."
)
GENERIC_REJECTION = "The submission failed."


class SubmissionError(Exception):
    """Base class for failures reported by the sheets endpoint."""


class SubmissionRejectedError(SubmissionError):
    """The script answered with an error discriminator."""


class EndpointUnreachableError(SubmissionError):
    """No response was received (network, TLS, timeout or deployment access)."""


def is_placeholder_url(url: str | None) -> bool:
    return not url or PLACEHOLDER_MARKER in url


class SheetsClient:
    def __init__(
        self,
        script_url: str,
        mock_mode: bool = False,
        simulated_delay: float = 1.5,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.script_url = script_url
        self.mock_mode = mock_mode
        self.simulated_delay = simulated_delay
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, cfg: Settings) -> "SheetsClient":
        return cls(
            cfg.google_script_url,
            mock_mode=cfg.sheets_mock_mode,
            simulated_delay=cfg.simulated_delay_seconds,
            timeout=cfg.request_timeout_seconds,
        )

    @property
    def is_mock(self) -> bool:
        return self.mock_mode or is_placeholder_url(self.script_url)

    async def submit(self, req: LeaveRequest) -> bool:
        """
        POST one request to the script.

        Returns True on a success reply. Raises SubmissionRejectedError on an
        error reply and EndpointUnreachableError when no response arrives;
        anything else (e.g. a body that is not JSON) propagates as is.
        """
        payload = req.to_payload()

        if self.is_mock:
            return await self._simulate(payload)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, transport=self._transport
            ) as client:
                r = await client.post(self.script_url, json=payload)
        except httpx.TransportError as exc:
            logger.error("Failed to submit leave request: %r", exc)
            raise EndpointUnreachableError(CORS_HINT) from exc

        body = r.json()
        # anything that is not an object is a reply without a status
        result = SheetResponse.model_validate(body if isinstance(body, dict) else {})
        if result.status == "success":
            logger.info("Leave request for %s stored by the sheet", req.employee_id)
            return True

        logger.error("Error from Google Apps Script: %s", result.message)
        raise SubmissionRejectedError(result.message or GENERIC_REJECTION)

    async def _simulate(self, payload: dict) -> bool:
        if not self.mock_mode:
            logger.warning("google_script_url is not configured; set GOOGLE_SCRIPT_URL in .env")
        logger.info("Simulating successful submission: %s", payload)
        await asyncio.sleep(self.simulated_delay)
        return True
