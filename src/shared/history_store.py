from collections import deque
from collections.abc import Iterator

from shared.model_schema import LeaveRequest


class SessionHistory:
    """
    Requests submitted successfully during this session, newest first.
    Lives only as long as the session; nothing is persisted.
    """

    def __init__(self):
        self._requests: deque[LeaveRequest] = deque()

    def append(self, request: LeaveRequest) -> None:
        self._requests.appendleft(request)

    def is_empty(self) -> bool:
        return not self._requests

    def items(self) -> list[LeaveRequest]:
        return list(self._requests)

    def __iter__(self) -> Iterator[LeaveRequest]:
        return iter(self._requests)

    def __len__(self) -> int:
        return len(self._requests)
