"""
In-flight tracking for user-triggered actions.

Each (action, session) key moves through ``idle -> pending -> succeeded|failed``.
A key that is still pending refuses a second start, which keeps a repeated
click from exporting or posting twice. All transitions happen on the event
loop thread, so no lock is taken.
"""

import logging
from collections import OrderedDict
from contextlib import asynccontextmanager
from enum import Enum
from typing import AsyncIterator, Set, Tuple

from ..config import settings

logger = logging.getLogger("creation_hub.services.request_state")


class RequestState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SubmissionInProgressError(RuntimeError):
    """Raised when an action is started while the same one is still pending."""

    def __init__(self, action: str, session_id: str):
        super().__init__(f"'{action}' is already in progress for session '{session_id}'")
        self.action = action
        self.session_id = session_id
        self.status_code = 409


class RequestTracker:
    """
    Pending keys are held until they settle. Settled keys keep their last
    outcome in a bounded record; the oldest outcomes are dropped first and
    read back as idle.
    """

    def __init__(self, max_settled: int = 1024) -> None:
        self.max_settled = max_settled
        self._pending: Set[Tuple[str, str]] = set()
        self._settled: "OrderedDict[Tuple[str, str], RequestState]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._pending) + len(self._settled)

    def state(self, action: str, session_id: str) -> RequestState:
        key = (action, session_id)
        if key in self._pending:
            return RequestState.PENDING
        return self._settled.get(key, RequestState.IDLE)

    def is_pending(self, action: str, session_id: str) -> bool:
        return (action, session_id) in self._pending

    def start(self, action: str, session_id: str) -> None:
        key = (action, session_id)
        if key in self._pending:
            raise SubmissionInProgressError(action, session_id)
        self._settled.pop(key, None)
        self._pending.add(key)

    def settle(self, action: str, session_id: str, success: bool) -> None:
        key = (action, session_id)
        self._pending.discard(key)
        self._settled.pop(key, None)
        self._settled[key] = RequestState.SUCCEEDED if success else RequestState.FAILED
        while len(self._settled) > self.max_settled:
            evicted, _ = self._settled.popitem(last=False)
            logger.debug(f"Forgot settled outcome of '{evicted[0]}' for session '{evicted[1]}'")

    @asynccontextmanager
    async def track(self, action: str, session_id: str) -> AsyncIterator[None]:
        """
        Hold ``action`` pending for the body of the block.

        The key settles as failed if the block raises, succeeded otherwise.
        Callers that reduce failures to a result value call ``settle``
        themselves before leaving the block.
        """
        self.start(action, session_id)
        try:
            yield
        except BaseException:
            self.settle(action, session_id, success=False)
            raise
        if self.is_pending(action, session_id):
            self.settle(action, session_id, success=True)

    def reset(self) -> None:
        self._pending.clear()
        self._settled.clear()


# Shared across requests of one process
request_tracker = RequestTracker(max_settled=settings.request_history_size)
