"""h11 connection protocol with per-request read and write deadlines.

The read deadline runs from the start of a request (accept, or the first byte
of the next request on a kept-alive connection) until the request body is
fully read. The write deadline runs from the parsed request line until the
response is complete. When either expires the transport is closed.
"""

from __future__ import annotations

import asyncio

import h11
from uvicorn.protocols.http.h11_impl import H11Protocol

from .timeouts import ServerTimeouts

_REQUEST_READ_STATES = (h11.DONE, h11.MUST_CLOSE, h11.CLOSED, h11.ERROR)


class DeadlineH11Protocol(H11Protocol):
    """uvicorn h11 protocol that enforces read and write budgets."""

    def __init__(self, *args, timeouts: ServerTimeouts, **kwargs):
        super().__init__(*args, **kwargs)
        self._timeouts = timeouts
        self._read_deadline: asyncio.TimerHandle | None = None
        self._write_deadline: asyncio.TimerHandle | None = None

    def connection_made(self, transport: asyncio.BaseTransport) -> None:
        super().connection_made(transport)
        self._arm_read_deadline()

    def connection_lost(self, exc: Exception | None) -> None:
        self._cancel_read_deadline()
        self._cancel_write_deadline()
        super().connection_lost(exc)

    def data_received(self, data: bytes) -> None:
        if self._read_deadline is None and self.conn.their_state is h11.IDLE:
            self._arm_read_deadline()
        super().data_received(data)

    def handle_events(self) -> None:
        super().handle_events()
        if self._write_deadline is None and self.cycle is not None and not self.cycle.response_complete:
            self._write_deadline = self.loop.call_later(
                self._timeouts.write_seconds,
                self._on_deadline_expired,
                "write",
            )
        if self.conn.their_state in _REQUEST_READ_STATES:
            self._cancel_read_deadline()

    def on_response_complete(self) -> None:
        self._cancel_write_deadline()
        super().on_response_complete()

    def _arm_read_deadline(self) -> None:
        self._cancel_read_deadline()
        self._read_deadline = self.loop.call_later(
            self._timeouts.read_seconds,
            self._on_deadline_expired,
            "read",
        )

    def _cancel_read_deadline(self) -> None:
        if self._read_deadline is not None:
            self._read_deadline.cancel()
            self._read_deadline = None

    def _cancel_write_deadline(self) -> None:
        if self._write_deadline is not None:
            self._write_deadline.cancel()
            self._write_deadline = None

    def _on_deadline_expired(self, phase: str) -> None:
        if phase == "read":
            self._read_deadline = None
        else:
            self._write_deadline = None
        if not self.transport.is_closing():
            self.logger.debug("Closing connection after %s deadline", phase)
            self.transport.close()
