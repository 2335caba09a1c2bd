"""HTTP listener lifecycle built on a uvicorn server running in a background thread.

The main thread owns signal handling. It starts the listener, then blocks on a
one-slot stop event that is set either by SIGINT or by the listener thread when
serving ends unexpectedly. Shutdown asks uvicorn to stop accepting, lets
in-flight requests drain, and gives up after a fixed deadline.
"""

from __future__ import annotations

import functools
import signal
import threading
import time
from enum import Enum
from types import FrameType

import structlog
import uvicorn
from fastapi import FastAPI

from greeting_service.config import AppSettings

from .errors import ListenerError, ShutdownTimeoutError
from .protocol import DeadlineH11Protocol
from .timeouts import DEFAULT_TIMEOUTS, ServerTimeouts

logger = structlog.get_logger(__name__)

SHUTDOWN_TIMEOUT_SECONDS = 10.0
_STARTUP_POLL_SECONDS = 0.01


class ServiceState(str, Enum):
    """Lifecycle states of the HTTP service."""

    CREATED = "created"
    RUNNING = "running"
    SHUTDOWN_REQUESTED = "shutdown_requested"
    STOPPED = "stopped"
    LISTENER_FAILED = "listener_failed"


class HttpService:
    """Serve an ASGI application until interrupted, then stop gracefully."""

    def __init__(
        self,
        application: FastAPI,
        settings: AppSettings,
        timeouts: ServerTimeouts = DEFAULT_TIMEOUTS,
        shutdown_timeout_seconds: float = SHUTDOWN_TIMEOUT_SECONDS,
    ):
        """Initialize the service without binding any socket.

        Args:
            application: ASGI application to serve.
            settings: Runtime settings providing host and port.
            timeouts: Per-connection timeouts.
            shutdown_timeout_seconds: Deadline for draining in-flight requests.

        Raises:
            ValueError: Raised when application or settings is None.
        """

        if application is None:
            raise ValueError("application must not be None")
        if settings is None:
            raise ValueError("settings must not be None")
        self._application = application
        self._settings = settings
        self._timeouts = timeouts
        self._shutdown_timeout_seconds = shutdown_timeout_seconds
        self._state = ServiceState.CREATED
        self._stop_event = threading.Event()
        self._shutdown_requested = threading.Event()
        self._listener_error: ListenerError | None = None
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None

    @property
    def state(self) -> ServiceState:
        return self._state

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def timeouts(self) -> ServerTimeouts:
        return self._timeouts

    @property
    def listener_error(self) -> ListenerError | None:
        return self._listener_error

    @property
    def bound_port(self) -> int | None:
        """Return the port the listener actually bound, once started."""

        if self._server is None or not self._server.started or not self._server.servers:
            return None
        return self._server.servers[0].sockets[0].getsockname()[1]

    def start(self) -> None:
        """Start serving on a background thread.

        The listening address is logged before serving begins. Bind failures
        are reported asynchronously through the stop event.

        Raises:
            ListenerError: Raised when the configured port is not a number.
            RuntimeError: Raised when the service was already started.
        """

        if self._state is not ServiceState.CREATED:
            raise RuntimeError(f"service cannot start from state {self._state.value}")

        logger.info(
            "listening",
            address=self._settings.listen_url,
            read_timeout=self._timeouts.read_seconds,
            write_timeout=self._timeouts.write_seconds,
            idle_timeout=self._timeouts.idle_seconds,
        )
        try:
            port = int(self._settings.port)
        except ValueError as error:
            self._state = ServiceState.LISTENER_FAILED
            self._listener_error = ListenerError(f"invalid listen address {self._settings.bind_address!r}")
            raise self._listener_error from error

        config = uvicorn.Config(
            app=self._application,
            host=self._settings.host,
            port=port,
            lifespan="off",
            access_log=False,
            log_config=None,
            http=functools.partial(DeadlineH11Protocol, timeouts=self._timeouts),
            timeout_keep_alive=int(self._timeouts.idle_seconds),
        )
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(
            target=self._listener_run,
            name="greeting-service-listener",
            daemon=True,
        )
        self._state = ServiceState.RUNNING
        self._thread.start()

    def wait_until_started(self, timeout_seconds: float) -> bool:
        """Block until the listener has bound its socket.

        Args:
            timeout_seconds: Maximum time to wait.

        Returns:
            bool: True once serving, False on timeout or listener exit.
        """

        deadline = time.monotonic() + timeout_seconds
        while time.monotonic() < deadline:
            if self._server is not None and self._server.started:
                return True
            if self._thread is None or not self._thread.is_alive():
                return False
            time.sleep(_STARTUP_POLL_SECONDS)
        return False

    def request_stop(self) -> None:
        """Wake the thread blocked in `wait_for_stop`."""

        self._stop_event.set()

    def wait_for_stop(self) -> None:
        """Block until an interrupt or a listener failure.

        Raises:
            ListenerError: Raised when the listener failed while waiting.
        """

        self._stop_event.wait()
        if self._listener_error is not None:
            raise self._listener_error

    def shutdown(self, timeout_seconds: float | None = None) -> None:
        """Stop accepting connections and wait for in-flight requests.

        Args:
            timeout_seconds: Drain deadline; defaults to the service deadline.

        Raises:
            ShutdownTimeoutError: Raised when requests outlive the deadline.
            ListenerError: Raised when the listener had already failed.
        """

        if self._listener_error is not None:
            raise self._listener_error
        if self._server is None or self._thread is None:
            raise RuntimeError("service was not started")

        deadline_seconds = self._shutdown_timeout_seconds if timeout_seconds is None else timeout_seconds
        self._state = ServiceState.SHUTDOWN_REQUESTED
        self._shutdown_requested.set()
        self._server.should_exit = True
        self._thread.join(timeout=deadline_seconds)
        if self._thread.is_alive():
            raise ShutdownTimeoutError(deadline_seconds)
        if self._listener_error is not None:
            raise self._listener_error
        self._state = ServiceState.STOPPED

    def run_until_interrupted(self) -> None:
        """Serve until SIGINT, then shut down within the deadline.

        Must be called from the main thread.

        Raises:
            ListenerError: Raised when the listener fails before shutdown.
            ShutdownTimeoutError: Raised when draining exceeds the deadline.
        """

        previous_handler = signal.signal(signal.SIGINT, self._handle_interrupt)
        try:
            self.start()
            self.wait_for_stop()
        finally:
            signal.signal(signal.SIGINT, previous_handler)

        logger.info("shutting_down")
        self.shutdown()

    def _handle_interrupt(self, _signum: int, _frame: FrameType | None) -> None:
        self._stop_event.set()

    def _listener_run(self) -> None:
        if self._server is None:
            raise RuntimeError("listener thread started without a server")
        try:
            self._server.run()
        # uvicorn exits via sys.exit(1) when it cannot bind.
        except (SystemExit, Exception) as error:
            listener_error = ListenerError(f"listener stopped: {error!r}")
            listener_error.__cause__ = error
            self._listener_fail(listener_error)
            return

        if not self._shutdown_requested.is_set():
            self._listener_fail(ListenerError("listener exited without a shutdown request"))

    def _listener_fail(self, error: ListenerError) -> None:
        self._listener_error = error
        self._state = ServiceState.LISTENER_FAILED
        self._stop_event.set()
