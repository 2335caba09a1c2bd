"""HTTP listener lifecycle: background serving, signal wait, graceful stop."""

from .errors import ListenerError, ServiceLifecycleError, ShutdownTimeoutError
from .lifecycle import SHUTDOWN_TIMEOUT_SECONDS, HttpService, ServiceState
from .protocol import DeadlineH11Protocol
from .timeouts import DEFAULT_TIMEOUTS, ServerTimeouts

__all__ = [
    "DEFAULT_TIMEOUTS",
    "SHUTDOWN_TIMEOUT_SECONDS",
    "DeadlineH11Protocol",
    "HttpService",
    "ListenerError",
    "ServerTimeouts",
    "ServiceLifecycleError",
    "ServiceState",
    "ShutdownTimeoutError",
]
