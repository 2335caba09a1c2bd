"""Typed errors raised by the HTTP listener lifecycle."""


class ServiceLifecycleError(RuntimeError):
    """Base error for failures that end the service process."""


class ListenerError(ServiceLifecycleError):
    """Raised when the listener stops for any reason other than a requested shutdown."""


class ShutdownTimeoutError(ServiceLifecycleError):
    """Raised when in-flight requests do not drain before the shutdown deadline.

    Attributes:
        timeout_seconds: Deadline that elapsed.
    """

    def __init__(self, timeout_seconds: float):
        super().__init__(f"in-flight requests did not finish within {timeout_seconds:g}s")
        self.timeout_seconds = timeout_seconds
