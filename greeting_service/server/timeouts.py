"""Fixed per-connection timeouts applied by the listener."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServerTimeouts:
    """Per-connection timeouts applied to the listener.

    Attributes:
        read_seconds: Budget for reading a whole request, body included.
        write_seconds: Budget from the parsed request line to the end of the response.
        idle_seconds: Keep-alive budget for an idle connection.
    """

    read_seconds: float
    write_seconds: float
    idle_seconds: float


DEFAULT_TIMEOUTS = ServerTimeouts(read_seconds=5.0, write_seconds=10.0, idle_seconds=60.0)
