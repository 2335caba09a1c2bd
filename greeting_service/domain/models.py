"""Typed response contracts shared by the API layer."""

from pydantic import BaseModel, ConfigDict

GREETING_TEXT = "Hello from Go! 🎯"


class Health(BaseModel):
    """Health response contract used by the health-check endpoint.

    Attributes:
        status: Liveness status text; always `ok` while the process serves.
    """

    model_config = ConfigDict(frozen=True)

    status: str = "ok"
