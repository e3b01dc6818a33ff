"""Schema for the liveness probe."""

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    # "disabled" when REDIS_ENABLED is false, "unavailable" when Redis is down.
    cache: Literal["ok", "unavailable", "disabled"] = "disabled"
