from typing import Dict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NumbersResponse(BaseModel):
    """Window state around one merge, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    window_prev_state: list[int] = Field(..., description="Window before merge")
    window_curr_state: list[int] = Field(..., description="Window after merge")
    numbers: list[int] = Field(..., description="Numbers fetched from upstream")
    avg: float = Field(..., description="Average of the current window, 2 dp")


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ServiceInfo(BaseModel):
    name: str
    version: str
    window_size: int
    endpoints: Dict[str, str]
