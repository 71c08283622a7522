from pydantic import Field, field_validator

from average_calculator.domain.categories import Category
from shared.config import BaseServiceConfig

_UPSTREAM_BASE_URL = "http://20.244.56.144/evaluation-service"

DEFAULT_UPSTREAM_ENDPOINTS = {
    "p": f"{_UPSTREAM_BASE_URL}/primes",
    "f": f"{_UPSTREAM_BASE_URL}/fibo",
    "e": f"{_UPSTREAM_BASE_URL}/even",
    "r": f"{_UPSTREAM_BASE_URL}/rand",
}


class Settings(BaseServiceConfig):
    # Upstream number source, one URL per category id. Overrides are merged
    # onto the defaults so every category keeps an endpoint.
    upstream_endpoints: dict[str, str] = dict(DEFAULT_UPSTREAM_ENDPOINTS)
    upstream_auth_token: str | None = None

    # Window
    window_size: int = Field(default=10, gt=0)

    # Latency budget
    fetch_timeout_ms: int = Field(default=500, gt=0)
    response_budget_ms: int = Field(default=500, gt=0)
    budget_warning_ratio: float = Field(default=0.9, gt=0, le=1)

    # HTTP
    port: int = 9876
    cors_allow_origins: list[str] = ["*"]

    otel_service_name: str = "average-calculator"

    @field_validator("upstream_endpoints")
    @classmethod
    def _merge_upstream_endpoints(cls, value: dict[str, str]) -> dict[str, str]:
        unknown = sorted(set(value) - {c.value for c in Category})
        if unknown:
            raise ValueError(
                f"Unknown category ids {unknown}; use {Category.describe()}"
            )
        return {**DEFAULT_UPSTREAM_ENDPOINTS, **value}

    @property
    def fetch_timeout_seconds(self) -> float:
        return self.fetch_timeout_ms / 1000

    @property
    def budget_warning_ms(self) -> float:
        return self.response_budget_ms * self.budget_warning_ratio


settings = Settings()

__all__ = ["Settings", "settings", "DEFAULT_UPSTREAM_ENDPOINTS"]
