import asyncio
from typing import Any, List, Optional

import httpx

from average_calculator.core.logger import get_logger
from average_calculator.metrics import UPSTREAM_ERRORS, UPSTREAM_TIMEOUTS

logger = get_logger("upstream.client")


class UpstreamError(Exception):
    """The upstream number source failed for a reason other than the deadline."""


class UpstreamClient:
    """Fetches number lists from the upstream source under a hard deadline.

    A fetch that outlives its deadline is cancelled and reported as an empty
    list. Every other failure is raised as UpstreamError. Nothing is retried.
    """

    def __init__(self, client: httpx.AsyncClient, auth_token: Optional[str] = None):
        self._client = client
        self._headers = {"Accept": "application/json"}
        if auth_token:
            self._headers["Authorization"] = f"Bearer {auth_token}"

    async def fetch_numbers(self, url: str, timeout_s: float) -> List[int]:
        try:
            # wait_for cancels the request task once the deadline passes
            return await asyncio.wait_for(self._get_numbers(url), timeout_s)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            UPSTREAM_TIMEOUTS.inc()
            logger.warning(
                "upstream_fetch_timed_out",
                extra={"url": url, "timeout_ms": round(timeout_s * 1000)},
            )
            return []
        except UpstreamError:
            UPSTREAM_ERRORS.inc()
            raise
        except httpx.HTTPError as e:
            UPSTREAM_ERRORS.inc()
            raise UpstreamError(f"Upstream request failed: {e}") from e

    async def _get_numbers(self, url: str) -> List[int]:
        response = await self._client.get(url, headers=self._headers)
        if not response.is_success:
            raise UpstreamError(f"API responded with status: {response.status_code}")
        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamError(f"Upstream returned invalid JSON: {e}") from e
        if not isinstance(body, dict):
            raise UpstreamError("Upstream returned a non-object body")
        return _parse_numbers(body, url)

    async def aclose(self):
        await self._client.aclose()


def _parse_numbers(body: dict[str, Any], url: str) -> List[int]:
    numbers = body.get("numbers")
    if numbers is None:
        return []
    if not isinstance(numbers, list) or not all(
        isinstance(n, int) and not isinstance(n, bool) for n in numbers
    ):
        logger.warning(
            "upstream_numbers_malformed",
            extra={"url": url, "numbers_type": type(numbers).__name__},
        )
        return []
    return numbers
