import time

from average_calculator.core.config import Settings
from average_calculator.core.logger import get_logger
from average_calculator.domain.categories import Category
from average_calculator.domain.models import NumbersResponse
from average_calculator.metrics import PROCESSING_LATENCY
from average_calculator.upstream.client import UpstreamClient
from average_calculator.window.store import WindowStore

logger = get_logger("services.average")


class AverageService:
    """Fetch -> merge -> report, for one category request.

    Errors from the upstream client propagate; the caller decides how they
    map onto HTTP responses.
    """

    def __init__(self, store: WindowStore, upstream: UpstreamClient, settings: Settings):
        self.store = store
        self.upstream = upstream
        self.settings = settings

    async def process(self, category: Category) -> NumbersResponse:
        start = time.perf_counter()
        url = self.settings.upstream_endpoints[category.value]

        logger.info("fetching_numbers", extra={"category": category.label, "url": url})
        numbers = await self.upstream.fetch_numbers(
            url, self.settings.fetch_timeout_seconds
        )
        logger.info("numbers_received", extra={"count": len(numbers)})

        result = await self.store.merge(numbers)

        elapsed_ms = (time.perf_counter() - start) * 1000
        PROCESSING_LATENCY.observe(elapsed_ms / 1000)
        if elapsed_ms > self.settings.budget_warning_ms:
            logger.warning(
                "processing_time_near_budget",
                extra={
                    "processing_ms": round(elapsed_ms, 1),
                    "budget_ms": self.settings.response_budget_ms,
                },
            )

        return NumbersResponse(
            window_prev_state=result.previous,
            window_curr_state=result.current,
            numbers=numbers,
            avg=round(result.average, 2),
        )
