from shared.metrics import get_counter, get_gauge, get_histogram

SERVICE = "average_calculator"

NUMBERS_REQUESTS = get_counter(
    "numbers_requests_total",
    "Number requests by category",
    SERVICE,
    labelnames=("category",),
)
NUMBERS_FAILURES = get_counter(
    "numbers_failures_total",
    "Number requests answered with a server error",
    SERVICE,
    labelnames=("reason",),
)
PROCESSING_LATENCY = get_histogram(
    "processing_latency_seconds",
    "Fetch, merge and respond latency",
    SERVICE,
    buckets=[0.01, 0.05, 0.1, 0.25, 0.45, 0.5, 0.75, 1.0],
)
UPSTREAM_TIMEOUTS = get_counter(
    "upstream_timeouts_total", "Upstream fetches cut off by the deadline", SERVICE
)
UPSTREAM_ERRORS = get_counter(
    "upstream_errors_total", "Upstream fetches that failed", SERVICE
)
WINDOW_SIZE = get_gauge("window_size", "Numbers currently held in the window", SERVICE)
