from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from average_calculator import __version__
from average_calculator.api.errors import register_exception_handlers
from average_calculator.api.router import api_router
from average_calculator.core.config import settings
from average_calculator.core.logger import configure_logging, get_logger
from average_calculator.upstream.client import UpstreamClient
from average_calculator.window.store import WindowStore

# Configure logging once and get service logger
configure_logging()
logger = get_logger("average_calculator.main")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "average_calculator_starting",
        extra={
            "window_size": settings.window_size,
            "fetch_timeout_ms": settings.fetch_timeout_ms,
        },
    )
    app.state.store = WindowStore(settings.window_size)
    app.state.upstream = UpstreamClient(
        httpx.AsyncClient(), auth_token=settings.upstream_auth_token
    )
    try:
        yield
    finally:
        logger.info("average_calculator_stopping")
        await app.state.upstream.aclose()


app = FastAPI(
    title="Average Calculator Microservice", version=__version__, lifespan=lifespan
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


register_exception_handlers(app)

Instrumentator(
    should_group_status_codes=True,
    should_ignore_untemplated=True,
    excluded_handlers=["/docs", "/openapi.json", "/metrics"],
).instrument(app).expose(app, include_in_schema=False)

app.include_router(api_router)
