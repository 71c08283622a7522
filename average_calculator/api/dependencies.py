from fastapi import Depends, Request

from average_calculator.core.config import settings
from average_calculator.services.average_service import AverageService
from average_calculator.upstream.client import UpstreamClient
from average_calculator.window.store import WindowStore


def get_store(request: Request) -> WindowStore:
    return request.app.state.store  # type: ignore[return-value]


def get_upstream(request: Request) -> UpstreamClient:
    return request.app.state.upstream  # type: ignore[return-value]


def get_average_service(
    store: WindowStore = Depends(get_store),
    upstream: UpstreamClient = Depends(get_upstream),
) -> AverageService:
    return AverageService(store, upstream, settings)
