from datetime import datetime, timezone

from fastapi import APIRouter

from average_calculator import __version__
from average_calculator.core.config import settings
from average_calculator.domain.categories import Category
from average_calculator.domain.models import HealthResponse, ServiceInfo

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/", response_model=ServiceInfo)
async def index():
    return {
        "name": "Average Calculator Microservice",
        "version": __version__,
        "window_size": settings.window_size,
        "endpoints": {
            "/numbers/{numberid}": "Get numbers and calculate average. "
            f"Valid numberid values: {Category.describe()}",
            "/health": "Health check endpoint",
            "/metrics": "Prometheus metrics",
        },
    }
