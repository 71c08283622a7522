from fastapi import APIRouter

from .endpoints import health, numbers

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(numbers.router)
