from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from average_calculator.api.dependencies import get_average_service
from average_calculator.api.errors import internal_error_response
from average_calculator.core.logger import get_logger
from average_calculator.domain.categories import Category
from average_calculator.domain.models import ErrorResponse, NumbersResponse
from average_calculator.metrics import NUMBERS_FAILURES, NUMBERS_REQUESTS
from average_calculator.services.average_service import AverageService
from average_calculator.upstream.client import UpstreamError

router = APIRouter()
logger = get_logger("api.numbers")


@router.get(
    "/numbers/{numberid}",
    response_model=NumbersResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Unknown number id"},
        500: {"model": ErrorResponse, "description": "Upstream or internal failure"},
    },
    summary="Merge fresh numbers into the window and report the average",
)
async def get_numbers(
    numberid: str, svc: AverageService = Depends(get_average_service)
):
    category = Category.parse(numberid)
    if category is None:
        logger.warning("invalid_number_id", extra={"numberid": numberid})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": f"Invalid number ID. Use {Category.describe()}."},
        )

    NUMBERS_REQUESTS.labels(category=category.label).inc()
    try:
        return await svc.process(category)
    except UpstreamError as e:
        NUMBERS_FAILURES.labels(reason="upstream").inc()
        logger.error(
            "numbers_request_failed",
            extra={"category": category.label, "error": str(e)},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to process the request", "message": str(e)},
        )
    except Exception as e:
        NUMBERS_FAILURES.labels(reason="internal").inc()
        logger.exception(
            "numbers_request_crashed",
            extra={"category": category.label, "error_type": type(e).__name__},
        )
        return internal_error_response(e)
