"""Health monitoring endpoints"""

from fastapi import APIRouter, status

from forecast_api.schemas.health import Status

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=Status,
    status_code=status.HTTP_200_OK,
    summary="Health check on application",
    description="Health check endpoint to verify if application is available",
    operation_id="health",
    include_in_schema=False,
)
async def health() -> Status:
    """Health check endpoint to verify if application is available"""
    return Status(status="OK")
