"""Error response schemas for consistent API error formatting."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """Detail of a single error."""

    model_config = ConfigDict(
        title="error.ErrorDetail",
        json_schema_extra={
            "example": {
                "msg": "WeatherForecast '3fa85f64-5717-4562-b3fc-2c963f66afa6' not found",
                "type": "not_found_error",
            }
        },
    )

    msg: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Error type identifier")


class ErrorResponse(BaseModel):
    """Standardized error response format."""

    model_config = ConfigDict(
        title="error.ErrorResponse",
        json_schema_extra={
            "example": {
                "detail": [{"msg": "Resource not found", "type": "not_found_error"}],
            }
        },
    )

    detail: list[ErrorDetail] = Field(..., description="List of error details")
