"""Helpers for the API's ``{"error", "details"}`` error bodies."""

from fastapi import HTTPException

from travel_planner.response_models import ErrorResponse


def api_error(
    status_code: int, error: str, details: str | None = None
) -> HTTPException:
    """Builds an HTTPException whose body is an ErrorResponse."""
    body = ErrorResponse(error=error, details=details)
    return HTTPException(
        status_code=status_code, detail=body.model_dump(exclude_none=True)
    )


ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}
