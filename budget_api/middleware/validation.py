from typing import Any

from fastapi import Depends, HTTPException, Request, status
import structlog

from budget_api.schemas.common import error_body
from budget_api.services.budget_validation import get_current_year, validate_budget

logger = structlog.get_logger()


async def current_year() -> int:
    """FastAPI dependency: lower bound for budget years, read per request."""
    return get_current_year()


async def read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        logger.warning("request_body_invalid_json")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error_body("INVALID_JSON", "Request body must be valid JSON"),
        )


async def validated_budget(
    body: Any = Depends(read_json_body),
    year: int = Depends(current_year),
) -> dict:
    """FastAPI dependency: validate the request body as a budget, return the normalized record."""
    result = validate_budget(body, current_year=year)
    if not result.ok:
        logger.info(
            "budget_validation_failed",
            fields=result.error_fields,
            error_count=len(result.errors),
        )
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=error_body(
                "VALIDATION_ERROR",
                result.errors[0].message,
                details=[e.as_dict() for e in result.errors],
            ),
        )
    return result.value
