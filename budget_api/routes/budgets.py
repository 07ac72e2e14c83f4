from fastapi import APIRouter, Depends, HTTPException, status
import structlog

from budget_api.middleware.validation import validated_budget
from budget_api.schemas.budget import (
    BudgetImportRequest,
    BudgetImportValidation,
    BudgetInput,
)
from budget_api.schemas.common import ErrorResponse, error_body
from budget_api.services.budget_import import validate_import_budgets

logger = structlog.get_logger()
router = APIRouter()


@router.post(
    "/validate",
    response_model=BudgetInput,
    responses={422: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)
async def validate_budget_body(budget: dict = Depends(validated_budget)):
    logger.info("budget_validated", category=budget["category"], month=budget["month"], year=budget["year"])
    return BudgetInput(**budget)


@router.post(
    "/import/validate",
    response_model=BudgetImportValidation,
    responses={422: {"model": ErrorResponse}},
)
async def validate_budget_import(body: BudgetImportRequest):
    errors = validate_import_budgets(body.budgets, body.month, body.year, body.strategy)
    if errors:
        logger.info("budget_import_rejected", error_count=len(errors))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=error_body(
                "IMPORT_VALIDATION_ERROR",
                "Budget import validation failed",
                errors=errors,
            ),
        )
    return BudgetImportValidation(valid=True, count=len(body.budgets))
