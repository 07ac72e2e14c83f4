from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, Field

from budget_api.services.budget_import import ImportStrategy
from budget_api.services.budget_validation import (
    DEFAULT_CATEGORY,
    DEFAULT_CURRENCY,
    LIMIT_MAX,
    LIMIT_MIN,
    MONTH_MAX,
    MONTH_MIN,
)


class Category(str, Enum):
    FOOD = "Food"
    TRANSPORT = "Transport"
    ENTERTAINMENT = "Entertainment"
    UTILITIES = "Utilities"
    RENT = "Rent"
    HEALTH = "Health"
    OTHERS = "Others"


class BudgetInput(BaseModel):
    """Normalized budget record, as returned by a successful validation."""

    category: Category = Category(DEFAULT_CATEGORY)
    currency: str = Field(DEFAULT_CURRENCY, pattern=r"^[A-Z]{3}$")
    limit: Union[int, float] = Field(..., ge=LIMIT_MIN, le=LIMIT_MAX)
    month: int = Field(..., ge=MONTH_MIN, le=MONTH_MAX)
    year: int


class BudgetImportRequest(BaseModel):
    # Rows are checked by validate_import_budgets, not by pydantic
    budgets: Any = None
    month: Any = None
    year: Any = None
    strategy: Optional[str] = ImportStrategy.MERGE.value


class BudgetImportValidation(BaseModel):
    valid: bool
    count: int
