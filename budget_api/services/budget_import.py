"""
Budget import validation: checks a batch of budgets before it is copied
into a target month.

Rows reuse the single-budget field rules. Unlike a single budget, an
imported row must name its category and currency explicitly.
"""

from enum import Enum
from typing import Any, Optional

from budget_api.services.budget_validation import (
    FieldError,
    MONTH_MAX,
    MONTH_MIN,
    check_category,
    check_currency,
    check_limit,
    is_integral,
)

MIN_IMPORT_YEAR = 2000


class ImportStrategy(str, Enum):
    MERGE = "merge"
    REPLACE = "replace"


def _validate_row(index: int, row: Any, seen: set[str]) -> list[str]:
    prefix = f"Budget {index}"
    if not isinstance(row, dict):
        return [f"{prefix}: must be an object"]

    errors = []
    # current_year is unused by these three rules
    category = check_category(row, 0)
    if row.get("category") is None:
        errors.append(f"{prefix}: Missing category")
    elif isinstance(category, FieldError):
        errors.append(f"{prefix}: Invalid category {row.get('category')!r}")
    elif category in seen:
        errors.append(f"{prefix}: Duplicate category {category!r}")
    else:
        seen.add(category)

    if isinstance(check_limit(row, 0), FieldError):
        errors.append(f"{prefix}: Invalid limit {row.get('limit')!r}")

    if row.get("currency") is None:
        errors.append(f"{prefix}: Missing currency")
    elif isinstance(check_currency(row, 0), FieldError):
        errors.append(f"{prefix}: Invalid currency {row['currency']!r}")

    return errors


def validate_import_budgets(
    budgets: Any,
    target_month: Any,
    target_year: Any,
    strategy: Optional[str] = ImportStrategy.MERGE.value,
) -> list[str]:
    """Return every problem found in an import request; empty means valid."""
    errors: list[str] = []

    if not isinstance(budgets, list) or not budgets:
        errors.append("Budgets array must not be empty")
        budgets = []

    if not is_integral(target_month) or not MONTH_MIN <= target_month <= MONTH_MAX:
        errors.append("Invalid target month")

    if not is_integral(target_year) or target_year < MIN_IMPORT_YEAR:
        errors.append("Invalid target year")

    try:
        ImportStrategy(strategy)
    except ValueError:
        errors.append("Invalid import strategy")

    seen: set[str] = set()
    for index, row in enumerate(budgets, start=1):
        errors.extend(_validate_row(index, row, seen))

    return errors
