"""
Budget validation: pure field rules for an incoming budget record.

Each rule reads one field from the raw record and returns either the
normalized value or a FieldError. validate_budget() runs every rule and
collects all errors; nothing here raises on bad input or touches I/O.
The only outside input is the clock, read by get_current_year() when the
caller does not pass current_year.
"""

import math
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from numbers import Integral, Real
from typing import Any, Callable, Mapping, Optional, Union

BUDGET_CATEGORIES = (
    "Food",
    "Transport",
    "Entertainment",
    "Utilities",
    "Rent",
    "Health",
    "Others",
)
DEFAULT_CATEGORY = "Others"
DEFAULT_CURRENCY = "USD"

LIMIT_MIN = 0
LIMIT_MAX = 1_000_000
MONTH_MIN = 1
MONTH_MAX = 12

CURRENCY_PATTERN = re.compile(r"[A-Z]{3}")
CURRENCY_PATTERN_MESSAGE = (
    "Currency must be a valid 3-letter currency code (e.g. USD, GBP, JPY)"
)


class ErrorKind(str, Enum):
    REQUIRED = "required"
    TYPE = "type"
    RANGE = "range"
    ENUM = "enum"
    PATTERN = "pattern"
    EMPTY = "empty"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class FieldError:
    field: str
    kind: ErrorKind
    message: str

    def as_dict(self) -> dict:
        return {"field": self.field, "type": self.kind.value, "message": self.message}


@dataclass
class ValidationResult:
    value: Optional[dict] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def error_fields(self) -> list[str]:
        return [e.field for e in self.errors]


RuleOutcome = Union[Any, FieldError]
Rule = Callable[[Mapping[str, Any], int], RuleOutcome]


def get_current_year() -> int:
    """Returns the calendar year from the current UTC date."""
    return datetime.now(timezone.utc).year


# ---------------------------------------------------------------------------
# Primitive checks
# ---------------------------------------------------------------------------


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    # ints of any size are finite; only floats can be nan or inf
    if isinstance(value, float):
        return math.isfinite(value)
    return True


def is_integral(value: Any) -> bool:
    if not is_number(value):
        return False
    if isinstance(value, Integral):
        return True
    return int(value) == value


def _required(name: str) -> FieldError:
    return FieldError(name, ErrorKind.REQUIRED, f'"{name}" is required')


def _check_number(
    name: str,
    value: Any,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
    integer: bool = False,
) -> RuleOutcome:
    if not is_number(value):
        return FieldError(name, ErrorKind.TYPE, f'"{name}" must be a number')
    if integer and not is_integral(value):
        return FieldError(name, ErrorKind.TYPE, f'"{name}" must be an integer')
    if minimum is not None and value < minimum:
        return FieldError(
            name,
            ErrorKind.RANGE,
            f'"{name}" must be greater than or equal to {minimum}',
        )
    if maximum is not None and value > maximum:
        return FieldError(
            name,
            ErrorKind.RANGE,
            f'"{name}" must be less than or equal to {maximum}',
        )
    return int(value) if integer else value


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------


def check_category(data: Mapping[str, Any], current_year: int) -> RuleOutcome:
    if "category" not in data:
        return DEFAULT_CATEGORY
    value = data["category"]
    if not isinstance(value, str):
        return FieldError("category", ErrorKind.TYPE, '"category" must be a string')
    value = value.strip()
    if not value:
        return FieldError(
            "category", ErrorKind.EMPTY, '"category" is not allowed to be empty'
        )
    if value not in BUDGET_CATEGORIES:
        return FieldError(
            "category",
            ErrorKind.ENUM,
            f'"category" must be one of [{", ".join(BUDGET_CATEGORIES)}]',
        )
    return value


def check_currency(data: Mapping[str, Any], current_year: int) -> RuleOutcome:
    if "currency" not in data:
        return DEFAULT_CURRENCY
    value = data["currency"]
    if not isinstance(value, str):
        return FieldError("currency", ErrorKind.TYPE, '"currency" must be a string')
    if not CURRENCY_PATTERN.fullmatch(value):
        return FieldError("currency", ErrorKind.PATTERN, CURRENCY_PATTERN_MESSAGE)
    return value


def check_limit(data: Mapping[str, Any], current_year: int) -> RuleOutcome:
    if "limit" not in data:
        return _required("limit")
    return _check_number("limit", data["limit"], LIMIT_MIN, LIMIT_MAX)


def check_month(data: Mapping[str, Any], current_year: int) -> RuleOutcome:
    if "month" not in data:
        return _required("month")
    return _check_number("month", data["month"], MONTH_MIN, MONTH_MAX, integer=True)


def check_year(data: Mapping[str, Any], current_year: int) -> RuleOutcome:
    if "year" not in data:
        return _required("year")
    return _check_number("year", data["year"], minimum=current_year, integer=True)


# Order here is the order errors are reported in.
BUDGET_RULES: tuple[tuple[str, Rule], ...] = (
    ("category", check_category),
    ("currency", check_currency),
    ("limit", check_limit),
    ("month", check_month),
    ("year", check_year),
)
BUDGET_FIELDS = tuple(name for name, _ in BUDGET_RULES)


def validate_budget(data: Any, *, current_year: Optional[int] = None) -> ValidationResult:
    """
    Validate and normalize a candidate budget record.

    Runs every field rule and reports all violations in field order,
    followed by any keys that are not budget fields. On success the result
    value holds exactly the five budget fields with defaults applied.
    """
    if not isinstance(data, Mapping):
        return ValidationResult(
            errors=[FieldError("value", ErrorKind.TYPE, '"value" must be of type object')]
        )

    if current_year is None:
        current_year = get_current_year()

    normalized: dict = {}
    errors: list[FieldError] = []

    for name, rule in BUDGET_RULES:
        outcome = rule(data, current_year)
        if isinstance(outcome, FieldError):
            errors.append(outcome)
        else:
            normalized[name] = outcome

    for key in data:
        if key not in BUDGET_FIELDS:
            errors.append(
                FieldError(str(key), ErrorKind.UNKNOWN, f'"{key}" is not allowed')
            )

    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(value=normalized)
