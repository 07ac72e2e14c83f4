from typing import List, Optional
from pydantic import BaseModel


class ErrorDetail(BaseModel):
    field: str
    type: str
    message: str


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Optional[List[ErrorDetail]] = None
    errors: Optional[List[str]] = None


class ErrorResponse(BaseModel):
    error: ErrorBody


def error_body(code: str, message: str, **extra) -> dict:
    """Build the {"error": {...}} envelope every non-2xx response uses."""
    return {"error": {"code": code, "message": message, **extra}}
