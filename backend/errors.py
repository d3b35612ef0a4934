"""
Error type raised by the health score engine.

A single exception carries a machine-readable `code` and, when the failure is
tied to one category, the `factor` it belongs to. Callers branch on `code`
instead of catching subclasses.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"   # out of range, NaN or infinite
    TYPE_ERROR = "TYPE_ERROR"         # value of the wrong type
    MISSING_DATA = "MISSING_DATA"     # category (or field) absent


class HealthScoreError(Exception):
    """Raised when customer metrics cannot be scored."""

    def __init__(self, message: str, code: ErrorCode, factor: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.factor = factor

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "code": self.code.value, "factor": self.factor}

    def __repr__(self) -> str:
        return f"HealthScoreError({self.message!r}, code={self.code.value}, factor={self.factor!r})"
