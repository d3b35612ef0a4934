"""
Pydantic schemas for API input/output.

These classes define how data is serialized/deserialized between the API
and clients. They are used in FastAPI route definitions as response models
or request bodies.

Schemas:
- CustomerOut: demo customer with its current score, returned in listings.
- FactorOut: one category's score and weighted contribution.
- HealthOut: full health breakdown for a single customer.
- HealthIn: request body for scoring arbitrary metrics.
- ErrorOut: body of a 422 when the engine rejects the metrics.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .models import HealthScoreResult


class CustomerOut(BaseModel):
    """Public customer view for GET /api/customers."""
    id: str
    name: str
    healthScore: float
    riskLevel: str


class FactorOut(BaseModel):
    name: str
    score: float
    weight: float
    weightedScore: float


class HealthOut(BaseModel):
    """Detailed health breakdown returned by the health endpoints."""
    customerId: str
    overallScore: float
    riskLevel: str
    factors: Dict[str, FactorOut]
    calculatedAt: datetime

    @classmethod
    def from_result(cls, result: HealthScoreResult) -> "HealthOut":
        return cls(
            customerId=result.customer_id,
            overallScore=result.overall_score,
            riskLevel=result.risk_level.value,
            factors={name: FactorOut(**f.to_dict()) for name, f in result.factors.items()},
            calculatedAt=result.calculated_at,
        )


class HealthIn(BaseModel):
    """
    Input schema for POST /api/health.

    `metrics` is left loosely typed on purpose: the engine's validator owns the
    rules and reports them with its own error codes.
    """
    customerId: str = Field(min_length=1)
    metrics: Dict[str, Any]


class ErrorOut(BaseModel):
    message: str
    code: str
    factor: Optional[str] = None
