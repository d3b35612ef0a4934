"""
main.py
FastAPI application entrypoint for the Customer Health Score service.

What this service does
----------------------
- Exposes read-only endpoints for the demo dashboard:
    * Listing demo customers with their current score and risk level
    * Returning a demo customer's full health breakdown
- Exposes a scoring endpoint for arbitrary metrics (POST /api/health)
- Delegates all scoring to the health score engine (`services.engine`)

Design decisions (high level)
-----------------------------
- Scores are never stored; they are computed on demand and memoized in the
  engine's in-process cache (5 min TTL, keyed by the full metrics content).
- The engine is injected through the `get_engine` dependency so tests can swap
  in one running on a fake clock.
- Rejected metrics come back as 422 with the engine's error code and the
  offending category: {message, code, factor}.
"""

import logging
from typing import List

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .config import configure_logging
from .errors import HealthScoreError
from .mock_data import CUSTOMERS
from .schemas import CustomerOut, ErrorOut, HealthIn, HealthOut
from .services.engine import HealthScoreEngine, default_engine

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Customer Health Score API",
    description="Score customer health from payment, engagement, contract, and support metrics.",
    version="0.1.0",
)


@app.on_event("startup")
def startup_event() -> None:
    """App lifecycle hook: configure logging once when the server starts."""
    configure_logging()


# FastAPI dependency
def get_engine() -> HealthScoreEngine:
    """Provide the process-wide health score engine to request handlers."""
    return default_engine


@app.exception_handler(HealthScoreError)
async def health_score_error_handler(request: Request, exc: HealthScoreError) -> JSONResponse:
    logger.warning("rejected metrics on %s: %r", request.url.path, exc)
    return JSONResponse(status_code=422, content=exc.to_dict())


@app.get("/api/customers", response_model=List[CustomerOut], tags=["Customers"])
def list_customers(engine: HealthScoreEngine = Depends(get_engine)) -> List[CustomerOut]:
    """
    List demo customers with their current score.

    Scores come through the engine, so repeated listings within the TTL are
    served from cache.
    """
    out = []
    for customer_id, customer in CUSTOMERS.items():
        result = engine.calculate(customer["metrics"], customer_id)
        out.append(CustomerOut(
            id=customer_id,
            name=customer["name"],
            healthScore=result.overall_score,
            riskLevel=result.risk_level.value,
        ))
    return out


@app.get("/api/customers/{customer_id}/health", response_model=HealthOut, tags=["Health"])
def customer_health(customer_id: str, engine: HealthScoreEngine = Depends(get_engine)) -> HealthOut:
    """
    Compute a demo customer's health breakdown and final score.

    The score is a weighted average (0..100) of 4 factors:
    - payment (40%), engagement (30%), contract (20%), support (10%)

    Returns:
        HealthOut: { customerId, overallScore, riskLevel, factors{...}, calculatedAt }
    """
    customer = CUSTOMERS.get(customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return HealthOut.from_result(engine.calculate(customer["metrics"], customer_id))


@app.post(
    "/api/health",
    response_model=HealthOut,
    responses={422: {"model": ErrorOut}},
    tags=["Health"],
)
def score_metrics(payload: HealthIn, engine: HealthScoreEngine = Depends(get_engine)) -> HealthOut:
    """
    Score arbitrary metrics for a customer.

    Body: {"customerId": "...", "metrics": {"payment": {...}, "engagement": {...},
    "contract": {...}, "support": {...}}} using the camelCase field names.
    Invalid metrics raise HealthScoreError, turned into a 422 by the handler above.
    """
    result = engine.calculate(payload.metrics, payload.customerId)
    return HealthOut.from_result(result)


@app.get("/", tags=["Meta"])
def root() -> dict:
    """
    Lightweight service check.
    """
    return {"message": "Customer Health Score API"}
