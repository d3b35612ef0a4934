# backend/services/engine.py
"""
Health score engine: the single entry point for scoring a customer.

    cache lookup → validate → score each factor → aggregate → cache → result

A cache hit returns the stored result as-is; the key already encodes the full
metrics content, so a hit never needs re-validation.
"""

import logging
from collections.abc import Mapping
from typing import Callable, Optional, Union

from ..errors import ErrorCode, HealthScoreError
from ..models import CATEGORIES, CustomerMetrics, HealthScoreResult
from .cache import Clock, HealthScoreCache, make_key, utcnow
from .health import SCORERS, build_factor_scores, classify_risk, weighted_score
from .validation import validate_customer_metrics

logger = logging.getLogger(__name__)

ScoreCallback = Callable[[float], None]
MetricsInput = Union[CustomerMetrics, Mapping]


class HealthScoreEngine:
    def __init__(self, cache: Optional[HealthScoreCache] = None, clock: Clock = utcnow):
        self.clock = clock
        self.cache = cache if cache is not None else HealthScoreCache(clock=clock)

    def calculate(
        self,
        metrics: MetricsInput,
        customer_id: str,
        on_score: Optional[ScoreCallback] = None,
    ) -> HealthScoreResult:
        """
        Compute (or fetch from cache) the health score for one customer.

        Args:
            metrics: CustomerMetrics, or a camelCase mapping in the API wire format.
            customer_id: caller-supplied identifier; part of the cache key.
            on_score: optional hook called with the overall score. Its failures
                are logged and otherwise ignored.

        Raises:
            HealthScoreError: the metrics are missing a category or hold an
                invalid value. Nothing is cached in that case.
        """
        if isinstance(metrics, Mapping):
            metrics = CustomerMetrics.from_dict(metrics)
        elif not isinstance(metrics, CustomerMetrics):
            raise HealthScoreError(
                "metrics must be a CustomerMetrics record or a mapping", ErrorCode.TYPE_ERROR
            )

        key = make_key(customer_id, metrics)
        result = self.cache.get(key)
        if result is not None:
            logger.debug("health score cache hit for customer %s", customer_id)
        else:
            logger.debug("health score cache miss for customer %s", customer_id)
            result = self._compute(metrics, customer_id)
            self.cache.set(key, result)

        if on_score is not None:
            _notify(on_score, result)
        return result

    def _compute(self, metrics: CustomerMetrics, customer_id: str) -> HealthScoreResult:
        validate_customer_metrics(metrics)

        scores = {name: SCORERS[name](getattr(metrics, name)) for name in CATEGORIES}
        factors = build_factor_scores(scores)
        overall = weighted_score(factors)

        return HealthScoreResult(
            customer_id=customer_id,
            overall_score=overall,
            risk_level=classify_risk(overall),
            factors=factors,
            calculated_at=self.clock(),
        )


def _notify(callback: ScoreCallback, result: HealthScoreResult) -> None:
    try:
        callback(result.overall_score)
    except Exception:
        logger.exception("on_score callback failed for customer %s", result.customer_id)


# Process-wide engine used by the API and CLI
default_engine = HealthScoreEngine()


def calculate_health_score(
    metrics: MetricsInput,
    customer_id: str,
    on_score: Optional[ScoreCallback] = None,
) -> HealthScoreResult:
    return default_engine.calculate(metrics, customer_id, on_score=on_score)
