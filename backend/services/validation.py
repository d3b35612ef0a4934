# backend/services/validation.py
"""
Input validation for the health score engine.

Checks run in a fixed order so the reported error is deterministic:
1. every category is present (payment, engagement, contract, support)
2. each category, in the same order, field by field

The first violated rule raises a HealthScoreError; nothing is mutated.
"""

import math
from numbers import Real
from typing import Any, Optional

from ..errors import ErrorCode, HealthScoreError
from ..models import (
    CATEGORIES,
    CATEGORY_TYPES,
    ContractData,
    CustomerMetrics,
    EngagementData,
    PaymentData,
    SupportData,
    wire_name,
)


def _check_number(
    record: Any,
    field: str,
    factor: str,
    *,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
    strictly_positive: bool = False,
) -> None:
    name = wire_name(type(record), field)
    value = getattr(record, field)

    if value is None:
        raise HealthScoreError(f"Missing {name} in {factor} data", ErrorCode.MISSING_DATA, factor)
    # bool is a subclass of int; a flag where a number belongs is a type error
    if isinstance(value, bool) or not isinstance(value, Real):
        raise HealthScoreError(f"{name} must be a number", ErrorCode.TYPE_ERROR, factor)
    # ints beyond float range cannot be scored
    try:
        value = float(value)
    except OverflowError:
        raise HealthScoreError(
            f"{name} must be a finite number", ErrorCode.INVALID_INPUT, factor
        ) from None
    if not math.isfinite(value):
        raise HealthScoreError(f"{name} must be a finite number", ErrorCode.INVALID_INPUT, factor)

    if strictly_positive and value <= 0:
        raise HealthScoreError(
            f"{name} must be a positive finite number", ErrorCode.INVALID_INPUT, factor
        )
    if minimum is not None and maximum is not None and not (minimum <= value <= maximum):
        raise HealthScoreError(
            f"{name} must be between {minimum:g} and {maximum:g}", ErrorCode.INVALID_INPUT, factor
        )
    if minimum is not None and value < minimum:
        raise HealthScoreError(
            f"{name} must be a non-negative finite number", ErrorCode.INVALID_INPUT, factor
        )


def _check_record_type(record: Any, factor: str) -> None:
    expected = CATEGORY_TYPES[factor]
    if not isinstance(record, expected):
        raise HealthScoreError(
            f"{factor} data must be an object with the {factor} metrics",
            ErrorCode.TYPE_ERROR,
            factor,
        )


def validate_payment_data(data: PaymentData) -> None:
    _check_record_type(data, "payment")
    _check_number(data, "days_since_last_payment", "payment", minimum=0)
    _check_number(data, "average_payment_delay", "payment", minimum=0)
    _check_number(data, "outstanding_balance", "payment", minimum=0)


def validate_engagement_data(data: EngagementData) -> None:
    _check_record_type(data, "engagement")
    _check_number(data, "monthly_logins", "engagement", minimum=0)
    _check_number(data, "features_used", "engagement", minimum=0)
    _check_number(data, "support_tickets_opened", "engagement", minimum=0)


def validate_contract_data(data: ContractData) -> None:
    _check_record_type(data, "contract")
    _check_number(data, "days_until_renewal", "contract")
    _check_number(data, "contract_value", "contract", strictly_positive=True)
    if data.has_recent_upgrade is None:
        raise HealthScoreError(
            "Missing hasRecentUpgrade in contract data", ErrorCode.MISSING_DATA, "contract"
        )
    if not isinstance(data.has_recent_upgrade, bool):
        raise HealthScoreError("hasRecentUpgrade must be a boolean", ErrorCode.TYPE_ERROR, "contract")


def validate_support_data(data: SupportData) -> None:
    _check_record_type(data, "support")
    _check_number(data, "average_resolution_time", "support", minimum=0)
    _check_number(data, "satisfaction_score", "support", minimum=1, maximum=5)
    _check_number(data, "escalation_count", "support", minimum=0)


VALIDATORS = {
    "payment": validate_payment_data,
    "engagement": validate_engagement_data,
    "contract": validate_contract_data,
    "support": validate_support_data,
}


def validate_customer_metrics(metrics: CustomerMetrics) -> None:
    """
    Raise HealthScoreError for the first problem found in `metrics`.

    Missing categories are reported before any field of a present category is
    looked at, so a payload missing `support` fails with MISSING_DATA/support
    even when its payment numbers are also out of range.
    """
    if not isinstance(metrics, CustomerMetrics):
        raise HealthScoreError("metrics must be a CustomerMetrics record", ErrorCode.TYPE_ERROR)

    for name in CATEGORIES:
        if getattr(metrics, name) is None:
            raise HealthScoreError(f"Missing {name} data", ErrorCode.MISSING_DATA, name)

    for name in CATEGORIES:
        VALIDATORS[name](getattr(metrics, name))
