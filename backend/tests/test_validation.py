"""
test_validation.py
------------------
Unit tests for `services.validation`.

What these tests verify:
- Each error code is raised for the situation it names:
    * MISSING_DATA  -> a category (or a field inside one) is absent
    * INVALID_INPUT -> out of range, NaN, or infinite
    * TYPE_ERROR    -> wrong value type (e.g. a non-boolean upgrade flag)
- The failing category is reported in `factor`.
- Categories are checked in a fixed order, so the first error is deterministic.
- Legal edge values (negative renewal days, satisfaction 1 and 5) pass.
"""

import pytest

from backend.errors import ErrorCode, HealthScoreError
from backend.models import CustomerMetrics
from backend.services.validation import validate_customer_metrics


def _validate(payload):
    validate_customer_metrics(CustomerMetrics.from_dict(payload))


def _error(payload) -> HealthScoreError:
    with pytest.raises(HealthScoreError) as info:
        _validate(payload)
    return info.value


def test_valid_fixture_passes(john_smith):
    _validate(john_smith)


def test_negative_balance_is_invalid_payment(john_smith):
    john_smith["payment"]["outstandingBalance"] = -1
    err = _error(john_smith)
    assert err.code is ErrorCode.INVALID_INPUT
    assert err.factor == "payment"
    assert "outstandingBalance" in err.message


def test_missing_support_category(john_smith):
    del john_smith["support"]
    err = _error(john_smith)
    assert err.code is ErrorCode.MISSING_DATA
    assert err.factor == "support"


def test_missing_category_reported_before_invalid_values(john_smith):
    """
    Presence of all four categories is checked before any field, so a bad
    payment value does not mask a missing contract.
    """
    john_smith["payment"]["daysSinceLastPayment"] = -5
    john_smith["contract"] = None
    err = _error(john_smith)
    assert (err.code, err.factor) == (ErrorCode.MISSING_DATA, "contract")


def test_categories_checked_in_fixed_order(john_smith):
    john_smith["engagement"]["monthlyLogins"] = -1
    john_smith["support"]["satisfactionScore"] = 9
    err = _error(john_smith)
    assert err.factor == "engagement"


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_values_are_invalid(john_smith, value):
    john_smith["engagement"]["featuresUsed"] = value
    err = _error(john_smith)
    assert (err.code, err.factor) == (ErrorCode.INVALID_INPUT, "engagement")


@pytest.mark.parametrize("category,field,value", [
    ("payment", "outstandingBalance", 10**400),
    ("contract", "daysUntilRenewal", -10**400),
    ("support", "escalationCount", 10**400),
])
def test_integers_beyond_float_range_are_invalid(john_smith, category, field, value):
    """
    JSON integers have no size limit; one too large for a float is rejected
    as INVALID_INPUT for its category rather than crashing the validator.
    """
    john_smith[category][field] = value
    err = _error(john_smith)
    assert (err.code, err.factor) == (ErrorCode.INVALID_INPUT, category)
    assert field in err.message


def test_large_integer_within_float_range_passes(john_smith):
    john_smith["contract"]["contractValue"] = 10**300
    _validate(john_smith)


def test_non_finite_renewal_days_are_invalid(john_smith):
    john_smith["contract"]["daysUntilRenewal"] = float("inf")
    err = _error(john_smith)
    assert (err.code, err.factor) == (ErrorCode.INVALID_INPUT, "contract")


def test_overdue_renewal_is_legal(john_smith):
    john_smith["contract"]["daysUntilRenewal"] = -30
    _validate(john_smith)


@pytest.mark.parametrize("value", [0, -100])
def test_contract_value_must_be_positive(john_smith, value):
    john_smith["contract"]["contractValue"] = value
    err = _error(john_smith)
    assert (err.code, err.factor) == (ErrorCode.INVALID_INPUT, "contract")
    assert "positive" in err.message


@pytest.mark.parametrize("flag", ["yes", 1, 0.0])
def test_upgrade_flag_must_be_boolean(john_smith, flag):
    john_smith["contract"]["hasRecentUpgrade"] = flag
    err = _error(john_smith)
    assert (err.code, err.factor) == (ErrorCode.TYPE_ERROR, "contract")


@pytest.mark.parametrize("score,ok", [(1, True), (5, True), (0.99, False), (5.01, False)])
def test_satisfaction_range_inclusive(john_smith, score, ok):
    john_smith["support"]["satisfactionScore"] = score
    if ok:
        _validate(john_smith)
    else:
        err = _error(john_smith)
        assert (err.code, err.factor) == (ErrorCode.INVALID_INPUT, "support")


@pytest.mark.parametrize("value", ["10", True, [3]])
def test_numeric_fields_reject_other_types(john_smith, value):
    john_smith["payment"]["averagePaymentDelay"] = value
    err = _error(john_smith)
    assert (err.code, err.factor) == (ErrorCode.TYPE_ERROR, "payment")


def test_missing_field_inside_category(john_smith):
    del john_smith["support"]["escalationCount"]
    err = _error(john_smith)
    assert (err.code, err.factor) == (ErrorCode.MISSING_DATA, "support")
    assert "escalationCount" in err.message


def test_category_that_is_not_an_object(john_smith):
    john_smith["engagement"] = "lots"
    err = _error(john_smith)
    assert (err.code, err.factor) == (ErrorCode.TYPE_ERROR, "engagement")


def test_validation_does_not_mutate_input(john_smith):
    metrics = CustomerMetrics.from_dict(john_smith)
    before = metrics.to_dict()
    validate_customer_metrics(metrics)
    assert metrics.to_dict() == before
