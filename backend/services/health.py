# backend/services/health.py
"""
Health score utilities.

Factors (0..100) → weighted sum (0..100) → risk level.

Each category scorer blends three components:
- Payment:    recency 40%, timeliness 40%, outstanding debt 20%
- Engagement: logins 40%, feature adoption 40%, ticket volume 20%
- Contract:   renewal runway 50%, contract value 30%, growth 20%
- Support:    resolution speed 40%, satisfaction 40%, escalations 20%

Weights reflect how early each signal predicts churn: billing first,
product stickiness next, renewal timing, then support as a lagging signal.
"""

import math
from typing import Dict

from ..models import (
    CATEGORIES,
    ContractData,
    EngagementData,
    FactorScore,
    Factors,
    PaymentData,
    RiskLevel,
    SupportData,
)

WEIGHTS: Dict[str, float] = {
    "payment":    0.4,
    "engagement": 0.3,
    "contract":   0.2,
    "support":    0.1,
}

FACTOR_NAMES: Dict[str, str] = {
    "payment": "Payment",
    "engagement": "Engagement",
    "contract": "Contract",
    "support": "Support",
}

# Lower bound of each band; anything below WARNING is critical.
RISK_THRESHOLDS: Dict[RiskLevel, float] = {
    RiskLevel.HEALTHY: 71.0,
    RiskLevel.WARNING: 31.0,
}


def _clamp100(x: float) -> float:
    return 0.0 if x < 0.0 else 100.0 if x > 100.0 else x


def score_payment(data: PaymentData) -> float:
    """
    Recency decays linearly to 0 at 90 days; timeliness decays exponentially
    with average delay (~10 days halves it); debt is a step function.
    """
    recency = max(0.0, 100.0 - (data.days_since_last_payment / 90.0) * 100.0)
    timeliness = max(0.0, 100.0 * math.exp(-data.average_payment_delay / 15.0))

    balance = data.outstanding_balance
    if balance == 0:
        debt = 100.0
    elif balance <= 1000:
        debt = 70.0
    elif balance <= 5000:
        debt = 40.0
    else:
        debt = 0.0

    return _clamp100(recency * 0.4 + timeliness * 0.4 + debt * 0.2)


def score_engagement(data: EngagementData) -> float:
    """
    Logins peak at 15/month and taper (floor 80) above that, since very high
    counts tend to be automation. Feature adoption grows logarithmically and
    saturates at 100. Tickets: a few are healthy, many are friction.
    """
    logins = data.monthly_logins
    if logins <= 15:
        login = min(100.0, (logins / 15.0) * 100.0)
    else:
        login = max(80.0, 100.0 - ((logins - 15) / 15.0) * 20.0)

    feature = min(100.0, 50.0 * math.log10(data.features_used + 1) * 2)

    tickets = data.support_tickets_opened
    if tickets <= 2:
        ticket = 100.0
    elif tickets <= 5:
        ticket = 85.0
    elif tickets <= 10:
        ticket = 50.0
    else:
        ticket = 20.0

    return _clamp100(login * 0.4 + feature * 0.4 + ticket * 0.2)


def score_contract(data: ContractData) -> float:
    """
    Renewal urgency by runway; from 30 days down the score tapers linearly
    from 50 to a floor of 20, reached on the renewal date (overdue renewals
    stay at the floor).
    """
    days = data.days_until_renewal
    if days > 180:
        renewal = 100.0
    elif days > 90:
        renewal = 80.0
    elif days > 30:
        renewal = 50.0
    else:
        renewal = max(20.0, 20.0 + (days / 30.0) * 30.0)

    value = min(100.0, 30.0 + 20.0 * math.log10(data.contract_value / 1000.0 + 1))
    growth = 100.0 if data.has_recent_upgrade else 50.0

    return _clamp100(renewal * 0.5 + value * 0.3 + growth * 0.2)


def score_support(data: SupportData) -> float:
    resolution = max(10.0, 100.0 * math.exp(-data.average_resolution_time / 12.0))
    satisfaction = ((data.satisfaction_score - 1) / 4.0) * 100.0

    escalations = data.escalation_count
    if escalations == 0:
        escalation = 100.0
    elif escalations <= 2:
        escalation = 70.0
    elif escalations <= 5:
        escalation = 40.0
    else:
        escalation = 0.0

    return _clamp100(resolution * 0.4 + satisfaction * 0.4 + escalation * 0.2)


SCORERS = {
    "payment": score_payment,
    "engagement": score_engagement,
    "contract": score_contract,
    "support": score_support,
}


def build_factor_scores(scores_0_100: Dict[str, float]) -> Factors:
    """Attach weight and weighted contribution to each category score."""
    built = {}
    for name in CATEGORIES:
        score = _clamp100(scores_0_100[name])
        weight = WEIGHTS[name]
        built[name] = FactorScore(
            name=FACTOR_NAMES[name],
            score=score,
            weight=weight,
            weighted_score=score * weight,
        )
    return Factors(**built)


def weighted_score(factors: Factors) -> float:
    total = 0.0
    for _, factor in factors.items():
        total += factor.weighted_score
    # half-up to 2 decimals (round() would send exact ties to even)
    return math.floor(_clamp100(total) * 100 + 0.5) / 100


def classify_risk(score: float) -> RiskLevel:
    if score >= RISK_THRESHOLDS[RiskLevel.HEALTHY]:
        return RiskLevel.HEALTHY
    if score >= RISK_THRESHOLDS[RiskLevel.WARNING]:
        return RiskLevel.WARNING
    return RiskLevel.CRITICAL
