"""
Domain records for the health score engine.

Input side (one record per telemetry category):
- PaymentData: billing snapshot at calculation time
- EngagementData: product usage over the last month
- ContractData: renewal timeline, annual value, upgrade flag
- SupportData: resolution speed, CSAT (1..5), escalations
- CustomerMetrics: the four categories together

Output side:
- FactorScore: one category's score and its weighted contribution
- Factors: the four FactorScores keyed by category
- HealthScoreResult: overall score, risk level and breakdown

Every record is a frozen dataclass; a result is never mutated once built.
The wire format (API bodies, fixtures) uses the camelCase names below.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class RiskLevel(str, Enum):
    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"


# Category order is fixed: validation and aggregation both walk it.
CATEGORIES: Tuple[str, ...] = ("payment", "engagement", "contract", "support")


@dataclass(frozen=True)
class PaymentData:
    days_since_last_payment: float
    average_payment_delay: float    # days
    outstanding_balance: float      # dollars

    WIRE_NAMES = {
        "days_since_last_payment": "daysSinceLastPayment",
        "average_payment_delay": "averagePaymentDelay",
        "outstanding_balance": "outstandingBalance",
    }


@dataclass(frozen=True)
class EngagementData:
    monthly_logins: float
    features_used: float
    support_tickets_opened: float

    WIRE_NAMES = {
        "monthly_logins": "monthlyLogins",
        "features_used": "featuresUsed",
        "support_tickets_opened": "supportTicketsOpened",
    }


@dataclass(frozen=True)
class ContractData:
    days_until_renewal: float       # negative = renewal overdue
    contract_value: float           # annual, dollars
    has_recent_upgrade: bool

    WIRE_NAMES = {
        "days_until_renewal": "daysUntilRenewal",
        "contract_value": "contractValue",
        "has_recent_upgrade": "hasRecentUpgrade",
    }


@dataclass(frozen=True)
class SupportData:
    average_resolution_time: float  # hours
    satisfaction_score: float       # 1..5
    escalation_count: float

    WIRE_NAMES = {
        "average_resolution_time": "averageResolutionTime",
        "satisfaction_score": "satisfactionScore",
        "escalation_count": "escalationCount",
    }


CATEGORY_TYPES = {
    "payment": PaymentData,
    "engagement": EngagementData,
    "contract": ContractData,
    "support": SupportData,
}


def wire_name(record_type, field_name: str) -> str:
    return record_type.WIRE_NAMES.get(field_name, field_name)


def _record_from_wire(record_type, raw: Any) -> Any:
    # Anything that is not a mapping is passed through for the validator to reject.
    if raw is None or not isinstance(raw, Mapping):
        return raw
    values = {f.name: raw.get(wire_name(record_type, f.name)) for f in fields(record_type)}
    return record_type(**values)


def _record_to_wire(record: Any) -> Any:
    if not hasattr(record, "WIRE_NAMES"):
        return record
    return {wire_name(type(record), f.name): getattr(record, f.name) for f in fields(record)}


@dataclass(frozen=True)
class CustomerMetrics:
    """
    All four categories for one customer.

    Fields are Optional only so that a payload missing a category can still be
    represented and reported as MISSING_DATA; a complete record has all four.
    """
    payment: Optional[PaymentData]
    engagement: Optional[EngagementData]
    contract: Optional[ContractData]
    support: Optional[SupportData]

    @classmethod
    def from_dict(cls, payload: Mapping) -> "CustomerMetrics":
        """Build from the camelCase wire format. Missing pieces become None."""
        return cls(**{
            name: _record_from_wire(CATEGORY_TYPES[name], payload.get(name))
            for name in CATEGORIES
        })

    def to_dict(self) -> Dict[str, Any]:
        return {name: _record_to_wire(getattr(self, name)) for name in CATEGORIES}


@dataclass(frozen=True)
class FactorScore:
    name: str
    score: float
    weight: float
    weighted_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "score": self.score,
            "weight": self.weight,
            "weightedScore": self.weighted_score,
        }


@dataclass(frozen=True)
class Factors:
    payment: FactorScore
    engagement: FactorScore
    contract: FactorScore
    support: FactorScore

    def items(self):
        return [(name, getattr(self, name)) for name in CATEGORIES]

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: factor.to_dict() for name, factor in self.items()}


@dataclass(frozen=True)
class HealthScoreResult:
    customer_id: str
    overall_score: float
    risk_level: RiskLevel
    factors: Factors
    calculated_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "customerId": self.customer_id,
            "overallScore": self.overall_score,
            "riskLevel": self.risk_level.value,
            "factors": self.factors.to_dict(),
            "calculatedAt": self.calculated_at.isoformat(),
        }
