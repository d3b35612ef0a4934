# backend/cli.py
"""
Print health scores for the demo customers.

    python -m backend.cli            # all demo customers
    python -m backend.cli 1 3        # only customers 1 and 3
    python -m backend.cli --factors  # include the per-factor breakdown

Useful for eyeballing the formulas against the targets listed in mock_data.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import configure_logging
from .mock_data import CUSTOMERS
from .services.engine import HealthScoreEngine, default_engine

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Score the demo customers.")
    p.add_argument("customer_ids", nargs="*", help="demo customer ids (default: all)")
    p.add_argument("--factors", action="store_true", help="show the per-factor breakdown")
    return p.parse_args(argv)


def format_report(customer_id: str, engine: HealthScoreEngine, show_factors: bool = False) -> List[str]:
    customer = CUSTOMERS[customer_id]
    result = engine.calculate(customer["metrics"], customer_id)
    lines = [f"{customer_id:>3}  {customer['name']:<18} {result.overall_score:6.2f}  {result.risk_level.value}"]
    if show_factors:
        for _, factor in result.factors.items():
            lines.append(
                f"       {factor.name:<11} {factor.score:6.2f} x {factor.weight:.1f} = {factor.weighted_score:6.2f}"
            )
    return lines


def main(argv: Optional[List[str]] = None, engine: HealthScoreEngine = default_engine) -> int:
    configure_logging()
    args = parse_args(argv)

    ids = args.customer_ids or list(CUSTOMERS)
    unknown = [cid for cid in ids if cid not in CUSTOMERS]
    for cid in unknown:
        logger.error("unknown demo customer id: %s", cid)

    for cid in ids:
        if cid in CUSTOMERS:
            print("\n".join(format_report(cid, engine, args.factors)))

    return 1 if unknown else 0


if __name__ == "__main__":
    sys.exit(main())
