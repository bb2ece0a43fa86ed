# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Runs the optimizer once and exits.
#
# USAGE:
# ------
#    python -m infra_cost.cli
#    python -m infra_cost.cli --top 5
#
# EXIT CODES:
# -----------
#    0 → report printed
#    1 → invalid configuration, connection failure, malformed record
#        or duplicate resource
#
# ==============================================

import argparse
import sys
from typing import List, Optional

from infra_cost.config import get_config
from infra_cost.analysis.cost_analyzer import CostAnalyzer
from infra_cost.exceptions import InfraCostError
from infra_cost.optimizer import InfrastructureCostOptimizer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="infra-cost",
        description="Seed the infrastructure collection and report the least cost-efficient resources."
    )
    parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="number of least efficient resources to list (default: REPORT_LIMIT or 3)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
        limit = config.report_limit if args.top is None else args.top
        optimizer = InfrastructureCostOptimizer(config=config, analyzer=CostAnalyzer(limit=limit))
        optimizer.run()
    except InfraCostError as e:
        print(f"\n❌ Error: {e.message}")
        if e.details:
            print(f"   {e.details}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
