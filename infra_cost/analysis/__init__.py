# ==============================================
# ANALYSIS
# ==============================================
#
# This package reads resources back from the collection and ranks
# them by cost efficiency.
#
# Modules:
# --------
# - cost_analyzer.py  → Load, total and rank resources → CostReport
# - report.py         → Render a CostReport for the console
#
# ==============================================

from .cost_analyzer import CostAnalyzer, CostReport
from .report import format_report, print_report

__all__ = [
    "CostAnalyzer",
    "CostReport",
    "format_report",
    "print_report"
]
