# ==============================================
# Report Rendering
# ==============================================
#
# Human-readable console output for a CostReport. Not machine-parseable.
#
# ==============================================

from typing import List

from .cost_analyzer import CostReport


def format_report(report: CostReport) -> List[str]:
    """
    Render a report as console lines.
    
    Args:
        report: The analysis result
        
    Returns:
        List of lines without trailing newlines
    """
    lines = [
        "",
        "=== Cost Analysis Report ===",
        f"Total Resources: {report.resource_count}",
        f"Total Cost: ${report.total_cost}",
        "",
        "⚠️  Least Efficient Resources:",
    ]
    for resource in report.least_efficient:
        lines.append(f"- {resource.summary()} | Efficiency: {resource.efficiency}")
    return lines


def print_report(report: CostReport) -> None:
    for line in format_report(report):
        print(line)
