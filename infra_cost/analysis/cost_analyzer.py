# ==============================================
# CostAnalyzer
# ==============================================
#
# PURPOSE:
#   Loads every resource document from a collection, totals the cost
#   and surfaces the least cost-efficient resources.
#
# CLASSES:
# --------
# - CostReport (dataclass)
#     resource_count: int
#     total_cost: float
#     least_efficient: list[InfrastructureResource]   (at most `limit`)
#     resources: list[InfrastructureResource]         (read order)
#
# - CostAnalyzer
#     - __init__(limit=3)   (ConfigurationError if negative)
#     - load(collection) -> list[InfrastructureResource]
#         find() with no filter or pagination; decode every document.
#     - rank(resources) -> list[InfrastructureResource]
#         Stable ascending sort by efficiency (ties keep read order).
#     - summarize(resources) -> CostReport
#     - analyze(collection) -> CostReport
#
# NOTES:
# ------
# - Never writes to the collection.
# - An empty collection yields count 0, cost 0.0 and no ranked resources.
#
# ==============================================

from dataclasses import dataclass, field
from typing import List

from infra_cost.exceptions import ConfigurationError
from infra_cost.models import InfrastructureResource


DEFAULT_REPORT_LIMIT = 3


@dataclass
class CostReport:
    """Outcome of one cost analysis pass."""
    resource_count: int = 0
    total_cost: float = 0.0
    least_efficient: List[InfrastructureResource] = field(default_factory=list)
    resources: List[InfrastructureResource] = field(default_factory=list)


class CostAnalyzer:
    """
    Ranks resources by efficiency (utilization ratio / hourly cost).
    """

    def __init__(self, limit: int = DEFAULT_REPORT_LIMIT):
        """
        Args:
            limit: How many of the least efficient resources to report
        """
        if limit < 0:
            raise ConfigurationError(f"Report limit must be >= 0, got {limit}")
        self.limit = limit

    def load(self, collection) -> List[InfrastructureResource]:
        """
        Read and decode every document in the collection.
        
        Raises:
            MalformedRecordError: If any document fails to decode
        """
        return [InfrastructureResource.from_document(doc) for doc in collection.find({})]

    def rank(self, resources: List[InfrastructureResource]) -> List[InfrastructureResource]:
        # sorted() is stable
        return sorted(resources, key=lambda r: r.efficiency)

    def summarize(self, resources: List[InfrastructureResource]) -> CostReport:
        """
        Compute the aggregate figures for an in-memory list of resources.
        
        Args:
            resources: Resources in read order
            
        Returns:
            CostReport with totals and the `limit` least efficient resources
        """
        total_cost = 0.0
        for resource in resources:
            total_cost += resource.total_cost
        
        ranked = self.rank(resources)
        return CostReport(
            resource_count=len(resources),
            total_cost=total_cost,
            least_efficient=ranked[:self.limit],
            resources=list(resources),
        )

    def analyze(self, collection) -> CostReport:
        """Load the whole collection and summarize it."""
        return self.summarize(self.load(collection))
