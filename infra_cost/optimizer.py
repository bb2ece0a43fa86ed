# ==============================================
# InfrastructureCostOptimizer — Orchestrator
# ==============================================
#
# PURPOSE:
#   Ties storage and analysis together into the single fixed run:
#
#     connect → drop collection → create indexes → insert samples
#             → load all → total + rank → print report → close
#
#   Each step completes before the next one starts. The connection
#   lives inside a `with` block so it is closed on every exit path.
#
# CLASS: InfrastructureCostOptimizer
# ----------------------------------
#   Constructor:
#   ------------
#   - __init__(config=None, mongo_client=None, analyzer=None)
#       Load config (from .env or passed in) and build the MongoClient
#       and CostAnalyzer unless they are injected.
#
#   Public Methods:
#   ---------------
#   - run() -> CostReport
#       Execute the pipeline once and return the report.
#       Safe to call repeatedly: the drop prevents accumulation.
#
# ==============================================

from typing import Optional

from infra_cost.config import AppConfig, get_config
from infra_cost.storage.mongo_client import MongoClient
from infra_cost.storage.sample_data import insert_sample_data
from infra_cost.analysis.cost_analyzer import CostAnalyzer, CostReport
from infra_cost.analysis.report import print_report


class InfrastructureCostOptimizer:
    """
    Seeds the infrastructure collection and reports the least
    cost-efficient resources.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        mongo_client: Optional[MongoClient] = None,
        analyzer: Optional[CostAnalyzer] = None
    ):
        """
        Args:
            config: Application configuration. If None, loads from environment.
            mongo_client: Unconnected store connector. Built from config if None.
            analyzer: Cost analyzer. Built with config.report_limit if None.
        """
        self._config = config or get_config()
        self._mongo_client = mongo_client or MongoClient.from_config(self._config.mongo)
        self._analyzer = analyzer or CostAnalyzer(limit=self._config.report_limit)

    def run(self) -> CostReport:
        """
        Run connect → reset → insert → analyze → report → close.
        
        Returns:
            The CostReport that was printed
            
        Raises:
            StoreConnectionError: If MongoDB cannot be reached
            MalformedRecordError: If a stored document cannot be decoded
            DuplicateResourceError: If a sample resource is already stored
        """
        collection_name = self._config.collection_name
        
        with self._mongo_client as store:
            collection = store.reset_collection(collection_name)
            insert_sample_data(collection)
            report = self._analyzer.analyze(collection)
            print_report(report)
        
        return report
