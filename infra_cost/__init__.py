# ==============================================
# Infrastructure Cost Optimizer
# ==============================================
#
# Package Structure:
#
# infra_cost/
# ├── models/           # InfrastructureResource value object + document codec
# ├── storage/          # MongoDB connector and sample data loader
# ├── analysis/         # Cost analysis and report rendering
# ├── config.py         # Configuration management
# ├── exceptions.py     # Error types
# ├── optimizer.py      # Orchestrator (connect → reset → insert → analyze)
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
