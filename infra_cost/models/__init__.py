# ==============================================
# MODELS
# ==============================================
#
# Modules:
# --------
# - resource.py  → InfrastructureResource and its document codec
#
# ==============================================

from .resource import InfrastructureResource

__all__ = [
    "InfrastructureResource"
]
