# ==============================================
# InfrastructureResource
# ==============================================
#
# PURPOSE:
#   Value object for one billable infrastructure unit (server,
#   database, storage, gateway) plus the two derived metrics used
#   by the cost analysis.
#
# CLASS: InfrastructureResource (dataclass)
# -----------------------------------------
#   Attributes:
#   -----------
#   - resource_id: str       → Unique identifier (e.g., "SRV001")
#   - resource_type: str     → Free-form category label
#   - cost_per_hour: float   → Hourly cost
#   - usage_hours: float     → Hours billed
#   - max_capacity: float    → Upper bound of a utilization unit
#   - current_usage: float   → Current utilization
#
#   Computed Properties:
#   --------------------
#   - total_cost -> float
#       cost_per_hour * usage_hours
#
#   - efficiency -> float
#       (current_usage / max_capacity) / cost_per_hour
#       0.0 when max_capacity <= 0 or cost_per_hour <= 0
#
#   Methods:
#   --------
#   - to_document() -> dict
#       Flat MongoDB document with camelCase field names.
#
#   - from_document(doc: dict) -> InfrastructureResource  (classmethod)
#       Typed decode. Raises MalformedRecordError on missing or
#       wrong-typed fields.
#
#   - summary() -> str
#       "SRV001 (Server) cost/hr=10.0 usage=40.0/100.0"
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Dict

from infra_cost.exceptions import MalformedRecordError


# Document field name → attribute name
STRING_FIELDS = {
    "resourceId": "resource_id",
    "resourceType": "resource_type",
}

NUMERIC_FIELDS = {
    "costPerHour": "cost_per_hour",
    "usageHours": "usage_hours",
    "maxCapacity": "max_capacity",
    "currentUsage": "current_usage",
}


@dataclass
class InfrastructureResource:
    """
    A billable infrastructure unit tracked by cost and utilization.
    
    No validation is applied to the numeric values; negative or
    nonsensical inputs are stored as given.
    """

    resource_id: str
    resource_type: str
    cost_per_hour: float
    usage_hours: float
    max_capacity: float
    current_usage: float

    @property
    def total_cost(self) -> float:
        """Hourly cost multiplied by hours billed."""
        return self.cost_per_hour * self.usage_hours

    @property
    def efficiency(self) -> float:
        """
        Utilization ratio divided by hourly cost.
        
        Lower values mean more money spent per unit of utilization.
        Returns 0.0 when capacity or cost is not positive.
        """
        if self.max_capacity <= 0 or self.cost_per_hour <= 0:
            return 0.0
        return (self.current_usage / self.max_capacity) / self.cost_per_hour

    def to_document(self) -> Dict[str, Any]:
        """
        Serialize the resource to a MongoDB document.
        
        Returns:
            A flat dict with exactly the six stored fields
        """
        return {
            "resourceId": self.resource_id,
            "resourceType": self.resource_type,
            "costPerHour": float(self.cost_per_hour),
            "usageHours": float(self.usage_hours),
            "maxCapacity": float(self.max_capacity),
            "currentUsage": float(self.current_usage),
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "InfrastructureResource":
        """
        Reconstruct a resource from a stored document.
        
        The Mongo `_id` and any other extra keys are ignored.
        Integer values are accepted for numeric fields and widened to float.
        
        Args:
            doc: Document as returned by pymongo
            
        Returns:
            An InfrastructureResource instance
            
        Raises:
            MalformedRecordError: If a field is missing or has the wrong type
        """
        if not isinstance(doc, dict):
            raise MalformedRecordError(f"Malformed record: expected a document, got {type(doc).__name__}")
        
        document_id = doc.get("_id")
        values = {}
        
        for key, attr in STRING_FIELDS.items():
            value = cls._require(doc, key, document_id)
            if not isinstance(value, str):
                raise MalformedRecordError(
                    f"Malformed record: '{key}' must be a string, got {type(value).__name__}",
                    field=key,
                    document_id=document_id,
                )
            values[attr] = value
        
        for key, attr in NUMERIC_FIELDS.items():
            value = cls._require(doc, key, document_id)
            # bool is an int subclass but never a valid measurement
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise MalformedRecordError(
                    f"Malformed record: '{key}' must be a number, got {type(value).__name__}",
                    field=key,
                    document_id=document_id,
                )
            values[attr] = float(value)
        
        return cls(**values)

    @staticmethod
    def _require(doc: Dict[str, Any], key: str, document_id: Any) -> Any:
        if key not in doc or doc[key] is None:
            raise MalformedRecordError(
                f"Malformed record: missing field '{key}'",
                field=key,
                document_id=document_id,
            )
        return doc[key]

    def summary(self) -> str:
        """One-line human readable description used in reports."""
        return (
            f"{self.resource_id} ({self.resource_type}) cost/hr={self.cost_per_hour} "
            f"usage={self.current_usage}/{self.max_capacity}"
        )

    def __str__(self) -> str:
        return self.summary()
