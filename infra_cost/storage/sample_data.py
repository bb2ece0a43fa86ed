# ==============================================
# Sample Data
# ==============================================
#
# PURPOSE:
#   The four fixed resources the optimizer seeds the collection with,
#   and the loader that inserts them.
#
# FUNCTION:
# ---------
# - insert_sample_data(collection, resources=SAMPLE_RESOURCES) -> int
#     Serialize each resource and insert it, one document per resource.
#     No duplicate check beyond the unique resourceId index: the caller
#     drops the collection first.
#
# ==============================================

from typing import Sequence

from pymongo.errors import DuplicateKeyError

from infra_cost.exceptions import DuplicateResourceError
from infra_cost.models import InfrastructureResource


SAMPLE_RESOURCES = (
    InfrastructureResource("SRV001", "Server", 10.0, 5.0, 100.0, 40.0),
    InfrastructureResource("SRV002", "Database", 20.0, 6.0, 150.0, 75.0),
    InfrastructureResource("SRV003", "Storage", 5.0, 8.0, 200.0, 100.0),
    InfrastructureResource("SRV004", "API Gateway", 15.0, 3.0, 120.0, 30.0),
)


def insert_sample_data(collection, resources: Sequence[InfrastructureResource] = SAMPLE_RESOURCES) -> int:
    """
    Insert resources into a collection, preserving their order.
    
    Args:
        collection: pymongo collection handle
        resources: Resources to insert (defaults to the four samples)
        
    Returns:
        Number of documents inserted
        
    Raises:
        DuplicateResourceError: If a resourceId is already stored
    """
    inserted = 0
    for resource in resources:
        try:
            collection.insert_one(resource.to_document())
        except DuplicateKeyError as e:
            print(f"✗ Duplicate resource: {resource.resource_id}")
            raise DuplicateResourceError(resource.resource_id) from e
        inserted += 1
    
    print(f"✓ Inserted {inserted} sample resources into '{collection.name}'.")
    return inserted
