"""
Exception classes for the infrastructure cost optimizer.
"""


class InfraCostError(Exception):
    """Base exception for all cost optimizer errors."""
    
    def __init__(self, message: str, details: str = None):
        super().__init__(message)
        self.message = message
        self.details = details


class StoreConnectionError(InfraCostError):
    """Raised when MongoDB is unreachable or used before connecting."""
    pass


class MalformedRecordError(InfraCostError):
    """Raised when a stored document does not decode into a resource."""
    
    def __init__(self, message: str, field: str = None, document_id=None):
        details = f"field={field} _id={document_id}" if field else None
        super().__init__(message, details)
        self.field = field
        self.document_id = document_id


class DuplicateResourceError(InfraCostError):
    """Raised when an insert violates resourceId uniqueness."""
    
    def __init__(self, resource_id: str):
        super().__init__(f"Resource '{resource_id}' already exists in the collection.")
        self.resource_id = resource_id


class ConfigurationError(InfraCostError):
    """Raised when configuration is invalid."""
    pass
