"""
Domain Exceptions.

Custom exceptions for domain-level errors.
These exceptions represent business rule violations and
failures reported by the record store.
"""

from typing import Optional, Any, Dict


class DomainException(Exception):
    """Base exception for all domain errors."""
    
    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "DOMAIN_ERROR"
        self.details = details or {}


class EntityNotFoundException(DomainException):
    """Raised when an entity is not found."""
    
    def __init__(self, entity_type: str, entity_id: Any):
        super().__init__(
            message=f"{entity_type} with id '{entity_id}' not found",
            code="ENTITY_NOT_FOUND",
            details={"entity_type": entity_type, "entity_id": str(entity_id)}
        )


class ValidationException(DomainException):
    """Raised when validation fails."""
    
    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"field": field, "value": str(value) if value is not None else None}
        )


class RecordStoreError(DomainException):
    """Raised when the record store rejects or fails an operation."""
    
    def __init__(self, message: str, entity_kind: Optional[str] = None, operation: Optional[str] = None):
        super().__init__(
            message=message,
            code="RECORD_STORE_ERROR",
            details={"entity_kind": entity_kind, "operation": operation}
        )
