"""
Domain Exceptions.

Custom exceptions for domain-level errors.
The API layer translates them into HTTP responses.
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
        self.entity_type = entity_type
        self.entity_id = entity_id
