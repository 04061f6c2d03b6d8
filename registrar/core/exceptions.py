"""
Custom exceptions for the registrar.
"""

from typing import Optional, Any, Dict


class RegistrarError(Exception):
    """Base exception for all registrar errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(RegistrarError):
    """Raised when input data is malformed (blank name, bad capacity, bad grade)."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code="validation", details=details)


class NotFoundError(RegistrarError):
    """Raised when a student or course identifier does not exist."""
    
    def __init__(self, kind: str, entity_id: Any):
        super().__init__(
            f"{kind.capitalize()} {entity_id} not found",
            error_code="not_found",
            details={"kind": kind, "id": entity_id},
        )
        self.kind = kind
        self.entity_id = entity_id


class ConfigurationError(RegistrarError):
    """Raised when configuration is invalid."""
    pass
