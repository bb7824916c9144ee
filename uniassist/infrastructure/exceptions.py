"""
Custom Exceptions for UniAssist

Hierarchical exception classes for proper error handling across layers.
Scorers default missing data instead of raising; these exceptions cover
genuine contract violations and collaborator failures only.
"""

from typing import Optional, Dict, Any, List


class UniAssistError(Exception):
    """Base exception for all UniAssist errors."""
    
    def __init__(
        self, 
        message: str, 
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for callers that serialize errors."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ValidationError(UniAssistError):
    """Raised when an input violates the engine's contract."""
    
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        missing_fields: Optional[List[str]] = None,
        original_error: Optional[Exception] = None
    ):
        details: Dict[str, Any] = {}
        if field:
            details["field"] = field
        if missing_fields:
            details["missing_fields"] = missing_fields
        super().__init__(message, details, original_error)


class NotFoundError(UniAssistError):
    """Raised when a requested resource is not found."""
    
    def __init__(
        self,
        message: str,
        resource: Optional[str] = None,
        identifier: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if resource:
            details["resource"] = resource
        if identifier:
            details["id"] = identifier
        super().__init__(message, details, original_error)


class ConfigurationError(UniAssistError):
    """Raised when configuration or bundled data is missing or invalid."""
    
    def __init__(
        self,
        message: str,
        missing_keys: Optional[list] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if missing_keys:
            details["missing_keys"] = missing_keys
        super().__init__(message, details, original_error)
