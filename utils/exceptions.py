"""
Custom exception hierarchy for the pattern demos.
"""
from typing import Any, Dict, Optional


class PatternsError(Exception):
    """Base exception for all pattern demo errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


class UnimplementedCapabilityError(PatternsError, NotImplementedError):
    """Raised when a capability operation is called on a class that never overrode it."""

    def __init__(self, capability: str, owner: str):
        super().__init__(
            f"{owner}.{capability}() must be implemented by a concrete variant",
            details={'capability': capability, 'owner': owner}
        )
        self.capability = capability
        self.owner = owner


class ConfigurationError(PatternsError):
    """Raised when configuration or a factory tag is invalid."""
    pass
