"""
Utility modules for the pattern demos.
"""
from .logging_config import get_logger, LoggerFactory, LogContext, StructuredFormatter
from .exceptions import PatternsError, UnimplementedCapabilityError, ConfigurationError
from .error_handlers import ErrorContext

__all__ = [
    'get_logger',
    'LoggerFactory',
    'LogContext',
    'StructuredFormatter',
    'PatternsError',
    'UnimplementedCapabilityError',
    'ConfigurationError',
    'ErrorContext',
]
