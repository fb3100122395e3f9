"""
Error handling utilities.
"""
from typing import Optional, Callable
from .logging_config import get_logger


class ErrorContext:
    """Context manager that logs an operation and its failure, with optional cleanup."""

    def __init__(
        self,
        operation_name: str,
        cleanup_func: Optional[Callable] = None,
        raise_on_error: bool = True
    ):
        self.operation_name = operation_name
        self.cleanup_func = cleanup_func
        self.raise_on_error = raise_on_error
        self.logger = get_logger(__name__)

    def __enter__(self):
        self.logger.info(f"Starting operation: {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.info(f"Completed operation: {self.operation_name}")
            return False

        details = exc_val.to_dict() if hasattr(exc_val, 'to_dict') else {}
        self.logger.error(
            f"Error in operation {self.operation_name}: {exc_val}",
            exc_info=(exc_type, exc_val, exc_tb),
            extra={'error_details': details}
        )

        if self.cleanup_func:
            try:
                self.cleanup_func()
            except Exception as cleanup_error:
                self.logger.error(
                    f"Error during cleanup: {cleanup_error}",
                    exc_info=True
                )

        # Suppress only when asked to
        return not self.raise_on_error
