"""
Common Exception Classes

This module defines the error taxonomy shared by the repository and cache
ports. Backends translate their native failures into these classes at the
boundary so callers only ever see the types defined here.
"""

from typing import Optional, Any


class BaseError(Exception):
    """Base class for all custom exceptions."""

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            original_exception: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception


class CoreError(BaseError):
    """Root of the errors a port operation may raise."""


class ParseError(CoreError):
    """Exception raised for a malformed identifier or pagination input."""

    def __init__(self, message: str, value: Any = None):
        """
        Initialize the parse error.

        Args:
            message: Error message
            value: The raw input that failed to parse
        """
        super().__init__(f"Parse error: {message}")
        self.value = value


class NotFoundError(CoreError):
    """Exception raised when a record or cache key is absent."""

    def __init__(self, resource_type: str, resource_id: Any):
        """
        Initialize the not found error.

        Args:
            resource_type: Type of resource that wasn't found
            resource_id: ID of the resource that wasn't found
        """
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class MissingParametersError(CoreError):
    """Exception raised when required input is absent."""

    def __init__(self, message: str, parameters: Optional[list] = None):
        super().__init__(f"Missing parameters: {message}")
        self.parameters = parameters or []


class InternalError(CoreError):
    """Exception raised for backend or connectivity faults."""

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        """
        Initialize the internal error.

        Args:
            message: Error message
            original_exception: Backend exception that caused this error
        """
        super().__init__(f"Internal error: {message}", original_exception)


class ConfigurationError(BaseError):
    """Exception raised for configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        """
        Initialize the configuration error.

        Args:
            message: Error message
            config_key: The configuration key that caused the error
        """
        super().__init__(f"Configuration error: {message}")
        self.config_key = config_key
