"""Standardized exceptions for the IAM database driver wrapper.

This module provides the error taxonomy shared by the URL parser, the delegate
driver registry, the credential resolver and the connection facade.
"""


class IamDriverError(Exception):
    """Base exception for all IAM driver wrapper errors."""

    def __init__(self, message: str, error_code: str | None = None) -> None:
        """Initialize the error with a message and optional error code.

        Args:
            message: Human-readable error message.
            error_code: Optional error code for programmatic handling.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationError(IamDriverError):
    """Raised when a connection request is missing required configuration."""

    def __init__(self, message: str, component: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message describing the configuration issue.
            component: Optional component name where the error occurred.
        """
        super().__init__(message, "CONFIG_ERROR")
        self.component = component


class DriverLoadError(IamDriverError):
    """Raised when a delegate driver identifier cannot be loaded or instantiated."""

    def __init__(self, message: str, identifier: str | None = None) -> None:
        """Initialize driver load error.

        Args:
            message: Error message describing the load failure.
            identifier: Optional driver identifier that failed to load.
        """
        super().__init__(message, "DRIVER_LOAD_ERROR")
        self.identifier = identifier


class TokenGenerationError(IamDriverError):
    """Raised when an IAM authentication token cannot be minted."""

    def __init__(self, message: str, host: str | None = None) -> None:
        """Initialize token generation error.

        Args:
            message: Error message describing the token failure.
            host: Optional database host the token was requested for.
        """
        super().__init__(message, "TOKEN_ERROR")
        self.host = host


class InvalidUrlError(IamDriverError, ValueError):
    """Raised when a connection URL is missing entirely."""

    def __init__(self, message: str) -> None:
        """Initialize invalid URL error.

        Args:
            message: Error message describing the URL problem.
        """
        super().__init__(message, "INVALID_URL")


class UnsupportedOperationError(IamDriverError):
    """Raised when an operation cannot be answered in the current state."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        """Initialize unsupported operation error.

        Args:
            message: Error message describing why the operation is unavailable.
            operation: Optional name of the unsupported operation.
        """
        super().__init__(message, "UNSUPPORTED")
        self.operation = operation
