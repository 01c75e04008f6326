"""Error handling utilities for jira-comment.

This module provides a centralized error handling system with custom exceptions
and helper functions for consistent error reporting across all toolkit components.
"""

import functools
import os
import sys
import traceback
from typing import Any, Callable, Optional, Type, TypeVar, cast

from .logging_utils import error

# * Type variable for decorator return type preservation
F = TypeVar("F", bound=Callable[..., Any])


class ToolkitError(Exception):
    """Base exception class for all toolkit errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.cause:
            return (
                f"{self.message} (Caused by: {type(self.cause).__name__}:"
                f" {str(self.cause)})"
            )
        return self.message


class ConfigError(ToolkitError):
    """Raised when there is an issue with configuration."""

    pass


class GitError(ToolkitError):
    """Raised when a Git operation fails."""

    pass


class TemplateError(ToolkitError):
    """Raised when there is an issue with templates."""

    pass


def is_debug_enabled(debug_env_var: str = "DEBUG") -> bool:
    """Check whether the given environment variable switches on debug output."""
    return os.environ.get(debug_env_var, "").lower() in ("true", "1", "yes")


def handle_error(
    e: Exception,
    error_type: Type[Exception] = Exception,
    message: Optional[str] = None,
    debug: bool = False,
    exit_code: Optional[int] = None,
) -> None:
    """Handle an exception with consistent logging and optional exit.

    Args:
        e: The exception to handle
        error_type: The expected type of exception for more specific error messages
        message: Custom error message prefix
        debug: Whether to print debug information
        exit_code: If provided, exit the program with this code
    """
    # * Ensure we start error output on a clean line
    # * This helps when spinners or other output might interfere
    sys.stdout.write("\n")
    sys.stdout.flush()

    # * Determine message based on exception type
    if isinstance(e, ToolkitError):
        err_message = str(e)
    elif message:
        err_message = f"{message}: {str(e)}"
    else:
        err_message = str(e)

    error(err_message)

    if debug:
        error("Debug information:")
        traceback.print_exception(type(e), e, e.__traceback__)

    if exit_code is not None:
        sys.exit(exit_code)


def error_handler(
    error_type: Optional[Type[Exception]] = None,
    message: Optional[str] = None,
    reraise: bool = False,
    default_return: Any = None,
    debug_env_var: str = "DEBUG",
) -> Callable[[F], F]:
    """Decorator for handling errors in functions.

    Args:
        error_type: The expected type of exception
        message: Custom error message prefix
        reraise: Whether to re-raise the exception after handling
        default_return: Value to return on error if not reraising
        debug_env_var: Environment variable to check for debug mode

    Returns:
        Decorated function
    """
    error_type = error_type or Exception

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            debug = is_debug_enabled(debug_env_var)
            try:
                return func(*args, **kwargs)
            except error_type as e:
                func_name = getattr(func, "__qualname__", func.__name__)
                custom_message = message or f"Error in {func_name}"
                handle_error(e, error_type, custom_message, debug)
                if reraise:
                    raise
                return default_return

        return cast(F, wrapper)

    return decorator


def convert_exception(
    from_error_type: Type[Exception],
    to_error_type: Type[ToolkitError],
    message: Optional[str] = None,
) -> Callable[[F], F]:
    """Convert a specific exception type to a toolkit exception type.

    Args:
        from_error_type: The original exception type to catch
        to_error_type: The toolkit exception type to convert to
        message: Optional message for the new exception (defaults to the original)

    Returns:
        Decorated function
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except from_error_type as e:
                raise to_error_type(message or str(e), cause=e) from e

        return cast(F, wrapper)

    return decorator
