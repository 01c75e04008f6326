"""Shared utilities for jira-comment: errors, logging, progress and templates."""

from .error_utils import (
    ConfigError,
    GitError,
    TemplateError,
    ToolkitError,
    convert_exception,
    error_handler,
    handle_error,
    is_debug_enabled,
)
from .template_utils import load_template, render_template

__all__ = [
    "ConfigError",
    "GitError",
    "TemplateError",
    "ToolkitError",
    "convert_exception",
    "error_handler",
    "handle_error",
    "is_debug_enabled",
    "load_template",
    "render_template",
]
