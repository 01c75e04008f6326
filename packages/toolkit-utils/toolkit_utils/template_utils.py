"""Template handling utilities for jira-comment.

This module provides centralized template handling functions for loading and
filling in templates. It ensures consistent error handling and provides a
unified interface for working with user-supplied and built-in templates.
"""

import os
import re
from typing import Dict, Optional

from .error_utils import TemplateError
from .logging_utils import warning

# * Placeholders look like {{name}}, optionally padded with spaces
PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def load_template(
    template_path: Optional[str],
    default_template_path: Optional[str] = None,
    default_template_content: Optional[str] = None,
    template_type: str = "template",
) -> str:
    """Load a template from file with fallback options.

    This function attempts to load a template from the specified path,
    falling back to the default template path or content if provided.

    Args:
        template_path: Path to the template file
        default_template_path: Path to the default template file if primary path fails
        default_template_content: Default template content as a string if both path fail
        template_type: Description of template type for logging (e.g., "header")

    Returns:
        str: The template content

    Raises:
        TemplateError: If the template cannot be loaded from any source
    """
    # * Try to load from the provided path
    if template_path and os.path.exists(template_path):
        try:
            with open(template_path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            warning(f"Error reading {template_type} template from {template_path}: {e}")
    elif template_path:
        warning(f"{template_type.capitalize()} template not found: {template_path}")

    # * Try to load from the default path
    if default_template_path and os.path.exists(default_template_path):
        try:
            with open(default_template_path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            warning(f"Error reading default {template_type} template: {e}")
    elif default_template_path:
        warning(f"Default {template_type} template not found: {default_template_path}")

    if default_template_content is not None:
        return default_template_content

    raise TemplateError(f"Failed to load {template_type} template from any source")


def render_template(template_content: str, context: Dict[str, object]) -> str:
    """Replace {{placeholders}} in a template with values from a context.

    Args:
        template_content: The template text
        context: Mapping of placeholder names to values

    Returns:
        str: The filled-in template

    Raises:
        TemplateError: If the template names a placeholder missing from the context
    """

    def _substitute(match: "re.Match[str]") -> str:
        key = match.group(1)
        if key not in context:
            raise TemplateError(f"Unknown template placeholder: {{{{{key}}}}}")
        return str(context[key])

    return PLACEHOLDER_PATTERN.sub(_substitute, template_content)
