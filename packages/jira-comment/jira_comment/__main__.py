"""Allow running jirac with python -m jira_comment."""

from .main import cli

cli()
