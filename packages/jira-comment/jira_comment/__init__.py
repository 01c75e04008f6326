"""jira-comment: turn a pick of pushed commits into a Jira comment."""

__version__ = "1.0.0"
