"""jiri - minimal command-line client for Jira."""

__version__ = "0.2.0"
