"""Error types raised by jiri.

All errors derive from ``click.ClickException`` so that CLI commands can let
them propagate: click prints ``Error: <message>`` and exits with status 1.
"""

import click


class JiriError(click.ClickException):
    """Base class for jiri errors."""


class ConfigurationError(JiriError):
    """Credentials or configuration are missing or malformed."""


class NetworkError(JiriError):
    """The service could not be reached at the transport level."""


class UpstreamError(JiriError):
    """The service answered with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Jira request failed {status_code}: {body}")


class NotFoundError(UpstreamError):
    """A requested issue or record does not exist."""
