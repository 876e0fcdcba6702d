"""Abstract base class for issue trackers (Jira, etc.)."""

from abc import ABC, abstractmethod
from typing import Any


class IssueTracker(ABC):
    """Abstract base class for issue trackers.

    Implementations own the transport: they perform the network calls and
    translate failures into ``NetworkError`` / ``UpstreamError``. Everything
    above this boundary works on plain JSON-shaped dicts.
    """

    @abstractmethod
    def fetch_field_catalog(self) -> list[tuple[str, str]]:
        """Fetch the full field directory.

        Returns:
            List of (field id, display name) pairs, in upstream order.
        """
        pass

    @abstractmethod
    def fetch_page(
        self,
        query: str,
        fields: list[str],
        limit: int,
        cursor: str | None = None,
    ) -> tuple[list[dict[str, Any]], str | None]:
        """Fetch one page of query results.

        Args:
            query: Query string (JQL).
            fields: Field identifiers to include in each record.
            limit: Maximum number of records in this page.
            cursor: Continuation token from the previous page, or None.

        Returns:
            Tuple of (records, next cursor). The cursor is None on the last page.
        """
        pass

    @abstractmethod
    def list_projects(self) -> list[dict[str, Any]]:
        """List projects visible to the authenticated user."""
        pass

    @abstractmethod
    def get_issue(self, key: str) -> dict[str, Any]:
        """Get a single issue by key.

        Raises:
            NotFoundError: If the issue does not exist.
        """
        pass

    @abstractmethod
    def list_transitions(self, key: str) -> list[dict[str, Any]]:
        """List workflow transitions available for an issue."""
        pass

    @abstractmethod
    def apply_transition(self, key: str, transition_id: str) -> None:
        """Move an issue through the given transition."""
        pass

    @abstractmethod
    def create_issue(
        self,
        project: str,
        summary: str,
        issue_type: str,
        description: str | None = None,
    ) -> dict[str, Any]:
        """Create an issue and return the service's response record."""
        pass

    @abstractmethod
    def add_comment(self, key: str, text: str) -> dict[str, Any]:
        """Add a plain-text comment to an issue."""
        pass
