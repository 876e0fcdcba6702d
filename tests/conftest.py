"""Shared fixtures for jiri tests."""

from typing import Any

import pytest
from click.testing import CliRunner

from jiri.config import Config
from jiri.session import Session
from jiri.tracker import IssueTracker


class FakeTracker(IssueTracker):
    """In-memory tracker recording every call."""

    def __init__(
        self,
        catalog: list[tuple[str, str]] | None = None,
        pages: list[tuple[list[dict[str, Any]], str | None]] | None = None,
    ) -> None:
        self.catalog = catalog or []
        self.pages = list(pages or [])
        self.projects: list[dict[str, Any]] = []
        self.issues: dict[str, dict[str, Any]] = {}
        self.transitions: list[dict[str, Any]] = []
        self.calls: list[tuple[str, tuple]] = []
        self.catalog_error: Exception | None = None

    def fetch_field_catalog(self):
        self.calls.append(("fetch_field_catalog", ()))
        if self.catalog_error is not None:
            raise self.catalog_error
        return list(self.catalog)

    def fetch_page(self, query, fields, limit, cursor=None):
        self.calls.append(("fetch_page", (query, list(fields), limit, cursor)))
        if not self.pages:
            return [], None
        return self.pages.pop(0)

    def list_projects(self):
        self.calls.append(("list_projects", ()))
        return self.projects

    def get_issue(self, key):
        self.calls.append(("get_issue", (key,)))
        return self.issues[key]

    def list_transitions(self, key):
        self.calls.append(("list_transitions", (key,)))
        return self.transitions

    def apply_transition(self, key, transition_id):
        self.calls.append(("apply_transition", (key, transition_id)))

    def create_issue(self, project, summary, issue_type, description=None):
        self.calls.append(("create_issue", (project, summary, issue_type, description)))
        return {"key": f"{project}-1", "self": f"https://example.atlassian.net/rest/api/3/issue/{project}-1"}

    def add_comment(self, key, text):
        self.calls.append(("add_comment", (key, text)))
        return {"id": "10000"}

    def count(self, name: str) -> int:
        return sum(1 for call, _ in self.calls if call == name)


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def config():
    """Static test configuration."""
    return Config(
        user="me@example.com",
        token="secret",
        site="https://example.atlassian.net",
        default_project="PROJ",
        default_limit=1000,
    )


@pytest.fixture
def tracker():
    """Fake tracker with a small field catalog."""
    return FakeTracker(
        catalog=[
            ("summary", "Summary"),
            ("status", "Status"),
            ("assignee", "Assignee"),
            ("customfield_10016", "Story Points"),
        ]
    )


@pytest.fixture
def session(config, tracker):
    """Session wired to the fake tracker and static config."""
    session = Session(tracker_factory=lambda cfg, logger: tracker)
    session._config = config
    return session
