"""Tests for the jiri view and transition commands."""

import pytest

from jiri.cli import cli
from jiri.commands._transition_impl import find_transition
from jiri.errors import NotFoundError


def paragraph(text):
    return {
        "type": "doc",
        "version": 1,
        "content": [{"type": "paragraph", "content": [{"type": "text", "text": text}]}],
    }


@pytest.fixture
def full_issue():
    comments = [
        {"author": {"displayName": f"User {i}"}, "created": f"2026-01-0{i}", "body": paragraph(f"note {i}")}
        for i in range(1, 8)
    ]
    return {
        "key": "PROJ-42",
        "fields": {
            "summary": "Broken login",
            "issuetype": {"name": "Bug"},
            "status": {"name": "In Progress"},
            "priority": {"name": "High"},
            "assignee": None,
            "reporter": {"displayName": "Grace"},
            "created": "2026-01-01T10:00:00.000+0000",
            "updated": "2026-01-02T10:00:00.000+0000",
            "description": {
                "type": "doc",
                "content": [
                    {"type": "paragraph", "content": [{"type": "text", "text": "Steps:"}]},
                    {
                        "type": "bulletList",
                        "content": [
                            {"type": "listItem", "content": [paragraph("open page")["content"][0]]},
                        ],
                    },
                ],
            },
            "comment": {"comments": comments},
        },
    }


class TestViewCommand:
    """Tests for view command."""

    def test_view_details(self, runner, session, tracker, full_issue):
        tracker.issues["PROJ-42"] = full_issue

        result = runner.invoke(cli, ["view", "PROJ-42"], obj=session)

        assert result.exit_code == 0
        assert "PROJ-42 — Broken login" in result.output
        assert "Type:       Bug" in result.output
        assert "Status:     In Progress" in result.output
        assert "Assignee:   Unassigned" in result.output
        assert "Reporter:   Grace" in result.output
        assert "    Steps:" in result.output
        assert "    • open page" in result.output

    def test_view_shows_last_five_comments(self, runner, session, tracker, full_issue):
        tracker.issues["PROJ-42"] = full_issue

        result = runner.invoke(cli, ["view", "PROJ-42"], obj=session)

        assert "Comments (7 total, showing last 5):" in result.output
        assert "User 2" not in result.output
        assert "User 3 (2026-01-03)" in result.output
        assert "      note 7" in result.output
        assert result.output.index("User 3") < result.output.index("User 7")

    def test_view_minimal_issue(self, runner, session, tracker):
        tracker.issues["P-1"] = {"key": "P-1", "fields": {}}

        result = runner.invoke(cli, ["view", "P-1"], obj=session)

        assert result.exit_code == 0
        assert "P-1 — (no summary)" in result.output
        assert "Description" not in result.output
        assert "Comments" not in result.output

    def test_view_keeps_blank_description_line(self, runner, session, tracker):
        tracker.issues["P-2"] = {
            "key": "P-2",
            "fields": {
                "description": {
                    "type": "doc",
                    "content": [
                        paragraph("first")["content"][0],
                        {"type": "paragraph", "content": []},
                        paragraph("second")["content"][0],
                    ],
                },
            },
        }

        result = runner.invoke(cli, ["view", "P-2"], obj=session)

        assert result.exit_code == 0
        assert "    first\n\n    second\n" in result.output

    def test_view_not_found(self, runner, session, tracker):
        def missing(key):
            raise NotFoundError(404, "Issue does not exist")

        tracker.get_issue = missing

        result = runner.invoke(cli, ["view", "P-404"], obj=session)

        assert result.exit_code == 1
        assert "Issue does not exist" in result.output


class TestFindTransition:
    """Tests for find_transition."""

    TRANSITIONS = [
        {"id": "11", "name": "To Do"},
        {"id": "21", "name": "In Progress"},
        {"id": "31", "name": "Done"},
    ]

    def test_exact_case_insensitive(self):
        assert find_transition(self.TRANSITIONS, "done")["id"] == "31"

    def test_prefix(self):
        assert find_transition(self.TRANSITIONS, "in prog")["id"] == "21"

    def test_no_match(self):
        assert find_transition(self.TRANSITIONS, "blocked") is None


class TestTransitionCommand:
    """Tests for transition command."""

    def test_list_transitions(self, runner, session, tracker):
        tracker.transitions = TestFindTransition.TRANSITIONS

        result = runner.invoke(cli, ["transition", "P-1"], obj=session)

        assert result.exit_code == 0
        assert "Available transitions for P-1:" in result.output
        assert "[21] In Progress" in result.output
        assert tracker.count("apply_transition") == 0

    def test_apply_transition(self, runner, session, tracker):
        tracker.transitions = TestFindTransition.TRANSITIONS

        result = runner.invoke(cli, ["transition", "P-1", "DONE"], obj=session)

        assert result.exit_code == 0
        assert "Transitioned P-1 → Done" in result.output
        assert tracker.calls[-1] == ("apply_transition", ("P-1", "31"))

    def test_no_matching_transition(self, runner, session, tracker):
        tracker.transitions = TestFindTransition.TRANSITIONS

        result = runner.invoke(cli, ["transition", "P-1", "blocked"], obj=session)

        assert result.exit_code == 1
        assert "No transition matching 'blocked'. Available: To Do, In Progress, Done" in result.output
        assert tracker.count("apply_transition") == 0
