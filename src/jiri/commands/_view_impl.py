"""Implementation of the jiri view command."""

from typing import Any

import click

from jiri.adf import flatten
from jiri.session import Session
from jiri.utils import wrap_block

RECENT_COMMENTS = 5


def _text(value: Any, default: str) -> str:
    return value if isinstance(value, str) and value else default


def _nested(fields: dict[str, Any], name: str, attr: str, default: str) -> str:
    obj = fields.get(name)
    if isinstance(obj, dict):
        return _text(obj.get(attr), default)
    return default


def run_view(session: Session, key: str) -> None:
    """Run the view command implementation.

    Args:
        session: Current session.
        key: Issue key (e.g. PROJ-123).
    """
    issue = session.tracker.get_issue(key)
    fields = issue.get("fields") or {}

    issue_key = _text(issue.get("key"), "?")
    summary = _text(fields.get("summary"), "(no summary)")

    click.echo(f"  {click.style(issue_key, fg='cyan', bold=True)} — {summary}")
    click.echo("")

    details = [
        ("Type", _nested(fields, "issuetype", "name", "?")),
        ("Status", _nested(fields, "status", "name", "?")),
        ("Priority", _nested(fields, "priority", "name", "?")),
        ("Assignee", _nested(fields, "assignee", "displayName", "Unassigned")),
        ("Reporter", _nested(fields, "reporter", "displayName", "?")),
        ("Created", _text(fields.get("created"), "?")),
        ("Updated", _text(fields.get("updated"), "?")),
    ]
    for label, value in details:
        click.echo(f"  {click.style((label + ':').ljust(11), bold=True)} {value}")

    _print_description(fields)
    _print_comments(fields)


def _print_description(fields: dict[str, Any]) -> None:
    description = flatten(fields.get("description"))
    if not description.strip():
        return

    click.echo("")
    click.echo(f"  {click.style('Description:', bold=True)}")
    for line in wrap_block(description, 76, "    "):
        click.echo(line)


def _print_comments(fields: dict[str, Any]) -> None:
    comment_block = fields.get("comment")
    comments = comment_block.get("comments") if isinstance(comment_block, dict) else None
    if not comments:
        return

    recent = comments[-RECENT_COMMENTS:]
    click.echo("")
    click.echo(
        f"  {click.style('Comments', bold=True)} "
        f"({len(comments)} total, showing last {len(recent)}):"
    )
    for comment in recent:
        author = _nested(comment, "author", "displayName", "?")
        created = _text(comment.get("created"), "?")
        click.echo("")
        click.echo(f"    {click.style(author, fg='yellow')} ({created})")
        for line in wrap_block(flatten(comment.get("body")), 72, "      "):
            click.echo(line)
