"""Search command for running JQL queries."""

import click

from jiri.session import Session


@click.command()
@click.argument("jql")
@click.option(
    "--fields",
    "-f",
    default=None,
    help="Comma-separated fields to display, by id or name (default: key,summary).",
)
@click.option(
    "--get-fields",
    is_flag=True,
    help="Show available fields on the first returned issue.",
)
@click.option(
    "--limit",
    type=int,
    default=None,
    help="Maximum number of issues to fetch (default: 1000).",
)
@click.pass_obj
def search(session: Session, jql: str, fields: str | None, get_fields: bool, limit: int | None) -> None:
    """Run a JQL search and list issues.

    Examples:

        jiri search "assignee = currentUser()"

        jiri search "project = PROJ" -f key,status,"Story Points"

        jiri search "project = PROJ" --get-fields
    """
    from jiri.commands._search_impl import run_search

    run_search(session, jql=jql, fields=fields, get_fields=get_fields, limit=limit)
