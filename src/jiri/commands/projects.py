"""Projects command for listing visible projects."""

import click

from jiri.session import Session


@click.command()
@click.pass_obj
def projects(session: Session) -> None:
    """List projects visible to the authenticated user."""
    rows = [["KEY", "NAME"]]
    for project in session.tracker.list_projects():
        rows.append([str(project.get("key") or ""), str(project.get("name") or "")])

    click.echo(session.formatter.render(rows))
