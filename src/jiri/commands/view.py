"""View command for showing a single issue."""

import click

from jiri.session import Session


@click.command()
@click.argument("key")
@click.pass_obj
def view(session: Session, key: str) -> None:
    """View a single issue's details.

    Examples:

        jiri view PROJ-123
    """
    from jiri.commands._view_impl import run_view

    run_view(session, key)
