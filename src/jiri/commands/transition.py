"""Transition command for moving an issue through its workflow."""

import click

from jiri.session import Session


@click.command()
@click.argument("key")
@click.argument("status", required=False)
@click.pass_obj
def transition(session: Session, key: str, status: str | None) -> None:
    """Transition an issue to a new status.

    Without STATUS, lists the available transitions.
    STATUS matches a transition name case-insensitively, by prefix.

    Examples:

        jiri transition PROJ-123

        jiri transition PROJ-123 "in prog"
    """
    from jiri.commands._transition_impl import run_transition

    run_transition(session, key, status)
