"""Comment command for adding a comment to an issue."""

import click

from jiri.session import Session


@click.command()
@click.argument("key")
@click.argument("message")
@click.pass_obj
def comment(session: Session, key: str, message: str) -> None:
    """Add a comment to an issue.

    Examples:

        jiri comment PROJ-123 "Deployed to staging"
    """
    session.tracker.add_comment(key, message)
    session.logger.info("Comment added", key=key)
    click.echo(f"Comment added to {key}")
