"""jiri CLI - minimal Jira client."""

import click

from jiri import __version__
from jiri.commands.comment import comment
from jiri.commands.completions import completions
from jiri.commands.create import create
from jiri.commands.projects import projects
from jiri.commands.search import search
from jiri.commands.transition import transition
from jiri.commands.view import view
from jiri.formatter import Formatter
from jiri.session import Session


@click.group()
@click.version_option(version=__version__, prog_name="jiri")
@click.option("--csv", "csv_output", is_flag=True, help="Output comma-separated values (no borders).")
@click.option("--plain", is_flag=True, help="No borders, padded columns.")
@click.option("--no-header", is_flag=True, help="Omit header row.")
@click.option("--verbose", "-v", is_flag=True, help="Log requests and debug details to stderr.")
@click.pass_context
def cli(ctx: click.Context, csv_output: bool, plain: bool, no_header: bool, verbose: bool) -> None:
    """jiri - minimal Jira CLI.

    Credentials are read from ./jiri.yaml, ~/.config/jiri/config.yaml,
    or the JIRA_API_USERNAME / JIRA_API_TOKEN / JIRA_SITE environment variables.
    """
    session = ctx.obj if isinstance(ctx.obj, Session) else Session()
    session.formatter = Formatter.from_flags(csv_output, plain, no_header)
    session.verbose = verbose
    ctx.obj = session
    ctx.call_on_close(session.close)


cli.add_command(projects)
cli.add_command(search)
cli.add_command(view)
cli.add_command(transition)
cli.add_command(create)
cli.add_command(comment)
cli.add_command(completions)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
