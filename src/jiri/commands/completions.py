"""Completions command for printing shell completion scripts."""

import click
from click.shell_completion import get_completion_class


@click.command()
@click.argument("shell", type=click.Choice(["bash", "zsh", "fish"]))
@click.pass_context
def completions(ctx: click.Context, shell: str) -> None:
    """Generate shell completions.

    Examples:

        jiri completions bash >> ~/.bashrc
    """
    completion_class = get_completion_class(shell)
    root = ctx.find_root().command
    completion = completion_class(root, {}, "jiri", "_JIRI_COMPLETE")
    click.echo(completion.source())
