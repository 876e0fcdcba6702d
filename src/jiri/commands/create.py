"""Create command for opening a new issue."""

import click

from jiri.errors import ConfigurationError
from jiri.session import Session


@click.command()
@click.option("--project", "-p", default=None, help="Project key (e.g. PROJ).")
@click.option("--summary", "-s", required=True, help="Issue summary.")
@click.option(
    "--type",
    "-t",
    "issue_type",
    default="Task",
    show_default=True,
    help="Issue type.",
)
@click.option("--description", "-d", default=None, help="Issue description.")
@click.pass_obj
def create(
    session: Session,
    project: str | None,
    summary: str,
    issue_type: str,
    description: str | None,
) -> None:
    """Create a new issue.

    Examples:

        jiri create -p PROJ -s "Fix login redirect"

        jiri create -s "Write docs" -t Story -d "Cover the config file"
    """
    project_key = project or session.config.default_project
    if not project_key:
        raise ConfigurationError(
            "Project key is required. Use --project or set default_project in config."
        )

    result = session.tracker.create_issue(project_key, summary, issue_type, description)
    key = result.get("key") or "?"
    url = result.get("self") or ""

    session.logger.info("Issue created", key=key, project=project_key)
    click.echo(f"Created issue: {key}")
    if url:
        click.echo(f"  {url}")
