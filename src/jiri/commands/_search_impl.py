"""Implementation of the jiri search command."""

import click

from jiri.catalog import FieldCatalog
from jiri.fields import (
    describe_field,
    parse_field_list,
    project_rows,
    resolve_fields,
    sort_fields_for_display,
    suggest_fields,
    unknown_fields,
)
from jiri.pagination import collect
from jiri.session import Session


def run_search(
    session: Session,
    jql: str,
    fields: str | None,
    get_fields: bool,
    limit: int | None,
) -> None:
    """Run the search command implementation.

    Args:
        session: Current session.
        jql: JQL query string.
        fields: Raw ``--fields`` value (comma-separated), or None.
        get_fields: List the fields of the first matching issue instead.
        limit: Result cap (None uses the configured default).
    """
    if not jql.strip():
        raise click.UsageError('JQL is required. Example: jiri search "assignee = currentUser()"')

    catalog = session.catalog.lookup()

    if get_fields:
        _list_available_fields(session, jql, catalog)
        return

    requested = parse_field_list(fields)
    _warn_unknown_fields(session, requested, catalog)
    plan = resolve_fields(requested, catalog)

    cap = limit if limit is not None else session.config.default_limit
    issues, more_available = collect(session.tracker, jql, plan.query_fields, cap)

    click.echo(session.formatter.render(project_rows(issues, plan)))

    if more_available and len(issues) >= cap:
        session.logger.warning(
            f"displayed {len(issues)} issues (limit {cap}). More results are available; "
            "rerun with a higher --limit to see more.",
            shown=len(issues),
            limit=cap,
        )


def _warn_unknown_fields(session: Session, requested: list[str], catalog: FieldCatalog) -> None:
    """Warn about tokens the catalog does not know; they are still queried as-is."""
    for token in unknown_fields(requested, catalog):
        picks = suggest_fields(token, catalog)
        if picks:
            message = f"Field '{token}' not found. Did you mean: {', '.join(picks)}?"
        else:
            message = f"Field '{token}' not found."
        session.logger.warning(message, field=token, suggestions=picks)


def _list_available_fields(session: Session, jql: str, catalog: FieldCatalog) -> None:
    """Print the field ids present on the first issue matching ``jql``."""
    issues, _ = session.tracker.fetch_page(jql, ["*all"], 1)
    if not issues:
        click.echo("No issues found.")
        return

    field_ids = list((issues[0].get("fields") or {}).keys())
    rows = [["FIELD"]]
    rows.extend([describe_field(f, catalog)] for f in sort_fields_for_display(field_ids, catalog))
    click.echo(session.formatter.render(rows))
