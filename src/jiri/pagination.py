"""Cursor-based query aggregation."""

from __future__ import annotations

from typing import Any

from jiri.tracker import IssueTracker

PAGE_SIZE = 100


def collect(
    tracker: IssueTracker,
    query: str,
    fields: list[str],
    limit: int,
    page_size: int = PAGE_SIZE,
) -> tuple[list[dict[str, Any]], bool]:
    """Run a query page by page until ``limit`` records or the data run out.

    A failing page fetch propagates and discards anything collected so far.

    Args:
        tracker: Tracker providing ``fetch_page``.
        query: Query string (JQL).
        fields: Field identifiers to request.
        limit: Maximum number of records to return.
        page_size: Maximum records per request.

    Returns:
        Tuple of (records, more_available). ``more_available`` is True only
        when the limit was reached while the service still offered a cursor.
    """
    records: list[dict[str, Any]] = []
    cursor: str | None = None
    more_available = False

    while len(records) < limit:
        remaining = limit - len(records)
        page, cursor = tracker.fetch_page(query, fields, min(page_size, remaining), cursor)
        records.extend(page[:remaining])

        if not cursor or not page:
            more_available = False
            break
        more_available = True

    return records, more_available
