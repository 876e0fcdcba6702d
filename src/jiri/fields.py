"""
Field resolution and value projection.

Turns user-supplied field tokens (ids or display names) into a query plan and
turns returned field values into display strings.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from jiri.catalog import FieldCatalog

DEFAULT_FIELDS = ["key", "summary"]

# Conventional display keys on Jira entity objects, in priority order
DISPLAY_KEYS = ("displayName", "name", "value", "title", "label", "key")

CUSTOM_FIELD_PREFIX = "customfield_"


@dataclass
class ResolvedFieldPlan:
    """Parallel column lists for one search."""

    query_fields: list[str] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)
    keys: list[str] = field(default_factory=list)

    def add(self, query_field: str, header: str, key: str) -> None:
        self.query_fields.append(query_field)
        self.headers.append(header)
        self.keys.append(key)

    @classmethod
    def default(cls) -> ResolvedFieldPlan:
        plan = cls()
        for name in DEFAULT_FIELDS:
            plan.add(name, name.upper(), name)
        return plan


def parse_field_list(raw: str | None) -> list[str]:
    """Split a comma-separated ``--fields`` value into tokens.

    Args:
        raw: Raw option value, or None.

    Returns:
        Trimmed, non-empty tokens in order.
    """
    if not raw:
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]


def resolve_fields(requested: list[str], catalog: FieldCatalog) -> ResolvedFieldPlan:
    """Resolve field tokens against the catalog.

    Each token is matched, in order, as an exact field id, then as a
    case-insensitive display name. Anything else passes through unchanged so
    that fields the catalog does not list can still be queried.

    Args:
        requested: Field tokens as typed by the user.
        catalog: Field catalog.

    Returns:
        ResolvedFieldPlan. Defaults to key/summary when nothing is requested.
    """
    if not requested:
        return ResolvedFieldPlan.default()

    plan = ResolvedFieldPlan()
    for token in requested:
        if token in catalog.id_to_name:
            header = (catalog.name_for(token) or token).upper()
            plan.add(token, header, token)
            continue

        field_id = catalog.id_for(token)
        if field_id is not None:
            plan.add(field_id, token.upper(), field_id)
            continue

        plan.add(token, token.upper(), token)

    return plan


def unknown_fields(requested: list[str], catalog: FieldCatalog) -> list[str]:
    """Return the tokens that match neither a field id nor a display name."""
    return [
        token
        for token in requested
        if token not in catalog.id_to_name
        and catalog.id_for(token) is None
        and token.lower() not in ("key", "issuekey", "id")
    ]


def _format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return str(value)
    if value.is_integer():
        return str(int(value))
    # Plain positional notation, never an exponent
    return format(Decimal(repr(value)), "f")


def normalize_value(value: Any) -> str:
    """Convert any JSON value into a single display string.

    Never raises: unrecognised shapes fall back to their JSON text.

    Args:
        value: Field value as decoded from JSON.

    Returns:
        Display string.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_number(value)
    if isinstance(value, list):
        parts = [normalize_value(item) for item in value]
        return ", ".join(part for part in parts if part)
    if isinstance(value, dict):
        for display_key in DISPLAY_KEYS:
            candidate = value.get(display_key)
            if isinstance(candidate, str):
                return candidate
        # Cascading select options
        if "child" in value:
            return normalize_value(value["child"])
        if "parent" in value:
            return normalize_value(value["parent"])

    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(value)


def get_field_value(record: dict[str, Any], key: str) -> str:
    """Project one column out of an issue record.

    Args:
        record: Issue record as returned by the tracker.
        key: Field id (or ``key``/``issuekey``/``id`` for top-level attributes).

    Returns:
        Display string for the column.
    """
    fields = record.get("fields") or {}
    key_lower = key.lower()

    if key_lower in ("key", "issuekey"):
        value = record.get("key") or fields.get("key")
        return value if isinstance(value, str) else ""

    if key_lower == "id":
        value = record.get("id")
        return value if isinstance(value, str) else ""

    return normalize_value(fields.get(key))


def project_rows(records: list[dict[str, Any]], plan: ResolvedFieldPlan) -> list[list[str]]:
    """Build a header row followed by one row per record."""
    rows = [list(plan.headers)]
    for record in records:
        rows.append([get_field_value(record, key) for key in plan.keys])
    return rows


def levenshtein(a: str, b: str) -> int:
    """Edit distance between two strings."""
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def suggest_fields(
    token: str,
    catalog: FieldCatalog,
    limit: int = 3,
    max_distance: int = 3,
) -> list[str]:
    """Suggest display names close to an unknown token.

    Args:
        token: Unknown field token.
        catalog: Field catalog.
        limit: Maximum number of suggestions.
        max_distance: Maximum edit distance to consider.

    Returns:
        Display names, closest first.
    """
    lowered = token.lower()
    scored = [
        (levenshtein(lowered, name.lower()), name)
        for name in sorted(set(catalog.id_to_name.values()))
    ]
    close = [item for item in scored if item[0] <= max_distance]
    close.sort(key=lambda item: item[0])
    return [name for _, name in close[:limit]]


def sort_fields_for_display(field_ids: list[str], catalog: FieldCatalog) -> list[str]:
    """Sort field ids: system fields first, then custom, each by friendly name."""

    def sort_key(field_id: str) -> tuple[bool, str]:
        friendly = catalog.name_for(field_id) or field_id
        return (field_id.startswith(CUSTOM_FIELD_PREFIX), friendly.lower())

    return sorted(field_ids, key=sort_key)


def describe_field(field_id: str, catalog: FieldCatalog) -> str:
    name = catalog.name_for(field_id)
    return f'"{name}" ({field_id})' if name else field_id
