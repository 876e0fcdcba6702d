"""Implementation of the jiri transition command."""

from typing import Any, Optional

import click

from jiri.session import Session


def find_transition(transitions: list[dict[str, Any]], target: str) -> Optional[dict[str, Any]]:
    """Find the first transition whose name equals or starts with ``target``.

    Matching is case-insensitive.

    Args:
        transitions: Transitions as returned by the tracker.
        target: Status name typed by the user.

    Returns:
        Matching transition, or None.
    """
    target_lower = target.lower()
    for candidate in transitions:
        name = str(candidate.get("name") or "").lower()
        if name == target_lower or name.startswith(target_lower):
            return candidate
    return None


def run_transition(session: Session, key: str, status: Optional[str]) -> None:
    """Run the transition command implementation.

    Args:
        session: Current session.
        key: Issue key.
        status: Target status name (None to list transitions).
    """
    transitions = session.tracker.list_transitions(key)

    if status is None:
        _list_transitions(key, transitions)
        return

    matched = find_transition(transitions, status)
    if matched is None:
        available = ", ".join(str(t.get("name")) for t in transitions if t.get("name"))
        raise click.ClickException(
            f"No transition matching '{status}'. Available: {available}"
        )

    transition_id = str(matched.get("id") or "?")
    name = str(matched.get("name") or "?")

    session.tracker.apply_transition(key, transition_id)
    session.logger.info("Issue transitioned", key=key, transition=name)
    click.echo(f"Transitioned {key} → {name}")


def _list_transitions(key: str, transitions: list[dict[str, Any]]) -> None:
    if not transitions:
        click.echo(f"No transitions available for {key}.")
        return

    click.echo(f"Available transitions for {key}:")
    for item in transitions:
        transition_id = click.style(f"[{item.get('id') or '?'}]", fg="cyan")
        click.echo(f"  {transition_id} {item.get('name') or '?'}")
