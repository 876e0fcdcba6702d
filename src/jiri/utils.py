"""
src/jiri/utils.py - utility functions

Small generic helpers shared by the config layer and the commands.
"""

import textwrap
from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dictionaries

    Args:
        base: Base dictionary (left unmodified)
        override: Dictionary whose values take precedence

    Returns:
        Merged dictionary
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def wrap_block(text: str, width: int, indent: str) -> list[str]:
    """
    Wrap multi-line text, keeping blank lines between paragraphs

    Args:
        text: Text to wrap
        width: Maximum line width (excluding indent)
        indent: Prefix for every output line

    Returns:
        Output lines
    """
    lines: list[str] = []
    for paragraph in text.rstrip("\n").split("\n"):
        wrapped = textwrap.wrap(paragraph, width) or [""]
        lines.extend(f"{indent}{line}".rstrip() for line in wrapped)
    return lines
