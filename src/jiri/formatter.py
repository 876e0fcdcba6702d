"""Rendering of row grids as bordered tables, CSV, or padded plain columns."""

from __future__ import annotations

import csv
import io
from enum import Enum

import click


class OutputFormat(Enum):
    TABLE = "table"
    CSV = "csv"
    PLAIN = "plain"


class Formatter:
    """Render rows (first row is the header) in the selected format."""

    def __init__(self, fmt: OutputFormat = OutputFormat.TABLE, no_header: bool = False) -> None:
        self.format = fmt
        self.no_header = no_header

    @classmethod
    def from_flags(cls, csv_output: bool, plain: bool, no_header: bool) -> Formatter:
        if csv_output:
            return cls(OutputFormat.CSV, no_header)
        if plain:
            return cls(OutputFormat.PLAIN, no_header)
        return cls(OutputFormat.TABLE, no_header)

    def render(self, rows: list[list[str]]) -> str:
        """Render a grid of rows.

        Args:
            rows: Header row followed by data rows.

        Returns:
            Rendered text without a trailing newline. Empty for empty input.
        """
        if not rows:
            return ""
        header, body = rows[0], rows[1:]
        if self.no_header:
            header = None
            if not body:
                return ""

        if self.format is OutputFormat.CSV:
            return self._render_csv(header, body)
        if self.format is OutputFormat.PLAIN:
            return self._render_plain(header, body)
        return self._render_table(header, body)

    @staticmethod
    def _widths(header: list[str] | None, body: list[list[str]]) -> list[int]:
        all_rows = ([header] if header else []) + body
        columns = max(len(row) for row in all_rows)
        widths = [0] * columns
        for row in all_rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(cell))
        return widths

    def _render_csv(self, header: list[str] | None, body: list[list[str]]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        if header:
            writer.writerow(header)
        writer.writerows(body)
        return buffer.getvalue().rstrip("\n")

    def _render_plain(self, header: list[str] | None, body: list[list[str]]) -> str:
        widths = self._widths(header, body)
        rows = ([header] if header else []) + body
        return "\n".join(
            "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip()
            for row in rows
        )

    def _render_table(self, header: list[str] | None, body: list[list[str]]) -> str:
        widths = self._widths(header, body)

        def border(left: str, mid: str, right: str) -> str:
            return left + mid.join("─" * (w + 2) for w in widths) + right

        def line(row: list[str], bold: bool = False) -> str:
            cells = []
            for i, width in enumerate(widths):
                text = f" {(row[i] if i < len(row) else '').ljust(width)} "
                cells.append(click.style(text, bold=True) if bold else text)
            return "│" + "│".join(cells) + "│"

        lines = [border("┌", "┬", "┐")]
        if header:
            lines.append(line(header, bold=True))
            lines.append(border("├", "┼", "┤"))
        lines.extend(line(row) for row in body)
        lines.append(border("└", "┴", "┘"))
        return "\n".join(lines)
