"""Markdown table builder."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum


class Alignment(Enum):
    """Column alignment, rendered in the separator row."""

    DEFAULT = "---"
    LEFT = ":---"
    CENTER = ":---:"
    RIGHT = "---:"


def _unchanged(text: str) -> str:
    return text


class TableBuilder:
    """Accumulate headers and rows, then render a Markdown table.

    Every method except `build` returns the builder so calls can be chained.

    Examples:
        table = (
            TableBuilder()
            .with_headers("Name", "Age")
            .with_bold_headers()
            .set_alignment(1, Alignment.RIGHT)
            .add_row("Alice", "30")
        )
        table.build()
        # "| **Name** | **Age** |\\n| --- | ---: |\\n| Alice | 30 |\\n"
    """

    def __init__(self):
        self.headers: list[str] = []
        self.rows: list[list[str]] = []
        self.alignments: list[Alignment] = []
        self.header_style: Callable[[str], str] = _unchanged

    def with_headers(self, *headers: str) -> TableBuilder:
        self.headers.extend(headers)
        while len(self.alignments) < len(self.headers):
            self.alignments.append(Alignment.DEFAULT)
        return self

    def with_header_style(self, style: Callable[[str], str]) -> TableBuilder:
        """Render every header cell through `style`."""
        self.header_style = style
        return self

    def with_bold_headers(self) -> TableBuilder:
        return self.with_header_style(lambda text: f"**{text}**")

    def add_row(self, *cells: str) -> TableBuilder:
        self.rows.append(list(cells))
        return self

    def add_rows(self, rows: Iterable[Iterable[str]]) -> TableBuilder:
        for row in rows:
            self.add_row(*row)
        return self

    def set_alignment(self, column: int, alignment: Alignment) -> TableBuilder:
        """Align one zero-based column; unknown columns are ignored."""
        if 0 <= column < len(self.alignments):
            self.alignments[column] = alignment
        return self

    def set_alignments(self, *alignments: Alignment) -> TableBuilder:
        for column, alignment in enumerate(alignments):
            self.set_alignment(column, alignment)
        return self

    def build(self) -> str:
        """Render the table.

        Rows shorter than the header are padded with empty cells; cells beyond
        the header count are dropped.

        Returns:
            str: Table lines each ending with a newline, or an empty string
                when no headers were set.
        """
        if not self.headers:
            return ""

        width = len(self.headers)
        lines = [
            _format_row(self.header_style(header) for header in self.headers),
            _format_row(alignment.value for alignment in self.alignments),
        ]
        for row in self.rows:
            cells = row[:width] + [""] * (width - len(row))
            lines.append(_format_row(cells))

        return "".join(lines)


def _format_row(cells: Iterable[str]) -> str:
    return "| " + " | ".join(cells) + " |\n"
