"""Document sections: a heading followed by content lines."""

from __future__ import annotations

from dataclasses import dataclass, field

from .basic import heading
from .table import TableBuilder


@dataclass
class Section:
    """A Markdown section with a heading and ordered content.

    Attributes:
        level: Heading level, clamped to 1-6.
        title: Heading text.
        content: Formatted content items, rendered one per line.

    Examples:
        Section(2, "Steps").add_numbered_item(1, "Download").build()
        # "## Steps\\n\\n1. Download\\n\\n"
    """

    level: int
    title: str
    content: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.level = min(max(self.level, 1), 6)

    def add_bullet(self, text: str) -> Section:
        self.content.append(f"* {text}")
        return self

    def add_numbered_item(self, number: int, text: str) -> Section:
        self.content.append(f"{number}. {text}")
        return self

    def add_text(self, text: str) -> Section:
        self.content.append(text)
        return self

    def add_table(self, table: TableBuilder) -> Section:
        self.content.append(table.build())
        return self

    def build(self) -> str:
        lines = [heading(self.level, self.title), ""]
        lines.extend(self.content)
        return "\n".join(lines) + "\n\n"
