"""Data models for zulip-markdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class ParserState(Enum):
    """Scanner states used while escaping Markdown content.

    Attributes:
        OUTSIDE: Not inside any fence.
        IN_TOP_LEVEL_CODE: Inside a plain code fence opened outside any spoiler.
        IN_SPOILER: Inside a spoiler block, collecting its raw lines.
    """

    OUTSIDE = auto()
    IN_TOP_LEVEL_CODE = auto()
    IN_SPOILER = auto()


@dataclass
class ParserContext:
    """Encapsulate scanner state while walking Markdown text.

    Only one state is active at a time; the spoiler fields are meaningful
    only while `state` is `ParserState.IN_SPOILER`.

    Attributes:
        state: Current scanner state.
        spoiler_lines: Raw lines of the open spoiler, opener included.
        spoiler_start: Zero-based index of the open spoiler's opener line.
        spoiler_nested: Whether an inner code fence is open in the spoiler.
        code_start: Zero-based index of the open top-level fence.
    """

    state: ParserState = ParserState.OUTSIDE
    spoiler_lines: list[str] = field(default_factory=list)
    spoiler_start: int = 0
    spoiler_nested: bool = False
    code_start: int = 0

    def reset(self) -> None:
        """Return to `OUTSIDE` and drop any buffered spoiler content."""
        self.state = ParserState.OUTSIDE
        self.spoiler_lines = []
        self.spoiler_start = 0
        self.spoiler_nested = False
        self.code_start = 0
