"""Ordered accumulation of formatted fragments into one message."""

from __future__ import annotations

from .blocks import code_block, spoiler
from .constants import ARROW_RIGHT
from .section import Section
from .shortcuts import (
    arrow_chain,
    badge,
    command_info,
    debug_line,
    error_line,
    info_line,
    point,
    success_line,
    usage,
    warn_line,
)
from .table import TableBuilder


class Document:
    """Build a Zulip message piece by piece.

    Fragments are concatenated in the order they were added; block fragments
    (spoilers and code blocks) get a trailing newline so following content
    starts on its own line. Every method except `build` returns the document.

    Examples:
        message = (
            Document()
            .success("Deployed")
            .add_section(Section(2, "Changes").add_bullet("Fix login"))
            .build()
        )
    """

    def __init__(self):
        self.fragments: list[str] = []

    def add(self, fragment: str) -> Document:
        self.fragments.append(fragment)
        return self

    def add_section(self, section: Section) -> Document:
        return self.add(section.build())

    def add_table(self, table: TableBuilder) -> Document:
        return self.add(table.build())

    def add_spoiler(self, heading: str, text: str) -> Document:
        return self.add(spoiler(heading, text) + "\n")

    def add_code_block(self, language: str, text: str) -> Document:
        return self.add(code_block(language, text) + "\n")

    def warn(self, message: str) -> Document:
        return self.add(warn_line(message))

    def info(self, message: str) -> Document:
        return self.add(info_line(message))

    def success(self, message: str) -> Document:
        return self.add(success_line(message))

    def error(self, message: str) -> Document:
        return self.add(error_line(message))

    def debug(self, message: str) -> Document:
        return self.add(debug_line(message))

    def badge(self, text: str, style: str = "") -> Document:
        return self.add(badge(text, style))

    def usage(self, alias: str, *options: str) -> Document:
        return self.add(usage(alias, *options))

    def command_info(self, alias: str, description: str) -> Document:
        return self.add(command_info(alias, description))

    def point(self, text: str) -> Document:
        return self.add(point(text) + "\n")

    def arrows(self, *parts: str, arrow: str = ARROW_RIGHT) -> Document:
        return self.add(arrow_chain(arrow, *parts))

    def check_error(self, error: BaseException | None) -> BaseException | None:
        """Record `error` as an error line when it is set.

        Args:
            error: Exception to report, or None.

        Returns:
            BaseException | None: `error`, unchanged, so callers can re-raise.

        Examples:
            if (failure := message.check_error(result.error)) is not None:
                return message.build()
        """
        if error is not None:
            self.error(str(error))
        return error

    def check_warning(self, error: BaseException | None) -> BaseException | None:
        """Record `error` as a warning line when it is set."""
        if error is not None:
            self.warn(str(error))
        return error

    def build(self) -> str:
        return "".join(self.fragments)
