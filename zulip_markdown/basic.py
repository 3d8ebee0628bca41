"""Inline and line-level Markdown formatters."""

from __future__ import annotations


def bold(text: str) -> str:
    return f"**{text}**"


def italic(text: str) -> str:
    return f"*{text}*"


def code(text: str) -> str:
    """Wrap `text` in single backticks as inline code."""
    return f"`{text}`"


def link(text: str, url: str) -> str:
    return f"[{text}]({url})"


def image(alt_text: str, url: str) -> str:
    return f"![{alt_text}]({url})"


def horizontal_rule() -> str:
    return "---"


def heading(level: int, text: str) -> str:
    """Format a Markdown heading.

    Args:
        level: Heading level; values outside 1-6 fall back to 1.
        text: Heading text.

    Returns:
        str: The heading line without a trailing newline.

    Examples:
        heading(2, "Usage")  # "## Usage"
        heading(9, "Title")  # "# Title"
    """
    if level < 1 or level > 6:
        level = 1
    return f"{'#' * level} {text}"


def h1(text: str) -> str:
    return heading(1, text)


def h2(text: str) -> str:
    return heading(2, text)


def h3(text: str) -> str:
    return heading(3, text)


def h4(text: str) -> str:
    return heading(4, text)


def h5(text: str) -> str:
    return heading(5, text)


def h6(text: str) -> str:
    return heading(6, text)


def quote_block(text: str) -> str:
    """Prefix every line of `text` with ``"> "``.

    Examples:
        quote_block("a\\nb")  # "> a\\n> b\\n"
    """
    return "\n".join(f"> {line}" for line in text.split("\n")) + "\n"


def quote_block_nl(text: str) -> str:
    """Like `quote_block`, followed by a blank line."""
    return quote_block(text) + "\n"


def paragraph(text: str) -> str:
    return text + "\n\n"


def br(text: str) -> str:
    return text + "\n"


def list_item(text: str, level: int = 0) -> str:
    """Format a bullet list item indented by two spaces per level.

    Examples:
        list_item("child", 1)  # "  - child"
    """
    return f"{'  ' * level}- {text}"


def checklist_item(text: str, checked: bool = False, level: int = 0) -> str:
    """Format a task list item.

    Examples:
        checklist_item("Ship it", checked=True)  # "- [x] Ship it"
    """
    checkmark = "[x]" if checked else "[ ]"
    return f"{'  ' * level}- {checkmark} {text}"


def key_value(key: str, value: str) -> str:
    return f"{bold(key)}: {value}"
