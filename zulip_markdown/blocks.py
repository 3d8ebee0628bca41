"""Spoiler and code block builders.

These builders run their content through the fence escaper but ignore its
success flag: when the content's fences do not balance, the unescaped text is
used as-is and may render incorrectly.
"""

from __future__ import annotations

from .constants import BACKTICK_FENCE, SPOILER_KEYWORD, TILDE_FENCE
from .escaper import escape_markdown, process_spoiler_block


def spoiler(heading: str, text: str) -> str:
    """Wrap `text` in a Zulip spoiler block.

    Code blocks inside `text`, bare ```` ``` ```` ones included, are rewritten
    to tilde fences so they do not close the spoiler early.

    Args:
        heading: Title shown on the collapsed spoiler.
        text: Hidden content.

    Returns:
        str: The spoiler block without a trailing newline.

    Examples:
        spoiler("Code", "```go\\nfmt.Println()\\n```")
        # "```spoiler Code\\n~~~go\\nfmt.Println()\\n~~~\\n```"
    """
    block = f"{BACKTICK_FENCE}{SPOILER_KEYWORD} {heading}\n{text}\n{BACKTICK_FENCE}"
    escaped, _ = process_spoiler_block(block)
    return escaped


def spoiler_escaped(heading: str, text: str, fence: str) -> str:
    """Wrap `text` in a spoiler block delimited by `fence`.

    Examples:
        spoiler_escaped("Warning", "Be careful", "~~~")
        # "~~~spoiler Warning\\nBe careful\\n~~~"
    """
    transformed, _ = escape_markdown(text)
    return f"{fence}{SPOILER_KEYWORD} {heading}\n{transformed}\n{fence}"


def spoiler_tilde(heading: str, text: str) -> str:
    return spoiler_escaped(heading, text, TILDE_FENCE)


def spoiler_fence(heading: str, text: str) -> str:
    return spoiler_escaped(heading, text, BACKTICK_FENCE)


def code_block(language: str, text: str) -> str:
    """Wrap `text` in a fenced code block.

    Args:
        language: Language tag for syntax highlighting; may be empty.
        text: Code content.

    Returns:
        str: The code block without a trailing newline.

    Examples:
        code_block("python", "print('hi')")  # "```python\\nprint('hi')\\n```"
    """
    transformed, _ = escape_markdown(text)
    return f"{BACKTICK_FENCE}{language}\n{transformed}\n{BACKTICK_FENCE}"


def markdown_block(text: str) -> str:
    """Show raw Markdown source in a code block."""
    return code_block("markdown", text)
