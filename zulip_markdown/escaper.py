"""Escaping of code fences nested inside Zulip spoiler blocks.

Zulip closes a ```` ```spoiler ```` block at the first bare ```` ``` ````
line, so a code block written inside a spoiler with backtick fences ends the
spoiler early. The helpers here rewrite such inner fences to ``~~~`` and leave
everything else byte-for-byte unchanged.
"""

from __future__ import annotations

from .constants import BACKTICK_FENCE, SPOILER_OPENER, TILDE_FENCE
from .exceptions import UnbalancedFenceError
from .models import ParserContext, ParserState


def _is_fence(stripped_line: str) -> bool:
    return stripped_line.startswith(BACKTICK_FENCE)


def _is_bare_fence(stripped_line: str) -> bool:
    return stripped_line == BACKTICK_FENCE


def _is_spoiler_opener(stripped_line: str) -> bool:
    return stripped_line.startswith(SPOILER_OPENER)


def _to_tilde_fence(line: str) -> str:
    """Swap the leading backtick fence of `line` for a tilde fence.

    Indentation and any info string after the fence are kept.

    Examples:
        _to_tilde_fence("```go")  # "~~~go"
        _to_tilde_fence("  ```")  # "  ~~~"
    """
    return line.replace(BACKTICK_FENCE, TILDE_FENCE, 1)


def _try_open_spoiler(ctx: ParserContext, line: str, line_number: int) -> bool:
    """Detect the start of a spoiler block.

    Args:
        ctx: Scanner context to update when a spoiler opens.
        line: Current line being scanned.
        line_number: Zero-based index of `line`.

    Returns:
        bool: True when the line opens a spoiler and the context is updated.

    Examples:
        _try_open_spoiler(ParserContext(), "```spoiler Details", 0)  # True
    """
    if ctx.state is not ParserState.OUTSIDE:
        return False

    if not _is_spoiler_opener(line.strip()):
        return False

    ctx.state = ParserState.IN_SPOILER
    ctx.spoiler_lines = [line]
    ctx.spoiler_start = line_number
    ctx.spoiler_nested = False
    return True


def _try_open_code(ctx: ParserContext, line: str, line_number: int) -> bool:
    """Detect the start of a top-level code block.

    Spoiler openers are not handled here; call `_try_open_spoiler` first.

    Args:
        ctx: Scanner context to update when a code block opens.
        line: Current line being scanned.
        line_number: Zero-based index of `line`.

    Returns:
        bool: True when the line opens a code block.

    Examples:
        _try_open_code(ParserContext(), "```python", 4)  # True
    """
    if ctx.state is not ParserState.OUTSIDE:
        return False

    if not _is_fence(line.strip()):
        return False

    ctx.state = ParserState.IN_TOP_LEVEL_CODE
    ctx.code_start = line_number
    return True


def _try_close_code(ctx: ParserContext, line: str) -> bool:
    """Attempt to close the active top-level code block.

    Args:
        ctx: Scanner context describing the open block.
        line: Current line being scanned.

    Returns:
        bool: True when the line is a bare fence and the block is closed.
    """
    if ctx.state is not ParserState.IN_TOP_LEVEL_CODE:
        return False

    if not _is_bare_fence(line.strip()):
        return False

    ctx.reset()
    return True


def _try_close_spoiler(ctx: ParserContext, line: str) -> bool:
    """Track inner fences of the open spoiler and detect its closing line.

    A fence with an info string (```` ```go ````) opens an inner code block;
    the next bare fence closes that inner block rather than the spoiler.

    Args:
        ctx: Scanner context holding the open spoiler.
        line: Current line being scanned; already appended to the buffer.

    Returns:
        bool: True when `line` closes the spoiler itself.

    Examples:
        ctx = ParserContext(state=ParserState.IN_SPOILER)
        _try_close_spoiler(ctx, "```go")  # False, inner block opened
        _try_close_spoiler(ctx, "```")  # False, inner block closed
        _try_close_spoiler(ctx, "```")  # True
    """
    if ctx.state is not ParserState.IN_SPOILER:
        return False

    stripped_line = line.strip()
    if not _is_fence(stripped_line):
        return False

    if not _is_bare_fence(stripped_line):
        ctx.spoiler_nested = True
        return False

    if ctx.spoiler_nested:
        ctx.spoiler_nested = False
        return False

    return True


def _rewrite_spoiler(lines: list[str], first_line_number: int = 0) -> list[str]:
    """Rewrite the inner fences of one complete spoiler block.

    Any fence line opens an inner code block, a bare one included, and the
    next bare fence closes it. Only one level of nesting is supported: a
    single inner code block can be open at a time.

    Args:
        lines: Spoiler lines, from the opener to the closing fence inclusive.
        first_line_number: Zero-based document index of `lines[0]`, used for
            error reporting.

    Returns:
        list[str]: The block's lines with inner fences rewritten to tildes.

    Raises:
        UnbalancedFenceError: If the block is not framed by a spoiler opener
            and a bare closing fence, or its inner fences do not balance.
    """
    if len(lines) < 2 or not _is_spoiler_opener(lines[0].strip()):
        raise UnbalancedFenceError(first_line_number + 1, "block does not start with a spoiler")
    if not _is_bare_fence(lines[-1].strip()):
        raise UnbalancedFenceError(
            first_line_number + len(lines), "spoiler does not end with a closing fence"
        )

    rewritten = [lines[0]]
    nested = False
    nested_start = 0

    for offset, line in enumerate(lines[1:-1], start=1):
        stripped_line = line.strip()
        line_number = first_line_number + offset + 1

        if not _is_fence(stripped_line):
            rewritten.append(line)
            continue

        if nested:
            if not _is_bare_fence(stripped_line):
                raise UnbalancedFenceError(
                    line_number, "code blocks nested more than one level deep"
                )
            nested = False
            rewritten.append(_to_tilde_fence(line))
            continue

        nested = True
        nested_start = line_number
        rewritten.append(_to_tilde_fence(line))

    if nested:
        raise UnbalancedFenceError(nested_start, "code block inside spoiler is never closed")

    rewritten.append(lines[-1])
    return rewritten


def process_spoiler_block(block: str) -> tuple[str, bool]:
    """Escape the inner fences of a single spoiler block.

    Args:
        block: Spoiler block including its ```` ```spoiler ```` opener and
            closing fence, lines separated by ``\\n``.

    Returns:
        tuple[str, bool]: The rewritten block and True, or the untouched block
            and False when the block is malformed.

    Examples:
        process_spoiler_block("```spoiler Hi\\n```py\\nx = 1\\n```\\n```")
        # ("```spoiler Hi\\n~~~py\\nx = 1\\n~~~\\n```", True)
    """
    try:
        rewritten = _rewrite_spoiler(block.split("\n"))
    except UnbalancedFenceError:
        return block, False
    return "\n".join(rewritten), True


def escape_markdown_strict(markdown: str) -> str:
    """Escape fences nested inside spoilers, raising on unbalanced input.

    Top-level code blocks are passed through untouched. The newline structure
    of the input is kept exactly, including the absence of a final newline.

    Args:
        markdown: The Markdown document.

    Returns:
        str: The document with inner spoiler fences rewritten to ``~~~``.

    Raises:
        UnbalancedFenceError: If a spoiler, a top-level code block, or a code
            block inside a spoiler is left open, or spoiler fences are
            otherwise inconsistent.

    Examples:
        escape_markdown_strict("```spoiler Code\\n```go\\nx()\\n```\\n```")
        # "```spoiler Code\\n~~~go\\nx()\\n~~~\\n```"
    """
    output: list[str] = []
    ctx = ParserContext()

    for line_number, line in enumerate(markdown.split("\n")):
        if ctx.state is ParserState.IN_SPOILER:
            ctx.spoiler_lines.append(line)
            if _try_close_spoiler(ctx, line):
                output.extend(_rewrite_spoiler(ctx.spoiler_lines, ctx.spoiler_start))
                ctx.reset()
            continue

        if ctx.state is ParserState.IN_TOP_LEVEL_CODE:
            output.append(line)
            _try_close_code(ctx, line)
            continue

        if _try_open_spoiler(ctx, line, line_number):
            continue

        output.append(line)
        _try_open_code(ctx, line, line_number)

    if ctx.state is ParserState.IN_SPOILER:
        reason = "spoiler block is never closed"
        if ctx.spoiler_nested:
            reason = "code block inside spoiler is never closed"
        raise UnbalancedFenceError(ctx.spoiler_start + 1, reason)
    if ctx.state is ParserState.IN_TOP_LEVEL_CODE:
        raise UnbalancedFenceError(ctx.code_start + 1, "code block is never closed")

    return "\n".join(output)


def escape_markdown(markdown: str) -> tuple[str, bool]:
    """Escape fences nested inside spoilers without raising.

    Args:
        markdown: The Markdown document.

    Returns:
        tuple[str, bool]: The escaped document and True, or the original
            document unchanged and False when its fences do not balance.

    Examples:
        escape_markdown("```spoiler Title\\nsome text")  # ("```spoiler Title\\nsome text", False)
    """
    try:
        return escape_markdown_strict(markdown), True
    except UnbalancedFenceError:
        return markdown, False
