"""Status lines, arrows, and badges for bot replies."""

from __future__ import annotations

from .constants import (
    ARROW_RIGHT,
    BADGE_EMOJI,
    DEBUG_EMOJI,
    DEFAULT_BADGE_EMOJI,
    ERROR_EMOJI,
    INFO_EMOJI,
    SUCCESS_EMOJI,
    WARNING_EMOJI,
)


def _status_line(emoji: str, message: str) -> str:
    return f"{emoji} {message}\n"


def warn_line(message: str) -> str:
    return _status_line(WARNING_EMOJI, message)


def info_line(message: str) -> str:
    return _status_line(INFO_EMOJI, message)


def success_line(message: str) -> str:
    return _status_line(SUCCESS_EMOJI, message)


def error_line(message: str) -> str:
    return _status_line(ERROR_EMOJI, message)


def debug_line(message: str) -> str:
    return _status_line(DEBUG_EMOJI, message)


def warn_usage_line(command: str) -> str:
    """Format a usage hint as a warning line.

    Examples:
        warn_usage_line("/help")  # "⚠️ Usage: `/help`.\\n"
    """
    return warn_line(f"Usage: `{command}`.")


def point(text: str) -> str:
    """Prefix `text` with a right arrow.

    Examples:
        point("Hello")  # " → Hello"
    """
    return f" {ARROW_RIGHT} {text}"


def arrow_chain(arrow: str, *parts: str, newline: bool = True) -> str:
    """Join `parts` with `arrow`.

    A single part is prefixed with the arrow instead.

    Args:
        arrow: Arrow character, for example `ARROW_RIGHT`.
        parts: Items to chain.
        newline: Whether to end the chain with a newline.

    Returns:
        str: The formatted chain.

    Examples:
        arrow_chain(ARROW_RIGHT, "A", "B", "C")  # "A → B → C\\n"
        arrow_chain(ARROW_RIGHT, "A", newline=False)  # "→ A"
    """
    if len(parts) == 1:
        chain = f"{arrow} {parts[0]}"
    else:
        chain = f" {arrow} ".join(parts)
    return chain + "\n" if newline else chain


def badge(text: str, style: str = "") -> str:
    """Format a highlighted tag line.

    Args:
        text: Badge text, rendered as inline code.
        style: One of ``primary``, ``success``, ``warning``, ``danger``,
            ``info`` or ``rejected``; anything else uses a pin.

    Returns:
        str: The badge line ending with a newline.

    Examples:
        badge("deployed", "success")  # "✅ `deployed`\\n"
    """
    emoji = BADGE_EMOJI.get(style, DEFAULT_BADGE_EMOJI)
    return f"{emoji} `{text}`\n"


def usage(alias: str, *options: str) -> str:
    """Format a command usage warning with bracketed options.

    Examples:
        usage("/help", "topic")  # "⚠️ Usage: `/help [topic]`.\\n"
    """
    option_text = "".join(f" [{option}]" for option in options)
    return warn_usage_line(f"{alias}{option_text}")


def command_info(alias: str, description: str) -> str:
    return f"- **{alias}** - {description}\n"
