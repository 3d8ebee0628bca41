"""Constants used across the zulip-markdown package."""

from __future__ import annotations

from .config import ZlmdConfig

DEFAULT_CONFIG = ZlmdConfig()

# Fence markers
BACKTICK_FENCE = "```"
TILDE_FENCE = "~~~"
SPOILER_KEYWORD = "spoiler"
SPOILER_OPENER = f"{BACKTICK_FENCE}{SPOILER_KEYWORD}"

# Status emoji
WARNING_EMOJI = "⚠️"
INFO_EMOJI = "ℹ️"
SUCCESS_EMOJI = "✅"
ERROR_EMOJI = "❌"
DEBUG_EMOJI = "🔍"

# Arrows
ARROW_LEFT = "←"
ARROW_RIGHT = "→"
ARROW_LEFT_RIGHT = "↔"
ARROW_RIGHT_DOTTED = "⤑"
ARROW_LEFT_DOTTED = "⬸"

BADGE_EMOJI = {
    "primary": "🔵",
    "success": SUCCESS_EMOJI,
    "warning": WARNING_EMOJI,
    "danger": ERROR_EMOJI,
    "info": INFO_EMOJI,
    "rejected": "✴️",
}
DEFAULT_BADGE_EMOJI = "🧷"

# Limits
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size
