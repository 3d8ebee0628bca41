"""
zulip-markdown: Zulip-flavored Markdown formatting helpers.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    zlmd escape reply.md
    zlmd spoiler "Details" trace.txt

Library Usage:
    from zulip_markdown import escape_markdown, spoiler, TableBuilder

    text, ok = escape_markdown(draft)
    table = TableBuilder().with_headers("Name", "Age").add_row("Alice", "30")
    message = spoiler("Users", table.build())
"""

__version__ = "0.1.0"

from .basic import (
    bold,
    br,
    checklist_item,
    code,
    h1,
    h2,
    h3,
    h4,
    h5,
    h6,
    heading,
    horizontal_rule,
    image,
    italic,
    key_value,
    link,
    list_item,
    paragraph,
    quote_block,
    quote_block_nl,
)
from .blocks import (
    code_block,
    markdown_block,
    spoiler,
    spoiler_escaped,
    spoiler_fence,
    spoiler_tilde,
)
from .document import Document
from .escaper import escape_markdown, escape_markdown_strict, process_spoiler_block
from .exceptions import FenceError, UnbalancedFenceError
from .section import Section
from .table import Alignment, TableBuilder
from .zulip import emoji, format_time, group_mention, mention, silent_mention, stream_link

__all__ = [
    # Core functionality
    "escape_markdown",
    "escape_markdown_strict",
    "process_spoiler_block",
    # Blocks
    "spoiler",
    "spoiler_escaped",
    "spoiler_tilde",
    "spoiler_fence",
    "code_block",
    "markdown_block",
    # Builders
    "Alignment",
    "Document",
    "Section",
    "TableBuilder",
    # Formatters
    "bold",
    "italic",
    "code",
    "link",
    "image",
    "horizontal_rule",
    "heading",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "quote_block",
    "quote_block_nl",
    "paragraph",
    "br",
    "list_item",
    "checklist_item",
    "key_value",
    # Zulip syntax
    "format_time",
    "mention",
    "silent_mention",
    "group_mention",
    "stream_link",
    "emoji",
    # Exceptions
    "FenceError",
    "UnbalancedFenceError",
    # Version
    "__version__",
]
