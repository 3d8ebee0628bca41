"""Zulip-specific Markdown syntax."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def format_time(moment: datetime) -> str:
    """Format a datetime as a Zulip time tag.

    Zulip renders the tag in each viewer's timezone. Naive datetimes are
    treated as UTC and fractional seconds are dropped.

    Args:
        moment: The point in time to render.

    Returns:
        str: A ``<time:...>`` tag holding an RFC 3339 timestamp.

    Examples:
        format_time(datetime(2023, 5, 15, 14, 30, tzinfo=timezone.utc))
        # "<time:2023-05-15T14:30:00Z>"
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    timestamp = moment.replace(microsecond=0).isoformat()
    if moment.utcoffset() == timedelta(0):
        timestamp = timestamp.removesuffix("+00:00") + "Z"
    return f"<time:{timestamp}>"


def mention(name: str) -> str:
    return f"@**{name}**"


def silent_mention(name: str) -> str:
    """Mention a user without notifying them."""
    return f"@_**{name}**"


def group_mention(name: str) -> str:
    return f"@*{name}*"


def stream_link(stream: str, topic: str | None = None) -> str:
    """Link to a stream, or to a topic within it.

    Examples:
        stream_link("general")  # "#**general**"
        stream_link("general", "releases")  # "#**general>releases**"
    """
    if topic is None:
        return f"#**{stream}**"
    return f"#**{stream}>{topic}**"


def emoji(name: str) -> str:
    return f":{name}:"
