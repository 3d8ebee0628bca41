from __future__ import annotations

import pytest

from zulip_markdown.constants import ARROW_LEFT, ARROW_RIGHT_DOTTED
from zulip_markdown.document import Document
from zulip_markdown.section import Section
from zulip_markdown.shortcuts import (
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
    warn_usage_line,
)
from zulip_markdown.table import TableBuilder


def test_status_lines():
    assert warn_line("careful") == "⚠️ careful\n"
    assert info_line("note") == "ℹ️ note\n"
    assert success_line("done") == "✅ done\n"
    assert error_line("failed") == "❌ failed\n"
    assert debug_line("value=1") == "🔍 value=1\n"
    assert warn_usage_line("/help") == "⚠️ Usage: `/help`.\n"


def test_point_and_arrows():
    assert point("Hello, world!") == " → Hello, world!"
    assert arrow_chain(ARROW_LEFT, "A", "B", "C") == "A ← B ← C\n"
    assert arrow_chain(ARROW_RIGHT_DOTTED, "A", newline=False) == "⤑ A"


@pytest.mark.parametrize(
    ("style", "emoji"),
    [
        ("primary", "🔵"),
        ("success", "✅"),
        ("warning", "⚠️"),
        ("danger", "❌"),
        ("info", "ℹ️"),
        ("rejected", "✴️"),
        ("unknown", "🧷"),
    ],
)
def test_badge_styles(style, emoji):
    assert badge("v1.2", style) == f"{emoji} `v1.2`\n"


def test_usage_brackets_options():
    assert usage("/deploy", "env", "tag") == "⚠️ Usage: `/deploy [env] [tag]`.\n"
    assert usage("/status") == "⚠️ Usage: `/status`.\n"


def test_command_info():
    assert command_info("help", "Show help") == "- **help** - Show help\n"


def test_document_keeps_fragment_order():
    message = (
        Document()
        .success("Deployed")
        .add_section(Section(2, "Changes").add_bullet("Fix login"))
        .add_table(TableBuilder().with_headers("Env").add_row("prod"))
        .arrows("build", "test", "deploy")
        .point("done")
        .build()
    )

    assert message == (
        "✅ Deployed\n"
        "## Changes\n\n* Fix login\n\n"
        "| Env |\n| --- |\n| prod |\n"
        "build → test → deploy\n"
        " → done\n"
    )


def test_document_blocks_end_with_newline():
    message = (
        Document()
        .add_spoiler("Logs", "```text\ntrace\n```")
        .add_code_block("py", "x = 1")
        .build()
    )

    assert message == "```spoiler Logs\n~~~text\ntrace\n~~~\n```\n```py\nx = 1\n```\n"


def test_document_status_shortcuts():
    message = (
        Document()
        .warn("w")
        .info("i")
        .error("e")
        .debug("d")
        .badge("b", "primary")
        .usage("/cmd", "arg")
        .command_info("cmd", "does things")
        .build()
    )

    assert message.splitlines() == [
        "⚠️ w",
        "ℹ️ i",
        "❌ e",
        "🔍 d",
        "🔵 `b`",
        "⚠️ Usage: `/cmd [arg]`.",
        "- **cmd** - does things",
    ]


def test_check_error_records_and_returns_error():
    document = Document()
    error = RuntimeError("connection refused")

    assert document.check_error(error) is error
    assert document.check_error(None) is None
    assert document.build() == "❌ connection refused\n"


def test_check_warning_records_and_returns_error():
    document = Document()
    error = ValueError("slow response")

    assert document.check_warning(error) is error
    assert document.build() == "⚠️ slow response\n"
