import pytest

from zulip_markdown.escaper import (
    _rewrite_spoiler,
    _to_tilde_fence,
    _try_close_code,
    _try_close_spoiler,
    _try_open_code,
    _try_open_spoiler,
)
from zulip_markdown.exceptions import UnbalancedFenceError
from zulip_markdown.models import ParserContext, ParserState


def test_try_open_spoiler_sets_context_fields():
    ctx = ParserContext()

    opened = _try_open_spoiler(ctx, "  ```spoiler Details", 7)

    assert opened is True
    assert ctx.state is ParserState.IN_SPOILER
    assert ctx.spoiler_lines == ["  ```spoiler Details"]
    assert ctx.spoiler_start == 7
    assert ctx.spoiler_nested is False


def test_try_open_spoiler_ignores_plain_fence():
    ctx = ParserContext()

    assert _try_open_spoiler(ctx, "```python", 0) is False
    assert ctx.state is ParserState.OUTSIDE


def test_try_open_spoiler_ignored_when_already_in_code():
    ctx = ParserContext(state=ParserState.IN_TOP_LEVEL_CODE)

    assert _try_open_spoiler(ctx, "```spoiler Title", 3) is False
    assert ctx.state is ParserState.IN_TOP_LEVEL_CODE


def test_try_open_code_switches_state():
    ctx = ParserContext()

    assert _try_open_code(ctx, "plain text", 0) is False
    assert _try_open_code(ctx, "```python", 2) is True
    assert ctx.state is ParserState.IN_TOP_LEVEL_CODE
    assert ctx.code_start == 2


def test_try_close_code_requires_bare_fence():
    ctx = ParserContext(state=ParserState.IN_TOP_LEVEL_CODE, code_start=4)

    assert _try_close_code(ctx, "```js") is False
    assert ctx.state is ParserState.IN_TOP_LEVEL_CODE

    assert _try_close_code(ctx, "   ```  ") is True
    assert ctx.state is ParserState.OUTSIDE
    assert ctx.code_start == 0


def test_try_close_spoiler_tracks_one_inner_block():
    ctx = ParserContext(state=ParserState.IN_SPOILER, spoiler_lines=["```spoiler S"])

    assert _try_close_spoiler(ctx, "```go") is False
    assert ctx.spoiler_nested is True

    assert _try_close_spoiler(ctx, "fmt.Println()") is False
    assert ctx.spoiler_nested is True

    assert _try_close_spoiler(ctx, "```") is False
    assert ctx.spoiler_nested is False

    assert _try_close_spoiler(ctx, "```") is True


def test_try_close_spoiler_ignored_outside_spoiler():
    ctx = ParserContext()

    assert _try_close_spoiler(ctx, "```") is False


def test_reset_clears_spoiler_buffer():
    ctx = ParserContext(
        state=ParserState.IN_SPOILER,
        spoiler_lines=["```spoiler S", "text"],
        spoiler_start=3,
        spoiler_nested=True,
    )

    ctx.reset()

    assert ctx == ParserContext()


def test_to_tilde_fence_keeps_info_string_and_indent():
    assert _to_tilde_fence("```go") == "~~~go"
    assert _to_tilde_fence("   ```") == "   ~~~"
    assert _to_tilde_fence("```c ```") == "~~~c ```"


def test_rewrite_spoiler_reports_document_line_numbers():
    lines = ["```spoiler S", "```", "```"]

    with pytest.raises(UnbalancedFenceError) as exc_info:
        _rewrite_spoiler(lines, first_line_number=10)

    assert exc_info.value.line_number == 12
    assert exc_info.value.reason == "code block inside spoiler is never closed"


def test_rewrite_spoiler_bare_fence_opens_inner_block():
    lines = ["```spoiler S", "```", "code", "```", "```"]

    assert _rewrite_spoiler(lines) == ["```spoiler S", "~~~", "code", "~~~", "```"]
