from md_html.config import ParserOptions
from md_html.models import BlockState, ScannerContext
from md_html.parser import (
    _append_plain_line,
    _close_list,
    _finalize,
    _try_block_quote,
    _try_code_block_line,
    _try_inline_code,
    _try_list_item,
    _try_open_code_block,
)

OPTIONS = ParserOptions(format_html=False)


def test_try_open_code_block_sets_context():
    ctx = ScannerContext()
    output: list[str] = []

    assert _try_open_code_block(ctx, "```python", output, OPTIONS) is True
    assert ctx.state is BlockState.IN_CODE_BLOCK
    assert output == ["<pre><code>"]


def test_try_open_code_block_respects_toggle():
    ctx = ScannerContext()
    output: list[str] = []

    assert _try_open_code_block(ctx, "```", output, ParserOptions(parse_code_block=False)) is False
    assert ctx.in_code_block is False
    assert output == []


def test_try_code_block_line_ignored_outside_code():
    ctx = ScannerContext()
    output: list[str] = []

    assert _try_code_block_line(ctx, "text", output) is False
    assert output == []


def test_try_code_block_line_escapes_and_closes():
    ctx = ScannerContext(in_code_block=True)
    output: list[str] = []

    assert _try_code_block_line(ctx, "<b>", output) is True
    assert _try_code_block_line(ctx, "```", output) is True
    assert output == ["&lt;b&gt;\n", "</code></pre>"]
    assert ctx.state is BlockState.NORMAL


def test_try_list_item_tracks_depth():
    ctx = ScannerContext()
    output: list[str] = []

    assert _try_list_item(ctx, "- a", output, OPTIONS) is True
    assert ctx.in_list is True
    assert ctx.list_depth == 0

    assert _try_list_item(ctx, "  - b", output, OPTIONS) is True
    assert ctx.list_depth == 1

    assert _try_list_item(ctx, "- c", output, OPTIONS) is True
    assert ctx.list_depth == 0
    assert output == ["<ul>", "<li>a</li>", "<ul><li>b</li>", "</li></ul>", "<li>c"]


def test_try_list_item_rejects_non_items():
    ctx = ScannerContext()

    assert _try_list_item(ctx, "-a", [], OPTIONS) is False
    assert _try_list_item(ctx, "**bold** text", [], OPTIONS) is False
    assert _try_list_item(ctx, "1) one", [], OPTIONS) is False
    assert ctx.state is BlockState.NORMAL


def test_close_list_closes_outer_wrapper():
    ctx = ScannerContext(in_list=True, list_depth=2)
    output: list[str] = []

    _close_list(ctx, output)

    assert output == ["</ul></ul></ul>"]
    assert ctx.in_list is False
    assert ctx.list_depth == 0


def test_close_list_noop_without_list():
    output: list[str] = []

    _close_list(ScannerContext(), output)

    assert output == []


def test_try_inline_code_opens_span():
    ctx = ScannerContext()
    output: list[str] = []

    assert _try_inline_code(ctx, "`x & y", output, OPTIONS) is True
    assert ctx.in_inline_code is True
    assert output == ["<code>x &amp; y"]


def test_try_inline_code_ignores_fences():
    ctx = ScannerContext()

    assert _try_inline_code(ctx, "```", [], OPTIONS) is False
    assert ctx.in_inline_code is False


def test_plain_line_closes_inline_code():
    ctx = ScannerContext(in_inline_code=True)
    output: list[str] = []

    _append_plain_line(ctx, "<tail>", output, OPTIONS)

    assert output == ["&lt;tail&gt;</code>"]
    assert ctx.in_inline_code is False


def test_try_block_quote_opens_once():
    ctx = ScannerContext()
    output: list[str] = []

    assert _try_block_quote(ctx, "> one", output, OPTIONS) is True
    assert _try_block_quote(ctx, ">two", output, OPTIONS) is True
    assert output == ["<blockquote>", "one ", "two "]
    assert ctx.state is BlockState.IN_BLOCK_QUOTE


def test_finalize_closes_constructs_in_order():
    ctx = ScannerContext(
        in_list=True, list_depth=1, in_code_block=True, in_block_quote=True, in_inline_code=True
    )
    output: list[str] = []

    _finalize(ctx, output)

    assert output == ["</ul></ul>", "</code></pre>", "</blockquote>"]
    assert ctx.state is BlockState.NORMAL
    assert ctx.in_inline_code is True


def test_blank_line_keeps_inline_code_pending():
    ctx = ScannerContext(in_inline_code=True)
    output: list[str] = []

    _append_plain_line(ctx, "   ", output, OPTIONS)

    assert output == []
    assert ctx.in_inline_code is True


def test_plain_line_in_block_quote_keeps_quote_open():
    ctx = ScannerContext(in_list=True, in_block_quote=True)
    output: list[str] = []

    _append_plain_line(ctx, "", output, OPTIONS)

    assert output == ["</ul>", " "]
    assert ctx.state is BlockState.IN_BLOCK_QUOTE
