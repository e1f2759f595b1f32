"""Line-oriented Markdown to HTML conversion."""

from __future__ import annotations

import logging

from .config import ParserOptions, validate_config
from .constants import (
    BLOCK_QUOTE_MARKER,
    CODE_FENCE,
    HEADING_PATTERN,
    HORIZONTAL_RULE_MARKERS,
    IMAGE_PATTERN,
    INLINE_CODE_MARKER,
    LIST_INDENT_WIDTH,
    LIST_ITEM_PATTERN,
    MAX_HEADING_LEVEL,
)
from .formatter import format_html
from .inline import escape_html, format_inline
from .models import BlockState, ScannerContext

logger = logging.getLogger("md_html.parser")


def split_lines(content: str) -> list[str]:
    """Split a document into lines after trimming surrounding whitespace.

    Args:
        content: Raw Markdown text.

    Returns:
        list[str]: Lines without their line endings. A trailing carriage return
            is dropped so CRLF documents scan like LF documents.

    Examples:
        split_lines("\\n# Title\\r\\nbody\\n")  # ["# Title", "body"]
    """
    return [line.removesuffix("\r") for line in content.strip().split("\n")]


def _close_list(ctx: ScannerContext, output: list[str]) -> None:
    """Close every open ``<ul>``, including the outermost wrapper."""
    if not ctx.in_list:
        return

    output.append("</ul>" * (ctx.list_depth + 1))
    ctx.in_list = False
    ctx.list_depth = 0


def _try_code_block_line(ctx: ScannerContext, line: str, output: list[str]) -> bool:
    """Consume a line while a fenced code block is open.

    Args:
        ctx: Scanner context.
        line: Current line.
        output: Accumulated HTML fragments.

    Returns:
        bool: True when the line belonged to the code block (content or the
            closing fence); False when no code block is open.

    Examples:
        ctx = ScannerContext(in_code_block=True)
        _try_code_block_line(ctx, "x < y", [])  # True
    """
    if ctx.state is not BlockState.IN_CODE_BLOCK:
        return False

    if line.startswith(CODE_FENCE):
        output.append("</code></pre>")
        ctx.in_code_block = False
    else:
        output.append(escape_html(line) + "\n")
    return True


def _try_heading(line: str, output: list[str], options: ParserOptions) -> bool:
    """Emit a heading for lines such as ``## Title``.

    The level is the number of leading ``#`` characters, capped at six.
    Headings leave any open list or blockquote untouched.
    """
    if not options.parse_heading:
        return False

    heading_match = HEADING_PATTERN.match(line)
    if not heading_match:
        return False

    level = min(len(heading_match.group(1)), MAX_HEADING_LEVEL)
    text = format_inline(heading_match.group(2), options)
    output.append(f"<h{level}>{text}</h{level}>")
    return True


def _try_list_item(
    ctx: ScannerContext, line: str, output: list[str], options: ParserOptions
) -> bool:
    """Emit a list item, opening or closing nested lists as needed.

    Indentation is measured in steps of two leading spaces and
    compared with the current nesting depth. A deeper item opens exactly one
    nested list however far it is indented. A shallower item closes the
    extra levels and leaves its own ``<li>`` open; the tag is closed by
    whatever closes the list later. Ordered and unordered markers both render
    as ``<ul>``.

    Args:
        ctx: Scanner context to update.
        line: Current line.
        output: Accumulated HTML fragments.
        options: Active toggles.

    Returns:
        bool: True when the line is a list item.

    Examples:
        _try_list_item(ScannerContext(), "- item", [], ParserOptions())  # True
    """
    if not options.parse_list:
        return False

    item_match = LIST_ITEM_PATTERN.match(line)
    if not item_match:
        return False

    indent_level = len(item_match.group("indent")) // LIST_INDENT_WIDTH
    item = format_inline(item_match.group("text"), options)

    if indent_level == ctx.list_depth:
        if not ctx.in_list:
            output.append("<ul>")
            ctx.in_list = True
        output.append(f"<li>{item}</li>")
    elif indent_level > ctx.list_depth:
        if not ctx.in_list:
            output.append("<ul>")
            ctx.in_list = True
        output.append(f"<ul><li>{item}</li>")
        ctx.list_depth += 1
    else:
        output.append("</li></ul>" * (ctx.list_depth - indent_level))
        output.append(f"<li>{item}")
        ctx.list_depth = indent_level
    return True


def _try_open_code_block(
    ctx: ScannerContext, line: str, output: list[str], options: ParserOptions
) -> bool:
    if not options.parse_code_block or not line.startswith(CODE_FENCE):
        return False

    output.append("<pre><code>")
    ctx.in_code_block = True
    return True


def _try_inline_code(
    ctx: ScannerContext, line: str, output: list[str], options: ParserOptions
) -> bool:
    """Open a ``<code>`` span for a line starting with a single backtick.

    The span has no closing marker. It stays open until the next non-blank
    plain line, which is appended escaped and followed by ``</code>``.
    Another backtick line closes the pending span before opening its own, so
    every backtick line's remainder is rendered as code.

    Args:
        ctx: Scanner context to update.
        line: Current line.
        output: Accumulated HTML fragments.
        options: Active toggles.

    Returns:
        bool: True when the line opened a span.

    Examples:
        _try_inline_code(ScannerContext(), "`print(x)", [], ParserOptions())  # True
    """
    if not options.parse_inline_code:
        return False

    if not line.startswith(INLINE_CODE_MARKER) or line.startswith(CODE_FENCE):
        return False

    if ctx.in_inline_code:
        output.append("</code>")
    output.append(f"<code>{escape_html(line[1:])}")
    ctx.in_inline_code = True
    return True


def _try_horizontal_rule(line: str, output: list[str], options: ParserOptions) -> bool:
    if not options.parse_horizontal_rule or not line.startswith(HORIZONTAL_RULE_MARKERS):
        return False

    output.append("<hr>")
    return True


def _try_block_quote(
    ctx: ScannerContext, line: str, output: list[str], options: ParserOptions
) -> bool:
    """Append a ``>`` line to the open blockquote, opening it if needed.

    Consecutive quote lines join into one space-separated run of text.
    """
    if not options.parse_block_quote or not line.startswith(BLOCK_QUOTE_MARKER):
        return False

    if not ctx.in_block_quote:
        output.append("<blockquote>")
        ctx.in_block_quote = True

    text = line[len(BLOCK_QUOTE_MARKER) :].strip()
    output.append(format_inline(text, options) + " ")
    return True


def _try_image(line: str, output: list[str], options: ParserOptions) -> bool:
    if not options.parse_image:
        return False

    image_match = IMAGE_PATTERN.match(line)
    if not image_match:
        return False

    src = escape_html(image_match.group("src"))
    alt = escape_html(image_match.group("alt"))
    output.append(f'<img src="{src}" alt="{alt}">')
    return True


def _append_plain_line(
    ctx: ScannerContext, line: str, output: list[str], options: ParserOptions
) -> None:
    """Handle a line that matched no enabled construct.

    Closes any open list, then either completes a pending inline-code span or
    appends the inline-formatted text followed by a space. Blank lines
    outside a blockquote add nothing and leave a pending span open.
    """
    if ctx.state is BlockState.IN_LIST:
        _close_list(ctx, output)

    if ctx.in_inline_code and line.strip():
        output.append(escape_html(line) + "</code>")
        ctx.in_inline_code = False
    elif ctx.state is BlockState.IN_BLOCK_QUOTE or line.strip():
        output.append(format_inline(line, options) + " ")


def _finalize(ctx: ScannerContext, output: list[str]) -> None:
    """Close constructs still open at the end of the input.

    A pending inline-code span is left open.
    """
    if ctx.in_list:
        logger.debug("Closing list left open at depth %d", ctx.list_depth)
        _close_list(ctx, output)

    if ctx.in_code_block:
        logger.debug("Closing unterminated code block")
        output.append("</code></pre>")
        ctx.in_code_block = False

    if ctx.in_block_quote:
        output.append("</blockquote>")
        ctx.in_block_quote = False


def render_fragment(content: str, options: ParserOptions | None = None) -> str:
    """Convert Markdown to a flat HTML fragment without pretty-printing.

    Every line is classified in a fixed order: open code block, heading, list
    item, code fence, inline code, horizontal rule, blockquote, image, then
    plain text. A disabled construct never matches, so its lines fall through
    to the next classifier.

    Args:
        content: Markdown text.
        options: Toggles controlling which constructs are recognized. Defaults
            to all enabled.

    Returns:
        str: The assembled HTML. Empty input yields an empty string.

    Examples:
        render_fragment("# Title")  # "<h1>Title</h1>"
        render_fragment("> a\\n> b")  # "<blockquote>a b </blockquote>"
    """
    options = options or ParserOptions()
    ctx = ScannerContext()
    output: list[str] = []

    lines = split_lines(content)
    for line in lines:
        if _try_code_block_line(ctx, line, output):
            continue

        if _try_heading(line, output, options):
            continue

        if _try_list_item(ctx, line, output, options):
            continue

        if _try_open_code_block(ctx, line, output, options):
            continue

        if _try_inline_code(ctx, line, output, options):
            continue

        if _try_horizontal_rule(line, output, options):
            continue

        if _try_block_quote(ctx, line, output, options):
            continue

        if _try_image(line, output, options):
            continue

        _append_plain_line(ctx, line, output, options)

    _finalize(ctx, output)
    logger.debug("Scanned %d lines", len(lines))

    return "".join(output)


def parse_markdown(content: str, options: ParserOptions | None = None) -> str:
    """Convert Markdown text to HTML.

    Args:
        content: Markdown text.
        options: Toggles controlling which constructs are recognized and
            whether the result is pretty-printed. Defaults to all enabled.

    Returns:
        str: HTML fragment, indented when `options.format_html` is True.

    Raises:
        HtmlFormatError: If the pretty-printing pass rejects the markup. The
            conversion itself never fails.

    Examples:
        parse_markdown("**hi**", ParserOptions(format_html=False))
        # "<strong>hi</strong> "
    """
    options = options or ParserOptions()
    html = render_fragment(content, options)

    if options.format_html:
        return format_html(html)
    return html


class MarkdownParser:
    """Reusable converter bound to a fixed set of options.

    The options are read-only and every call scans with fresh state, so one
    instance can be shared across threads.

    Args:
        options: Toggles applied to every conversion. Defaults to all enabled.

    Raises:
        ConfigError: If any option is not a boolean.

    Examples:
        parser = MarkdownParser(ParserOptions(parse_image=False))
        html = parser.parse("# Title")
    """

    def __init__(self, options: ParserOptions | None = None):
        self.options = options or ParserOptions()
        validate_config(self.options)

    def parse(self, content: str) -> str:
        return parse_markdown(content, self.options)
