"""Inline span conversion: emphasis, strikethrough, and links."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from .config import ParserOptions
from .constants import (
    BOLD_PATTERN,
    HTML_ESCAPES,
    ITALIC_PATTERN,
    LINK_PATTERN,
    STRIKETHROUGH_PATTERN,
    UNDERLINE_PATTERN,
)


@dataclass(frozen=True)
class InlineRule:
    """A single substitution in the inline pipeline.

    Attributes:
        name: Human-readable rule name.
        option: Name of the `ParserOptions` flag that enables the rule.
        pattern: Compiled pattern matched against the whole fragment.
        replacement: Replacement template passed to `re.Pattern.sub`.
    """

    name: str
    option: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


# Order matters: each rule runs on the output of the previous ones, so a later
# rule may match inside tags an earlier one produced.
INLINE_RULES = (
    InlineRule("bold", "parse_bold", BOLD_PATTERN, r"<strong>\1</strong>"),
    InlineRule("italic", "parse_italic", ITALIC_PATTERN, r"<em>\1</em>"),
    InlineRule("underline", "parse_underline", UNDERLINE_PATTERN, r"<u>\1</u>"),
    InlineRule("strikethrough", "parse_strikethrough", STRIKETHROUGH_PATTERN, r"<s>\1</s>"),
    InlineRule("link", "parse_link", LINK_PATTERN, r'<a href="\2">\1</a>'),
)


def escape_html(text: str, preserve_line_breaks: bool = False) -> str:
    """Escape the five reserved HTML characters.

    Ampersands are replaced first so the entities produced for the other
    characters are not escaped a second time.

    The scanner only escapes single lines. `preserve_line_breaks` is for
    library callers escaping multi-line text themselves.

    Args:
        text: Raw text to escape.
        preserve_line_breaks: When True, convert embedded line breaks to
            ``<br>`` after escaping.

    Returns:
        str: Escaped text.

    Examples:
        escape_html("a < b & c")  # "a &lt; b &amp; c"
        escape_html("one\\ntwo", preserve_line_breaks=True)  # "one<br>two"
    """
    for character, entity in HTML_ESCAPES:
        text = text.replace(character, entity)

    if preserve_line_breaks:
        text = text.replace("\r\n", "<br>").replace("\n", "<br>")

    return text


def enabled_rules(options: ParserOptions) -> Iterator[InlineRule]:
    """Yield the inline rules switched on in `options`, in pipeline order."""
    for rule in INLINE_RULES:
        if getattr(options, rule.option):
            yield rule


def format_inline(text: str, options: ParserOptions | None = None) -> str:
    """Convert inline Markdown spans within a single line to HTML.

    Reserved characters are escaped, then bold, italic, underline,
    strikethrough and link substitutions run in that order. Matching is
    non-greedy and never crosses the fragment boundary. Delimiters cannot be
    escaped.

    Args:
        text: A line or fragment of Markdown text.
        options: Toggles selecting which rules run. Defaults to all enabled.

    Returns:
        str: The fragment with inline spans converted to tags.

    Examples:
        format_inline("**bold** and *italic*")
        # "<strong>bold</strong> and <em>italic</em>"
        format_inline("[home](https://example.com)")
        # '<a href="https://example.com">home</a>'
    """
    options = options or ParserOptions()
    text = escape_html(text)

    for rule in enabled_rules(options):
        text = rule.apply(text)

    return text
