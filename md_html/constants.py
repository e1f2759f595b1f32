"""Constants used across the md-html package."""

from __future__ import annotations

import re

# Block patterns
HEADING_PATTERN = re.compile(r"^(#+) (.*)$")
LIST_ITEM_PATTERN = re.compile(r"^(?P<indent> *)(?P<marker>[-*]+|\d+\.) (?P<text>.*)$")
IMAGE_PATTERN = re.compile(r"^!\[(?P<alt>.*?)\]\((?P<src>.*?)\)")
CODE_FENCE = "```"
INLINE_CODE_MARKER = "`"
HORIZONTAL_RULE_MARKERS = ("---", "***", "___")
BLOCK_QUOTE_MARKER = ">"

MAX_HEADING_LEVEL = 6
LIST_INDENT_WIDTH = 2

# Inline patterns, applied in this order
BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")
ITALIC_PATTERN = re.compile(r"\*(.*?)\*")
UNDERLINE_PATTERN = re.compile(r"__(.*?)__")
STRIKETHROUGH_PATTERN = re.compile(r"~~(.*?)~~")
LINK_PATTERN = re.compile(r"\[(.*?)\]\((.*?)\)")

HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)

# CLI limits
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
