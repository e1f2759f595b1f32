"""
md-html: a small line-oriented Markdown to HTML converter.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    md-html README.md --no-format

Library Usage:
    from md_html import ParserOptions, parse_markdown

    html = parse_markdown("# Title\\n\\n- one\\n- two", ParserOptions(format_html=False))
"""

from .config import ConfigError, ParserOptions
from .exceptions import HtmlFormatError, MarkdownHtmlError
from .formatter import format_html
from .inline import escape_html, format_inline
from .parser import MarkdownParser, parse_markdown, render_fragment

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "parse_markdown",
    "render_fragment",
    "MarkdownParser",
    "format_inline",
    "escape_html",
    "format_html",
    # Configuration
    "ParserOptions",
    # Exceptions
    "ConfigError",
    "HtmlFormatError",
    "MarkdownHtmlError",
    # Version
    "__version__",
]
