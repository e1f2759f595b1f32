"""Pretty-printing of assembled HTML output."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .exceptions import HtmlFormatError

logger = logging.getLogger("md_html.formatter")


def format_html(html: str) -> str:
    """Indent an HTML fragment for readability.

    The fragment is parsed with Python's built-in ``html.parser`` builder and
    re-serialized one tag per line. No ``<html>`` or ``<body>`` wrapper is
    added.

    Args:
        html: Flat HTML produced by the scanner.

    Returns:
        str: The indented fragment.

    Raises:
        HtmlFormatError: If the parser rejects the markup. The error carries
            the offending HTML and the parser's message.

    Examples:
        format_html("<ul><li>a</li></ul>")
    """
    logger.debug("Formatting %d characters of HTML", len(html))
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as error:
        raise HtmlFormatError(html, str(error)) from error

    return soup.prettify()
