"""Package-specific exception types."""

from __future__ import annotations


class MarkdownHtmlError(Exception):
    """Base class for md-html errors.

    The scanner itself never raises; errors only come from the layers around
    it.
    """


class HtmlFormatError(MarkdownHtmlError):
    """Raised when the pretty-printing pass rejects the assembled markup.

    Args:
        html: The unformatted HTML handed to the formatter.
        diagnostic: Message reported by the underlying formatter.
    """

    def __init__(self, html: str, diagnostic: str):
        self.html = html
        self.diagnostic = diagnostic
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"Could not format HTML output: {self.diagnostic}"
