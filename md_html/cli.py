"""
Converts a Markdown file to HTML and writes the result to stdout.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .config import ConfigError, build_config
from .exceptions import HtmlFormatError
from .filesystem import max_file_size_from_env, read_markdown
from .parser import parse_markdown

__all__ = ["cli"]

logger = logging.getLogger("md_html")


@click.command()
@click.version_option(package_name="md-html")
@click.option("--heading/--no-heading", "parse_heading", default=None, help="Headings")
@click.option("--list/--no-list", "parse_list", default=None, help="List items")
@click.option(
    "--code-block/--no-code-block", "parse_code_block", default=None, help="Fenced code blocks"
)
@click.option(
    "--inline-code/--no-inline-code", "parse_inline_code", default=None, help="Inline code lines"
)
@click.option(
    "--horizontal-rule/--no-horizontal-rule",
    "parse_horizontal_rule",
    default=None,
    help="Horizontal rules",
)
@click.option(
    "--block-quote/--no-block-quote", "parse_block_quote", default=None, help="Blockquotes"
)
@click.option("--image/--no-image", "parse_image", default=None, help="Image lines")
@click.option("--bold/--no-bold", "parse_bold", default=None, help="Bold spans")
@click.option("--italic/--no-italic", "parse_italic", default=None, help="Italic spans")
@click.option("--underline/--no-underline", "parse_underline", default=None, help="Underline spans")
@click.option(
    "--strikethrough/--no-strikethrough",
    "parse_strikethrough",
    default=None,
    help="Strikethrough spans",
)
@click.option("--link/--no-link", "parse_link", default=None, help="Inline links")
@click.option("--format/--no-format", "format_html", default=None, help="Pretty-print the HTML")
@click.option("-v", "--verbose", is_flag=True, help="Log debug information to stderr")
@click.argument(
    "filepath", type=click.Path(exists=True, dir_okay=False, resolve_path=True, path_type=Path)
)
def cli(filepath: Path, verbose: bool = False, **toggles: bool | None):
    """
    Convert a Markdown file to HTML.

    Each construct can be switched on or off with its flag pair; flags
    override the ``[tool.md-html]`` table found in ``pyproject.toml`` or
    ``.md-html.toml``.

    Args:
        filepath: Path to the Markdown file to convert.
        verbose: Enable debug logging.
        toggles: Option overrides keyed by `ParserOptions` field name; None
            leaves the configured value unchanged.

    Raises:
        click.BadParameter: If the configuration is invalid.
        click.ClickException: If the file cannot be read or the HTML cannot be
            formatted.

    Examples:
        md-html README.md --no-image --no-format
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        options = build_config(filepath.parent, **toggles)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error
    logger.debug("Using options %s", options)

    try:
        max_file_size = max_file_size_from_env()
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        content = read_markdown(filepath, max_file_size)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    try:
        html = parse_markdown(content, options)
    except HtmlFormatError as error:
        raise click.ClickException(str(error)) from error

    click.echo(html, nl=not html.endswith("\n"))


if __name__ == "__main__":
    cli()
