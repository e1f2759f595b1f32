"""Reading Markdown sources for the CLI."""

from __future__ import annotations

import os
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE

MAX_FILE_SIZE_ENV_VAR = "MD_HTML_MAX_FILE_SIZE"


def max_file_size_from_env() -> int:
    """Return the input size cap in bytes.

    `MD_HTML_MAX_FILE_SIZE` overrides the 10 MiB default.

    Raises:
        ValueError: If the variable is set to anything but a positive integer.
    """
    raw_limit = os.environ.get(MAX_FILE_SIZE_ENV_VAR, "").strip()
    if not raw_limit:
        return DEFAULT_MAX_FILE_SIZE

    if not raw_limit.isdigit() or int(raw_limit) == 0:
        raise ValueError(
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {raw_limit!r} "
            "(expected a positive number of bytes)"
        )
    return int(raw_limit)


def read_markdown(source: Path, max_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Read a UTF-8 Markdown document, refusing oversized input.

    Existence and file-type checks are left to the caller (the CLI validates
    the argument with ``click.Path``).

    Args:
        source: Markdown file to read.
        max_size: Largest accepted size in bytes.

    Returns:
        str: The document text.

    Raises:
        IOError: If the file is larger than `max_size`, cannot be read, or is
            not valid UTF-8.

    Examples:
        text = read_markdown(Path("README.md"), max_size=4096)
    """
    try:
        size = source.stat().st_size
        if size > max_size:
            raise IOError(f"{source} is {size} bytes, over the {max_size}-byte limit.")
        return source.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise IOError(f"{source} is not valid UTF-8: {error.reason}") from error
    except OSError as error:
        if error.filename is None:
            raise
        raise IOError(f"Cannot read {source}: {error.strerror}") from error
