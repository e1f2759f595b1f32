"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
import tomllib


@dataclass(frozen=True)
class ParserOptions:
    """Feature toggles for converting Markdown to HTML.

    Each flag gates the recognition of exactly one construct. A disabled
    construct is not suppressed: its markers stay in the output as literal
    text and the line falls through to the next classifier.

    Attributes:
        parse_heading: Recognize ``#`` headings.
        parse_list: Recognize ``-``, ``*`` and ``1.`` list items.
        parse_code_block: Recognize triple-backtick code fences.
        parse_inline_code: Recognize lines opening with a single backtick.
        parse_horizontal_rule: Recognize ``---``, ``***`` and ``___`` rules.
        parse_block_quote: Recognize ``>`` blockquote lines.
        parse_image: Recognize ``![alt](src)`` image lines.
        parse_bold: Convert ``**text**`` to ``<strong>``.
        parse_italic: Convert ``*text*`` to ``<em>``.
        parse_underline: Convert ``__text__`` to ``<u>``.
        parse_strikethrough: Convert ``~~text~~`` to ``<s>``.
        parse_link: Convert ``[label](url)`` to ``<a>``.
        format_html: Pretty-print the assembled HTML before returning it.

    Examples:
        ParserOptions(parse_bold=False, format_html=False)
    """

    # Block constructs
    parse_heading: bool = True
    parse_list: bool = True
    parse_code_block: bool = True
    parse_inline_code: bool = True
    parse_horizontal_rule: bool = True
    parse_block_quote: bool = True
    parse_image: bool = True

    # Inline spans
    parse_bold: bool = True
    parse_italic: bool = True
    parse_underline: bool = True
    parse_strikethrough: bool = True
    parse_link: bool = True

    # Output
    format_html: bool = True


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`parse_bold` must be a boolean")
    """


OPTION_NAMES = tuple(field.name for field in fields(ParserOptions))


def load_config(search_path: Path) -> ParserOptions:
    """Load options from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.md-html]`` table from `pyproject.toml` and the ``[md-html]`` or
    ``[tool.md-html]`` table from `.md-html.toml` when present. Returns
    default options when no configuration is found. TOML files that cannot be
    read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        ParserOptions: Loaded options with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "md-html")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".md-html.toml",
            table_paths=[("md-html",), ("tool", "md-html")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return ParserOptions()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> ParserOptions | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> ParserOptions:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return ParserOptions()

    try:
        return ParserOptions(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(options: ParserOptions) -> None:
    """Validate a `ParserOptions` instance.

    Args:
        options: Options to validate.

    Raises:
        ConfigError: If any toggle is not a boolean.

    Examples:
        validate_config(ParserOptions(parse_link=False))
    """
    for name in OPTION_NAMES:
        value = getattr(options, name)
        if not isinstance(value, bool):
            raise ConfigError(f"`{name}` must be a boolean")


def apply_overrides(options: ParserOptions, **overrides: object) -> ParserOptions:
    """Apply override values to `ParserOptions`.

    Args:
        options: Base options to update.
        overrides: Override values keyed by option name; values set to None are
            ignored.

    Returns:
        ParserOptions: New options with the overrides applied, or the original
        instance when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `ParserOptions`.

    Examples:
        updated = apply_overrides(options, parse_bold=False, format_html=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return options
    return replace(options, **changes)


def build_config(search_path: Path, **overrides: object) -> ParserOptions:
    """Load, override, and validate options.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by option name; None values are ignored.

    Returns:
        ParserOptions: Validated options ready for parsing.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        options = build_config(Path.cwd(), parse_image=False)
    """
    options = load_config(search_path)
    options = apply_overrides(options, **overrides)
    validate_config(options)
    return options
