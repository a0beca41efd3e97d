"""Configuration loading and management."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import (
    ANCHOR_PREFIXES,
    DEFAULT_BLOCK_COMMENT_REGEXP,
    DEFAULT_COMMENT_REGEXP,
    DEFAULT_DEFINITION_REGEXP,
    DEFAULT_EXTRA_INDENT_FOR_DEFINITIONS,
    DEFAULT_LIST_START_REGEXP,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_PARAGRAPH_END_REGEXP,
    DEFAULT_TAB_SIZE,
    DEFAULT_WRAP_COLUMN,
    TRAILING_WHITESPACE_ENDINGS,
)
from .models import ReflowSettings

CONFIG_TABLE = "reflow-list"


@dataclass
class ReflowConfig:
    """Raw configuration for reflowing paragraphs.

    Patterns are kept as regular expression source text until
    `compile_settings` validates and compiles them.

    Attributes:
        comment_regexp: Matches a comment marker at the start of a line.
        list_start_regexp: Matches a list marker, including trailing whitespace.
        definition_regexp: Matches a definition term, including trailing
            whitespace.
        paragraph_end_regexp: Matches line content that ends a paragraph.
        block_comment_regexp: Comment pattern used inside ``/* ... */`` blocks.
        wrap_column: Target maximum line width.
        extra_indent_for_definitions: Continuation indent for definition bodies.
        tab_size: Columns per tab stop.
        max_file_size: Maximum file size in bytes that will be processed.

    Examples:
        ReflowConfig(wrap_column=72, tab_size=8)
    """

    # Patterns
    comment_regexp: str = DEFAULT_COMMENT_REGEXP
    list_start_regexp: str = DEFAULT_LIST_START_REGEXP
    definition_regexp: str = DEFAULT_DEFINITION_REGEXP
    paragraph_end_regexp: str = DEFAULT_PARAGRAPH_END_REGEXP
    block_comment_regexp: str = DEFAULT_BLOCK_COMMENT_REGEXP

    # Layout
    wrap_column: int = DEFAULT_WRAP_COLUMN
    extra_indent_for_definitions: int = DEFAULT_EXTRA_INDENT_FOR_DEFINITIONS
    tab_size: int = DEFAULT_TAB_SIZE

    # Limits
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`wrap_column` must be a positive integer")
    """


def load_config(search_path: Path) -> ReflowConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.reflow-list]`` table from `pyproject.toml` and the
    ``[reflow-list]`` or ``[tool.reflow-list]`` table from `.reflow-list.toml`
    when present. Returns default values when no configuration is found. TOML
    files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        ReflowConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("src"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", CONFIG_TABLE)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / f".{CONFIG_TABLE}.toml",
            table_paths=[(CONFIG_TABLE,), ("tool", CONFIG_TABLE)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return ReflowConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> ReflowConfig | None:
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
) -> ReflowConfig:
    table_display = ".".join(table_path)

    if raw_config is None:
        return ReflowConfig()

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return ReflowConfig()

    try:
        return ReflowConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: ReflowConfig) -> None:
    """Validate a `ReflowConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If a pattern does not compile, is not anchored to the
            start of the line, or (for list and definition patterns) does not
            consume the whitespace following the marker; or if a numeric
            setting is out of range.

    Examples:
        validate_config(ReflowConfig(wrap_column=72))
    """
    patterns = {
        "comment_regexp": config.comment_regexp,
        "list_start_regexp": config.list_start_regexp,
        "definition_regexp": config.definition_regexp,
        "paragraph_end_regexp": config.paragraph_end_regexp,
        "block_comment_regexp": config.block_comment_regexp,
    }
    for key, source in patterns.items():
        _ensure_pattern(key, source)

    for key in ("list_start_regexp", "definition_regexp"):
        if not patterns[key].endswith(TRAILING_WHITESPACE_ENDINGS):
            raise ConfigError(
                f"`{key}` must consume the whitespace after the marker "
                f"(end with one of: {', '.join(TRAILING_WHITESPACE_ENDINGS)})"
            )

    _ensure_integers(
        {
            "wrap_column": config.wrap_column,
            "extra_indent_for_definitions": config.extra_indent_for_definitions,
            "tab_size": config.tab_size,
            "max_file_size": config.max_file_size,
        }
    )
    _ensure_positive(
        {
            "wrap_column": config.wrap_column,
            "tab_size": config.tab_size,
            "max_file_size": config.max_file_size,
        }
    )
    if config.extra_indent_for_definitions < 0:
        raise ConfigError("`extra_indent_for_definitions` must be >= 0")


def compile_settings(config: ReflowConfig) -> ReflowSettings:
    """Validate `config` and compile it into immutable `ReflowSettings`.

    Args:
        config: Raw configuration.

    Returns:
        ReflowSettings: Settings ready for the reflow engine.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        settings = compile_settings(ReflowConfig(wrap_column=60))
    """
    validate_config(config)
    return ReflowSettings(
        comment_pattern=re.compile(config.comment_regexp),
        list_start_pattern=re.compile(config.list_start_regexp),
        definition_pattern=re.compile(config.definition_regexp),
        paragraph_end_pattern=re.compile(config.paragraph_end_regexp),
        block_comment_pattern=re.compile(config.block_comment_regexp),
        wrap_column=config.wrap_column,
        extra_indent_for_definitions=config.extra_indent_for_definitions,
        tab_size=config.tab_size,
    )


def apply_overrides(config: ReflowConfig, **overrides: object) -> ReflowConfig:
    """Apply override values to a `ReflowConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        ReflowConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `ReflowConfig`.

    Examples:
        updated = apply_overrides(config, wrap_column=72, tab_size=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> ReflowConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        ReflowConfig: Validated configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), wrap_column=100)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_pattern(key: str, source: object) -> None:
    if not isinstance(source, str):
        raise ConfigError(f"`{key}` must be a string")
    if not source.startswith(ANCHOR_PREFIXES):
        raise ConfigError(f"`{key}` must be anchored to the start of the line (start with `^`)")
    try:
        re.compile(source)
    except re.error as error:
        raise ConfigError(f"`{key}` is not a valid regular expression: {error}") from error


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
