"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

CONFIG_TABLE = "zulip-markdown"


@dataclass
class ZlmdConfig:
    """Configuration for the `zlmd` command line tool.

    Attributes:
        strict: Fail instead of warning when fences do not balance.
        spoiler_fence: Fence used by the ``spoiler`` command (```` ``` ```` or ``~~~``).
        code_language: Default language tag for the ``code`` command.
        max_file_size: Maximum input file size in bytes.

    Examples:
        ZlmdConfig(strict=True, spoiler_fence="~~~")
    """

    strict: bool = False
    spoiler_fence: str = "```"
    code_language: str = ""
    max_file_size: int = 10 * 1024 * 1024


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_file_size` must be a positive integer")
    """


def load_config(search_path: Path) -> ZlmdConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.zulip-markdown]`` table from `pyproject.toml` and the
    ``[zulip-markdown]`` or ``[tool.zulip-markdown]`` table from
    `.zulip-markdown.toml`. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        ZlmdConfig: Loaded configuration, or defaults when nothing is found.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
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

    return ZlmdConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> ZlmdConfig | None:
    if not config_file.is_file():
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
) -> ZlmdConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # TOML keys may use dashes; dataclass fields use underscores
    normalized = {key.replace("-", "_"): value for key, value in raw_config.items()}
    try:
        return ZlmdConfig(**normalized)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: ZlmdConfig) -> None:
    """Validate a `ZlmdConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a field has the wrong type, the spoiler fence is
            unsupported, or the size limit is not positive.

    Examples:
        validate_config(ZlmdConfig(spoiler_fence="~~~"))
    """
    if not isinstance(config.strict, bool):
        raise ConfigError("`strict` must be a boolean")
    if config.spoiler_fence not in ("```", "~~~"):
        raise ConfigError("`spoiler_fence` must be one of: ```, ~~~")
    if not isinstance(config.code_language, str) or any(
        character.isspace() for character in config.code_language
    ):
        raise ConfigError("`code_language` must be a single word")
    if isinstance(config.max_file_size, bool) or not isinstance(config.max_file_size, int):
        raise ConfigError("`max_file_size` must be an integer")
    if config.max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")


def apply_overrides(config: ZlmdConfig, **overrides: object) -> ZlmdConfig:
    """Apply override values to a `ZlmdConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by field name; None values are ignored.

    Returns:
        ZlmdConfig: New configuration, or `config` itself when nothing changes.

    Raises:
        TypeError: If an override name is not defined on `ZlmdConfig`.

    Examples:
        updated = apply_overrides(config, strict=True)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> ZlmdConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        ZlmdConfig: Validated configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), strict=True)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config
