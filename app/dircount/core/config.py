"""dircount configuration and saved parameter presets.

Configuration is stored in ~/.config/dircount/config.toml, for example::

    log_level = "INFO"

    [presets.logs]
    description = "Rotated logs older than a day"
    params = ["/var/log", "\\\\.gz$", "", "file", "", "", "", "", "1d"]
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dircount.core.paths import get_config_path
from dircount.vfs.params import MAX_PARAMS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

DEFAULT_LOG_LEVEL: LogLevel = "WARNING"


class Preset(BaseModel):
    """A named list of positional metric parameters.

    Attributes:
        params: Positional parameters exactly as the agent would pass them.
        description: Optional human-readable description.
    """

    model_config = ConfigDict(extra="forbid")

    params: Annotated[
        list[str],
        Field(min_length=1, max_length=MAX_PARAMS, description="Positional metric parameters"),
    ]
    description: str | None = None


class DirCountConfig(BaseModel):
    """Configuration for dircount.

    Attributes:
        log_level: Logging level used when --verbose is not given.
        presets: Saved parameter lists keyed by name.
    """

    model_config = ConfigDict(extra="forbid")

    log_level: Annotated[
        LogLevel,
        Field(description="Logging level"),
    ] = DEFAULT_LOG_LEVEL
    presets: dict[str, Preset] = Field(default_factory=dict)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class PresetNotFoundError(ConfigError):
    """Raised when a requested preset is not configured."""


def load_config(path: Path | None = None) -> DirCountConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated DirCountConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return DirCountConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> DirCountConfig:
    """Load configuration, falling back to defaults when no file exists.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return DirCountConfig()


def save_config(config: DirCountConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The DirCountConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(_config_to_dict(config), f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: DirCountConfig) -> dict[str, object]:
    """Convert DirCountConfig to a dictionary for TOML serialization.

    None values are dropped since TOML has no null.
    """
    presets: dict[str, object] = {}
    for name, preset in config.presets.items():
        entry: dict[str, object] = {"params": list(preset.params)}
        if preset.description is not None:
            entry["description"] = preset.description
        presets[name] = entry

    result: dict[str, object] = {"log_level": config.log_level}
    if presets:
        result["presets"] = presets
    return result


def get_preset(config: DirCountConfig, name: str) -> Preset:
    """Look up a preset by name.

    Raises:
        PresetNotFoundError: If no preset with that name exists.
    """
    try:
        return config.presets[name]
    except KeyError:
        available = ", ".join(sorted(config.presets)) or "none"
        raise PresetNotFoundError(
            f"Preset '{name}' not found (available: {available})"
        ) from None
