"""Typed configuration loading and access.

The config file is optional TOML:

    [releases]
    file = "releases.toml"

    [api]
    indent = 2
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_table

__all__ = [
    "Config",
    "ApiConfig",
    "ReleasesConfig",
    "ConfigError",
    "CONFIG_ENV_VAR",
    "DEFAULT_API_INDENT",
    "load_config",
    "resolve_config_path",
]

CONFIG_ENV_VAR = "QA_CONFIG"
DEFAULT_API_INDENT = 2


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleasesConfig:
    """Where the release table comes from.

    ``file`` is None when the built-in table should be used.
    """

    file: Path | None = None


@dataclass(frozen=True, slots=True)
class ApiConfig:
    indent: int = DEFAULT_API_INDENT


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    releases: ReleasesConfig = field(default_factory=ReleasesConfig)
    api: ApiConfig = field(default_factory=ApiConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object], *, base_dir: Path | None = None) -> Config:
        """Create Config from a mapping (parsed TOML).

        Relative ``releases.file`` paths resolve against ``base_dir``.
        """
        releases: StrDict = get_table(data, "releases") or {}
        api: StrDict = get_table(data, "api") or {}

        releases_file: Path | None = None
        raw_file = get_str(releases, "file")
        if raw_file is not None:
            releases_file = Path(raw_file).expanduser()
            if not releases_file.is_absolute() and base_dir is not None:
                releases_file = base_dir / releases_file

        indent = get_int(api, "indent")
        if indent is not None and indent < 0:
            raise ValueError(f"api.indent must be >= 0 (got {indent})")

        return cls(
            releases=ReleasesConfig(file=releases_file),
            api=ApiConfig(indent=DEFAULT_API_INDENT if indent is None else indent),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the config file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        config = Config.from_dict(result.value, base_dir=path.parent)
        return Ok(config)
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def resolve_config_path(explicit: Path | None) -> Path | None:
    """Pick the config file: explicit option first, then $QA_CONFIG."""
    if explicit is not None:
        return explicit.expanduser()
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return None
