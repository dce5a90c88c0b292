#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the ldiff CLI.

A configuration file supplies defaults for ``format``, ``context_lines``,
``binary`` and ``color``; command-line flags always override them. Files may
be TOML, YAML or JSON, or a ``[tool.ldiff]`` table in ``pyproject.toml``.
"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from ldiff.constants import CONFIG_FILENAMES, FORMAT_MODES, PYPROJECT_TOOL_SECTION
from ldiff.exceptions import ConfigError

logger = logging.getLogger(__name__)

COLOR_CHOICES = ("auto", "always", "never")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.ldiff]`` table from a pyproject.toml file.

    Returns an empty dict when the table is absent.

    Raises
    ------
    ConfigError
        If the file cannot be parsed or the table is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", config_path=str(pyproject_path)) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", config_path=str(pyproject_path)) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Each directory is checked for the dedicated config files first and then
    for a pyproject.toml carrying a ``[tool.ldiff]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Searches the working directory and its parents, then the user's home
    directory.
    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load raw configuration from a JSON, TOML, YAML or pyproject.toml file.

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed or of an unknown type

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))
    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)
    if ext == ".toml":
        return _load_toml_config(config_path)
    if ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    if ext == ".json":
        return _load_json_config(config_path)
    raise ConfigError(
        f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", config_path=str(config_path)
    )


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", config_path=str(config_path)) from e
    except OSError as e:
        raise ConfigError(f"Error reading TOML config {config_path}: {e}", config_path=str(config_path)) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", config_path=str(config_path)) from e
    except OSError as e:
        raise ConfigError(f"Error reading JSON config {config_path}: {e}", config_path=str(config_path)) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", config_path=str(config_path)) from e
    except OSError as e:
        raise ConfigError(f"Error reading YAML config {config_path}: {e}", config_path=str(config_path)) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def validate_config(config: Dict[str, Any], source: str | None = None) -> Dict[str, Any]:
    """Check configuration keys and values.

    Parameters
    ----------
    config : dict
        Raw configuration mapping
    source : str, optional
        Where the mapping came from, for error messages

    Returns
    -------
    dict
        The validated settings, keyed by CLI destination name

    Raises
    ------
    ConfigError
        On unknown keys or invalid values

    """
    where = f" in {source}" if source else ""
    validated: Dict[str, Any] = {}

    for key, value in config.items():
        if key == "format":
            if value not in FORMAT_MODES:
                raise ConfigError(
                    f"Invalid format{where}: {value!r}. Must be one of: {', '.join(FORMAT_MODES)}",
                    config_path=source,
                    parameter_name=key,
                    parameter_value=value,
                )
        elif key == "context_lines":
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(
                    f"context_lines{where} must be a non-negative integer, got {value!r}",
                    config_path=source,
                    parameter_name=key,
                    parameter_value=value,
                )
        elif key == "binary":
            if value is not None and not isinstance(value, bool):
                raise ConfigError(
                    f"binary{where} must be true, false or null, got {value!r}",
                    config_path=source,
                    parameter_name=key,
                    parameter_value=value,
                )
        elif key == "color":
            if value not in COLOR_CHOICES:
                raise ConfigError(
                    f"Invalid color{where}: {value!r}. Must be one of: {', '.join(COLOR_CHOICES)}",
                    config_path=source,
                    parameter_name=key,
                    parameter_value=value,
                )
        else:
            raise ConfigError(f"Unknown configuration key{where}: {key!r}", config_path=source, parameter_name=key)
        validated[key] = value

    return validated


def load_config_with_priority(
    explicit_path: Optional[str] = None,
    env_var_path: Optional[str] = None,
    start_dir: Optional[Path] = None,
) -> Dict[str, Any]:
    """Load and validate configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. Environment variable config path (``LDIFF_CONFIG``)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Validated configuration (empty dict if no config found)

    Raises
    ------
    ConfigError
        If a config file is found but cannot be used

    """
    config_path: Path | str | None = explicit_path or env_var_path or discover_config_file(start_dir)
    if not config_path:
        return {}

    logger.debug("Loading configuration from %s", config_path)
    return validate_config(load_config_file(config_path), source=str(config_path))
