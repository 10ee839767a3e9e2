"""Run-config and report file I/O for vectorlab.

Run configs are single YAML (``.yaml``/``.yml``) or JSON (``.json``)
mappings; the format is picked from the file suffix. Reports written by the
CLI, validator and benchmark are always JSON.
"""

import json
from pathlib import Path
from typing import Any, Union

import yaml

from vectorlab.utils.errors import ConfigError

PathLike = Union[str, Path]

CONFIG_FORMATS = {".yaml": "yaml", ".yml": "yaml", ".json": "json"}


def ensure_parent_dir(filepath: PathLike) -> None:
    """Create the directory that will hold ``filepath``."""
    Path(filepath).parent.mkdir(parents=True, exist_ok=True)


def config_format(filepath: PathLike) -> str:
    """Return ``"yaml"`` or ``"json"`` for a config path.

    Raises:
        ConfigError: If the suffix is not a supported config format
    """
    fmt = CONFIG_FORMATS.get(Path(filepath).suffix.lower())
    if fmt is None:
        raise ConfigError(f"unsupported config format: {filepath}")
    return fmt


def read_config_mapping(filepath: PathLike) -> dict[str, Any]:
    """Read a run-config file into a mapping.

    An empty file reads as ``{}``.

    Raises:
        ConfigError: If the file is missing, unparsable, or its top level
            is not a mapping
    """
    fmt = config_format(filepath)
    try:
        with open(filepath, encoding="utf-8") as f:
            data = yaml.safe_load(f) if fmt == "yaml" else json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"config file not found: {filepath}") from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"failed to parse {filepath}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{filepath}: top level must be a mapping, got {type(data).__name__}")
    return data


def write_config_mapping(filepath: PathLike, data: dict[str, Any]) -> None:
    """Write a run-config mapping in the format named by the suffix."""
    fmt = config_format(filepath)
    ensure_parent_dir(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        if fmt == "yaml":
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)


def write_json_report(filepath: PathLike, payload: dict[str, Any]) -> None:
    """Write a report payload as indented JSON, creating parent dirs."""
    ensure_parent_dir(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
