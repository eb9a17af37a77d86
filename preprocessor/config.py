"""Loading of project configuration files (YAML, JSON or TOML)."""

import json
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

import yaml


OUTPUT_FORMATS = ("source", "list", "json", "mermaid", "ascii")


class ConfigError(ValueError):
    """Raised when a configuration file is malformed or has invalid values."""


@dataclass
class Config:
    """Settings for one preprocessing run."""

    roots: List[str] = field(default_factory=list)
    format: str = "source"
    output: Optional[str] = None
    strip_directives: bool = False
    line_markers: bool = False
    extensions: Optional[Set[str]] = None


# key -> accepted type
_SCHEMA: Dict[str, type] = {
    "roots": list,
    "format": str,
    "output": str,
    "strip_directives": bool,
    "line_markers": bool,
    "extensions": list,
}


def _parse_document(path: Path, content: str) -> Any:
    suffix = path.suffix.lower()
    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(content)
        elif suffix == ".toml":
            return tomllib.loads(content)
        elif suffix == ".json":
            return json.loads(content)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"{path}: {e}") from e
    raise ConfigError(f"{path}: unsupported config format '{suffix}'")


def normalize_extensions(extensions: List[str]) -> Set[str]:
    """Lowercase extensions and make sure each starts with a dot."""
    normalized = set()
    for ext in extensions:
        if not ext.startswith("."):
            ext = "." + ext
        normalized.add(ext.lower())
    return normalized


def load_config(path: Path) -> Config:
    """
    Load a configuration file.

    Relative roots and output paths are taken relative to the directory
    the configuration file lives in.

    Args:
        path: Path to a .yaml, .yml, .json or .toml file.

    Returns:
        The parsed configuration.

    Raises:
        OSError: If the file cannot be read.
        ConfigError: If the file cannot be parsed or has invalid values.
    """
    path = Path(path)
    data = _parse_document(path, path.read_text(encoding="utf-8"))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    for key, value in data.items():
        expected = _SCHEMA.get(key)
        if expected is None:
            raise ConfigError(f"{path}: unknown key '{key}'")
        if not isinstance(value, expected):
            raise ConfigError(f"{path}: '{key}' must be of type {expected.__name__}")

    base = path.resolve().parent
    config = Config()

    for root in data.get("roots", []):
        if not isinstance(root, str):
            raise ConfigError(f"{path}: entries of 'roots' must be strings")
        config.roots.append(os.path.join(base, root))

    if "format" in data:
        if data["format"] not in OUTPUT_FORMATS:
            raise ConfigError(
                f"{path}: unknown format '{data['format']}' (expected one of {', '.join(OUTPUT_FORMATS)})"
            )
        config.format = data["format"]

    if "output" in data:
        config.output = os.path.join(base, data["output"])

    config.strip_directives = data.get("strip_directives", False)
    config.line_markers = data.get("line_markers", False)

    if "extensions" in data:
        config.extensions = normalize_extensions([str(ext) for ext in data["extensions"]])

    return config
