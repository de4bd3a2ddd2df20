"""Configuration loading for compdocs (.compdocs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".compdocs.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ExampleConfig:
    """Default example-generation settings."""

    types: List[str] = field(default_factory=lambda: ["basic"])
    framework: str = "html"
    include_description: bool = True


@dataclass
class CompDocsConfig:
    """Represents the settings defined in .compdocs.yml."""

    root: Path
    definitions: Optional[Path] = None
    interface_prefix: str = "Va"
    tag_prefix: str = "va-"
    examples: ExampleConfig = field(default_factory=ExampleConfig)
    templates_dir: Optional[Path] = None


def load_config(config_path: Path) -> CompDocsConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CompDocsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    definitions_str = _as_str(data.get("definitions"))
    templates_dir_str = _as_str(data.get("templates_dir"))

    examples = ExampleConfig()
    examples_data = _as_dict(data.get("examples"))
    if examples_data:
        types = _as_str_list(examples_data.get("types"))
        if types:
            examples.types = types
        examples.framework = _as_str(examples_data.get("framework")) or examples.framework
        include = _as_bool(examples_data.get("include_description"))
        if include is not None:
            examples.include_description = include

    return CompDocsConfig(
        root=root,
        definitions=root / definitions_str if definitions_str else None,
        interface_prefix=_as_str(data.get("interface_prefix")) or "Va",
        tag_prefix=_as_str(data.get("tag_prefix")) or "va-",
        examples=examples,
        templates_dir=root / templates_dir_str if templates_dir_str else None,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "CompDocsConfig", "ConfigError", "ExampleConfig", "load_config"]
