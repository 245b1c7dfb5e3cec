"""Configuration management for objects-tasks."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, ValidationError

from .utils.errors import ConfigurationError


class SelectorConfig(BaseModel):
    """Configuration for the CSS selector builder."""

    strict_combinators: bool = True


class SerializationConfig(BaseModel):
    """Configuration for the JSON helpers."""

    indent: Optional[int] = None
    sort_keys: bool = False


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "text"
    file: Optional[str] = None
    selectors_level: Optional[str] = None


class ObjectsTasksConfig(BaseModel):
    """Main configuration class for objects-tasks."""

    selectors: SelectorConfig = Field(default_factory=SelectorConfig)
    serialization: SerializationConfig = Field(default_factory=SerializationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    current_dir = Path.cwd()
    config_files = [
        current_dir / "objects-tasks.yaml",
        current_dir / "objects-tasks.yml",
        current_dir / "config" / "objects-tasks.yaml",
    ]

    for config_file in config_files:
        if config_file.exists():
            return config_file

    return current_dir / "config" / "objects-tasks.yaml"


def load_config(config_path: Optional[str] = None) -> ObjectsTasksConfig:
    """Load configuration from file or environment variables."""
    path: Path
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    config_dict: Dict[str, Any] = {}

    if path.exists():
        try:
            with open(path, "r") as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load config from {path}: {e}")

        if file_config:
            if not isinstance(file_config, dict):
                raise ConfigurationError(f"Config file {path} must contain a mapping")
            config_dict.update(file_config)

    env_overrides = _get_env_overrides()
    _deep_update(config_dict, env_overrides)

    try:
        return ObjectsTasksConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", details={"path": str(path)})


def _parse_bool(value: str) -> Optional[bool]:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    return None


def _get_env_overrides() -> Dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: Dict[str, Any] = {}

    # Selector configuration
    strict = os.getenv("OBJECTS_TASKS_STRICT_COMBINATORS")
    if strict:
        parsed = _parse_bool(strict)
        if parsed is not None:
            overrides.setdefault("selectors", {})["strict_combinators"] = parsed

    # Serialization configuration
    if os.getenv("OBJECTS_TASKS_JSON_INDENT"):
        try:
            overrides.setdefault("serialization", {})["indent"] = int(
                os.getenv("OBJECTS_TASKS_JSON_INDENT", "")
            )
        except ValueError:
            pass

    sort_keys = os.getenv("OBJECTS_TASKS_JSON_SORT_KEYS")
    if sort_keys:
        parsed = _parse_bool(sort_keys)
        if parsed is not None:
            overrides.setdefault("serialization", {})["sort_keys"] = parsed

    # Logging configuration
    if os.getenv("LOG_LEVEL"):
        overrides.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

    if os.getenv("LOG_FILE"):
        overrides.setdefault("logging", {})["file"] = os.getenv("LOG_FILE")

    if os.getenv("LOG_FORMAT"):
        overrides.setdefault("logging", {})["format"] = os.getenv("LOG_FORMAT")

    if os.getenv("LOG_SELECTORS_LEVEL"):
        overrides.setdefault("logging", {})["selectors_level"] = os.getenv("LOG_SELECTORS_LEVEL")

    return overrides


def _deep_update(base_dict: Dict[str, Any], update_dict: Dict[str, Any]) -> None:
    """Deep update a dictionary with another dictionary."""
    for key, value in update_dict.items():
        if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
            _deep_update(base_dict[key], value)
        else:
            base_dict[key] = value


def save_config(config: ObjectsTasksConfig, config_path: Optional[str] = None) -> None:
    """Save configuration to file."""
    path: Path
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump()

    with open(path, "w") as f:
        yaml.dump(config_dict, f, default_flow_style=False, indent=2)

