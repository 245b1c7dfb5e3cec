"""Pytest configuration and fixtures for objects-tasks tests."""

import logging
import os
from pathlib import Path
import tempfile
from typing import Generator

import pytest

from objects_tasks.config import ObjectsTasksConfig, SelectorConfig
from objects_tasks.selectors.builder import SelectorBuilder
from objects_tasks.utils.logging_config import PACKAGE_LOGGER, SELECTORS_LOGGER


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def test_config() -> ObjectsTasksConfig:
    """Test configuration."""
    return ObjectsTasksConfig(selectors=SelectorConfig(strict_combinators=True))


@pytest.fixture
def builder(test_config: ObjectsTasksConfig) -> SelectorBuilder:
    """Selector builder instance for testing."""
    return SelectorBuilder(test_config.selectors)


@pytest.fixture
def config_yaml() -> str:
    """Sample configuration file content."""
    return """
selectors:
  strict_combinators: false
serialization:
  indent: 2
  sort_keys: true
logging:
  level: DEBUG
  format: json
"""


@pytest.fixture
def config_file(temp_dir: Path, config_yaml: str) -> Path:
    """Create a temporary configuration file."""
    path = temp_dir / "objects-tasks.yaml"
    path.write_text(config_yaml)
    return path


@pytest.fixture(autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Keep environment overrides and package logging setup out of other tests."""
    env_keys = [
        "LOG_LEVEL",
        "LOG_FILE",
        "LOG_FORMAT",
        "LOG_SELECTORS_LEVEL",
        "OBJECTS_TASKS_STRICT_COMBINATORS",
        "OBJECTS_TASKS_JSON_INDENT",
        "OBJECTS_TASKS_JSON_SORT_KEYS",
    ]
    saved_env = {key: os.environ.pop(key) for key in env_keys if key in os.environ}
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    selectors_logger = logging.getLogger(SELECTORS_LOGGER)

    yield

    for key in env_keys:
        os.environ.pop(key, None)
    os.environ.update(saved_env)
    # undo setup_logging
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    selectors_logger.setLevel(logging.NOTSET)
