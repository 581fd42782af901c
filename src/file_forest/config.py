"""Configuration and logging setup for file_forest."""

from __future__ import annotations

import logging
from pathlib import Path

import pydantic
import yaml

from file_forest.models import ROOT_PARENT

PACKAGE_LOGGER = "file_forest"
LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"


class ForestConfig(pydantic.BaseModel):
    """Settings shared by every query."""

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    root_sentinel: int = pydantic.Field(
        default=ROOT_PARENT,
        description="Parent value meaning 'no parent'",
    )
    validate_structure: bool = pydantic.Field(
        default=False,
        description="Reject dangling parents, duplicate ids and cycles up front",
    )
    default_top_k: int = pydantic.Field(
        default=3,
        ge=0,
        description="Category count used by the tool wrapper when k is omitted",
    )
    log_level: str = pydantic.Field(default="WARNING")

    @pydantic.field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


DEFAULT_CONFIG = ForestConfig()


def load_config(path: Path | str) -> ForestConfig:
    """Load a ForestConfig from a YAML file and apply its log level.

    Args:
        path: Location of the YAML document.

    Returns:
        The parsed config. An empty document yields the defaults.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping or has invalid values.
    """
    config_path = Path(path)
    if not config_path.exists():
        msg = f"Config not found: {config_path}"
        raise FileNotFoundError(msg)

    data = yaml.safe_load(config_path.read_text())
    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"Config must be a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    config = ForestConfig.model_validate(data)
    configure_logging(config)
    return config


def configure_logging(
    level: ForestConfig | str | int = "WARNING",
) -> logging.Logger:
    """Attach a console handler to the package logger once.

    Args:
        level: A level name (any case), a numeric level, or a ForestConfig
            whose ``log_level`` is used.
    """
    if isinstance(level, ForestConfig):
        level = level.log_level
    elif isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
