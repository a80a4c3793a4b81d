"""Configuration file discovery and loading for bump rule sets"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, ValidationError as PydanticValidationError, field_validator

from sem_version.versioning.exceptions import ConfigError, InvalidPatternError
from sem_version.versioning.rules import DEFAULT_CONFIG_YAML, RuleSet, default_rule_set

APP_NAME = "sem-version"

CONFIG_FILE_NAMES = (f".{APP_NAME}.yaml", f".{APP_NAME}.yml")

logger = logging.getLogger(__name__)


class RuleSetConfig(BaseModel):
    """Shape of a configuration file: pattern lists per tier."""

    major: List[str] = []
    minor: List[str] = []
    patch: List[str] = []

    @field_validator("major", "minor", "patch", mode="before")
    @classmethod
    def validate_tier(cls, v):
        # "major:" without entries loads as None
        return [] if v is None else v


def find_config_file(directory: Union[str, Path]) -> Optional[Path]:
    """
    Look for a configuration file in ``directory``.

    Returns:
        Path of the first existing file in CONFIG_FILE_NAMES, or None
    """
    for name in CONFIG_FILE_NAMES:
        path = Path(directory) / name
        if path.is_file():
            return path
    return None


def load_config(config_path: Union[str, Path]) -> RuleSet:
    """
    Load a RuleSet from a YAML configuration file.

    A tier missing from the file has no patterns; unknown keys are ignored.

    Args:
        config_path: Path to the YAML file

    Raises:
        ConfigError: If the file cannot be read or is not a mapping of pattern lists
        InvalidPatternError: If a pattern does not compile
    """
    config_path = Path(config_path)

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(str(config_path), f"Could not read config file: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(str(config_path), f"YAML file format error: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            str(config_path), "Expected a mapping with 'major', 'minor' and 'patch' lists"
        )

    try:
        cfg = RuleSetConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(str(config_path), f"Invalid configuration: {e}")

    try:
        rule_set = RuleSet.from_patterns(
            major=cfg.major, minor=cfg.minor, patch=cfg.patch
        )
    except InvalidPatternError as e:
        e.config_path = str(config_path)
        raise

    logger.debug(f"Using config: {config_path}")
    return rule_set


def load_default(directory: Union[str, Path]) -> RuleSet:
    """Load the configuration found in ``directory``, or the built-in defaults."""
    config_path = find_config_file(directory)
    if config_path is None:
        return default_rule_set()
    return load_config(config_path)


def write_default_config(directory: Union[str, Path]) -> Path:
    """
    Write the default configuration file into ``directory``.

    Raises:
        ConfigError: If the file already exists or cannot be written
    """
    config_path = Path(directory) / CONFIG_FILE_NAMES[0]
    if config_path.exists():
        raise ConfigError(str(config_path), "config file already exists")

    try:
        with open(config_path, "w") as f:
            f.write(DEFAULT_CONFIG_YAML)
    except OSError as e:
        raise ConfigError(str(config_path), f"Could not write config file: {e}")

    return config_path
