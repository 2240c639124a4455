"""
Configuration loader for cursorvec.
Loads settings from cursorvec.json with fallback defaults.
Without an explicit path, files are resolved against the current working directory.
"""

import json
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, Type, TypeVar

from cursorvec.utils.exceptions import ConfigError
from cursorvec.utils.logging_config import get_logger, setup_logging


logger = get_logger("config")

DEFAULT_CONFIG_FILENAME = "cursorvec.json"

S = TypeVar("S")


@dataclass
class ContainerConfig:
    """Default behaviour for containers built with CursorVec.from_config."""
    rotatable: bool = False
    strict: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration applied by Config.apply_logging."""
    level: str = "WARNING"
    console: bool = True
    file: bool = False
    log_dir: Optional[str] = None


@dataclass
class Config:
    """Main configuration class."""
    container: ContainerConfig = field(default_factory=ContainerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """
        Create Config from dictionary.

        Raises:
            ConfigError: If a section is not a mapping or names an unknown field
        """
        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be a mapping")
        return cls(
            container=_build_section(ContainerConfig, "container", data.get("container", {})),
            logging=_build_section(LoggingConfig, "logging", data.get("logging", {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            "container": asdict(self.container),
            "logging": asdict(self.logging),
        }

    def apply_logging(self):
        """Configure the cursorvec logger namespace from the logging section."""
        return setup_logging(
            level=self.logging.level,
            log_dir=Path(self.logging.log_dir) if self.logging.log_dir else None,
            console=self.logging.console,
            file=self.logging.file,
        )


def _build_section(section_cls: Type[S], name: str, values: Any) -> S:
    if not isinstance(values, dict):
        raise ConfigError(f"Section '{name}' must be a mapping", section=name)
    try:
        return section_cls(**values)
    except TypeError as e:
        raise ConfigError(f"Invalid field in section '{name}': {e}", section=name) from e


def _resolve_config_path(config_path: Optional[str]) -> Path:
    if config_path is None:
        return Path.cwd() / DEFAULT_CONFIG_FILENAME
    return Path(config_path)


# Global config instance
_config: Optional[Config] = None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to the JSON file. If None, uses cursorvec.json in the
            current working directory.

    Returns:
        Config instance with loaded or default values.
    """
    global _config

    resolved_path = _resolve_config_path(config_path)

    if resolved_path.exists():
        try:
            with open(resolved_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            _config = Config.from_dict(data)
            logger.info("Loaded configuration from %s", resolved_path)
        except (OSError, ValueError, ConfigError) as e:
            logger.warning("Error loading %s: %s. Using defaults.", resolved_path, e)
            _config = Config()
    else:
        logger.debug("%s not found. Using defaults.", resolved_path)
        _config = Config()

    return _config


def get_config() -> Config:
    """
    Get the current configuration. Loads from file if not already loaded.

    Returns:
        Config instance.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[Config]) -> None:
    """
    Set a custom configuration.

    Args:
        config: Config instance to use, or None to reload from file on next access.
    """
    global _config
    _config = config


def save_config(config: Config, config_path: Optional[str] = None) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: Config instance to save.
        config_path: Path to save to. If None, saves to cursorvec.json in the
            current working directory.
    """
    resolved_path = _resolve_config_path(config_path)

    with open(resolved_path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=4)

    logger.info("Saved configuration to %s", resolved_path)
