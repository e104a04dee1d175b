"""Configuration management for checkers."""

import logging
import os
import sys
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from dataclasses import dataclass, field, asdict

logger = logging.getLogger(__name__)

# Log formats shared by console and file handlers
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
LOG_FORMAT_DETAILED = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_log_level(level: Union[int, str]) -> int:
    """Turn a level name such as "debug" into its number. Raises ValueError for unknown names."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level!r}")
    return value


def setup_logger(
    name: str = "checkers",
    log_file: Optional[str] = None,
    level: Union[int, str] = logging.INFO
) -> logging.Logger:
    """
    Attach handlers to the package logger: stdout always, a file when ``log_file`` is set.

    Calling it again for an already configured logger only updates the level.
    """
    level = parse_log_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    handlers[0].setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
        handlers[1].setFormatter(logging.Formatter(LOG_FORMAT_DETAILED, datefmt=LOG_DATE_FORMAT))

    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    return logger


def get_config_dir() -> Path:
    """Get the configuration directory."""
    # Use XDG on Linux/WSL, or fallback
    if os.name == 'nt':
        config_base = Path(os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming'))
    else:
        config_base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))
    return config_base / 'checkers'


def get_config_file() -> Path:
    """Get the configuration file path."""
    return get_config_dir() / 'settings.yaml'


@dataclass
class SessionSettings:
    """Console game settings."""
    human_color: str = "red"  # red, white
    seed: Optional[int] = None  # Seed for the computer's move choice
    show_board: bool = True


@dataclass
class LoggingSettings:
    """Logging settings."""
    level: str = "WARNING"
    file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class."""
    session: SessionSettings = field(default_factory=SessionSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'session': asdict(self.session),
            'logging': asdict(self.logging),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        config = cls()

        if 'session' in data:
            config.session = SessionSettings(**data['session'])
        if 'logging' in data:
            config.logging = LoggingSettings(**data['logging'])

        if config.session.human_color not in ("red", "white"):
            raise ValueError(f"session.human_color must be red or white, not {config.session.human_color!r}")
        parse_log_level(config.logging.level)

        return config

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = get_config_file()

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from file. Falls back to defaults if it is missing or invalid."""
        if path is None:
            path = get_config_file()

        if not path.exists():
            return cls()

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
            if data is None:
                return cls()
            return cls.from_dict(data)
        except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
            logger.warning("Failed to load config from %s: %s", path, e)
            return cls()


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def save_config() -> None:
    """Save the global configuration."""
    global _config
    if _config is not None:
        _config.save()


def reset_config() -> Config:
    """Reset configuration to defaults (in memory only)."""
    global _config
    _config = Config()
    return _config
