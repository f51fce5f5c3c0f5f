"""
bootstrap/config.py - Application configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

from ..core.constants import (
    DEFAULT_NUM_ALTERNATES,
    DEFAULT_NUM_ROWS,
    DEFAULT_ROW_SPACING,
    MAX_NUM_ROWS,
    MIN_NUM_ROWS,
)
from ..core.unit_converter import normalize_unit

logger = logging.getLogger("bootstrap.config")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class LayoutConfig:
    """Boat geometry defaults."""

    default_rows: int = DEFAULT_NUM_ROWS
    min_rows: int = MIN_NUM_ROWS
    max_rows: int = MAX_NUM_ROWS
    row_spacing: float = DEFAULT_ROW_SPACING
    include_drummer: bool = True
    include_steer: bool = True
    num_alternates: int = DEFAULT_NUM_ALTERNATES

    @classmethod
    def from_env(cls) -> "LayoutConfig":
        return cls(
            default_rows=int(os.getenv("DRAGONBOAT_DEFAULT_ROWS", str(DEFAULT_NUM_ROWS))),
            min_rows=int(os.getenv("DRAGONBOAT_MIN_ROWS", str(MIN_NUM_ROWS))),
            max_rows=int(os.getenv("DRAGONBOAT_MAX_ROWS", str(MAX_NUM_ROWS))),
            row_spacing=float(os.getenv("DRAGONBOAT_ROW_SPACING", str(DEFAULT_ROW_SPACING))),
            include_drummer=_env_bool("DRAGONBOAT_INCLUDE_DRUMMER", "true"),
            include_steer=_env_bool("DRAGONBOAT_INCLUDE_STEER", "true"),
            num_alternates=int(os.getenv("DRAGONBOAT_NUM_ALTERNATES", str(DEFAULT_NUM_ALTERNATES))),
        )

    def clamp_rows(self, num_rows: int) -> int:
        return max(self.min_rows, min(self.max_rows, int(num_rows)))


@dataclass
class DisplayConfig:
    """How weights are shown to people."""

    weight_unit: str = "lb"
    decimals: int = 1

    @classmethod
    def from_env(cls) -> "DisplayConfig":
        return cls(
            weight_unit=normalize_unit(os.getenv("DRAGONBOAT_WEIGHT_UNIT", "lb")).value,
            decimals=int(os.getenv("DRAGONBOAT_WEIGHT_DECIMALS", "1")),
        )


@dataclass
class EditorConfig:
    """Lineup editor behaviour."""

    strict_mode: bool = False

    @classmethod
    def from_env(cls) -> "EditorConfig":
        return cls(
            strict_mode=_env_bool("DRAGONBOAT_STRICT_MODE", "false"),
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("DRAGONBOAT_LOG_LEVEL", "INFO"),
            format=os.getenv("DRAGONBOAT_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            log_file=os.getenv("DRAGONBOAT_LOG_FILE"),
            json_logs=_env_bool("DRAGONBOAT_JSON_LOGS", "false"),
        )


@dataclass
class DragonboatConfig:
    """Root configuration."""

    environment: str = "development"
    debug: bool = False
    version: str = "0.1.0"

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "DragonboatConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("DRAGONBOAT_ENVIRONMENT", "development"),
            debug=_env_bool("DRAGONBOAT_DEBUG", "false"),
            layout=LayoutConfig.from_env(),
            display=DisplayConfig.from_env(),
            editor=EditorConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "DragonboatConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "DragonboatConfig":
        """Create config from dictionary, file values over environment."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        for section in ("layout", "display", "editor", "logging"):
            if section in data:
                target = getattr(config, section)
                for key, value in data[section].items():
                    if hasattr(target, key):
                        setattr(target, key, value)
                    else:
                        logger.warning(f"Ignoring unknown config key: {section}.{key}")

        config.display.weight_unit = normalize_unit(config.display.weight_unit).value
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "layout": {
                "default_rows": self.layout.default_rows,
                "min_rows": self.layout.min_rows,
                "max_rows": self.layout.max_rows,
                "row_spacing": self.layout.row_spacing,
                "include_drummer": self.layout.include_drummer,
                "include_steer": self.layout.include_steer,
                "num_alternates": self.layout.num_alternates,
            },
            "display": {
                "weight_unit": self.display.weight_unit,
                "decimals": self.display.decimals,
            },
            "editor": {
                "strict_mode": self.editor.strict_mode,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[DragonboatConfig] = None


def load_config(filepath: str = None) -> DragonboatConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        DragonboatConfig instance
    """
    global _config

    if filepath:
        _config = DragonboatConfig.from_file(filepath)
    else:
        default_paths = [
            "./dragonboat.json",
            "./config/dragonboat.json",
            os.path.expanduser("~/.dragonboat/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = DragonboatConfig.from_file(path)
                return _config

        _config = DragonboatConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> DragonboatConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config
    _config = None
