"""
bootstrap/ - Configuration and entry points.
"""

from .config import (
    DragonboatConfig,
    LayoutConfig,
    DisplayConfig,
    EditorConfig,
    LoggingConfig,
    load_config,
    get_config,
    reset_config,
)

from .entrypoints import (
    cli_main,
    setup_logging,
)


__all__ = [
    # Config
    "DragonboatConfig",
    "LayoutConfig",
    "DisplayConfig",
    "EditorConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "reset_config",
    # Entry Points
    "cli_main",
    "setup_logging",
]
