"""
Configuration Logger - Centralized config mapping and logging

Single place that knows which environment variable feeds which
config field. Used by the CLI at debug level and by the doctor command.
"""

import logging
from typing import Any, Dict, Optional

from .config import Config, config

logger = logging.getLogger(__name__)


def get_all_config_variables(cfg: Optional[Config] = None) -> Dict[str, Any]:
    """
    Get all configuration variables with their env names and current values.

    Returns:
        Dict mapping env variable names to their current values
    """
    cfg = cfg or config
    return {
        # Renderer
        "WEBSHOT_RENDERER": cfg.renderer,
        "WEBSHOT_CHROMIUM_BIN": cfg.chromium_bin or "None",
        "WEBSHOT_VIRTUAL_TIME_BUDGET": cfg.virtual_time_budget,
        "WEBSHOT_TIMEOUT": cfg.timeout if cfg.timeout is not None else "None",

        # Viewport
        "WEBSHOT_DEFAULT_WIDTH": cfg.default_width,
        "WEBSHOT_DEFAULT_HEIGHT": cfg.default_height,

        # Result checking / output
        "WEBSHOT_VERIFY": cfg.verify,
        "WEBSHOT_SHOW_RENDERER_LOG": cfg.show_renderer_log,
        "WEBSHOT_LOG_LEVEL": cfg.log_level,
    }


def format_config_lines(cfg: Optional[Config] = None) -> list[str]:
    """Render the config map as ``NAME=value`` lines, sorted by name."""
    variables = get_all_config_variables(cfg)
    return [f"{name}={value}" for name, value in sorted(variables.items())]


def log_config(cfg: Optional[Config] = None) -> None:
    """Log every config variable at debug level."""
    for line in format_config_lines(cfg):
        logger.debug(f"config: {line}")
