#!/usr/bin/env python3
from dataclasses import dataclass
import logging
import os
from typing import Optional
from dotenv import load_dotenv

from .errors import UsageError

load_dotenv()

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ["true", "1", "yes"]


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise UsageError(f"{name} must be an integer, got {raw!r}")


def _env_timeout() -> Optional[float]:
    raw = os.getenv("WEBSHOT_TIMEOUT", "")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise UsageError(f"WEBSHOT_TIMEOUT must be a number of seconds, got {raw!r}")


@dataclass
class Config:
    """Application configuration"""
    renderer: str = "chromium"
    chromium_bin: Optional[str] = None
    virtual_time_budget: int = 5000
    default_width: int = 1400
    default_height: int = 900
    timeout: Optional[float] = None
    verify: bool = False
    show_renderer_log: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> 'Config':
        """
        Create config from environment variables

        Raises:
            UsageError: a numeric variable does not parse
        """
        return cls(
            renderer=os.getenv("WEBSHOT_RENDERER", "chromium").lower(),
            chromium_bin=os.getenv("WEBSHOT_CHROMIUM_BIN") or None,
            virtual_time_budget=_env_int("WEBSHOT_VIRTUAL_TIME_BUDGET", "5000"),
            default_width=_env_int("WEBSHOT_DEFAULT_WIDTH", "1400"),
            default_height=_env_int("WEBSHOT_DEFAULT_HEIGHT", "900"),
            timeout=_env_timeout(),
            verify=_env_bool("WEBSHOT_VERIFY", "false"),
            show_renderer_log=_env_bool("WEBSHOT_SHOW_RENDERER_LOG", "false"),
            log_level=os.getenv("WEBSHOT_LOG_LEVEL", "WARNING").upper(),
        )


def load_config() -> Config:
    # Importing the package must not fail on a bad environment; the CLI
    # re-reads it with Config.from_env() and reports the UsageError.
    try:
        return Config.from_env()
    except UsageError as e:
        logger.warning(f"Ignoring environment configuration: {e}")
        return Config()


config = load_config()
