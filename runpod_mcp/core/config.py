# =============================================================================
# core/config.py  -  Process Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the server's configuration from the environment ONCE, at startup,
#   and freezes it into a Settings value.
#
# WHERE VALUES COME FROM:
#   1. A .env file in the working directory (loaded by python-dotenv,
#      never overriding variables that are already set)
#   2. The process environment
#
#   RUNPOD_API_KEY          required, the bearer token for every request
#   RUNPOD_API_BASE_URL     optional, defaults to the public REST API
#   RUNPOD_TIMEOUT_SECONDS  optional, per-request timeout (default 30)
#   RUNPOD_MCP_LOG_LEVEL    optional, logging level name (default INFO)
#
# WHY A VALUE AND NOT A GLOBAL?
#   The transport takes Settings in its constructor.  Tests build a
#   Settings with a fake key and never touch os.environ.
# =============================================================================

from dataclasses import dataclass
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from runpod_mcp.core.errors import ConfigurationError


DEFAULT_API_BASE_URL = "https://rest.runpod.io/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Immutable server configuration."""

    api_key: str
    api_base_url: str = DEFAULT_API_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks.
        return (
            f"Settings(api_key='***', api_base_url={self.api_base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r}, log_level={self.log_level!r})"
        )


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read from.  When omitted, the .env file is
                 loaded and os.environ is used.

    Raises:
        ConfigurationError: RUNPOD_API_KEY is missing or blank, or
            RUNPOD_TIMEOUT_SECONDS is not a positive number.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    api_key = (environ.get("RUNPOD_API_KEY") or "").strip()
    if not api_key:
        raise ConfigurationError("RUNPOD_API_KEY environment variable is required")

    base_url = (environ.get("RUNPOD_API_BASE_URL") or DEFAULT_API_BASE_URL).strip()

    raw_timeout = environ.get("RUNPOD_TIMEOUT_SECONDS")
    timeout = DEFAULT_TIMEOUT_SECONDS
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(
                f"RUNPOD_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}"
            )
        if timeout <= 0:
            raise ConfigurationError("RUNPOD_TIMEOUT_SECONDS must be positive")

    log_level = (environ.get("RUNPOD_MCP_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()

    return Settings(
        api_key=api_key,
        api_base_url=base_url.rstrip("/"),
        timeout_seconds=timeout,
        log_level=log_level,
    )
