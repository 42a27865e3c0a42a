"""
Runtime configuration for scrybot.

Values come from environment variables (a local .env file is loaded first).

Priority order for every setting:
1. SCRYBOT_* environment variable
2. Default below
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from . import __version__
from .types import COLOR

DEFAULT_API_BASE = "https://api.scryfall.com"
DEFAULT_FOOTER = "Scryfall"
DEFAULT_FOOTER_ICON = "https://scryfall.com/favicon.ico"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"SCRYBOT_TIMEOUT must be a number of seconds, got {raw!r}")
    if value <= 0:
        raise ValueError(f"SCRYBOT_TIMEOUT must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    """Immutable settings bound to clients and responses at construction."""

    api_base: str = DEFAULT_API_BASE
    """Card database root URL, without trailing slash"""

    user_agent: str = f"scrybot/{__version__}"
    """User-Agent header sent with every request"""

    color: str = COLOR
    """Attachment sidebar color"""

    timeout: Optional[float] = None
    """Request timeout in seconds; None keeps the httpx default"""

    footer: str = DEFAULT_FOOTER
    footer_icon: Optional[str] = DEFAULT_FOOTER_ICON

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment, loading .env if present."""
        load_dotenv()
        return cls(
            api_base=os.getenv("SCRYBOT_API_BASE", DEFAULT_API_BASE).rstrip("/"),
            user_agent=os.getenv("SCRYBOT_USER_AGENT", f"scrybot/{__version__}"),
            color=os.getenv("SCRYBOT_COLOR", COLOR),
            timeout=_parse_timeout(os.getenv("SCRYBOT_TIMEOUT")),
            footer=os.getenv("SCRYBOT_FOOTER", DEFAULT_FOOTER),
            footer_icon=os.getenv("SCRYBOT_FOOTER_ICON", DEFAULT_FOOTER_ICON) or None,
            log_level=os.getenv("SCRYBOT_LOG_LEVEL", "INFO").upper(),
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
