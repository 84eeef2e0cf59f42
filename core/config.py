"""Configuration management."""
from dataclasses import dataclass
from typing import Optional
import os

import pytz
from dotenv import load_dotenv

load_dotenv()


def _parse_timezone(key: str) -> Optional[str]:
    """Parse an optional IANA timezone name from environment."""
    name = os.getenv(key, "").strip()
    if not name:
        return None
    try:
        pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        raise ValueError(f"Invalid {key}: unknown timezone {name!r}")
    return name


def _parse_log_level(key: str, default: str) -> str:
    """Parse a logging level name from environment."""
    value = os.getenv(key, default).strip().upper()
    if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"Invalid {key}: {value!r}")
    return value


@dataclass(frozen=True)
class Config:
    """Application configuration."""
    # Local timezone for predicates (None = system timezone)
    local_timezone: Optional[str]

    # Logging
    log_level: str
    log_file: str

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment."""
        return cls(
            local_timezone=_parse_timezone("LOCAL_TZ"),
            log_level=_parse_log_level("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", "time_rules.log"),
        )
