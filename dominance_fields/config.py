"""
Configuration management for dominance-fields.
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .fields.enums import CachingType


def _parse_missing_value_strings(raw: str) -> List[str]:
    """
    Parse comma-separated missing value markers.

    - Strips whitespace from each marker
    - Filters out empty strings

    Examples:
        "?,*,NA" -> ["?", "*", "NA"]
        " ? , NA " -> ["?", "NA"]
        "" -> []
    """
    if not raw or not raw.strip():
        return []

    markers = [marker.strip() for marker in raw.split(",")]
    return [m for m in markers if m]


class Settings(BaseSettings):
    """Library settings, read from DOMINANCE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOMINANCE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Parsing
    missing_value_strings: str = Field(
        default="?,*,NA",
        description="Comma-separated texts read as a missing evaluation (case-insensitive)",
    )
    default_caching_type: CachingType = Field(
        default=CachingType.NONE, description="Cache tier used by the evaluation parser"
    )

    # Element lists
    hash_algorithm: str = Field(
        default="sha256", description="hashlib algorithm for element list digests"
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console", description="console or json")

    def missing_value_markers(self) -> List[str]:
        return _parse_missing_value_strings(self.missing_value_strings)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get library settings."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
