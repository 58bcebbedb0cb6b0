"""Client configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets the façade, the HTTP adapter and the CLI read config the same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from espn_api.core.domain.api_domain import DEFAULT_BASE_URLS, Domain


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "espn-api"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "espn-api"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "espn-api"
    return Path.home() / ".config" / "espn-api"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def check_base_url(domain: Domain, url: str) -> str:
    """Raise `ValueError` unless `url` is an http(s) URL."""

    if not isinstance(url, str) or not url.startswith(("http://", "https://")):
        raise ValueError(f"base URL for {domain.value!r} must be http(s): {url!r}")
    return url


class ESPNSettings(BaseSettings):
    """Central client configuration.

    Every field can be set through an `ESPN_API_*` environment variable,
    e.g. `ESPN_API_HTTP_TIMEOUT_SECONDS=5` or
    `ESPN_API_BASE_URLS='{"site": "http://localhost:8000"}'`.
    """

    model_config = SettingsConfigDict(
        env_prefix="ESPN_API_",
        extra="ignore",
        case_sensitive=False,
        # Project first, then the user-wide config file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="espn-api/0.1 (+https://github.com)",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    base_urls: dict[Domain, str] = Field(
        default_factory=dict,
        description="Base URL overrides per domain (merged over the defaults).",
    )
    default_league: str = Field(
        default="nfl",
        min_length=1,
        description="League used by accessors when none is passed.",
    )

    @field_validator("base_urls")
    @classmethod
    def _check_base_urls(cls, value: dict[Domain, str]) -> dict[Domain, str]:
        for domain, url in value.items():
            check_base_url(domain, url)
        return value

    def resolved_base_urls(self) -> dict[Domain, str]:
        """Defaults merged with the configured overrides."""

        merged = dict(DEFAULT_BASE_URLS)
        merged.update(self.base_urls)
        return merged
