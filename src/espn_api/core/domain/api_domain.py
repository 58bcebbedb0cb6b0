"""ESPN API families ("domains").

Each domain groups the endpoints that share a base URL. Keeping the enum in
the domain layer lets configuration, the request façade and the CLI share a
single source of truth without importing each other.
"""

from __future__ import annotations

from enum import Enum


class Domain(str, Enum):
    """Named base-URL keys for the ESPN endpoint families."""

    SITE = "site"
    SITE_V2 = "site_v2"
    CORE = "core"
    WEB = "web"
    NOW = "now"
    CDN = "cdn"

    @classmethod
    def parse(cls, value: "Domain | str") -> "Domain":
        """Return the member for `value` (member or its string value)."""

        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return self.value.replace("_", " ")


DEFAULT_BASE_URLS: dict[Domain, str] = {
    Domain.SITE: "https://site.api.espn.com/apis/site/v2",
    Domain.SITE_V2: "https://site.api.espn.com/apis/v2",
    Domain.CORE: "https://sports.core.api.espn.com/v2",
    Domain.WEB: "https://site.web.api.espn.com/apis/common/v3",
    Domain.NOW: "https://now.core.api.espn.com/v1",
    Domain.CDN: "https://cdn.espn.com/core",
}
