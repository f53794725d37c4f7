"""Appwrite Starter configuration.

Typed configuration for the SDK wrappers and the scaffolder. The Appwrite
connection settings are a Pydantic v2 model so they are validated at
construction time and can be built from environment variables without
boiler-plate. One ``AppwriteConfig`` is passed explicitly to every SDK wrapper
call; there is no process-wide client.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

# ---------------------------------------------------------------------------
# Template pack layout
# ---------------------------------------------------------------------------

TEMPLATES_DIR = Path(__file__).parent / "templates"
"""Root of the bundled template pack (``<framework>/<setup>/...``)."""

SERVICES_DIR = TEMPLATES_DIR / "appwrite"
"""Per-service client modules copied into ``src/appwrite`` of new projects."""

FRAMEWORKS: dict[str, str] = {
    "vuejs": "Vue.JS",
    "vanilla": "Vanilla",
}

SETUPS: dict[str, str] = {
    "basic": "Basic",
    "batteriesincluded": "Batteries-included",
}

SERVICES: dict[str, str] = {
    "account": "Account",
    "database": "Database",
    "functions": "Functions",
    "teams": "Teams",
    "storage": "Storage",
    "localization": "Localization",
    "avatars": "Avatars",
}

_TRUTHY = {"1", "true", "yes", "on"}


# ---------------------------------------------------------------------------
# Appwrite connection
# ---------------------------------------------------------------------------


class AppwriteConfig(BaseModel):
    """Connection settings for one Appwrite project.

    ``key`` authenticates server-side calls; ``jwt`` acts on behalf of a
    signed-in user. Either may be omitted for endpoints that allow guests.
    """

    endpoint: str = Field(default="", description="Appwrite API endpoint, e.g. https://host/v1")
    project: str = Field(default="", description="Appwrite project ID")
    key: str | None = Field(default=None, description="Server API key")
    jwt: str | None = Field(default=None, description="User JWT for session-scoped calls")
    self_signed: bool = Field(default=False, description="Accept self-signed TLS certificates")

    @field_validator("endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @property
    def is_configured(self) -> bool:
        """``True`` once both the endpoint and project ID are known."""
        return bool(self.endpoint and self.project)

    @classmethod
    def from_env(cls) -> "AppwriteConfig":
        """Build an ``AppwriteConfig`` from environment variables.

        Recognised variables (all optional):
            APPWRITE_ENDPOINT, APPWRITE_PROJECT, APPWRITE_KEY, APPWRITE_JWT,
            APPWRITE_SELF_SIGNED.
        """
        kwargs: dict[str, Any] = {
            "endpoint": os.environ.get("APPWRITE_ENDPOINT", ""),
            "project": os.environ.get("APPWRITE_PROJECT", ""),
        }
        if os.environ.get("APPWRITE_KEY"):
            kwargs["key"] = os.environ["APPWRITE_KEY"]
        if os.environ.get("APPWRITE_JWT"):
            kwargs["jwt"] = os.environ["APPWRITE_JWT"]
        kwargs["self_signed"] = os.environ.get("APPWRITE_SELF_SIGNED", "").lower() in _TRUTHY

        return cls(**kwargs)
