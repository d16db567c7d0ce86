"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DB_PATH = Path("data/tigerfive.db")
DEFAULT_MIRROR_URL = "https://builder.empromptu.ai/api_tools"
DEFAULT_MIRROR_TIMEOUT = 10.0
DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


@dataclass
class Settings:
    """Application settings.

    An empty ``mirror_url`` disables the remote mirror.
    """

    db_path: Path = DEFAULT_DB_PATH
    mirror_url: str = DEFAULT_MIRROR_URL
    mirror_token: str | None = None
    mirror_app_id: str | None = None
    mirror_usage_key: str | None = None
    mirror_timeout: float = DEFAULT_MIRROR_TIMEOUT
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def _split_origins(raw: str | None) -> list[str]:
    if raw is None:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def load_settings() -> Settings:
    """Build settings from TIGERFIVE_* environment variables."""
    timeout_raw = os.environ.get("TIGERFIVE_MIRROR_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_MIRROR_TIMEOUT
    except ValueError:
        timeout = DEFAULT_MIRROR_TIMEOUT

    return Settings(
        db_path=Path(os.environ.get("TIGERFIVE_DB_PATH", str(DEFAULT_DB_PATH))),
        mirror_url=os.environ.get("TIGERFIVE_MIRROR_URL", DEFAULT_MIRROR_URL).rstrip("/"),
        mirror_token=os.environ.get("TIGERFIVE_MIRROR_TOKEN") or None,
        mirror_app_id=os.environ.get("TIGERFIVE_MIRROR_APP_ID") or None,
        mirror_usage_key=os.environ.get("TIGERFIVE_MIRROR_USAGE_KEY") or None,
        mirror_timeout=timeout,
        cors_origins=_split_origins(os.environ.get("TIGERFIVE_CORS_ORIGINS")),
    )
