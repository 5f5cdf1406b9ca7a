"""Runtime settings read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DATA_DIR = Path(__file__).parent / "data"

_DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
)


@dataclass(frozen=True)
class Settings:
    catalog_dir: Path = DEFAULT_DATA_DIR
    log_level: str = "INFO"
    log_file: Path | None = None
    cors_origins: tuple[str, ...] = field(default=_DEFAULT_CORS_ORIGINS)

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``S16_*`` variables and ``CORS_ORIGINS``.

        ``CORS_ORIGINS`` is a comma-separated list appended to the local
        development origins; a lone ``*`` allows every origin.
        """
        catalog_dir = os.getenv("S16_CATALOG_DIR", "").strip()
        log_file = os.getenv("S16_LOG_FILE", "").strip()
        return cls(
            catalog_dir=Path(catalog_dir) if catalog_dir else DEFAULT_DATA_DIR,
            log_level=os.getenv("S16_LOG_LEVEL", "INFO").strip().upper() or "INFO",
            log_file=Path(log_file) if log_file else None,
            cors_origins=_parse_cors(os.getenv("CORS_ORIGINS", "")),
        )


def _parse_cors(raw_origins: str) -> tuple[str, ...]:
    parsed = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
    if parsed == ["*"]:
        return ("*",)
    return (*_DEFAULT_CORS_ORIGINS, *parsed)
