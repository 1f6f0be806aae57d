"""
Centralized settings for the storefront.

Values come from ``STOREFRONT_*`` environment variables with sensible
defaults, so the CLI works out of the box from a source checkout.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from storefront.domain.service.catalog_query import DEFAULT_PAGE_SIZE


def get_project_root() -> Path:
    """Project root when installed in editable mode (the repo root)."""
    return Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    data_dir: Path
    page_size: int = DEFAULT_PAGE_SIZE
    log_level: str = "WARNING"

    @property
    def catalog_file(self) -> Path:
        return self.data_dir / "catalog.json"

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Load settings from the environment."""
        env = os.environ if environ is None else environ

        data_dir = env.get("STOREFRONT_DATA_DIR")
        raw_page_size = env.get("STOREFRONT_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))
        try:
            page_size = int(raw_page_size)
        except ValueError:
            raise ValueError(f"STOREFRONT_PAGE_SIZE must be an integer, got {raw_page_size!r}")
        if page_size < 1:
            raise ValueError(f"STOREFRONT_PAGE_SIZE must be positive, got {page_size}")

        return cls(
            data_dir=Path(data_dir) if data_dir else get_project_root() / "data",
            page_size=page_size,
            log_level=env.get("STOREFRONT_LOG_LEVEL", "WARNING").upper(),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
