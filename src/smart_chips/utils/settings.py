"""
Runtime settings loader.

Settings come from environment variables (optionally from a `.env` file in the
working directory). Nothing here is needed by the compute core itself; the HTTP
app, the merchant store and the demo CLI read it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Configuration container for the HTTP app and the merchant store."""

    merchant_config_path: Optional[Path]
    log_level: str
    cors_origins: Tuple[str, ...]


def _split_csv(raw: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def load_settings() -> Settings:
    """
    Load settings from the environment.

    Recognised variables:
        MERCHANT_CONFIG_PATH: YAML file with merchant configs (defaults to the
            packaged config/merchants.yml)
        LOG_LEVEL: logging level name, default INFO
        CORS_ORIGINS: comma-separated allowed origins, default "*"
    """
    load_dotenv()

    merchant_path = os.getenv("MERCHANT_CONFIG_PATH", "").strip()
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    cors_origins = _split_csv(os.getenv("CORS_ORIGINS", "*")) or ("*",)

    return Settings(
        merchant_config_path=Path(merchant_path) if merchant_path else None,
        log_level=log_level,
        cors_origins=cors_origins,
    )
