"""
Merchant config store.

Merchant configs live in a YAML file (config/merchants.yml by default):

    merchants:
      demo-electronics:
        config_version: 1
        modules: {...}
        store: {...}

Every record is validated with Pydantic when the file is loaded, so a bad
record fails at startup instead of on the first request for that merchant.
After loading the store is only read.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional

import yaml
from pydantic import ValidationError

from ..utils.settings import load_settings
from .schema import MerchantConfigV1

logger = logging.getLogger(__name__)

DEFAULT_MERCHANT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "merchants.yml"


class MerchantConfigStore:
    """Read-only lookup of merchant id -> MerchantConfigV1."""

    def __init__(self, records: Optional[Mapping[str, MerchantConfigV1]] = None):
        self._records: Dict[str, MerchantConfigV1] = dict(records or {})

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "MerchantConfigStore":
        """Validate raw records (e.g. parsed YAML) and build a store.

        Raises:
            ValidationError: if any record does not match MerchantConfigV1
        """
        records = {
            str(merchant_id): MerchantConfigV1.model_validate(record)
            for merchant_id, record in raw.items()
        }
        return cls(records)

    def get(self, merchant_id: str) -> Optional[MerchantConfigV1]:
        return self._records.get(merchant_id)

    def ids(self) -> List[str]:
        return sorted(self._records)

    def __contains__(self, merchant_id: object) -> bool:
        return merchant_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids())


def load_merchant_store(config_path: Optional[Path] = None) -> MerchantConfigStore:
    """
    Load and validate merchant configs from a YAML file.

    Args:
        config_path: Path to the YAML file. Defaults to MERCHANT_CONFIG_PATH
            from the environment, else the packaged config/merchants.yml.

    Returns:
        Validated MerchantConfigStore

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the `merchants` section is not a mapping
        ValidationError: If a merchant record doesn't match the schema
    """
    if config_path is None:
        config_path = load_settings().merchant_config_path or DEFAULT_MERCHANT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Merchant config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    merchants = data.get("merchants") if isinstance(data, dict) else None
    if merchants is None:
        merchants = {}
    if not isinstance(merchants, dict):
        raise ValueError(f"'merchants' must be a mapping in {config_path}")

    try:
        store = MerchantConfigStore.from_mapping(merchants)
    except ValidationError as e:
        logger.error("Merchant config validation failed for %s: %s", config_path, e)
        raise

    logger.info("Loaded %d merchant config(s) from %s", len(store), config_path)
    return store


@lru_cache(maxsize=1)
def get_default_store() -> MerchantConfigStore:
    """Process-wide store, loaded on first use."""
    return load_merchant_store()
