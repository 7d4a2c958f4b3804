"""
Merchant configuration.

This package provides:
- schema: stored merchant records (MerchantConfigV1) and strict overrides
- store: YAML-backed, read-only merchant lookup
- resolver: record -> EngineConfig mapping and override merging
- hydrate: expansion of merchant-id requests into full requests
"""

from .hydrate import HydrationResult, hydrate_request_with_merchant_config
from .resolver import (
    OVERRIDE_ERROR_PREFIX,
    OverrideResult,
    apply_engine_config_override,
    merge_store_config,
    resolve_merchant_config,
    to_engine_config,
    validate_merchant_config,
)
from .schema import EngineConfigOverride, MerchantConfigV1
from .store import (
    DEFAULT_MERCHANT_CONFIG_PATH,
    MerchantConfigStore,
    get_default_store,
    load_merchant_store,
)

__all__ = [
    "HydrationResult",
    "hydrate_request_with_merchant_config",
    "OVERRIDE_ERROR_PREFIX",
    "OverrideResult",
    "apply_engine_config_override",
    "merge_store_config",
    "resolve_merchant_config",
    "to_engine_config",
    "validate_merchant_config",
    "EngineConfigOverride",
    "MerchantConfigV1",
    "DEFAULT_MERCHANT_CONFIG_PATH",
    "MerchantConfigStore",
    "get_default_store",
    "load_merchant_store",
]
