"""
Merchant config resolution.

Turns a stored MerchantConfigV1 into the EngineConfig the compute pipeline
consumes, and layers caller overrides on top of it.

Merge rules:
- `modules` and `thresholds`: override keys replace base keys
- `store`: override keys replace base keys, except `policy_links` which is a
  map union where the override wins on a key collision
- an override that fails validation is rejected as a whole
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..contracts.request import EngineConfig, ModuleToggles, StoreConfig, ThresholdConfig
from ..engine.validation import ValidationResult, format_validation_errors
from .schema import EngineConfigOverride, MerchantConfigV1
from .store import MerchantConfigStore, get_default_store

logger = logging.getLogger(__name__)

OVERRIDE_ERROR_PREFIX = "config_overrides invalid: "


@dataclass(frozen=True)
class OverrideResult:
    ok: bool
    config: Optional[EngineConfig] = None
    error: Optional[str] = None


def resolve_merchant_config(
    merchant_id: str,
    store: Optional[MerchantConfigStore] = None,
) -> Optional[MerchantConfigV1]:
    """Look up a merchant record; None when the id is unknown."""
    store = store if store is not None else get_default_store()
    return store.get(merchant_id)


def merge_store_config(
    base: Optional[StoreConfig],
    override: Optional[StoreConfig],
) -> Optional[StoreConfig]:
    """
    Merge two store configs.

    Fields set on `override` replace those on `base`. `policy_links` from both
    sides are combined, and the result always carries a (possibly empty) map.
    Returns None only when both sides are None.
    """
    if base is None and override is None:
        return None

    merged: Dict[str, Any] = {}
    if base is not None:
        merged.update(base.model_dump(exclude_none=True))
    if override is not None:
        merged.update(override.model_dump(exclude_none=True))

    links: Dict[str, str] = {}
    if base is not None and base.policy_links:
        links.update(base.policy_links)
    if override is not None and override.policy_links:
        links.update(override.policy_links)
    merged["policy_links"] = links

    return StoreConfig.model_validate(merged)


def to_engine_config(merchant_config: MerchantConfigV1) -> EngineConfig:
    """Flatten a stored merchant record into the runtime EngineConfig shape."""
    modules = merchant_config.modules

    toggles = ModuleToggles(
        budget=modules.budget.enabled,
        facet=modules.facet.enabled,
        sort=modules.sort.enabled,
        order=modules.order.enabled,
        cart=modules.cart.enabled,
        policy=modules.policy.enabled,
    )
    thresholds = ThresholdConfig(
        variance=modules.budget.variance_threshold,
        facet_threshold=modules.facet.facet_share_threshold,
        rating_threshold=modules.sort.rating_coverage_threshold,
    )

    base_store = None
    if merchant_config.store is not None:
        base_store = StoreConfig.model_validate(merchant_config.store.model_dump(exclude_none=True))
    module_fields = {
        "enable_cod": modules.cart.enable_cod,
        "free_shipping_threshold": modules.cart.free_shipping_threshold,
        "policy_links": modules.policy.policy_links,
        "refund_window": modules.policy.refund_window,
    }
    module_store = StoreConfig.model_validate(
        {key: value for key, value in module_fields.items() if value is not None}
    )

    return EngineConfig(
        config_version=merchant_config.config_version,
        modules=toggles,
        thresholds=thresholds,
        store=merge_store_config(base_store, module_store),
    )


def _merge_modules(base: ModuleToggles, override: EngineConfigOverride) -> ModuleToggles:
    if override.modules is None:
        return base
    return base.model_copy(update=override.modules.model_dump(exclude_none=True))


def _merge_thresholds(base: ThresholdConfig, override: EngineConfigOverride) -> ThresholdConfig:
    if override.thresholds is None:
        return base
    return base.model_copy(update=override.thresholds.model_dump(exclude_none=True))


def _merge_store(base: Optional[StoreConfig], override: EngineConfigOverride) -> Optional[StoreConfig]:
    if override.store is None:
        return merge_store_config(base, None)
    store_override = StoreConfig.model_validate(override.store.model_dump(exclude_none=True))
    return merge_store_config(base, store_override)


def apply_engine_config_override(base: EngineConfig, override_input: Any) -> OverrideResult:
    """
    Apply caller-supplied `config_overrides` to a base EngineConfig.

    Args:
        base: config built from the merchant record
        override_input: raw override value from the request (any JSON value)

    Returns:
        OverrideResult with the merged config, or with an error string
        prefixed "config_overrides invalid: " when the override is rejected.
    """
    if override_input is None:
        return OverrideResult(ok=True, config=base)

    try:
        override = EngineConfigOverride.model_validate(override_input)
    except ValidationError as exc:
        error = OVERRIDE_ERROR_PREFIX + format_validation_errors(exc)
        logger.info("Rejected config override: %s", error)
        return OverrideResult(ok=False, error=error)

    merged = base.model_copy(
        update={
            "modules": _merge_modules(base.modules, override),
            "thresholds": _merge_thresholds(base.thresholds, override),
            "store": _merge_store(base.store, override),
        }
    )
    return OverrideResult(ok=True, config=merged)


def validate_merchant_config(record: Any) -> ValidationResult:
    """Check a raw merchant record against MerchantConfigV1."""
    try:
        MerchantConfigV1.model_validate(record)
    except ValidationError as exc:
        return ValidationResult(ok=False, error=format_validation_errors(exc))
    return ValidationResult(ok=True)
