"""
Merchant configuration schemas.

MerchantConfigV1 is the stored, versioned record of one merchant: per-module
settings plus store metadata. EngineConfigOverride is what a caller may send
as `config_overrides` on top of a resolved merchant config. Unknown top-level
sections are rejected; unknown keys inside a section are dropped.
"""

from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import ConfigDict, Field, StrictBool, StrictStr

from ..contracts.request import ContractModel, IntegrationType, Number

# ---------------------------------------------------------------------------
# Stored merchant record (v1)
# ---------------------------------------------------------------------------


class MerchantStore(ContractModel):
    integration_type: Optional[IntegrationType] = None
    support_phone: Optional[StrictStr] = None


class BudgetSettings(ContractModel):
    enabled: StrictBool
    variance_threshold: Number = Field(gt=0)


class FacetSettings(ContractModel):
    enabled: StrictBool
    facet_share_threshold: Number = Field(ge=0, le=1)


class SortSettings(ContractModel):
    enabled: StrictBool
    rating_coverage_threshold: Number = Field(ge=0, le=1)


class OrderSettings(ContractModel):
    enabled: StrictBool


class CartSettings(ContractModel):
    enabled: StrictBool
    enable_cod: Optional[StrictBool] = None
    free_shipping_threshold: Optional[Number] = Field(default=None, ge=0)


class PolicySettings(ContractModel):
    enabled: StrictBool
    policy_links: Optional[Dict[str, StrictStr]] = None
    refund_window: Optional[StrictStr] = None


class MerchantModules(ContractModel):
    budget: BudgetSettings
    facet: FacetSettings
    sort: SortSettings
    order: OrderSettings
    cart: CartSettings
    policy: PolicySettings


class MerchantConfigV1(ContractModel):
    config_version: Literal[1]
    modules: MerchantModules
    store: Optional[MerchantStore] = None


# ---------------------------------------------------------------------------
# Caller-supplied overrides (strict at the top level)
# ---------------------------------------------------------------------------


class ModuleTogglesOverride(ContractModel):
    budget: Optional[StrictBool] = None
    facet: Optional[StrictBool] = None
    sort: Optional[StrictBool] = None
    order: Optional[StrictBool] = None
    cart: Optional[StrictBool] = None
    policy: Optional[StrictBool] = None


class ThresholdOverride(ContractModel):
    variance: Optional[Number] = Field(default=None, gt=0)
    facet_threshold: Optional[Number] = Field(default=None, ge=0, le=1)
    rating_threshold: Optional[Number] = Field(default=None, ge=0, le=1)


class StoreOverride(ContractModel):
    integration_type: Optional[IntegrationType] = None
    support_phone: Optional[StrictStr] = None
    enable_cod: Optional[StrictBool] = None
    free_shipping_threshold: Optional[Number] = None
    policy_links: Optional[Dict[str, StrictStr]] = None
    refund_window: Optional[StrictStr] = None


class EngineConfigOverride(ContractModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False, extra="forbid")

    modules: Optional[ModuleTogglesOverride] = None
    thresholds: Optional[ThresholdOverride] = None
    store: Optional[StoreOverride] = None
