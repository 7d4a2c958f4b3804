"""
Contracts (data models).

This folder defines the request/response shapes of the chip engine:
- the compute-chips request (stats, optional intent context, engine config)
- chips, trace entries and the response envelope
- channel limits and scenario presets

Why this exists:
- The pipeline, the rule modules, the merchant-config resolver and the HTTP
  layer all rely on the same validated models instead of ad-hoc dicts.
"""

from .channels import CHANNEL_LIMITS, Channel
from .request import (
    MODULE_KEYS,
    CartContext,
    ComputeChipsRequest,
    EngineConfig,
    FacetData,
    FacetValue,
    IntentContext,
    ModuleKey,
    ModuleToggles,
    OrderContext,
    PolicyContext,
    RecentOrder,
    SearchStats,
    StoreConfig,
    ThresholdConfig,
)
from .response import Chip, ComputeChipsResponse, TraceEntry

__all__ = [
    # channels
    "CHANNEL_LIMITS", "Channel",
    # request
    "MODULE_KEYS", "CartContext", "ComputeChipsRequest", "EngineConfig",
    "FacetData", "FacetValue", "IntentContext", "ModuleKey", "ModuleToggles",
    "OrderContext", "PolicyContext", "RecentOrder", "SearchStats",
    "StoreConfig", "ThresholdConfig",
    # response
    "Chip", "ComputeChipsResponse", "TraceEntry",
]
