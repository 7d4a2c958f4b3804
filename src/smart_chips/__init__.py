"""
Smart Chips engine.

Computes a ranked list of quick-reply chips for a conversational commerce
assistant from product-search statistics, intent context and per-merchant
configuration.

Main entry points:
- compute_chips: validate -> run modules -> rank -> truncate
- hydrate_request_with_merchant_config: expand a merchant_id request
"""

from .contracts.channels import CHANNEL_LIMITS
from .contracts.request import ComputeChipsRequest, EngineConfig
from .contracts.response import Chip, ComputeChipsResponse, TraceEntry
from .engine.compute import compute_chips
from .merchants.hydrate import HydrationResult, hydrate_request_with_merchant_config

__version__ = "1.0.0"

__all__ = [
    "CHANNEL_LIMITS",
    "ComputeChipsRequest",
    "EngineConfig",
    "Chip",
    "ComputeChipsResponse",
    "TraceEntry",
    "compute_chips",
    "HydrationResult",
    "hydrate_request_with_merchant_config",
]
