"""
Request hydration.

Callers may send either a complete request (with `config`) or a short form
that names a merchant:

    {"merchant_id": "demo-electronics", "intent": "...", "channel": "web",
     "stats": {...}, "context": {...}, "config_overrides": {...}}

The short form is expanded into a complete request here. Everything that is
not about the merchant config is copied through untouched and left for the
request validator to judge.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .resolver import apply_engine_config_override, resolve_merchant_config, to_engine_config
from .store import MerchantConfigStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HydrationResult:
    ok: bool
    request: Any = None
    error: Optional[str] = None


def hydrate_request_with_merchant_config(
    payload: Any,
    store: Optional[MerchantConfigStore] = None,
) -> HydrationResult:
    """
    Expand a merchant-id request into a full compute-chips request.

    Pass-through cases (returned unchanged, ok=True):
    - payload is not a mapping
    - payload already carries a non-null `config`
    - `merchant_id` is missing, not a string, or blank

    Failures:
    - unknown merchant: "Unknown merchant_id: <id>"
    - bad overrides: "config_overrides invalid: ..."
    """
    if not isinstance(payload, Mapping):
        return HydrationResult(ok=True, request=payload)

    if payload.get("config") is not None:
        return HydrationResult(ok=True, request=payload)

    merchant_id = payload.get("merchant_id")
    if not isinstance(merchant_id, str) or not merchant_id.strip():
        return HydrationResult(ok=True, request=payload)

    merchant_config = resolve_merchant_config(merchant_id, store)
    if merchant_config is None:
        logger.info("Unknown merchant_id: %s", merchant_id)
        return HydrationResult(ok=False, error=f"Unknown merchant_id: {merchant_id}")

    merged = apply_engine_config_override(
        to_engine_config(merchant_config),
        payload.get("config_overrides"),
    )
    if not merged.ok:
        return HydrationResult(ok=False, error=merged.error)

    intent = payload.get("intent")
    request = {
        "intent": intent if isinstance(intent, str) else "",
        "channel": payload.get("channel"),
        "stats": payload.get("stats"),
        "config": merged.config.model_dump(exclude_none=True),
    }
    if "context" in payload:
        request["context"] = payload["context"]
    logger.debug("Hydrated request for merchant %s", merchant_id)
    return HydrationResult(ok=True, request=request)
