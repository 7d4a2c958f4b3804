"""
Scenario presets.

Stats-only presets cover product discovery (budget / facet / sort modules).
Full-request presets cover the intent-specific modules and show which values
arrive per request (context) and which are configured per store (config.store).

Presets are plain dicts in the wire shape accepted by `compute_chips`. Use
`get_preset()` to obtain an independent copy before modifying one.
"""

from __future__ import annotations

import copy
from typing import Any, Dict

_THRESHOLDS = {"variance": 2.0, "facet_threshold": 0.2, "rating_threshold": 0.5}


def _only(module: str) -> Dict[str, bool]:
    toggles = {key: False for key in ("budget", "facet", "sort", "order", "cart", "policy")}
    toggles[module] = True
    return toggles


EMPTY_STATS: Dict[str, Any] = {
    "price_min": 0,
    "price_max": 0,
    "price_median": 0,
    "rating_coverage": 0,
    "facets": [],
}

# ---------------------------------------------------------------------------
# Product discovery presets (stats only)
# ---------------------------------------------------------------------------

PRESET_MIXED_BAG: Dict[str, Any] = {
    "price_min": 25,
    "price_max": 1200,
    "price_median": 450,
    "rating_coverage": 0.72,
    "facets": [
        {
            "name": "gender",
            "values": [
                {"value": "Men's", "share": 0.45},
                {"value": "Women's", "share": 0.40},
                {"value": "Unisex", "share": 0.15},
            ],
        },
        {
            "name": "brand",
            "values": [
                {"value": "Nike", "share": 0.35},
                {"value": "Adidas", "share": 0.30},
                {"value": "Puma", "share": 0.20},
                {"value": "Other", "share": 0.15},
            ],
        },
    ],
}

PRESET_CHEAP_SIMPLE: Dict[str, Any] = {
    "price_min": 10,
    "price_max": 18,
    "price_median": 14,
    "rating_coverage": 0.6,
    "facets": [
        {
            "name": "color",
            "values": [
                {"value": "Black", "share": 0.8},
                {"value": "White", "share": 0.12},
                {"value": "Other", "share": 0.08},
            ],
        },
    ],
}

PRESET_NO_RATINGS: Dict[str, Any] = {
    "price_min": 50,
    "price_max": 3000,
    "price_median": 800,
    "rating_coverage": 0.05,
    "facets": [
        {
            "name": "category",
            "values": [
                {"value": "Laptops", "share": 0.4},
                {"value": "Tablets", "share": 0.35},
                {"value": "Accessories", "share": 0.25},
            ],
        },
    ],
}

# ---------------------------------------------------------------------------
# Track order (input: auth_state, recent_orders / configured: support_phone)
# ---------------------------------------------------------------------------

PRESET_TRACK_ORDER_KNOWN: Dict[str, Any] = {
    "intent": "track_order",
    "channel": "whatsapp",
    "stats": EMPTY_STATS,
    "context": {
        "auth_state": "known",
        "recent_orders": [
            {"id": "1001", "status": "shipped"},
            {"id": "1002", "status": "processing"},
        ],
    },
    "config": {
        "modules": _only("order"),
        "thresholds": _THRESHOLDS,
        "store": {"integration_type": "shopify", "support_phone": "+1-800-555-0199"},
    },
}

PRESET_TRACK_ORDER_UNKNOWN: Dict[str, Any] = {
    "intent": "track_order",
    "channel": "whatsapp",
    "stats": EMPTY_STATS,
    "context": {"auth_state": "unknown", "recent_orders": []},
    "config": {
        "modules": _only("order"),
        "thresholds": _THRESHOLDS,
        "store": {"integration_type": "shopify", "support_phone": "+1-800-555-0199"},
    },
}

# ---------------------------------------------------------------------------
# Checkout help (input: cart_* / configured: enable_cod, free_shipping_threshold)
# ---------------------------------------------------------------------------

PRESET_CHECKOUT_WITH_CART: Dict[str, Any] = {
    "intent": "checkout_help",
    "channel": "web",
    "stats": EMPTY_STATS,
    "context": {
        "cart_count": 3,
        "cart_value": 45.0,
        "currency": "USD",
        "payment_methods": ["stripe", "cod"],
    },
    "config": {
        "modules": _only("cart"),
        "thresholds": _THRESHOLDS,
        "store": {"enable_cod": True, "free_shipping_threshold": 50},
    },
}

PRESET_CHECKOUT_EMPTY: Dict[str, Any] = {
    "intent": "checkout_help",
    "channel": "web",
    "stats": EMPTY_STATS,
    "context": {
        "cart_count": 0,
        "cart_value": 0,
        "currency": "USD",
        "payment_methods": ["stripe"],
    },
    "config": {
        "modules": _only("cart"),
        "thresholds": _THRESHOLDS,
        "store": {"enable_cod": False, "free_shipping_threshold": 50},
    },
}

# ---------------------------------------------------------------------------
# Check policy (input: policy_type, current_product / configured: links, window)
# ---------------------------------------------------------------------------

PRESET_POLICY_RETURNS: Dict[str, Any] = {
    "intent": "check_policy",
    "channel": "web",
    "stats": EMPTY_STATS,
    "context": {"policy_type": "returns", "current_product": "Nike Air Max 90"},
    "config": {
        "modules": _only("policy"),
        "thresholds": _THRESHOLDS,
        "store": {
            "policy_links": {
                "returns": "https://store.example.com/policies/returns",
                "shipping": "https://store.example.com/policies/shipping",
            },
            "refund_window": "30 days",
        },
    },
}

PRESET_POLICY_SHIPPING: Dict[str, Any] = {
    "intent": "check_policy",
    "channel": "whatsapp",
    "stats": EMPTY_STATS,
    "context": {"policy_type": "shipping"},
    "config": {
        "modules": _only("policy"),
        "thresholds": _THRESHOLDS,
        "store": {
            "policy_links": {"shipping": "https://store.example.com/policies/shipping"},
            "refund_window": "30 days",
        },
    },
}

STATS_PRESETS: Dict[str, Dict[str, Any]] = {
    "mixed_bag": PRESET_MIXED_BAG,
    "cheap_simple": PRESET_CHEAP_SIMPLE,
    "no_ratings": PRESET_NO_RATINGS,
}

REQUEST_PRESETS: Dict[str, Dict[str, Any]] = {
    "track_order_known": PRESET_TRACK_ORDER_KNOWN,
    "track_order_unknown": PRESET_TRACK_ORDER_UNKNOWN,
    "checkout_with_cart": PRESET_CHECKOUT_WITH_CART,
    "checkout_empty": PRESET_CHECKOUT_EMPTY,
    "policy_returns": PRESET_POLICY_RETURNS,
    "policy_shipping": PRESET_POLICY_SHIPPING,
}


def get_preset(name: str) -> Dict[str, Any]:
    """Return a deep copy of a stats or request preset by name.

    Raises:
        KeyError: if no preset has that name.
    """
    if name in STATS_PRESETS:
        return copy.deepcopy(STATS_PRESETS[name])
    if name in REQUEST_PRESETS:
        return copy.deepcopy(REQUEST_PRESETS[name])
    raise KeyError(f"Unknown preset: {name}")
