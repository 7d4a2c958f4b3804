"""Pytest fixtures for the chip engine tests."""

import copy
from typing import Any, Dict, Optional

import pytest

from smart_chips.contracts.presets import EMPTY_STATS
from smart_chips.contracts.request import MODULE_KEYS, ComputeChipsRequest
from smart_chips.merchants.store import DEFAULT_MERCHANT_CONFIG_PATH, MerchantConfigStore, load_merchant_store

DEFAULT_THRESHOLDS = {"variance": 2.0, "facet_threshold": 0.2, "rating_threshold": 0.5}


def build_request(
    stats: Optional[Dict[str, Any]] = None,
    context: Optional[Dict[str, Any]] = None,
    modules: Optional[Dict[str, bool]] = None,
    thresholds: Optional[Dict[str, Any]] = None,
    store: Optional[Dict[str, Any]] = None,
    channel: str = "web",
    intent: str = "product_discovery",
) -> Dict[str, Any]:
    """Raw request dict; every module is off unless switched on in `modules`."""
    toggles = {key: False for key in MODULE_KEYS}
    toggles.update(modules or {})
    config: Dict[str, Any] = {
        "modules": toggles,
        "thresholds": {**DEFAULT_THRESHOLDS, **(thresholds or {})},
    }
    if store is not None:
        config["store"] = store

    request: Dict[str, Any] = {
        "intent": intent,
        "channel": channel,
        "stats": stats if stats is not None else copy.deepcopy(EMPTY_STATS),
        "config": config,
    }
    if context is not None:
        request["context"] = context
    return request


@pytest.fixture
def make_request():
    """Factory for raw request dicts."""
    return build_request


@pytest.fixture
def parse_request():
    """Factory for validated requests, for calling a module's execute() directly."""

    def _parse(**kwargs) -> ComputeChipsRequest:
        return ComputeChipsRequest.model_validate(build_request(**kwargs))

    return _parse


@pytest.fixture
def merchant_store() -> MerchantConfigStore:
    """The packaged demo merchants, loaded from an explicit path."""
    return load_merchant_store(DEFAULT_MERCHANT_CONFIG_PATH)


@pytest.fixture
def discovery_stats() -> Dict[str, Any]:
    return {
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
                ],
            },
        ],
    }
