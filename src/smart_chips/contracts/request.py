"""
Request contracts.

Defines the shape of a compute-chips request:
- aggregate product-search statistics (prices, rating coverage, facets)
- an optional intent context (order tracking, cart, or policy)
- the engine configuration (module toggles, thresholds, store data)

The three context shapes carry no discriminant field. They are validated in
order (order, cart, policy) and the first shape that accepts the payload wins.
Context models keep unknown keys, so a rule module can still find its own
fields (e.g. `policy_type`) on a context that parsed as another shape.

Optional fields may be omitted but not sent as `null`.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator
from pydantic_core import PydanticCustomError

from .channels import Channel

ModuleKey = Literal["budget", "facet", "sort", "order", "cart", "policy"]
MODULE_KEYS: Tuple[str, ...] = ("budget", "facet", "sort", "order", "cart", "policy")

IntegrationType = Literal["shopify", "courier_api", "manual"]
OrderStatus = Literal["processing", "shipped", "delivered", "returned"]
PolicyType = Literal["returns", "shipping", "warranty", "general"]


def _require_number(value: Any) -> Any:
    # bool is an int subclass; numeric strings are not numbers either
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("number_type", "Input should be a valid number")
    return value


Number = Annotated[float, BeforeValidator(_require_number)]


def _reject_null(value: Any) -> Any:
    # omitted is fine, explicit null is not
    if value is None:
        raise PydanticCustomError("null_type", "Input should not be null")
    return value


class ContractModel(BaseModel):
    """Base for request-side contracts: immutable, finite numbers only."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


# ---------------------------------------------------------------------------
# Product discovery statistics
# ---------------------------------------------------------------------------

class FacetValue(ContractModel):
    value: StrictStr
    share: Number = Field(ge=0, le=1)


class FacetData(ContractModel):
    name: StrictStr
    values: List[FacetValue]


class SearchStats(ContractModel):
    price_min: Number = Field(ge=0)
    price_max: Number = Field(ge=0)
    price_median: Number = Field(ge=0)
    rating_coverage: Number = Field(ge=0, le=1)
    facets: List[FacetData]


# ---------------------------------------------------------------------------
# Intent-specific context (dynamic per request)
# ---------------------------------------------------------------------------

class ContextModel(ContractModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False, extra="allow")


class RecentOrder(ContractModel):
    id: StrictStr
    status: OrderStatus


class OrderContext(ContextModel):
    auth_state: Literal["known", "unknown"]
    recent_orders: List[RecentOrder]


class CartContext(ContextModel):
    cart_count: Number = Field(ge=0)
    cart_value: Number = Field(ge=0)
    currency: StrictStr
    payment_methods: List[StrictStr]


class PolicyContext(ContextModel):
    policy_type: PolicyType
    current_product: Optional[StrictStr] = None

    @field_validator("current_product", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


INTENT_CONTEXT_MODELS = (OrderContext, CartContext, PolicyContext)

IntentContext = Annotated[
    Union[OrderContext, CartContext, PolicyContext],
    Field(union_mode="left_to_right"),
]


# ---------------------------------------------------------------------------
# Engine configuration (static per store, no code change)
# ---------------------------------------------------------------------------

class StoreConfig(ContractModel):
    # Order tracking
    integration_type: Optional[IntegrationType] = None
    support_phone: Optional[StrictStr] = None
    # Cart / checkout
    enable_cod: Optional[StrictBool] = None
    free_shipping_threshold: Optional[Number] = None
    # Policies
    policy_links: Optional[Dict[str, StrictStr]] = None
    refund_window: Optional[StrictStr] = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class ModuleToggles(ContractModel):
    budget: StrictBool
    facet: StrictBool
    sort: StrictBool
    order: StrictBool
    cart: StrictBool
    policy: StrictBool

    def is_enabled(self, key: str) -> bool:
        return bool(getattr(self, key))


class ThresholdConfig(ContractModel):
    variance: Number = Field(gt=0)
    facet_threshold: Number = Field(ge=0, le=1)
    rating_threshold: Number = Field(ge=0, le=1)


class EngineConfig(ContractModel):
    config_version: Optional[StrictInt] = Field(default=None, gt=0)
    modules: ModuleToggles
    thresholds: ThresholdConfig
    store: Optional[StoreConfig] = None

    @field_validator("config_version", "store", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class ComputeChipsRequest(ContractModel):
    intent: StrictStr
    channel: Channel
    stats: SearchStats
    context: Optional[IntentContext] = None
    config: EngineConfig

    @field_validator("context", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)
