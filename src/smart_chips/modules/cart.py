"""
Cart module (intent: checkout_help).

Rules:
- empty cart -> browse / deals chips, nothing else
- items in cart -> checkout chip showing the cart value
- below the free-shipping threshold -> upsell chip with the missing amount
- COD enabled by the store and offered at checkout -> cash-on-delivery chip
- items in cart -> view-cart chip

Per request: context.cart_count, context.cart_value, context.currency,
context.payment_methods
Per store: store.enable_cod, store.free_shipping_threshold
"""

from __future__ import annotations

from typing import List

from ..contracts.request import CartContext, ComputeChipsRequest
from ..contracts.response import Chip
from ..utils.formatting import fixed, plain_number
from .base import ChipModule, ModuleResult, context_view


def currency_symbol(currency: str) -> str:
    return "$" if currency == "USD" else currency


class CartModule(ChipModule):
    name = "CartModule"
    config_key = "cart"

    def execute(self, request: ComputeChipsRequest) -> ModuleResult:
        ctx = context_view(request, CartContext, "cart_count")
        if ctx is None:
            return self.skipped("No cart context provided in request")

        store = request.config.store
        sym = currency_symbol(ctx.currency)

        if ctx.cart_count == 0:
            return self.fired(
                [
                    Chip(label="Browse Products", action="navigate:shop", priority=90),
                    Chip(label="View Deals", action="navigate:deals", priority=85),
                ],
                "Cart empty: offered browse + deals to recover session",
            )

        value = fixed(ctx.cart_value, 2)
        chips: List[Chip] = [
            Chip(label=f"Checkout ({sym}{value})", action="checkout:proceed", priority=95)
        ]

        # 0 or unset means the store has no free-shipping offer
        threshold = store.free_shipping_threshold if store else None
        if threshold and ctx.cart_value < threshold:
            diff = fixed(threshold - ctx.cart_value, 2)
            chips.append(
                Chip(
                    label=f"Add {sym}{diff} for Free Ship",
                    action=f"navigate:upsell:{diff}",
                    priority=85,
                )
            )

        if store and store.enable_cod and "cod" in ctx.payment_methods:
            chips.append(Chip(label="Pay with Cash (COD)", action="checkout:cod", priority=80))

        chips.append(Chip(label="View Cart", action="navigate:cart", priority=70))

        free_ship = f" (free shipping at {sym}{plain_number(threshold)})" if threshold else ""
        return self.fired(
            chips,
            f"Cart has {plain_number(ctx.cart_count)} item(s) worth {sym}{value}{free_ship}",
        )
