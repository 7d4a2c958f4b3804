"""
Order module (intent: track_order).

Rules:
- unknown shopper -> login / manual order-id entry
- known shopper -> one tracking chip per active (not returned) order
- any delivered order -> report-issue and return chips for the first one
- agent handoff whenever the store has a support phone

Per request: context.auth_state, context.recent_orders
Per store: store.support_phone
"""

from __future__ import annotations

from typing import List, Optional

from ..contracts.request import ComputeChipsRequest, OrderContext, StoreConfig
from ..contracts.response import Chip
from .base import ChipModule, ModuleResult, context_view

TRACK_BASE_PRIORITY = 85


def _agent_chip(store: Optional[StoreConfig]) -> Optional[Chip]:
    if store is None or not store.support_phone:
        return None
    return Chip(
        label="Talk to Agent",
        action=f"handoff:phone:{store.support_phone}",
        priority=60,
    )


class OrderModule(ChipModule):
    name = "OrderModule"
    config_key = "order"

    def execute(self, request: ComputeChipsRequest) -> ModuleResult:
        ctx = context_view(request, OrderContext, "auth_state")
        if ctx is None:
            return self.skipped("No order context provided in request")

        agent = _agent_chip(request.config.store)

        if ctx.auth_state == "unknown":
            chips: List[Chip] = [
                Chip(label="Login with Phone", action="auth:phone_login", priority=95),
                Chip(label="Enter Order ID", action="auth:manual_order_id", priority=90),
            ]
            if agent:
                chips.append(agent)
            handoff = " + agent handoff" if agent else ""
            return self.fired(chips, f"User unknown: offered login + manual entry{handoff}")

        active = [order for order in ctx.recent_orders if order.status != "returned"]
        delivered = [order for order in ctx.recent_orders if order.status == "delivered"]

        chips = [
            Chip(
                label=f"Track #{order.id}",
                action=f"track_specific_order:{order.id}",
                priority=TRACK_BASE_PRIORITY - position,
            )
            for position, order in enumerate(active)
        ]

        if delivered:
            first = delivered[0]
            chips.append(Chip(label="Report Issue", action=f"report_issue:{first.id}", priority=75))
            chips.append(Chip(label="Return Item", action=f"start_return:{first.id}", priority=70))

        if agent:
            chips.append(agent)

        return self.fired(
            chips,
            f"User known: {len(active)} active order(s), {len(delivered)} delivered",
        )
