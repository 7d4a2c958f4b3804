"""
Policy module (intent: check_policy).

Rules:
- link to the full policy page when the store configured one for this type
- returns -> start-return flow (label carries the refund window when set)
- shipping -> pivot to order tracking
- warranty -> warranty status check
- product being discussed -> link back to it
- always a pivot back to shopping so the session does not dead-end

Per request: context.policy_type, context.current_product
Per store: store.policy_links, store.refund_window
"""

from __future__ import annotations

from typing import List

from ..contracts.request import ComputeChipsRequest, PolicyContext
from ..contracts.response import Chip
from .base import ChipModule, ModuleResult, context_view


class PolicyModule(ChipModule):
    name = "PolicyModule"
    config_key = "policy"

    def execute(self, request: ComputeChipsRequest) -> ModuleResult:
        ctx = context_view(request, PolicyContext, "policy_type")
        if ctx is None:
            return self.skipped("No policy context provided in request")

        store = request.config.store
        chips: List[Chip] = []
        reasons: List[str] = []

        links = (store.policy_links if store else None) or {}
        policy_url = links.get(ctx.policy_type)
        if policy_url:
            chips.append(Chip(label="Read Full Policy", action=f"link:{policy_url}", priority=90))
            reasons.append("linked full policy")

        if ctx.policy_type == "returns":
            window = store.refund_window if store else None
            label = f"Start a Return ({window})" if window else "Start a Return"
            chips.append(Chip(label=label, action="flow:start_return", priority=85))
            reasons.append("offered return flow")
        elif ctx.policy_type == "shipping":
            chips.append(Chip(label="Track My Order", action="navigate:track_order", priority=85))
            reasons.append("pivoted to order tracking")
        elif ctx.policy_type == "warranty":
            chips.append(Chip(label="Check Warranty Status", action="flow:warranty_check", priority=85))
            reasons.append("offered warranty check")

        if ctx.current_product:
            chips.append(
                Chip(
                    label=f"View {ctx.current_product}",
                    action=f"navigate:product:{ctx.current_product}",
                    priority=75,
                )
            )
            reasons.append(f"linked back to {ctx.current_product}")

        chips.append(Chip(label="Back to Shopping", action="navigate:shop", priority=60))
        chips.append(Chip(label="View Best Sellers", action="navigate:best_sellers", priority=55))
        reasons.append("added shopping pivot")

        return self.fired(chips, f'Policy type "{ctx.policy_type}": {", ".join(reasons)}')
