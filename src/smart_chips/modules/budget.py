"""Budget module: offer a price cap when the result set spans a wide price range."""

from __future__ import annotations

from ..contracts.request import ComputeChipsRequest
from ..contracts.response import Chip
from ..utils.formatting import fixed, plain_number, price_label
from .base import ChipModule, ModuleResult


class BudgetModule(ChipModule):
    name = "BudgetModule"
    config_key = "budget"

    def execute(self, request: ComputeChipsRequest) -> ModuleResult:
        stats = request.stats
        threshold = request.config.thresholds.variance

        if stats.price_min <= 0:
            return self.skipped(
                f"price_min is {plain_number(stats.price_min)}, cannot compute variance ratio"
            )

        ratio = stats.price_max / stats.price_min

        if ratio > threshold:
            chip = Chip(
                label=f"Under ${price_label(stats.price_median)}",
                action=f"filter_price_max:{plain_number(stats.price_median)}",
                priority=90,
            )
            return self.fired(
                [chip],
                f"Variance ratio {fixed(ratio, 1)}x exceeds threshold {plain_number(threshold)}x",
            )

        return self.skipped(
            f"Variance ratio {fixed(ratio, 1)}x below threshold {plain_number(threshold)}x"
        )
