"""Sort module: offer rating sort only when enough results carry ratings."""

from __future__ import annotations

from ..contracts.request import ComputeChipsRequest
from ..contracts.response import Chip
from ..utils.formatting import percent
from .base import ChipModule, ModuleResult


class SortModule(ChipModule):
    name = "SortModule"
    config_key = "sort"

    def execute(self, request: ComputeChipsRequest) -> ModuleResult:
        coverage = request.stats.rating_coverage
        threshold = request.config.thresholds.rating_threshold

        if coverage > threshold:
            return self.fired(
                [Chip(label="Best Rated", action="sort:rating_desc", priority=80)],
                f"Rating coverage {percent(coverage)}% exceeds threshold {percent(threshold)}%",
            )
        return self.skipped(
            f"Rating coverage {percent(coverage)}% below threshold {percent(threshold)}%"
        )
