"""Facet module: surface facet values when a facet meaningfully splits results."""

from __future__ import annotations

from typing import List

from ..contracts.request import ComputeChipsRequest
from ..contracts.response import Chip
from ..utils.formatting import percent, round_half_up
from .base import ChipModule, ModuleResult

# A facet only helps narrowing when at least this many values are significant.
MIN_QUALIFYING_VALUES = 2


class FacetModule(ChipModule):
    name = "FacetModule"
    config_key = "facet"

    def execute(self, request: ComputeChipsRequest) -> ModuleResult:
        threshold = request.config.thresholds.facet_threshold
        chips: List[Chip] = []

        for facet in request.stats.facets:
            qualifying = [v for v in facet.values if v.share > threshold]
            if len(qualifying) < MIN_QUALIFYING_VALUES:
                continue
            for facet_value in qualifying:
                chips.append(
                    Chip(
                        label=facet_value.value,
                        action=f"filter_facet:{facet.name}:{facet_value.value}",
                        priority=70 + round_half_up(facet_value.share * 10),
                    )
                )

        if chips:
            return self.fired(
                chips,
                f"Generated {len(chips)} chips from facets exceeding {percent(threshold)}% share",
            )
        return self.skipped(
            f"No facet had 2+ values exceeding {percent(threshold)}% share threshold"
        )
