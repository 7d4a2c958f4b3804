"""
Ranking and channel truncation of pooled chips.
"""

from __future__ import annotations

from typing import Iterable, List

from ..contracts.response import Chip


def rank_chips(chips: Iterable[Chip]) -> List[Chip]:
    """Sort by priority, highest first.

    The sort is stable: chips with equal priority keep their pool order, which
    is module registry order and then the order each module emitted them.
    """
    return sorted(chips, key=lambda chip: chip.priority, reverse=True)


def truncate_chips(chips: List[Chip], limit: int) -> List[Chip]:
    return list(chips[:max(limit, 0)])
