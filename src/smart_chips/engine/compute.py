"""
Compute pipeline - main entry point of the chip engine.

validate -> run enabled modules in registry order -> rank -> truncate
"""

from __future__ import annotations

import logging
from typing import Any, List

from ..contracts.channels import CHANNEL_LIMITS
from ..contracts.response import Chip, ComputeChipsResponse, TraceEntry
from ..modules import ALL_MODULES
from .ranking import rank_chips, truncate_chips
from .validation import validate_request

logger = logging.getLogger(__name__)


def compute_chips(payload: Any) -> ComputeChipsResponse:
    """
    Compute the ranked chips for one request.

    Args:
        payload: any value; it is validated against the request contract
            before anything runs.

    Returns:
        A success response with chips and one trace entry per registered
        module, or an error response (empty chips and trace) describing every
        validation failure. This function does not raise for bad input.
    """
    validation = validate_request(payload)
    if not validation.ok:
        logger.info("Rejected compute_chips request: %s", validation.error)
        return ComputeChipsResponse.failure(validation.error or "Invalid request")

    request = validation.request
    pooled: List[Chip] = []
    trace: List[TraceEntry] = []

    for module in ALL_MODULES:
        if not request.config.modules.is_enabled(module.config_key):
            trace.append(module.disabled_trace())
            continue

        result = module.execute(request)
        pooled.extend(result.chips)
        trace.append(result.trace)
        logger.debug(
            "[%s] fired=%s chips=%d reason=%s",
            module.name, result.fired, len(result.chips), result.trace.reason,
        )

    limit = CHANNEL_LIMITS[request.channel]
    chips = truncate_chips(rank_chips(pooled), limit)

    logger.info(
        "Computed chips: intent=%s channel=%s pooled=%d returned=%d fired=%s",
        request.intent,
        request.channel,
        len(pooled),
        len(chips),
        [entry.module for entry in trace if entry.fired],
    )
    return ComputeChipsResponse(option="success", chips=chips, trace=trace)
