"""
Compute engine.

This package wires together:
- engine.validation (request contract check with aggregated errors)
- modules (the fixed registry of rule modules)
- engine.ranking (stable priority sort and channel truncation)
"""

from .compute import compute_chips
from .ranking import rank_chips, truncate_chips
from .validation import ValidationResult, format_validation_errors, validate_request

__all__ = [
    "compute_chips",
    "rank_chips",
    "truncate_chips",
    "ValidationResult",
    "format_validation_errors",
    "validate_request",
]
