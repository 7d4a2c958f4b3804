"""Structural validation of compute-chips requests.

The validator accepts any value and never raises. Every violation found by the
request contract is reported in one string of ``"<field.path>: <message>"``
entries joined by ``"; "`` so callers can show the whole list at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from ..contracts.request import INTENT_CONTEXT_MODELS, ComputeChipsRequest

ROOT_PATH = "(root)"

# pydantic tags each failed union member with its class name in `loc`
_UNION_MEMBER_TAGS = frozenset(model.__name__ for model in INTENT_CONTEXT_MODELS)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation step.

    Attributes:
        ok: True when the input satisfied the contract.
        error: aggregated violation message when `ok` is False.
        request: the parsed request when `ok` is True (request validation only).
    """

    ok: bool
    error: Optional[str] = None
    request: Optional[ComputeChipsRequest] = None


def _field_path(loc) -> str:
    parts = []
    for index, part in enumerate(loc):
        if index > 0 and loc[index - 1] == "context" and part in _UNION_MEMBER_TAGS:
            continue
        parts.append(str(part))
    return ".".join(parts) or ROOT_PATH


def format_validation_errors(exc: ValidationError) -> str:
    # dict.fromkeys drops repeats left once union tags are stripped
    parts = dict.fromkeys(f"{_field_path(issue['loc'])}: {issue['msg']}" for issue in exc.errors())
    return "; ".join(parts)


def validate_request(payload: Any) -> ValidationResult:
    """Check `payload` against the full request contract without running modules."""
    try:
        request = ComputeChipsRequest.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(ok=False, error=format_validation_errors(exc))
    return ValidationResult(ok=True, request=request)
