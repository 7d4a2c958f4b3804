"""
Rule module contract.

A module is a stateless rule unit mapped to one configuration toggle. Given a
validated request it returns the chips it wants to show and exactly one trace
entry explaining whether it fired. Modules never raise for a valid request: a
missing context or an unusable statistic is a non-firing outcome, not an error.

Each intent module recognises its context by one marker field (`auth_state`,
`cart_count`, `policy_type`) rather than by which context shape the validator
matched, so one context may feed more than one module.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Type, TypeVar

from pydantic import ValidationError

from ..contracts.request import ComputeChipsRequest, ContextModel, ModuleKey
from ..contracts.response import Chip, TraceEntry

MODULE_DISABLED_REASON = "Module disabled by config"

C = TypeVar("C", bound=ContextModel)


def context_view(request: ComputeChipsRequest, model: Type[C], marker: str) -> Optional[C]:
    """
    Return the request context as `model` when it carries `marker`.

    A context that matched another shape is re-validated as `model`, so the
    module only ever reads fields that passed validation. Returns None when the
    marker is absent or the context does not satisfy `model`.
    """
    ctx = request.context
    if ctx is None:
        return None
    if isinstance(ctx, model):
        return ctx
    raw = ctx.model_dump()
    if marker not in raw:
        return None
    try:
        return model.model_validate(raw)
    except ValidationError:
        return None


@dataclass(frozen=True)
class ModuleResult:
    trace: TraceEntry
    chips: List[Chip] = field(default_factory=list)

    @property
    def fired(self) -> bool:
        return self.trace.fired


class ChipModule(ABC):
    """Base class for the rule modules dispatched by the compute pipeline."""

    name: str
    config_key: ModuleKey

    @abstractmethod
    def execute(self, request: ComputeChipsRequest) -> ModuleResult:
        """Evaluate the rule against `request`."""

    def fired(self, chips: Iterable[Chip], reason: str) -> ModuleResult:
        return ModuleResult(
            chips=list(chips),
            trace=TraceEntry(module=self.name, fired=True, reason=reason),
        )

    def skipped(self, reason: str) -> ModuleResult:
        return ModuleResult(trace=TraceEntry(module=self.name, fired=False, reason=reason))

    def disabled_trace(self) -> TraceEntry:
        return TraceEntry(module=self.name, fired=False, reason=MODULE_DISABLED_REASON)

    def __repr__(self) -> str:
        return f"<{self.name} config_key={self.config_key!r}>"
