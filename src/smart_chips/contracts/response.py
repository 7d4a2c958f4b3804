"""
Response contracts returned by the compute pipeline.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Chip(BaseModel):
    """A single suggested quick-reply action."""

    model_config = ConfigDict(frozen=True)

    label: str
    action: str
    priority: int


class TraceEntry(BaseModel):
    """Per-module audit record: whether the module fired and why."""

    model_config = ConfigDict(frozen=True)

    module: str
    fired: bool
    reason: str


class ComputeChipsResponse(BaseModel):
    option: Literal["success", "error"]
    chips: List[Chip] = Field(default_factory=list)
    trace: List[TraceEntry] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.option == "success"

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict; `error` is omitted on success."""
        return self.model_dump(exclude_none=True)

    @classmethod
    def failure(cls, error: str) -> "ComputeChipsResponse":
        return cls(option="error", chips=[], trace=[], error=error)
