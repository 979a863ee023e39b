"""Readiness result type."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReadinessResult(BaseModel):
    """Outcome of a single readiness check or of a polling loop.

    Attributes:
        ready: Whether the checked condition holds.
        reason: Why the condition does not hold (empty when ready).
    """

    model_config = ConfigDict(frozen=True)

    ready: bool = Field(description="Whether the checked condition holds")
    reason: str = Field(default="", description="Why the condition does not hold (empty when ready)")

    @classmethod
    def success(cls) -> ReadinessResult:
        return cls(ready=True)

    @classmethod
    def failure(cls, reason: str) -> ReadinessResult:
        return cls(ready=False, reason=reason)

    def __bool__(self) -> bool:
        return self.ready


__all__ = ["ReadinessResult"]
