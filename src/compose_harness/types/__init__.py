"""Type definitions for compose_harness."""

from .readiness import ReadinessResult

__all__ = [
    "ReadinessResult",
]
