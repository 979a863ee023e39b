"""Core modules for compose_harness."""

from .utils.logging import setup_compose_harness_logging

__all__ = [
    "setup_compose_harness_logging",
]
