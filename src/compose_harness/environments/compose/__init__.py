"""Compose process abstraction for resolving container ports.

This package provides a Protocol for compose processes and a docker compose
implementation.
"""

from .docker import DockerCompose, parse_ps_output
from .protocol import ComposeProcess

__all__ = [
    "ComposeProcess",
    "DockerCompose",
    "parse_ps_output",
]
