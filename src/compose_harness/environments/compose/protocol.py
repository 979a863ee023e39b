"""Compose process protocol definition.

Defines the interface a container handle needs to resolve its port mappings,
so test code can plug in docker compose, another runtime, or a fake.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from compose_harness.environments.connection.ports import Ports


@runtime_checkable
class ComposeProcess(Protocol):
    """Protocol for processes that can report a container's published ports."""

    def ports(self, *, name: str) -> Ports:
        """Get the current port mappings of a container.

        Args:
            name: Container (compose service) name.

        Returns:
            Ports in the order reported by the runtime.

        Raises:
            ComposeExecutionError: If the runtime command fails.
            OSError: If the runtime could not be invoked.
        """
        ...


__all__ = ["ComposeProcess"]
