"""One container handle per name."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from .container import Container

if TYPE_CHECKING:
    from compose_harness.environments.compose import ComposeProcess


class ContainerCache:
    """Hands out a single Container per name for one compose process.

    Reusing the handle means each container's ports are resolved once per
    test session.

    Args:
        compose_process: Process shared by every handle created by this cache.
        poll_interval: Poll interval passed to created handles.
    """

    def __init__(self, *, compose_process: ComposeProcess, poll_interval: float | None = None) -> None:
        self.compose_process = compose_process
        self.poll_interval = poll_interval
        self._containers: dict[str, Container] = {}
        self._lock = threading.Lock()

    def container(self, name: str) -> Container:
        """Get the handle for `name`, creating it on first request."""
        with self._lock:
            if name not in self._containers:
                self._containers[name] = Container(
                    name=name,
                    compose_process=self.compose_process,
                    poll_interval=self.poll_interval,
                )
            return self._containers[name]

    def __len__(self) -> int:
        return len(self._containers)

    def __contains__(self, name: object) -> bool:
        return name in self._containers


__all__ = ["ContainerCache"]
