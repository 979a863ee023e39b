"""Ordered set of a container's published ports."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from compose_harness.core.utils import poll_until
from compose_harness.types.readiness import ReadinessResult

from .docker_port import DockerPort


class Ports:
    """Immutable, ordered collection of DockerPort entries.

    Order is whatever the compose process returned.

    Args:
        ports: Port mappings of one container.
    """

    def __init__(self, ports: Iterable[DockerPort] = ()) -> None:
        self._ports: tuple[DockerPort, ...] = tuple(ports)

    def __iter__(self) -> Iterator[DockerPort]:
        return iter(self._ports)

    def __len__(self) -> int:
        return len(self._ports)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ports):
            return NotImplemented
        return self._ports == other._ports

    def __hash__(self) -> int:
        return hash(self._ports)

    def __repr__(self) -> str:
        return f"Ports({list(self._ports)!r})"

    def listening_status(self) -> ReadinessResult:
        """Check once whether every port is listening.

        An empty collection is trivially listening.
        """
        unavailable = [port.internal_port for port in self._ports if not port.is_listening_now()]
        if unavailable:
            return ReadinessResult.failure(f"Internal ports {unavailable} were unavailable")
        return ReadinessResult.success()

    def are_listening(self) -> bool:
        return self.listening_status().ready

    def wait_to_be_listening_within(self, timeout: float, *, poll_interval: float) -> ReadinessResult:
        """Poll until every port is listening or `timeout` seconds elapse.

        Args:
            timeout: Maximum time to wait in seconds.
            poll_interval: Time between checks in seconds.

        Returns:
            ReadinessResult; on timeout the reason names the unavailable internal ports.
        """
        return poll_until(self.listening_status, timeout=timeout, interval=poll_interval)


__all__ = ["Ports"]
