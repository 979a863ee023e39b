"""Container handle used by integration tests to wait for a container to be ready.

This module provides the Container class, which resolves a container's
published ports once and answers readiness questions about them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from compose_harness._internal.config import get_config
from compose_harness.core.utils import Memoized, logger, poll_until
from compose_harness.types.readiness import ReadinessResult

from .errors import ComposeExecutionError, PortNotFoundError, PortResolutionError

if TYPE_CHECKING:
    from compose_harness.environments.compose import ComposeProcess

    from .docker_port import DockerPort
    from .ports import Ports

UrlFunction = Callable[["DockerPort"], str]


class Container:
    """Handle to one running container.

    Port mappings are resolved through the compose process on first use and
    cached for the lifetime of the handle. Create a new handle to see fresh
    mappings. Handles compare equal when their names are equal.

    Readiness operations return booleans: every failure (missing mapping,
    resolution error, probe error, timeout) becomes False plus a warning log.
    Only the two port lookups raise.

    Args:
        name: Container (compose service) name.
        compose_process: Process used to resolve the port mappings.
        poll_interval: Seconds between attempts in the wait_* operations.
            Defaults to the configured poll interval (50ms).

    Example:
        >>> container = Container(name="web", compose_process=DockerCompose())
        >>> container.wait_for_http_port(8080, lambda p: p.in_format("http://$HOST:$EXTERNAL_PORT/"), timeout=30)
        True
    """

    def __init__(
        self,
        *,
        name: str,
        compose_process: ComposeProcess,
        poll_interval: float | None = None,
    ) -> None:
        self._name = name
        self._compose_process = compose_process
        self._poll_interval = poll_interval if poll_interval is not None else get_config().poll_interval_sec
        self._port_mappings: Memoized[Ports] = Memoized(self._resolve_ports)

    @property
    def name(self) -> str:
        return self._name

    @property
    def compose_process(self) -> ComposeProcess:
        return self._compose_process

    def _resolve_ports(self) -> Ports:
        try:
            return self._compose_process.ports(name=self._name)
        except (ComposeExecutionError, OSError) as e:
            raise PortResolutionError(f"Failed to resolve ports for container '{self._name}': {e}") from e

    def _log_not_ready(self, reason: str, exc: BaseException | None = None) -> None:
        logger.warning(f"Container '{self._name}' failed to come up: {reason}", exc_info=exc)

    # --- Lookups ---

    def port_mapped_externally_to(self, external_port: int) -> DockerPort:
        """Return the mapping published on `external_port`.

        Raises:
            PortNotFoundError: If no mapping uses that host port.
            PortResolutionError: If the port mappings could not be resolved.
        """
        for port in self._port_mappings.get():
            if port.external_port == external_port:
                return port
        raise PortNotFoundError(f"No port mapped externally to '{external_port}' for container '{self._name}'")

    def port_mapped_internally_to(self, internal_port: int) -> DockerPort:
        """Return the mapping for container port `internal_port`.

        Raises:
            PortNotFoundError: If the container port is not published.
            PortResolutionError: If the port mappings could not be resolved.
        """
        for port in self._port_mappings.get():
            if port.internal_port == internal_port:
                return port
        raise PortNotFoundError(f"No internal port '{internal_port}' for container '{self._name}'")

    # --- Readiness ---

    def are_all_ports_open(self) -> bool:
        """Check once whether every published port is listening (True when there are none).

        A resolution error is logged and reported as False.
        """
        try:
            return self._port_mappings.get().are_listening()
        except Exception as e:
            self._log_not_ready(str(e), e)
            return False

    def _http_status(self, internal_port: int, url_function: UrlFunction) -> ReadinessResult:
        port = self.port_mapped_internally_to(internal_port)
        if not port.is_listening_now():
            return ReadinessResult.failure(f"Internal port {internal_port} is not listening")
        if not port.is_http_responding(url_function):
            return ReadinessResult.failure(f"Internal port {internal_port} is not responding over HTTP")
        return ReadinessResult.success()

    def port_is_listening_on_http(self, internal_port: int, url_function: UrlFunction) -> bool:
        """Check once whether `internal_port` is listening and answering HTTP.

        Args:
            internal_port: Container port to probe.
            url_function: Builds the URL to request from the resolved DockerPort.

        Returns:
            True if the port is listening and the HTTP probe succeeds. Any error
            is logged and reported as False.
        """
        try:
            return self._http_status(internal_port, url_function).ready
        except Exception as e:
            self._log_not_ready(str(e), e)
            return False

    def wait_for_ports(self, timeout: float) -> bool:
        """Wait until every published port is listening.

        Args:
            timeout: Maximum time to wait in seconds.

        Returns:
            True as soon as all ports listen; False on timeout or error (logged).
        """
        try:
            exposed_ports = self._port_mappings.get()
            result = exposed_ports.wait_to_be_listening_within(timeout, poll_interval=self._poll_interval)
        except Exception as e:
            self._log_not_ready(str(e), e)
            return False

        if not result.ready:
            self._log_not_ready(result.reason)
        return result.ready

    def wait_for_http_port(self, internal_port: int, url_function: UrlFunction, timeout: float) -> bool:
        """Wait until `internal_port` is listening and answering HTTP.

        Args:
            internal_port: Container port to probe.
            url_function: Builds the URL to request from the resolved DockerPort.
            timeout: Maximum time to wait in seconds.

        Returns:
            True once the probe succeeds; False on timeout or error (logged).
        """
        last_error: Exception | None = None

        def check() -> ReadinessResult:
            nonlocal last_error
            try:
                result = self._http_status(internal_port, url_function)
            except Exception as e:
                last_error = e
                return ReadinessResult.failure(str(e))
            last_error = None
            return result

        result = poll_until(check, timeout=timeout, interval=self._poll_interval)
        if not result.ready:
            self._log_not_ready(result.reason, last_error)
        return result.ready

    # --- Identity ---

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if other is None or type(self) is not type(other):
            return False
        return self._name == other._name  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Container(name={self._name!r})"


__all__ = ["Container"]
