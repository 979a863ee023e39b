"""Pytest configuration for all tests."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterable

import pytest

from compose_harness import Container, Ports
from compose_harness.environments.connection.errors import ComposeExecutionError


class FakePort:
    """Stand-in for DockerPort with scripted listening/HTTP answers.

    `listening` is either a bool or a sequence of bools consumed one per
    check (the last value repeats). `http_responding` may be an exception,
    which is raised by the HTTP probe.
    """

    def __init__(
        self,
        *,
        external_port: int,
        internal_port: int,
        listening: bool | Iterable[bool] = True,
        http_responding: bool | Exception = True,
        ip: str = "127.0.0.1",
    ) -> None:
        self.ip = ip
        self.external_port = external_port
        self.internal_port = internal_port
        self._listening = [listening] if isinstance(listening, bool) else list(listening)
        self.http_responding = http_responding
        self.listening_checks = 0
        self.requested_urls: list[str] = []

    def in_format(self, template: str) -> str:
        return template.replace("$HOST", self.ip).replace("$EXTERNAL_PORT", str(self.external_port))

    def is_listening_now(self, timeout: float | None = None) -> bool:
        index = min(self.listening_checks, len(self._listening) - 1)
        self.listening_checks += 1
        return self._listening[index]

    def is_http_responding(self, url_function: Callable[[FakePort], str], timeout: float | None = None) -> bool:
        self.requested_urls.append(url_function(self))
        if isinstance(self.http_responding, Exception):
            raise self.http_responding
        return self.http_responding


class FakeComposeProcess:
    """ComposeProcess that counts calls and can fail or stall."""

    def __init__(self, ports: Iterable[FakePort] = (), *, error: Exception | None = None, delay: float = 0.0) -> None:
        self._ports = list(ports)
        self.error = error
        self.delay = delay
        self.calls = 0
        self.requested_names: list[str] = []
        self._lock = threading.Lock()

    def ports(self, *, name: str) -> Ports:
        with self._lock:
            self.calls += 1
            self.requested_names.append(name)
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return Ports(self._ports)  # type: ignore[arg-type]


@pytest.fixture
def fake_port() -> type[FakePort]:
    """FakePort class, for building scripted port mappings."""
    return FakePort


@pytest.fixture
def fake_compose() -> type[FakeComposeProcess]:
    """FakeComposeProcess class, for building call-counting compose processes."""
    return FakeComposeProcess


@pytest.fixture
def make_container() -> Callable[..., tuple[Container, FakeComposeProcess]]:
    """Factory creating a Container over a FakeComposeProcess.

    Returns:
        Callable taking the fake ports (plus FakeComposeProcess keyword args)
        and returning (container, compose_process).
    """

    def _make(
        ports: Iterable[FakePort] = (),
        *,
        name: str = "db",
        poll_interval: float = 0.05,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> tuple[Container, FakeComposeProcess]:
        compose = FakeComposeProcess(ports, error=error, delay=delay)
        return Container(name=name, compose_process=compose, poll_interval=poll_interval), compose

    return _make


@pytest.fixture
def compose_failure() -> ComposeExecutionError:
    return ComposeExecutionError("'docker compose ps --all --format json db' failed with exit code 1: no such service")
