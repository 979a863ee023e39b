"""Configuration management for compose_harness."""

from __future__ import annotations

import os
import urllib.parse
from dataclasses import dataclass

DEFAULT_DOCKER_HOST_IP = "127.0.0.1"


def _docker_host_ip_from_env() -> str:
    """Resolve the IP that published container ports are reachable on.

    Uses COMPOSE_HARNESS_DOCKER_HOST_IP if set, otherwise the host part of a
    tcp:// DOCKER_HOST (remote daemons, docker-machine). Unix sockets and an
    unset DOCKER_HOST mean the ports are published on localhost.
    """
    explicit = os.environ.get("COMPOSE_HARNESS_DOCKER_HOST_IP")
    if explicit:
        return explicit

    docker_host = os.environ.get("DOCKER_HOST", "")
    if docker_host.startswith("tcp://"):
        hostname = urllib.parse.urlparse(docker_host).hostname
        if hostname:
            return hostname
    return DEFAULT_DOCKER_HOST_IP


@dataclass(frozen=True)
class Config:
    """Defaults used by container handles and the docker compose process."""

    poll_interval_ms: int = 50
    socket_timeout_sec: float = 0.5
    http_timeout_sec: float = 5.0
    docker_host_ip: str = DEFAULT_DOCKER_HOST_IP
    command_timeout_sec: int = 30

    @property
    def poll_interval_sec(self) -> float:
        return self.poll_interval_ms / 1000

    @classmethod
    def from_env(cls) -> Config:
        """Read configuration from environment variables."""
        return cls(
            poll_interval_ms=int(os.environ.get("COMPOSE_HARNESS_POLL_INTERVAL_MS", cls.poll_interval_ms)),
            socket_timeout_sec=float(os.environ.get("COMPOSE_HARNESS_SOCKET_TIMEOUT_SEC", cls.socket_timeout_sec)),
            http_timeout_sec=float(os.environ.get("COMPOSE_HARNESS_HTTP_TIMEOUT_SEC", cls.http_timeout_sec)),
            docker_host_ip=_docker_host_ip_from_env(),
            command_timeout_sec=int(os.environ.get("COMPOSE_HARNESS_COMMAND_TIMEOUT_SEC", cls.command_timeout_sec)),
        )


def get_config() -> Config:
    """Read configuration from environment variables."""
    return Config.from_env()
