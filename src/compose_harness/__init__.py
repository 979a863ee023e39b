"""Compose Harness - readiness handles for docker compose integration tests"""

from compose_harness.core.utils import logger
from compose_harness.environments.compose import ComposeProcess, DockerCompose
from compose_harness.environments.connection import (
    ComposeExecutionError,
    ComposeHarnessError,
    Container,
    ContainerCache,
    DockerPort,
    PortNotFoundError,
    PortResolutionError,
    Ports,
)

__all__ = [
    "ComposeExecutionError",
    "ComposeHarnessError",
    "ComposeProcess",
    "Container",
    "ContainerCache",
    "DockerCompose",
    "DockerPort",
    "PortNotFoundError",
    "PortResolutionError",
    "Ports",
    "logger",
]
