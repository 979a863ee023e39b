"""Container handles and their published ports.

This package answers "is this container ready?" for integration tests by
resolving a container's port mappings and polling them.
"""

from .cache import ContainerCache
from .container import Container
from .docker_port import DockerPort
from .errors import ComposeExecutionError, ComposeHarnessError, PortNotFoundError, PortResolutionError
from .ports import Ports

__all__ = [
    "ComposeExecutionError",
    "ComposeHarnessError",
    "Container",
    "ContainerCache",
    "DockerPort",
    "PortNotFoundError",
    "PortResolutionError",
    "Ports",
]
