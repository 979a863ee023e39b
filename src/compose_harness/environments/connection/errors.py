"""Errors raised by container handles and compose processes."""


class ComposeHarnessError(Exception):
    """Base class for compose_harness errors."""


class ComposeExecutionError(ComposeHarnessError, RuntimeError):
    """A docker compose command failed, timed out, or produced unusable output."""


class PortResolutionError(ComposeHarnessError, RuntimeError):
    """The port mappings of a container could not be resolved."""


class PortNotFoundError(ComposeHarnessError, ValueError):
    """No port mapping of a container matches the requested port."""


__all__ = [
    "ComposeExecutionError",
    "ComposeHarnessError",
    "PortNotFoundError",
    "PortResolutionError",
]
