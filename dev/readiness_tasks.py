"""Readiness tasks: wait for a running compose service from the command line."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from invoke.exceptions import Exit
from invoke.tasks import task

from compose_harness import ComposeExecutionError, Container, DockerCompose
from compose_harness.core.utils import setup_compose_harness_logging

if TYPE_CHECKING:
    from invoke.context import Context

from dev.utils import logging_utils


def _create_compose(compose_file: list[str], project_name: str | None) -> DockerCompose:
    return DockerCompose(
        compose_files=tuple(Path(f) for f in compose_file),
        project_name=project_name,
    )


@task(
    help={
        "service": "Compose service name.",
        "compose_file": "Compose file (can be specified multiple times).",
        "project_name": "Compose project name.",
        "http_port": "Internal port to probe over HTTP instead of waiting for all ports.",
        "path": "Request path for the HTTP probe (default: /).",
        "timeout": "Timeout in seconds (default: 60).",
    },
    iterable=["compose_file"],
)
@logging_utils.with_banner()
def wait(
    ctx: Context,
    service: str,
    compose_file: list[str] | None = None,
    project_name: str | None = None,
    http_port: str | None = None,
    path: str = "/",
    timeout: float = 60.0,
) -> None:
    """Wait for a compose service's ports (or one HTTP port) to become ready."""
    setup_compose_harness_logging()
    container = Container(name=service, compose_process=_create_compose(compose_file or [], project_name))

    if http_port is None:
        ready = container.wait_for_ports(timeout)
    else:
        ready = container.wait_for_http_port(
            int(http_port),
            lambda port: port.in_format(f"http://$HOST:$EXTERNAL_PORT{path}"),
            timeout,
        )

    if not ready:
        logging_utils.print_failure(f"{service} is not ready", error=f"Gave up after {timeout}s")
        raise Exit(code=1)
    logging_utils.print_success(f"{service} is ready")


@task(
    help={
        "service": "Compose service name.",
        "compose_file": "Compose file (can be specified multiple times).",
        "project_name": "Compose project name.",
    },
    iterable=["compose_file"],
)
def ports(ctx: Context, service: str, compose_file: list[str] | None = None, project_name: str | None = None) -> None:
    """Show a compose service's published ports and whether they are listening."""
    compose = _create_compose(compose_file or [], project_name)
    try:
        mappings = list(compose.ports(name=service))
    except ComposeExecutionError as e:
        logging_utils.print_failure(f"Could not resolve ports for {service}", error=str(e))
        raise Exit(code=1) from e

    rows = [
        (port.internal_port, f"{port.ip}:{port.external_port}", "yes" if port.is_listening_now() else "no")
        for port in mappings
    ]
    logging_utils.print_table(rows, headers=("Internal", "External", "Listening"))
