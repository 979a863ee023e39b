"""Docker compose implementation of ComposeProcess.

Uses the docker CLI (`docker compose ps --format json`) to read the
published ports of a service.
"""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any

from compose_harness._internal.config import get_config
from compose_harness.core.utils import logger
from compose_harness.environments.connection.docker_port import DockerPort
from compose_harness.environments.connection.errors import ComposeExecutionError
from compose_harness.environments.connection.ports import Ports

# Bind addresses that mean "all interfaces" and must be replaced by the docker host IP
WILDCARD_ADDRESSES = frozenset({"", "0.0.0.0", "::", "[::]"})


def _load_ps_entries(output: str) -> list[dict[str, Any]]:
    """Decode `docker compose ps --format json` output.

    Older compose releases print one JSON array, newer ones print one JSON
    object per line.
    """
    output = output.strip()
    if not output:
        return []

    try:
        if output.startswith("["):
            entries = json.loads(output)
        else:
            entries = [json.loads(line) for line in output.splitlines() if line.strip()]
    except json.JSONDecodeError as e:
        raise ComposeExecutionError(f"Invalid JSON from docker compose ps: {e}") from e

    if not all(isinstance(entry, dict) for entry in entries):
        raise ComposeExecutionError("Unexpected docker compose ps output: expected JSON objects")
    return entries


def parse_ps_output(output: str, *, docker_host_ip: str) -> Ports:
    """Build Ports from `docker compose ps --format json` output.

    Unpublished ports (PublishedPort 0) are skipped and IPv4/IPv6 entries for
    the same mapping are collapsed into one.

    Args:
        output: Raw stdout of the ps command.
        docker_host_ip: Address used in place of wildcard bind addresses.

    Returns:
        Ports in the order docker reported them.

    Raises:
        ComposeExecutionError: If the output cannot be parsed.

    Example:
        >>> out = '{"Name": "db", "Publishers": [{"URL": "0.0.0.0", "TargetPort": 5432, "PublishedPort": 32768}]}'
        >>> list(parse_ps_output(out, docker_host_ip="127.0.0.1"))
        [DockerPort(ip='127.0.0.1', external_port=32768, internal_port=5432)]
    """
    ports: list[DockerPort] = []
    seen: set[tuple[int, int]] = set()
    for entry in _load_ps_entries(output):
        for publisher in entry.get("Publishers") or []:
            try:
                external_port = int(publisher.get("PublishedPort") or 0)
                internal_port = int(publisher["TargetPort"])
            except (KeyError, TypeError, ValueError) as e:
                raise ComposeExecutionError(f"Malformed port publisher entry: {publisher}") from e

            if external_port == 0 or (external_port, internal_port) in seen:
                continue
            seen.add((external_port, internal_port))

            url = publisher.get("URL") or ""
            ip = docker_host_ip if url in WILDCARD_ADDRESSES else url
            ports.append(DockerPort(ip=ip, external_port=external_port, internal_port=internal_port))
    return Ports(ports)


class DockerCompose:
    """ComposeProcess backed by the `docker compose` CLI.

    Args:
        compose_files: Compose files passed with -f (docker's default lookup if empty).
        project_name: Compose project name passed with -p.
        docker_host_ip: Address published ports are reachable on.
            Defaults to the configured docker host IP.
        timeout: Command timeout in seconds. Defaults to the configured command timeout.

    Example:
        >>> compose = DockerCompose(compose_files=(Path("docker-compose.yml"),), project_name="it")
        >>> compose.ports(name="db")
        Ports([DockerPort(ip='127.0.0.1', external_port=32768, internal_port=5432)])
    """

    def __init__(
        self,
        *,
        compose_files: tuple[Path, ...] = (),
        project_name: str | None = None,
        docker_host_ip: str | None = None,
        timeout: int | None = None,
    ) -> None:
        config = get_config()
        self.compose_files = compose_files
        self.project_name = project_name
        self.docker_host_ip = docker_host_ip or config.docker_host_ip
        self.timeout = timeout if timeout is not None else config.command_timeout_sec

    def _base_command(self) -> list[str]:
        cmd = ["docker", "compose"]
        for compose_file in self.compose_files:
            cmd.extend(["-f", str(compose_file)])
        if self.project_name:
            cmd.extend(["-p", self.project_name])
        return cmd

    def _run(self, *args: str) -> str:
        """Run a docker compose subcommand and return its stdout.

        Raises:
            ComposeExecutionError: If docker is missing, the command times out, or exits non-zero.
        """
        cmd = [*self._base_command(), *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ComposeExecutionError(f"Command timed out after {self.timeout}s: {' '.join(cmd)}") from e
        except FileNotFoundError as e:
            raise ComposeExecutionError("Docker command not found. Is Docker installed?") from e

        if result.returncode != 0:
            error_output = result.stderr.strip() or result.stdout.strip()
            raise ComposeExecutionError(
                f"'{' '.join(cmd)}' failed with exit code {result.returncode}: {error_output}"
            )
        return result.stdout

    def ports(self, *, name: str) -> Ports:
        """Get the published port mappings of a compose service."""
        output = self._run("ps", "--all", "--format", "json", name)
        return parse_ps_output(output, docker_host_ip=self.docker_host_ip)


__all__ = [
    "DockerCompose",
    "parse_ps_output",
]
