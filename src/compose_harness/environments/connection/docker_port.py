"""A single published container port."""

from __future__ import annotations

import http.client
import socket
import urllib.error
import urllib.request
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from compose_harness._internal.config import get_config
from compose_harness.core.utils import logger


class DockerPort(BaseModel):
    """Association between a container's internal port and its published host port.

    Attributes:
        ip: Address the published port is reachable on.
        external_port: Port on the docker host.
        internal_port: Port inside the container.
    """

    model_config = ConfigDict(frozen=True)

    ip: str = Field(description="Address the published port is reachable on")
    external_port: int = Field(description="Port on the docker host")
    internal_port: int = Field(description="Port inside the container")

    def in_format(self, template: str) -> str:
        """Substitute $HOST and $EXTERNAL_PORT in a template.

        Example:
            >>> port = DockerPort(ip="127.0.0.1", external_port=32768, internal_port=8080)
            >>> port.in_format("http://$HOST:$EXTERNAL_PORT/health")
            'http://127.0.0.1:32768/health'
        """
        return template.replace("$HOST", self.ip).replace("$EXTERNAL_PORT", str(self.external_port))

    def is_listening_now(self, timeout: float | None = None) -> bool:
        """Check whether a TCP connection to the published port is accepted right now.

        Args:
            timeout: Connect timeout in seconds. Defaults to the configured socket timeout.
        """
        if timeout is None:
            timeout = get_config().socket_timeout_sec
        try:
            with socket.create_connection((self.ip, self.external_port), timeout=timeout):
                return True
        except OSError:
            return False

    def is_http_responding(
        self,
        url_function: Callable[[DockerPort], str],
        timeout: float | None = None,
    ) -> bool:
        """Issue one GET request to the URL built for this port.

        Any status below 500 counts as responding: auth-required and not-found
        pages still mean the server is up.

        Args:
            url_function: Builds the URL to probe from this port.
            timeout: Request timeout in seconds. Defaults to the configured HTTP timeout.

        Returns:
            True if the server answered with a status below 500.
        """
        if timeout is None:
            timeout = get_config().http_timeout_sec
        url = url_function(self)
        req = urllib.request.Request(url, method="GET")
        try:
            with urllib.request.urlopen(req, timeout=timeout) as resp:
                return resp.status < 500
        except urllib.error.HTTPError as e:
            # HTTPError is raised for 4xx/5xx but also has a status code
            logger.debug(f"{url} answered with status {e.code}")
            return e.code < 500
        except (urllib.error.URLError, http.client.HTTPException, TimeoutError, ConnectionError) as e:
            logger.debug(f"{url} is not responding: {e}")
            return False


__all__ = ["DockerPort"]
