"""Dev task output formatting using Rich.

Requirements:
    Rich library (dev dependency): uv sync --group dev

Usage:
    from dev.utils import logging_utils

    logging_utils.print_banner("WAIT", data={"Service": "web"})
    logging_utils.print_success("Service is ready", Ports="8080->32768")
"""

from .printers import (
    console,
    print_banner,
    print_failure,
    print_info,
    print_success,
    print_table,
    with_banner,
)

__all__ = [
    "console",
    "print_banner",
    "print_failure",
    "print_info",
    "print_success",
    "print_table",
    "with_banner",
]
