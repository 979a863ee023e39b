"""Basic print utilities using Rich."""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

# Shared console for all dev task output
console = Console(highlight=False)


def print_banner(title: str, data: dict[str, Any] | None = None) -> None:
    """Print task banner with title and key-value pairs.

    Example:
        >>> print_banner("WAIT", {"Service": "web", "Timeout": 60})
        ╭────────────────── WAIT ──────────────────╮
        │ Service: web                             │
        │ Timeout: 60                              │
        ╰──────────────────────────────────────────╯
    """
    content = Text()
    if data:
        for i, (key, value) in enumerate(data.items()):
            if i > 0:
                content.append("\n")
            content.append(f"{key}: ", style="dim")
            content.append(str(value), style="cyan")
    console.print()
    console.print(Panel(content, style="blue", title=f"[bold]{title}[/]", title_align="center"))
    console.print()


def print_table(rows: list[tuple[Any, ...]], headers: tuple[str, ...]) -> None:
    """Print rows as an aligned table.

    Example:
        >>> print_table([(8080, 32768, "yes")], headers=("Internal", "External", "Listening"))
          Internal  External  Listening
          8080      32768     yes
    """
    table = Table(box=None, padding=(0, 2), header_style="dim")
    for header in headers:
        table.add_column(header, style="cyan")
    for row in rows:
        table.add_row(*(str(value) for value in row))
    console.print(table)
    console.print()


def print_success(message: str = "SUCCESS", **details: Any) -> None:
    """Print success message with optional details."""
    console.print()
    console.print(f"[bold green]✓ {message}[/]")
    for key, value in details.items():
        console.print(f"  [dim]{key}:[/] [cyan]{value}[/]")


def print_failure(message: str = "FAILED", error: str | None = None) -> None:
    """Print failure message with optional error details."""
    console.print()
    console.print(f"[bold red]✗ {message}[/]")
    if error:
        console.print(f"  [dim]{error}[/]")


def print_info(message: str) -> None:
    console.print(f"  {message}")


def with_banner(
    exclude: set[str] | None = None,
    include_false: bool = False,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator that prints a banner with function name and args before execution.

    Args:
        exclude: Additional parameter names to exclude from banner. "self" and "ctx"
            are always excluded automatically.
        include_false: If True, include parameters with False/None values (default: False).
    """
    # Always exclude self and ctx, plus any user-provided excludes
    base_exclude = {"self", "ctx"}
    effective_exclude = base_exclude | (exclude or set())

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            sig = inspect.signature(func)
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            title = func.__name__.replace("_", " ").upper()  # type: ignore[attr-defined]

            data = {}
            for name, value in bound.arguments.items():
                if name in effective_exclude:
                    continue
                if not include_false and (value is None or value is False):
                    continue
                key = name.replace("_", " ").title()
                data[key] = value

            print_banner(title, data if data else None)
            return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = [
    "console",
    "print_banner",
    "print_failure",
    "print_info",
    "print_success",
    "print_table",
    "with_banner",
]
