from .logging import logger, setup_compose_harness_logging
from .memoize import Memoized
from .polling import poll_until

__all__ = [
    "Memoized",
    "logger",
    "poll_until",
    "setup_compose_harness_logging",
]
