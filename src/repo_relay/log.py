"""Logging configuration with Rich formatting."""

import logging

from rich.logging import RichHandler


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

    # Quiet down per-request client logs
    logging.getLogger("httpx").setLevel(logging.WARNING)
