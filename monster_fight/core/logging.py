"""
Logging configuration module for the simulator.

Routes the ``monster_fight`` logger through rich, and provides helpers that
append a context dictionary to every message.
"""

import logging
from typing import Any

from rich.logging import RichHandler

# Logger shared by the fight loop and the resolver.
logger = logging.getLogger("monster_fight")


def setup_logging(level: int = logging.INFO) -> None:
    """
    Sends log records to a rich handler at the given level.

    Args:
        level (int): The logging level to set. Defaults to logging.INFO.

    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )


def _with_context(message: str, context: dict[str, Any] | None) -> str:
    """Appends the context as key=value pairs to the message."""
    if not context:
        return message
    context_str = " ".join(f"{k}={v}" for k, v in context.items())
    return f"{message} [{context_str}]"


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs a fight outcome, with the context appended."""
    logger.info(_with_context(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs a fight detail, with the context appended."""
    logger.debug(_with_context(message, context))
