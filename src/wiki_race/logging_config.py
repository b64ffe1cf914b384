"""
Logging setup shared by the API server and the CLI.

Search progress is logged per round, so the output is meant to be read live
on a terminal; when stderr is redirected the plain formatter keeps log files
grep-friendly.
"""

import logging
import sys
from typing import Iterable, Optional

from rich.console import Console
from rich.logging import RichHandler

# httpx logs one INFO line per page fetched
QUIET_LOGGERS = ("httpx", "httpcore")

PLAIN_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
PLAIN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level) -> int:
    """Accept either a level name or a number; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def build_handler(use_rich: bool, stream=None) -> logging.Handler:
    stream = stream if stream is not None else sys.stderr
    if not use_rich:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATE_FORMAT))
        return handler

    handler = RichHandler(
        console=Console(file=stream),
        show_path=False,
        rich_tracebacks=True,
        markup=False,  # article titles can contain [brackets]
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
    return handler


def setup_logging(
    level="INFO",
    use_rich: Optional[bool] = None,
    quiet_loggers: Iterable[str] = QUIET_LOGGERS,
    stream=None,
) -> logging.Handler:
    """
    Replace the root logger's handlers with a single console handler.

    Args:
        level: Level name or number for the root logger
        use_rich: Force rich (True) or plain (False) output; by default rich
            is used only when the stream is a terminal
        quiet_loggers: Third-party loggers capped at WARNING
        stream: Where to write, stderr by default

    Returns:
        The installed handler
    """
    target = stream if stream is not None else sys.stderr
    if use_rich is None:
        use_rich = hasattr(target, "isatty") and target.isatty()

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = build_handler(use_rich, target)
    root.addHandler(handler)
    root.setLevel(resolve_level(level))

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler
