# Console logging with Rich.
# Created: 2026-03-02

from __future__ import annotations

import logging

from rich.logging import RichHandler

_NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(level: str = "INFO") -> None:
    """Install a Rich handler on the root logger.

    Calling this more than once only updates the level.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
