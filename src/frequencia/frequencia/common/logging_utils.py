from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(debug: bool = False, level: Optional[str] = None) -> None:
    """Configure root logging with a single console handler (idempotent).

    Diagnostics go to stderr so they never mix with the status lines printed
    on stdout.
    """
    root = logging.getLogger()
    resolved = logging.DEBUG if debug else logging.getLevelName((level or "WARNING").upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    if getattr(root, "_frequencia_logger_ready", False):
        root.setLevel(resolved)
        return

    root.setLevel(resolved)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)
    root._frequencia_logger_ready = True  # type: ignore[attr-defined]
