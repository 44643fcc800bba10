from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class Console:
    """Writes user-facing status lines (confirmations, alerts, reports)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # sys.stdout is looked up per call; it may be swapped at runtime.
        return self._stream if self._stream is not None else sys.stdout

    def say(self, message: str) -> str:
        print(message, file=self.stream)
        logger.debug("console: %s", message)
        return message
