from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import AttendanceRecord


class RecordLineStrategy(ABC):
    """Strategy Pattern: each strategy contributes the lines for one concern."""

    @abstractmethod
    def lines(self, record: AttendanceRecord) -> list[str]:
        raise NotImplementedError
