from __future__ import annotations

from ..model import AttendanceRecord
from .base import RecordLineStrategy


class SubjectLineStrategy(RecordLineStrategy):
    def lines(self, record: AttendanceRecord) -> list[str]:
        if record.subject is None:
            return []
        return [f"Disciplina: {record.subject}"]
