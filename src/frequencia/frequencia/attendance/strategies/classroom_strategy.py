from __future__ import annotations

from ..model import AttendanceRecord
from .base import RecordLineStrategy


class ClassroomLineStrategy(RecordLineStrategy):
    def lines(self, record: AttendanceRecord) -> list[str]:
        if record.classroom is None:
            return []
        return [f"Turma: {record.classroom.name}"]
