from __future__ import annotations

from ...core.constants import DEFAULT_ABSENCE_LIMIT
from ..model import AttendanceRecord
from .base import RecordLineStrategy


class AbsenceAlertStrategy(RecordLineStrategy):
    """Warns when the remaining allowed absences reach zero.

    Remaining absences are ``limit - attendance_count``: the presence counter
    is read as if it counted absences, so the alert fires after ``limit``
    presences. Kept as-is pending a product decision (see DESIGN.md).
    """

    def __init__(self, absence_limit: int = DEFAULT_ABSENCE_LIMIT):
        self.absence_limit = int(absence_limit)

    def remaining(self, record: AttendanceRecord) -> int:
        return self.absence_limit - record.student.attendance()

    def lines(self, record: AttendanceRecord) -> list[str]:
        if self.remaining(record) > 0:
            return []
        return [
            f"⚠️  Alerta: {record.student.name} excedeu o limite de faltas na disciplina {record.subject}."
        ]
