from __future__ import annotations

from ...common.datetime_utils import format_display_date
from ..model import AttendanceRecord
from .base import RecordLineStrategy


class PresenceLineStrategy(RecordLineStrategy):
    """Confirmation with the record date, shared by every variant."""

    def lines(self, record: AttendanceRecord) -> list[str]:
        return [f"Presença registrada para {record.student.name} em {format_display_date(record.record_date)}"]
