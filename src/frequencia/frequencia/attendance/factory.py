from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_ABSENCE_LIMIT
from ..core.enums import RecordKind
from .model import AttendanceRecord
from .strategies.alert_strategy import AbsenceAlertStrategy
from .strategies.base import RecordLineStrategy
from .strategies.classroom_strategy import ClassroomLineStrategy
from .strategies.presence_strategy import PresenceLineStrategy
from .strategies.subject_strategy import SubjectLineStrategy


@dataclass
class RecordStrategyFactory:
    """Factory Pattern: choose the line strategies for a record, in output order."""

    absence_limit: int = DEFAULT_ABSENCE_LIMIT

    def for_record(self, record: AttendanceRecord) -> list[RecordLineStrategy]:
        strategies: list[RecordLineStrategy] = [PresenceLineStrategy()]
        if record.subject is not None:
            strategies.append(SubjectLineStrategy())
        if record.classroom is not None:
            strategies.append(ClassroomLineStrategy())
        if record.kind == RecordKind.SUBJECT_ALERT:
            strategies.append(AbsenceAlertStrategy(self.absence_limit))
        return strategies
