from __future__ import annotations

import logging
from typing import Optional

from ..common.console import Console
from ..students.model import Student
from .factory import RecordStrategyFactory
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record presences and register attendance records."""

    def __init__(
        self,
        console: Optional[Console] = None,
        *,
        strategy_factory: Optional[RecordStrategyFactory] = None,
    ):
        self._console = console or Console()
        self._factory = strategy_factory or RecordStrategyFactory()

    def record_attendance(self, student: Student) -> int:
        count = student.mark_present()
        logger.debug("student %s attendance=%s", student.student_id, count)
        self._console.say(f"{student.name} teve presença registrada!")
        return count

    def register(self, record: AttendanceRecord) -> list[str]:
        """Record one presence for the record's student and print its context lines.

        Returns the lines written after the student's own confirmation.
        """
        self.record_attendance(record.student)

        written: list[str] = []
        for strategy in self._factory.for_record(record):
            for line in strategy.lines(record):
                written.append(self._console.say(line))

        logger.info("registered %s record for student %s", record.kind.value, record.student.student_id)
        return written
