from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from .attendance.factory import RecordStrategyFactory
from .attendance.service import AttendanceService
from .classrooms.service import ClassroomService
from .common.console import Console
from .core.constants import DEFAULT_ABSENCE_LIMIT, DEFAULT_CLASS_CAPACITY
from .reports.service import FrequencyReportService


@dataclass(frozen=True)
class Container:
    console: Console

    attendance_service: AttendanceService
    classroom_service: ClassroomService
    report_service: FrequencyReportService


def build_container(
    *,
    class_capacity: int = DEFAULT_CLASS_CAPACITY,
    absence_limit: int = DEFAULT_ABSENCE_LIMIT,
    stream: Optional[TextIO] = None,
) -> Container:
    console = Console(stream)

    attendance_service = AttendanceService(
        console,
        strategy_factory=RecordStrategyFactory(absence_limit=int(absence_limit)),
    )
    classroom_service = ClassroomService(attendance_service, console, capacity=int(class_capacity))
    report_service = FrequencyReportService(console)

    return Container(
        console=console,
        attendance_service=attendance_service,
        classroom_service=classroom_service,
        report_service=report_service,
    )
