from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..classrooms.model import Classroom
from ..core.enums import RecordKind
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Registro de presença: um evento, nunca armazenado.

    Disciplina e turma são opcionais; ``alert`` só vale junto com disciplina.
    """

    student: Student
    record_date: date
    subject: Optional[str] = None
    classroom: Optional[Classroom] = None
    alert: bool = False

    def __post_init__(self) -> None:
        if self.alert and not self.subject:
            raise ValueError("alert records require a subject")

    @property
    def kind(self) -> RecordKind:
        if self.alert:
            return RecordKind.SUBJECT_ALERT
        if self.subject is not None:
            return RecordKind.SUBJECT
        if self.classroom is not None:
            return RecordKind.CLASSROOM
        return RecordKind.GENERAL

    @classmethod
    def general(cls, student: Student, record_date: date) -> "AttendanceRecord":
        return cls(student=student, record_date=record_date)

    @classmethod
    def for_subject(cls, student: Student, record_date: date, subject: str) -> "AttendanceRecord":
        return cls(student=student, record_date=record_date, subject=subject)

    @classmethod
    def for_classroom(cls, student: Student, record_date: date, classroom: Classroom) -> "AttendanceRecord":
        return cls(student=student, record_date=record_date, classroom=classroom)

    @classmethod
    def with_alert(cls, student: Student, record_date: date, subject: str) -> "AttendanceRecord":
        return cls(student=student, record_date=record_date, subject=subject, alert=True)
