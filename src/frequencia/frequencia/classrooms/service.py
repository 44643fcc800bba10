from __future__ import annotations

import logging
from typing import Optional

from ..attendance.service import AttendanceService
from ..common.console import Console
from ..core.constants import DEFAULT_CLASS_CAPACITY
from ..students.model import Student
from .model import Classroom

logger = logging.getLogger(__name__)


class ClassroomService:
    """Use case: manage classroom membership and whole-class attendance."""

    def __init__(
        self,
        attendance: AttendanceService,
        console: Optional[Console] = None,
        *,
        capacity: int = DEFAULT_CLASS_CAPACITY,
    ):
        self._attendance = attendance
        self._console = console or Console()
        self._capacity = int(capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def create_classroom(self, classroom_id: int, name: str) -> Classroom:
        return Classroom(classroom_id=classroom_id, name=name, capacity=self._capacity)

    def add_student(self, classroom: Classroom, student: Student) -> None:
        classroom.add(student)
        logger.debug("classroom %s size=%s/%s", classroom.classroom_id, len(classroom), classroom.capacity)
        self._console.say(f"Estudante {student.name} adicionado à turma {classroom.name}!")

    def find_student(self, classroom: Classroom, student_id: int) -> Student:
        return classroom.find(student_id)

    def remove_student(self, classroom: Classroom, student_id: int) -> Student:
        student = classroom.remove(student_id)
        self._console.say(f"Estudante {student.name} removido da turma {classroom.name}.")
        return student

    def register_attendance_for_all(self, classroom: Classroom) -> int:
        for student in classroom.students:
            self._attendance.record_attendance(student)
        return len(classroom.students)
