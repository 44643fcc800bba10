from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import DEFAULT_CLASS_CAPACITY
from ..core.exceptions import (
    ClassroomFullError,
    DuplicateStudentError,
    InvalidClassroomDataError,
    StudentNotFoundError,
)
from ..students.model import Student


@dataclass(eq=False)
class Classroom:
    """Entidade de domínio: Turma.

    Invariants: members are unique by ``student_id`` and never exceed
    ``capacity``. Failed operations leave membership untouched. Students
    passed to the constructor go through ``add`` like any other.
    """

    classroom_id: int
    name: str
    capacity: int = DEFAULT_CLASS_CAPACITY
    students: list[Student] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int) or self.capacity <= 0:
            raise InvalidClassroomDataError("capacidade da turma deve ser positiva")

        initial, self.students = list(self.students), []
        for student in initial:
            self.add(student)

    def __len__(self) -> int:
        return len(self.students)

    def is_full(self) -> bool:
        return len(self.students) >= self.capacity

    def contains(self, student_id: int) -> bool:
        return any(s.student_id == student_id for s in self.students)

    def add(self, student: Student) -> None:
        if self.is_full():
            raise ClassroomFullError(self.capacity)
        if self.contains(student.student_id):
            raise DuplicateStudentError(student.name)
        self.students.append(student)

    def find(self, student_id: int) -> Student:
        for student in self.students:
            if student.student_id == student_id:
                return student
        raise StudentNotFoundError(student_id)

    def remove(self, student_id: int) -> Student:
        student = self.find(student_id)
        self.students.remove(student)
        return student
