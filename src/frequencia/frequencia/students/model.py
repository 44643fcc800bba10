from __future__ import annotations

from ..common.validators import require_non_empty, require_positive_int


class Student:
    """Entidade de domínio: Estudante.

    Id e nome são validados na construção e não mudam depois; só
    ``mark_present`` altera o contador de presença.
    """

    __slots__ = ("_student_id", "_name", "_attendance_count")

    def __init__(self, student_id: int, name: str):
        self._student_id = require_positive_int(student_id, "id do estudante deve ser positivo")
        self._name = require_non_empty(name, "nome do estudante não pode ser vazio")
        self._attendance_count = 0

    def __repr__(self) -> str:
        return (
            f"Student(student_id={self._student_id!r}, name={self._name!r}, "
            f"attendance_count={self._attendance_count!r})"
        )

    @property
    def student_id(self) -> int:
        return self._student_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def attendance_count(self) -> int:
        return self._attendance_count

    def mark_present(self) -> int:
        self._attendance_count += 1
        return self._attendance_count

    def attendance(self) -> int:
        return self._attendance_count
