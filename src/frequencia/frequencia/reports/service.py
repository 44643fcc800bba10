from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.console import Console
from ..students.model import Student


@dataclass(frozen=True)
class FrequencyRow:
    student_id: int
    name: str
    attendance_count: int


class FrequencyReportService:
    """Relatório de frequência mensal, impresso no console."""

    HEADER = "=== Relatório de Frequência Mensal ==="

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()

    def build_monthly_report(self, students: Iterable[Student]) -> list[FrequencyRow]:
        return [FrequencyRow(s.student_id, s.name, s.attendance()) for s in students]

    def print_monthly_report(self, students: Iterable[Student]) -> list[FrequencyRow]:
        rows = self.build_monthly_report(students)

        self._console.say(self.HEADER)
        if not rows:
            self._console.say("Nenhum estudante cadastrado.")
        for r in rows:
            self._console.say(f"{r.student_id} - {r.name}: {r.attendance_count} presença(s)")
        return rows
