from __future__ import annotations

import io
from datetime import date

from src.frequencia.frequencia.attendance.factory import RecordStrategyFactory
from src.frequencia.frequencia.attendance.model import AttendanceRecord
from src.frequencia.frequencia.attendance.service import AttendanceService
from src.frequencia.frequencia.classrooms.model import Classroom
from src.frequencia.frequencia.common.console import Console
from src.frequencia.frequencia.students.model import Student

DAY = date(2025, 3, 14)


def _service(absence_limit=5):
    out = io.StringIO()
    svc = AttendanceService(Console(out), strategy_factory=RecordStrategyFactory(absence_limit=absence_limit))
    return svc, out


def test_record_attendance_increments_and_confirms():
    svc, out = _service()
    s = Student(1, "Ana Maria")

    for _ in range(3):
        svc.record_attendance(s)

    assert s.attendance() == 3
    assert out.getvalue().splitlines() == ["Ana Maria teve presença registrada!"] * 3


def test_register_general_record():
    svc, out = _service()
    s = Student(1, "Ana")

    lines = svc.register(AttendanceRecord.general(s, DAY))

    assert s.attendance() == 1
    assert lines == ["Presença registrada para Ana em 14/03/2025"]
    assert out.getvalue().splitlines() == ["Ana teve presença registrada!", *lines]


def test_register_subject_and_classroom_records():
    svc, _ = _service()
    s = Student(2, "João Pedro")

    subject_lines = svc.register(AttendanceRecord.for_subject(s, DAY, "LTP"))
    classroom_lines = svc.register(AttendanceRecord.for_classroom(s, DAY, Classroom(1, "Informática 1º Ano")))

    assert subject_lines[1:] == ["Disciplina: LTP"]
    assert classroom_lines[1:] == ["Turma: Informática 1º Ano"]
    assert s.attendance() == 2


def test_alert_record_counts_the_new_presence_before_checking():
    svc, _ = _service(absence_limit=2)
    s = Student(1, "Ana")
    s.mark_present()

    lines = svc.register(AttendanceRecord.with_alert(s, DAY, "LTP"))

    assert s.attendance() == 2
    assert lines[-1] == "⚠️  Alerta: Ana excedeu o limite de faltas na disciplina LTP."


def test_alert_record_below_limit_has_no_warning():
    svc, _ = _service(absence_limit=5)

    lines = svc.register(AttendanceRecord.with_alert(Student(1, "Ana"), DAY, "LTP"))

    assert lines == ["Presença registrada para Ana em 14/03/2025", "Disciplina: LTP"]


def test_default_console_writes_to_stdout(capsys):
    AttendanceService().record_attendance(Student(1, "Ana"))

    assert capsys.readouterr().out == "Ana teve presença registrada!\n"
