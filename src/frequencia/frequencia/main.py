from __future__ import annotations

import argparse
import logging
from datetime import date
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import load_settings

from .attendance.model import AttendanceRecord
from .classrooms.model import Classroom
from .common.datetime_utils import today_local
from .common.logging_utils import setup_logging
from .container import Container, build_container
from .core.constants import LEGACY_CLASS_CAPACITY
from .core.exceptions import DomainError
from .students.model import Student

logger = logging.getLogger(__name__)


def create_container() -> Container:
    load_dotenv(override=False)

    settings = load_settings()
    setup_logging(debug=settings.debug, level=settings.log_level)
    logger.debug("settings=%s", settings.module)

    return build_container(
        class_capacity=settings.class_capacity,
        absence_limit=settings.absence_limit,
    )


def _attempt(container: Container, action, *args) -> bool:
    """Run one demo step, printing the domain error instead of aborting."""
    try:
        action(*args)
    except DomainError as exc:
        logger.warning("%s: %s", type(exc).__name__, exc)
        container.console.say(f"Erro: {exc}")
        return False
    return True


def run_demo(container: Container, *, today: Optional[date] = None) -> list[Student]:
    today = today or today_local()
    attendance = container.attendance_service
    classrooms = container.classroom_service
    report = container.report_service

    # Invalid data here is not caught: a broken setup ends the program.
    students = [Student(1, "Ana Maria"), Student(2, "João Pedro"), Student(3, "Maria Clara")]
    ana, joao, maria = students

    report.print_monthly_report(students)

    attendance.record_attendance(ana)
    attendance.record_attendance(joao)
    attendance.record_attendance(maria)
    attendance.record_attendance(ana)
    report.print_monthly_report(students)

    info01 = classrooms.create_classroom(1, "Informática 1º Ano")
    classrooms.add_student(info01, ana)
    info02 = classrooms.create_classroom(2, "Informática 2º Ano")
    classrooms.add_student(info02, joao)
    classrooms.add_student(info02, maria)
    report.print_monthly_report(students)

    classrooms.register_attendance_for_all(info01)
    report.print_monthly_report(students)
    classrooms.register_attendance_for_all(info02)
    report.print_monthly_report(students)

    attendance.register(AttendanceRecord.general(ana, today))
    attendance.register(AttendanceRecord.for_subject(joao, today, "LTP"))
    report.print_monthly_report(students)
    attendance.register(AttendanceRecord.for_classroom(ana, today, info01))
    attendance.register(AttendanceRecord.with_alert(ana, today, "LTP"))

    # Error paths, handled where they happen.
    _attempt(container, classrooms.add_student, info02, joao)
    small = Classroom(classroom_id=3, name="Laboratório", capacity=LEGACY_CLASS_CAPACITY)
    for student in students:
        _attempt(container, classrooms.add_student, small, student)
    _attempt(container, classrooms.find_student, info01, 99)
    _attempt(container, classrooms.remove_student, info02, 99)
    _attempt(container, classrooms.remove_student, info02, maria.student_id)
    _attempt(container, Student, 0, " ")

    report.print_monthly_report(students)
    return students


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="frequencia", description="Demonstração de registro de presença.")
    parser.add_argument("--debug", action="store_true", help="log diagnostics to stderr")
    args = parser.parse_args(argv)

    container = create_container()
    if args.debug:
        setup_logging(debug=True)

    run_demo(container)
    return 0
