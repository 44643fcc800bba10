from __future__ import annotations

from enum import Enum


class RecordKind(str, Enum):
    """Variante de um registro de presença (geral, disciplina, turma, alerta)."""

    GENERAL = "GENERAL"
    SUBJECT = "SUBJECT"
    CLASSROOM = "CLASSROOM"
    SUBJECT_ALERT = "SUBJECT_ALERT"
