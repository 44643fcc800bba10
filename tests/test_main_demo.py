from __future__ import annotations

import importlib
import io
import logging
from datetime import date

import pytest

from src.frequencia.frequencia.common.logging_utils import setup_logging
from src.frequencia.frequencia.container import build_container
from src.frequencia.frequencia.main import create_container, run_demo


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    ready = getattr(root, "_frequencia_logger_ready", None)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    if ready is None:
        root.__dict__.pop("_frequencia_logger_ready", None)
    else:
        root._frequencia_logger_ready = ready


def test_demo_runs_whole_scenario():
    out = io.StringIO()
    container = build_container(class_capacity=40, absence_limit=5, stream=out)

    students = run_demo(container, today=date(2025, 3, 14))
    text = out.getvalue()

    assert [s.attendance() for s in students] == [6, 3, 2]
    assert "Presença registrada para Ana Maria em 14/03/2025" in text
    assert "Disciplina: LTP" in text
    assert "Turma: Informática 1º Ano" in text
    assert "⚠️  Alerta: Ana Maria excedeu o limite de faltas na disciplina LTP." in text
    assert "Erro: Estudante João Pedro já está cadastrado na turma." in text
    assert "Erro: Turma já atingiu a capacidade máxima de 2 estudantes." in text
    assert "Erro: Estudante com ID 99 não foi encontrado." in text
    assert "Estudante Maria Clara removido da turma Informática 2º Ano." in text
    assert "Erro: Dados inválidos: id do estudante deve ser positivo" in text
    assert text.splitlines()[-1] == "3 - Maria Clara: 2 presença(s)"


def test_create_container_reads_settings(monkeypatch, restore_root_logger):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("CLASS_CAPACITY", "3")
    importlib.reload(importlib.import_module("config.testing"))
    container = create_container()

    assert container.classroom_service.capacity == 3

    monkeypatch.delenv("CLASS_CAPACITY")
    importlib.reload(importlib.import_module("config.testing"))


def test_setup_logging_adds_one_handler(restore_root_logger):
    before = len(restore_root_logger.handlers)
    restore_root_logger.__dict__.pop("_frequencia_logger_ready", None)

    setup_logging(level="INFO")
    setup_logging(debug=True)

    assert len(restore_root_logger.handlers) == before + 1
    assert restore_root_logger.level == logging.DEBUG
