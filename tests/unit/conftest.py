"""Fixtures compartilhadas para os testes."""

import sys
from datetime import date
from pathlib import Path

import pytest

RAIZ = Path(__file__).resolve().parents[2]
DIRETORIO_APP = RAIZ / "app"
if str(DIRETORIO_APP) not in sys.path:
    sys.path.insert(0, str(DIRETORIO_APP))

from src.domain.attendance import RegistroPresenca  # noqa: E402
from src.domain.enrollment import MatriculaAtiva  # noqa: E402
from src.domain.grade import Nota  # noqa: E402
from src.infrastructure.data.attendance_repository import RepositorioPresencas  # noqa: E402
from src.infrastructure.data.enrollment_repository import RepositorioMatriculas  # noqa: E402
from src.infrastructure.data.grade_repository import RepositorioNotas  # noqa: E402


def criar_matricula(student_id, group_id, nome, status="ENROLLED", modalidad="PRESENCIAL"):
    return MatriculaAtiva(
        student_id=student_id,
        group_id=group_id,
        internal_code=f"EST{student_id:03d}",
        full_name=nome,
        modality=modalidad,
        status=status,
    )


def criar_nota(student_id, course_id, evaluation_id, group_id, valor):
    return Nota(
        student_id=student_id,
        course_id=course_id,
        evaluation_id=evaluation_id,
        group_id=group_id,
        value=valor,
    )


def criar_presenca(student_id, group_id, dia, status):
    return RegistroPresenca(student_id=student_id, group_id=group_id, class_date=dia, status=status)


@pytest.fixture()
def repositorio_matriculas():
    """Grupo 1 com três alunos ativos e um retirado; grupo 2 com um aluno; grupo 3 vazio."""
    return RepositorioMatriculas.a_partir_de(
        [
            criar_matricula(1, 1, "Carlos Pérez"),
            criar_matricula(2, 1, "Ana García"),
            criar_matricula(3, 1, "Luis López"),
            criar_matricula(4, 1, "Rosa Retirada", status="WITHDRAWN"),
            criar_matricula(5, 2, "Marta Díaz"),
        ],
        grupos=[1, 2, 3],
    )


@pytest.fixture()
def repositorio_notas():
    """Médias no grupo 1: Pérez 18.0, García 18.0, López 15.0. Avaliação 10 é do grupo 1."""
    return RepositorioNotas.a_partir_de(
        [
            criar_nota(1, 100, 10, 1, 17.0),
            criar_nota(1, 101, 10, 1, 19.0),
            criar_nota(2, 100, 10, 1, 18.0),
            criar_nota(2, 101, 10, 1, 18.0),
            criar_nota(3, 100, 10, 1, 20.0),
            criar_nota(3, 101, 10, 1, 10.0),
            criar_nota(4, 100, 10, 1, 20.0),
            criar_nota(5, 200, 20, 2, 12.5),
        ]
    )


@pytest.fixture()
def repositorio_presencas():
    return RepositorioPresencas.a_partir_de(
        [
            criar_presenca(1, 1, date(2024, 3, 1), "PRESENT"),
            criar_presenca(1, 1, date(2024, 3, 2), "LATE"),
            criar_presenca(1, 1, date(2024, 3, 3), "ABSENT"),
            criar_presenca(2, 1, date(2024, 3, 1), "PRESENT"),
            criar_presenca(2, 1, date(2024, 3, 2), "PRESENT"),
            criar_presenca(5, 2, date(2024, 3, 1), "ABSENT"),
        ]
    )
