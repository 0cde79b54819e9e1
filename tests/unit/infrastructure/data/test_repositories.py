"""Testes dos repositórios em memória."""

from datetime import date

import pandas as pd

from src.infrastructure.data.enrollment_repository import RepositorioMatriculas


def test_buscar_notas_por_aluno_e_avaliacao(repositorio_notas):
    notas = repositorio_notas.buscar_notas(student_id=1, evaluation_id=10)

    assert sorted(notas["course_id"].tolist()) == [100, 101]


def test_buscar_notas_por_curso(repositorio_notas):
    notas = repositorio_notas.buscar_notas(course_id=100)

    assert sorted(notas["student_id"].tolist()) == [1, 2, 3, 4]


def test_buscar_notas_sem_resultado(repositorio_notas):
    assert repositorio_notas.buscar_notas(student_id=99).empty


def test_buscar_presencas_intervalo_inclusivo(repositorio_presencas):
    presencas = repositorio_presencas.buscar_presencas(
        student_id=1, group_id=1, date_from=date(2024, 3, 2), date_to=date(2024, 3, 3)
    )

    assert presencas["status"].tolist() == ["LATE", "ABSENT"]


def test_buscar_presencas_ordenadas_por_aluno(repositorio_presencas):
    presencas = repositorio_presencas.buscar_presencas(group_id=1)

    assert presencas["student_id"].tolist() == [1, 1, 1, 2, 2]


def test_matriculas_ativas_do_grupo(repositorio_matriculas):
    ativas = repositorio_matriculas.buscar_matriculas_ativas(1)

    assert ativas["student_id"].tolist() == [1, 2, 3]


def test_matriculas_ativas_globais_sem_repeticao():
    repositorio = RepositorioMatriculas(
        pd.DataFrame(
            [
                {"student_id": 1, "group_id": 1, "internal_code": "A", "full_name": "A", "modality": "", "status": "ENROLLED"},
                {"student_id": 1, "group_id": 2, "internal_code": "A", "full_name": "A", "modality": "", "status": "ENROLLED"},
                {"student_id": 2, "group_id": 2, "internal_code": "B", "full_name": "B", "modality": "", "status": "ENROLLED"},
            ]
        )
    )

    assert repositorio.buscar_matriculas_ativas()["student_id"].tolist() == [1, 2]


def test_grupo_existe_com_cadastro(repositorio_matriculas):
    assert repositorio_matriculas.grupo_existe(3)
    assert not repositorio_matriculas.grupo_existe(99)


def test_grupo_inferido_sem_cadastro():
    repositorio = RepositorioMatriculas(grupos_adicionais=[7])

    assert repositorio.grupo_existe(7)
    assert not repositorio.grupo_existe(8)


def test_buscar_identificacao(repositorio_matriculas):
    identificacao = repositorio_matriculas.buscar_identificacao([2, 5])

    assert identificacao["full_name"].tolist() == ["Ana García", "Marta Díaz"]
