"""Testes do serviço de presença."""

from datetime import date

import pytest

from src.application.attendance_service import ServicoPresenca
from src.domain.attendance import IntervaloDatas, RegistroPresenca
from src.domain.errors import ErroNaoEncontrado
from src.infrastructure.data.attendance_repository import RepositorioPresencas


@pytest.fixture()
def servico(repositorio_presencas, repositorio_matriculas):
    return ServicoPresenca(repositorio_presencas, repositorio_matriculas)


def _historico(*status):
    return [
        RegistroPresenca(student_id=1, group_id=1, class_date=date(2024, 3, dia), status=s)
        for dia, s in enumerate(status, start=1)
    ]


def _percentual(registros):
    servico = ServicoPresenca(RepositorioPresencas.a_partir_de(registros))
    return servico.resumo_por_estudante(1, 1).attendance_percentage


def test_resumo_presente_atraso_ausente(servico):
    resumo = servico.resumo_por_estudante(1, 1)

    assert resumo.total_classes == 3
    assert (resumo.present, resumo.late, resumo.absent) == (1, 1, 1)
    assert resumo.attendance_percentage == 66.67


def test_resumo_com_intervalo(servico):
    resumo = servico.resumo_por_estudante(1, 1, IntervaloDatas(date_from=date(2024, 3, 3)))

    assert resumo.total_classes == 1
    assert resumo.attendance_percentage == 0.0


def test_resumo_sem_registros_zerado(servico):
    resumo = servico.resumo_por_estudante(3, 1)

    assert resumo.total_classes == 0
    assert resumo.attendance_percentage == 0.0


def test_resumo_grupo_inexistente(servico):
    with pytest.raises(ErroNaoEncontrado):
        servico.resumo_por_estudante(1, 99)
    with pytest.raises(ErroNaoEncontrado):
        servico.resumo_por_grupo(99)


def test_resumo_por_grupo_ordenado(servico):
    resumos = servico.resumo_por_grupo(1)

    assert [r.student_id for r in resumos] == [1, 2]
    assert resumos[0].attendance_percentage == 66.67
    assert resumos[1].attendance_percentage == 100.0
    assert resumos[1].full_name == "Ana García"
    assert resumos[1].internal_code == "EST002"


def test_resumo_por_grupo_sem_registros(servico):
    assert servico.resumo_por_grupo(3) == []


def test_resumo_por_grupo_intervalo(servico):
    resumos = servico.resumo_por_grupo(1, IntervaloDatas(date_from=date(2024, 3, 2), date_to=date(2024, 3, 2)))

    assert [(r.student_id, r.total_classes) for r in resumos] == [(1, 1), (2, 1)]


def test_presenca_ou_atraso_nunca_reduz_percentual():
    base = _historico("PRESENT", "ABSENT", "LATE", "ABSENT")
    inicial = _percentual(base)

    for status in ("PRESENT", "LATE"):
        novo = base + [RegistroPresenca(student_id=1, group_id=1, class_date=date(2024, 3, 20), status=status)]
        assert _percentual(novo) >= inicial


def test_ausencia_nunca_aumenta_percentual():
    base = _historico("PRESENT", "LATE", "ABSENT")
    novo = base + [RegistroPresenca(student_id=1, group_id=1, class_date=date(2024, 3, 20), status="ABSENT")]

    assert _percentual(novo) <= _percentual(base)


def test_resumo_sem_repositorio_de_matriculas():
    servico = ServicoPresenca(RepositorioPresencas.a_partir_de(_historico("PRESENT")))

    resumos = servico.resumo_por_grupo(1)

    assert resumos[0].full_name is None
    assert resumos[0].attendance_percentage == 100.0


def test_resumo_estudante_lista_registros_em_ordem_de_data():
    registros = [
        RegistroPresenca(student_id=1, group_id=1, class_date=date(2024, 3, 8), status="LATE", recorded_time="08:15"),
        RegistroPresenca(student_id=1, group_id=1, class_date=date(2024, 3, 1), status="PRESENT"),
        RegistroPresenca(student_id=1, group_id=1, class_date=date(2024, 3, 15), status="ABSENT"),
        RegistroPresenca(student_id=2, group_id=1, class_date=date(2024, 3, 5), status="PRESENT"),
    ]
    servico = ServicoPresenca(RepositorioPresencas.a_partir_de(registros))

    resumo = servico.resumo_por_estudante(1, 1, IntervaloDatas(date_to=date(2024, 3, 8)))

    assert [r.class_date for r in resumo.records] == [date(2024, 3, 1), date(2024, 3, 8)]
    assert [r.status.value for r in resumo.records] == ["PRESENT", "LATE"]
    assert [r.recorded_time for r in resumo.records] == [None, "08:15"]
    assert resumo.total_classes == len(resumo.records)


def test_resumo_estudante_sem_registros_lista_vazia(servico):
    assert servico.resumo_por_estudante(3, 1).records == []


def test_resumo_por_grupo_sem_lista_de_registros(servico):
    assert all(r.records is None for r in servico.resumo_por_grupo(1))
