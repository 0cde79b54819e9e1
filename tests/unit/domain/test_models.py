"""Testes dos modelos de domínio."""

from datetime import date

import pytest
from pydantic import ValidationError

from src.domain.attendance import IntervaloDatas, RegistroPresenca, StatusPresenca
from src.domain.grade import EscopoNotas, Nota


def test_nota_fora_da_escala_invalida():
    with pytest.raises(ValidationError):
        Nota(student_id=1, course_id=1, evaluation_id=1, group_id=1, value=20.5)


def test_escopo_prioriza_avaliacao():
    assert EscopoNotas.para(group_id=1, evaluation_id=7).como_filtro() == {"evaluation_id": 7}
    assert EscopoNotas.para(group_id=1).como_filtro() == {"group_id": 1}
    assert EscopoNotas.para().como_filtro() == {}


def test_intervalo_invertido_invalido():
    with pytest.raises(ValueError):
        IntervaloDatas(date_from=date(2024, 3, 10), date_to=date(2024, 3, 1))


def test_registro_presenca_valida_hora():
    registro = RegistroPresenca(
        student_id=1, group_id=1, class_date=date(2024, 3, 1), status="LATE", recorded_time="08:15"
    )
    assert registro.status is StatusPresenca.LATE

    with pytest.raises(ValidationError):
        RegistroPresenca(student_id=1, group_id=1, class_date=date(2024, 3, 1), status="LATE", recorded_time="25:00")
