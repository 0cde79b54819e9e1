"""Testes do gerenciador de dados."""

from unittest.mock import Mock

import pandas as pd
import pytest

from src.infrastructure.data.data_manager import GerenciadorDados


def resetar_gerenciador():
    GerenciadorDados._instancia = None
    GerenciadorDados._notas = None
    GerenciadorDados._presencas = None
    GerenciadorDados._matriculas = None


def _carregador_fake():
    carregador = Mock()
    carregador.carregar_notas.return_value = pd.DataFrame(
        [{"student_id": 1, "course_id": 1, "evaluation_id": 1, "group_id": 1, "value": 14.0}]
    )
    carregador.carregar_presencas.return_value = pd.DataFrame(
        [{"student_id": 1, "group_id": 2, "class_date": "2024-03-01", "status": "PRESENT"}]
    )
    carregador.carregar_matriculas.return_value = pd.DataFrame(
        [{"student_id": 1, "group_id": 1, "internal_code": "E1", "full_name": "Ana", "modality": "", "status": "ENROLLED"}]
    )
    carregador.carregar_grupos.return_value = None
    return carregador


def test_gerenciador_singleton():
    resetar_gerenciador()
    assert GerenciadorDados() is GerenciadorDados()


def test_carregar_dados_sucesso(monkeypatch):
    resetar_gerenciador()
    carregador = _carregador_fake()
    monkeypatch.setattr("src.infrastructure.data.data_manager.CarregadorDados", lambda: carregador)

    gerenciador = GerenciadorDados()
    gerenciador.carregar_dados()

    assert len(gerenciador.obter_repositorio_notas()) == 1
    assert len(gerenciador.obter_repositorio_presencas()) == 1
    assert gerenciador.obter_repositorio_matriculas().grupo_existe(2)


def test_carregar_dados_sem_recarregar(monkeypatch):
    resetar_gerenciador()
    carregador = _carregador_fake()
    monkeypatch.setattr("src.infrastructure.data.data_manager.CarregadorDados", lambda: carregador)

    gerenciador = GerenciadorDados()
    gerenciador.carregar_dados()
    gerenciador.carregar_dados()

    carregador.carregar_notas.assert_called_once()

    gerenciador.carregar_dados(force=True)
    assert carregador.carregar_notas.call_count == 2


def test_carregar_dados_falha(monkeypatch):
    resetar_gerenciador()
    carregador = _carregador_fake()
    carregador.carregar_notas.side_effect = FileNotFoundError("sem notas")
    monkeypatch.setattr("src.infrastructure.data.data_manager.CarregadorDados", lambda: carregador)

    with pytest.raises(FileNotFoundError):
        GerenciadorDados().obter_repositorio_notas()
