"""Controlador de presença da API.

Responsabilidades:
- Definir rotas de resumo de presença por aluno e por grupo
- Resolver dependências do serviço de presença
- Traduzir erros em respostas HTTP
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from src.application.attendance_service import ServicoPresenca
from src.application.data_runtime_service import criar_servico_presenca
from src.domain.attendance import IntervaloDatas
from src.domain.errors import ErroNaoEncontrado


def obter_servico_presenca():
    """Dependência para obter uma instância do serviço de presença.

    Exceções:
    - HTTPException: quando as bases acadêmicas não estão disponíveis
    """
    try:
        return criar_servico_presenca()
    except (RuntimeError, FileNotFoundError, ValueError) as erro:
        raise HTTPException(status_code=503, detail=f"Bases acadêmicas não inicializadas. {str(erro)}")


class ControladorPresenca:
    """Controlador de resumos de presença."""

    def __init__(self):
        self.roteador = APIRouter()
        self.roteador.add_api_route(
            "/attendance/summary/student/{student_id}",
            self._resumo_estudante,
            methods=["GET"],
            response_model=dict,
        )
        self.roteador.add_api_route(
            "/attendance/summary/group/{group_id}",
            self._resumo_grupo,
            methods=["GET"],
            response_model=list,
        )

    @staticmethod
    async def _resumo_estudante(
        student_id: int,
        group_id: int,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        servico: ServicoPresenca = Depends(obter_servico_presenca),
    ):
        """Resumo de presença de um aluno em um grupo.

        Exceções:
        - HTTPException: 404 grupo inexistente, 400 intervalo inválido
        """
        try:
            intervalo = IntervaloDatas(date_from=date_from, date_to=date_to)
            return servico.resumo_por_estudante(student_id, group_id, intervalo).model_dump()
        except ErroNaoEncontrado as erro:
            raise HTTPException(status_code=404, detail=str(erro))
        except (ValueError, TypeError, KeyError) as erro:
            raise HTTPException(status_code=400, detail=str(erro))

    @staticmethod
    async def _resumo_grupo(
        group_id: int,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        servico: ServicoPresenca = Depends(obter_servico_presenca),
    ):
        """Resumo de presença de cada aluno do grupo, ordenado por aluno."""
        try:
            intervalo = IntervaloDatas(date_from=date_from, date_to=date_to)
            return [resumo.model_dump() for resumo in servico.resumo_por_grupo(group_id, intervalo)]
        except ErroNaoEncontrado as erro:
            raise HTTPException(status_code=404, detail=str(erro))
        except (ValueError, TypeError, KeyError) as erro:
            raise HTTPException(status_code=400, detail=str(erro))
