"""Controlador de ranking da API.

Responsabilidades:
- Definir rotas de ranking de grupo, global e posição de aluno
- Resolver dependências do serviço de ranking
- Traduzir erros em respostas HTTP
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from src.application.data_runtime_service import criar_servico_ranking
from src.application.ranking_service import ServicoRanking
from src.domain.errors import ErroNaoEncontrado


def obter_servico_ranking():
    """Dependência para obter uma instância do serviço de ranking.

    Retorno:
    - ServicoRanking: instância pronta para uso

    Exceções:
    - HTTPException: quando as bases acadêmicas não estão disponíveis
    """
    try:
        return criar_servico_ranking()
    except (RuntimeError, FileNotFoundError, ValueError) as erro:
        raise HTTPException(status_code=503, detail=f"Bases acadêmicas não inicializadas. {str(erro)}")


class ControladorRanking:
    """Controlador de ranking.

    Responsabilidades:
    - Registrar rotas de ranking
    - Expor ranking de grupo, ranking global e posição individual
    """

    def __init__(self):
        """Inicializa o controlador.

        Responsabilidades:
        - Instanciar o roteador
        - Registrar as rotas disponíveis
        """
        self.roteador = APIRouter()
        self._registrar_rotas()

    def _registrar_rotas(self):
        """Registra as rotas de ranking."""
        self.roteador.add_api_route(
            path="/rankings/group/{group_id}",
            endpoint=self._obter_ranking_grupo,
            methods=["GET"],
            response_model=dict,
            summary="Ranking de um grupo com estatísticas",
        )
        self.roteador.add_api_route(
            path="/rankings/global",
            endpoint=self._obter_ranking_global,
            methods=["GET"],
            response_model=dict,
            summary="Ranking de todos os alunos matriculados",
        )
        self.roteador.add_api_route(
            path="/rankings/student/{student_id}",
            endpoint=self._obter_posicao_estudante,
            methods=["GET"],
            response_model=dict,
            summary="Posição de um aluno no ranking",
        )

    @staticmethod
    def _executar(funcao, *args):
        """Executa uma consulta do serviço traduzindo erros em HTTP.

        Exceções:
        - HTTPException: 404 sem dados, 400 entrada inválida, 503 indisponível
        """
        try:
            return funcao(*args).model_dump()
        except ErroNaoEncontrado as erro:
            raise HTTPException(status_code=404, detail=str(erro))
        except (ValueError, TypeError, KeyError) as erro:
            raise HTTPException(status_code=400, detail=str(erro))
        except RuntimeError as erro:
            raise HTTPException(status_code=503, detail=str(erro))

    @staticmethod
    async def _obter_ranking_grupo(
        group_id: int,
        evaluation_id: Optional[int] = None,
        servico: ServicoRanking = Depends(obter_servico_ranking),
    ):
        """Ranking de um grupo.

        Parâmetros:
        - group_id (int): grupo
        - evaluation_id (int | None): avaliação
        - servico (ServicoRanking): serviço injetado

        Retorno:
        - dict: grupo, avaliação, estatísticas e ranking
        """
        return ControladorRanking._executar(servico.obter_ranking_grupo, group_id, evaluation_id)

    @staticmethod
    async def _obter_ranking_global(
        evaluation_id: Optional[int] = None,
        servico: ServicoRanking = Depends(obter_servico_ranking),
    ):
        """Ranking institucional, sem filtro de grupo."""
        return ControladorRanking._executar(servico.obter_ranking_grupo, None, evaluation_id)

    @staticmethod
    async def _obter_posicao_estudante(
        student_id: int,
        group_id: Optional[int] = None,
        evaluation_id: Optional[int] = None,
        servico: ServicoRanking = Depends(obter_servico_ranking),
    ):
        """Posição de um aluno.

        Parâmetros:
        - student_id (int): aluno
        - group_id (int | None): grupo; omitido para ranking global
        - evaluation_id (int | None): avaliação
        - servico (ServicoRanking): serviço injetado

        Retorno:
        - dict: entrada do aluno com total, percentil e diferença ao primeiro
        """
        return ControladorRanking._executar(
            servico.obter_posicao_estudante, student_id, group_id, evaluation_id
        )
