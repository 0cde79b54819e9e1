"""Serviço de ranking acadêmico.

Responsabilidades:
- Montar a coorte de alunos ativos de um grupo ou da instituição
- Calcular média e cursos aprovados/reprovados por aluno
- Ordenar e atribuir posições com empates (semântica RANK())
- Calcular estatísticas do grupo e a posição de um aluno
"""

from decimal import Decimal
from typing import List, Optional

from src.application.average_calculator import CalculadoraMedia, media_exata
from src.application.course_counter import ContadorCursos
from src.config.settings import Configuracoes
from src.domain.errors import ErroNaoEncontrado
from src.domain.grade import EscopoNotas
from src.domain.ranking import EntradaRanking, EstatisticasGrupo, PosicaoEstudante, RankingGrupo
from src.infrastructure.data.enrollment_repository import RepositorioMatriculas
from src.infrastructure.data.grade_repository import RepositorioNotas
from src.util.logger import logger
from src.util.rounding import arredondar, percentual


def atribuir_posicoes(entradas: List[EntradaRanking]) -> List[EntradaRanking]:
    """Ordena as entradas e atribui posições no estilo "1224".

    Ordem: média decrescente, nome completo crescente e id do aluno.
    Médias iguais compartilham a posição; a próxima média distinta
    assume a quantidade de entradas anteriores + 1.

    Parâmetros:
    - entradas (list[EntradaRanking]): entradas com média definida

    Retorno:
    - list[EntradaRanking]: novas entradas ordenadas com position preenchida
    """
    ordenadas = sorted(entradas, key=lambda e: (-e.average, e.full_name, e.student_id))

    ranqueadas = []
    posicao = 0
    media_anterior = None
    for indice, entrada in enumerate(ordenadas, start=1):
        if entrada.average != media_anterior:
            posicao = indice
            media_anterior = entrada.average
        ranqueadas.append(entrada.model_copy(update={"position": posicao}))
    return ranqueadas


def calcular_estatisticas(ranking: List[EntradaRanking]) -> EstatisticasGrupo:
    """Calcula estatísticas sobre as entradas ranqueadas.

    Retorno:
    - EstatisticasGrupo: zerada quando o ranking está vazio
    """
    if not ranking:
        return EstatisticasGrupo()

    medias = [entrada.average for entrada in ranking]
    aprovados = sum(1 for media in medias if media >= Configuracoes.PASSING_GRADE)
    return EstatisticasGrupo(
        student_count=len(ranking),
        group_average=arredondar(media_exata(medias)),
        best_average=max(medias),
        worst_average=min(medias),
        passed_count=aprovados,
        failed_count=len(ranking) - aprovados,
        pass_rate=percentual(aprovados, len(ranking)),
    )


class ServicoRanking:
    """Serviço de ranking de alunos.

    Responsabilidades:
    - Ser a única fonte da regra de ordenação e posição
    - Recalcular tudo a cada chamada, sem cache
    """

    def __init__(self, repositorio_notas: RepositorioNotas, repositorio_matriculas: RepositorioMatriculas):
        """Inicializa o serviço com os repositórios.

        Parâmetros:
        - repositorio_notas (RepositorioNotas): fonte de notas
        - repositorio_matriculas (RepositorioMatriculas): fonte da coorte
        """
        self.repositorio_notas = repositorio_notas
        self.repositorio_matriculas = repositorio_matriculas
        self.calculadora = CalculadoraMedia(repositorio_notas)
        self.contador = ContadorCursos(repositorio_notas)

    def construir_ranking(
        self, group_id: Optional[int] = None, evaluation_id: Optional[int] = None
    ) -> List[EntradaRanking]:
        """Monta o ranking ordenado da coorte.

        Parâmetros:
        - group_id (int | None): grupo; None para ranking global
        - evaluation_id (int | None): restringe as notas a uma avaliação

        Retorno:
        - list[EntradaRanking]: entradas ordenadas e posicionadas

        Exceções:
        - ErroNaoEncontrado: quando o grupo não existe
        """
        self._validar_grupo(group_id)

        coorte = self.repositorio_matriculas.buscar_matriculas_ativas(group_id)
        escopo = EscopoNotas.para(group_id=group_id, evaluation_id=evaluation_id)

        notas_escopo = self.repositorio_notas.buscar_notas(**escopo.como_filtro())
        notas_por_aluno = {int(aluno): notas for aluno, notas in notas_escopo.groupby("student_id")}

        entradas = []
        for matricula in coorte.itertuples(index=False):
            notas = notas_por_aluno.get(int(matricula.student_id))
            if notas is None:
                continue

            aprovados, reprovados = self.contador.contar(notas)
            entradas.append(
                EntradaRanking(
                    student_id=int(matricula.student_id),
                    internal_code=matricula.internal_code,
                    full_name=matricula.full_name,
                    modality=matricula.modality,
                    average=self.calculadora.media(notas),
                    total_grades=len(notas),
                    courses_passed=aprovados,
                    courses_failed=reprovados,
                    min_grade=arredondar(notas["value"].min()),
                    max_grade=arredondar(notas["value"].max()),
                )
            )

        logger.info(
            f"Ranking calculado (grupo={group_id}, avaliação={evaluation_id}): "
            f"{len(entradas)} de {len(coorte)} alunos ranqueados."
        )
        return atribuir_posicoes(entradas)

    def obter_ranking_grupo(
        self, group_id: Optional[int] = None, evaluation_id: Optional[int] = None
    ) -> RankingGrupo:
        """Retorna o ranking completo da coorte com estatísticas.

        Parâmetros:
        - group_id (int | None): grupo; None para ranking global
        - evaluation_id (int | None): avaliação

        Retorno:
        - RankingGrupo: ranking e estatísticas
        """
        ranking = self.construir_ranking(group_id, evaluation_id)
        return RankingGrupo(
            group_id=group_id,
            evaluation_id=evaluation_id,
            total_students=len(ranking),
            statistics=calcular_estatisticas(ranking),
            ranking=ranking,
        )

    def obter_posicao_estudante(
        self,
        student_id: int,
        group_id: Optional[int] = None,
        evaluation_id: Optional[int] = None,
    ) -> PosicaoEstudante:
        """Localiza um aluno no ranking da coorte.

        Parâmetros:
        - student_id (int): aluno
        - group_id (int | None): grupo; None para ranking global
        - evaluation_id (int | None): avaliação

        Retorno:
        - PosicaoEstudante: entrada do aluno com percentil e distância ao primeiro

        Exceções:
        - ErroNaoEncontrado: grupo inexistente, aluno sem matrícula ativa ou sem notas
        """
        ranking = self.construir_ranking(group_id, evaluation_id)
        entrada = next((e for e in ranking if e.student_id == int(student_id)), None)

        if entrada is None:
            coorte = self.repositorio_matriculas.buscar_matriculas_ativas(group_id)
            if int(student_id) not in set(coorte["student_id"].tolist()):
                motivo = "não possui matrícula ativa"
            else:
                motivo = "não possui notas"
            logger.warning(f"Sem dados de ranking para o aluno {student_id} (grupo={group_id}): {motivo}.")
            raise ErroNaoEncontrado(f"Sem dados de ranking: o aluno {student_id} {motivo} no escopo informado.")

        total = len(ranking)
        primeiro = ranking[0]
        return PosicaoEstudante(
            **entrada.model_dump(),
            group_id=group_id,
            evaluation_id=evaluation_id,
            total_students=total,
            percentile=percentual(total - entrada.position + 1, total),
            difference_from_first=arredondar(Decimal(str(primeiro.average)) - Decimal(str(entrada.average))),
            group_average=calcular_estatisticas(ranking).group_average,
        )

    def _validar_grupo(self, group_id: Optional[int]) -> None:
        if group_id is not None and not self.repositorio_matriculas.grupo_existe(group_id):
            raise ErroNaoEncontrado(f"Grupo {group_id} não encontrado.")
