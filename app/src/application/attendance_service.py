"""Serviço de resumo de presença.

Responsabilidades:
- Contar aulas por status para um aluno ou para um grupo
- Calcular percentual de presença (atrasos contam como presença)
"""

from typing import List, Optional

import pandas as pd

from src.config.settings import Configuracoes
from src.domain.attendance import IntervaloDatas, RegistroPresenca, ResumoPresenca
from src.domain.errors import ErroNaoEncontrado
from src.infrastructure.data.attendance_repository import RepositorioPresencas
from src.infrastructure.data.enrollment_repository import RepositorioMatriculas
from src.util.logger import logger
from src.util.rounding import percentual


def _horario(valor) -> Optional[str]:
    """Normaliza o horário de registro para HH:MM; None quando ausente."""
    if valor is None or pd.isna(valor):
        return None
    horario = pd.to_datetime(str(valor), errors="coerce")
    return None if pd.isna(horario) else horario.strftime("%H:%M")


class ServicoPresenca:
    """Serviço de agregação de presenças.

    Responsabilidades:
    - Aplicar filtros de aluno, grupo e intervalo de datas
    - Montar resumos zerados quando não há registros
    """

    def __init__(
        self,
        repositorio_presencas: RepositorioPresencas,
        repositorio_matriculas: Optional[RepositorioMatriculas] = None,
    ):
        """Inicializa o serviço.

        Parâmetros:
        - repositorio_presencas (RepositorioPresencas): fonte de presenças
        - repositorio_matriculas (RepositorioMatriculas | None): usado para validar
          grupos e identificar alunos no resumo do grupo
        """
        self.repositorio_presencas = repositorio_presencas
        self.repositorio_matriculas = repositorio_matriculas

    def resumo_por_estudante(
        self, student_id: int, group_id: int, intervalo: Optional[IntervaloDatas] = None
    ) -> ResumoPresenca:
        """Resume a presença de um aluno em um grupo.

        Parâmetros:
        - student_id (int): aluno
        - group_id (int): grupo
        - intervalo (IntervaloDatas | None): datas inclusivas

        Retorno:
        - ResumoPresenca: contagens, percentual e registros em ordem de data

        Exceções:
        - ErroNaoEncontrado: quando o grupo não existe
        """
        self._validar_grupo(group_id)
        intervalo = intervalo or IntervaloDatas()
        registros = self.repositorio_presencas.buscar_presencas(
            student_id=student_id,
            group_id=group_id,
            date_from=intervalo.date_from,
            date_to=intervalo.date_to,
        )
        contagens = self._contar_status(registros["status"])
        resumo = self._montar_resumo(int(student_id), int(group_id), contagens)
        return resumo.model_copy(update={"records": self._registros(registros)})

    def resumo_por_grupo(self, group_id: int, intervalo: Optional[IntervaloDatas] = None) -> List[ResumoPresenca]:
        """Resume a presença de cada aluno com registros no grupo.

        Parâmetros:
        - group_id (int): grupo
        - intervalo (IntervaloDatas | None): datas inclusivas

        Retorno:
        - list[ResumoPresenca]: um resumo por aluno, ordenado por student_id

        Exceções:
        - ErroNaoEncontrado: quando o grupo não existe
        """
        self._validar_grupo(group_id)
        intervalo = intervalo or IntervaloDatas()
        registros = self.repositorio_presencas.buscar_presencas(
            group_id=group_id,
            date_from=intervalo.date_from,
            date_to=intervalo.date_to,
        )
        if registros.empty:
            logger.info(f"Nenhuma presença registrada para o grupo {group_id} no intervalo.")
            return []

        tabela = (
            registros.groupby("student_id")["status"]
            .value_counts()
            .unstack(fill_value=0)
            .reindex(columns=Configuracoes.STATUS_PRESENCA, fill_value=0)
            .sort_index()
        )
        identificacao = self._identificar(tabela.index.tolist())

        resumos = []
        for student_id, linha in tabela.iterrows():
            contagens = {status: int(linha[status]) for status in Configuracoes.STATUS_PRESENCA}
            resumo = self._montar_resumo(int(student_id), int(group_id), contagens)
            codigo, nome = identificacao.get(int(student_id), (None, None))
            resumos.append(resumo.model_copy(update={"internal_code": codigo, "full_name": nome}))

        logger.info(f"Resumo de presença do grupo {group_id}: {len(resumos)} alunos.")
        return resumos

    @staticmethod
    def _contar_status(status: pd.Series) -> dict:
        contagem = status.value_counts()
        return {s: int(contagem.get(s, 0)) for s in Configuracoes.STATUS_PRESENCA}

    @staticmethod
    def _registros(registros: pd.DataFrame) -> List[RegistroPresenca]:
        linhas = registros.sort_values(by="class_date", kind="mergesort")
        return [
            RegistroPresenca(
                student_id=int(linha["student_id"]),
                group_id=int(linha["group_id"]),
                class_date=linha["class_date"],
                status=linha["status"],
                recorded_time=_horario(linha.get("recorded_time")),
            )
            for _, linha in linhas.iterrows()
        ]

    @staticmethod
    def _montar_resumo(student_id: int, group_id: int, contagens: dict) -> ResumoPresenca:
        total = sum(contagens.values())
        atendidas = sum(contagens[s] for s in Configuracoes.STATUS_PRESENCA_ATENDIDA)
        return ResumoPresenca(
            student_id=student_id,
            group_id=group_id,
            total_classes=total,
            present=contagens["PRESENT"],
            late=contagens["LATE"],
            absent=contagens["ABSENT"],
            attendance_percentage=percentual(atendidas, total),
        )

    def _identificar(self, student_ids: list) -> dict:
        if self.repositorio_matriculas is None:
            return {}
        dados = self.repositorio_matriculas.buscar_identificacao(student_ids)
        return {
            int(linha.student_id): (linha.internal_code, linha.full_name)
            for linha in dados.itertuples(index=False)
        }

    def _validar_grupo(self, group_id: int) -> None:
        if self.repositorio_matriculas is not None and not self.repositorio_matriculas.grupo_existe(group_id):
            raise ErroNaoEncontrado(f"Grupo {group_id} não encontrado.")
