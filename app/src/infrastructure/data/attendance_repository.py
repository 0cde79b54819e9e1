"""Repositório de presenças.

Responsabilidades:
- Manter a tabela de presenças em memória
- Filtrar presenças por aluno, grupo e intervalo de datas
"""

from datetime import date
from typing import Iterable, Optional

import pandas as pd

from src.config.settings import Configuracoes
from src.domain.attendance import RegistroPresenca
from src.infrastructure.data.data_contract import CONTRATO_PRESENCAS


class RepositorioPresencas:
    """Consulta somente leitura sobre os registros de presença."""

    def __init__(self, dados: Optional[pd.DataFrame] = None):
        """Inicializa o repositório.

        Parâmetros:
        - dados (pd.DataFrame | None): presenças; vazio quando omitido
        """
        if dados is None:
            dados = pd.DataFrame(columns=Configuracoes.COLUNAS_PRESENCAS)
        self._dados = CONTRATO_PRESENCAS.validar(dados)

    @classmethod
    def a_partir_de(cls, registros: Iterable[RegistroPresenca]) -> "RepositorioPresencas":
        """Cria o repositório a partir de registros de domínio."""
        linhas = [registro.model_dump(mode="json") for registro in registros]
        return cls(pd.DataFrame(linhas, columns=Configuracoes.COLUNAS_PRESENCAS + ["recorded_time"]))

    def __len__(self) -> int:
        return len(self._dados)

    def buscar_presencas(
        self,
        student_id: Optional[int] = None,
        group_id: Optional[int] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> pd.DataFrame:
        """Busca presenças ordenadas por aluno e data da aula.

        Parâmetros:
        - student_id (int | None): aluno
        - group_id (int | None): grupo
        - date_from (date | None): primeira data incluída
        - date_to (date | None): última data incluída

        Retorno:
        - pd.DataFrame: presenças filtradas
        """
        dados = self._dados
        mascara = pd.Series(True, index=dados.index)
        if student_id is not None:
            mascara &= dados["student_id"] == int(student_id)
        if group_id is not None:
            mascara &= dados["group_id"] == int(group_id)
        if date_from is not None:
            mascara &= dados["class_date"] >= date_from
        if date_to is not None:
            mascara &= dados["class_date"] <= date_to
        return (
            dados.loc[mascara]
            .sort_values(by=["student_id", "class_date"], kind="mergesort")
            .reset_index(drop=True)
        )

    def ids_grupos(self) -> set:
        """Retorna os grupos que possuem presenças."""
        return set(self._dados["group_id"].tolist())
