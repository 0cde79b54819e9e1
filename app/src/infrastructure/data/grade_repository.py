"""Repositório de notas.

Responsabilidades:
- Manter a tabela de notas em memória
- Filtrar notas por aluno, grupo, avaliação e curso
"""

from typing import Iterable, Optional

import pandas as pd

from src.config.settings import Configuracoes
from src.domain.grade import Nota
from src.infrastructure.data.data_contract import CONTRATO_NOTAS


class RepositorioNotas:
    """Consulta somente leitura sobre as notas registradas.

    Responsabilidades:
    - Validar a tabela recebida contra o contrato de notas
    - Devolver cópias filtradas, nunca a tabela interna
    """

    def __init__(self, dados: Optional[pd.DataFrame] = None):
        """Inicializa o repositório.

        Parâmetros:
        - dados (pd.DataFrame | None): notas; vazio quando omitido
        """
        if dados is None:
            dados = pd.DataFrame(columns=Configuracoes.COLUNAS_NOTAS)
        self._dados = CONTRATO_NOTAS.validar(dados)

    @classmethod
    def a_partir_de(cls, notas: Iterable[Nota]) -> "RepositorioNotas":
        """Cria o repositório a partir de notas de domínio."""
        linhas = [nota.model_dump(mode="json") for nota in notas]
        return cls(pd.DataFrame(linhas, columns=Configuracoes.COLUNAS_NOTAS + ["recorded_at"]))

    def __len__(self) -> int:
        return len(self._dados)

    def buscar_notas(
        self,
        student_id: Optional[int] = None,
        group_id: Optional[int] = None,
        evaluation_id: Optional[int] = None,
        course_id: Optional[int] = None,
    ) -> pd.DataFrame:
        """Busca notas que atendem a todos os filtros informados.

        Parâmetros:
        - student_id (int | None): aluno
        - group_id (int | None): grupo da avaliação
        - evaluation_id (int | None): avaliação
        - course_id (int | None): curso

        Retorno:
        - pd.DataFrame: notas filtradas
        """
        mascara = pd.Series(True, index=self._dados.index)
        filtros = {
            "student_id": student_id,
            "group_id": group_id,
            "evaluation_id": evaluation_id,
            "course_id": course_id,
        }
        for coluna, valor in filtros.items():
            if valor is not None:
                mascara &= self._dados[coluna] == int(valor)
        return self._dados.loc[mascara].reset_index(drop=True)

    def ids_grupos(self) -> set:
        """Retorna os grupos que possuem notas."""
        return set(self._dados["group_id"].tolist())
