"""Repositório de matrículas.

Responsabilidades:
- Manter a projeção de matrículas com identificação do aluno
- Listar matrículas ativas de um grupo ou da instituição
- Responder se um grupo existe
"""

from typing import Iterable, Optional

import pandas as pd

from src.config.settings import Configuracoes
from src.domain.enrollment import MatriculaAtiva
from src.infrastructure.data.data_contract import CONTRATO_GRUPOS, CONTRATO_MATRICULAS


class RepositorioMatriculas:
    """Consulta somente leitura sobre as matrículas.

    Responsabilidades:
    - Filtrar apenas matrículas ENROLLED
    - Conhecer o conjunto de grupos existentes
    """

    def __init__(
        self,
        dados: Optional[pd.DataFrame] = None,
        grupos: Optional[pd.DataFrame] = None,
        grupos_adicionais: Iterable[int] = (),
    ):
        """Inicializa o repositório.

        Parâmetros:
        - dados (pd.DataFrame | None): matrículas; vazio quando omitido
        - grupos (pd.DataFrame | None): cadastro de grupos; quando omitido os
          grupos são os que aparecem nas matrículas e em grupos_adicionais
        - grupos_adicionais (Iterable[int]): grupos vistos em outras tabelas
        """
        if dados is None:
            dados = pd.DataFrame(columns=Configuracoes.COLUNAS_MATRICULAS)
        self._dados = CONTRATO_MATRICULAS.validar(dados)

        if grupos is not None:
            self._grupos = set(CONTRATO_GRUPOS.validar(grupos)["group_id"].tolist())
        else:
            self._grupos = set(self._dados["group_id"].tolist()) | {int(g) for g in grupos_adicionais}

    @classmethod
    def a_partir_de(
        cls, matriculas: Iterable[MatriculaAtiva], grupos: Optional[Iterable[int]] = None
    ) -> "RepositorioMatriculas":
        """Cria o repositório a partir de matrículas de domínio.

        Parâmetros:
        - matriculas (Iterable[MatriculaAtiva]): matrículas
        - grupos (Iterable[int] | None): cadastro de grupos existentes
        """
        linhas = [matricula.model_dump(mode="json") for matricula in matriculas]
        cadastro = None if grupos is None else pd.DataFrame({"group_id": list(grupos)})
        return cls(pd.DataFrame(linhas, columns=Configuracoes.COLUNAS_MATRICULAS), grupos=cadastro)

    def __len__(self) -> int:
        return len(self._dados)

    def buscar_matriculas_ativas(self, group_id: Optional[int] = None) -> pd.DataFrame:
        """Lista matrículas ativas, uma linha por aluno.

        Parâmetros:
        - group_id (int | None): grupo; None para toda a instituição

        Retorno:
        - pd.DataFrame: matrículas ENROLLED ordenadas por aluno
        """
        dados = self._dados
        mascara = dados["status"] == Configuracoes.STATUS_MATRICULA_ATIVA
        if group_id is not None:
            mascara &= dados["group_id"] == int(group_id)
        ativas = dados.loc[mascara].sort_values(by=["student_id", "group_id"], kind="mergesort")
        # Um aluno matriculado em vários grupos aparece uma vez na coorte global.
        return ativas.drop_duplicates(subset=["student_id"], keep="first").reset_index(drop=True)

    def buscar_identificacao(self, student_ids: Iterable[int]) -> pd.DataFrame:
        """Retorna código interno e nome completo dos alunos informados."""
        ids = {int(i) for i in student_ids}
        dados = self._dados.loc[self._dados["student_id"].isin(ids)]
        return (
            dados.sort_values(by=["student_id", "group_id"], kind="mergesort")
            .drop_duplicates(subset=["student_id"], keep="first")[["student_id", "internal_code", "full_name"]]
            .reset_index(drop=True)
        )

    def grupo_existe(self, group_id: int) -> bool:
        """Indica se o grupo é conhecido."""
        return int(group_id) in self._grupos
