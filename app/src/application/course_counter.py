"""Contagem de cursos aprovados e reprovados.

Responsabilidades:
- Agrupar notas por curso
- Comparar a média de cada curso com a nota de aprovação
"""

from decimal import Decimal
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from src.application.average_calculator import media_exata
from src.config.settings import Configuracoes
from src.domain.grade import EscopoNotas
from src.infrastructure.data.grade_repository import RepositorioNotas


class ContadorCursos:
    """Conta cursos distintos por situação de aprovação.

    Responsabilidades:
    - Considerar a média por curso, não notas isoladas
    - Tratar a nota de aprovação como inclusiva
    """

    def __init__(
        self,
        repositorio_notas: Optional[RepositorioNotas] = None,
        nota_aprovacao: Optional[float] = None,
    ):
        self.repositorio_notas = repositorio_notas
        self.nota_aprovacao = Configuracoes.PASSING_GRADE if nota_aprovacao is None else nota_aprovacao

    def contar(self, notas: pd.DataFrame) -> Tuple[int, int]:
        """Conta cursos aprovados e reprovados.

        Parâmetros:
        - notas (pd.DataFrame): notas de um aluno já no escopo

        Retorno:
        - tuple[int, int]: (aprovados, reprovados)
        """
        if notas is None or notas.empty:
            return 0, 0

        medias_por_curso = notas.groupby("course_id")["value"].agg(lambda valores: media_exata(valores.tolist()))
        aprovados = int(np.count_nonzero(medias_por_curso >= Decimal(str(self.nota_aprovacao))))
        return aprovados, len(medias_por_curso) - aprovados

    def cursos_estudante(self, student_id: int, escopo: Optional[EscopoNotas] = None) -> Tuple[int, int]:
        """Busca as notas do aluno no escopo e conta seus cursos.

        Exceções:
        - RuntimeError: quando o contador foi criado sem repositório
        """
        if self.repositorio_notas is None:
            raise RuntimeError("Contador de cursos sem repositório de notas.")
        escopo = escopo or EscopoNotas()
        notas = self.repositorio_notas.buscar_notas(student_id=student_id, **escopo.como_filtro())
        return self.contar(notas)
