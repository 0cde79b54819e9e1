"""Cálculo de médias de notas.

Responsabilidades:
- Calcular a média aritmética exata de um conjunto de notas
- Resolver o escopo (avaliação, grupo ou geral) para um aluno
"""

from decimal import Decimal
from typing import Iterable, Optional

import pandas as pd

from src.domain.grade import EscopoNotas
from src.infrastructure.data.grade_repository import RepositorioNotas
from src.util.rounding import arredondar


def media_exata(valores: Iterable[float]) -> Optional[Decimal]:
    """Média em Decimal para que 10.9 e 11.1 resultem exatamente em 11."""
    decimais = [Decimal(str(v)) for v in valores]
    if not decimais:
        return None
    return sum(decimais) / Decimal(len(decimais))


class CalculadoraMedia:
    """Calcula médias de alunos.

    Responsabilidades:
    - Buscar as notas do aluno no escopo
    - Retornar None quando não há notas
    """

    def __init__(self, repositorio_notas: RepositorioNotas):
        self.repositorio_notas = repositorio_notas

    @staticmethod
    def media(notas: pd.DataFrame) -> Optional[float]:
        """Calcula a média da coluna value.

        Parâmetros:
        - notas (pd.DataFrame): notas já filtradas para um aluno

        Retorno:
        - float | None: média com 2 casas ou None sem notas
        """
        if notas is None or notas.empty:
            return None
        return arredondar(media_exata(notas["value"].tolist()))

    def media_estudante(self, student_id: int, escopo: Optional[EscopoNotas] = None) -> Optional[float]:
        """Calcula a média de um aluno no escopo informado.

        Parâmetros:
        - student_id (int): aluno
        - escopo (EscopoNotas | None): avaliação, grupo ou todas as notas

        Retorno:
        - float | None: média com 2 casas ou None sem notas
        """
        escopo = escopo or EscopoNotas()
        notas = self.repositorio_notas.buscar_notas(student_id=student_id, **escopo.como_filtro())
        return self.media(notas)
