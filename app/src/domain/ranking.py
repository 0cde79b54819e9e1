"""Modelos de domínio do ranking acadêmico.

Responsabilidades:
- Representar a posição de cada aluno na coorte
- Representar estatísticas agregadas da coorte
- Representar a consulta de posição individual
"""

from typing import List, Optional

from pydantic import BaseModel


class EntradaRanking(BaseModel):
    """Linha do ranking, recalculada a cada requisição."""

    student_id: int
    internal_code: str
    full_name: str
    modality: str = ""
    average: Optional[float]
    total_grades: int
    courses_passed: int
    courses_failed: int
    min_grade: float
    max_grade: float
    position: int = 0


class EstatisticasGrupo(BaseModel):
    """Estatísticas calculadas sobre as entradas ranqueadas.

    Todos os campos são zero para uma coorte vazia.
    """

    student_count: int = 0
    group_average: float = 0.0
    best_average: float = 0.0
    worst_average: float = 0.0
    passed_count: int = 0
    failed_count: int = 0
    pass_rate: float = 0.0


class RankingGrupo(BaseModel):
    group_id: Optional[int]
    evaluation_id: Optional[int]
    total_students: int
    statistics: EstatisticasGrupo
    ranking: List[EntradaRanking]


class PosicaoEstudante(EntradaRanking):
    """Entrada do aluno acrescida da sua situação relativa na coorte."""

    group_id: Optional[int] = None
    evaluation_id: Optional[int] = None
    total_students: int
    percentile: float
    difference_from_first: float
    group_average: float
