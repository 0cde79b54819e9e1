"""Modelos de domínio para notas.

Responsabilidades:
- Representar uma nota individual
- Representar o escopo de cálculo de médias
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from src.config.settings import Configuracoes


class Nota(BaseModel):
    """Nota de um aluno em um curso dentro de uma avaliação.

    Responsabilidades:
    - Validar a escala de 0 a 20
    - Identificar a chave única (avaliação, aluno, curso)
    """

    student_id: int = Field(..., gt=0)
    course_id: int = Field(..., gt=0)
    evaluation_id: int = Field(..., gt=0)
    group_id: int = Field(..., gt=0, description="Grupo da avaliação")
    value: float = Field(..., ge=Configuracoes.GRADE_MIN, le=Configuracoes.GRADE_MAX)
    recorded_at: Optional[datetime] = None

    model_config = ConfigDict(frozen=True)


class EscopoNotas(BaseModel):
    """Escopo de notas considerado em médias e contagem de cursos.

    A avaliação tem precedência sobre o grupo; sem nenhum dos dois,
    todas as notas do aluno entram no cálculo.
    """

    evaluation_id: Optional[int] = None
    group_id: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def para(cls, group_id: Optional[int] = None, evaluation_id: Optional[int] = None) -> "EscopoNotas":
        """Resolve o escopo a partir do seletor de coorte."""
        if evaluation_id is not None:
            return cls(evaluation_id=evaluation_id)
        if group_id is not None:
            return cls(group_id=group_id)
        return cls()

    def como_filtro(self) -> dict:
        """Retorna o escopo como filtros aceitos pelo repositório de notas."""
        return self.model_dump(exclude_none=True)
