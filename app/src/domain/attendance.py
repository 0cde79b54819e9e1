"""Modelos de domínio para presença.

Responsabilidades:
- Representar registros de presença
- Representar intervalos de datas e resumos agregados
"""

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict, model_validator


class StatusPresenca(str, Enum):
    PRESENT = "PRESENT"
    LATE = "LATE"
    ABSENT = "ABSENT"


class RegistroPresenca(BaseModel):
    """Presença de um aluno em uma aula de um grupo."""

    student_id: int = Field(..., gt=0)
    group_id: int = Field(..., gt=0)
    class_date: date
    status: StatusPresenca
    recorded_time: Optional[str] = Field(None, pattern=r"^([01]\d|2[0-3]):([0-5]\d)$")


class IntervaloDatas(BaseModel):
    """Intervalo inclusivo de datas de aula. Ambos os limites são opcionais."""

    date_from: Optional[date] = None
    date_to: Optional[date] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _validar_ordem(self):
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValueError("date_from deve ser anterior ou igual a date_to.")
        return self


class ResumoPresenca(BaseModel):
    """Resumo de presença de um aluno em um grupo.

    Responsabilidades:
    - Expor contagens por status
    - Expor percentual de presença (presentes + atrasos)
    - Expor, no resumo de um aluno, os registros em ordem de data
    """

    student_id: int
    group_id: int
    internal_code: Optional[str] = None
    full_name: Optional[str] = None
    total_classes: int = 0
    present: int = 0
    late: int = 0
    absent: int = 0
    attendance_percentage: float = 0.0
    records: Optional[List[RegistroPresenca]] = None
