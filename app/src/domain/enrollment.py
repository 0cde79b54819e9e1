"""Projeção de leitura das matrículas."""

from enum import Enum

from pydantic import BaseModel, Field


class StatusMatricula(str, Enum):
    ENROLLED = "ENROLLED"
    WITHDRAWN = "WITHDRAWN"


class MatriculaAtiva(BaseModel):
    """Matrícula de um aluno em um grupo com sua identificação de exibição."""

    student_id: int = Field(..., gt=0)
    group_id: int = Field(..., gt=0)
    internal_code: str
    full_name: str
    modality: str = ""
    status: StatusMatricula = StatusMatricula.ENROLLED
