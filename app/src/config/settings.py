"""Configurações centrais do projeto.

Responsabilidades:
- Definir caminhos dos arquivos de dados acadêmicos
- Definir regras de negócio (nota de aprovação, escala de notas)
- Definir parâmetros de logging e execução
"""

import os
from pathlib import Path


class Configuracoes:
    """Centraliza configurações da aplicação.

    Responsabilidades:
    - Fornecer caminhos de diretórios e arquivos
    - Declarar constantes de cálculo de ranking
    - Listar vocabulários aceitos nos dados
    """

    BASE_DIR = Path(__file__).resolve().parents[2]
    DEFAULT_DATA_DIR = os.path.join(BASE_DIR, "data")
    DATA_DIR = os.path.abspath(os.getenv("DATA_DIR", DEFAULT_DATA_DIR))

    GRADES_FILE = os.getenv("GRADES_FILE", "notas")
    ATTENDANCE_FILE = os.getenv("ATTENDANCE_FILE", "asistencias")
    ENROLLMENTS_FILE = os.getenv("ENROLLMENTS_FILE", "matriculas")
    GROUPS_FILE = os.getenv("GROUPS_FILE", "grupos")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    PORT = int(os.getenv("PORT", "8000"))

    PASSING_GRADE = float(os.getenv("PASSING_GRADE", "11.0"))
    GRADE_MIN = 0.0
    GRADE_MAX = 20.0
    DECIMAL_PLACES = 2

    STATUS_PRESENCA = ["PRESENT", "LATE", "ABSENT"]
    # Atrasos contam como presença no percentual.
    STATUS_PRESENCA_ATENDIDA = ["PRESENT", "LATE"]
    STATUS_MATRICULA = ["ENROLLED", "WITHDRAWN"]
    STATUS_MATRICULA_ATIVA = "ENROLLED"

    COLUNAS_NOTAS = ["student_id", "course_id", "evaluation_id", "group_id", "value"]
    COLUNAS_PRESENCAS = ["student_id", "group_id", "class_date", "status"]
    COLUNAS_MATRICULAS = ["student_id", "group_id", "internal_code", "full_name", "modality", "status"]
    COLUNAS_GRUPOS = ["group_id"]
