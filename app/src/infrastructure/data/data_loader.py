"""Carregamento e preparação das tabelas acadêmicas.

Responsabilidades:
- Localizar arquivos CSV/Excel na pasta de dados
- Normalizar colunas e vocabulários
- Validar contrato de dados de cada tabela
"""

import glob
import os
import re
import unicodedata
from typing import Optional

import pandas as pd

from src.config.settings import Configuracoes
from src.infrastructure.data.data_contract import (
    CONTRATO_GRUPOS,
    CONTRATO_MATRICULAS,
    CONTRATO_NOTAS,
    CONTRATO_PRESENCAS,
    ContratoDataFrame,
)
from src.util.logger import logger

ALIASES_COLUNAS = {
    "STUDENT_ID": "student_id",
    "ESTUDIANTE_ID": "student_id",
    "ESTUDANTE_ID": "student_id",
    "ALUNO_ID": "student_id",
    "COURSE_ID": "course_id",
    "CURSO_ID": "course_id",
    "EVALUATION_ID": "evaluation_id",
    "EVALUACION_ID": "evaluation_id",
    "AVALIACAO_ID": "evaluation_id",
    "GROUP_ID": "group_id",
    "GRUPO_ID": "group_id",
    "VALUE": "value",
    "GRADE": "value",
    "NOTA": "value",
    "RECORDED_AT": "recorded_at",
    "FECHA_REGISTRO": "recorded_at",
    "CLASS_DATE": "class_date",
    "FECHA_CLASE": "class_date",
    "DATA_AULA": "class_date",
    "STATUS": "status",
    "ESTADO": "status",
    "RECORDED_TIME": "recorded_time",
    "HORA_REGISTRO": "recorded_time",
    "INTERNAL_CODE": "internal_code",
    "CODIGO_INTERNO": "internal_code",
    "FULL_NAME": "full_name",
    "NOMBRE_COMPLETO": "full_name",
    "NOME_COMPLETO": "full_name",
    "FIRST_NAME": "first_name",
    "NOMBRES": "first_name",
    "LAST_NAME": "last_name",
    "APELLIDOS": "last_name",
    "MODALITY": "modality",
    "MODALIDAD": "modality",
    "MODALIDADE": "modality",
}

ALIASES_STATUS = {
    "PRESENTE": "PRESENT",
    "TARDANZA": "LATE",
    "ATRASO": "LATE",
    "AUSENTE": "ABSENT",
    "MATRICULADO": "ENROLLED",
    "RETIRADO": "WITHDRAWN",
}


class CarregadorDados:
    """Responsável pelo carregamento e limpeza das tabelas acadêmicas.

    Responsabilidades:
    - Buscar arquivos na pasta de dados
    - Normalizar cabeçalhos e status
    - Aplicar o contrato de cada tabela
    """

    def __init__(self, diretorio: Optional[str] = None):
        self.diretorio = diretorio or Configuracoes.DATA_DIR

    def carregar_notas(self) -> pd.DataFrame:
        """Carrega a tabela de notas."""
        return self._carregar_tabela(Configuracoes.GRADES_FILE, CONTRATO_NOTAS)

    def carregar_presencas(self) -> pd.DataFrame:
        """Carrega a tabela de presenças."""
        return self._carregar_tabela(Configuracoes.ATTENDANCE_FILE, CONTRATO_PRESENCAS)

    def carregar_matriculas(self) -> pd.DataFrame:
        """Carrega a tabela de matrículas com nome completo montado."""
        return self._carregar_tabela(Configuracoes.ENROLLMENTS_FILE, CONTRATO_MATRICULAS)

    def carregar_grupos(self) -> Optional[pd.DataFrame]:
        """Carrega o cadastro de grupos, que é opcional.

        Retorno:
        - pd.DataFrame | None: grupos ou None quando não há arquivo
        """
        if self._localizar_arquivo(Configuracoes.GROUPS_FILE) is None:
            logger.warning("Cadastro de grupos não encontrado. Grupos serão inferidos das demais tabelas.")
            return None
        return self._carregar_tabela(Configuracoes.GROUPS_FILE, CONTRATO_GRUPOS)

    def _carregar_tabela(self, nome_arquivo: str, contrato: ContratoDataFrame) -> pd.DataFrame:
        """Lê, normaliza e valida uma tabela.

        Parâmetros:
        - nome_arquivo (str): nome base do arquivo, sem extensão
        - contrato (ContratoDataFrame): contrato a aplicar

        Retorno:
        - pd.DataFrame: dados validados

        Exceções:
        - FileNotFoundError: quando não há arquivo .csv/.xlsx com o nome
        - ValueError: quando o contrato é violado
        """
        caminho_arquivo = self._localizar_arquivo(nome_arquivo)
        if caminho_arquivo is None:
            self._registrar_conteudo_pasta()
            raise FileNotFoundError(
                f"Arquivo '{nome_arquivo}' (.csv/.xlsx) não encontrado em {self.diretorio}. "
                "Defina DATA_DIR ou monte o volume de dados no container."
            )

        if caminho_arquivo.endswith(".xlsx"):
            logger.info(f"Carregando arquivo Excel: {caminho_arquivo}")
            df = self._ler_excel(caminho_arquivo)
        else:
            logger.info(f"Carregando arquivo CSV: {caminho_arquivo}")
            df = self._ler_csv(caminho_arquivo)

        df = self.normalizar(df)
        try:
            return contrato.validar(df)
        except ValueError as erro:
            logger.error(f"Falha na validação do contrato de dados: {erro}")
            raise erro

    def _localizar_arquivo(self, nome_arquivo: str) -> Optional[str]:
        for extensao in ("csv", "xlsx"):
            encontrados = sorted(glob.glob(os.path.join(self.diretorio, f"{nome_arquivo}.{extensao}")))
            if encontrados:
                return encontrados[0]
        return None

    def _registrar_conteudo_pasta(self) -> None:
        """Registra o conteúdo da pasta de dados no log."""
        try:
            conteudo = os.listdir(self.diretorio)
            logger.error(f"Conteúdo encontrado em {self.diretorio}: {conteudo}")
        except OSError:
            logger.error(f"Pasta de dados inexistente: {self.diretorio}")

    @staticmethod
    def _ler_excel(caminho_arquivo: str) -> pd.DataFrame:
        """Lê a primeira aba de um arquivo Excel.

        Exceções:
        - Exception: quando a leitura falha
        """
        try:
            return pd.read_excel(caminho_arquivo, sheet_name=0)
        except Exception as erro:
            logger.error(f"Erro crítico ao ler o Excel: {erro}")
            raise erro

    @staticmethod
    def _ler_csv(caminho_arquivo: str) -> pd.DataFrame:
        """Lê um arquivo CSV separado por ';' ou ','.

        Exceções:
        - Exception: quando a leitura falha
        """
        try:
            df = pd.read_csv(caminho_arquivo, sep=";")
            if len(df.columns) <= 1:
                df = pd.read_csv(caminho_arquivo, sep=",")
            return df
        except Exception as erro:
            logger.error(f"Erro crítico ao ler o CSV: {erro}")
            raise erro

    @staticmethod
    def normalizar(df: pd.DataFrame) -> pd.DataFrame:
        """Normaliza colunas e vocabulários de uma tabela bruta.

        Parâmetros:
        - df (pd.DataFrame): dados como lidos do arquivo

        Retorno:
        - pd.DataFrame: colunas canônicas em snake_case e status canônicos
        """
        novas_colunas = []
        for coluna in df.columns:
            coluna_limpa = str(coluna).upper().strip()
            coluna_limpa = unicodedata.normalize("NFKD", coluna_limpa).encode("ASCII", "ignore").decode("utf-8")
            coluna_limpa = re.sub(r"[ \-]+", "_", coluna_limpa)
            novas_colunas.append(ALIASES_COLUNAS.get(coluna_limpa, coluna_limpa.lower()))

        df = df.copy()
        df.columns = novas_colunas

        if df.columns.duplicated().any():
            df = df.loc[:, ~df.columns.duplicated()]

        if "full_name" not in df.columns and {"first_name", "last_name"}.issubset(df.columns):
            df["full_name"] = (
                df["first_name"].fillna("").astype(str).str.strip()
                + " "
                + df["last_name"].fillna("").astype(str).str.strip()
            )

        if "status" in df.columns:
            status = df["status"].astype(str).str.strip().str.upper()
            df["status"] = status.replace(ALIASES_STATUS)

        if "modality" not in df.columns and "internal_code" in df.columns:
            df["modality"] = ""

        return df
