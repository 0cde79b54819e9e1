"""Validação de contrato de dados.

Responsabilidades:
- Validar presença de colunas obrigatórias
- Converter e validar tipos, faixas e vocabulários
- Garantir unicidade das chaves naturais
- Falhar explicitamente se contrato for violado
"""

from datetime import date
from typing import Dict, List, Optional, Tuple

import pandas as pd

from src.config.settings import Configuracoes
from src.util.logger import logger


class ContratoDataFrame:
    """Define e valida contrato de dados para DataFrames.

    Responsabilidades:
    - Especificar colunas obrigatórias
    - Validar tipos esperados
    - Validar faixas numéricas e valores permitidos
    - Validar chave única
    - Falhar com mensagem clara se violado
    """

    def __init__(
        self,
        nome: str,
        colunas_obrigatorias: List[str],
        tipos_esperados: Dict[str, type] = None,
        faixas: Dict[str, Tuple[float, float]] = None,
        valores_permitidos: Dict[str, List[str]] = None,
        chave_unica: Optional[List[str]] = None,
    ):
        """Inicializa o contrato.

        Parâmetros:
        - nome (str): nome da tabela, usado nas mensagens
        - colunas_obrigatorias (list): colunas que devem estar presentes
        - tipos_esperados (dict): mapeamento coluna -> tipo esperado (int, float, str, date)
        - faixas (dict): mapeamento coluna -> (mínimo, máximo) inclusivos
        - valores_permitidos (dict): mapeamento coluna -> vocabulário aceito
        - chave_unica (list): colunas que não podem se repetir em conjunto
        """
        self.nome = nome
        self.colunas_obrigatorias = colunas_obrigatorias
        self.tipos_esperados = tipos_esperados or {}
        self.faixas = faixas or {}
        self.valores_permitidos = valores_permitidos or {}
        self.chave_unica = chave_unica or []

    def validar(self, df: pd.DataFrame) -> pd.DataFrame:
        """Valida o DataFrame contra o contrato.

        Parâmetros:
        - df (pd.DataFrame): DataFrame a validar (pode estar vazio)

        Retorno:
        - pd.DataFrame: cópia com tipos convertidos

        Exceções:
        - ValueError: quando contrato é violado
        """
        if df is None:
            raise ValueError(f"Tabela '{self.nome}' nula. Impossível validar contrato.")

        colunas_faltantes = [c for c in self.colunas_obrigatorias if c not in df.columns]
        if colunas_faltantes:
            raise ValueError(
                f"Contrato de dados violado em '{self.nome}': colunas obrigatórias ausentes: "
                f"{colunas_faltantes}. Colunas disponíveis: {list(df.columns)}"
            )

        df = df.copy()
        for coluna, tipo_esperado in self.tipos_esperados.items():
            if coluna in df.columns:
                df[coluna] = self._converter_coluna(df[coluna], coluna, tipo_esperado)

        for coluna, (minimo, maximo) in self.faixas.items():
            fora_da_faixa = df[(df[coluna] < minimo) | (df[coluna] > maximo)]
            if not fora_da_faixa.empty:
                raise ValueError(
                    f"Contrato de dados violado em '{self.nome}': coluna '{coluna}' fora da faixa "
                    f"[{minimo}, {maximo}] em {len(fora_da_faixa)} registro(s)."
                )

        for coluna, permitidos in self.valores_permitidos.items():
            invalidos = sorted(set(df[coluna]) - set(permitidos))
            if invalidos:
                raise ValueError(
                    f"Contrato de dados violado em '{self.nome}': valores inválidos em '{coluna}': "
                    f"{invalidos}. Permitidos: {permitidos}"
                )

        if self.chave_unica:
            duplicados = df[df.duplicated(subset=self.chave_unica, keep=False)]
            if not duplicados.empty:
                raise ValueError(
                    f"Contrato de dados violado em '{self.nome}': chave {self.chave_unica} "
                    f"duplicada em {len(duplicados)} registro(s)."
                )

        logger.info(f"Contrato '{self.nome}' validado com sucesso. {len(df)} registros.")
        return df

    def _converter_coluna(self, serie: pd.Series, coluna: str, tipo_esperado: type) -> pd.Series:
        """Converte uma coluna para o tipo esperado.

        Exceções:
        - ValueError: quando algum valor não pode ser convertido
        """
        if tipo_esperado is str:
            return serie.fillna("").astype(str).str.strip()

        if tipo_esperado is date:
            convertida = pd.to_datetime(serie, errors="coerce")
        else:
            convertida = pd.to_numeric(serie, errors="coerce")

        if convertida.isnull().any():
            raise ValueError(
                f"Contrato de dados violado em '{self.nome}': coluna '{coluna}' possui "
                f"{int(convertida.isnull().sum())} valor(es) que não podem ser convertidos "
                f"para {tipo_esperado.__name__}."
            )

        if tipo_esperado is date:
            return convertida.dt.date
        if tipo_esperado is int:
            return convertida.astype("int64")
        return convertida.astype(float)


CONTRATO_NOTAS = ContratoDataFrame(
    nome="notas",
    colunas_obrigatorias=Configuracoes.COLUNAS_NOTAS,
    tipos_esperados={
        "student_id": int,
        "course_id": int,
        "evaluation_id": int,
        "group_id": int,
        "value": float,
    },
    faixas={"value": (Configuracoes.GRADE_MIN, Configuracoes.GRADE_MAX)},
    chave_unica=["evaluation_id", "student_id", "course_id"],
)

CONTRATO_PRESENCAS = ContratoDataFrame(
    nome="presencas",
    colunas_obrigatorias=Configuracoes.COLUNAS_PRESENCAS,
    tipos_esperados={
        "student_id": int,
        "group_id": int,
        "class_date": date,
        "status": str,
    },
    valores_permitidos={"status": Configuracoes.STATUS_PRESENCA},
    chave_unica=["student_id", "group_id", "class_date"],
)

CONTRATO_MATRICULAS = ContratoDataFrame(
    nome="matriculas",
    colunas_obrigatorias=Configuracoes.COLUNAS_MATRICULAS,
    tipos_esperados={
        "student_id": int,
        "group_id": int,
        "internal_code": str,
        "full_name": str,
        "modality": str,
        "status": str,
    },
    valores_permitidos={"status": Configuracoes.STATUS_MATRICULA},
)

CONTRATO_GRUPOS = ContratoDataFrame(
    nome="grupos",
    colunas_obrigatorias=Configuracoes.COLUNAS_GRUPOS,
    tipos_esperados={"group_id": int},
    chave_unica=["group_id"],
)
