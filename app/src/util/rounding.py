"""Arredondamento e percentuais usados nas agregações."""

import math
from decimal import Decimal, ROUND_HALF_UP

from src.config.settings import Configuracoes


def arredondar(valor, casas: int = Configuracoes.DECIMAL_PLACES) -> float:
    """Arredonda meio para cima (15.005 -> 15.01), ao contrário de round().

    Parâmetros:
    - valor (float | int | Decimal): valor a arredondar
    - casas (int): casas decimais

    Retorno:
    - float: valor arredondado (0.0 para NaN)
    """
    if valor is None:
        return 0.0
    if isinstance(valor, float) and math.isnan(valor):
        return 0.0
    quantum = Decimal(1).scaleb(-casas)
    return float(Decimal(str(valor)).quantize(quantum, rounding=ROUND_HALF_UP))


def percentual(parte, total) -> float:
    """Calcula parte / total * 100 arredondado; 0.0 quando total é zero."""
    if not total:
        return 0.0
    return arredondar(Decimal(str(parte)) * 100 / Decimal(str(total)))
