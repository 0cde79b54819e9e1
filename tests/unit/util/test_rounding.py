"""Testes de arredondamento e percentuais."""

import math
from decimal import Decimal

from src.util.rounding import arredondar, percentual


def test_arredondar_meio_para_cima():
    assert arredondar(15.005) == 15.01
    assert arredondar(2.675) == 2.68
    assert arredondar(Decimal("0.125")) == 0.13


def test_arredondar_nulos_viram_zero():
    assert arredondar(None) == 0.0
    assert arredondar(math.nan) == 0.0


def test_percentual_dois_tercos():
    assert percentual(2, 3) == 66.67


def test_percentual_denominador_zero():
    assert percentual(0, 0) == 0.0
    assert percentual(5, 0) == 0.0
