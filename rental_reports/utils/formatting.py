"""
Utilitários de formatação para valores em Dong (VND).
"""

import math

from rental_reports.config import CURRENCY_SYMBOL


def _round_half_up(value: float) -> int:
    """Arredondamento igual ao Math.round do app móvel (x.5 sobe)."""
    return math.floor(value + 0.5)


def _plain_number(value: float) -> str:
    """Número sem casas decimais quando for inteiro (5.0 → '5')."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_currency_short(value: float) -> str:
    """
    Formata com abreviação para os cartões de resumo.

    5_234_000 → '5.2M', 300_400 → '300K', 999 → '999'.
    Valores negativos nunca são abreviados.
    """
    if value >= 1_000_000:
        millions = _round_half_up(value / 1_000_000 * 10) / 10
        return f"{_plain_number(millions)}M"
    if value >= 1_000:
        return f"{_round_half_up(value / 1_000)}K"
    return _plain_number(value)


def format_vnd(value: float) -> str:
    """Formata como Dong vietnamita (1.800.000 ₫)."""
    amount = f"{abs(round(value)):,}".replace(",", ".")
    if value < 0 and round(value) != 0:
        return f"-{amount} {CURRENCY_SYMBOL}"
    return f"{amount} {CURRENCY_SYMBOL}"


def format_percent(value: float, decimals: int = 1) -> str:
    """Formata um número como percentual (ex: 23.5%)."""
    return f"{value:.{decimals}f}%"
