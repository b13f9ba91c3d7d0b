"""
Serviço de Períodos.

Responsabilidades:
- Resolver filtros nomeados (mês atual, mês anterior, trimestre, ano)
- Gerar a sequência de meses das séries temporais

A data de referência (`today`) é sempre recebida como parâmetro.
"""

from datetime import date, datetime
from enum import Enum

from rental_reports.config import DEFAULT_PERIOD_FILTER
from rental_reports.models.ledger_models import Period, PeriodRange


class PeriodFilter(str, Enum):
    """Filtros de período oferecidos na tela de relatórios."""
    THIS_MONTH = "this_month"
    LAST_MONTH = "last_month"
    THIS_QUARTER = "this_quarter"
    THIS_YEAR = "this_year"


def system_today() -> date:
    """Relógio real, para quem chama o motor. Nada dentro do motor usa isto."""
    return date.today()


def _current_period(today: date) -> Period:
    if isinstance(today, datetime):
        today = today.date()
    return Period.from_date(today)


def resolve_period(
    period_filter: PeriodFilter | str | PeriodRange | None,
    today: date,
) -> PeriodRange:
    """
    Converte um filtro nomeado em faixa inclusiva de períodos.

    Uma PeriodRange explícita (consulta ad-hoc) é devolvida como está.
    None usa o filtro padrão da configuração.
    """
    if period_filter is None:
        period_filter = DEFAULT_PERIOD_FILTER

    if isinstance(period_filter, PeriodRange):
        return period_filter

    period_filter = PeriodFilter(period_filter)
    current = _current_period(today)

    if period_filter is PeriodFilter.THIS_MONTH:
        return PeriodRange.single(current)

    if period_filter is PeriodFilter.LAST_MONTH:
        return PeriodRange.single(current.shift(-1))

    if period_filter is PeriodFilter.THIS_QUARTER:
        # Trimestres não atravessam o ano
        quarter = (current.month - 1) // 3
        start_month = quarter * 3 + 1
        return PeriodRange(
            Period(current.year, start_month),
            Period(current.year, start_month + 2),
        )

    return PeriodRange(Period(current.year, 1), Period(current.year, 12))


def trailing_periods(count: int, today: date) -> list[Period]:
    """Os `count` meses terminando no mês de `today`, do mais antigo ao atual. count <= 0 → []."""
    if count <= 0:
        return []
    current = _current_period(today)
    return [current.shift(-offset) for offset in range(count - 1, -1, -1)]
