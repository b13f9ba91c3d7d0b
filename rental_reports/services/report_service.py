"""
Serviço de Relatório Financeiro.

Orquestra os serviços de período, deduplicação, receita, despesa e lucro
em um único FinancialReport. Todas as visões (resumo, quartos, categorias)
são calculadas sobre o mesmo conjunto filtrado.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from rental_reports.config import SERIES_MONTHS
from rental_reports.models.ledger_models import (
    LedgerSnapshot,
    PeriodRange,
    load_snapshot,
)
from rental_reports.models.report_models import FinancialReport
from rental_reports.services.dedup_service import dedupe
from rental_reports.services.expense_service import (
    aggregate_expenses,
    attribute_by_category,
    attribute_expenses_by_room,
)
from rental_reports.services.period_service import PeriodFilter, resolve_period
from rental_reports.services.profit_service import net_profit
from rental_reports.services.revenue_service import (
    aggregate_revenue,
    attribute_by_room,
    build_monthly_series,
)
from rental_reports.utils.caching import cached

logger = logging.getLogger(__name__)


def build_report(
    snapshot: LedgerSnapshot,
    period_filter: PeriodFilter | str | PeriodRange | None,
    today: date,
    months_count: Optional[int] = None,
) -> FinancialReport:
    """
    Calcula o relatório completo de um período.

    Fluxo:
    1. Resolve a faixa de períodos a partir do filtro
    2. Remove linhas duplicadas (despesas e faturas)
    3. Agrega receita e despesas
    4. Lucro líquido sobre a receita recebida
    5. Detalhamentos por quarto e categoria, e série mensal
    """
    period_range = resolve_period(period_filter, today)

    invoices = dedupe(snapshot.invoices)
    expenses = dedupe(snapshot.expenses)

    revenue = aggregate_revenue(invoices, period_range)
    expense_summary = aggregate_expenses(expenses, period_range)
    profit = net_profit(revenue.collected, expense_summary.total)

    report = FinancialReport(
        period_range=period_range,
        revenue=revenue,
        expenses=expense_summary,
        net_profit=profit,
        by_room=attribute_by_room(
            invoices, dedupe(snapshot.leases), snapshot.rooms, period_range
        ),
        by_category=attribute_by_category(expense_summary.items),
        expenses_by_room=attribute_expenses_by_room(
            expense_summary.items, snapshot.rooms
        ),
        monthly=build_monthly_series(
            invoices,
            today,
            SERIES_MONTHS if months_count is None else months_count,
        ),
    )

    logger.debug(
        "Relatório %s: receita %.0f/%.0f, despesas %.0f, lucro %.0f",
        period_range,
        revenue.collected,
        revenue.total,
        expense_summary.total,
        profit,
    )
    return report


# ─── Versão em cache ───

@cached()
def _cached_report(
    invoices: list[dict],
    expenses: list[dict],
    leases: list[dict],
    rooms: list[dict],
    period_filter: str,
    start: Optional[str],
    end: Optional[str],
    today_iso: str,
    months_count: Optional[int],
) -> FinancialReport:
    # Só tipos primitivos nos argumentos: a chave do cache é o conteúdo deles
    snapshot = load_snapshot(
        invoices=invoices, expenses=expenses, leases=leases, rooms=rooms
    )
    if start and end:
        selection = PeriodRange.parse(start, end)
    else:
        selection = period_filter or None
    return build_report(
        snapshot, selection, date.fromisoformat(today_iso), months_count
    )


def build_cached_report(
    invoices: Iterable[dict],
    expenses: Iterable[dict],
    leases: Iterable[dict],
    rooms: Iterable[dict],
    period_filter: PeriodFilter | str | PeriodRange | None,
    today: date,
    months_count: Optional[int] = None,
) -> FinancialReport:
    """
    Mesmo cálculo de build_report, a partir dos registros crus, com cache.

    Registros iguais + filtro igual + mesma data → relatório do cache.
    """
    start = end = None
    if isinstance(period_filter, PeriodRange):
        start, end = period_filter.start.key, period_filter.end.key
        filter_key = ""
    elif period_filter is None:
        filter_key = ""
    else:
        filter_key = PeriodFilter(period_filter).value

    return _cached_report(
        list(invoices),
        list(expenses),
        list(leases),
        list(rooms),
        filter_key,
        start,
        end,
        today.isoformat()[:10],
        months_count,
    )
