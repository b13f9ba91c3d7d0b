"""
Serviço de Receita.

Responsabilidades:
- Receita do período (faturado, recebido, pendente)
- Receita por quarto (fatura → contrato → quarto)
- Série mensal para o gráfico de tendência
"""

import logging
from datetime import date
from typing import Iterable

import pandas as pd

from rental_reports.config import SERIES_MONTHS
from rental_reports.models.ledger_models import (
    Invoice,
    Lease,
    PeriodRange,
    Room,
)
from rental_reports.models.report_models import (
    MonthlyPoint,
    RevenueSummary,
    RoomRevenue,
    RoomShare,
)
from rental_reports.services.period_service import trailing_periods

logger = logging.getLogger(__name__)


def _in_range(invoices: Iterable[Invoice], period_range: PeriodRange) -> list[Invoice]:
    return [inv for inv in invoices if period_range.contains(inv.period)]


# ─── Receita do período ───

def aggregate_revenue(
    invoices: Iterable[Invoice],
    period_range: PeriodRange,
) -> RevenueSummary:
    """
    Soma as faturas cujo período está dentro da faixa (inclusiva).

    total = Σ total (competência), collected = Σ amount_paid (caixa),
    pending = total − collected.
    """
    in_period = _in_range(invoices, period_range)

    total = sum(inv.total for inv in in_period)
    collected = sum(inv.amount_paid for inv in in_period)

    return RevenueSummary(
        total=total,
        collected=collected,
        pending=total - collected,
        count=len(in_period),
    )


# ─── Receita por quarto ───

def attribute_by_room(
    invoices: Iterable[Invoice],
    leases: Iterable[Lease],
    rooms: Iterable[Room],
    period_range: PeriodRange,
) -> tuple[RoomRevenue, ...]:
    """
    Agrupa a receita do período por quarto.

    Fatura sem contrato, ou com contrato apontando para quarto inexistente,
    fica de fora do detalhamento. Quartos com total 0 não aparecem.
    A ordem segue a lista de quartos.
    """
    rooms = list(rooms)
    # Contrato repetido: vale a primeira linha, como no dedupe
    lease_room: dict = {}
    for lease in leases:
        lease_room.setdefault(lease.id, lease.room_id)
    room_ids = {room.id for room in rooms}

    totals: dict = {}
    collected: dict = {}

    for inv in _in_range(invoices, period_range):
        room_id = lease_room.get(inv.lease_id)
        if room_id is None or room_id not in room_ids:
            logger.debug(
                "Fatura %r sem quarto resolvido (contrato %r)", inv.id, inv.lease_id
            )
            continue
        totals[room_id] = totals.get(room_id, 0) + inv.total
        collected[room_id] = collected.get(room_id, 0) + inv.amount_paid

    results = []
    seen = set()
    for room in rooms:
        if room.id in seen:
            continue
        seen.add(room.id)

        total = totals.get(room.id, 0)
        if total == 0:
            continue
        paid = collected.get(room.id, 0)
        results.append(RoomRevenue(
            room_id=room.id,
            room_name=room.name,
            total=total,
            collected=paid,
            pending=total - paid,
        ))

    return tuple(results)


def room_shares(breakdown: Iterable[RoomRevenue]) -> tuple[RoomShare, ...]:
    """Participação de cada quarto no total faturado. Total 0 → sem dados."""
    breakdown = list(breakdown)
    total = sum(r.total for r in breakdown)
    if total == 0:
        return ()

    return tuple(
        RoomShare(
            room_id=r.room_id,
            room_name=r.room_name,
            amount=r.total,
            percentage=r.total / total * 100,
        )
        for r in breakdown
    )


# ─── Série mensal ───

def build_monthly_series(
    invoices: Iterable[Invoice],
    today: date,
    months_count: int = SERIES_MONTHS,
) -> tuple[MonthlyPoint, ...]:
    """
    Receita faturada e recebida mês a mês.

    Exatamente `months_count` pontos em ordem crescente, terminando no mês
    de `today`. Cada mês usa igualdade exata de período; meses sem faturas
    entram zerados para a linha de tendência ficar contínua.
    """
    periods = trailing_periods(months_count, today)

    total = {p: 0.0 for p in periods}
    collected = {p: 0.0 for p in periods}

    for inv in invoices:
        if inv.period in total:
            total[inv.period] += inv.total
            collected[inv.period] += inv.amount_paid

    return tuple(
        MonthlyPoint(
            period=p,
            label=p.label,
            total=total[p],
            collected=collected[p],
        )
        for p in periods
    )


def series_frame(points: Iterable[MonthlyPoint]) -> pd.DataFrame:
    """Série mensal como DataFrame (colunas: period, label, total, collected)."""
    rows = [
        {
            "period": p.period.key,
            "label": p.label,
            "total": p.total,
            "collected": p.collected,
        }
        for p in points
    ]
    return pd.DataFrame(rows, columns=["period", "label", "total", "collected"])


def room_revenue_frame(breakdown: Iterable[RoomRevenue]) -> pd.DataFrame:
    """Receita por quarto como DataFrame."""
    rows = [
        {
            "room_id": r.room_id,
            "room_name": r.room_name,
            "total": r.total,
            "collected": r.collected,
            "pending": r.pending,
        }
        for r in breakdown
    ]
    return pd.DataFrame(
        rows, columns=["room_id", "room_name", "total", "collected", "pending"]
    )
