"""
Serviço de Despesas.

Responsabilidades:
- Despesas do período (total, quantidade, itens)
- Despesas por categoria e por quarto
- Lista de despesas para exibição
"""

from typing import Iterable, Optional

from rental_reports.models.ledger_models import (
    Expense,
    ExpenseCategory,
    PeriodRange,
    Room,
)
from rental_reports.models.report_models import (
    CategoryExpense,
    CategoryShare,
    ExpenseSummary,
    RoomExpense,
)

SHARED_ROOM_NAME = "Chung"


# ─── Despesas do período ───

def aggregate_expenses(
    expenses: Iterable[Expense],
    period_range: PeriodRange,
) -> ExpenseSummary:
    """
    Filtra as despesas pelo mês da data da transação e soma os valores.

    O mês vem de `date`, não do cache `period` da despesa. Os itens
    filtrados são devolvidos para que categoria, quarto e lista usem
    exatamente o mesmo conjunto.
    """
    in_period = tuple(exp for exp in expenses if period_range.contains(exp.month))

    return ExpenseSummary(
        total=sum(exp.amount for exp in in_period),
        count=len(in_period),
        items=in_period,
    )


def list_expenses(
    summary: ExpenseSummary,
    category: Optional[ExpenseCategory] = None,
) -> list[Expense]:
    """Itens do período, opcionalmente de uma categoria, mais recentes primeiro."""
    items = [
        exp for exp in summary.items
        if category is None or exp.category == category
    ]
    return sorted(items, key=lambda exp: exp.date, reverse=True)


# ─── Por categoria ───

def attribute_by_category(expenses: Iterable[Expense]) -> tuple[CategoryExpense, ...]:
    """
    Soma as despesas (já filtradas por período) por categoria.

    A ordem é a da primeira aparição de cada categoria, para a legenda
    do gráfico ser estável.
    """
    cat_totals: dict[ExpenseCategory, float] = {}

    for exp in expenses:
        cat_totals[exp.category] = cat_totals.get(exp.category, 0) + exp.amount

    return tuple(
        CategoryExpense(category=cat, amount=amount)
        for cat, amount in cat_totals.items()
    )


def category_shares(breakdown: Iterable[CategoryExpense]) -> tuple[CategoryShare, ...]:
    """Percentual de cada categoria no total. Total 0 → sem dados."""
    breakdown = list(breakdown)
    total = sum(c.amount for c in breakdown)
    if total == 0:
        return ()

    return tuple(
        CategoryShare(
            category=c.category,
            amount=c.amount,
            percentage=c.amount / total * 100,
        )
        for c in breakdown
    )


# ─── Por quarto ───

def attribute_expenses_by_room(
    expenses: Iterable[Expense],
    rooms: Iterable[Room],
) -> tuple[RoomExpense, ...]:
    """
    Soma as despesas (já filtradas por período) por quarto.

    Despesas sem quarto, ou de quarto desconhecido, vão para o grupo
    compartilhado (room_id None), sempre por último.
    """
    rooms = list(rooms)
    known = {room.id for room in rooms}

    amounts: dict = {}
    counts: dict = {}
    shared_amount = 0.0
    shared_count = 0

    for exp in expenses:
        if exp.room_id is None or exp.room_id not in known:
            shared_amount += exp.amount
            shared_count += 1
            continue
        amounts[exp.room_id] = amounts.get(exp.room_id, 0) + exp.amount
        counts[exp.room_id] = counts.get(exp.room_id, 0) + 1

    results = []
    seen = set()
    for room in rooms:
        if room.id in seen or room.id not in counts:
            continue
        seen.add(room.id)
        results.append(RoomExpense(
            room_id=room.id,
            room_name=room.name,
            amount=amounts[room.id],
            count=counts[room.id],
        ))

    if shared_count:
        results.append(RoomExpense(
            room_id=None,
            room_name=SHARED_ROOM_NAME,
            amount=shared_amount,
            count=shared_count,
        ))

    return tuple(results)
