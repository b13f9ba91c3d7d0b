"""
Modelos de resultado dos relatórios.
Dataclasses imutáveis devolvidas pelos serviços de agregação.
"""

from dataclasses import dataclass
from typing import Any, Optional

from rental_reports.models.ledger_models import (
    Expense,
    ExpenseCategory,
    Period,
    PeriodRange,
)
from rental_reports.services.profit_service import is_loss


# ─── Receita ───

@dataclass(frozen=True)
class RevenueSummary:
    """Receita do período. pending = total - collected, sem truncar em zero."""
    total: float = 0.0
    collected: float = 0.0
    pending: float = 0.0
    count: int = 0


@dataclass(frozen=True)
class RoomRevenue:
    """Receita de um quarto no período."""
    room_id: Any
    room_name: str
    total: float = 0.0
    collected: float = 0.0
    pending: float = 0.0


# ─── Despesa ───

@dataclass(frozen=True)
class ExpenseSummary:
    """Despesas do período, com os itens filtrados na ordem de entrada."""
    total: float = 0.0
    count: int = 0
    items: tuple[Expense, ...] = ()


@dataclass(frozen=True)
class CategoryExpense:
    """Despesa por categoria."""
    category: ExpenseCategory
    amount: float = 0.0


@dataclass(frozen=True)
class RoomExpense:
    """Despesa por quarto. room_id None = despesa compartilhada."""
    room_id: Any
    room_name: str
    amount: float = 0.0
    count: int = 0


# ─── Participação (gráfico de pizza) ───

@dataclass(frozen=True)
class CategoryShare:
    category: ExpenseCategory
    amount: float = 0.0
    percentage: float = 0.0


@dataclass(frozen=True)
class RoomShare:
    room_id: Any
    room_name: str
    amount: float = 0.0
    percentage: float = 0.0


# ─── Série mensal ───

@dataclass(frozen=True)
class MonthlyPoint:
    """Ponto mensal da série de receita."""
    period: Period
    label: str
    total: float = 0.0
    collected: float = 0.0


# ─── Relatório consolidado ───

@dataclass(frozen=True)
class FinancialReport:
    """Resultado completo de um cálculo de relatório."""
    period_range: PeriodRange
    revenue: RevenueSummary
    expenses: ExpenseSummary
    net_profit: float
    by_room: tuple[RoomRevenue, ...] = ()
    by_category: tuple[CategoryExpense, ...] = ()
    expenses_by_room: tuple[RoomExpense, ...] = ()
    monthly: tuple[MonthlyPoint, ...] = ()

    @property
    def is_loss(self) -> bool:
        return is_loss(self.net_profit)

    @property
    def top_category(self) -> Optional[CategoryExpense]:
        """Categoria de maior gasto (primeira em caso de empate)."""
        if not self.by_category:
            return None
        return max(self.by_category, key=lambda c: c.amount)
