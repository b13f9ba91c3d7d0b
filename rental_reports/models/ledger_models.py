"""
Modelos do livro-caixa (ledger) de aluguel.

Dataclasses imutáveis para período, faixa de períodos, faturas, despesas,
contratos e quartos, mais a fronteira de ingestão que converte os registros
crus da camada de armazenamento (dicts com chaves camelCase) nos tipos abaixo.

Toda validação acontece aqui. Os serviços confiam nos invariantes destes tipos.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Iterable, Optional

logger = logging.getLogger(__name__)

_PERIOD_RE = re.compile(r"\d{4}-\d{2}")


# ─── Período (YYYY-MM) ───

@dataclass(frozen=True, order=True)
class Period:
    """Mês de calendário. Ordem dos valores = ordem cronológica = ordem da chave."""
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.year <= 9999:
            raise ValueError(f"Ano fora do intervalo: {self.year}")
        if not 1 <= self.month <= 12:
            raise ValueError(f"Mês fora do intervalo: {self.month}")

    @classmethod
    def parse(cls, key: str) -> "Period":
        """Constrói a partir da chave 'YYYY-MM'."""
        if not isinstance(key, str) or not _PERIOD_RE.fullmatch(key):
            raise ValueError(f"Período inválido: {key!r} (esperado YYYY-MM)")
        return cls(int(key[:4]), int(key[5:7]))

    @classmethod
    def from_date(cls, d: date) -> "Period":
        return cls(d.year, d.month)

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def label(self) -> str:
        """Rótulo de gráfico: MM/YYYY."""
        return f"{self.month:02d}/{self.year:04d}"

    def shift(self, months: int) -> "Period":
        """Desloca N meses de calendário (negativo volta no tempo)."""
        index = self.year * 12 + (self.month - 1) + months
        return Period(index // 12, index % 12 + 1)

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class PeriodRange:
    """Faixa de períodos, inclusiva nas duas pontas."""
    start: Period
    end: Period

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Faixa invertida: {self.start} > {self.end}")

    @classmethod
    def single(cls, period: Period) -> "PeriodRange":
        return cls(period, period)

    @classmethod
    def parse(cls, start: str, end: str) -> "PeriodRange":
        return cls(Period.parse(start), Period.parse(end))

    def contains(self, period: Period) -> bool:
        return self.start <= period <= self.end

    def __str__(self) -> str:
        if self.start == self.end:
            return self.start.key
        return f"{self.start.key}..{self.end.key}"


# ─── Categorias de despesa ───

class ExpenseCategory(str, Enum):
    """Categorias fechadas de despesa."""
    ELECTRIC_SHARED = "electric_shared"
    INTERNET_SHARED = "internet_shared"
    TRASH_SHARED = "trash_shared"
    REPAIR = "repair"
    OTHER = "other"


# ─── Entidades ───

@dataclass(frozen=True)
class Room:
    """Quarto. O motor usa apenas id e nome."""
    id: Any
    name: str
    base_rent: float = 0.0
    is_active: bool = True


@dataclass(frozen=True)
class Lease:
    """Contrato de locação. O motor usa apenas a relação id → room_id."""
    id: Any
    room_id: Any
    tenant_id: Any = None
    monthly_rent: float = 0.0
    status: str = "active"


@dataclass(frozen=True)
class Invoice:
    """
    Fatura mensal de um contrato.

    total = valor faturado (competência); amount_paid = caixa recebido,
    acompanhado de forma independente (pagamento a maior é possível).
    """
    id: Any
    lease_id: Any
    period: Period
    total: float = 0.0
    amount_paid: float = 0.0
    rent: float = 0.0
    electric_cost: float = 0.0
    water_cost: float = 0.0
    other_fees: float = 0.0
    status: str = "unpaid"


@dataclass(frozen=True)
class Expense:
    """
    Despesa do imóvel.

    `period` é um cache derivado de `date` e pode estar desatualizado;
    os serviços recalculam o mês a partir de `date`.
    """
    id: Any
    category: ExpenseCategory
    amount: float
    date: date
    period: Optional[Period] = None
    description: str = ""
    is_recurring: bool = False
    room_id: Any = None
    note: str = ""

    @property
    def month(self) -> Period:
        """Mês da transação (primeiros 7 caracteres da data ISO)."""
        return Period.from_date(self.date)


@dataclass(frozen=True)
class LedgerSnapshot:
    """Retrato imutável das quatro coleções usadas em um cálculo."""
    invoices: tuple[Invoice, ...] = ()
    expenses: tuple[Expense, ...] = ()
    leases: tuple[Lease, ...] = ()
    rooms: tuple[Room, ...] = ()


# ─── Fronteira de ingestão ───

def _required(record: dict, key: str):
    value = record.get(key)
    if value is None:
        raise ValueError(f"Campo obrigatório ausente: {key}")
    return value


def _amount(record: dict, key: str) -> float:
    return float(record.get(key, 0) or 0)


def _parse_day(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Data inválida: {value!r}")
    return date.fromisoformat(value[:10])


def parse_category(value) -> ExpenseCategory:
    """Converte a categoria crua. Valor desconhecido vira OTHER (única fallback do projeto)."""
    try:
        return ExpenseCategory(value)
    except ValueError:
        logger.warning("Categoria desconhecida %r, usando 'other'", value)
        return ExpenseCategory.OTHER


def parse_room(record: dict) -> Room:
    return Room(
        id=_required(record, "id"),
        name=str(record.get("name") or ""),
        base_rent=_amount(record, "baseRent"),
        is_active=bool(record.get("isActive", True)),
    )


def parse_lease(record: dict) -> Lease:
    return Lease(
        id=_required(record, "id"),
        room_id=_required(record, "roomId"),
        tenant_id=record.get("tenantId"),
        monthly_rent=_amount(record, "monthlyRent"),
        status=record.get("status") or "active",
    )


def parse_invoice(record: dict) -> Invoice:
    return Invoice(
        id=_required(record, "id"),
        lease_id=_required(record, "leaseId"),
        period=Period.parse(_required(record, "period")),
        total=_amount(record, "total"),
        amount_paid=_amount(record, "amountPaid"),
        rent=_amount(record, "rent"),
        electric_cost=_amount(record, "electricCost"),
        water_cost=_amount(record, "waterCost"),
        other_fees=_amount(record, "otherFees"),
        status=record.get("status") or "unpaid",
    )


def parse_expense(record: dict) -> Expense:
    day = _parse_day(_required(record, "date"))

    # Cache de período desatualizado não invalida a despesa
    cached = record.get("period")
    try:
        period = Period.parse(cached) if cached else Period.from_date(day)
    except ValueError:
        period = Period.from_date(day)

    return Expense(
        id=_required(record, "id"),
        category=parse_category(record.get("category")),
        amount=_amount(record, "amount"),
        date=day,
        period=period,
        description=record.get("description") or "",
        is_recurring=bool(record.get("isRecurring", False)),
        room_id=record.get("roomId"),
        note=record.get("note") or "",
    )


def _parse_all(records: Iterable[dict], parser: Callable, entity: str) -> tuple:
    """Converte uma coleção; registros malformados são descartados com aviso."""
    parsed = []
    for record in records or ():
        try:
            parsed.append(parser(record))
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            record_id = record.get("id") if isinstance(record, dict) else None
            logger.warning("%s ignorado (id=%r): %s", entity, record_id, e)
    return tuple(parsed)


def load_snapshot(
    invoices: Iterable[dict] = (),
    expenses: Iterable[dict] = (),
    leases: Iterable[dict] = (),
    rooms: Iterable[dict] = (),
) -> LedgerSnapshot:
    """Monta um LedgerSnapshot a partir dos registros crus do armazenamento."""
    return LedgerSnapshot(
        invoices=_parse_all(invoices, parse_invoice, "Invoice"),
        expenses=_parse_all(expenses, parse_expense, "Expense"),
        leases=_parse_all(leases, parse_lease, "Lease"),
        rooms=_parse_all(rooms, parse_room, "Room"),
    )
