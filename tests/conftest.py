"""Fixtures compartilhadas: um pequeno prédio com 3 quartos e uma data fixa."""

from datetime import date

import pytest

from rental_reports.models.ledger_models import (
    Expense,
    ExpenseCategory,
    Invoice,
    LedgerSnapshot,
    Lease,
    Period,
    Room,
)


@pytest.fixture
def today():
    return date(2024, 6, 15)


@pytest.fixture
def rooms():
    return (
        Room(id=1, name="Phòng 01"),
        Room(id=2, name="Phòng 02"),
        Room(id=3, name="Phòng 03"),
    )


@pytest.fixture
def leases():
    return (
        Lease(id=10, room_id=1),
        Lease(id=20, room_id=2),
        Lease(id=30, room_id=3),
    )


@pytest.fixture
def invoices():
    return (
        Invoice(id=1, lease_id=10, period=Period(2024, 5), total=2_600_000, amount_paid=2_600_000),
        Invoice(id=2, lease_id=20, period=Period(2024, 5), total=2_600_000, amount_paid=1_000_000),
        Invoice(id=3, lease_id=10, period=Period(2024, 6), total=2_700_000, amount_paid=0),
        Invoice(id=4, lease_id=20, period=Period(2024, 6), total=2_500_000, amount_paid=2_500_000),
        Invoice(id=5, lease_id=10, period=Period(2024, 2), total=2_500_000, amount_paid=2_500_000),
    )


def make_expense(id, category, amount, day, room_id=None, period=None):
    return Expense(
        id=id,
        category=category,
        amount=amount,
        date=day,
        period=period or Period.from_date(day),
        room_id=room_id,
    )


@pytest.fixture
def expense_factory():
    return make_expense


@pytest.fixture
def expenses():
    return (
        make_expense(1, ExpenseCategory.ELECTRIC_SHARED, 400_000, date(2024, 6, 5)),
        make_expense(2, ExpenseCategory.REPAIR, 200_000, date(2024, 6, 10), room_id=1),
        make_expense(3, ExpenseCategory.INTERNET_SHARED, 300_000, date(2024, 6, 1)),
        make_expense(4, ExpenseCategory.REPAIR, 100_000, date(2024, 5, 20), room_id=2),
    )


@pytest.fixture
def snapshot(invoices, expenses, leases, rooms):
    return LedgerSnapshot(
        invoices=invoices, expenses=expenses, leases=leases, rooms=rooms
    )


@pytest.fixture
def raw_records():
    """Registros no formato da camada de armazenamento (camelCase)."""
    return {
        "rooms": [
            {"id": 1, "name": "Phòng 01", "baseRent": 1800000, "isActive": True},
            {"id": 2, "name": "Phòng 02", "baseRent": 1800000, "isActive": True},
        ],
        "leases": [
            {"id": 10, "roomId": 1, "tenantId": 1, "monthlyRent": 2500000, "status": "active"},
            {"id": 20, "roomId": 2, "tenantId": 2, "monthlyRent": 2500000, "status": "active"},
        ],
        "invoices": [
            {"id": 1, "leaseId": 10, "period": "2024-06", "rent": 2500000,
             "otherFees": 130000, "total": 2630000, "amountPaid": 2630000, "status": "paid"},
            {"id": 2, "leaseId": 20, "period": "2024-06", "rent": 2500000,
             "otherFees": 130000, "total": 2630000, "amountPaid": 0, "status": "unpaid"},
        ],
        "expenses": [
            {"id": 1, "category": "electric_shared", "amount": 450000, "date": "2024-06-03",
             "period": "2024-06", "description": "Điện tháng 6", "isRecurring": True},
            {"id": 1, "category": "electric_shared", "amount": 450000, "date": "2024-06-03",
             "period": "2024-06", "description": "Điện tháng 6", "isRecurring": True},
            {"id": 2, "category": "repair", "amount": 150000, "date": "2024-06-12",
             "period": "2024-06", "description": "Sửa vòi nước", "isRecurring": False, "roomId": 2},
        ],
    }
