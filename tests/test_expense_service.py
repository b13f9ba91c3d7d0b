"""Testes do serviço de despesas."""

from datetime import date

from rental_reports.models.ledger_models import (
    ExpenseCategory,
    Period,
    PeriodRange,
)
from rental_reports.models.report_models import CategoryExpense
from rental_reports.services.expense_service import (
    SHARED_ROOM_NAME,
    aggregate_expenses,
    attribute_by_category,
    attribute_expenses_by_room,
    category_shares,
    list_expenses,
)

JUNE = PeriodRange.single(Period(2024, 6))


class TestAggregateExpenses:

    def test_june(self, expenses):
        summary = aggregate_expenses(expenses, JUNE)
        assert summary.total == 900_000
        assert summary.count == 3
        assert [e.id for e in summary.items] == [1, 2, 3]

    def test_month_derived_from_date_not_cached_period(self, expense_factory):
        stale = expense_factory(
            1, ExpenseCategory.REPAIR, 500, date(2024, 7, 1), period=Period(2024, 6)
        )
        assert aggregate_expenses([stale], JUNE).count == 0
        assert aggregate_expenses([stale], PeriodRange.single(Period(2024, 7))).total == 500

    def test_quarter_range(self, expenses):
        summary = aggregate_expenses(expenses, PeriodRange.parse("2024-04", "2024-06"))
        assert summary.total == 1_000_000
        assert summary.count == 4

    def test_empty_period(self, expenses):
        summary = aggregate_expenses(expenses, PeriodRange.single(Period(2023, 1)))
        assert (summary.total, summary.count, summary.items) == (0, 0, ())


class TestListExpenses:

    def test_newest_first(self, expenses):
        items = list_expenses(aggregate_expenses(expenses, JUNE))
        assert [e.id for e in items] == [2, 1, 3]

    def test_category_filter(self, expenses):
        summary = aggregate_expenses(expenses, PeriodRange.parse("2024-05", "2024-06"))
        items = list_expenses(summary, ExpenseCategory.REPAIR)
        assert [e.id for e in items] == [2, 4]


class TestAttributeByCategory:

    def test_first_appearance_order(self, expense_factory):
        day = date(2024, 6, 1)
        expenses = [
            expense_factory(1, ExpenseCategory.REPAIR, 200_000, day),
            expense_factory(2, ExpenseCategory.REPAIR, 100_000, day),
            expense_factory(3, ExpenseCategory.OTHER, 50_000, day),
        ]
        assert attribute_by_category(expenses) == (
            CategoryExpense(category=ExpenseCategory.REPAIR, amount=300_000),
            CategoryExpense(category=ExpenseCategory.OTHER, amount=50_000),
        )

    def test_order_not_by_magnitude(self, expense_factory):
        day = date(2024, 6, 1)
        expenses = [
            expense_factory(1, ExpenseCategory.OTHER, 1, day),
            expense_factory(2, ExpenseCategory.ELECTRIC_SHARED, 1_000_000, day),
        ]
        result = attribute_by_category(expenses)
        assert [c.category for c in result] == [
            ExpenseCategory.OTHER, ExpenseCategory.ELECTRIC_SHARED,
        ]

    def test_empty(self):
        assert attribute_by_category([]) == ()


class TestCategoryShares:

    def test_percentages(self):
        shares = category_shares([
            CategoryExpense(ExpenseCategory.REPAIR, 300),
            CategoryExpense(ExpenseCategory.OTHER, 100),
        ])
        assert [s.percentage for s in shares] == [75.0, 25.0]

    def test_zero_total_is_no_data(self):
        shares = category_shares([CategoryExpense(ExpenseCategory.REPAIR, 0)])
        assert shares == ()


class TestAttributeExpensesByRoom:

    def test_rooms_then_shared(self, expenses, rooms):
        summary = aggregate_expenses(expenses, PeriodRange.parse("2024-05", "2024-06"))
        result = attribute_expenses_by_room(summary.items, rooms)
        assert [(r.room_id, r.amount, r.count) for r in result] == [
            (1, 200_000, 1),
            (2, 100_000, 1),
            (None, 700_000, 2),
        ]
        assert result[-1].room_name == SHARED_ROOM_NAME

    def test_unknown_room_goes_to_shared(self, expense_factory, rooms):
        exp = expense_factory(1, ExpenseCategory.REPAIR, 10, date(2024, 6, 1), room_id=404)
        result = attribute_expenses_by_room([exp], rooms)
        assert [(r.room_id, r.amount) for r in result] == [(None, 10)]

    def test_empty(self, rooms):
        assert attribute_expenses_by_room([], rooms) == ()
