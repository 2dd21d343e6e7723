"""
Tests for expense aggregation by category.
"""
import pytest

from models.category import Category
from models.transaction_type import TransactionType
from services.category_service import aggregate_expenses
from tests.conftest import make_tx


class TestAggregateExpenses:

    def test_empty(self):
        breakdown = aggregate_expenses([])
        assert breakdown.is_empty
        assert breakdown.items == ()

    def test_income_only_is_empty(self):
        txs = [make_tx("Paycheck", 1000.0, TransactionType.INCOME, Category.SALARY)]
        assert aggregate_expenses(txs).is_empty

    def test_single_category(self):
        txs = [make_tx("A", 30.0), make_tx("B", 70.0)]
        breakdown = aggregate_expenses(txs)
        assert breakdown.grand_total == 100.0
        assert len(breakdown.items) == 1
        item = breakdown.items[0]
        assert item.category is Category.FOOD
        assert item.total == 100.0
        assert item.percentage == 100.0

    def test_sorted_by_total_descending(self, sample_transactions):
        txs = sample_transactions + [make_tx("Bus", 2.5, category=Category.TRANSPORT)]
        breakdown = aggregate_expenses(txs)
        assert [i.category for i in breakdown.items] == [
            Category.HOUSING, Category.FOOD, Category.TRANSPORT,
        ]
        assert breakdown.grand_total == 458.0

    def test_ties_follow_declaration_order(self):
        txs = [
            make_tx("x", 10.0, category=Category.OTHER),
            make_tx("y", 10.0, category=Category.HEALTH),
            make_tx("z", 10.0, category=Category.FOOD),
            make_tx("w", 10.0, category=Category.HOUSING),
        ]
        expected = [Category.FOOD, Category.HOUSING, Category.HEALTH, Category.OTHER]
        assert [i.category for i in aggregate_expenses(txs).items] == expected
        assert [i.category for i in aggregate_expenses(txs[::-1]).items] == expected

    def test_percentages_sum_to_100(self):
        amounts = [12.34, 56.78, 9.1, 0.01, 333.33]
        cats = [Category.FOOD, Category.HOUSING, Category.HEALTH,
                Category.SHOPPING, Category.EDUCATION]
        txs = [make_tx(str(a), a, category=c) for a, c in zip(amounts, cats)]
        breakdown = aggregate_expenses(txs)
        assert sum(i.percentage for i in breakdown.items) == pytest.approx(100.0)
