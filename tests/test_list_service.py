"""
Tests for the transaction list rows: ordering, search and paging.
"""
from datetime import datetime, timedelta

import pytest

from models.category import Category
from models.transaction_type import TransactionType
from services.list_service import PAGE_SIZE, list_rows
from tests.conftest import make_tx


@pytest.fixture
def many_transactions():
    start = datetime(2023, 1, 1, 8, 0)
    txs = [make_tx(f"Item {i}", 1.0 + i, date=start + timedelta(hours=i)) for i in range(250)]
    txs[0] = make_tx("Opening deposit", 500.0, TransactionType.INCOME, Category.SALARY, start)
    return txs


class TestListRows:

    def test_newest_insertion_first_with_store_index(self, sample_transactions):
        rows, total = list_rows(sample_transactions)
        assert total == 3
        assert [index for index, _ in rows] == [2, 1, 0]
        assert rows[0][1].description == "Groceries"

    def test_empty(self):
        assert list_rows([]) == ([], 0)

    def test_no_limit_reaches_oldest_row(self, many_transactions):
        rows, total = list_rows(many_transactions)
        assert total == 250
        assert len(rows) == 250
        assert rows[-1] == (0, many_transactions[0])

    def test_paging_reaches_oldest_row(self, many_transactions):
        first, total = list_rows(many_transactions, limit=PAGE_SIZE)
        assert total == 250
        assert len(first) == PAGE_SIZE
        assert first[0][0] == 249
        assert first[-1][0] == 250 - PAGE_SIZE
        assert 0 not in [index for index, _ in first]

        second, _ = list_rows(many_transactions, limit=PAGE_SIZE * 2)
        assert len(second) == 250
        assert second[:PAGE_SIZE] == first
        assert second[-1][0] == 0

    def test_search_finds_oldest_row_within_first_page(self, many_transactions):
        rows, total = list_rows(many_transactions, "opening", limit=PAGE_SIZE)
        assert total == 1
        assert rows == [(0, many_transactions[0])]

    def test_search_matches_category_case_insensitive(self, sample_transactions):
        rows, _ = list_rows(sample_transactions, "  HOUSING ")
        assert [index for index, _ in rows] == [1]
        rows, _ = list_rows(sample_transactions, "groc")
        assert [index for index, _ in rows] == [2]

    def test_search_without_match(self, sample_transactions):
        assert list_rows(sample_transactions, "zzz", limit=PAGE_SIZE) == ([], 0)

    def test_blank_search_keeps_everything(self, sample_transactions):
        rows, total = list_rows(sample_transactions, "   ")
        assert total == 3
        assert len(rows) == 3
