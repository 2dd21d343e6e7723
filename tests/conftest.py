"""
Pytest configuration and shared fixtures for Finance Tracker tests.
"""
from datetime import datetime

import pytest

from database.data_file import DataFile
from database.transaction_store import TransactionStore
from models.category import Category
from models.transaction import Transaction
from models.transaction_type import TransactionType
from services.edit_controller import EditController

FIXED_NOW = datetime(2024, 3, 15, 14, 30, 45)


def make_tx(description, amount, trans_type=TransactionType.EXPENSE,
            category=Category.FOOD, date=datetime(2024, 1, 1, 12, 0)):
    return Transaction(
        description=description,
        amount=amount,
        trans_type=trans_type,
        category=category,
        date=date,
    )


@pytest.fixture
def data_file(tmp_path):
    """Data file inside a per-test temp folder (not created yet)."""
    return DataFile(tmp_path / "finance_data.json")


@pytest.fixture
def store(data_file):
    return TransactionStore(data_file)


@pytest.fixture
def controller(store):
    """EditController whose clock is frozen at FIXED_NOW."""
    return EditController(store, now=lambda: FIXED_NOW)


@pytest.fixture
def sample_transactions():
    return [
        make_tx("Paycheck", 1000.0, TransactionType.INCOME, Category.SALARY,
                datetime(2024, 1, 1, 9, 0)),
        make_tx("Rent", 400.0, TransactionType.EXPENSE, Category.HOUSING,
                datetime(2024, 1, 5, 10, 15)),
        make_tx("Groceries", 55.5, TransactionType.EXPENSE, Category.FOOD,
                datetime(2024, 1, 3, 18, 45)),
    ]


@pytest.fixture
def filled_store(store, sample_transactions):
    for tx in sample_transactions:
        store.add(tx)
    return store


@pytest.fixture
def filled_controller(filled_store):
    return EditController(filled_store, now=lambda: FIXED_NOW)
