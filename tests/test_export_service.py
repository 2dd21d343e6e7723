"""
Tests for CSV export rows.
"""
from services.export_service import EXPORT_HEADER, export_rows


class TestExportRows:

    def test_header_only_when_empty(self):
        assert export_rows([]) == [EXPORT_HEADER]

    def test_rows_are_chronological(self, sample_transactions):
        rows = export_rows(sample_transactions)
        assert rows[0] == ["Date", "Type", "Category", "Description", "Amount"]
        assert rows[1:] == [
            ["2024-01-01 09:00", "Income", "Salary", "Paycheck", "1000.00"],
            ["2024-01-03 18:45", "Expense", "Food", "Groceries", "55.50"],
            ["2024-01-05 10:15", "Expense", "Housing", "Rent", "400.00"],
        ]
