from models.transaction import Transaction
from utils.date_helpers import format_datetime

EXPORT_HEADER = ["Date", "Type", "Category", "Description", "Amount"]


def export_rows(transactions: list[Transaction]) -> list[list[str]]:
    """Return rows suitable for CSV export, oldest first."""
    rows = [list(EXPORT_HEADER)]
    for tx in sorted(transactions, key=lambda t: t.date):
        rows.append([
            format_datetime(tx.date),
            tx.trans_type.value,
            tx.category.value,
            tx.description,
            f"{tx.amount:.2f}",
        ])
    return rows
