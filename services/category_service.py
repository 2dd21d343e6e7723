from dataclasses import dataclass

from models.category import Category
from models.transaction import Transaction
from models.transaction_type import TransactionType


@dataclass(frozen=True)
class CategoryTotal:
    category: Category
    total: float
    percentage: float


@dataclass(frozen=True)
class CategoryBreakdown:
    items: tuple[CategoryTotal, ...]
    grand_total: float

    @property
    def is_empty(self) -> bool:
        return self.grand_total <= 0


def aggregate_expenses(transactions: list[Transaction]) -> CategoryBreakdown:
    """Expense totals per category, largest first.

    Equal totals are ordered by category declaration order so the pie and
    the legend never reshuffle between renders.
    """
    totals: dict[Category, float] = {}
    grand_total = 0.0
    for tx in transactions:
        if tx.trans_type is not TransactionType.EXPENSE:
            continue
        totals[tx.category] = totals.get(tx.category, 0.0) + tx.amount
        grand_total += tx.amount

    if grand_total <= 0:
        return CategoryBreakdown(items=(), grand_total=0.0)

    ordered = sorted(totals.items(), key=lambda kv: (-kv[1], kv[0].ordinal))
    items = tuple(
        CategoryTotal(category=cat, total=total, percentage=total / grand_total * 100)
        for cat, total in ordered
    )
    return CategoryBreakdown(items=items, grand_total=grand_total)
