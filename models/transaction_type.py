from enum import Enum


class TransactionType(Enum):
    INCOME = "Income"
    EXPENSE = "Expense"

    @property
    def sign(self) -> int:
        return 1 if self is TransactionType.INCOME else -1

    @property
    def symbol(self) -> str:
        return "+" if self is TransactionType.INCOME else "-"

    def __str__(self) -> str:
        return self.value


DEFAULT_TRANSACTION_TYPE = TransactionType.EXPENSE
