import math
from dataclasses import dataclass
from datetime import datetime

from models.category import Category, DEFAULT_CATEGORY
from models.transaction_type import TransactionType
from utils.date_helpers import format_iso_datetime, parse_iso_datetime


@dataclass(frozen=True)
class Transaction:
    description: str
    amount: float               # always positive; sign comes from trans_type
    trans_type: TransactionType
    category: Category
    date: datetime              # naive local time

    @property
    def signed_amount(self) -> float:
        return self.trans_type.sign * self.amount

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "amount": self.amount,
            "trans_type": self.trans_type.value,
            "category": self.category.value,
            "date": format_iso_datetime(self.date),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Build a Transaction from its JSON form.

        Raises ValueError, KeyError or TypeError on malformed input. A missing
        category falls back to Other for files written before categories
        existed.
        """
        description = data["description"]
        if not isinstance(description, str):
            raise TypeError("description must be a string")
        amount = data["amount"]
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise TypeError("amount must be a number")
        if not math.isfinite(amount) or amount <= 0:
            raise ValueError(f"amount must be positive, got {amount!r}")
        date = parse_iso_datetime(data["date"])
        if date is None:
            raise ValueError(f"invalid date: {data['date']!r}")
        category = data.get("category")
        return cls(
            description=description,
            amount=float(amount),
            trans_type=TransactionType(data["trans_type"]),
            category=Category(category) if category is not None else DEFAULT_CATEGORY,
            date=date,
        )
