from dataclasses import dataclass
from datetime import datetime

from models.transaction import Transaction
from models.transaction_type import TransactionType
from utils.constants import TOOLTIP_MAX_DISTANCE_SECONDS
from utils.currency import format_currency, format_signed
from utils.date_helpers import format_datetime, to_timestamp


@dataclass(frozen=True)
class BalancePoint:
    timestamp: float        # seconds since epoch
    balance: float          # running balance after this transaction
    description: str
    amount: float
    trans_type: TransactionType
    date: datetime


@dataclass(frozen=True)
class BalanceTimeline:
    points: tuple[BalancePoint, ...]

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def xs(self) -> list[float]:
        return [p.timestamp for p in self.points]

    @property
    def ys(self) -> list[float]:
        return [p.balance for p in self.points]

    @property
    def final_balance(self) -> float:
        return self.points[-1].balance if self.points else 0.0

    def nearest(self, x: float) -> BalancePoint | None:
        """Point closest in time to x; the first one wins on ties."""
        if not self.points:
            return None
        return min(self.points, key=lambda p: abs(p.timestamp - x))

    def describe(self, x: float, y: float) -> str:
        """Hover text for a cursor at (x, y).

        Shows the nearest transaction when it is within a day of the cursor,
        otherwise just the balance at the cursor height.
        """
        point = self.nearest(x)
        if point is None or abs(point.timestamp - x) > TOOLTIP_MAX_DISTANCE_SECONDS:
            return f"Balance: {format_currency(y)}"
        return (
            f"Date: {format_datetime(point.date)}\n"
            f"Transaction: {point.description}\n"
            f"Amount: {format_signed(point.amount, point.trans_type)} ({point.trans_type.value})\n"
            f"Balance: {format_currency(point.balance)}"
        )


def build_balance_timeline(transactions: list[Transaction]) -> BalanceTimeline:
    """Chronological running balance, one point per transaction.

    sorted() is stable, so transactions sharing a timestamp keep their
    insertion order.
    """
    running_balance = 0.0
    points = []
    for tx in sorted(transactions, key=lambda t: t.date):
        running_balance += tx.signed_amount
        points.append(BalancePoint(
            timestamp=to_timestamp(tx.date),
            balance=running_balance,
            description=tx.description,
            amount=tx.amount,
            trans_type=tx.trans_type,
            date=tx.date,
        ))
    return BalanceTimeline(points=tuple(points))
