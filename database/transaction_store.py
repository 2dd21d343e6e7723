import logging
from typing import Iterator

from database.data_file import DataFile
from models.transaction import Transaction

logger = logging.getLogger(__name__)


class TransactionStore:
    """Ordered in-memory list of transactions backed by a JSON data file.

    A transaction's identity is its position. Mutations never persist on
    their own; callers decide when to call persist().
    """

    def __init__(self, data_file: DataFile, transactions: list[Transaction] | None = None):
        self._file = data_file
        self._transactions: list[Transaction] = list(transactions or [])

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._transactions))

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self._transactions)

    def get(self, index: int) -> Transaction | None:
        if not self._in_bounds(index):
            return None
        return self._transactions[index]

    def add(self, transaction: Transaction):
        self._transactions.append(transaction)

    def update(self, index: int, transaction: Transaction) -> bool:
        if not self._in_bounds(index):
            logger.warning("Update ignored: index %d out of range (%d items)", index, len(self))
            return False
        self._transactions[index] = transaction
        return True

    def delete(self, index: int) -> bool:
        if not self._in_bounds(index):
            logger.warning("Delete ignored: index %d out of range (%d items)", index, len(self))
            return False
        del self._transactions[index]
        return True

    def snapshot(self) -> list[Transaction]:
        """Copy of the current contents; not updated by later mutations."""
        return list(self._transactions)

    def total_balance(self) -> float:
        return sum(t.signed_amount for t in self._transactions)

    # ── Persistence ─────────────────────────────────────────────────────────
    @property
    def data_file(self) -> DataFile:
        return self._file

    def open(self, data_file: DataFile):
        """Switch to another data file and load its contents."""
        self._file = data_file
        self.restore()

    def to_document(self) -> dict:
        return {"transactions": [t.to_dict() for t in self._transactions]}

    def persist(self) -> bool:
        """Write every transaction to the data file. Failures are logged only."""
        try:
            self._file.write(self.to_document())
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Could not save %d transactions to %s: %s", len(self), self._file.path, e)
            return False
        logger.debug("Saved %d transactions to %s", len(self), self._file.path)
        return True

    def restore(self):
        """Replace contents from the data file; empty on missing or bad data."""
        self._transactions = self._load_transactions()

    def _load_transactions(self) -> list[Transaction]:
        document = self._file.read()
        if document is None:
            return []
        rows = document.get("transactions")
        if not isinstance(rows, list):
            logger.warning("Ignoring %s: no transactions list", self._file.path)
            return []
        try:
            transactions = [Transaction.from_dict(row) for row in rows]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Ignoring %s: malformed transaction (%s)", self._file.path, e)
            return []
        logger.info("Loaded %d transactions from %s", len(transactions), self._file.path)
        return transactions

    @classmethod
    def load(cls, data_file: DataFile) -> "TransactionStore":
        store = cls(data_file)
        store.restore()
        return store
