import logging
import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable

from database.data_file import DataFile
from database.transaction_store import TransactionStore
from models.category import Category, categories_for_type, default_category_for_type
from models.transaction import Transaction
from models.transaction_type import TransactionType, DEFAULT_TRANSACTION_TYPE
from utils.constants import TAB_TRANSACTIONS
from utils.currency import format_amount_input
from utils.date_helpers import combine

logger = logging.getLogger(__name__)

# ASCII digits with optional sign, fraction and exponent; no separators
_AMOUNT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


@dataclass
class EditState:
    """Form input that has not been committed yet. Never persisted."""
    current_tab: str = TAB_TRANSACTIONS
    description: str = ""
    amount_text: str = ""
    input_date: date = field(default_factory=date.today)
    trans_type: TransactionType = DEFAULT_TRANSACTION_TYPE
    category: Category = field(
        default_factory=lambda: default_category_for_type(DEFAULT_TRANSACTION_TYPE)
    )
    editing_index: int | None = None


def parse_amount(text: str) -> float | None:
    """Positive finite amount from user text, or None."""
    text = text.strip()
    if not _AMOUNT_PATTERN.fullmatch(text):
        return None
    amount = float(text)
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount


class EditController:
    """Add/edit state machine sitting between the form and the store.

    Idle/Add when editing_index is None, Editing(i) otherwise. Every
    successful commit or delete persists the store.
    """

    def __init__(self, store: TransactionStore, now: Callable[[], datetime] = datetime.now):
        self._store = store
        self._now = now
        self.state = EditState(input_date=self._today())

    def _today(self) -> date:
        return self._now().date()

    @property
    def store(self) -> TransactionStore:
        return self._store

    @property
    def editing_index(self) -> int | None:
        return self.state.editing_index

    @property
    def is_editing(self) -> bool:
        return self.state.editing_index is not None

    @property
    def heading(self) -> str:
        return "Edit Transaction" if self.is_editing else "Add New Transaction"

    @property
    def submit_label(self) -> str:
        return "Update" if self.is_editing else "Add"

    def available_categories(self) -> tuple[Category, ...]:
        return categories_for_type(self.state.trans_type)

    def reset(self):
        """Back to defaults; any pending edit is dropped."""
        self.state = EditState(input_date=self._today())

    def reload(self, data_file: DataFile | None = None):
        """Reload the store, optionally from another data file, and reset.

        Staged input is discarded because an editing index may not point
        at the same transaction after a load.
        """
        if data_file is not None:
            self._store.open(data_file)
        else:
            self._store.restore()
        current_tab = self.state.current_tab
        self.reset()
        self.state.current_tab = current_tab
        logger.info("Reloaded %d transactions", len(self._store))

    def select_type(self, trans_type: TransactionType):
        self.state.trans_type = trans_type
        self.state.category = default_category_for_type(trans_type)

    def _clear_inputs(self):
        self.state.description = ""
        self.state.amount_text = ""
        self.state.input_date = self._today()

    # ── Transitions ──────────────────────────────────────────────────────────
    def begin_edit(self, index: int) -> bool:
        if self.is_editing:
            return False
        tx = self._store.get(index)
        if tx is None:
            return False
        self.state.description = tx.description
        self.state.amount_text = format_amount_input(tx.amount)
        self.state.trans_type = tx.trans_type
        self.state.category = tx.category
        self.state.input_date = tx.date.date()
        self.state.editing_index = index
        return True

    def cancel(self):
        self.state.editing_index = None
        self._clear_inputs()

    def commit(self) -> bool:
        """Validate the staged input and write it to the store.

        Returns False and leaves everything untouched when the amount is not
        a positive number or the description is blank.
        """
        amount = parse_amount(self.state.amount_text)
        description = self.state.description.strip()
        if amount is None or not description:
            return False

        index = self.state.editing_index
        if index is not None:
            original = self._store.get(index)
            if original is None:
                return False
            time_of_day = original.date.time()
        else:
            time_of_day = self._now().time()

        tx = Transaction(
            description=description,
            amount=amount,
            trans_type=self.state.trans_type,
            category=self.state.category,
            date=combine(self.state.input_date, time_of_day),
        )

        if index is not None:
            self._store.update(index, tx)
            self.state.editing_index = None
            logger.info("Updated transaction %d", index)
        else:
            self._store.add(tx)
            logger.info("Added %s transaction", tx.trans_type.value.lower())

        self._clear_inputs()
        self._store.persist()
        return True

    def delete(self, index: int) -> bool:
        if not self._store.delete(index):
            return False
        editing = self.state.editing_index
        if editing == index:
            self.cancel()
        elif editing is not None and editing > index:
            self.state.editing_index = editing - 1
        logger.info("Deleted transaction %d", index)
        self._store.persist()
        return True
