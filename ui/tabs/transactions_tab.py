import csv
import logging
import customtkinter as ctk
from tkinter import filedialog
from models.category import Category
from models.transaction import Transaction
from models.transaction_type import TransactionType
from services.edit_controller import EditController
from services.export_service import export_rows
from services.list_service import PAGE_SIZE, list_rows
from ui.components.date_picker import DatePickerWidget
from utils.constants import TYPE_COLORS
from utils.currency import format_currency
from utils.date_helpers import format_display_date

logger = logging.getLogger(__name__)


class TransactionsTab(ctk.CTkFrame):
    """Add/edit form, balance heading and the transaction list (newest first)."""

    def __init__(
        self,
        master,
        controller: EditController,
        notify_refresh,   # callable
        date_format: str = "YYYY-MM-DD",
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._ctrl = controller
        self._notify_refresh = notify_refresh
        self._date_format = date_format

        self._desc_var = ctk.StringVar()
        self._amount_var = ctk.StringVar()
        self._type_var = ctk.StringVar()
        self._cat_var = ctk.StringVar()
        self._syncing = False
        self._desc_var.trace_add("write", lambda *_: self._stage_text())
        self._amount_var.trace_add("write", lambda *_: self._stage_text())

        self._search_var = ctk.StringVar()
        self._limit = PAGE_SIZE
        self._search_var.trace_add("write", lambda *_: self._on_search())

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(4, weight=1)

        self._build_form()
        self._build_balance()
        self._build_list()
        self.refresh()

    def refresh(self):
        self._sync_form()
        self._load()

    # ── Form ─────────────────────────────────────────────────────────────────
    def _build_form(self):
        form = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        form.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))

        self._heading = ctk.CTkLabel(
            form, text="", font=ctk.CTkFont(size=16, weight="bold"), anchor="w"
        )
        self._heading.grid(row=0, column=0, columnspan=8, padx=12, pady=(8, 4), sticky="w")

        ctk.CTkLabel(form, text="Date:").grid(row=1, column=0, padx=(12, 4), pady=4)
        self._date_picker = DatePickerWidget(
            form,
            initial_date=self._ctrl.state.input_date,
            date_format=self._date_format,
            on_change=self._on_date_change,
        )
        self._date_picker.grid(row=1, column=1, padx=(0, 12), pady=4, sticky="w")

        ctk.CTkLabel(form, text="Desc:").grid(row=1, column=2, padx=(0, 4))
        ctk.CTkEntry(form, textvariable=self._desc_var, width=200).grid(
            row=1, column=3, padx=(0, 12), pady=4
        )
        ctk.CTkLabel(form, text="Amount:").grid(row=1, column=4, padx=(0, 4))
        ctk.CTkEntry(form, textvariable=self._amount_var, width=100).grid(
            row=1, column=5, padx=(0, 12), pady=4
        )

        type_frame = ctk.CTkFrame(form, fg_color="transparent")
        type_frame.grid(row=2, column=0, columnspan=2, padx=(12, 4), pady=(4, 10), sticky="w")
        for t in TransactionType:
            ctk.CTkRadioButton(
                type_frame, text=t.value,
                variable=self._type_var, value=t.value,
                command=self._on_type_change,
            ).pack(side="left", padx=4)

        ctk.CTkLabel(form, text="Category:").grid(row=2, column=2, padx=(0, 4), pady=(4, 10))
        self._cat_combo = ctk.CTkComboBox(
            form, values=[], variable=self._cat_var,
            width=160, state="readonly",
            command=self._on_category_change,
        )
        self._cat_combo.grid(row=2, column=3, padx=(0, 12), pady=(4, 10), sticky="w")

        btn_frame = ctk.CTkFrame(form, fg_color="transparent")
        btn_frame.grid(row=2, column=4, columnspan=4, padx=(0, 12), pady=(4, 10), sticky="w")
        self._submit_btn = ctk.CTkButton(btn_frame, text="Add", width=90, command=self._on_submit)
        self._submit_btn.pack(side="left", padx=(0, 6))
        self._cancel_btn = ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._on_cancel,
        )
        ctk.CTkButton(
            btn_frame, text="Export CSV", width=100,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._export_csv,
        ).pack(side="right", padx=(6, 0))

    def _sync_form(self):
        """Push the controller's staged state into the widgets."""
        state = self._ctrl.state
        self._heading.configure(text=self._ctrl.heading)
        self._submit_btn.configure(text=self._ctrl.submit_label)
        if self._ctrl.is_editing:
            self._cancel_btn.pack(side="left", padx=(0, 6))
        else:
            self._cancel_btn.pack_forget()

        self._syncing = True
        self._desc_var.set(state.description)
        self._amount_var.set(state.amount_text)
        self._syncing = False
        self._date_picker.set_date(state.input_date)
        self._type_var.set(state.trans_type.value)
        self._cat_combo.configure(values=[c.value for c in self._ctrl.available_categories()])
        self._cat_var.set(state.category.value)
        self._cat_combo.set(state.category.value)

    def _stage_text(self):
        if self._syncing:
            return
        self._ctrl.state.description = self._desc_var.get()
        self._ctrl.state.amount_text = self._amount_var.get()

    def _on_date_change(self, d):
        self._ctrl.state.input_date = d

    def _on_type_change(self):
        self._ctrl.select_type(TransactionType(self._type_var.get()))
        self._sync_form()

    def _on_category_change(self, value: str):
        self._ctrl.state.category = Category(value)

    def _on_submit(self):
        d = self._date_picker.get_date()
        if d is None:
            return
        self._ctrl.state.input_date = d
        self._stage_text()
        if self._ctrl.commit():
            self._notify_refresh()

    def _on_cancel(self):
        self._ctrl.cancel()
        self.refresh()

    # ── Balance ──────────────────────────────────────────────────────────────
    def _build_balance(self):
        self._balance_label = ctk.CTkLabel(
            self, text="", font=ctk.CTkFont(size=18, weight="bold"), anchor="w"
        )
        self._balance_label.grid(row=1, column=0, sticky="ew", padx=16, pady=(10, 4))

    # ── List ─────────────────────────────────────────────────────────────────
    def _build_list(self):
        toolbar = ctk.CTkFrame(self, fg_color="transparent")
        toolbar.grid(row=2, column=0, sticky="ew", padx=8, pady=(4, 0))
        ctk.CTkLabel(toolbar, text="Search:").pack(side="left", padx=(4, 4))
        ctk.CTkEntry(
            toolbar, textvariable=self._search_var, width=220,
            placeholder_text="Description or category",
        ).pack(side="left")
        self._count_label = ctk.CTkLabel(
            toolbar, text="", text_color="gray60", font=ctk.CTkFont(size=11)
        )
        self._count_label.pack(side="right", padx=(0, 8))

        hdr = ctk.CTkFrame(self, fg_color=("gray82", "gray22"), corner_radius=0)
        hdr.grid(row=3, column=0, sticky="ew", padx=8, pady=(4, 0))
        cols = [("Date", 130), ("Category", 110), ("", 20), ("Amount", 100),
                ("Description", 240), ("Actions", 90)]
        for i, (label, width) in enumerate(cols):
            ctk.CTkLabel(
                hdr, text=label, width=width, anchor="w",
                font=ctk.CTkFont(weight="bold"),
            ).grid(row=0, column=i, padx=4, pady=4, sticky="w")

        self._scroll = ctk.CTkScrollableFrame(self)
        self._scroll.grid(row=4, column=0, sticky="nsew", padx=8, pady=(0, 8))
        self._scroll.grid_columnconfigure(0, weight=1)

    def _on_search(self):
        self._limit = PAGE_SIZE
        self._load()

    def _show_more(self):
        self._limit += PAGE_SIZE
        self._load()

    def _load(self):
        store = self._ctrl.store
        self._balance_label.configure(text=f"Balance: {format_currency(store.total_balance())}")

        for w in self._scroll.winfo_children():
            w.destroy()

        transactions = store.snapshot()
        rows, total = list_rows(transactions, self._search_var.get(), self._limit)
        if not rows:
            self._count_label.configure(text="")
            ctk.CTkLabel(
                self._scroll,
                text="No transactions yet." if not transactions else "No matching transactions.",
                text_color="gray60",
            ).grid(row=0, column=0, pady=20)
            return

        for row_idx, (index, tx) in enumerate(rows):
            self._add_row(row_idx, index, tx)

        self._count_label.configure(text=f"Showing {len(rows)} of {total} transactions")
        if len(rows) < total:
            ctk.CTkButton(
                self._scroll, text=f"Show {min(PAGE_SIZE, total - len(rows))} more",
                width=140, fg_color="transparent", border_width=1,
                text_color=("gray10", "gray90"),
                command=self._show_more,
            ).grid(row=len(rows), column=0, pady=8)

    def _add_row(self, row_idx: int, index: int, tx: Transaction):
        editing = self._ctrl.editing_index == index
        if editing:
            bg = ("#CFE3F7", "#1F3A55")
        else:
            bg = ("gray92", "gray17") if row_idx % 2 == 0 else ("gray88", "gray21")
        row = ctk.CTkFrame(self._scroll, fg_color=bg, corner_radius=4)
        row.grid(row=row_idx, column=0, sticky="ew", pady=1, padx=2)

        stamp = f"{format_display_date(tx.date.date(), self._date_format)} {tx.date:%H:%M}"
        ctk.CTkLabel(row, text=stamp, width=130, anchor="w").grid(row=0, column=0, padx=4, pady=4)

        ctk.CTkLabel(
            row, text=f"[{tx.category.value}]", width=110, anchor="w",
            text_color=tx.category.color_hex,
        ).grid(row=0, column=1, padx=4)

        ctk.CTkLabel(
            row, text=tx.trans_type.symbol, width=20,
            text_color=TYPE_COLORS[tx.trans_type.value],
            font=ctk.CTkFont(weight="bold"),
        ).grid(row=0, column=2, padx=4)

        ctk.CTkLabel(row, text=format_currency(tx.amount), width=100, anchor="e").grid(
            row=0, column=3, padx=4
        )
        ctk.CTkLabel(row, text=tx.description, width=240, anchor="w").grid(
            row=0, column=4, padx=4
        )

        acts = ctk.CTkFrame(row, fg_color="transparent")
        acts.grid(row=0, column=5, padx=(4, 6))
        ctk.CTkButton(
            acts, text="✏", width=36, height=24,
            state="disabled" if self._ctrl.is_editing else "normal",
            command=lambda i=index: self._begin_edit(i),
        ).pack(side="left", padx=2)
        ctk.CTkButton(
            acts, text="🗑", width=36, height=24,
            fg_color="#F44336", hover_color="#D32F2F",
            command=lambda i=index: self._delete(i),
        ).pack(side="left")

    def _begin_edit(self, index: int):
        if self._ctrl.begin_edit(index):
            self.refresh()

    def _delete(self, index: int):
        if self._ctrl.delete(index):
            self._notify_refresh()

    # ── Export ───────────────────────────────────────────────────────────────
    def _export_csv(self):
        path = filedialog.asksaveasfilename(
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv")],
            initialfile="transactions.csv",
        )
        if not path:
            return
        rows = export_rows(self._ctrl.store.snapshot())
        try:
            with open(path, "w", newline="", encoding="utf-8") as f:
                csv.writer(f).writerows(rows)
        except OSError as e:
            logger.warning("CSV export to %s failed: %s", path, e)
            return
        logger.info("Exported %d transactions to %s", len(rows) - 1, path)
