import customtkinter as ctk
import tkinter as tk
from matplotlib.figure import Figure
from matplotlib.patches import Polygon
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from database.transaction_store import TransactionStore
from services.category_service import CategoryBreakdown, aggregate_expenses
from services.pie_service import build_pie_slices
from services.timeline_service import BalanceTimeline, build_balance_timeline
from utils.constants import AXIS_DATETIME_FORMAT, BALANCE_LINE_COLOR, PIE_SEGMENTS
from utils.currency import format_currency
from utils.date_helpers import from_timestamp


class AnalyticsTab(ctk.CTkFrame):
    """Balance history plot and expense breakdown, rebuilt from the store on refresh."""

    def __init__(self, master, store: TransactionStore, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._store = store
        self._timeline = BalanceTimeline(points=())

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=3)
        self.grid_rowconfigure(1, weight=2)

        self._build_balance_chart()
        self._build_breakdown()
        self.refresh()

    def refresh(self):
        snapshot = self._store.snapshot()
        self._timeline = build_balance_timeline(snapshot)
        self.after(50, self._draw_balance_chart)
        self._draw_breakdown(aggregate_expenses(snapshot))

    def _style_ax(self, ax, fig):
        is_dark = ctk.get_appearance_mode() == "Dark"
        bg = "#2b2b2b" if is_dark else "#e4e4e4"
        fg = "#aaaaaa" if is_dark else "#444444"
        fig.patch.set_facecolor(bg)
        ax.set_facecolor(bg)
        ax.tick_params(colors=fg, labelsize=8)
        for spine in ax.spines.values():
            spine.set_edgecolor(fg)
        return bg, fg

    # ── Balance history ──────────────────────────────────────────────────────
    def _build_balance_chart(self):
        outer = ctk.CTkFrame(self, fg_color=("gray90", "gray20"), corner_radius=8)
        outer.grid(row=0, column=0, sticky="nsew", padx=8, pady=(8, 4))
        ctk.CTkLabel(
            outer, text="Balance History",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(pady=(10, 0))
        self._line_fig = Figure(figsize=(8, 3), dpi=80, tight_layout=True)
        self._line_ax = self._line_fig.add_subplot(111)
        self._line_mpl = FigureCanvasTkAgg(self._line_fig, master=outer)
        self._line_mpl.get_tk_widget().pack(fill="both", expand=True, padx=8, pady=(4, 10))
        self._line_mpl.mpl_connect("motion_notify_event", self._on_hover)
        self._hover = None

    def _draw_balance_chart(self):
        ax = self._line_ax
        ax.clear()
        bg, fg = self._style_ax(ax, self._line_fig)
        self._hover = None

        if self._timeline.is_empty:
            ax.set_xticks([])
            ax.set_yticks([])
            ax.text(0.5, 0.5, "No transactions yet. Add some data to see the graph!",
                    ha="center", va="center", transform=ax.transAxes, color="gray")
            self._line_mpl.draw_idle()
            return

        xs, ys = self._timeline.xs, self._timeline.ys
        ax.plot(xs, ys, color=BALANCE_LINE_COLOR, linewidth=2, label="Balance")
        ax.scatter(xs, ys, color=BALANCE_LINE_COLOR, s=16, zorder=3)
        ax.xaxis.set_major_formatter(
            lambda v, _: from_timestamp(v).strftime(AXIS_DATETIME_FORMAT)
        )
        ax.yaxis.set_major_formatter(lambda v, _: format_currency(v))
        ax.legend(loc="upper left", fontsize=8, facecolor=bg, labelcolor=fg)

        self._hover = ax.annotate(
            "", xy=(0, 0), xytext=(12, 12), textcoords="offset points",
            fontsize=8, bbox={"boxstyle": "round", "fc": "white", "alpha": 0.9},
        )
        self._hover.set_visible(False)
        self._line_mpl.draw_idle()

    def _on_hover(self, event):
        if self._hover is None:
            return
        if event.inaxes is not self._line_ax or event.xdata is None:
            if self._hover.get_visible():
                self._hover.set_visible(False)
                self._line_mpl.draw_idle()
            return
        self._hover.xy = (event.xdata, event.ydata)
        self._hover.set_text(self._timeline.describe(event.xdata, event.ydata))
        self._hover.set_visible(True)
        self._line_mpl.draw_idle()

    # ── Expense breakdown ────────────────────────────────────────────────────
    def _build_breakdown(self):
        outer = ctk.CTkFrame(self, fg_color=("gray90", "gray20"), corner_radius=8)
        outer.grid(row=1, column=0, sticky="nsew", padx=8, pady=(4, 8))
        outer.grid_columnconfigure(1, weight=1)
        outer.grid_rowconfigure(1, weight=1)
        ctk.CTkLabel(
            outer, text="Expense Breakdown",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).grid(row=0, column=0, columnspan=2, pady=(10, 0))

        self._pie_fig = Figure(figsize=(2.5, 2.5), dpi=80)
        self._pie_ax = self._pie_fig.add_axes((0, 0, 1, 1))
        self._pie_mpl = FigureCanvasTkAgg(self._pie_fig, master=outer)
        self._pie_mpl.get_tk_widget().grid(row=1, column=0, padx=(16, 8), pady=(4, 10))

        self._legend_frame = ctk.CTkScrollableFrame(outer, fg_color="transparent")
        self._legend_frame.grid(row=1, column=1, sticky="nsew", padx=(32, 8), pady=(4, 10))

    def _draw_breakdown(self, breakdown: CategoryBreakdown):
        ax = self._pie_ax
        ax.clear()
        bg, _ = self._style_ax(ax, self._pie_fig)
        ax.set_axis_off()
        for w in self._legend_frame.winfo_children():
            w.destroy()

        if breakdown.is_empty:
            ax.text(0.5, 0.5, "No expenses to show.", ha="center", va="center",
                    transform=ax.transAxes, color="gray")
            self._pie_mpl.draw_idle()
            return

        # Slices are laid out y-down; flip to matplotlib's y-up axes.
        for pie_slice in build_pie_slices(breakdown, segments=PIE_SEGMENTS):
            ax.add_patch(Polygon(
                [(x, -y) for x, y in pie_slice.vertices],
                closed=True, facecolor=pie_slice.color_hex,
                edgecolor="black", linewidth=1,
            ))
        ax.set_xlim(-1.05, 1.05)
        ax.set_ylim(-1.05, 1.05)
        ax.set_aspect("equal")
        self._pie_mpl.draw_idle()

        for item in breakdown.items:
            row = ctk.CTkFrame(self._legend_frame, fg_color="transparent")
            row.pack(fill="x", pady=1)
            tk.Label(row, bg=item.category.color_hex, width=2).pack(side="left", padx=(0, 6))
            ctk.CTkLabel(
                row, text=f"{item.category.value} ({item.percentage:.1f}%)",
                anchor="w", width=150,
            ).pack(side="left")
            ctk.CTkLabel(
                row, text=format_currency(item.total), anchor="e",
            ).pack(side="left", padx=(8, 0))
