import customtkinter as ctk
from tkcalendar import Calendar
import tkinter as tk
from tkinter import ttk
from datetime import date
from utils.date_helpers import format_display_date, parse_display_date, tkcal_date_pattern, today


class DatePickerWidget(ctk.CTkFrame):
    """Date entry in the user's display format plus a calendar popup button.

    .get_date() returns a date, or None while the entry holds invalid text.
    .set_date(d) displays d in the chosen format.
    """

    def __init__(
        self,
        master,
        initial_date: date | None = None,
        date_format: str = "YYYY-MM-DD",
        on_change=None,   # callable(date)
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)

        self._date_format = date_format
        self._on_change = on_change
        self._popup: ctk.CTkToplevel | None = None

        self._var = tk.StringVar(
            value=format_display_date(initial_date or today(), date_format)
        )

        self._entry = ctk.CTkEntry(self, textvariable=self._var, width=110)
        self._entry.grid(row=0, column=0, sticky="ew")
        self._entry.bind("<FocusOut>", self._on_focus_out)
        self._entry.bind("<Return>", self._on_focus_out)

        self._btn = ctk.CTkButton(
            self, text="📅", width=32, command=self._open_popup
        )
        self._btn.grid(row=0, column=1, padx=(4, 0))

    def get_date(self) -> date | None:
        return parse_display_date(self._var.get(), self._date_format)

    def set_date(self, d: date):
        self._var.set(format_display_date(d, self._date_format))
        self._reset_border()

    def _on_focus_out(self, _event=None):
        d = self.get_date()
        if d is None:
            self._entry.configure(border_color="#F44336")
            return
        self.set_date(d)
        if self._on_change:
            self._on_change(d)

    def _reset_border(self):
        self._entry.configure(border_color=("gray65", "gray35"))

    def _open_popup(self):
        if self._popup and self._popup.winfo_exists():
            self._popup.destroy()
            self._popup = None
            return

        popup = ctk.CTkToplevel(self)
        popup.overrideredirect(True)
        popup.resizable(False, False)
        self._popup = popup

        # Theme the calendar to match CTk appearance
        if ctk.get_appearance_mode() == "Dark":
            bg, fg = "#2b2b2b", "#ffffff"
        else:
            bg, fg = "#ffffff", "#000000"
        style = ttk.Style(popup)
        style.theme_use("default")
        style.configure(
            "Calendar.Treeview",
            background=bg, foreground=fg,
            fieldbackground=bg,
        )

        current = self.get_date() or today()
        cal = Calendar(
            popup,
            selectmode="day",
            year=current.year,
            month=current.month,
            day=current.day,
            date_pattern=tkcal_date_pattern(self._date_format),
            background=bg,
            foreground=fg,
            headersbackground=bg,
            headersforeground=fg,
            selectbackground="#1f6aa5",
            weekendbackground=bg,
            weekendforeground=fg,
            othermonthforeground="gray60",
            bordercolor=bg,
        )
        cal.pack(padx=4, pady=4)
        cal.bind("<<CalendarSelected>>", lambda e: self._on_date_selected(cal, popup))

        # Position below the entry
        self._entry.update_idletasks()
        x = self._entry.winfo_rootx()
        y = self._entry.winfo_rooty() + self._entry.winfo_height() + 2
        popup.geometry(f"+{x}+{y}")

        popup.bind("<FocusOut>", lambda e: self._maybe_close(popup))

    def _on_date_selected(self, cal: Calendar, popup: ctk.CTkToplevel):
        d = cal.selection_get()
        self.set_date(d)
        popup.destroy()
        self._popup = None
        if self._on_change:
            self._on_change(d)

    def _maybe_close(self, popup: ctk.CTkToplevel):
        if not popup.winfo_exists():
            return
        try:
            focused = popup.focus_get()
        except KeyError:
            # Tk raises for focus inside some native popdowns
            focused = None
        if focused is None or not str(focused).startswith(str(popup)):
            popup.destroy()
            self._popup = None
