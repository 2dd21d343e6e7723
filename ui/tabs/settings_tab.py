import customtkinter as ctk
from tkinter import filedialog
from utils.app_config import (
    APPEARANCE_MODES, get_appearance_mode, get_date_format, get_data_folder, update_config,
)
from utils.date_helpers import DATE_FORMAT_OPTIONS

_DEFAULT_FOLDER_TEXT = "(default: working folder)"


class SettingsTab(ctk.CTkFrame):
    """Data folder, appearance and date format, stored in the bootstrap config file."""

    def __init__(
        self,
        master,
        config: dict,
        data_file_path: str,
        on_data_folder_changed=None,   # callable(config) -> str, new data file path
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._config = config
        self._on_data_folder_changed = on_data_folder_changed

        self.grid_columnconfigure(0, weight=1)

        self._build_data_folder_section(data_file_path)
        self._build_app_settings_section()

    def _make_section(self, title: str, row: int) -> ctk.CTkFrame:
        section = ctk.CTkFrame(self, corner_radius=8)
        section.grid(row=row, column=0, sticky="ew", padx=12, pady=8)
        ctk.CTkLabel(
            section, text=title,
            font=ctk.CTkFont(size=14, weight="bold"), anchor="w",
        ).grid(row=0, column=0, columnspan=3, sticky="w", padx=12, pady=(10, 6))
        return section

    # ── Data folder ──────────────────────────────────────────────────────────
    def _build_data_folder_section(self, data_file_path: str):
        section = self._make_section("Data Folder", row=0)
        section.grid_columnconfigure(0, weight=1)

        self._data_file_var = ctk.StringVar(value=f"Data file: {data_file_path}")
        ctk.CTkLabel(
            section,
            textvariable=self._data_file_var,
            text_color="gray60",
            font=ctk.CTkFont(size=11),
            anchor="w",
        ).grid(row=1, column=0, columnspan=3, sticky="w", padx=8, pady=(0, 6))

        self._folder_var = ctk.StringVar(
            value=get_data_folder(self._config) or _DEFAULT_FOLDER_TEXT
        )
        ctk.CTkEntry(
            section, textvariable=self._folder_var,
            state="readonly", width=340,
        ).grid(row=2, column=0, padx=(8, 4), pady=(4, 10), sticky="ew")

        ctk.CTkButton(
            section, text="Browse…", width=90,
            command=self._browse_data_folder,
        ).grid(row=2, column=1, padx=4, pady=(4, 10))

        ctk.CTkButton(
            section, text="Reset to Default", width=120,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._reset_data_folder,
        ).grid(row=2, column=2, padx=(4, 8), pady=(4, 10))

    def _browse_data_folder(self):
        path = filedialog.askdirectory(title="Choose data folder")
        if path:
            self._apply_data_folder(path)

    def _reset_data_folder(self):
        self._apply_data_folder(None)

    def _apply_data_folder(self, folder: str | None):
        self._config.clear()
        self._config.update(update_config(data_folder=folder))
        self._folder_var.set(folder or _DEFAULT_FOLDER_TEXT)
        if self._on_data_folder_changed:
            self._data_file_var.set(f"Data file: {self._on_data_folder_changed(self._config)}")

    # ── App settings ─────────────────────────────────────────────────────────
    def _build_app_settings_section(self):
        section = self._make_section("App Settings", row=1)
        section.grid_columnconfigure(1, weight=1)

        # Appearance
        ctk.CTkLabel(section, text="Appearance:", anchor="e", width=120).grid(
            row=1, column=0, padx=(8, 4), pady=6, sticky="e"
        )
        self._appearance_var = ctk.StringVar(value=get_appearance_mode(self._config).title())
        ctk.CTkComboBox(
            section,
            values=[m.title() for m in APPEARANCE_MODES],
            variable=self._appearance_var,
            width=180,
            state="readonly",
        ).grid(row=1, column=1, padx=4, pady=6, sticky="w")

        # Date format
        ctk.CTkLabel(section, text="Date Format:", anchor="e", width=120).grid(
            row=2, column=0, padx=(8, 4), pady=6, sticky="e"
        )
        self._date_fmt_var = ctk.StringVar(value=get_date_format(self._config))
        ctk.CTkComboBox(
            section,
            values=DATE_FORMAT_OPTIONS,
            variable=self._date_fmt_var,
            width=180,
            state="readonly",
        ).grid(row=2, column=1, padx=4, pady=6, sticky="w")

        ctk.CTkLabel(
            section,
            text="Date format changes take effect on next app restart.",
            text_color="gray60",
            font=ctk.CTkFont(size=11),
            anchor="w",
        ).grid(row=3, column=0, columnspan=2, sticky="w", padx=8)

        ctk.CTkButton(
            section, text="Save Settings", width=140,
            command=self._save_settings,
        ).grid(row=4, column=0, columnspan=2, pady=(10, 8))

        self._status_var = ctk.StringVar()
        ctk.CTkLabel(
            section,
            textvariable=self._status_var,
            text_color="#4CAF50",
            font=ctk.CTkFont(size=11),
        ).grid(row=5, column=0, columnspan=2, pady=(0, 8))

    def _save_settings(self):
        appearance_key = self._appearance_var.get().lower()
        self._config.update(update_config(
            appearance_mode=appearance_key,
            date_format=self._date_fmt_var.get(),
        ))
        ctk.set_appearance_mode(appearance_key)
        self._status_var.set("Settings saved.")
