import logging
import customtkinter as ctk
from database.data_file import DataFile
from services.edit_controller import EditController
from ui.tabs.transactions_tab import TransactionsTab
from ui.tabs.analytics_tab import AnalyticsTab
from ui.tabs.settings_tab import SettingsTab
from utils.constants import (
    APP_NAME, APP_WIDTH, APP_HEIGHT, TAB_TRANSACTIONS, TAB_ANALYTICS, TAB_SETTINGS,
)
from utils.app_config import get_data_file

logger = logging.getLogger(__name__)


class AppWindow(ctk.CTk):
    def __init__(
        self,
        controller: EditController,
        config: dict,
        data_file_path: str,
        date_format: str = "YYYY-MM-DD",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._ctrl = controller
        self._config = config
        self._data_file_path = data_file_path
        self._date_format = date_format

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._build_tabs()

    def _build_tabs(self):
        self._tabview = ctk.CTkTabview(self, command=self._on_tab_changed)
        self._tabview.grid(row=0, column=0, sticky="nsew", padx=8, pady=8)

        for tab_name in (TAB_TRANSACTIONS, TAB_ANALYTICS, TAB_SETTINGS):
            self._tabview.add(tab_name)
            self._tabview.tab(tab_name).grid_columnconfigure(0, weight=1)
            self._tabview.tab(tab_name).grid_rowconfigure(0, weight=1)

        self._transactions_tab = TransactionsTab(
            self._tabview.tab(TAB_TRANSACTIONS),
            controller=self._ctrl,
            notify_refresh=self.notify_tabs_refresh,
            date_format=self._date_format,
        )
        self._transactions_tab.grid(row=0, column=0, sticky="nsew")

        self._analytics_tab = AnalyticsTab(
            self._tabview.tab(TAB_ANALYTICS),
            store=self._ctrl.store,
        )
        self._analytics_tab.grid(row=0, column=0, sticky="nsew")

        self._settings_tab = SettingsTab(
            self._tabview.tab(TAB_SETTINGS),
            config=self._config,
            data_file_path=self._data_file_path,
            on_data_folder_changed=self._switch_data_file,
        )
        self._settings_tab.grid(row=0, column=0, sticky="nsew")

        self._tabview.set(self._ctrl.state.current_tab)

    def _on_tab_changed(self):
        tab = self._tabview.get()
        self._ctrl.state.current_tab = tab
        if tab == TAB_ANALYTICS:
            self._analytics_tab.refresh()

    def _switch_data_file(self, config: dict) -> str:
        """Save to the current file, then load the one the config points at."""
        self._ctrl.store.persist()
        data_file = DataFile(get_data_file(config))
        self._ctrl.reload(data_file)
        self._data_file_path = str(data_file.path.resolve())
        logger.info("Switched data file to %s", self._data_file_path)
        self.notify_tabs_refresh()
        return self._data_file_path

    # ── Refresh ──────────────────────────────────────────────────────────────
    def notify_tabs_refresh(self):
        self._transactions_tab.refresh()
        self._analytics_tab.refresh()
