import logging
import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.data_file import DataFile
from database.transaction_store import TransactionStore
from services.edit_controller import EditController
from ui.app_window import AppWindow
from utils.app_config import get_appearance_mode, get_data_file, get_date_format, load_config
from utils.logger import setup_logger

logger = logging.getLogger(__name__)


def main():
    setup_logger()

    # ── Bootstrap config ─────────────────────────────────────────────────────
    config = load_config()
    data_file = DataFile(get_data_file(config))

    # ── Session: store + edit state ──────────────────────────────────────────
    store = TransactionStore.load(data_file)
    controller = EditController(store)

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(get_appearance_mode(config))
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    logger.info("Starting with %d transactions from %s", len(store), data_file.path)
    app = AppWindow(
        controller=controller,
        config=config,
        data_file_path=str(data_file.path.resolve()),
        date_format=get_date_format(config),
    )

    # One best-effort save on close
    def on_close():
        store.persist()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    app.mainloop()


if __name__ == "__main__":
    main()
