"""Pre-load bootstrap configuration. Only depends on other utils modules.

Stores user preferences that must be known before the data file is read
(data_folder) plus UI preferences. Config lives in
~/.finance_tracker/config.json.
"""
import json
import os
from pathlib import Path

from utils.constants import DATA_FILE, DEFAULT_DATE_FORMAT
from utils.date_helpers import DATE_FORMAT_OPTIONS

CONFIG_DIR = Path.home() / ".finance_tracker"
CONFIG_FILE = CONFIG_DIR / "config.json"

APPEARANCE_MODES = ("system", "light", "dark")


def load_config(config_file: Path = CONFIG_FILE) -> dict:
    """Returns {} on missing or corrupt file — never raises."""
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = json.load(f)
    except Exception:
        return {}
    return config if isinstance(config, dict) else {}


def save_config(config: dict, config_file: Path = CONFIG_FILE) -> None:
    """Creates the config folder if needed; atomic write via .tmp + os.replace()."""
    tmp = config_file.with_suffix(".tmp")
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, config_file)
    except Exception:
        try:
            tmp.unlink(missing_ok=True)
        except Exception:
            pass


def get_data_folder(config: dict) -> str | None:
    """Folder chosen in Settings, or None for the working folder."""
    folder = config.get("data_folder")
    return str(folder) if folder else None


def get_data_file(config: dict) -> Path:
    """Path of the transactions file: <data_folder>/finance_data.json."""
    folder = get_data_folder(config)
    return Path(folder) / DATA_FILE if folder else Path(DATA_FILE)


def get_appearance_mode(config: dict) -> str:
    mode = str(config.get("appearance_mode", "system")).lower()
    return mode if mode in APPEARANCE_MODES else "system"


def get_date_format(config: dict) -> str:
    fmt = config.get("date_format", DEFAULT_DATE_FORMAT)
    return fmt if fmt in DATE_FORMAT_OPTIONS else DEFAULT_DATE_FORMAT


def update_config(config_file: Path = CONFIG_FILE, **changes) -> dict:
    """Merge changes into the stored config and save. None removes a key."""
    config = load_config(config_file)
    for key, value in changes.items():
        if value is None:
            config.pop(key, None)
        else:
            config[key] = value
    save_config(config, config_file)
    return config
