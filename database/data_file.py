import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class DataFile:
    """A single UTF-8 JSON document on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> dict | None:
        """Return the parsed document, or None if missing or unparseable."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError:
            logger.info("No data file at %s", self.path)
            return None
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return None
        if not isinstance(document, dict):
            logger.warning("Ignoring %s: top level is not an object", self.path)
            return None
        return document

    def write(self, document: dict):
        """Atomic write via .tmp + os.replace(). Raises OSError/TypeError/ValueError."""
        tmp = self.path.with_name(self.path.name + ".tmp")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, allow_nan=False)
            os.replace(tmp, self.path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
