"""Local key-value store for history, custom materials and the currency preference.

Each slot holds JSON text, like a browser localStorage entry. Every failure (missing
file, corrupt JSON, permission error) is logged and swallowed so the in-memory
session state stays authoritative.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)


class LocalStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load_slots(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            slots = json.load(f)
        if not isinstance(slots, dict):
            raise ValueError(f"store file {self.path} does not hold an object")
        return slots

    def read(self, slot: str, default: Any = None) -> Any:
        try:
            raw = self._load_slots().get(slot)
            if raw is None:
                return default
            return json.loads(raw)
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Could not read slot %s from %s: %s", slot, self.path, e)
            return default

    def write(self, slot: str, value: Any) -> bool:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            try:
                slots = self._load_slots()
            except ValueError as e:
                logger.warning("Discarding unreadable store %s: %s", self.path, e)
                slots = {}
            slots[slot] = json.dumps(value, ensure_ascii=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(slots, f, ensure_ascii=False)
            tmp.replace(self.path)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Could not write slot %s to %s: %s", slot, self.path, e)
            tmp.unlink(missing_ok=True)
            return False
