import json
import os
from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from kakeibo.domain.budget import parse_budget
from kakeibo.logger import get_logger
from kakeibo.models import Entry

logger = get_logger(__name__)

ENTRIES_KEY = "kakeibo_entries"
BUDGET_KEY = "kakeibo_budget"


class Storage(ABC):
    @abstractmethod
    def load(self) -> list[Entry]:
        pass

    @abstractmethod
    def load_budget(self) -> int | None:
        pass

    @abstractmethod
    def save(self, entries: list[Entry]) -> None:
        pass

    @abstractmethod
    def save_budget(self, budget: int | None) -> None:
        pass


class JsonFileStorage(Storage):
    """Key-value JSON file. Unreadable data degrades to an empty ledger."""

    def __init__(self, data_path: str = "kakeibo.json"):
        self.data_path = data_path
        self.data: dict[str, Any] = {}
        self.reload()

    def reload(self) -> None:
        self.data = {}
        if not os.path.exists(self.data_path):
            return
        try:
            with open(self.data_path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("[STORAGE] Could not read %s (%s). Starting empty.", self.data_path, exc)
            return
        if isinstance(raw, dict):
            self.data = raw
        else:
            logger.warning("[STORAGE] %s does not hold a JSON object. Starting empty.", self.data_path)

    def _write(self) -> None:
        directory = os.path.dirname(self.data_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.data_path, "w", encoding="utf-8") as f:
            json.dump(self.data, f, ensure_ascii=False, indent=2)

    def load(self) -> list[Entry]:
        raw_entries = self.data.get(ENTRIES_KEY) or []
        if not isinstance(raw_entries, list):
            logger.warning("[STORAGE] '%s' is not a list, ignoring it.", ENTRIES_KEY)
            return []

        entries: list[Entry] = []
        seen_ids: set[int] = set()
        for raw in raw_entries:
            try:
                entry = Entry.model_validate(raw)
            except ValidationError as exc:
                logger.warning("[STORAGE] Skipping invalid entry %r: %s", raw, exc.errors()[0]["msg"])
                continue
            if entry.id in seen_ids:
                logger.warning("[STORAGE] Skipping entry with duplicate id %s.", entry.id)
                continue
            seen_ids.add(entry.id)
            entries.append(entry)
        return entries

    def load_budget(self) -> int | None:
        return parse_budget(self.data.get(BUDGET_KEY))

    def save(self, entries: list[Entry]) -> None:
        self.data[ENTRIES_KEY] = [e.model_dump(mode="json") for e in entries]
        self._write()

    def save_budget(self, budget: int | None) -> None:
        self.data[BUDGET_KEY] = budget if budget is not None else ""
        self._write()
