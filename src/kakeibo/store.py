import time
from collections.abc import Iterable, Iterator

from kakeibo.domain.months import parse_month_key
from kakeibo.errors import InvalidMonthKey
from kakeibo.models import Entry


class EntryStore:
    """Entries newest first, the order they are listed in."""

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: list[Entry] = list(entries)
        self._last_id = max((e.id for e in self._entries), default=0)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[Entry]:
        return list(self._entries)

    def next_id(self) -> int:
        """Millisecond timestamp, bumped past the last id handed out."""
        candidate = int(time.time() * 1000)
        self._last_id = max(candidate, self._last_id + 1)
        return self._last_id

    def get(self, entry_id: int) -> Entry | None:
        return next((e for e in self._entries if e.id == entry_id), None)

    def add(self, entry: Entry) -> None:
        self._entries.insert(0, entry)
        self._last_id = max(self._last_id, entry.id)

    def remove_by_id(self, entry_id: int) -> bool:
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                del self._entries[index]
                return True
        return False

    def filter_by_month(self, month_key: str) -> list[Entry]:
        if not month_key:
            raise InvalidMonthKey("Month key is required")
        month_key = parse_month_key(month_key)
        return [e for e in self._entries if e.month == month_key]
