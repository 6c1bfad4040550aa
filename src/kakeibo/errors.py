class KakeiboError(Exception):
    """Base class for ledger errors."""


class InvalidEntryInput(KakeiboError, ValueError):
    """Raised when form input cannot become an entry. Nothing is mutated."""


class InvalidMonthKey(KakeiboError, ValueError):
    pass


class EntryNotFound(KakeiboError, KeyError):
    def __init__(self, entry_id: int) -> None:
        super().__init__(entry_id)
        self.entry_id = entry_id

    def __str__(self) -> str:
        return f"Entry {self.entry_id} not found"
