import threading
from datetime import date

from kakeibo.domain.advice import AdviceThresholds
from kakeibo.domain.budget import parse_budget
from kakeibo.domain.entries import build_entry
from kakeibo.domain.months import parse_month_key
from kakeibo.errors import EntryNotFound
from kakeibo.logger import get_logger
from kakeibo.manager import CategorySuggester
from kakeibo.models import Entry, EntryDraft, MonthlyView
from kakeibo.services.view import LedgerState, build_monthly_view
from kakeibo.storage import Storage
from kakeibo.store import EntryStore

logger = get_logger(__name__)


class LedgerService:
    """Holds the ledger state, applies user actions and persists after each one."""

    def __init__(
        self,
        storage: Storage,
        *,
        suggester: CategorySuggester | None = None,
        thresholds: AdviceThresholds | None = None,
    ) -> None:
        self.storage = storage
        self.suggester = suggester or CategorySuggester()
        self.thresholds = thresholds or AdviceThresholds.from_env()
        self._lock = threading.Lock()
        self.state = LedgerState(
            store=EntryStore(storage.load()),
            budget=storage.load_budget(),
        )
        logger.info(
            "Ledger loaded: %d entries, budget=%s",
            len(self.state.store),
            self.state.budget if self.state.budget is not None else "<unset>",
        )

    @property
    def budget(self) -> int | None:
        return self.state.budget

    @property
    def entries(self) -> list[Entry]:
        with self._lock:
            return self.state.store.entries

    def entries_for(self, month: str) -> list[Entry]:
        with self._lock:
            return self.state.store.filter_by_month(month)

    def add_entry(self, draft: EntryDraft) -> Entry:
        with self._lock:
            entry = build_entry(draft, self.state.store.next_id())
            self.state.store.add(entry)
            self.storage.save(self.state.store.entries)
        logger.info("Added %s entry %s: %d (%s)", entry.type.value, entry.id, entry.amount, entry.date)
        return entry

    def delete_entry(self, entry_id: int, *, missing_ok: bool = True) -> bool:
        with self._lock:
            removed = self.state.store.remove_by_id(entry_id)
            if removed:
                self.storage.save(self.state.store.entries)
        if removed:
            logger.info("Deleted entry %s", entry_id)
            return True
        if not missing_ok:
            raise EntryNotFound(entry_id)
        logger.info("Entry %s not found, nothing deleted", entry_id)
        return False

    def set_budget(self, raw_budget: int | str | None) -> int | None:
        budget = parse_budget(raw_budget)
        with self._lock:
            self.state.budget = budget
            self.storage.save_budget(budget)
        logger.info("Budget set to %s", budget if budget is not None else "<unset>")
        return budget

    def suggest_category(self, memo: str, current: str = "") -> str:
        return self.suggester.suggest(memo, current)

    def view(self, month: str | None = None, today: date | None = None) -> MonthlyView:
        month_key = parse_month_key(month, today)
        with self._lock:
            return build_monthly_view(self.state, month_key, thresholds=self.thresholds)
