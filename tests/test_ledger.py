from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from kakeibo.domain.advice import AdviceThresholds
from kakeibo.errors import EntryNotFound, InvalidEntryInput, InvalidMonthKey
from kakeibo.models import AdviceKind, BudgetState, EntryDraft, EntryType
from kakeibo.services.ledger import LedgerService
from kakeibo.services.view import LedgerState, build_monthly_view
from kakeibo.storage import JsonFileStorage, Storage


@pytest.fixture
def ledger(tmp_path: Path) -> LedgerService:
    storage = JsonFileStorage(data_path=str(tmp_path / "kakeibo.json"))
    return LedgerService(storage=storage, thresholds=AdviceThresholds())


def draft(**kwargs) -> EntryDraft:
    values = {"date": "2024-05-10", "amount": "1200", "memo": "Lunch", "category": "Food"}
    values.update(kwargs)
    return EntryDraft(**values)


def test_add_entry(ledger: LedgerService) -> None:
    entry = ledger.add_entry(draft())
    assert entry.amount == 1_200
    assert entry.type is EntryType.EXPENSE
    assert ledger.entries == [entry]
    assert ledger.entries_for("2024-05") == [entry]


def test_empty_memo_gets_placeholder(ledger: LedgerService) -> None:
    assert ledger.add_entry(draft(memo="")).memo == "Expense"
    assert ledger.add_entry(draft(memo="  ", type=EntryType.INCOME)).memo == "Income"


def test_category_is_stored_as_given(ledger: LedgerService) -> None:
    entry = ledger.add_entry(draft(category=""))
    assert entry.category == ""
    view = ledger.view("2024-05")
    assert view.rows[0].category == "Other"
    assert view.rows[0].tag_class == "tag-other"


@pytest.mark.parametrize("bad", [
    {"date": ""},
    {"date": None},
    {"date": "2024-13-01"},
    {"amount": "0"},
    {"amount": "-5"},
    {"amount": "abc"},
    {"amount": ""},
    {"amount": None},
    {"amount": -3},
    {"amount": "²"},
    {"amount": "１２"},
    {"amount": "9" * 5000},
])
def test_invalid_input_mutates_nothing(ledger: LedgerService, bad: dict) -> None:
    with pytest.raises(InvalidEntryInput):
        ledger.add_entry(draft(**bad))
    assert ledger.entries == []


def test_ids_are_unique(ledger: LedgerService) -> None:
    ids = {ledger.add_entry(draft()).id for _ in range(20)}
    assert len(ids) == 20


def test_delete_entry(ledger: LedgerService) -> None:
    entry = ledger.add_entry(draft())
    assert ledger.delete_entry(entry.id) is True
    assert ledger.entries_for("2024-05") == []


def test_delete_missing_is_noop(ledger: LedgerService) -> None:
    ledger.add_entry(draft())
    assert ledger.delete_entry(12345) is False
    assert len(ledger.entries) == 1


def test_delete_missing_strict(ledger: LedgerService) -> None:
    with pytest.raises(EntryNotFound):
        ledger.delete_entry(12345, missing_ok=False)


def test_state_survives_restart(tmp_path: Path) -> None:
    path = str(tmp_path / "kakeibo.json")
    first = LedgerService(storage=JsonFileStorage(data_path=path))
    entry = first.add_entry(draft())
    first.set_budget("50000")

    second = LedgerService(storage=JsonFileStorage(data_path=path))
    assert second.entries == [entry]
    assert second.budget == 50_000


def test_set_budget_clears_on_empty(ledger: LedgerService) -> None:
    assert ledger.set_budget("10000") == 10_000
    assert ledger.set_budget("") is None
    assert ledger.view("2024-05").budget_status.state is BudgetState.UNSET


def test_mutations_are_persisted() -> None:
    storage = MagicMock(spec=Storage)
    storage.load.return_value = []
    storage.load_budget.return_value = None
    ledger = LedgerService(storage=storage, thresholds=AdviceThresholds())

    entry = ledger.add_entry(draft())
    storage.save.assert_called_once_with([entry])

    ledger.set_budget(3_000)
    storage.save_budget.assert_called_once_with(3_000)


def test_view_near_limit(ledger: LedgerService) -> None:
    ledger.set_budget(10_000)
    ledger.add_entry(draft(amount="9000", memo="Rent", category=""))
    ledger.add_entry(draft(date="2024-04-30", amount="5000"))

    view = ledger.view("2024-05")

    assert view.summary.expense == 9_000
    assert view.budget_status.remaining == 1_000
    assert [a.kind for a in view.advice] == [AdviceKind.NEAR_LIMIT]
    assert len(view.rows) == 1


def test_view_empty_month(ledger: LedgerService) -> None:
    ledger.set_budget(10_000)
    ledger.add_entry(draft())
    view = ledger.view("2024-06")
    assert view.advice == []
    assert view.rows == []
    assert view.budget_status.remaining == 10_000


def test_view_defaults_to_current_month(ledger: LedgerService) -> None:
    view = ledger.view(None, today=date(2024, 5, 17))
    assert view.month == "2024-05"


def test_view_rejects_bad_month(ledger: LedgerService) -> None:
    with pytest.raises(InvalidMonthKey):
        ledger.view("May")


def test_build_view_is_pure(ledger: LedgerService) -> None:
    ledger.add_entry(draft(amount="32000"))
    state: LedgerState = ledger.state
    before = list(state.store)

    first = build_monthly_view(state, "2024-05")
    second = build_monthly_view(state, "2024-05")

    assert first == second
    assert list(state.store) == before
    assert [a.kind for a in first.advice] == [AdviceKind.FOOD]


def test_suggest_category(ledger: LedgerService) -> None:
    assert ledger.suggest_category("タクシー") == "Transport"
    assert ledger.suggest_category("gift", current="Gifts") == "Gifts"


def test_entries_returns_a_snapshot(ledger: LedgerService) -> None:
    ledger.add_entry(draft())
    snapshot = ledger.entries
    snapshot.clear()
    assert len(ledger.entries) == 1
