from kakeibo.domain.months import parse_entry_date
from kakeibo.errors import InvalidEntryInput
from kakeibo.models import Entry, EntryDraft, EntryType

INVALID_INPUT_MESSAGE = "Please enter a date and a valid amount."
MAX_AMOUNT_DIGITS = 12

DEFAULT_MEMOS = {
    EntryType.EXPENSE: "Expense",
    EntryType.INCOME: "Income",
}


def parse_amount(raw: int | str | None) -> int:
    if raw is None or isinstance(raw, bool):
        raise InvalidEntryInput(INVALID_INPUT_MESSAGE)
    if isinstance(raw, int):
        amount = raw
    else:
        text = raw.strip().replace(",", "")
        if not (text.isascii() and text.isdecimal()) or len(text) > MAX_AMOUNT_DIGITS:
            raise InvalidEntryInput(INVALID_INPUT_MESSAGE)
        amount = int(text)
    if amount <= 0:
        raise InvalidEntryInput(INVALID_INPUT_MESSAGE)
    return amount


def build_entry(draft: EntryDraft, entry_id: int) -> Entry:
    """Validate form input and turn it into an immutable entry."""
    if not draft.date or not draft.date.strip():
        raise InvalidEntryInput(INVALID_INPUT_MESSAGE)
    try:
        entry_date = parse_entry_date(draft.date)
    except ValueError as exc:
        raise InvalidEntryInput(INVALID_INPUT_MESSAGE) from exc

    amount = parse_amount(draft.amount)
    memo = draft.memo.strip() or DEFAULT_MEMOS[draft.type]

    return Entry(
        id=entry_id,
        date=entry_date,
        type=draft.type,
        amount=amount,
        memo=memo,
        category=draft.category.strip(),
    )
