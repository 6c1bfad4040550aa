from collections.abc import Iterable

from kakeibo.domain.categories import normalize_category
from kakeibo.models import Entry, EntryType, MonthlySummary


def aggregate(entries: Iterable[Entry]) -> MonthlySummary:
    """Reduce one month of entries to totals.

    ``category_totals`` only covers expenses and keeps the order in which each
    category first appears; every other figure is independent of input order.
    """
    income = 0
    expense = 0
    category_totals: dict[str, int] = {}

    for entry in entries:
        if entry.type is EntryType.INCOME:
            income += entry.amount
            continue
        expense += entry.amount
        category = normalize_category(entry.category)
        category_totals[category] = category_totals.get(category, 0) + entry.amount

    return MonthlySummary(
        income=income,
        expense=expense,
        balance=income - expense,
        category_totals=category_totals,
    )
