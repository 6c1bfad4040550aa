from dataclasses import dataclass, field

from kakeibo.domain import advice as advice_rules
from kakeibo.domain.advice import DEFAULT_THRESHOLDS, AdviceThresholds
from kakeibo.domain.aggregation import aggregate
from kakeibo.domain.budget import evaluate
from kakeibo.domain.categories import normalize_category, style_for
from kakeibo.domain.charts import build_chart_data
from kakeibo.logger import get_logger
from kakeibo.models import Entry, EntryRow, MonthlyView
from kakeibo.store import EntryStore

logger = get_logger(__name__)


@dataclass
class LedgerState:
    store: EntryStore = field(default_factory=EntryStore)
    budget: int | None = None


def build_row(entry: Entry) -> EntryRow:
    category = normalize_category(entry.category)
    return EntryRow(
        entry=entry,
        category=category,
        tag_class=style_for(category).tag_class,
        sign="-" if entry.is_expense else "+",
    )


def build_monthly_view(
    state: LedgerState,
    month: str,
    thresholds: AdviceThresholds = DEFAULT_THRESHOLDS,
) -> MonthlyView:
    """Filter, aggregate, evaluate and advise for one month. Does not touch ``state``."""
    entries = state.store.filter_by_month(month)
    summary = aggregate(entries)
    status = evaluate(summary.expense, state.budget, near_limit_ratio=thresholds.near_limit_ratio)
    advice = advice_rules.generate(
        summary.expense,
        state.budget,
        summary.category_totals,
        thresholds=thresholds,
    )
    logger.debug(
        "[VIEW] %s: %d entries, income=%d expense=%d budget=%s advice=%d",
        month,
        len(entries),
        summary.income,
        summary.expense,
        status.state.value,
        len(advice),
    )
    return MonthlyView(
        month=month,
        rows=[build_row(e) for e in entries],
        summary=summary,
        budget_status=status,
        advice=advice,
        charts=build_chart_data(summary),
    )
