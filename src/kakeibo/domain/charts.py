from typing import Any

from kakeibo.domain.categories import style_for
from kakeibo.models import MonthlySummary

INCOME_COLOR = "#81c784"
EXPENSE_COLOR = "#e57373"


def build_balance_chart(summary: MonthlySummary) -> dict[str, Any]:
    return {
        "type": "bar",
        "labels": ["Income", "Expense"],
        "data": [summary.income, summary.expense],
        "colors": [INCOME_COLOR, EXPENSE_COLOR],
    }


def build_category_chart(summary: MonthlySummary) -> dict[str, Any] | None:
    """Doughnut data for the expense breakdown, or ``None`` when nothing was spent."""
    if not summary.category_totals:
        return None
    labels = list(summary.category_totals)
    return {
        "type": "doughnut",
        "labels": labels,
        "data": [summary.category_totals[label] for label in labels],
        "colors": [style_for(label).color for label in labels],
    }


def build_chart_data(summary: MonthlySummary) -> dict[str, Any]:
    return {
        "balance": build_balance_chart(summary),
        "categories": build_category_chart(summary),
    }
