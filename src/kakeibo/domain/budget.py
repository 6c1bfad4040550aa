from typing import Any

from kakeibo.core.settings import DEFAULT_NEAR_LIMIT_RATIO
from kakeibo.models import BudgetState, BudgetStatus


def parse_budget(raw: Any) -> int | None:
    """Coerce a stored or submitted budget. Empty, zero, negative or junk means unset."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return None
    return value if value > 0 else None


def is_budget_set(budget: int | None) -> bool:
    return budget is not None and budget > 0


def evaluate(
    expense: int,
    budget: int | None,
    near_limit_ratio: float = DEFAULT_NEAR_LIMIT_RATIO,
) -> BudgetStatus:
    if not is_budget_set(budget):
        return BudgetStatus(state=BudgetState.UNSET)

    remaining = budget - expense
    if expense > budget:
        state = BudgetState.OVER
    elif expense > budget * near_limit_ratio:
        state = BudgetState.NEAR_LIMIT
    else:
        state = BudgetState.UNDER

    return BudgetStatus(state=state, budget=budget, remaining=remaining)
