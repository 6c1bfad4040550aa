"""Rule-based spending advice.

Rules run in declaration order and every matching rule contributes one
message. The two budget rules are exclusive: once spending is over budget
the near-limit warning is not added as well.
"""
from dataclasses import dataclass

from kakeibo.core import settings
from kakeibo.domain.budget import is_budget_set
from kakeibo.domain.categories import FOOD, TRANSPORT, UTILITIES
from kakeibo.models import Advice, AdviceKind


@dataclass(frozen=True)
class AdviceThresholds:
    near_limit_ratio: float = settings.DEFAULT_NEAR_LIMIT_RATIO
    food: int = settings.DEFAULT_FOOD_ADVICE_THRESHOLD
    transport: int = settings.DEFAULT_TRANSPORT_ADVICE_THRESHOLD
    utilities: int = settings.DEFAULT_UTILITIES_ADVICE_THRESHOLD

    @classmethod
    def from_env(cls) -> "AdviceThresholds":
        return cls(
            near_limit_ratio=settings.get_env_float(
                "NEAR_LIMIT_RATIO", settings.DEFAULT_NEAR_LIMIT_RATIO, min_value=0.0
            ),
            food=settings.get_env_int(
                "FOOD_ADVICE_THRESHOLD", settings.DEFAULT_FOOD_ADVICE_THRESHOLD, min_value=0
            ),
            transport=settings.get_env_int(
                "TRANSPORT_ADVICE_THRESHOLD", settings.DEFAULT_TRANSPORT_ADVICE_THRESHOLD, min_value=0
            ),
            utilities=settings.get_env_int(
                "UTILITIES_ADVICE_THRESHOLD", settings.DEFAULT_UTILITIES_ADVICE_THRESHOLD, min_value=0
            ),
        )


DEFAULT_THRESHOLDS = AdviceThresholds()

OVER_BUDGET_MESSAGE = "⚠️ You are over budget this month! Time to switch to saving mode."
NEAR_LIMIT_MESSAGE = "👀 You have used {percent}% of your budget. Keep an eye on the days left!"
FOOD_MESSAGE = (
    "🍱 Food spending is over ¥{threshold:,}. "
    "Try eating out less often and cooking at home."
)
TRANSPORT_MESSAGE = (
    "🚃 Transport costs are adding up. "
    "Consider a commuter pass or getting around by bike."
)
UTILITIES_MESSAGE = (
    "💡 Utilities are running high. "
    "Unplug appliances you are not using and reheat the bath less often."
)
ON_TRACK_MESSAGE = "✨ You're managing your money well! Keep it up."


def generate(
    expense: int,
    budget: int | None,
    category_totals: dict[str, int],
    thresholds: AdviceThresholds = DEFAULT_THRESHOLDS,
) -> list[Advice]:
    advice: list[Advice] = []

    if is_budget_set(budget):
        if expense > budget:
            advice.append(Advice(kind=AdviceKind.OVER_BUDGET, message=OVER_BUDGET_MESSAGE))
        elif expense > budget * thresholds.near_limit_ratio:
            percent = round(thresholds.near_limit_ratio * 100)
            advice.append(Advice(
                kind=AdviceKind.NEAR_LIMIT,
                message=NEAR_LIMIT_MESSAGE.format(percent=percent),
            ))

    if category_totals.get(FOOD, 0) > thresholds.food:
        advice.append(Advice(
            kind=AdviceKind.FOOD,
            message=FOOD_MESSAGE.format(threshold=thresholds.food),
        ))
    if category_totals.get(TRANSPORT, 0) > thresholds.transport:
        advice.append(Advice(kind=AdviceKind.TRANSPORT, message=TRANSPORT_MESSAGE))
    if category_totals.get(UTILITIES, 0) > thresholds.utilities:
        advice.append(Advice(kind=AdviceKind.UTILITIES, message=UTILITIES_MESSAGE))

    if not advice and expense > 0:
        advice.append(Advice(kind=AdviceKind.ON_TRACK, message=ON_TRACK_MESSAGE))

    return advice
