from collections.abc import Sequence
from dataclasses import dataclass

from kakeibo.domain.categories import DAILY_GOODS, FOOD, TRANSPORT, UTILITIES

from .base import Classifier


@dataclass(frozen=True)
class KeywordGroup:
    category: str
    keywords: tuple[str, ...]

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


# Order matters: the first group with a hit wins.
DEFAULT_GROUPS: tuple[KeywordGroup, ...] = (
    KeywordGroup(FOOD, (
        "スーパー", "コンビニ", "ランチ", "外食", "弁当",
        "supermarket", "convenience store", "lunch", "dining out", "restaurant", "bento",
    )),
    KeywordGroup(TRANSPORT, (
        "電車", "バス", "タクシー", "定期",
        "train", "bus", "taxi", "commuter pass",
    )),
    KeywordGroup(DAILY_GOODS, (
        "amazon", "薬", "日用品", "ドラッグストア",
        "medicine", "sundries", "drugstore", "pharmacy",
    )),
    KeywordGroup(UTILITIES, (
        "電気", "ガス", "水道", "携帯",
        "electricity", "electric bill", "gas", "water", "mobile", "phone bill",
    )),
)


class KeywordClassifier(Classifier):
    def __init__(self, groups: Sequence[KeywordGroup] = DEFAULT_GROUPS):
        self.groups = tuple(
            KeywordGroup(g.category, tuple(k.lower() for k in g.keywords)) for g in groups
        )

    def classify(self, memo: str) -> str | None:
        text = (memo or "").lower()
        if not text:
            return None
        for group in self.groups:
            if group.matches(text):
                return group.category
        return None
