from dataclasses import dataclass

FOOD = "Food"
TRANSPORT = "Transport"
DAILY_GOODS = "Daily Goods"
UTILITIES = "Utilities"
OTHER = "Other"


@dataclass(frozen=True)
class CategoryStyle:
    tag_class: str
    color: str


CATEGORY_STYLES: dict[str, CategoryStyle] = {
    FOOD: CategoryStyle(tag_class="tag-food", color="#ffe0b2"),
    TRANSPORT: CategoryStyle(tag_class="tag-transport", color="#bbdefb"),
    DAILY_GOODS: CategoryStyle(tag_class="tag-daily", color="#e1bee7"),
    UTILITIES: CategoryStyle(tag_class="tag-utilities", color="#fff9c4"),
    OTHER: CategoryStyle(tag_class="tag-other", color="#f5f5f5"),
}


def normalize_category(category: str | None) -> str:
    label = (category or "").strip()
    return label or OTHER


def style_for(category: str | None) -> CategoryStyle:
    """Display metadata for a label; unknown labels are drawn like ``Other``."""
    return CATEGORY_STYLES.get(normalize_category(category), CATEGORY_STYLES[OTHER])
