from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kakeibo.domain.months import parse_entry_date


class EntryType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Entry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    date: str  # YYYY-MM-DD
    type: EntryType
    amount: int = Field(gt=0)
    memo: str = ""
    category: str = ""  # left empty until aggregation normalises it

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        return parse_entry_date(value)

    @property
    def month(self) -> str:
        return self.date[:7]

    @property
    def is_expense(self) -> bool:
        return self.type is EntryType.EXPENSE


class EntryDraft(BaseModel):
    """Raw values from the entry form, not yet validated."""
    date: str | None = None
    amount: int | str | None = None
    memo: str = ""
    type: EntryType = EntryType.EXPENSE
    category: str = ""


class MonthlySummary(BaseModel):
    income: int = 0
    expense: int = 0
    balance: int = 0
    category_totals: dict[str, int] = Field(default_factory=dict)

    @property
    def is_negative(self) -> bool:
        return self.balance < 0


class BudgetState(str, Enum):
    UNSET = "unset"
    UNDER = "under"
    NEAR_LIMIT = "near_limit"
    OVER = "over"


class BudgetStatus(BaseModel):
    state: BudgetState
    budget: int | None = None
    remaining: int | None = None

    @property
    def is_set(self) -> bool:
        return self.state is not BudgetState.UNSET

    @property
    def is_over(self) -> bool:
        return self.remaining is not None and self.remaining < 0


class AdviceKind(str, Enum):
    OVER_BUDGET = "over_budget"
    NEAR_LIMIT = "near_limit"
    FOOD = "food"
    TRANSPORT = "transport"
    UTILITIES = "utilities"
    ON_TRACK = "on_track"


class Advice(BaseModel):
    kind: AdviceKind
    message: str


class EntryRow(BaseModel):
    """An entry with the fields the list renderer needs."""
    entry: Entry
    category: str
    tag_class: str
    sign: str


class MonthlyView(BaseModel):
    month: str
    rows: list[EntryRow]
    summary: MonthlySummary
    budget_status: BudgetStatus
    advice: list[Advice]
    charts: dict[str, Any]

    @property
    def advice_messages(self) -> list[str]:
        return [item.message for item in self.advice]
