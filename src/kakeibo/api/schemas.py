from pydantic import BaseModel

from kakeibo.models import BudgetStatus, EntryRow, MonthlySummary


class BudgetRequest(BaseModel):
    budget: int | str | None = None


class BudgetResponse(BaseModel):
    budget: int | None


class SuggestionResponse(BaseModel):
    memo: str
    suggestion: str | None
    category: str


class CategoryStyleResponse(BaseModel):
    name: str
    tag_class: str
    color: str


class MonthlyViewResponse(BaseModel):
    month: str
    entries: list[EntryRow]
    summary: MonthlySummary
    balance_negative: bool
    budget: BudgetStatus
    budget_over: bool
    advice: list[str]
    charts: dict
