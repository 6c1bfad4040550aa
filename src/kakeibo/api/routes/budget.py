from typing import Annotated

from fastapi import APIRouter, Depends

from kakeibo.api.dependencies import get_ledger
from kakeibo.api.schemas import BudgetRequest, BudgetResponse
from kakeibo.services.ledger import LedgerService

router = APIRouter(prefix="/api")


@router.get("/budget", response_model=BudgetResponse)
def get_budget(ledger: Annotated[LedgerService, Depends(get_ledger)]) -> BudgetResponse:
    return BudgetResponse(budget=ledger.budget)


@router.put("/budget", response_model=BudgetResponse)
def set_budget(
    req: BudgetRequest,
    ledger: Annotated[LedgerService, Depends(get_ledger)],
) -> BudgetResponse:
    # empty or non-positive values clear the budget
    return BudgetResponse(budget=ledger.set_budget(req.budget))
