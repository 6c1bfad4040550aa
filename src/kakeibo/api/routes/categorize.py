from typing import Annotated

from fastapi import APIRouter, Depends

from kakeibo.api.dependencies import get_ledger
from kakeibo.api.schemas import CategoryStyleResponse, SuggestionResponse
from kakeibo.domain.categories import CATEGORY_STYLES
from kakeibo.services.ledger import LedgerService

router = APIRouter(prefix="/api")


@router.get("/classify", response_model=SuggestionResponse)
def classify_memo(
    ledger: Annotated[LedgerService, Depends(get_ledger)],
    memo: str = "",
    current: str = "",
) -> SuggestionResponse:
    suggestion = ledger.suggester.classify(memo)
    return SuggestionResponse(memo=memo, suggestion=suggestion, category=suggestion or current)


@router.get("/categories", response_model=list[CategoryStyleResponse])
def get_categories() -> list[CategoryStyleResponse]:
    return [
        CategoryStyleResponse(name=name, tag_class=style.tag_class, color=style.color)
        for name, style in CATEGORY_STYLES.items()
    ]
