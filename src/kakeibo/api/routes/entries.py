from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from kakeibo.api.dependencies import get_ledger
from kakeibo.api.schemas import MonthlyViewResponse
from kakeibo.errors import EntryNotFound, InvalidEntryInput, InvalidMonthKey
from kakeibo.models import Entry, EntryDraft
from kakeibo.services.ledger import LedgerService

router = APIRouter(prefix="/api")


@router.get("/view", response_model=MonthlyViewResponse)
def get_view(
    ledger: Annotated[LedgerService, Depends(get_ledger)],
    month: str | None = None,
) -> MonthlyViewResponse:
    try:
        view = ledger.view(month)
    except InvalidMonthKey as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return MonthlyViewResponse(
        month=view.month,
        entries=view.rows,
        summary=view.summary,
        balance_negative=view.summary.is_negative,
        budget=view.budget_status,
        budget_over=view.budget_status.is_over,
        advice=view.advice_messages,
        charts=view.charts,
    )


@router.get("/entries", response_model=list[Entry])
def list_entries(
    ledger: Annotated[LedgerService, Depends(get_ledger)],
    month: str | None = None,
) -> list[Entry]:
    if not month:
        return ledger.entries
    try:
        return ledger.entries_for(month)
    except InvalidMonthKey as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.post("/entries", response_model=Entry, status_code=201)
def add_entry(
    draft: EntryDraft,
    ledger: Annotated[LedgerService, Depends(get_ledger)],
) -> Entry:
    try:
        return ledger.add_entry(draft)
    except InvalidEntryInput as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.delete("/entries/{entry_id}", status_code=204)
def delete_entry(
    entry_id: int,
    ledger: Annotated[LedgerService, Depends(get_ledger)],
) -> Response:
    try:
        ledger.delete_entry(entry_id, missing_ok=False)
    except EntryNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
