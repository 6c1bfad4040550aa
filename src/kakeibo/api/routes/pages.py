import os
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from kakeibo.api.dependencies import get_ledger
from kakeibo.domain.categories import CATEGORY_STYLES
from kakeibo.errors import InvalidEntryInput, InvalidMonthKey
from kakeibo.models import EntryDraft, EntryType
from kakeibo.services.ledger import LedgerService

router = APIRouter()

templates_dir = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "..", "web", "templates")
)
templates = Jinja2Templates(directory=templates_dir)


def _render(
    request: Request,
    ledger: LedgerService,
    month: str | None,
    error: str | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    try:
        view = ledger.view(month)
    except InvalidMonthKey as exc:
        error = str(exc)
        view = ledger.view()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "view": view,
            "budget": ledger.budget,
            "styles": CATEGORY_STYLES,
            "today": datetime.now().strftime("%Y-%m-%d"),
            "error": error,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    ledger: Annotated[LedgerService, Depends(get_ledger)],
    month: str | None = None,
) -> HTMLResponse:
    return _render(request, ledger, month)


@router.post("/entries", response_class=HTMLResponse)
def submit_entry(
    request: Request,
    ledger: Annotated[LedgerService, Depends(get_ledger)],
    date: Annotated[str, Form()] = "",
    amount: Annotated[str, Form()] = "",
    memo: Annotated[str, Form()] = "",
    type: Annotated[EntryType, Form()] = EntryType.EXPENSE,
    category: Annotated[str, Form()] = "",
    month: Annotated[str, Form()] = "",
) -> Response:
    draft = EntryDraft(date=date, amount=amount, memo=memo, type=type, category=category)
    try:
        ledger.add_entry(draft)
    except InvalidEntryInput as exc:
        return _render(request, ledger, month or None, error=str(exc), status_code=400)
    return RedirectResponse(url=f"/?month={month}" if month else "/", status_code=303)


@router.post("/entries/{entry_id}/delete")
def remove_entry(
    entry_id: int,
    ledger: Annotated[LedgerService, Depends(get_ledger)],
    month: Annotated[str, Form()] = "",
) -> RedirectResponse:
    ledger.delete_entry(entry_id)
    return RedirectResponse(url=f"/?month={month}" if month else "/", status_code=303)


@router.post("/budget")
def submit_budget(
    ledger: Annotated[LedgerService, Depends(get_ledger)],
    budget: Annotated[str, Form()] = "",
    month: Annotated[str, Form()] = "",
) -> RedirectResponse:
    ledger.set_budget(budget)
    return RedirectResponse(url=f"/?month={month}" if month else "/", status_code=303)
