from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.security import api_key_auth, get_current_user
from app.db.session import get_db
from app.quoting import lifecycle
from app.quoting.access import CurrentUser, resolve_scope
from app.schemas.dto import (
    DeleteResult,
    QuoteCreate,
    QuoteIds,
    QuoteListResponse,
    QuoteResponse,
    StatusResult,
    StatusUpdate,
)

router = APIRouter(dependencies=[Depends(api_key_auth)])


@router.post("", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
def create_quote(
    payload: QuoteCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> QuoteResponse:
    store_id = resolve_scope(user, payload.store_id)
    request = lifecycle.QuoteRequest(
        store_id=store_id or payload.store_id,
        client_name=payload.client_name,
        number_of_spaces=payload.number_of_spaces,
        sale_amount=payload.sale_amount,
    )
    quote = lifecycle.create_quote(db, request, payload.rate_amount, created_by=user.id)
    return QuoteResponse.model_validate(quote)


@router.get("", response_model=QuoteListResponse)
def list_quotes(
    client_name: Optional[str] = Query(default=None, description="Case-insensitive substring of the client name"),
    date_from: Optional[date] = Query(default=None, description="created_at on or after this day"),
    date_to: Optional[date] = Query(default=None, description="created_at up to the end of this day"),
    is_confirmed: Optional[bool] = Query(default=None),
    status_: Optional[str] = Query(default=None, alias="status"),
    store_id: Optional[str] = Query(default=None),
    show_all_stores: bool = Query(default=False, description="Admins only: ignore store_id"),
    sort: str = Query(default="created_at"),
    direction: str = Query(default="desc"),
    page: int = Query(default=0, ge=0),
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> QuoteListResponse:
    filters = lifecycle.QuoteFilters(
        client_name=client_name,
        date_from=date_from,
        date_to=date_to,
        is_confirmed=is_confirmed,
        status=status_,
        store_id=store_id,
        show_all_stores=show_all_stores,
        sort=sort,
        direction=direction,
    )
    result = lifecycle.list_quotes(db, filters, page, user)
    return QuoteListResponse(
        items=[QuoteResponse.model_validate(q) for q in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        next_page=result.next_page,
    )


@router.post("/status", response_model=StatusResult)
def update_status(
    payload: StatusUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> StatusResult:
    updated = lifecycle.update_status(db, payload.ids, payload.status, user)
    return StatusResult(updated=updated)


@router.post("/delete", response_model=DeleteResult)
def delete_quotes(
    payload: QuoteIds,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> DeleteResult:
    deleted = lifecycle.delete_quotes(db, payload.ids, user)
    return DeleteResult(deleted=deleted)


@router.get("/{quote_id}", response_model=QuoteResponse)
def get_quote(
    quote_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> QuoteResponse:
    quote = lifecycle.get_quote(db, quote_id, resolve_scope(user))
    return QuoteResponse.model_validate(quote)


@router.post("/{quote_id}/confirm", response_model=QuoteResponse)
def confirm_quote(
    quote_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> QuoteResponse:
    quote = lifecycle.confirm_quote(db, quote_id, resolve_scope(user))
    return QuoteResponse.model_validate(quote)
