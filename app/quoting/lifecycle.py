"""Quote lifecycle: creation, confirmation, listing and bulk moderation.

A quote is created unconfirmed with its rate attached. Confirmation is a
one-way flag; ``status`` is an independent workflow tag that may move between
any of its values at any time. Storage failures surface as PersistenceError
and are never retried here.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.errors import NotFoundError, PersistenceError, ValidationError
from app.db.crud import quotes as quotes_crud
from app.db.crud.stores import get_store
from app.db.models import Quote
from app.quoting.access import CurrentUser, require_admin, resolve_scope
from app.quoting.normalize import to_title_case
from app.quoting.rate import check_number_of_spaces

logger = logging.getLogger(__name__)


class QuoteStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    IGNORED = "ignored"
    COMPLETED = "completed"


def effective_status(quote: Quote) -> QuoteStatus | str:
    """Absent status reads as pending; values outside the enum come back as stored."""
    if not quote.status:
        return QuoteStatus.PENDING
    try:
        return QuoteStatus(quote.status)
    except ValueError:
        return quote.status


@dataclass
class QuoteRequest:
    store_id: str
    client_name: str
    number_of_spaces: int
    sale_amount: int = 0


@dataclass
class QuoteFilters:
    client_name: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    is_confirmed: bool | None = None
    status: str | None = None
    store_id: str | None = None
    show_all_stores: bool = False
    sort: str = "created_at"
    direction: str = "desc"


@dataclass
class QuotePage:
    items: list[Quote]
    total: int
    page: int
    page_size: int
    next_page: Optional[int] = None


def _unique_ids(ids: Iterable[int]) -> list[int]:
    return sorted({int(i) for i in ids})


@contextmanager
def _storage(db: Session, action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Failed to %s: %s", action, exc)
        raise PersistenceError(f"Failed to {action}") from exc


def parse_status(value: str) -> QuoteStatus:
    try:
        return QuoteStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in QuoteStatus)
        raise ValidationError(f"Invalid status {value!r}; expected one of: {allowed}") from None


def create_quote(db: Session, request: QuoteRequest, rate_amount: int | None, created_by: str) -> Quote:
    """Persist a new unconfirmed quote carrying an already computed rate."""
    client_name = to_title_case(request.client_name or "")
    if not client_name:
        raise ValidationError("client name required")
    check_number_of_spaces(request.number_of_spaces)
    sale_amount = request.sale_amount or 0
    if sale_amount < 0:
        raise ValidationError("sale amount must not be negative")
    if rate_amount is not None and rate_amount < 0:
        raise ValidationError("rate amount must not be negative")
    if not created_by:
        raise ValidationError("created_by required")

    with _storage(db, "create quote"):
        store = get_store(db, request.store_id)
        if store is None:
            raise NotFoundError("Store not found")
        if store.requires_sale_amount and sale_amount <= 0:
            raise ValidationError("sale amount required")

        quote = quotes_crud.insert_quote(
            db,
            store_id=store.id,
            client_name=client_name,
            number_of_spaces=request.number_of_spaces,
            sale_amount=sale_amount,
            rate_amount=rate_amount,
            created_by=created_by,
        )
        db.commit()
        db.refresh(quote)

    logger.info("Created quote %s for store %s (rate=%s)", quote.id, quote.store_id, quote.rate_amount)
    return quote


def get_quote(db: Session, quote_id: int, scope_store_id: str | None = None) -> Quote:
    with _storage(db, "load quote"):
        quote = quotes_crud.get_quote(db, quote_id, store_id=scope_store_id)
    if quote is None:
        raise NotFoundError("Quote not found")
    return quote


def confirm_quote(db: Session, quote_id: int, scope_store_id: str | None = None) -> Quote:
    """Mark a quote confirmed. Confirming twice is a no-op, never an error."""
    quote = get_quote(db, quote_id, scope_store_id)
    if quote.is_confirmed:
        return quote

    with _storage(db, "confirm quote"):
        quotes_crud.set_confirmed(db, quote)
        db.commit()

    logger.info("Confirmed quote %s", quote.id)
    return quote


def list_quotes(
    db: Session,
    filters: QuoteFilters,
    page: int,
    user: CurrentUser,
    page_size: int | None = None,
) -> QuotePage:
    if page < 0:
        raise ValidationError("page must be >= 0")
    if filters.sort not in quotes_crud.SORTABLE_COLUMNS:
        raise ValidationError(f"Cannot sort by {filters.sort!r}")
    if filters.direction not in ("asc", "desc"):
        raise ValidationError("direction must be 'asc' or 'desc'")
    status = parse_status(filters.status).value if filters.status else None

    size = page_size or get_settings().QUOTES_PAGE_SIZE
    store_id = resolve_scope(user, filters.store_id, filters.show_all_stores)

    with _storage(db, "list quotes"):
        items, total = quotes_crud.query_quotes(
            db,
            client_name=(filters.client_name or "").strip() or None,
            date_from=filters.date_from,
            date_to=filters.date_to,
            is_confirmed=filters.is_confirmed,
            status=status,
            store_id=store_id,
            sort=filters.sort,
            descending=filters.direction == "desc",
            offset=page * size,
            limit=size,
        )

    last = len(items) < size or (page + 1) * size >= total
    return QuotePage(items=items, total=total, page=page, page_size=size, next_page=None if last else page + 1)


def update_status(db: Session, ids: Iterable[int], status: str, user: CurrentUser) -> int:
    """Set ``status`` on every quote in ``ids``; confirmation is left alone."""
    require_admin(user)
    new_status = parse_status(status)
    wanted = _unique_ids(ids)
    if not wanted:
        return 0

    with _storage(db, "update quote status"):
        count = quotes_crud.set_status(db, wanted, new_status.value)
        db.commit()

    logger.info("Set status %s on %d of %d quotes", new_status.value, count, len(wanted))
    return count


def delete_quotes(db: Session, ids: Iterable[int], user: CurrentUser) -> int:
    """Bulk delete. Ids that no longer exist are skipped; callers re-query for the outcome."""
    require_admin(user)
    wanted = _unique_ids(ids)
    if not wanted:
        return 0

    with _storage(db, "delete quotes"):
        count = quotes_crud.delete_quotes(db, wanted)
        db.commit()

    logger.info("Deleted %d of %d quotes", count, len(wanted))
    return count
