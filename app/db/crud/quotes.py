"""Quotes CRUD: insert, lookup, filtered listing and bulk updates by id set.

Helpers flush but never commit; the caller owns the transaction.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Query, Session

from app.db.models import Quote

SORTABLE_COLUMNS = {
    "created_at": Quote.created_at,
    "client_name": Quote.client_name,
    "number_of_spaces": Quote.number_of_spaces,
    "sale_amount": Quote.sale_amount,
    "rate_amount": Quote.rate_amount,
    "is_confirmed": Quote.is_confirmed,
    "status": Quote.status,
}


def insert_quote(
    db: Session,
    *,
    store_id: str,
    client_name: str,
    number_of_spaces: int,
    sale_amount: int,
    rate_amount: int | None,
    created_by: str,
) -> Quote:
    quote = Quote(
        store_id=store_id,
        client_name=client_name,
        number_of_spaces=number_of_spaces,
        sale_amount=sale_amount,
        rate_amount=rate_amount,
        is_confirmed=False,
        status=None,
        created_by=created_by,
    )
    db.add(quote)
    db.flush()
    return quote


def get_quote(db: Session, quote_id: int, store_id: str | None = None) -> Optional[Quote]:
    q = db.query(Quote).filter(Quote.id == quote_id)
    if store_id is not None:
        q = q.filter(Quote.store_id == store_id)
    return q.one_or_none()


def _by_ids(db: Session, ids: Iterable[int]) -> Query:
    return db.query(Quote).filter(Quote.id.in_(list(ids)))


def query_quotes(
    db: Session,
    *,
    client_name: str | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
    is_confirmed: bool | None = None,
    status: str | None = None,
    store_id: str | None = None,
    sort: str = "created_at",
    descending: bool = True,
    offset: int = 0,
    limit: int = 20,
) -> tuple[list[Quote], int]:
    q = db.query(Quote)

    if client_name:
        term = client_name.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        q = q.filter(func.lower(Quote.client_name).like(f"%{term}%", escape="\\"))
    if date_from:
        q = q.filter(Quote.created_at >= datetime.combine(date_from, time.min))
    if date_to:
        # end of day is exclusive: everything before midnight of the next day
        q = q.filter(Quote.created_at < datetime.combine(date_to + timedelta(days=1), time.min))
    if is_confirmed is not None:
        q = q.filter(Quote.is_confirmed == is_confirmed)
    if status == "pending":
        q = q.filter(or_(Quote.status.is_(None), Quote.status == "pending"))
    elif status:
        q = q.filter(Quote.status == status)
    if store_id is not None:
        q = q.filter(Quote.store_id == store_id)

    total = q.count()

    column = SORTABLE_COLUMNS[sort]
    if descending:
        q = q.order_by(column.desc(), Quote.id.desc())
    else:
        q = q.order_by(column.asc(), Quote.id.asc())

    items = q.offset(offset).limit(limit).all()
    return items, total


def set_confirmed(db: Session, quote: Quote) -> Quote:
    quote.is_confirmed = True
    db.flush()
    return quote


def set_status(db: Session, ids: Iterable[int], status: str) -> int:
    count = _by_ids(db, ids).update({Quote.status: status}, synchronize_session="fetch")
    db.flush()
    return count


def delete_quotes(db: Session, ids: Iterable[int]) -> int:
    count = _by_ids(db, ids).delete(synchronize_session="fetch")
    db.flush()
    return count
