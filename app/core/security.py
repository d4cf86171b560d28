"""Request authentication.

The upstream gateway authenticates staff and forwards the session's user id;
this service checks the shared API key and resolves that user's role and store.
"""

from __future__ import annotations

import secrets

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.db.crud.stores import get_store_for_user, get_user_metadata
from app.db.session import get_db
from app.quoting.access import CurrentUser, Role


def api_key_auth(x_api_key: str | None = Header(default=None)) -> None:
    expected = get_settings().API_KEY
    if not x_api_key or not secrets.compare_digest(x_api_key, expected):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


def get_current_user(
    x_user_id: str | None = Header(default=None),
    x_user_email: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> CurrentUser:
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    meta = get_user_metadata(db, x_user_id)
    if meta is not None and meta.is_admin:
        return CurrentUser(id=x_user_id, email=x_user_email, role=Role.ADMIN)

    store = get_store_for_user(db, x_user_id)
    return CurrentUser(
        id=x_user_id,
        email=x_user_email,
        role=Role.STORE_USER,
        store_id=store.id if store else None,
    )
