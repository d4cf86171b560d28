"""Stores and user metadata lookups."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from app.db.models import Store, UserMetadata


def get_store(db: Session, store_id: str) -> Optional[Store]:
    return db.query(Store).filter(Store.id == store_id).one_or_none()


def get_store_for_user(db: Session, user_id: str) -> Optional[Store]:
    # One store per store user; the first match wins if data says otherwise.
    return db.query(Store).filter(Store.user_id == user_id).order_by(Store.created_at.asc()).first()


def list_stores(db: Session) -> list[Store]:
    return db.query(Store).order_by(Store.name.asc()).all()


def get_user_metadata(db: Session, user_id: str) -> Optional[UserMetadata]:
    return db.query(UserMetadata).filter(UserMetadata.user_id == user_id).one_or_none()
