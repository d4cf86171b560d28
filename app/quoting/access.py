"""Who is asking, and which store their queries are limited to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from app.core.errors import NotFoundError, PermissionDeniedError


class Role(str, Enum):
    ADMIN = "admin"
    STORE_USER = "store_user"


@dataclass(frozen=True)
class CurrentUser:
    id: str
    role: Role = Role.STORE_USER
    email: str | None = None
    store_id: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


def resolve_scope(user: CurrentUser, requested_store_id: str | None = None, show_all_stores: bool = False) -> str | None:
    """Return the store id queries must be restricted to, or None for every store.

    Admins pick their current store per request (or all stores); store users
    are always pinned to their own store.
    """
    if user.is_admin:
        if show_all_stores:
            return None
        return requested_store_id or None

    if user.store_id is None:
        raise NotFoundError("Store not found")
    if requested_store_id and requested_store_id != user.store_id:
        raise PermissionDeniedError("Store not available to this user")
    return user.store_id


def require_admin(user: CurrentUser) -> None:
    if not user.is_admin:
        raise PermissionDeniedError("Admin role required")
