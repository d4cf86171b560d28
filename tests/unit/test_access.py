import pytest

from app.core.errors import NotFoundError, PermissionDeniedError
from app.quoting.access import CurrentUser, Role, require_admin, resolve_scope

ADMIN = CurrentUser(id="admin", role=Role.ADMIN)
STORE_USER = CurrentUser(id="u1", role=Role.STORE_USER, store_id="store-a")


def test_admin_show_all_ignores_store():
    assert resolve_scope(ADMIN, "store-a", show_all_stores=True) is None


def test_admin_uses_requested_store():
    assert resolve_scope(ADMIN, "store-b") == "store-b"
    assert resolve_scope(ADMIN) is None


def test_store_user_pinned_to_own_store():
    assert resolve_scope(STORE_USER) == "store-a"
    assert resolve_scope(STORE_USER, "store-a", show_all_stores=True) == "store-a"


def test_store_user_cannot_switch_store():
    with pytest.raises(PermissionDeniedError):
        resolve_scope(STORE_USER, "store-b")


def test_store_user_without_store():
    with pytest.raises(NotFoundError):
        resolve_scope(CurrentUser(id="u2"))


def test_require_admin():
    require_admin(ADMIN)
    with pytest.raises(PermissionDeniedError):
        require_admin(STORE_USER)
