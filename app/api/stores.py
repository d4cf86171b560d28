from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.core.security import api_key_auth, get_current_user
from app.db.crud.stores import get_store, list_stores as list_all_stores
from app.db.session import get_db
from app.quoting.access import CurrentUser
from app.schemas.dto import StoreResponse

router = APIRouter(dependencies=[Depends(api_key_auth)])


@router.get("", response_model=list[StoreResponse])
def list_stores(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)) -> list[StoreResponse]:
    if user.is_admin:
        stores = list_all_stores(db)
    else:
        store = get_store(db, user.store_id) if user.store_id else None
        stores = [store] if store else []
    return [StoreResponse.model_validate(s) for s in stores]


@router.get("/{store_id}", response_model=StoreResponse)
def get_store_by_id(
    store_id: str, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)
) -> StoreResponse:
    store = get_store(db, store_id)
    if store is None or (not user.is_admin and store.id != user.store_id):
        raise NotFoundError("Store not found")
    return StoreResponse.model_validate(store)
