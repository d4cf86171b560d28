from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.security import api_key_auth, get_current_user
from app.db.session import get_db
from app.quoting.access import CurrentUser, resolve_scope
from app.quoting.rate import calculate_rate_for_store
from app.schemas.dto import ErrorResponse, RateRequest, RateResponse

router = APIRouter(dependencies=[Depends(api_key_auth)])


@router.post(
    "/calculate-rate",
    response_model=RateResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def calculate_rate(
    payload: RateRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> RateResponse:
    """Compute the rate for a prospective quote. Nothing is persisted."""
    store_id = resolve_scope(user, payload.store_id) or payload.store_id
    rate = calculate_rate_for_store(
        db,
        store_id=store_id,
        client_name=payload.client_name,
        number_of_spaces=payload.number_of_spaces,
        sale_amount=payload.sale_amount,
    )
    return RateResponse(rate_amount=rate)
