"""Rate calculation for store quotes.

The calculator is a pure function of a store's pricing configuration and the
numeric parts of a quote request. Two formulas exist, selected by whether the
store prices on a sale amount:

- with sale amount: (960.16 * spaces + 0.066354 * sale + 1782.41) * (1 + factor)
- without:          (1400 * spaces + 1882.41) * (1 + factor)

The result is rounded half-up to the nearest multiple of 100.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.db.crud.stores import get_store
from app.quoting.normalize import to_title_case

SPACE_RATE_WITH_SALE = Decimal("960.16")
SALE_RATE = Decimal("0.066354")
BASE_WITH_SALE = Decimal("1782.41")

SPACE_RATE = Decimal("1400")
BASE = Decimal("1882.41")

ROUNDING_STEP = Decimal("100")


@dataclass(frozen=True)
class StorePricingConfig:
    store_id: str
    rate_factor: float
    requires_sale_amount: bool

    @classmethod
    def from_store(cls, store) -> "StorePricingConfig":
        return cls(
            store_id=store.id,
            rate_factor=store.rate_factor or 0.0,
            requires_sale_amount=bool(store.requires_sale_amount),
        )


def round_to_hundred(amount: Decimal) -> int:
    steps = (amount / ROUNDING_STEP).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(steps * ROUNDING_STEP)


def check_number_of_spaces(number_of_spaces: int) -> None:
    if isinstance(number_of_spaces, bool) or not isinstance(number_of_spaces, int) or number_of_spaces < 1:
        raise ValidationError("number of spaces must be an integer >= 1")


def calculate_rate(config: StorePricingConfig, number_of_spaces: int, sale_amount: int | None = None) -> int:
    check_number_of_spaces(number_of_spaces)
    if config.rate_factor is None or config.rate_factor < 0:
        raise ValidationError("rate factor must be >= 0")
    if sale_amount is not None and sale_amount < 0:
        raise ValidationError("sale amount must not be negative")

    multiplier = Decimal(1) + Decimal(str(config.rate_factor))
    spaces = Decimal(number_of_spaces)

    if config.requires_sale_amount:
        if not sale_amount:
            raise ValidationError("sale amount required")
        base = SPACE_RATE_WITH_SALE * spaces + SALE_RATE * Decimal(sale_amount) + BASE_WITH_SALE
    else:
        base = SPACE_RATE * spaces + BASE

    return round_to_hundred(base * multiplier)


def calculate_rate_for_store(
    db: Session, *, store_id: str, client_name: str, number_of_spaces: int, sale_amount: int | None
) -> int:
    """Validate a rate request, resolve the store's pricing and compute the rate.

    Input problems are reported before the store lookup so that a bad request
    never touches storage.
    """
    if not store_id:
        raise ValidationError("store id required")
    if not to_title_case(client_name or ""):
        raise ValidationError("client name required")
    check_number_of_spaces(number_of_spaces)

    store = get_store(db, store_id)
    if store is None:
        raise NotFoundError("Store not found")
    return calculate_rate(StorePricingConfig.from_store(store), number_of_spaces, sale_amount)
