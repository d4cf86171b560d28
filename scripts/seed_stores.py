"""Dev seed script: create an admin, a store user and two stores (one per
pricing formula), then print a sample rate for each store.

Usage:
  python scripts/seed_stores.py

Requirements:
  - DB schema applied (alembic upgrade head)
  - DATABASE_URL configured (e.g., via .env)
"""

from __future__ import annotations

from app.db.models import Store, UserMetadata
from app.db.session import SessionLocal
from app.quoting.rate import calculate_rate_for_store

STORES = [
    {
        "id": "dev-store-sale",
        "name": "Dev Store (sale amount)",
        "rate_factor": 0.08,
        "requires_sale_amount": True,
        "user_id": "dev-store-user",
    },
    {
        "id": "dev-store-flat",
        "name": "Dev Store (flat)",
        "rate_factor": 0.0,
        "requires_sale_amount": False,
        "user_id": None,
    },
]


def seed(db) -> None:
    if db.get(UserMetadata, "dev-admin") is None:
        db.add(UserMetadata(user_id="dev-admin", is_admin=True))
    for data in STORES:
        if db.get(Store, data["id"]) is None:
            db.add(Store(**data))
    db.commit()


def main() -> None:
    db = SessionLocal()
    try:
        seed(db)
        for data in STORES:
            rate = calculate_rate_for_store(
                db,
                store_id=data["id"],
                client_name="Sample Client",
                number_of_spaces=2,
                sale_amount=50000,
            )
            print({"store_id": data["id"], "rate_amount": rate})
    finally:
        db.close()


if __name__ == "__main__":
    main()
