import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["API_KEY"] = "test-key"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.models import Store, UserMetadata
from app.db.session import get_db
from app.main import create_app


@pytest.fixture()
def db():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    session.add_all(
        [
            Store(id="store-a", name="Store A", rate_factor=0.08, requires_sale_amount=True, user_id="user-a"),
            Store(id="store-b", name="Store B", rate_factor=0.0, requires_sale_amount=False, user_id="user-b"),
            UserMetadata(user_id="admin-1", is_admin=True),
            UserMetadata(user_id="user-a", is_admin=False),
        ]
    )
    session.commit()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def client(db):
    app = create_app()
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as c:
        yield c
