import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shopbudget.core.config import settings
from shopbudget.database import Base, get_db, enable_sqlite_foreign_keys
from shopbudget.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(autouse=True)
def auth_disabled(monkeypatch):
    monkeypatch.setattr(settings, "SHOPPING_TOKEN", "")


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def add_shop(client, day, name):
    r = client.post("/shop", json={"date": day, "name": name})
    assert r.status_code == 200, r.text
    return r.json()["id"]


def add_item(client, shop_id, name, planned_price=None):
    body = {"shop_id": shop_id, "name": name}
    if planned_price is not None:
        body["planned_price"] = planned_price
    r = client.post("/item", json=body)
    assert r.status_code == 200, r.text
    return r.json()["id"]


def get_day(client, day):
    r = client.get("/day", params={"date": day})
    assert r.status_code == 200, r.text
    return r.json()
