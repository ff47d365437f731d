import os

# 테스트는 메모리 SQLite 사용 (beerstock import 전에 지정)
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from beerstock.core.database import Base, SessionLocal, engine
from beerstock.main import app
from beerstock.models.beer_model import BeerType
from beerstock.schemas.beer_schema import BeerCreate
from beerstock.services.beer_service import BeerService


@pytest.fixture(autouse=True)
def _tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def service(db):
    return BeerService(db)


@pytest.fixture()
def client():
    return TestClient(app)


def make_beer(**overrides) -> BeerCreate:
    """Helper: default Brahma registration payload."""
    defaults = {
        "name": "Brahma",
        "brand": "Ambev",
        "max": 50,
        "quantity": 10,
        "type": BeerType.LAGER,
    }
    defaults.update(overrides)
    return BeerCreate(**defaults)
