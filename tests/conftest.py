# tests/conftest.py

import os

# Point the app at a throwaway database before any homestay module creates its engine.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_CATALOG_ON_STARTUP"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from homestay import models  # noqa: F401,E402
from homestay.database import Base, get_db, make_engine  # noqa: E402
from homestay.main import app  # noqa: E402
from homestay.seed import seed_catalog  # noqa: E402
from homestay.services.auth import create_tenant_token  # noqa: E402
from homestay.services.listing_cache import ListingCache, get_listing_cache  # noqa: E402

TENANT = "tenant-a"


@pytest.fixture
def engine():
    # One shared in-memory connection per test: tables vanish with it, so each test starts clean.
    eng = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    seed_catalog(session)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def cache():
    return ListingCache()


@pytest.fixture
def client(db, session_factory, cache):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_listing_cache] = lambda: cache
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {create_tenant_token(TENANT)}"}
