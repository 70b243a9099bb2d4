"""
Database connection and session.

Schema source of truth: homestay.models. On startup, Base.metadata.create_all(bind=engine)
creates all tables from the current models. SQLite is the default for local runs; any
SQLAlchemy URL (e.g. postgresql://...) works through DATABASE_URL.
"""
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from homestay.config import get_settings


def make_engine(url: str, **kwargs) -> Engine:
    """Create an engine; SQLite gets cross-thread access (FastAPI threadpool) and enforced foreign keys."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        eng = create_engine(url, **kwargs)

        @event.listens_for(eng, "connect")
        def _enable_sqlite_fks(dbapi_conn, _record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return eng
    return create_engine(url, pool_pre_ping=True, **kwargs)


settings = get_settings()
engine = make_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
