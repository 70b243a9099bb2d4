"""Persistence boundary for the import pipeline: single-row creates and catalog lookups by name."""
from __future__ import annotations

from typing import Any, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from homestay.database import Base


class StoreError(Exception):
    """A single write failed. The message is the store's own, suitable for showing to the importer."""


class ImportStore(Protocol):
    def insert(self, model: type[Base], record: dict[str, Any]) -> int: ...

    def lookup_by_name(self, catalog: type[Base], name: str) -> int | None: ...


def _store_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    text = str(orig) if orig is not None else str(exc)
    return text.strip().splitlines()[0] if text.strip() else exc.__class__.__name__


class SqlAlchemyStore:
    """Each insert is committed on its own; a failed insert is rolled back alone and the session stays usable.
    No transaction spans the whole import."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, model: type[Base], record: dict[str, Any]) -> int:
        obj = model(**record)
        try:
            self.db.add(obj)
            self.db.flush()
            new_id = obj.id
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(_store_message(e)) from e
        return new_id

    def lookup_by_name(self, catalog: type[Base], name: str) -> int | None:
        try:
            row = self.db.query(catalog.id).filter(catalog.name == name).order_by(catalog.id).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(_store_message(e)) from e
        return row[0] if row else None
