"""Name -> id resolution for records that reference each other by name in the import document.

Both modes match exactly and case-sensitively. Resolution happens before the
dependent writes, so the importer steps only ever see ids.
"""
from __future__ import annotations

import logging
from typing import Callable

from homestay.database import Base
from homestay.schemas.property_import import PricingIn
from homestay.services.store import ImportStore, StoreError

logger = logging.getLogger("uvicorn.error")


class CatalogResolver:
    """Looks names up in the shared catalog (standard amenities, standard tags). Hits and misses are memoised per run."""

    def __init__(self, store: ImportStore):
        self.store = store
        self._cache: dict[tuple[str, str], int | None] = {}

    def resolve(self, catalog: type[Base], name: str) -> int | None:
        key = (catalog.__tablename__, name)
        if key not in self._cache:
            self._cache[key] = self.store.lookup_by_name(catalog, name)
            if self._cache[key] is None:
                logger.debug("Catalog miss: %s %r not found, skipping", catalog.__tablename__, name)
        return self._cache[key]

    def resolve_all(
        self,
        catalog: type[Base],
        names: list[str],
        on_error: Callable[[str, StoreError], None] | None = None,
    ) -> list[tuple[str, int]]:
        """Resolved (name, id) pairs in input order; names missing from the catalog are dropped.

        A failed lookup is passed to on_error and that name is dropped; without on_error it propagates.
        """
        resolved = []
        for name in names:
            try:
                catalog_id = self.resolve(catalog, name)
            except StoreError as e:
                if on_error is None:
                    raise
                on_error(name, e)
                continue
            if catalog_id is not None:
                resolved.append((name, catalog_id))
        return resolved


class RoomNameMap:
    """Rooms created earlier in the same import, by name. A later room with the same name replaces the earlier id."""

    def __init__(self):
        self._ids: dict[str, int] = {}

    def add(self, name: str, room_id: int) -> None:
        self._ids[name] = room_id

    def get(self, name: str) -> int | None:
        return self._ids.get(name)

    def __len__(self) -> int:
        return len(self._ids)

    def resolve_pricing(self, entries: list[PricingIn]) -> list[tuple[PricingIn, int | None]]:
        return [(entry, self.get(entry.room_name)) for entry in entries]
