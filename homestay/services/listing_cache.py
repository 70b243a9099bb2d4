"""In-process cache of per-tenant property listings.

The import pipeline calls invalidate() after creating a property so the next
listing request reloads from the database.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable

logger = logging.getLogger("uvicorn.error")


class ListingCache:
    def __init__(self):
        self._lock = threading.Lock()
        self._entries: dict[str, Any] = {}
        self._generations: dict[str, int] = {}
        self.invalidations = 0

    def get_or_load(self, tenant_id: str, loader: Callable[[], Any]) -> Any:
        with self._lock:
            if tenant_id in self._entries:
                return self._entries[tenant_id]
            generation = self._generations.get(tenant_id, 0)
        value = loader()
        with self._lock:
            # an invalidate() during the load means value may predate the import
            if self._generations.get(tenant_id, 0) == generation:
                self._entries[tenant_id] = value
        return value

    def invalidate(self, tenant_id: str) -> None:
        with self._lock:
            self._entries.pop(tenant_id, None)
            self._generations[tenant_id] = self._generations.get(tenant_id, 0) + 1
            self.invalidations += 1
        logger.debug("Property listing cache invalidated for tenant %s", tenant_id)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


listing_cache = ListingCache()


def get_listing_cache() -> ListingCache:
    return listing_cache
