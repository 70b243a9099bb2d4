import pytest

from homestay.models.catalog import StandardAmenity, StandardPropertyTag
from homestay.schemas.property_import import PricingIn
from homestay.services.name_resolver import CatalogResolver, RoomNameMap
from homestay.services.store import StoreError


class CountingStore:
    """Catalog lookups served from a dict, counting round-trips."""

    def __init__(self, catalog):
        self.catalog = catalog
        self.lookups = 0

    def insert(self, model, record):
        raise AssertionError("resolver must not write")

    def lookup_by_name(self, catalog, name):
        self.lookups += 1
        return self.catalog.get((catalog.__tablename__, name))


def test_catalog_resolution_is_exact_and_case_sensitive():
    store = CountingStore({("standard_amenities", "WiFi"): 7})
    resolver = CatalogResolver(store)
    assert resolver.resolve(StandardAmenity, "WiFi") == 7
    assert resolver.resolve(StandardAmenity, "wifi") is None
    assert resolver.resolve(StandardAmenity, "WiFi ") is None


def test_catalog_resolution_is_per_catalog():
    store = CountingStore({("standard_amenities", "Pet Friendly"): 1, ("standard_property_tags", "Pet Friendly"): 9})
    resolver = CatalogResolver(store)
    assert resolver.resolve(StandardAmenity, "Pet Friendly") == 1
    assert resolver.resolve(StandardPropertyTag, "Pet Friendly") == 9


def test_catalog_lookups_are_memoised_including_misses():
    store = CountingStore({("standard_amenities", "WiFi"): 7})
    resolver = CatalogResolver(store)
    for _ in range(3):
        resolver.resolve(StandardAmenity, "WiFi")
        resolver.resolve(StandardAmenity, "Jacuzzi")
    assert store.lookups == 2


def test_resolve_all_drops_misses_and_keeps_order():
    store = CountingStore({("standard_amenities", "WiFi"): 1, ("standard_amenities", "Garden"): 2})
    resolver = CatalogResolver(store)
    assert resolver.resolve_all(StandardAmenity, ["Garden", "Jacuzzi", "WiFi"]) == [("Garden", 2), ("WiFi", 1)]


def test_room_name_map_last_write_wins():
    rooms = RoomNameMap()
    rooms.add("Deluxe", 1)
    rooms.add("Suite", 2)
    rooms.add("Deluxe", 3)
    assert rooms.get("Deluxe") == 3
    assert rooms.get("deluxe") is None
    assert len(rooms) == 2


def test_resolve_pricing_pairs_entries_with_room_ids():
    rooms = RoomNameMap()
    rooms.add("Deluxe", 4)
    entries = [
        PricingIn(room_name="Deluxe", base_rate=100.0),
        PricingIn(room_name="Attic", base_rate=50.0),
    ]
    resolved = rooms.resolve_pricing(entries)
    assert [(p.room_name, room_id) for p, room_id in resolved] == [("Deluxe", 4), ("Attic", None)]


class BrokenStore(CountingStore):
    def lookup_by_name(self, catalog, name):
        if name == "Sauna":
            raise StoreError("no such table: standard_amenities")
        return super().lookup_by_name(catalog, name)


def test_resolve_all_reports_failed_lookups_and_continues():
    resolver = CatalogResolver(BrokenStore({("standard_amenities", "WiFi"): 1}))
    failed = []
    pairs = resolver.resolve_all(StandardAmenity, ["Sauna", "WiFi"], on_error=lambda name, e: failed.append((name, str(e))))
    assert pairs == [("WiFi", 1)]
    assert failed == [("Sauna", "no such table: standard_amenities")]


def test_resolve_all_raises_failed_lookup_without_handler():
    resolver = CatalogResolver(BrokenStore({}))
    with pytest.raises(StoreError):
        resolver.resolve_all(StandardAmenity, ["Sauna"])
