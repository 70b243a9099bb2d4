import json

import pytest
from sqlalchemy import text

from homestay.models import (
    AuditLog, BedConfiguration, BookingSettings, Host, Pricing, Property, PropertyAmenity, PropertyTag, Room,
    RoomAmenity, SocialMediaLink, SpecialOffer,
)
from homestay.models.catalog import StandardAmenity
from homestay.services.listing_cache import ListingCache
from homestay.services.property_import import ERROR_INVALID_JSON, ERROR_VALIDATION, import_property
from homestay.services.store import SqlAlchemyStore, StoreError

TENANT = "tenant-a"


def _base(**extra):
    doc = {"property": {"name": "Lake View Inn", "country": "India", "slug": "lake-view-inn"}}
    doc.update(extra)
    return doc


def run(db, doc, cache=None, **kwargs):
    raw = doc if isinstance(doc, str) else json.dumps(doc)
    return import_property(db, TENANT, raw, cache=cache or ListingCache(), **kwargs)


def _warnings(message: str) -> list[str]:
    if "Warnings:\n" not in message:
        return []
    return message.split("Warnings:\n", 1)[1].split("\n")


class FailingStore(SqlAlchemyStore):
    """Real store that refuses every insert of the given models."""

    def __init__(self, db, *failing_models):
        super().__init__(db)
        self.failing = set(failing_models)

    def insert(self, model, record):
        if model in self.failing:
            raise StoreError(f"permission denied for table {model.__tablename__}")
        return super().insert(model, record)


def test_lake_view_example(db):
    doc = _base(rooms=[{"name": "Deluxe"}], pricing=[{"room_name": "Deluxe", "base_rate": 5000}])
    result = run(db, doc)

    assert result.success is True
    assert result.error is None
    prop = db.query(Property).one()
    assert result.property_id == prop.id
    assert prop.tenant_id == TENANT
    assert prop.is_active is True
    assert prop.is_published is False
    room = db.query(Room).one()
    price = db.query(Pricing).one()
    assert price.room_id == room.id
    assert price.base_rate == 5000
    assert price.currency == "USD"
    assert price.pricing_type == "per_night"
    assert result.message == 'Successfully imported property "Lake View Inn" with 1 rooms, 0 hosts, 0 features, and more.'


def test_missing_country_fails_validation_and_writes_nothing(db):
    doc = {"property": {"name": "Lake View Inn", "slug": "lake-view-inn"}, "rooms": [{"name": "Deluxe"}]}
    result = run(db, doc)

    assert result.success is False
    assert result.error == ERROR_VALIDATION
    assert result.property_id is None
    assert result.message.startswith("Validation errors:\n")
    assert "property.country: " in result.message
    assert db.query(Property).count() == 0
    assert db.query(Room).count() == 0


def test_malformed_json_writes_nothing(db):
    result = run(db, '{"property": {"name": "Lake View Inn",')
    assert result.success is False
    assert result.error == ERROR_INVALID_JSON
    assert result.message.startswith("Validation errors:\n(root): ")
    assert db.query(Property).count() == 0


def test_duplicate_slug_is_fatal_and_writes_no_sub_records(db):
    first = run(db, _base(rooms=[{"name": "Deluxe"}]))
    assert first.success is True

    second = run(db, _base(rooms=[{"name": "Suite"}, {"name": "Attic"}], hosts=[{"name": "Asha"}]))

    assert second.success is False
    assert second.property_id is None
    assert second.message is None
    assert second.error.startswith("Failed to create property: ")
    assert "UNIQUE" in second.error
    assert db.query(Property).count() == 1
    assert [r.name for r in db.query(Room).all()] == ["Deluxe"]
    assert db.query(Host).count() == 0


def test_same_document_with_new_slug_creates_second_property(db):
    run(db, _base())
    doc = _base()
    doc["property"]["slug"] = "lake-view-inn-2"
    result = run(db, doc)
    assert result.success is True
    assert db.query(Property).count() == 2


def test_all_distinct_rooms_created_with_beds_and_amenities(db):
    rooms = [
        {
            "name": f"Room {i}",
            "max_guests": 3,
            "adults_capacity": 2,
            "children_capacity": 1,
            "bed_configurations": [{"bed_type": "queen", "bed_count": 1}, {"bed_type": "sofa", "bed_count": 1, "is_sofa_bed": True}],
            "room_amenities": ["WiFi", "Jacuzzi"],
        }
        for i in range(4)
    ]
    result = run(db, _base(rooms=rooms))

    assert result.success is True
    assert db.query(Room).count() == 4
    assert db.query(BedConfiguration).count() == 8
    assert db.query(BedConfiguration).filter(BedConfiguration.is_sofa_bed.is_(True)).count() == 4
    # "Jacuzzi" is not in the catalog: silently skipped
    assert db.query(RoomAmenity).count() == 4
    assert "with 4 rooms" in result.message
    assert "Warnings" not in result.message


def test_pricing_resolves_to_last_room_with_duplicate_name(db):
    doc = _base(
        rooms=[{"name": "Deluxe", "base_rate": 100}, {"name": "Deluxe", "base_rate": 200}],
        pricing=[{"room_name": "Deluxe", "base_rate": 150}],
    )
    result = run(db, doc)

    assert result.success is True
    first, second = db.query(Room).order_by(Room.id).all()
    price = db.query(Pricing).one()
    assert price.room_id == second.id
    assert price.room_id != first.id


def test_unresolved_pricing_room_is_a_warning(db):
    doc = _base(
        rooms=[{"name": "Deluxe"}],
        pricing=[{"room_name": "deluxe", "base_rate": 10}, {"room_name": "Deluxe", "base_rate": 20}],
    )
    result = run(db, doc)

    assert result.success is True
    assert db.query(Pricing).one().base_rate == 20
    assert _warnings(result.message) == ['Pricing: Room "deluxe" not found']


def test_unknown_catalog_names_are_skipped_silently(db):
    doc = _base(property_amenities=["WiFi", "Helipad"], property_tags=["Lake View", "lake view"])
    result = run(db, doc)

    assert result.success is True
    assert "Warnings" not in result.message
    wifi = db.query(StandardAmenity).filter(StandardAmenity.name == "WiFi").one()
    assert [pa.amenity_id for pa in db.query(PropertyAmenity).all()] == [wifi.id]
    assert db.query(PropertyTag).count() == 1


def test_duplicate_catalog_name_is_a_write_failure(db):
    result = run(db, _base(property_amenities=["WiFi", "WiFi"]))
    assert result.success is True
    assert db.query(PropertyAmenity).count() == 1
    warnings = _warnings(result.message)
    assert len(warnings) == 1
    assert warnings[0].startswith('Amenity "WiFi": ')


def test_room_violating_capacity_is_skipped_with_its_children(db):
    doc = _base(
        rooms=[
            {"name": "Family", "max_guests": 3, "adults_capacity": 2, "children_capacity": 2,
             "bed_configurations": [{"bed_type": "king", "bed_count": 1}]},
            {"name": "Twin", "max_guests": 2},
        ],
        pricing=[{"room_name": "Family", "base_rate": 10}, {"room_name": "Twin", "base_rate": 20}],
    )
    result = run(db, doc)

    assert result.success is True
    assert [r.name for r in db.query(Room).all()] == ["Twin"]
    assert db.query(BedConfiguration).count() == 0
    assert db.query(Pricing).count() == 1
    warnings = _warnings(result.message)
    assert warnings[0].startswith('Room "Family": ')
    assert "ck_rooms_capacity" in warnings[0] or "CHECK constraint failed" in warnings[0]
    assert warnings[1] == 'Pricing: Room "Family" not found'


def test_store_failures_in_one_collection_do_not_stop_the_next(db):
    doc = _base(
        hosts=[{"name": "Asha"}, {"name": "Ravi"}],
        social_media_links=[{"platform": "Instagram", "url": "https://instagram.com/lakeview"}],
        rooms=[{"name": "Deluxe"}],
    )
    result = run(db, doc, store=FailingStore(db, Host))

    assert result.success is True
    assert db.query(Host).count() == 0
    assert db.query(SocialMediaLink).count() == 1
    assert db.query(Room).count() == 1
    assert _warnings(result.message) == [
        'Host "Asha": permission denied for table hosts',
        'Host "Ravi": permission denied for table hosts',
    ]


def test_more_than_five_failures_are_capped(db):
    doc = _base(
        rooms=[{"name": "Deluxe"}],
        pricing=[{"room_name": f"Ghost {i}", "base_rate": 10} for i in range(8)],
    )
    result = run(db, doc)

    assert result.success is True
    assert _warnings(result.message) == [f'Pricing: Room "Ghost {i}" not found' for i in range(5)] + ["... and 3 more"]


def test_booking_settings_failure_is_a_warning(db):
    doc = _base(booking_settings={"min_stay_nights": 5, "max_stay_nights": 2}, hosts=[{"name": "Asha"}])
    result = run(db, doc)

    assert result.success is True
    assert db.query(BookingSettings).count() == 0
    assert db.query(Host).count() == 1
    warnings = _warnings(result.message)
    assert len(warnings) == 1
    assert warnings[0].startswith("Booking settings: ")


def test_full_document_imports_every_collection(db):
    doc = _base(
        rooms=[{"name": "Deluxe", "currency": "INR", "room_amenities": ["WiFi"]}],
        hosts=[{"name": "Asha", "email": "asha@lakeviewinn.in"}],
        review_sources=[{"site_name": "Google", "stars": 4.6, "total_reviews": 120}],
        proximity_info=[{"landmark_name": "Bus stand", "distance_text": "5 min walk", "distance_km": 0.4}],
        nearby_attractions=[{"name": "Sunset Point", "distance_km": 2}],
        property_features=[{"feature_type": "view", "description": "Lake facing"}],
        booking_settings={"check_in_time": "14:00:00", "deposit_required": True, "deposit_type": "percentage", "deposit_value": 20},
        special_offers=[{"offer_type": "long_stay", "title": "Week deal", "discount_percentage": 15,
                         "valid_from": "2026-01-01", "valid_to": "2026-03-31"}],
        rules_and_policies=[{"rule_type": "house_rules", "rule_text": "No smoking"}],
        pricing=[{"room_name": "Deluxe", "base_rate": 4500, "valid_from": "2026-01-01"}],
        social_media_links=[{"platform": "Instagram", "url": "https://instagram.com/lakeview"}],
        payment_methods=[{"payment_type": "upi"}],
        booking_ctas=[{"cta_type": "whatsapp", "label": "Chat with us", "phone_number": "+91 98765 43210"}],
        property_amenities=["WiFi", "Garden"],
        property_tags=["Lake View"],
    )
    result = run(db, doc)

    assert result.success is True
    assert "Warnings" not in result.message
    assert "with 1 rooms, 1 hosts, 1 features" in result.message
    assert db.query(Room).one().currency == "INR"
    assert db.query(Pricing).one().currency == "USD"
    offer = db.query(SpecialOffer).one()
    assert offer.offer_type.value == "long_stay"
    assert offer.valid_to.isoformat() == "2026-03-31"
    assert db.query(BookingSettings).one().deposit_type.value == "percentage"
    assert db.query(PropertyAmenity).count() == 2


def test_success_invalidates_listing_and_writes_audit_log(db):
    cache = ListingCache()
    cache.get_or_load(TENANT, lambda: ["stale"])
    result = run(db, _base(rooms=[{"name": "Deluxe"}]), cache=cache)

    assert result.success is True
    assert cache.invalidations == 1
    assert cache.get_or_load(TENANT, lambda: ["fresh"]) == ["fresh"]
    log = db.query(AuditLog).one()
    assert log.property_id == result.property_id
    assert log.tenant_id == TENANT
    assert log.meta["counts"]["rooms"] == 1
    assert log.meta["warnings"] == 0


@pytest.mark.parametrize("doc", ['{"property": {}}', '{"property": {"name": "X", "country": "India", "slug": "a"}'])
def test_failures_leave_listing_cache_alone(db, doc):
    cache = ListingCache()
    result = run(db, doc, cache=cache)
    assert result.success is False
    assert cache.invalidations == 0


def test_document_cannot_publish_the_property(db):
    doc = _base()
    doc["property"]["is_published"] = True
    result = run(db, doc)
    assert result.success is True
    prop = db.query(Property).one()
    assert prop.is_published is False
    assert prop.is_active is True


class LookupFailingStore(SqlAlchemyStore):
    def lookup_by_name(self, catalog, name):
        if name == "Sauna":
            raise StoreError("database is locked")
        return super().lookup_by_name(catalog, name)


def test_failed_catalog_lookup_is_a_warning(db):
    doc = _base(
        rooms=[{"name": "Deluxe", "room_amenities": ["Sauna", "WiFi"]}],
        property_amenities=["Sauna", "Garden"],
        property_tags=["Lake View"],
    )
    result = run(db, doc, store=LookupFailingStore(db))

    assert result.success is True
    assert db.query(RoomAmenity).count() == 1
    assert db.query(PropertyAmenity).count() == 1
    assert db.query(PropertyTag).count() == 1
    assert _warnings(result.message) == [
        'Room amenity "Sauna": database is locked',
        'Amenity "Sauna": database is locked',
    ]


def test_store_lookup_errors_become_store_errors(db):
    db.execute(text("DROP TABLE standard_property_tags"))
    db.commit()
    result = run(db, _base(hosts=[{"name": "Asha"}], property_tags=["Lake View"]))

    assert result.success is True
    assert db.query(Host).count() == 1
    [warning] = _warnings(result.message)
    assert warning.startswith('Tag "Lake View": ')
    assert "standard_property_tags" in warning
