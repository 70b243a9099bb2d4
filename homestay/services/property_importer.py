"""Writes every sub-record of an imported property, in foreign-key dependency order.

Order: rooms (with beds and room amenities) -> property-level collections ->
pricing (needs the room ids from step one) -> catalog junctions (amenities, tags).
A failed row is recorded and skipped; it never stops the remaining rows or steps.
Rows already written stay written.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from homestay.models.booking import BookingCTA, BookingSettings, CtaType, DepositType, OfferType, PaymentMethod, SpecialOffer
from homestay.models.catalog import PropertyAmenity, PropertyTag, StandardAmenity, StandardPropertyTag
from homestay.models.content import PropertyFeature, RuleType, RulesAndPolicy
from homestay.models.host import Host, ReviewSource, SocialMediaLink
from homestay.models.location import DISTANCE_UNIT_KM, NearbyAttraction, ProximityInfo
from homestay.models.room import PRICING_PER_NIGHT, BedConfiguration, Pricing, Room, RoomAmenity
from homestay.schemas.property_import import (
    BookingCtaIn, BookingSettingsIn, HostIn, NearbyAttractionIn, PaymentMethodIn, PricingIn, PropertyFeatureIn,
    PropertyImportDocument, ProximityInfoIn, ReviewSourceIn, RoomIn, RulesAndPolicyIn, SocialMediaLinkIn,
    SpecialOfferIn,
)
from homestay.services import import_result as entities
from homestay.services.import_result import ImportStats, StepResult, format_failure
from homestay.services.name_resolver import CatalogResolver, RoomNameMap
from homestay.services.store import ImportStore, StoreError

logger = logging.getLogger("uvicorn.error")


def _url(value) -> str | None:
    return str(value) if value is not None else None


class PropertyImporter:
    """Imports the sub-records of one already-created property. One instance per import run."""

    def __init__(
        self,
        store: ImportStore,
        tenant_id: str,
        property_id: int,
        *,
        default_currency: str = "USD",
        catalog: CatalogResolver | None = None,
    ):
        self.store = store
        self.tenant_id = tenant_id
        self.property_id = property_id
        self.default_currency = default_currency
        self.catalog = catalog or CatalogResolver(store)
        self.rooms_by_name = RoomNameMap()

    def run(self, doc: PropertyImportDocument) -> ImportStats:
        steps: list[Callable[[], StepResult]] = [
            lambda: self.import_rooms(doc.rooms),
            lambda: self.import_hosts(doc.hosts),
            lambda: self.import_review_sources(doc.review_sources),
            lambda: self.import_proximity_info(doc.proximity_info),
            lambda: self.import_nearby_attractions(doc.nearby_attractions),
            lambda: self.import_property_features(doc.property_features),
            lambda: self.import_booking_settings(doc.booking_settings),
            lambda: self.import_special_offers(doc.special_offers),
            lambda: self.import_rules_and_policies(doc.rules_and_policies),
            lambda: self.import_social_media_links(doc.social_media_links),
            lambda: self.import_payment_methods(doc.payment_methods),
            lambda: self.import_booking_ctas(doc.booking_ctas),
            # Pricing refers to rooms by name, so it runs after every room exists
            lambda: self.import_pricing(doc.pricing),
            lambda: self.import_property_amenities(doc.property_amenities),
            lambda: self.import_property_tags(doc.property_tags),
        ]
        stats = ImportStats()
        for step in steps:
            stats.add(step())
        return stats

    # -- write helpers --

    def _owned(self, **fields: Any) -> dict[str, Any]:
        return {"property_id": self.property_id, "tenant_id": self.tenant_id, **fields}

    def _try_insert(self, result: StepResult, model, record: dict[str, Any], entity: str, label: str, identifier: str) -> int | None:
        try:
            new_id = self.store.insert(model, record)
        except StoreError as e:
            logger.warning("Import of property %s: %s %r failed: %s", self.property_id, label, identifier, e)
            result.failed(format_failure(label, identifier, str(e)))
            return None
        result.succeeded(entity)
        return new_id

    def _resolve_catalog(self, result: StepResult, catalog, names: list[str], label: str) -> list[tuple[str, int]]:
        def lookup_failed(name: str, e: StoreError) -> None:
            logger.warning("Import of property %s: %s lookup %r failed: %s", self.property_id, label, name, e)
            result.failed(format_failure(label, name, str(e)))

        return self.catalog.resolve_all(catalog, names, on_error=lookup_failed)

    def _insert_each(
        self,
        items: Iterable,
        model,
        entity: str,
        label: str,
        identify: Callable[[Any], str],
        to_record: Callable[[Any], dict[str, Any]],
    ) -> StepResult:
        result = StepResult()
        for item in items:
            self._try_insert(result, model, to_record(item), entity, label, identify(item))
        return result

    # -- rooms --

    def import_rooms(self, rooms: list[RoomIn]) -> StepResult:
        result = StepResult()
        for room in rooms:
            room_id = self._try_insert(
                result,
                Room,
                self._owned(
                    name=room.name,
                    description=room.description,
                    max_guests=room.max_guests,
                    adults_capacity=room.adults_capacity,
                    children_capacity=room.children_capacity,
                    extra_beds_available=room.extra_beds_available,
                    extra_beds_count=room.extra_beds_count,
                    room_size_sqft=room.room_size_sqft,
                    view_type=room.view_type,
                    room_features=room.room_features,
                    base_rate=room.base_rate,
                    currency=room.currency or self.default_currency,
                    is_active=True,
                ),
                entities.ROOMS,
                "Room",
                room.name,
            )
            if room_id is None:
                continue
            self.rooms_by_name.add(room.name, room_id)
            result.merge(self._import_room_children(room, room_id))
        return result

    def _import_room_children(self, room: RoomIn, room_id: int) -> StepResult:
        result = self._insert_each(
            room.bed_configurations,
            BedConfiguration,
            entities.BED_CONFIGURATIONS,
            "Bed configuration",
            lambda bed: bed.bed_type,
            lambda bed: {
                "room_id": room_id,
                "tenant_id": self.tenant_id,
                "bed_type": bed.bed_type,
                "bed_count": bed.bed_count,
                "is_sofa_bed": bed.is_sofa_bed,
                "is_extra_bed": bed.is_extra_bed,
            },
        )
        amenities = self._resolve_catalog(result, StandardAmenity, room.room_amenities, "Room amenity")
        result.merge(
            self._insert_each(
                amenities,
                RoomAmenity,
                entities.ROOM_AMENITIES,
                "Room amenity",
                lambda pair: pair[0],
                lambda pair: {"room_id": room_id, "amenity_id": pair[1]},
            )
        )
        return result

    # -- property-level collections --

    def import_hosts(self, hosts: list[HostIn]) -> StepResult:
        return self._insert_each(
            hosts,
            Host,
            entities.HOSTS,
            "Host",
            lambda h: h.name,
            lambda h: self._owned(
                name=h.name,
                title=h.title,
                bio=h.bio,
                writeup=h.writeup,
                email=h.email,
                phone=h.phone,
                whatsapp=h.whatsapp,
                response_time=h.response_time,
            ),
        )

    def import_review_sources(self, sources: list[ReviewSourceIn]) -> StepResult:
        return self._insert_each(
            sources,
            ReviewSource,
            entities.REVIEW_SOURCES,
            "Review source",
            lambda r: r.site_name,
            lambda r: self._owned(
                site_name=r.site_name,
                stars=r.stars,
                total_reviews=r.total_reviews,
                review_url=_url(r.review_url),
                display_order=0,
            ),
        )

    def import_proximity_info(self, entries: list[ProximityInfoIn]) -> StepResult:
        return self._insert_each(
            entries,
            ProximityInfo,
            entities.PROXIMITY_INFO,
            "Proximity info",
            lambda p: p.landmark_name,
            lambda p: self._owned(
                point_of_interest=p.landmark_name,
                distance=p.distance_km,
                distance_unit=DISTANCE_UNIT_KM,
                description=p.distance_text,
                travel_time=p.travel_time,
                transport_mode=p.transport_mode,
            ),
        )

    def import_nearby_attractions(self, attractions: list[NearbyAttractionIn]) -> StepResult:
        return self._insert_each(
            attractions,
            NearbyAttraction,
            entities.NEARBY_ATTRACTIONS,
            "Attraction",
            lambda a: a.name,
            lambda a: self._owned(
                name=a.name,
                type=a.type,
                distance=a.distance_km,
                distance_unit=DISTANCE_UNIT_KM,
                description=a.description,
                display_order=0,
            ),
        )

    def import_property_features(self, features: list[PropertyFeatureIn]) -> StepResult:
        return self._insert_each(
            features,
            PropertyFeature,
            entities.PROPERTY_FEATURES,
            "Feature",
            lambda f: f.feature_type,
            lambda f: self._owned(
                feature_type=f.feature_type,
                description=f.description,
                display_order=f.display_order or 0,
            ),
        )

    def import_booking_settings(self, settings: BookingSettingsIn | None) -> StepResult:
        result = StepResult()
        if settings is None:
            return result
        record = self._owned(
            check_in_time=settings.check_in_time,
            check_out_time=settings.check_out_time,
            min_stay_nights=settings.min_stay_nights,
            max_stay_nights=settings.max_stay_nights,
            age_restrictions=settings.age_restrictions,
            group_booking_policy=settings.group_booking_policy,
            cancellation_full_refund_policy=settings.cancellation_full_refund_policy,
            cancellation_full_refund_hours=settings.cancellation_full_refund_hours,
            cancellation_partial_refund_policy=settings.cancellation_partial_refund_policy,
            cancellation_partial_refund_hours=settings.cancellation_partial_refund_hours,
            cancellation_no_refund_policy=settings.cancellation_no_refund_policy,
            deposit_required=settings.deposit_required,
            deposit_type=DepositType(settings.deposit_type) if settings.deposit_type else None,
            deposit_value=settings.deposit_value,
            payment_terms=settings.payment_terms,
        )
        try:
            self.store.insert(BookingSettings, record)
        except StoreError as e:
            logger.warning("Import of property %s: booking settings failed: %s", self.property_id, e)
            result.failed(f"Booking settings: {e}")
        else:
            result.succeeded(entities.BOOKING_SETTINGS)
        return result

    def import_special_offers(self, offers: list[SpecialOfferIn]) -> StepResult:
        return self._insert_each(
            offers,
            SpecialOffer,
            entities.SPECIAL_OFFERS,
            "Offer",
            lambda o: o.title,
            lambda o: self._owned(
                offer_type=OfferType(o.offer_type),
                title=o.title,
                description=o.description,
                discount_percentage=o.discount_percentage,
                discount_amount=o.discount_amount,
                valid_from=o.valid_from,
                valid_to=o.valid_to,
                is_active=True,
            ),
        )

    def import_rules_and_policies(self, rules: list[RulesAndPolicyIn]) -> StepResult:
        return self._insert_each(
            rules,
            RulesAndPolicy,
            entities.RULES_AND_POLICIES,
            "Rule",
            lambda r: r.rule_type,
            lambda r: self._owned(
                rule_type=RuleType(r.rule_type),
                rule_text=r.rule_text,
                display_order=r.display_order or 0,
            ),
        )

    def import_social_media_links(self, links: list[SocialMediaLinkIn]) -> StepResult:
        return self._insert_each(
            links,
            SocialMediaLink,
            entities.SOCIAL_MEDIA_LINKS,
            "Social link",
            lambda s: s.platform,
            lambda s: self._owned(platform=s.platform, url=_url(s.url)),
        )

    def import_payment_methods(self, methods: list[PaymentMethodIn]) -> StepResult:
        return self._insert_each(
            methods,
            PaymentMethod,
            entities.PAYMENT_METHODS,
            "Payment method",
            lambda p: p.payment_type,
            lambda p: self._owned(payment_type=p.payment_type, is_available=p.is_available),
        )

    def import_booking_ctas(self, ctas: list[BookingCtaIn]) -> StepResult:
        return self._insert_each(
            ctas,
            BookingCTA,
            entities.BOOKING_CTAS,
            "CTA",
            lambda c: c.cta_type,
            lambda c: self._owned(
                cta_type=CtaType(c.cta_type),
                label=c.label,
                url=_url(c.url),
                phone_number=c.phone_number,
                is_active=c.is_active,
                display_order=c.display_order or 0,
            ),
        )

    # -- pricing --

    def import_pricing(self, entries: list[PricingIn]) -> StepResult:
        result = StepResult()
        for price, room_id in self.rooms_by_name.resolve_pricing(entries):
            if room_id is None:
                logger.warning("Import of property %s: room %r not found, skipping pricing", self.property_id, price.room_name)
                result.failed(f'Pricing: Room "{price.room_name}" not found')
                continue
            self._try_insert(
                result,
                Pricing,
                {
                    "room_id": room_id,
                    "tenant_id": self.tenant_id,
                    "base_rate": price.base_rate,
                    "discounted_rate": price.discounted_rate,
                    "original_price": price.original_price,
                    "currency": price.currency or self.default_currency,
                    "valid_from": price.valid_from,
                    "valid_to": price.valid_to,
                    "pricing_type": PRICING_PER_NIGHT,
                },
                entities.PRICING,
                "Pricing",
                price.room_name,
            )
        return result

    # -- catalog junctions --

    def import_property_amenities(self, names: list[str]) -> StepResult:
        result = StepResult()
        pairs = self._resolve_catalog(result, StandardAmenity, names, "Amenity")
        result.merge(self._insert_each(
            pairs,
            PropertyAmenity,
            entities.PROPERTY_AMENITIES,
            "Amenity",
            lambda pair: pair[0],
            lambda pair: {"property_id": self.property_id, "amenity_id": pair[1]},
        ))
        return result

    def import_property_tags(self, names: list[str]) -> StepResult:
        result = StepResult()
        pairs = self._resolve_catalog(result, StandardPropertyTag, names, "Tag")
        result.merge(self._insert_each(
            pairs,
            PropertyTag,
            entities.PROPERTY_TAGS,
            "Tag",
            lambda pair: pair[0],
            lambda pair: {"property_id": self.property_id, "tag_id": pair[1]},
        ))
        return result
