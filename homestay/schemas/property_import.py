"""Shape of the JSON document accepted by the property import.

Validation here is structural only (required fields, JSON types, ranges, formats).
Cross-record references such as pricing.room_name are resolved later, during the import.
"""
import re
from datetime import date
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, HttpUrl, field_validator, model_validator

SLUG_PATTERN = r"^[a-z0-9-]+$"
TIME_PATTERN = r"^\d{2}:\d{2}:\d{2}$"
MIN_YEAR = 1800

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """'Lake View Inn & Spa' -> 'lake-view-inn-spa'."""
    return _NON_SLUG_CHARS.sub("-", (name or "").strip().lower()).strip("-")


class ImportModel(BaseModel):
    """Base for document sections: JSON types are not coerced ("5" is not a number), unknown keys are ignored."""

    class Config:
        strict = True
        extra = "ignore"


class BedConfigurationIn(ImportModel):
    bed_type: str = Field(min_length=1)
    bed_count: int = Field(gt=0)
    is_sofa_bed: bool = False
    is_extra_bed: bool = False


class RoomIn(ImportModel):
    name: str = Field(min_length=1)
    description: str | None = None
    max_guests: int | None = Field(default=None, gt=0)
    adults_capacity: int | None = Field(default=None, ge=0)
    children_capacity: int | None = Field(default=None, ge=0)
    extra_beds_available: bool = False
    extra_beds_count: int | None = Field(default=None, ge=0)
    room_size_sqft: float | None = Field(default=None, gt=0)
    view_type: str | None = None
    room_features: str | None = None
    base_rate: float | None = Field(default=None, gt=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    bed_configurations: list[BedConfigurationIn] = []
    room_amenities: list[str] = []


class HostIn(ImportModel):
    name: str = Field(min_length=1)
    title: str | None = None
    bio: str | None = None
    writeup: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    whatsapp: str | None = None
    response_time: str | None = None


class ReviewSourceIn(ImportModel):
    site_name: str = Field(min_length=1)
    stars: float | None = Field(default=None, ge=0, le=5)
    total_reviews: int | None = Field(default=None, ge=0)
    review_url: HttpUrl | None = None


class ProximityInfoIn(ImportModel):
    landmark_name: str = Field(min_length=1)
    distance_text: str = Field(min_length=1)
    distance_km: float | None = Field(default=None, gt=0)
    travel_time: str | None = None
    transport_mode: str | None = None


class NearbyAttractionIn(ImportModel):
    name: str = Field(min_length=1)
    type: str | None = None
    distance_km: float | None = Field(default=None, gt=0)
    description: str | None = None


class PropertyFeatureIn(ImportModel):
    feature_type: str = Field(min_length=1)
    description: str = Field(min_length=1)
    display_order: int | None = Field(default=None, ge=0)


class BookingSettingsIn(ImportModel):
    check_in_time: str | None = Field(default=None, pattern=TIME_PATTERN)
    check_out_time: str | None = Field(default=None, pattern=TIME_PATTERN)
    min_stay_nights: int | None = Field(default=None, gt=0)
    max_stay_nights: int | None = Field(default=None, gt=0)
    age_restrictions: str | None = None
    group_booking_policy: str | None = None
    cancellation_full_refund_policy: str | None = None
    cancellation_full_refund_hours: int | None = Field(default=None, ge=0)
    cancellation_partial_refund_policy: str | None = None
    cancellation_partial_refund_hours: int | None = Field(default=None, ge=0)
    cancellation_no_refund_policy: str | None = None
    deposit_required: bool = False
    deposit_type: Literal["percentage", "fixed", "nights"] | None = None
    deposit_value: float | None = Field(default=None, gt=0)
    payment_terms: str | None = None


class PricingIn(ImportModel):
    room_name: str = Field(min_length=1)  # must match a room created in the same import
    base_rate: float = Field(gt=0)
    discounted_rate: float | None = Field(default=None, gt=0)
    original_price: float | None = Field(default=None, gt=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    valid_from: date | None = None  # YYYY-MM-DD
    valid_to: date | None = None


class SpecialOfferIn(ImportModel):
    offer_type: Literal["early_bird", "last_minute", "package", "long_stay", "family", "weekend", "weekday"]
    title: str = Field(min_length=1)
    description: str | None = None
    discount_percentage: float | None = Field(default=None, ge=0, le=100)
    discount_amount: float | None = Field(default=None, gt=0)
    valid_from: date | None = None
    valid_to: date | None = None


class RulesAndPolicyIn(ImportModel):
    rule_type: Literal["house_rules", "check_in_requirements", "cancellation", "terms", "privacy"]
    rule_text: str = Field(min_length=1)
    display_order: int | None = Field(default=None, ge=0)


class SocialMediaLinkIn(ImportModel):
    platform: str = Field(min_length=1)
    url: HttpUrl


class PaymentMethodIn(ImportModel):
    payment_type: str = Field(min_length=1)
    is_available: bool = True


class BookingCtaIn(ImportModel):
    cta_type: Literal["book_now", "enquire_now", "call_to_book", "whatsapp"]
    label: str = Field(min_length=1)
    url: HttpUrl | None = None
    phone_number: str | None = None
    is_active: bool = True
    display_order: int | None = Field(default=None, ge=0)


class PropertyIn(ImportModel):
    name: str = Field(min_length=1)
    country: str = Field(min_length=1)
    slug: str = Field(min_length=1, pattern=SLUG_PATTERN)  # generated from name when omitted
    type: str | None = None
    tagline: str | None = None
    description: str | None = None
    classification: str | None = None
    street_address: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    location_description: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    phone: str | None = None
    email: EmailStr | None = None
    website: HttpUrl | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    check_in_time: str | None = None
    check_out_time: str | None = None
    year_built: int | None = None
    year_renovated: int | None = None
    total_rooms: int | None = Field(default=None, gt=0)
    total_floors: int | None = Field(default=None, gt=0)

    @model_validator(mode="before")
    @classmethod
    def default_slug_from_name(cls, data):
        if isinstance(data, dict) and data.get("slug") is None and isinstance(data.get("name"), str):
            data = {**data, "slug": slugify(data["name"])}
        return data

    @field_validator("year_built", "year_renovated")
    @classmethod
    def year_in_range(cls, v: int | None) -> int | None:
        if v is None:
            return v
        current = date.today().year
        if v < MIN_YEAR or v > current:
            raise ValueError(f"Year must be between {MIN_YEAR} and {current}")
        return v


class PropertyImportDocument(ImportModel):
    property: PropertyIn
    rooms: list[RoomIn] = []
    hosts: list[HostIn] = []
    review_sources: list[ReviewSourceIn] = []
    proximity_info: list[ProximityInfoIn] = []
    nearby_attractions: list[NearbyAttractionIn] = []
    property_features: list[PropertyFeatureIn] = []
    booking_settings: BookingSettingsIn | None = None
    pricing: list[PricingIn] = []
    special_offers: list[SpecialOfferIn] = []
    rules_and_policies: list[RulesAndPolicyIn] = []
    social_media_links: list[SocialMediaLinkIn] = []
    payment_methods: list[PaymentMethodIn] = []
    booking_ctas: list[BookingCtaIn] = []
    property_amenities: list[str] = []
    property_tags: list[str] = []
