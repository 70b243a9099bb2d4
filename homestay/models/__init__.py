"""
All SQLAlchemy models. Schema is the source of truth for new DBs.
Base.metadata.create_all() creates every table; no migration scripts needed for fresh installs.
"""
from homestay.models.property import Property
from homestay.models.room import Room, BedConfiguration, RoomAmenity, Pricing
from homestay.models.host import Host, ReviewSource, SocialMediaLink
from homestay.models.location import ProximityInfo, NearbyAttraction
from homestay.models.content import PropertyFeature, RulesAndPolicy
from homestay.models.booking import BookingSettings, SpecialOffer, PaymentMethod, BookingCTA
from homestay.models.catalog import StandardAmenity, StandardPropertyTag, PropertyAmenity, PropertyTag
from homestay.models.audit_log import AuditLog

__all__ = [
    "Property",
    "Room",
    "BedConfiguration",
    "RoomAmenity",
    "Pricing",
    "Host",
    "ReviewSource",
    "SocialMediaLink",
    "ProximityInfo",
    "NearbyAttraction",
    "PropertyFeature",
    "RulesAndPolicy",
    "BookingSettings",
    "SpecialOffer",
    "PaymentMethod",
    "BookingCTA",
    "StandardAmenity",
    "StandardPropertyTag",
    "PropertyAmenity",
    "PropertyTag",
    "AuditLog",
]
