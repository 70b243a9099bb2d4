"""Rooms, their bed layouts and per-night pricing."""
from sqlalchemy import (
    Column, Integer, String, Boolean, Float, Text, Date, DateTime, ForeignKey,
    CheckConstraint, UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from homestay.database import Base

PRICING_PER_NIGHT = "per_night"


class Room(Base):
    __tablename__ = "rooms"
    __table_args__ = (
        # adults + children may not exceed max_guests when all three are known
        CheckConstraint(
            "max_guests IS NULL OR adults_capacity IS NULL OR children_capacity IS NULL "
            "OR adults_capacity + children_capacity <= max_guests",
            name="ck_rooms_capacity",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    name = Column(String(255), nullable=False)  # not unique: pricing resolves to the last one with this name
    description = Column(Text, nullable=True)
    max_guests = Column(Integer, nullable=True)
    adults_capacity = Column(Integer, nullable=True)
    children_capacity = Column(Integer, nullable=True)
    extra_beds_available = Column(Boolean, nullable=False, default=False)
    extra_beds_count = Column(Integer, nullable=True)
    room_size_sqft = Column(Float, nullable=True)
    view_type = Column(String(100), nullable=True)
    room_features = Column(Text, nullable=True)
    base_rate = Column(Float, nullable=True)
    currency = Column(String(3), nullable=False, default="USD")
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    property = relationship("Property", back_populates="rooms")
    bed_configurations = relationship("BedConfiguration", back_populates="room", order_by="BedConfiguration.id")
    pricing = relationship("Pricing", back_populates="room", order_by="Pricing.id")


class BedConfiguration(Base):
    __tablename__ = "bed_configurations"
    __table_args__ = (CheckConstraint("bed_count > 0", name="ck_bed_configurations_count"),)

    id = Column(Integer, primary_key=True, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    bed_type = Column(String(50), nullable=False)  # king, queen, twin, bunk, ...
    bed_count = Column(Integer, nullable=False)
    is_sofa_bed = Column(Boolean, nullable=False, default=False)
    is_extra_bed = Column(Boolean, nullable=False, default=False)

    room = relationship("Room", back_populates="bed_configurations")


class RoomAmenity(Base):
    __tablename__ = "room_amenities"
    __table_args__ = (UniqueConstraint("room_id", "amenity_id", name="uq_room_amenities_room_amenity"),)

    id = Column(Integer, primary_key=True, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True)
    amenity_id = Column(Integer, ForeignKey("standard_amenities.id"), nullable=False, index=True)


class Pricing(Base):
    __tablename__ = "pricing"
    __table_args__ = (
        CheckConstraint(
            "valid_from IS NULL OR valid_to IS NULL OR valid_to >= valid_from",
            name="ck_pricing_validity_window",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    base_rate = Column(Float, nullable=False)
    discounted_rate = Column(Float, nullable=True)
    original_price = Column(Float, nullable=True)
    currency = Column(String(3), nullable=False, default="USD")
    valid_from = Column(Date, nullable=True)
    valid_to = Column(Date, nullable=True)
    pricing_type = Column(String(20), nullable=False, default=PRICING_PER_NIGHT)

    room = relationship("Room", back_populates="pricing")
