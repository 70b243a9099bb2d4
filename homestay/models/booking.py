"""Booking terms for a property: settings (1:1), offers, accepted payment methods and call-to-action buttons."""
import enum

from sqlalchemy import (
    Column, Integer, String, Boolean, Float, Text, Date, ForeignKey, CheckConstraint, Enum as SQLEnum,
)
from homestay.database import Base


class DepositType(str, enum.Enum):
    percentage = "percentage"
    fixed = "fixed"
    nights = "nights"


class OfferType(str, enum.Enum):
    early_bird = "early_bird"
    last_minute = "last_minute"
    package = "package"
    long_stay = "long_stay"
    family = "family"
    weekend = "weekend"
    weekday = "weekday"


class CtaType(str, enum.Enum):
    book_now = "book_now"
    enquire_now = "enquire_now"
    call_to_book = "call_to_book"
    whatsapp = "whatsapp"


class BookingSettings(Base):
    __tablename__ = "booking_settings"
    __table_args__ = (
        CheckConstraint(
            "min_stay_nights IS NULL OR max_stay_nights IS NULL OR min_stay_nights <= max_stay_nights",
            name="ck_booking_settings_stay_bounds",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    # At most one row per property
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), unique=True, nullable=False)
    tenant_id = Column(String(64), nullable=False, index=True)

    check_in_time = Column(String(8), nullable=True)  # HH:MM:SS
    check_out_time = Column(String(8), nullable=True)
    min_stay_nights = Column(Integer, nullable=True)
    max_stay_nights = Column(Integer, nullable=True)
    age_restrictions = Column(Text, nullable=True)
    group_booking_policy = Column(Text, nullable=True)

    cancellation_full_refund_policy = Column(Text, nullable=True)
    cancellation_full_refund_hours = Column(Integer, nullable=True)
    cancellation_partial_refund_policy = Column(Text, nullable=True)
    cancellation_partial_refund_hours = Column(Integer, nullable=True)
    cancellation_no_refund_policy = Column(Text, nullable=True)

    deposit_required = Column(Boolean, nullable=False, default=False)
    deposit_type = Column(SQLEnum(DepositType), nullable=True)
    deposit_value = Column(Float, nullable=True)
    payment_terms = Column(Text, nullable=True)


class SpecialOffer(Base):
    __tablename__ = "special_offers"
    __table_args__ = (
        CheckConstraint(
            "valid_from IS NULL OR valid_to IS NULL OR valid_to >= valid_from",
            name="ck_special_offers_validity_window",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    offer_type = Column(SQLEnum(OfferType), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    discount_percentage = Column(Float, nullable=True)
    discount_amount = Column(Float, nullable=True)
    valid_from = Column(Date, nullable=True)
    valid_to = Column(Date, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)


class PaymentMethod(Base):
    __tablename__ = "payment_methods"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    payment_type = Column(String(50), nullable=False)  # cash, upi, card, bank_transfer, ...
    is_available = Column(Boolean, nullable=False, default=True)


class BookingCTA(Base):
    __tablename__ = "booking_ctas"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    cta_type = Column(SQLEnum(CtaType), nullable=False)
    label = Column(String(100), nullable=False)
    url = Column(String(500), nullable=True)
    phone_number = Column(String(50), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    display_order = Column(Integer, nullable=False, default=0)
