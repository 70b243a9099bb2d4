"""Property: root of an imported listing. Every other record hangs off property_id."""
from sqlalchemy import Column, Integer, String, Boolean, Float, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from homestay.database import Base


class Property(Base):
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, index=True)
    # Tenant isolation is enforced upstream; we only tag rows
    tenant_id = Column(String(64), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=True)  # homestay, villa, resort, ...
    tagline = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    classification = Column(String(100), nullable=True)
    slug = Column(String(255), unique=True, nullable=False, index=True)

    street_address = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)
    country = Column(String(100), nullable=False)
    postal_code = Column(String(20), nullable=True)
    location_description = Column(Text, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    website = Column(String(500), nullable=True)

    meta_title = Column(String(255), nullable=True)
    meta_description = Column(Text, nullable=True)

    check_in_time = Column(String(20), nullable=True)
    check_out_time = Column(String(20), nullable=True)
    year_built = Column(Integer, nullable=True)
    year_renovated = Column(Integer, nullable=True)
    total_rooms = Column(Integer, nullable=True)
    total_floors = Column(Integer, nullable=True)

    is_active = Column(Boolean, nullable=False, default=True)
    is_published = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    rooms = relationship("Room", back_populates="property", order_by="Room.id")
    hosts = relationship("Host", order_by="Host.id")
    booking_settings = relationship("BookingSettings", uselist=False)
