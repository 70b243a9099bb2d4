"""Standard amenity / tag catalog (shared by all tenants) and the junctions that point into it."""
from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from homestay.database import Base


class StandardAmenity(Base):
    __tablename__ = "standard_amenities"

    id = Column(Integer, primary_key=True, index=True)
    # Matched exactly (case-sensitive) against names in import documents
    name = Column(String(100), unique=True, nullable=False, index=True)
    category = Column(String(64), nullable=True)  # general, room, bathroom, outdoor, ...
    icon = Column(String(64), nullable=True)


class StandardPropertyTag(Base):
    __tablename__ = "standard_property_tags"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False, index=True)


class PropertyAmenity(Base):
    __tablename__ = "property_amenities"
    __table_args__ = (UniqueConstraint("property_id", "amenity_id", name="uq_property_amenities_property_amenity"),)

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    amenity_id = Column(Integer, ForeignKey("standard_amenities.id"), nullable=False, index=True)


class PropertyTag(Base):
    __tablename__ = "property_tags"
    __table_args__ = (UniqueConstraint("property_id", "tag_id", name="uq_property_tags_property_tag"),)

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    tag_id = Column(Integer, ForeignKey("standard_property_tags.id"), nullable=False, index=True)
