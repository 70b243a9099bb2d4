"""Hosts shown on the listing, plus the external review sites and social profiles they link to."""
from sqlalchemy import Column, Integer, String, Float, Text, ForeignKey
from homestay.database import Base


class Host(Base):
    __tablename__ = "hosts"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=True)
    bio = Column(Text, nullable=True)
    writeup = Column(Text, nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    whatsapp = Column(String(50), nullable=True)
    response_time = Column(String(100), nullable=True)  # e.g. "within an hour"


class ReviewSource(Base):
    __tablename__ = "review_sources"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    site_name = Column(String(100), nullable=False)  # Google, TripAdvisor, Airbnb, ...
    stars = Column(Float, nullable=True)
    total_reviews = Column(Integer, nullable=True)
    review_url = Column(String(500), nullable=True)
    display_order = Column(Integer, nullable=False, default=0)


class SocialMediaLink(Base):
    __tablename__ = "social_media_links"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    platform = Column(String(50), nullable=False)
    url = Column(String(500), nullable=False)
