"""What is around a property: landmarks with travel distances and nearby attractions."""
from sqlalchemy import Column, Integer, String, Float, Text, ForeignKey
from homestay.database import Base

DISTANCE_UNIT_KM = "km"


class ProximityInfo(Base):
    __tablename__ = "proximity_info"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    point_of_interest = Column(String(255), nullable=False)  # landmark_name in the import document
    distance = Column(Float, nullable=True)
    distance_unit = Column(String(10), nullable=False, default=DISTANCE_UNIT_KM)
    description = Column(String(255), nullable=True)  # distance_text, e.g. "5 min walk"
    travel_time = Column(String(100), nullable=True)
    transport_mode = Column(String(50), nullable=True)


class NearbyAttraction(Base):
    __tablename__ = "nearby_attractions"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=True)
    distance = Column(Float, nullable=True)
    distance_unit = Column(String(10), nullable=False, default=DISTANCE_UNIT_KM)
    description = Column(Text, nullable=True)
    transportation_info = Column(Text, nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
