"""Descriptive listing content: highlighted features and house rules / policies."""
import enum

from sqlalchemy import Column, Integer, String, Text, ForeignKey, Enum as SQLEnum
from homestay.database import Base


class RuleType(str, enum.Enum):
    house_rules = "house_rules"
    check_in_requirements = "check_in_requirements"
    cancellation = "cancellation"
    terms = "terms"
    privacy = "privacy"


class PropertyFeature(Base):
    __tablename__ = "property_features"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    feature_type = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    display_order = Column(Integer, nullable=False, default=0)


class RulesAndPolicy(Base):
    __tablename__ = "rules_and_policies"

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(64), nullable=False, index=True)

    rule_type = Column(SQLEnum(RuleType), nullable=False)
    rule_text = Column(Text, nullable=False)
    display_order = Column(Integer, nullable=False, default=0)
