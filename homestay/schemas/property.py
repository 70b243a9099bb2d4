"""Property import request/result and property read schemas."""
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field


class ImportRequest(BaseModel):
    """Raw document text, validated by the import pipeline rather than by FastAPI."""
    json_data: str


class ImportResult(BaseModel):
    """Outcome of one import. success is always definite; property_id is set only when the property was created."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    property_id: int | None = Field(default=None, serialization_alias="propertyId")
    error: str | None = None
    message: str | None = None


class PricingResponse(BaseModel):
    id: int
    room_id: int
    base_rate: float
    discounted_rate: float | None
    original_price: float | None
    currency: str
    valid_from: date | None
    valid_to: date | None
    pricing_type: str

    class Config:
        from_attributes = True


class BedConfigurationResponse(BaseModel):
    id: int
    bed_type: str
    bed_count: int
    is_sofa_bed: bool
    is_extra_bed: bool

    class Config:
        from_attributes = True


class RoomResponse(BaseModel):
    id: int
    name: str
    max_guests: int | None
    adults_capacity: int | None
    children_capacity: int | None
    base_rate: float | None
    currency: str
    bed_configurations: list[BedConfigurationResponse] = []
    pricing: list[PricingResponse] = []

    class Config:
        from_attributes = True


class PropertySummary(BaseModel):
    id: int
    name: str
    slug: str
    type: str | None
    city: str | None
    country: str
    is_active: bool
    is_published: bool
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class PropertyDetail(PropertySummary):
    tagline: str | None
    description: str | None
    street_address: str | None
    state: str | None
    postal_code: str | None
    latitude: float | None
    longitude: float | None
    phone: str | None
    email: str | None
    meta_title: str | None
    meta_description: str | None
    rooms: list[RoomResponse] = []


class CatalogEntry(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
