"""Property import and read endpoints."""
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.orm import Session, selectinload
from homestay.database import get_db
from homestay.dependencies import get_current_tenant
from homestay.models.property import Property
from homestay.models.room import Room
from homestay.schemas.property import ImportRequest, ImportResult, PropertyDetail, PropertySummary
from homestay.services.listing_cache import ListingCache, get_listing_cache
from homestay.services.property_import import import_property

router = APIRouter(prefix="/properties", tags=["properties"])


@router.post("/import", response_model=ImportResult, response_model_exclude_none=True)
def import_property_json(
    data: ImportRequest,
    db: Session = Depends(get_db),
    tenant_id: str = Depends(get_current_tenant),
    cache: ListingCache = Depends(get_listing_cache),
):
    """Import one property from a JSON document. Always 200: a failed import is success=false, not an HTTP error."""
    return import_property(db, tenant_id, data.json_data, cache=cache)


@router.post("/import/file", response_model=ImportResult, response_model_exclude_none=True)
def import_property_file(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    tenant_id: str = Depends(get_current_tenant),
    cache: ListingCache = Depends(get_listing_cache),
):
    """Same as /import, with the document uploaded as a .json file."""
    if not file.filename or not file.filename.lower().endswith(".json"):
        raise HTTPException(status_code=400, detail="Please upload a JSON file.")

    content = b""
    try:
        content = file.file.read()
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Could not read file: {e!s}")
    if not content:
        raise HTTPException(status_code=400, detail="File is empty.")

    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be UTF-8 encoded.")

    return import_property(db, tenant_id, text, cache=cache)


@router.get("", response_model=list[PropertySummary])
def list_properties(
    db: Session = Depends(get_db),
    tenant_id: str = Depends(get_current_tenant),
    cache: ListingCache = Depends(get_listing_cache),
):
    """Tenant's properties, newest first. Cached until the next import for this tenant."""
    def load() -> list[PropertySummary]:
        props = (
            db.query(Property)
            .filter(Property.tenant_id == tenant_id)
            .order_by(Property.id.desc())
            .all()
        )
        return [PropertySummary.model_validate(p) for p in props]

    return cache.get_or_load(tenant_id, load)


@router.get("/{property_id}", response_model=PropertyDetail)
def get_property(
    property_id: int,
    db: Session = Depends(get_db),
    tenant_id: str = Depends(get_current_tenant),
):
    prop = (
        db.query(Property)
        .options(selectinload(Property.rooms).selectinload(Room.bed_configurations))
        .options(selectinload(Property.rooms).selectinload(Room.pricing))
        .filter(Property.id == property_id, Property.tenant_id == tenant_id)
        .first()
    )
    if not prop:
        raise HTTPException(status_code=404, detail="Property not found")
    return PropertyDetail.model_validate(prop)
