"""Standard amenity and tag catalog (read-only). Import documents refer to these by exact name."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from homestay.database import get_db
from homestay.models.catalog import StandardAmenity, StandardPropertyTag
from homestay.schemas.property import CatalogEntry

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/amenities", response_model=list[CatalogEntry])
def list_amenities(db: Session = Depends(get_db)):
    return db.query(StandardAmenity).order_by(StandardAmenity.name).all()


@router.get("/tags", response_model=list[CatalogEntry])
def list_tags(db: Session = Depends(get_db)):
    return db.query(StandardPropertyTag).order_by(StandardPropertyTag.name).all()
