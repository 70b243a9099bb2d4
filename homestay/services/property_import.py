"""Property import from a JSON document: the single entry point used by the API and scripts.

validate (fatal) -> create property (fatal) -> import sub-records (best effort) -> summary.
Only the first two steps can fail the import; everything after the property row
exists ends up as a warning in the result message.
"""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from homestay.config import Settings, get_settings
from homestay.models.property import Property
from homestay.schemas.property import ImportResult
from homestay.schemas.property_import import PropertyIn
from homestay.services.audit_log import CATEGORY_PROPERTY_IMPORT, create_log
from homestay.services.import_result import ImportStats
from homestay.services.listing_cache import ListingCache, get_listing_cache
from homestay.services.property_importer import PropertyImporter
from homestay.services.schema_validator import DocumentValidationError, validate_document
from homestay.services.store import ImportStore, SqlAlchemyStore, StoreError

logger = logging.getLogger("uvicorn.error")

ERROR_VALIDATION = "Validation failed"
ERROR_INVALID_JSON = "Invalid JSON format. Please check your JSON syntax."


class RootInsertError(Exception):
    """The property row itself could not be written (e.g. duplicate slug). Nothing else is attempted."""


def _validation_failure(exc: DocumentValidationError) -> ImportResult:
    lines = "\n".join(str(err) for err in exc.errors)
    return ImportResult(
        success=False,
        error=ERROR_INVALID_JSON if exc.invalid_json else ERROR_VALIDATION,
        message=f"Validation errors:\n{lines}",
    )


def create_property(store: ImportStore, tenant_id: str, data: PropertyIn) -> int:
    record = {
        "tenant_id": tenant_id,
        "name": data.name,
        "type": data.type,
        "tagline": data.tagline,
        "description": data.description,
        "classification": data.classification,
        "slug": data.slug,
        "street_address": data.street_address,
        "city": data.city,
        "state": data.state,
        "country": data.country,
        "postal_code": data.postal_code,
        "location_description": data.location_description,
        "latitude": data.latitude,
        "longitude": data.longitude,
        "phone": data.phone,
        "email": data.email,
        "website": str(data.website) if data.website is not None else None,
        "meta_title": data.meta_title,
        "meta_description": data.meta_description,
        "check_in_time": data.check_in_time,
        "check_out_time": data.check_out_time,
        "year_built": data.year_built,
        "year_renovated": data.year_renovated,
        "total_rooms": data.total_rooms,
        "total_floors": data.total_floors,
        "is_active": True,
        "is_published": False,
    }
    try:
        return store.insert(Property, record)
    except StoreError as e:
        raise RootInsertError(str(e)) from e


def _record_audit(db: Session, tenant_id: str, property_id: int, name: str, stats: ImportStats) -> None:
    try:
        create_log(
            db,
            tenant_id,
            CATEGORY_PROPERTY_IMPORT,
            "Property imported",
            f"Imported property {name} (id={property_id}) from JSON with {len(stats.errors)} warning(s).",
            property_id=property_id,
            meta={"counts": stats.counts, "warnings": len(stats.errors)},
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Audit log for imported property %s could not be written", property_id)


def import_property(
    db: Session,
    tenant_id: str,
    raw_text: str,
    *,
    store: ImportStore | None = None,
    cache: ListingCache | None = None,
    settings: Settings | None = None,
) -> ImportResult:
    """Create one property and its sub-records from a raw JSON document.

    Returns success=False (nothing written) on validation failure or when the
    property row cannot be created. Otherwise success=True with the new id and
    a summary that lists the first few sub-record failures.
    Not idempotent: importing the same document twice creates two properties
    unless the slug collides.
    """
    settings = settings or get_settings()
    try:
        doc = validate_document(raw_text)
    except DocumentValidationError as e:
        logger.info("Property import for tenant %s rejected: %d validation error(s)", tenant_id, len(e.errors))
        return _validation_failure(e)

    store = store or SqlAlchemyStore(db)
    try:
        property_id = create_property(store, tenant_id, doc.property)
    except RootInsertError as e:
        logger.warning("Property import for tenant %s: property %r not created: %s", tenant_id, doc.property.slug, e)
        return ImportResult(success=False, error=f"Failed to create property: {e}")

    logger.info("Property import for tenant %s: created property %s (%s)", tenant_id, property_id, doc.property.slug)
    importer = PropertyImporter(store, tenant_id, property_id, default_currency=settings.default_currency)
    stats = importer.run(doc)
    logger.info(
        "Property import %s finished: %s, %d warning(s)",
        property_id,
        ", ".join(f"{k}={v}" for k, v in stats.counts.items()) or "no sub-records",
        len(stats.errors),
    )

    _record_audit(db, tenant_id, property_id, doc.property.name, stats)
    (cache or get_listing_cache()).invalidate(tenant_id)
    return ImportResult(
        success=True,
        property_id=property_id,
        message=stats.summary(doc.property.name, settings.import_max_warnings),
    )
