"""Append-only audit log service. Never update or delete - immutable audit trail."""
from __future__ import annotations

import enum
from datetime import date, datetime
from typing import Any

from sqlalchemy.orm import Session

from homestay.models.audit_log import AuditLog

CATEGORY_PROPERTY_IMPORT = "property_import"

# Column limits (match model)
_CATEGORY_LEN = 32
_TITLE_LEN = 255
_MESSAGE_LEN = 100_000  # avoid unbounded Text blobs


def _sanitize_meta_value(v: Any) -> Any:
    """Convert to JSON-serializable value so meta never raises on INSERT."""
    if v is None:
        return None
    if isinstance(v, (str, int, float, bool)):
        return v
    if isinstance(v, (datetime, date)):
        return v.isoformat()
    if isinstance(v, enum.Enum):
        return getattr(v, "value", str(v))
    if isinstance(v, dict):
        return {str(k): _sanitize_meta_value(x) for k, x in v.items()}
    if isinstance(v, (list, tuple)):
        return [_sanitize_meta_value(x) for x in v]
    return str(v)


def _sanitize_meta(meta: dict[str, Any] | None) -> dict[str, Any] | None:
    if meta is None:
        return None
    return {str(k): _sanitize_meta_value(v) for k, v in meta.items()}


def create_log(
    db: Session,
    tenant_id: str,
    category: str,
    title: str,
    message: str,
    *,
    property_id: int | None = None,
    meta: dict[str, Any] | None = None,
) -> AuditLog:
    """Append one immutable audit log record. All timestamps are UTC (server_default).
    String fields are truncated to column limits; meta is sanitized for JSON."""
    cat = (category or "")[:_CATEGORY_LEN].strip() or CATEGORY_PROPERTY_IMPORT
    tit = (title or "")[:_TITLE_LEN].strip() or "-"
    msg = (message or "")[:_MESSAGE_LEN].strip() or "-"

    entry = AuditLog(
        tenant_id=tenant_id,
        category=cat,
        title=tit,
        message=msg,
        property_id=property_id,
        meta=_sanitize_meta(meta),
    )
    db.add(entry)
    db.flush()  # get entry.id if caller needs it; commit remains with caller
    return entry
