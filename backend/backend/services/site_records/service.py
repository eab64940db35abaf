from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from app.db.models.site_records import SiteRecord
from services._crud import commit_refresh
from services.site_records.schemas import SiteRecordIn


def create_site_record(db: Session, record: SiteRecordIn) -> SiteRecord:
    return commit_refresh(db, SiteRecord(**record.to_columns()))


def list_site_records(db: Session) -> list[SiteRecord]:
    return (db.query(SiteRecord)
            .order_by(SiteRecord.created_at.desc(), SiteRecord.id.desc())
            .all())


def record_to_dict(row: SiteRecord) -> dict[str, Any]:
    """Flatten a row to its column names, the shape the listing endpoint returns."""
    out: dict[str, Any] = {}
    for column in SiteRecord.__table__.columns:
        value = getattr(row, column.key)
        if isinstance(value, datetime):
            value = value.isoformat()
        out[column.name] = value
    return out
