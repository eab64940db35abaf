from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import get_db
from services.site_records.schemas import SiteRecordIn
from services.site_records.service import create_site_record, list_site_records, record_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/site-records", tags=["site-records"])


def _bad_request(error: str, details: list[str]) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": error, "details": details})


@router.post("", status_code=201)
def create_record(payload: dict | None = Body(default=None), db: Session = Depends(get_db)):
    try:
        record = SiteRecordIn.model_validate(payload or {})
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        return _bad_request("Invalid site record", fields)

    missing = record.missing_required()
    if missing:
        return _bad_request("Missing required fields", missing)

    try:
        row = create_site_record(db, record)
    except SQLAlchemyError:
        logger.exception("Failed to store site record")
        return JSONResponse(status_code=500, content={"error": "Failed to store site record"})

    logger.info("Stored site record %s (county=%s)", row.id, row.county)
    return {"id": row.id}


@router.get("")
def list_records(db: Session = Depends(get_db)):
    try:
        rows = list_site_records(db)
    except SQLAlchemyError:
        logger.exception("Failed to fetch site records")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch site records"})
    return [record_to_dict(r) for r in rows]
