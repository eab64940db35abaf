from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from app.core.config import CATALOG_PATH, SITE_ROOT

router = APIRouter(tags=["site"])


@router.get("/", include_in_schema=False)
def index():
    page = SITE_ROOT / "index.html"
    if not page.is_file():
        raise HTTPException(404, "index.html not found")
    return FileResponse(page)


@router.get("/data/excavations.json", include_in_schema=False)
def catalog_file():
    if not CATALOG_PATH.is_file():
        raise HTTPException(404, "catalog not found")
    return FileResponse(CATALOG_PATH, media_type="application/json")
