from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import make_url

from app.core.config import CATALOG_PATH, DATABASE_URL, HOST, PORT, SITE_ROOT
from app.core.log_config import configure_logging
from app.core.middleware import request_log_middleware
from app.db.base import Base
from app.db.session import engine

# Register models
from app.db import models  # noqa: F401

from services.catalog.api import router as site_router
from services.catalog.loader import CatalogError, load_catalog
from services.explorer.api import CatalogUnavailableError, router as explorer_router
from services.site_records.api import router as site_records_router

configure_logging()
logger = logging.getLogger("main")


def _ensure_sqlite_dir() -> None:
    url = make_url(DATABASE_URL)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Dev-friendly schema creation (migrations are available for real upgrades).
    # A store that cannot be created is fatal to the process.
    try:
        _ensure_sqlite_dir()
        Base.metadata.create_all(bind=engine)
    except Exception:
        logger.critical("Failed to initialize database at %s", DATABASE_URL, exc_info=True)
        raise

    # The catalog is read once; without it the explorer stays offline for this process.
    try:
        app.state.catalog = load_catalog(CATALOG_PATH)
    except CatalogError as e:
        logger.error("Catalog unavailable: %s", e)
        app.state.catalog = None

    logger.info("Server listening on http://localhost:%d", PORT)
    yield


app = FastAPI(title="Campus Archaeology", lifespan=lifespan)


@app.middleware("http")
async def _access_log(request, call_next):
    return await request_log_middleware(request, call_next)


@app.exception_handler(CatalogUnavailableError)
async def _catalog_unavailable(request: Request, exc: CatalogUnavailableError):
    return JSONResponse(status_code=503, content={"error": str(exc)})


app.mount("/assets", StaticFiles(directory=SITE_ROOT / "assets", check_dir=False), name="assets")
app.include_router(site_router)
app.include_router(site_records_router)
app.include_router(explorer_router)


@app.get("/health")
def health():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT, log_config=None)
