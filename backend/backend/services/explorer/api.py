from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request

from services.catalog.loader import Catalog
from services.explorer.engine import ExplorerEngine, populate_filters
from services.explorer.state import ALL

router = APIRouter(prefix="/api/explorer", tags=["explorer"])

CATALOG_UNAVAILABLE = "There was a problem loading excavation data."


class CatalogUnavailableError(Exception):
    """Raised for every explorer request once the catalog failed to load."""


def get_catalog(request: Request) -> Catalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise CatalogUnavailableError(CATALOG_UNAVAILABLE)
    return catalog


@router.get("/filters")
def filter_options(catalog: Catalog = Depends(get_catalog)):
    return populate_filters(catalog).as_dict()


@router.get("/view")
def explorer_view(
    era: str = ALL,
    focus: str = ALL,
    active: Optional[str] = None,
    catalog: Catalog = Depends(get_catalog),
):
    engine = ExplorerEngine(catalog)
    engine.restore(era=era, focus=focus, active_project_id=active)
    return engine.snapshot()
