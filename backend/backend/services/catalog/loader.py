"""Catalog loading.

The catalog file is either a bare JSON array of projects or an object with a
``projects`` key. It is read once per process; any failure is reported as
``CatalogError`` and the caller decides what the site does without it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

from pydantic import ValidationError

from services.catalog.models import Project

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    pass


class Catalog:
    """Ordered, id-unique collection of projects."""

    def __init__(self, projects: Iterable[Project]):
        self.projects: tuple[Project, ...] = tuple(projects)
        self._by_id: dict[str, Project] = {}
        for p in self.projects:
            if p.id in self._by_id:
                raise CatalogError(f"duplicate project id {p.id!r}")
            self._by_id[p.id] = p

    def __iter__(self) -> Iterator[Project]:
        return iter(self.projects)

    def __len__(self) -> int:
        return len(self.projects)

    def get(self, project_id: Optional[str]) -> Optional[Project]:
        if project_id is None:
            return None
        return self._by_id.get(project_id)


def parse_catalog(data: Any) -> Catalog:
    if isinstance(data, dict) and isinstance(data.get("projects"), list):
        items = data["projects"]
    elif isinstance(data, list):
        items = data
    else:
        raise CatalogError("catalog must be a list of projects or an object with a 'projects' list")

    try:
        projects = [Project.model_validate(item) for item in items]
    except ValidationError as e:
        raise CatalogError(f"invalid project entry: {e}") from e
    return Catalog(projects)


def load_catalog(path: Path) -> Catalog:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogError(f"cannot read catalog {path}: {e}") from e
    except ValueError as e:
        raise CatalogError(f"catalog {path} is not valid JSON: {e}") from e

    catalog = parse_catalog(data)
    logger.info("Loaded %d projects from %s", len(catalog), path)
    return catalog
