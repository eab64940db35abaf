"""Filter state engine for the project explorer.

One engine owns the current view of the catalog: the era/focus filters, the
filtered project list, the grid/timeline/marker surfaces rendered from it,
the detail panel and the map camera. Every user event goes through one of
the public operations, each of which leaves the surfaces mutually
consistent: at most one entry per surface is active and all of them agree on
which project it is.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Iterable, Optional

from services.catalog.loader import Catalog
from services.catalog.models import Project
from services.explorer.renderers import (
    DetailPanel,
    GridCard,
    MapCamera,
    Marker,
    TimelineEntry,
    camera_for,
    placeholder_detail,
    render_detail,
    render_grid,
    render_markers,
    render_result_summary,
    render_timeline,
    restyle,
)
from services.explorer.state import ALL, FilterOptions, FilterState

logger = logging.getLogger(__name__)


class ExplorerError(Exception):
    pass


def _sorted_distinct(values: Iterable[Optional[str]]) -> tuple[str, ...]:
    # Letters first, case only breaks ties: "apple" < "Banana" < "banana".
    return tuple(sorted({v for v in values if v}, key=lambda s: (s.casefold(), s)))


def populate_filters(projects: Iterable[Project]) -> FilterOptions:
    """Distinct eras and focus/theme values, each sorted for the selectors."""
    projects = list(projects)
    eras = _sorted_distinct(p.era for p in projects)
    focuses = _sorted_distinct(v for p in projects for v in p.focus_values)
    return FilterOptions(eras=eras, focuses=focuses)


def matches(project: Project, era: str, focus: str) -> bool:
    return (era == ALL or project.era == era) and (focus == ALL or project.matches_focus(focus))


class ExplorerEngine:
    def __init__(self, catalog: Catalog, *, with_map: bool = True):
        self.catalog = catalog
        self.state = FilterState()
        self.options = populate_filters(catalog)
        self.filtered: list[Project] = list(catalog)

        self.grid: list[GridCard] = []
        self.timeline: list[TimelineEntry] = []
        self.markers: list[Marker] = []
        self.summary = ""
        self.detail: DetailPanel = placeholder_detail()
        self.camera: Optional[MapCamera] = MapCamera() if with_map else None

    @property
    def active_project_id(self) -> Optional[str]:
        return self.state.active_project_id

    @property
    def active_project(self) -> Optional[Project]:
        return self.catalog.get(self.state.active_project_id)

    # ---- filters ----
    def set_era(self, era: str) -> None:
        self.state.era = era or ALL
        self.apply_filters(preserve_selection=True)

    def set_focus(self, focus: str) -> None:
        self.state.focus = focus or ALL
        self.apply_filters(preserve_selection=True)

    def reset_filters(self) -> None:
        self.state.reset()
        self.apply_filters(preserve_selection=False)

    def restore(self, era: str = ALL, focus: str = ALL, active_project_id: Optional[str] = None) -> None:
        """Rebuild the view a client had: its filters plus its previous selection, if it still exists."""
        if self.catalog.get(active_project_id) is None:
            active_project_id = None
        self.state = FilterState(era=era or ALL, focus=focus or ALL, active_project_id=active_project_id)
        self.apply_filters(preserve_selection=active_project_id is not None)
        # A fresh engine has no detail panel to keep, so fill it for a kept selection.
        if self.detail.is_placeholder and self.active_project is not None:
            self.select_project(self.active_project, fly_to=False)

    def apply_filters(self, preserve_selection: bool = False) -> None:
        era, focus = self.state.era, self.state.focus
        self.filtered = [p for p in self.catalog if matches(p, era, focus)]

        # All surfaces are rebuilt before the selection is resolved.
        active_id = self.state.active_project_id
        self.grid = render_grid(self.filtered, active_id)
        self.timeline = render_timeline(self.filtered, active_id)
        self.markers = render_markers(self.filtered, active_id)
        self.summary = render_result_summary(self.filtered)

        if not self.filtered:
            logger.debug("No projects for era=%r focus=%r", era, focus)
            self._clear_selection()
            return

        if preserve_selection and self._is_visible(active_id):
            self._set_active(active_id)
            return

        self.select_project(self.filtered[0])

    # ---- selection ----
    def select_project(self, project: Optional[Project], *, fly_to: bool = True) -> None:
        if project is None:
            self._clear_selection()
            return
        if not self._is_visible(project.id):
            raise ExplorerError(f"project {project.id!r} is not in the current view")

        self.detail = render_detail(project)
        self._set_active(project.id)

        if fly_to and self.camera is not None:
            camera = camera_for(project)
            if camera is not None:
                self.camera = camera

    def select_project_id(self, project_id: str) -> None:
        project = self.catalog.get(project_id)
        if project is None:
            raise ExplorerError(f"unknown project {project_id!r}")
        self.select_project(project)

    def _is_visible(self, project_id: Optional[str]) -> bool:
        return project_id is not None and any(p.id == project_id for p in self.filtered)

    def _set_active(self, project_id: Optional[str]) -> None:
        self.state.active_project_id = project_id
        self.grid = restyle(self.grid, project_id)
        self.timeline = restyle(self.timeline, project_id)
        self.markers = restyle(self.markers, project_id)

    def _clear_selection(self) -> None:
        self.detail = placeholder_detail()
        self._set_active(None)

    # ---- output ----
    def snapshot(self) -> dict:
        return {
            "filters": {"era": self.state.era, "focus": self.state.focus},
            "options": self.options.as_dict(),
            "summary": self.summary,
            "active_project_id": self.state.active_project_id,
            "grid": [asdict(c) for c in self.grid],
            "timeline": [asdict(t) for t in self.timeline],
            "markers": [asdict(m) for m in self.markers],
            "detail": self.detail.as_dict(),
            "map": asdict(self.camera) if self.camera is not None else None,
        }
