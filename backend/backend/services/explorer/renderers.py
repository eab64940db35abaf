"""View models for the three explorer surfaces and the detail panel.

Every function here is a pure function of its arguments: the engine hands in
the filtered projects and the active id and gets fresh view objects back.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Iterable, Optional, Sequence

from services.catalog.models import ArtifactNote, Project

CAMPUS_CENTER = (38.6365, -90.2345)
CAMPUS_ZOOM = 16
PROJECT_ZOOM = 17
FLY_DURATION = 0.6

PLACEHOLDER_TITLE = "Choose a project"
PLACEHOLDER_INTRO = (
    "Use the map markers, timeline, or project list to learn more about each "
    "field school, excavation, and laboratory investigation."
)
NO_RESULTS = "No projects match the current filters."


@dataclass(frozen=True)
class GridCard:
    project_id: str
    type_label: str
    title: str
    meta: str
    summary: str
    active: bool = False


@dataclass(frozen=True)
class TimelineEntry:
    project_id: str
    year_label: str
    title: str
    note: str
    active: bool = False


@dataclass(frozen=True)
class Marker:
    project_id: str
    latitude: float
    longitude: float
    title: str
    icon_class: str
    active: bool = False


@dataclass(frozen=True)
class ArtifactGroupView:
    category: str
    items: tuple[str, ...]


@dataclass(frozen=True)
class DetailPanel:
    title: str
    intro: str
    meta: tuple[tuple[str, str], ...] = ()
    summary: str = ""
    discoveries_heading: Optional[str] = None
    discoveries: tuple[str, ...] = ()
    artifacts_heading: Optional[str] = None
    artifacts: tuple[ArtifactGroupView, ...] = ()

    @property
    def is_placeholder(self) -> bool:
        return self.title == PLACEHOLDER_TITLE and not self.meta

    def as_dict(self) -> dict:
        data = asdict(self)
        data["meta"] = [{"label": k, "value": v} for k, v in self.meta]
        return data


@dataclass(frozen=True)
class MapCamera:
    center: tuple[float, float] = CAMPUS_CENTER
    zoom: int = CAMPUS_ZOOM
    animate: bool = False
    duration: float = 0.0


def render_grid(projects: Sequence[Project], active_id: Optional[str]) -> list[GridCard]:
    """Cards in catalog order."""
    cards = []
    for p in projects:
        meta = " • ".join(part for part in (p.location, p.years) if part)
        cards.append(GridCard(
            project_id=p.id,
            type_label=p.type_label,
            title=p.title,
            meta=meta,
            summary=p.teaser,
            active=p.id == active_id,
        ))
    return cards


def render_timeline(projects: Sequence[Project], active_id: Optional[str]) -> list[TimelineEntry]:
    """Entries by ascending start year; ties keep catalog order, undated last."""
    ordered = sorted(projects, key=lambda p: (p.start_year is None, p.start_year or 0))
    return [
        TimelineEntry(
            project_id=p.id,
            year_label=p.years,
            title=p.title,
            note=p.timeline_note or p.teaser,
            active=p.id == active_id,
        )
        for p in ordered
    ]


def render_markers(projects: Sequence[Project], active_id: Optional[str]) -> list[Marker]:
    markers = []
    for p in projects:
        if p.coordinates is None:
            continue
        lat, lng = p.coordinates
        markers.append(Marker(
            project_id=p.id,
            latitude=lat,
            longitude=lng,
            title=p.title,
            icon_class=f"marker marker--{p.icon_kind}",
            active=p.id == active_id,
        ))
    return markers


def restyle(entries: Iterable, active_id: Optional[str]) -> list:
    """Re-apply the active flag without rebuilding the entries."""
    return [replace(e, active=e.project_id == active_id) for e in entries]


def render_result_summary(projects: Sequence[Project]) -> str:
    if not projects:
        return NO_RESULTS
    label = "project" if len(projects) == 1 else "projects"
    return f"Showing {len(projects)} {label}"


def placeholder_detail() -> DetailPanel:
    return DetailPanel(title=PLACEHOLDER_TITLE, intro=PLACEHOLDER_INTRO)


def _artifact_label(item) -> str:
    return item.label() if isinstance(item, ArtifactNote) else str(item)


def render_detail(project: Project) -> DetailPanel:
    meta = (
        ("Type", project.type_label),
        ("Years", project.years),
        ("Era", project.era or ""),
        ("Research focus", ", ".join(project.focus_values)),
        ("Location", project.location or ""),
    )
    discoveries = tuple(project.discoveries)
    artifacts = tuple(
        ArtifactGroupView(category=g.category, items=tuple(_artifact_label(i) for i in g.items))
        for g in project.artifacts
    )
    return DetailPanel(
        title=project.title,
        intro=project.teaser,
        meta=meta,
        summary=project.summary,
        discoveries_heading="Excavation highlights" if discoveries else None,
        discoveries=discoveries,
        artifacts_heading="Artifact inventory" if artifacts else None,
        artifacts=artifacts,
    )


def camera_for(project: Project) -> Optional[MapCamera]:
    if project.coordinates is None:
        return None
    return MapCamera(center=project.coordinates, zoom=PROJECT_ZOOM, animate=True, duration=FLY_DURATION)
