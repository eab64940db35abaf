from __future__ import annotations

import enum
from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class ProjectType(str, enum.Enum):
    EXCAVATION = "excavation"
    SURVEY = "survey"
    LAB = "lab"


TYPE_LABELS = {
    ProjectType.EXCAVATION.value: "Excavation",
    ProjectType.SURVEY.value: "Survey",
    ProjectType.LAB.value: "Laboratory",
}


class ArtifactNote(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    notes: Optional[str] = None

    def label(self) -> str:
        return f"{self.name} ({self.notes})" if self.notes else self.name


class ArtifactGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    items: list[Union[str, ArtifactNote]] = Field(default_factory=list)


class Project(BaseModel):
    """One field activity in the catalog. Read-only once loaded."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    title: str
    type: str = ProjectType.EXCAVATION.value
    teaser: str = ""
    summary: str = Field(default="", validation_alias=AliasChoices("summary", "longDescription"))
    era: Optional[str] = None
    focus: Optional[str] = None
    themes: list[str] = Field(default_factory=list, validation_alias=AliasChoices("themes", "theme"))
    years: str = ""
    start_year: Optional[float] = Field(default=None, validation_alias=AliasChoices("startYear", "start_year"))
    location: Optional[str] = None
    coordinates: Optional[tuple[float, float]] = None
    timeline_note: Optional[str] = Field(default=None, validation_alias=AliasChoices("timelineNote", "timeline_note"))
    discoveries: list[str] = Field(default_factory=list)
    artifacts: list[ArtifactGroup] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _focus_list_as_themes(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("focus"), list):
            data = dict(data)
            focus = data.pop("focus")
            if not data.get("themes") and not data.get("theme"):
                data["themes"] = focus
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("type", mode="before")
    @classmethod
    def _type_as_key(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() or ProjectType.EXCAVATION.value
        return value

    @field_validator("themes", mode="before")
    @classmethod
    def _single_theme(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("discoveries", "artifacts", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def focus_values(self) -> list[str]:
        """Every focus/theme value this project can be filtered by."""
        values = [self.focus] if self.focus else []
        for theme in self.themes:
            if theme not in values:
                values.append(theme)
        return values

    @property
    def type_label(self) -> str:
        return TYPE_LABELS.get(self.type, self.type)

    @property
    def icon_kind(self) -> str:
        # Types without their own marker icon use the excavation one.
        return self.type if self.type in TYPE_LABELS else ProjectType.EXCAVATION.value

    def matches_focus(self, focus: str) -> bool:
        return focus in self.themes or self.focus == focus
