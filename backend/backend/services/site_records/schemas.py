from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# JSON key -> attribute, in the order errors are reported.
REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("county", "county"),
    ("informationCurrentAsOf", "information_current_as_of"),
    ("recorderNameAddress", "recorder_name_address"),
)

ARRAY_FIELDS = (
    "cultural_affiliation",
    "site_type",
    "topographic_location",
    "materials_reported",
    "remote_sensing",
    "sampling_techniques",
    "features_prehistoric",
    "features_historic",
)

FLAG_FIELDS = (
    "artifact_illustrations_attached",
    "sketch_map_attached",
    "topo_map_section_attached",
)

_FALSE_STRINGS = {"", "false", "0", "no", "off"}


def _alias(*names: str):
    return Field(default=None, validation_alias=AliasChoices(*names))


class SiteRecordIn(BaseModel):
    """A recordation form submission.

    Keys are camelCase (``informationCurrentAsOf``); the shorter names the
    browser form posts (``infoCurrentAsOf``, ``siteTypes``, ...) are accepted
    too. Blank text becomes ``None``. Required fields are checked by
    ``missing_required`` rather than by the model so that all missing names
    can be reported together.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    county: Optional[str] = None
    local_name_field_number: Optional[str] = _alias("localNameFieldNumber", "localName")
    shpo_site_number: Optional[str] = None
    section_land_grant: Optional[str] = None
    township: Optional[str] = None
    range: Optional[str] = None
    is_update: Optional[str] = _alias("isUpdate", "updateStatus")
    quad_name: Optional[str] = None
    topo_date: Optional[str] = None
    site_area_m2: Optional[str] = _alias("siteAreaM2", "siteArea")
    utm_zone: Optional[str] = None
    utm_northing: Optional[str] = None
    utm_easting: Optional[str] = None
    datum: Optional[str] = None
    nrhp_status: Optional[str] = None

    owner_address: Optional[str] = None
    tenant_address: Optional[str] = None
    information_current_as_of: Optional[str] = _alias("informationCurrentAsOf", "infoCurrentAsOf")
    recorder_name_address: Optional[str] = None
    recording_organization: Optional[str] = None

    site_description: Optional[str] = None
    cultural_affiliation: Optional[list[str]] = None
    cultural_other_prehistoric: Optional[str] = _alias("culturalOtherPrehistoric", "culturalOther")
    cultural_other_historic: Optional[str] = None
    site_type: Optional[list[str]] = _alias("siteType", "siteTypes")
    site_type_other: Optional[str] = None
    water_source: Optional[str] = None
    water_source_other: Optional[str] = None
    water_source_name: Optional[str] = None
    water_source_distance: Optional[str] = None
    topographic_location: Optional[list[str]] = None
    topographic_other: Optional[str] = _alias("topographicOther", "topographicLocationOther")

    materials_reported: Optional[list[str]] = _alias("materialsReported", "materialReported")
    materials_other: Optional[str] = _alias("materialsOther", "materialOther")
    collection_status: Optional[str] = _alias("collectionStatus", "collection")
    repository: Optional[str] = None
    remote_sensing: Optional[list[str]] = None
    remote_other: Optional[str] = _alias("remoteOther", "remoteSensingOther")
    sampling_techniques: Optional[list[str]] = None
    sampling_other: Optional[str] = None
    soil_type: Optional[str] = None
    land_use: Optional[str] = None
    land_use_other: Optional[str] = None
    contour_elevation: Optional[str] = None
    literature_sources: Optional[str] = None

    features_prehistoric: Optional[list[str]] = None
    features_prehistoric_other: Optional[str] = _alias("featuresPrehistoricOther", "featuresOther")
    features_historic: Optional[list[str]] = None
    features_historic_other: Optional[str] = None
    floral_faunal_remains: Optional[str] = None
    human_remains: Optional[str] = None
    artifact_descriptions: Optional[str] = None

    artifact_illustrations_attached: bool = Field(
        default=False, validation_alias=AliasChoices("artifactIllustrationsAttached", "artifactIllustrations")
    )
    sketch_map_attached: bool = Field(
        default=False, validation_alias=AliasChoices("sketchMapAttached", "sketchMap")
    )
    topo_map_section_attached: bool = Field(
        default=False, validation_alias=AliasChoices("topoMapSectionAttached", "usgsTopoMapSection")
    )

    @model_validator(mode="before")
    @classmethod
    def _merge_cultural_periods(cls, data: Any) -> Any:
        # The form splits affiliation into prehistoric/historic checkbox groups.
        if not isinstance(data, dict) or "culturalAffiliation" in data or "cultural_affiliation" in data:
            return data
        parts = []
        for key in ("culturalPrehistoric", "culturalHistoric"):
            value = data.get(key)
            if isinstance(value, str):
                value = [value]
            parts.extend(value or [])
        if not parts:
            return data
        return {**data, "culturalAffiliation": parts}

    @field_validator(*ARRAY_FIELDS, mode="before")
    @classmethod
    def _normalize_array(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return value
        items = []
        for item in value:
            if isinstance(item, (int, float)) and not isinstance(item, bool):
                item = str(item)
            if isinstance(item, str):
                item = item.strip()
                if not item:
                    continue
            items.append(item)
        return items

    @field_validator(*FLAG_FIELDS, mode="before")
    @classmethod
    def _normalize_flag(cls, value: Any) -> Any:
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip().lower() not in _FALSE_STRINGS
        if isinstance(value, (int, float)):
            return bool(value)
        return value

    @field_validator("*", mode="before")
    @classmethod
    def _normalize_text(cls, value: Any, info) -> Any:
        if info.field_name in ARRAY_FIELDS or info.field_name in FLAG_FIELDS:
            return value
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    def missing_required(self) -> list[str]:
        return [key for key, attr in REQUIRED_FIELDS if getattr(self, attr) is None]

    def to_columns(self) -> dict[str, Any]:
        values = self.model_dump()
        for name in FLAG_FIELDS:
            values[name] = 1 if values[name] else 0
        return values
