from __future__ import annotations

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.db.codecs import JSONArrayText
from app.db.models.common import HasCreatedAt, HasIntId


class SiteRecord(Base, HasIntId, HasCreatedAt):
    """One submitted historic-site recordation form.

    Rows are insert-only. Multi-select answers live in JSON text columns
    (see ``JSONArrayText``); attachment flags are stored as 0/1.
    """

    __tablename__ = "site_records"

    # Location / identification
    county: Mapped[str | None] = mapped_column(Text, nullable=True)
    local_name_field_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    shpo_site_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    section_land_grant: Mapped[str | None] = mapped_column(Text, nullable=True)
    township: Mapped[str | None] = mapped_column(Text, nullable=True)
    range: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_update: Mapped[str | None] = mapped_column(Text, nullable=True)
    quad_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    topo_date: Mapped[str | None] = mapped_column(Text, nullable=True)
    site_area_m2: Mapped[str | None] = mapped_column(Text, nullable=True)
    utm_zone: Mapped[str | None] = mapped_column(Text, nullable=True)
    utm_northing: Mapped[str | None] = mapped_column(Text, nullable=True)
    utm_easting: Mapped[str | None] = mapped_column(Text, nullable=True)
    datum: Mapped[str | None] = mapped_column(Text, nullable=True)
    nrhp_status: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Ownership / recorder
    owner_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    tenant_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    information_current_as_of: Mapped[str | None] = mapped_column(Text, nullable=True)
    recorder_name_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    recording_organization: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Site description
    site_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cultural_affiliation: Mapped[list[str]] = mapped_column(JSONArrayText, nullable=True)
    cultural_other_prehistoric: Mapped[str | None] = mapped_column(Text, nullable=True)
    cultural_other_historic: Mapped[str | None] = mapped_column(Text, nullable=True)
    site_type: Mapped[list[str]] = mapped_column(JSONArrayText, nullable=True)
    site_type_other: Mapped[str | None] = mapped_column(Text, nullable=True)
    water_source: Mapped[str | None] = mapped_column(Text, nullable=True)
    water_source_other: Mapped[str | None] = mapped_column(Text, nullable=True)
    water_source_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    water_source_distance: Mapped[str | None] = mapped_column(Text, nullable=True)
    topographic_location: Mapped[list[str]] = mapped_column(JSONArrayText, nullable=True)
    topographic_other: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Materials / methods
    materials_reported: Mapped[list[str]] = mapped_column(JSONArrayText, nullable=True)
    materials_other: Mapped[str | None] = mapped_column(Text, nullable=True)
    collection_status: Mapped[str | None] = mapped_column(Text, nullable=True)
    repository: Mapped[str | None] = mapped_column(Text, nullable=True)
    remote_sensing: Mapped[list[str]] = mapped_column(JSONArrayText, nullable=True)
    remote_other: Mapped[str | None] = mapped_column(Text, nullable=True)
    sampling_techniques: Mapped[list[str]] = mapped_column(JSONArrayText, nullable=True)
    sampling_other: Mapped[str | None] = mapped_column(Text, nullable=True)
    soil_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    land_use: Mapped[str | None] = mapped_column(Text, nullable=True)
    land_use_other: Mapped[str | None] = mapped_column(Text, nullable=True)
    contour_elevation: Mapped[str | None] = mapped_column(Text, nullable=True)
    literature_sources: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Features / remains
    features_prehistoric: Mapped[list[str]] = mapped_column(JSONArrayText, nullable=True)
    features_prehistoric_other: Mapped[str | None] = mapped_column(Text, nullable=True)
    features_historic: Mapped[list[str]] = mapped_column(JSONArrayText, nullable=True)
    features_historic_other: Mapped[str | None] = mapped_column(Text, nullable=True)
    floral_faunal_remains: Mapped[str | None] = mapped_column(Text, nullable=True)
    human_remains: Mapped[str | None] = mapped_column(Text, nullable=True)
    artifact_descriptions: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Attachments (0/1)
    artifact_illustrations_attached: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sketch_map_attached: Mapped[int | None] = mapped_column(Integer, nullable=True)
    topo_map_section_attached: Mapped[int | None] = mapped_column(Integer, nullable=True)


Index("ix_site_records_created_at", SiteRecord.created_at)
