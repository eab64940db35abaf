"""Site recordation form table.

Revision ID: 0001_site_records
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


revision = "0001_site_records"
down_revision = None
branch_labels = None
depends_on = None

TEXT_COLUMNS = (
    "county",
    "local_name_field_number",
    "shpo_site_number",
    "section_land_grant",
    "township",
    "range",
    "is_update",
    "quad_name",
    "topo_date",
    "site_area_m2",
    "utm_zone",
    "utm_northing",
    "utm_easting",
    "datum",
    "nrhp_status",
    "owner_address",
    "tenant_address",
    "information_current_as_of",
    "recorder_name_address",
    "recording_organization",
    "site_description",
    "cultural_affiliation",
    "cultural_other_prehistoric",
    "cultural_other_historic",
    "site_type",
    "site_type_other",
    "water_source",
    "water_source_other",
    "water_source_name",
    "water_source_distance",
    "topographic_location",
    "topographic_other",
    "materials_reported",
    "materials_other",
    "collection_status",
    "repository",
    "remote_sensing",
    "remote_other",
    "sampling_techniques",
    "sampling_other",
    "soil_type",
    "land_use",
    "land_use_other",
    "contour_elevation",
    "literature_sources",
    "features_prehistoric",
    "features_prehistoric_other",
    "features_historic",
    "features_historic_other",
    "floral_faunal_remains",
    "human_remains",
    "artifact_descriptions",
)

FLAG_COLUMNS = (
    "artifact_illustrations_attached",
    "sketch_map_attached",
    "topo_map_section_attached",
)


def upgrade():
    op.create_table(
        "site_records",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        *[sa.Column(name, sa.Text(), nullable=True) for name in TEXT_COLUMNS],
        *[sa.Column(name, sa.Integer(), nullable=True) for name in FLAG_COLUMNS],
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
    )
    op.create_index("ix_site_records_created_at", "site_records", ["created_at"])


def downgrade():
    op.drop_index("ix_site_records_created_at", table_name="site_records")
    op.drop_table("site_records")
