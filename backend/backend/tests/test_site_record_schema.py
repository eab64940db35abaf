import pytest
from pydantic import ValidationError

from services.site_records.schemas import SiteRecordIn

REQUIRED = {
    "county": "Boone",
    "informationCurrentAsOf": "2024-01-01",
    "recorderNameAddress": "J. Doe",
}


def test_text_is_trimmed_and_blank_becomes_none():
    rec = SiteRecordIn.model_validate({**REQUIRED, "township": "  T48N ", "datum": "   ", "quadName": ""})
    assert rec.township == "T48N"
    assert rec.datum is None
    assert rec.quad_name is None


def test_numbers_in_text_fields_are_kept_as_text():
    rec = SiteRecordIn.model_validate({**REQUIRED, "utmZone": 15, "utmNorthing": 4278123.5})
    assert rec.utm_zone == "15"
    assert rec.utm_northing == "4278123.5"


def test_missing_required_names_json_keys_in_order():
    rec = SiteRecordIn.model_validate({"county": "  "})
    assert rec.missing_required() == ["county", "informationCurrentAsOf", "recorderNameAddress"]
    assert SiteRecordIn.model_validate(REQUIRED).missing_required() == []


def test_array_fields_normalized():
    rec = SiteRecordIn.model_validate({
        **REQUIRED,
        "culturalAffiliation": [" Woodland ", "", "Historic"],
        "siteType": "Habitation",
    })
    assert rec.cultural_affiliation == ["Woodland", "Historic"]
    assert rec.site_type == ["Habitation"]
    assert rec.remote_sensing is None


def test_form_client_names_are_accepted():
    rec = SiteRecordIn.model_validate({
        "county": "Boone",
        "infoCurrentAsOf": "2024-01-01",
        "recorderNameAddress": "J. Doe",
        "localName": "Field 7",
        "siteTypes": ["Cemetery"],
        "materialReported": ["Lithics"],
        "collection": "Collected",
        "usgsTopoMapSection": "attached",
    })
    assert rec.missing_required() == []
    assert rec.local_name_field_number == "Field 7"
    assert rec.site_type == ["Cemetery"]
    assert rec.materials_reported == ["Lithics"]
    assert rec.collection_status == "Collected"
    assert rec.topo_map_section_attached is True


def test_cultural_periods_merge_into_affiliation():
    rec = SiteRecordIn.model_validate({
        **REQUIRED,
        "culturalPrehistoric": ["Archaic"],
        "culturalHistoric": "Euro-American",
    })
    assert rec.cultural_affiliation == ["Archaic", "Euro-American"]


def test_form_other_affiliation_key_is_kept():
    rec = SiteRecordIn.model_validate({**REQUIRED, "culturalOther": " Mississippian mound "})
    assert rec.cultural_other_prehistoric == "Mississippian mound"
    assert rec.to_columns()["cultural_other_prehistoric"] == "Mississippian mound"


def test_explicit_affiliation_wins_over_periods():
    rec = SiteRecordIn.model_validate({
        **REQUIRED,
        "culturalAffiliation": ["Woodland"],
        "culturalPrehistoric": ["Archaic"],
    })
    assert rec.cultural_affiliation == ["Woodland"]


@pytest.mark.parametrize("value,expected", [
    (True, True), (False, False), ("on", True), ("yes", True),
    ("", False), ("false", False), ("0", False), ("off", False), (1, True), (0, False), (None, False),
])
def test_flag_values(value, expected):
    rec = SiteRecordIn.model_validate({**REQUIRED, "sketchMapAttached": value})
    assert rec.sketch_map_attached is expected


def test_to_columns_stores_flags_as_integers():
    cols = SiteRecordIn.model_validate({**REQUIRED, "artifactIllustrationsAttached": True}).to_columns()
    assert cols["artifact_illustrations_attached"] == 1
    assert cols["sketch_map_attached"] == 0
    assert cols["information_current_as_of"] == "2024-01-01"


def test_wrong_shape_is_rejected():
    with pytest.raises(ValidationError):
        SiteRecordIn.model_validate({**REQUIRED, "township": {"name": "T48N"}})


def test_unknown_keys_are_ignored():
    rec = SiteRecordIn.model_validate({**REQUIRED, "favouriteColour": "ochre"})
    assert not hasattr(rec, "favouriteColour")
