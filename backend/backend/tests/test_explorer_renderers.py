from services.catalog.models import Project
from services.explorer.renderers import (
    NO_RESULTS,
    PLACEHOLDER_TITLE,
    placeholder_detail,
    render_detail,
    render_grid,
    render_markers,
    render_result_summary,
    render_timeline,
    restyle,
)


def test_grid_keeps_catalog_order_and_marks_active(catalog):
    cards = render_grid(list(catalog), "ceramics")
    assert [c.project_id for c in cards] == ["privy", "boulevard", "ceramics", "farmstead", "streetcar"]
    assert [c.project_id for c in cards if c.active] == ["ceramics"]
    assert cards[0].meta == "Clock Tower Plaza • 2019-2020"
    assert cards[2].meta == "2021-present"
    assert cards[2].type_label == "Laboratory"


def test_timeline_sorted_by_start_year_stable(catalog):
    entries = render_timeline(list(catalog), None)
    assert [e.project_id for e in entries] == ["boulevard", "farmstead", "privy", "ceramics", "streetcar"]
    assert not any(e.active for e in entries)


def test_timeline_note_falls_back_to_teaser(catalog):
    notes = {e.project_id: e.note for e in render_timeline(list(catalog), None)}
    assert notes["ceramics"] == "Lab season opens."
    assert notes["privy"] == "Boarding house privy."


def test_undated_projects_go_last():
    undated = Project.model_validate({"id": "u", "title": "U", "type": "lab", "era": "Modern"})
    dated = Project.model_validate({"id": "d", "title": "D", "type": "lab", "era": "Modern", "startYear": 2030})
    assert [e.project_id for e in render_timeline([undated, dated], None)] == ["d", "u"]


def test_markers_use_type_icons_and_skip_unplaced():
    placed = Project.model_validate({
        "id": "p", "title": "P", "type": "survey", "era": "Modern", "coordinates": [38.1, -90.2],
    })
    unplaced = Project.model_validate({"id": "q", "title": "Q", "type": "lab", "era": "Modern"})
    markers = render_markers([placed, unplaced], "p")
    assert len(markers) == 1
    assert markers[0].icon_class == "marker marker--survey"
    assert (markers[0].latitude, markers[0].longitude) == (38.1, -90.2)
    assert markers[0].active


def test_unknown_type_falls_back_to_excavation_marker():
    archive = Project.model_validate({"id": "a", "title": "A", "type": "archive", "coordinates": [38.1, -90.2]})
    [marker] = render_markers([archive], None)
    assert marker.icon_class == "marker marker--excavation"

    panel = render_detail(archive)
    assert dict(panel.meta)["Type"] == "archive"
    assert dict(panel.meta)["Era"] == ""


def test_detail_panel_contents(catalog):
    panel = render_detail(catalog.get("privy"))
    assert panel.title == "Clock Tower Privy"
    assert panel.intro == "Boarding house privy."
    assert [label for label, _ in panel.meta] == ["Type", "Years", "Era", "Research focus", "Location"]
    assert dict(panel.meta)["Research focus"] == "Domestic life, Foodways"
    assert panel.summary == "Household refuse from 1880s boarding houses."
    assert panel.discoveries_heading == "Excavation highlights"
    assert panel.artifacts_heading == "Artifact inventory"
    assert panel.artifacts[0].items == ("Bottle", "Ink well (cone form)")
    assert not panel.is_placeholder


def test_detail_panel_without_optional_sections(catalog):
    panel = render_detail(catalog.get("boulevard"))
    assert panel.discoveries == ()
    assert panel.discoveries_heading is None
    assert panel.artifacts == ()
    assert panel.artifacts_heading is None


def test_placeholder_detail():
    panel = placeholder_detail()
    assert panel.title == PLACEHOLDER_TITLE
    assert panel.is_placeholder
    assert panel.as_dict()["meta"] == []


def test_restyle_moves_the_active_flag(catalog):
    cards = render_grid(list(catalog), "privy")
    restyled = restyle(cards, "streetcar")
    assert [c.project_id for c in restyled if c.active] == ["streetcar"]
    assert [c.title for c in restyled] == [c.title for c in cards]


def test_result_summary(catalog):
    projects = list(catalog)
    assert render_result_summary([]) == NO_RESULTS
    assert render_result_summary(projects[:1]) == "Showing 1 project"
    assert render_result_summary(projects) == "Showing 5 projects"
