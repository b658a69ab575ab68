import json
import re

import pytest

from flownodes.style import ConnectionStyle, connection_style, set_connection_style

CALCULATOR_STYLE = """
{
  "ConnectionStyle": {
    "ConstructionColor": "gray",
    "NormalColor": "black",
    "SelectedColor": "gray",
    "SelectedHaloColor": "deepskyblue",
    "HoveredColor": "deepskyblue",
    "LineWidth": 3.0,
    "ConstructionLineWidth": 2.0,
    "PointDiameter": 10.0,
    "UseDataDefinedColors": true
  }
}
"""


@pytest.fixture
def reset_style():
    yield
    set_connection_style("{}")


def test_load_full_style():
    style = ConnectionStyle()
    style.load_json_text(CALCULATOR_STYLE)
    assert style.construction_color == "gray"
    assert style.normal_color == "black"
    assert style.selected_halo_color == "deepskyblue"
    assert style.line_width == 3.0
    assert style.construction_line_width == 2.0
    assert style.point_diameter == 10.0
    assert style.use_data_defined_colors is True


def test_partial_style_keeps_defaults():
    style = ConnectionStyle()
    style.load_json_text('{"ConnectionStyle": {"UseDataDefinedColors": true}}')
    defaults = ConnectionStyle()
    assert style.use_data_defined_colors is True
    assert style.normal_color == defaults.normal_color
    assert style.point_diameter == defaults.point_diameter


def test_array_color_becomes_hex():
    style = ConnectionStyle()
    style.load_json_text('{"ConnectionStyle": {"NormalColor": [255, 0, 0]}}')
    assert style.normal_color == "#ff0000"


def test_short_color_array_raises():
    with pytest.raises(ValueError):
        ConnectionStyle().load_json_text('{"ConnectionStyle": {"NormalColor": [1, 2]}}')


def test_null_values_are_skipped():
    style = ConnectionStyle()
    style.load_json_text('{"ConnectionStyle": {"LineWidth": null, "HoveredColor": null}}')
    assert style == ConnectionStyle()


def test_invalid_json_leaves_style_unchanged():
    style = ConnectionStyle()
    style.load_json_text("{not json")
    assert style == ConnectionStyle()


def test_load_json_file_round_trip(tmp_path):
    path = tmp_path / "style.json"
    path.write_text(json.dumps({"ConnectionStyle": {"PointDiameter": 6.5, "NormalColor": "navy"}}))
    style = ConnectionStyle()
    style.load_json_file(path)
    assert style.point_diameter == 6.5
    assert style.normal_color == "navy"


def test_missing_file_leaves_style_unchanged(tmp_path):
    style = ConnectionStyle()
    style.load_json_file(tmp_path / "absent.json")
    assert style == ConnectionStyle()


def test_normal_color_for_is_stable_hex():
    style = ConnectionStyle()
    color = style.normal_color_for("decimal")
    assert re.fullmatch(r"#[0-9a-f]{6}", color)
    assert style.normal_color_for("decimal") == color


@pytest.mark.parametrize("type_id", ["decimal", "integer", "text", ""])
def test_normal_color_for_has_fixed_lightness(type_id):
    color = ConnectionStyle().normal_color_for(type_id)
    rgb = [int(color[i:i + 2], 16) for i in (1, 3, 5)]
    assert abs((max(rgb) + min(rgb)) / 2 - 160) <= 1


def test_set_connection_style_replaces_current(reset_style):
    set_connection_style(CALCULATOR_STYLE)
    assert connection_style().use_data_defined_colors is True
    set_connection_style("{}")
    assert connection_style() == ConnectionStyle()