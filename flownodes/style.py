"""Connection style settings and the style currently in use."""

from __future__ import annotations

import colorsys
import json
import logging
import random
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)

_SECTION = "ConnectionStyle"

_COLOR_KEYS = {
    "ConstructionColor": "construction_color",
    "NormalColor": "normal_color",
    "SelectedColor": "selected_color",
    "SelectedHaloColor": "selected_halo_color",
    "HoveredColor": "hovered_color",
}
_FLOAT_KEYS = {
    "LineWidth": "line_width",
    "ConstructionLineWidth": "construction_line_width",
    "PointDiameter": "point_diameter",
}
_BOOL_KEYS = {"UseDataDefinedColors": "use_data_defined_colors"}

_HUE_RANGE = 0xFF
_LIGHTNESS = 160


def _json_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def _json_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _rgb_hex(red: int, green: int, blue: int) -> str:
    return f"#{red:02x}{green:02x}{blue:02x}"


def _color_from_array(values: list) -> str:
    if len(values) < 3:
        raise ValueError(f"a color array needs three components, got {values!r}")
    rgb = [_json_int(v) for v in values[:3]]
    if not all(0 <= c <= 255 for c in rgb):
        raise ValueError(f"color components must lie in 0..255, got {rgb!r}")
    return _rgb_hex(*rgb)


@dataclass
class ConnectionStyle:
    """Colors and sizes used to draw connections; colors are CSS-style strings."""

    construction_color: str = "gray"
    normal_color: str = "black"
    selected_color: str = "gray"
    selected_halo_color: str = "deepskyblue"
    hovered_color: str = "deepskyblue"
    line_width: float = 3.0
    construction_line_width: float = 2.0
    point_diameter: float = 10.0
    use_data_defined_colors: bool = False

    def load_json_text(self, json_text: Union[str, bytes]) -> None:
        """Override settings from the "ConnectionStyle" section of a JSON document."""
        try:
            document = json.loads(json_text)
        except json.JSONDecodeError as error:
            logger.warning("Invalid style JSON: %s", error)
            return
        section = document.get(_SECTION) if isinstance(document, dict) else None
        if not isinstance(section, dict):
            return

        for key, attribute in _COLOR_KEYS.items():
            value = section.get(key)
            if isinstance(value, list):
                setattr(self, attribute, _color_from_array(value))
            elif isinstance(value, str):
                setattr(self, attribute, value)
        for key, attribute in _FLOAT_KEYS.items():
            value = section.get(key)
            if value is not None:
                setattr(self, attribute, _json_float(value))
        for key, attribute in _BOOL_KEYS.items():
            value = section.get(key)
            if value is not None:
                setattr(self, attribute, value if isinstance(value, bool) else False)

    def load_json_file(self, path: Union[str, Path]) -> None:
        """Load settings from a JSON file; an unreadable file is logged and skipped."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError:
            logger.warning("Couldn't open file %s", path)
            return
        self.load_json_text(text)

    def normal_color_for(self, type_id: str) -> str:
        """A stable color derived from a data type identifier."""
        digest = zlib.crc32(type_id.encode("utf-8"))
        hue = random.Random(digest).randrange(_HUE_RANGE)
        saturation = 120 + digest % 129
        red, green, blue = colorsys.hls_to_rgb(hue / 360, _LIGHTNESS / 255, saturation / 255)
        return _rgb_hex(round(red * 255), round(green * 255), round(blue * 255))


_current_style = ConnectionStyle()


def set_connection_style(json_text: Union[str, bytes]) -> None:
    """Replace the style in use with the defaults overridden by json_text."""
    global _current_style
    style = ConnectionStyle()
    style.load_json_text(json_text)
    _current_style = style


def connection_style() -> ConnectionStyle:
    """The connection style currently in use."""
    return _current_style