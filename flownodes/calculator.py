"""Number source and display models, and the calculator's registry and style."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flownodes.arithmetic import (
    MISSING_INPUTS,
    AdditionModel,
    DecimalData,
    DecimalToIntegerConverter,
    DivisionModel,
    IntegerData,
    IntegerToDecimalConverter,
    ModuloModel,
    MultiplicationModel,
    SubtractionModel,
)
from flownodes.core import (
    DataModelRegistry,
    NodeData,
    NodeDataModel,
    NodeDataType,
    NodeValidationState,
    PortIndex,
    PortType,
)
from flownodes.style import set_connection_style

_OUT_PORT_INDEX: PortIndex = 0

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


def _parse_number(text: str) -> Optional[float]:
    """Parse a decimal number, or return None when the text is not one."""
    if "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


class NumberSourceDataModel(NodeDataModel):
    """A node with one decimal output, fed from editable text."""

    def __init__(self) -> None:
        self._number: Optional[DecimalData] = None
        self._text = ""
        self.set_text("0.0")

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Change the edited text; a valid number becomes the new output."""
        self._text = text
        number = _parse_number(text)
        if number is not None:
            self._number = DecimalData(number)
            self.data_updated.emit(_OUT_PORT_INDEX)
        else:
            self.data_invalidated.emit(_OUT_PORT_INDEX)

    def caption(self) -> str:
        return "Number Source"

    def caption_visible(self) -> bool:
        return False

    def name(self) -> str:
        return "NumberSource"

    def save(self) -> dict[str, Any]:
        state = super().save()
        if self._number is not None:
            state["number"] = f"{self._number.number:g}"
        return state

    def restore(self, state: Mapping[str, Any]) -> None:
        if "number" not in state:
            return
        value = state["number"]
        text = value if isinstance(value, str) else ""
        if _parse_number(text) is not None:
            self.set_text(text)

    def n_ports(self, port_type: PortType) -> int:
        return 0 if port_type is PortType.IN else 1

    def data_type(self, port_type: PortType, port_index: PortIndex) -> NodeDataType:
        return DecimalData().type()

    def out_data(self, port_index: PortIndex) -> Optional[NodeData]:
        return self._number

    def set_in_data(self, data: Optional[NodeData], port_index: PortIndex) -> None:
        """A source has no inputs; incoming data is ignored."""


class NumberDisplayDataModel(NodeDataModel):
    """A node with one decimal input that shows the number it receives."""

    def __init__(self) -> None:
        self._state = NodeValidationState.WARNING
        self._message = MISSING_INPUTS
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    def caption(self) -> str:
        return "Result"

    def caption_visible(self) -> bool:
        return False

    def name(self) -> str:
        return "Result"

    def n_ports(self, port_type: PortType) -> int:
        return 1 if port_type is PortType.IN else 0

    def data_type(self, port_type: PortType, port_index: PortIndex) -> NodeDataType:
        return DecimalData().type()

    def out_data(self, port_index: PortIndex) -> Optional[NodeData]:
        return None

    def set_in_data(self, data: Optional[NodeData], port_index: PortIndex) -> None:
        if isinstance(data, DecimalData):
            self._state = NodeValidationState.VALID
            self._message = ""
            self._text = data.number_as_text()
        else:
            self._state = NodeValidationState.WARNING
            self._message = MISSING_INPUTS
            self._text = ""

    def validation_state(self) -> NodeValidationState:
        return self._state

    def validation_message(self) -> str:
        return self._message


def register_data_models() -> DataModelRegistry:
    """Registry holding every calculator model and the number converters."""
    registry = DataModelRegistry()
    registry.register_model(NumberSourceDataModel, "Sources")
    registry.register_model(NumberDisplayDataModel, "Displays")
    for model in (
        AdditionModel,
        SubtractionModel,
        MultiplicationModel,
        DivisionModel,
        ModuloModel,
    ):
        registry.register_model(model, "Operators")

    registry.register_type_converter(
        (DecimalData().type(), IntegerData().type()), DecimalToIntegerConverter()
    )
    registry.register_type_converter(
        (IntegerData().type(), DecimalData().type()), IntegerToDecimalConverter()
    )
    return registry


def set_style() -> None:
    """Install the calculator's connection style, with data-defined colors."""
    set_connection_style(CALCULATOR_STYLE)