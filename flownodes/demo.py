"""Demonstration data types and models for connection colors and styling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from flownodes.core import (
    DataModelRegistry,
    NodeData,
    NodeDataModel,
    NodeDataType,
    PortIndex,
    PortType,
)
from flownodes.style import set_connection_style

COLORS_STYLE = """
{
  "ConnectionStyle": {
    "UseDataDefinedColors": true
  }
}
"""

PLAIN_STYLE = """
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

    "UseDataDefinedColors": false
  }
}
"""


@dataclass(frozen=True)
class MyNodeData(NodeData):
    """Data without a payload, identified only by its type."""

    def type(self) -> NodeDataType:
        return NodeDataType("MyNodeData", "My Node Data")


@dataclass(frozen=True)
class SimpleNodeData(NodeData):
    """A second payload-free data type, distinct from MyNodeData."""

    def type(self) -> NodeDataType:
        return NodeDataType("SimpleData", "Simple Data")


_PORT_DATA = (MyNodeData, SimpleNodeData)


class NaiveDataModel(NodeDataModel):
    """Two inputs and two outputs of different data types, with no logic."""

    def caption(self) -> str:
        return "Naive Data Model"

    def name(self) -> str:
        return "NaiveDataModel"

    def n_ports(self, port_type: PortType) -> int:
        if port_type in (PortType.IN, PortType.OUT):
            return 2
        return 1

    def data_type(self, port_type: PortType, port_index: PortIndex) -> NodeDataType:
        if port_type is PortType.NONE or not 0 <= port_index < len(_PORT_DATA):
            return NodeDataType()
        return _PORT_DATA[port_index]().type()

    def out_data(self, port_index: PortIndex) -> Optional[NodeData]:
        if port_index < 1:
            return MyNodeData()
        return SimpleNodeData()

    def set_in_data(self, data: Optional[NodeData], port_index: PortIndex) -> None:
        """Incoming data is ignored."""


class MyDataModel(NodeDataModel):
    """Three ports on each side, all carrying MyNodeData."""

    def caption(self) -> str:
        return "My Data Model"

    def name(self) -> str:
        return "MyDataModel"

    def n_ports(self, port_type: PortType) -> int:
        return 3

    def data_type(self, port_type: PortType, port_index: PortIndex) -> NodeDataType:
        return MyNodeData().type()

    def out_data(self, port_index: PortIndex) -> Optional[NodeData]:
        return MyNodeData()

    def set_in_data(self, data: Optional[NodeData], port_index: PortIndex) -> None:
        """Incoming data is ignored."""


def register_naive_models() -> DataModelRegistry:
    """Registry holding the naive model used to show data-defined colors."""
    registry = DataModelRegistry()
    registry.register_model(NaiveDataModel)
    return registry


def register_styled_models() -> DataModelRegistry:
    """Registry holding the model used to show a custom style."""
    registry = DataModelRegistry()
    registry.register_model(MyDataModel)
    return registry


def apply_colors_style() -> None:
    """Use the default connection style with colors derived from data types."""
    set_connection_style(COLORS_STYLE)


def apply_plain_style() -> None:
    """Use a fully specified connection style with fixed colors."""
    set_connection_style(PLAIN_STYLE)