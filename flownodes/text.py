"""Text data with a source model that emits it and a display model that shows it."""

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

_OUT_PORT_INDEX: PortIndex = 0


@dataclass(frozen=True)
class TextData(NodeData):
    """A piece of text travelling along a connection."""

    text: str = ""

    def type(self) -> NodeDataType:
        return NodeDataType("text", "Text")


class TextSourceDataModel(NodeDataModel):
    """A node with one text output holding editable text."""

    def __init__(self) -> None:
        self._text = "Default Text"

    @staticmethod
    def static_name() -> str:
        return "TextSourceDataModel"

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Change the text and announce the new output."""
        self._text = text
        self.data_updated.emit(_OUT_PORT_INDEX)

    def caption(self) -> str:
        return "Text Source"

    def caption_visible(self) -> bool:
        return False

    def name(self) -> str:
        return self.static_name()

    def n_ports(self, port_type: PortType) -> int:
        return 0 if port_type is PortType.IN else 1

    def data_type(self, port_type: PortType, port_index: PortIndex) -> NodeDataType:
        return TextData().type()

    def out_data(self, port_index: PortIndex) -> Optional[NodeData]:
        return TextData(self._text)

    def set_in_data(self, data: Optional[NodeData], port_index: PortIndex) -> None:
        """A source has no inputs; incoming data is ignored."""


class TextDisplayDataModel(NodeDataModel):
    """A node with one text input that shows the text it receives."""

    def __init__(self) -> None:
        self._text = "Resulting Text"

    @staticmethod
    def static_name() -> str:
        return "TextDisplayDataModel"

    @property
    def text(self) -> str:
        return self._text

    def caption(self) -> str:
        return "Text Display"

    def caption_visible(self) -> bool:
        return False

    def name(self) -> str:
        return self.static_name()

    def n_ports(self, port_type: PortType) -> int:
        return 1 if port_type is PortType.IN else 0

    def data_type(self, port_type: PortType, port_index: PortIndex) -> NodeDataType:
        return TextData().type()

    def out_data(self, port_index: PortIndex) -> Optional[NodeData]:
        return None

    def set_in_data(self, data: Optional[NodeData], port_index: PortIndex) -> None:
        self._text = data.text if isinstance(data, TextData) else ""


def register_data_models() -> DataModelRegistry:
    """Registry holding the text source and display models."""
    registry = DataModelRegistry()
    registry.register_model(TextSourceDataModel)
    registry.register_model(TextDisplayDataModel)
    return registry