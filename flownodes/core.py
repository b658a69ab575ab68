"""Port types, node data, data models and the registry that creates them."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

PortIndex = int
INVALID_PORT_INDEX: PortIndex = -1
DEFAULT_CATEGORY = "Nodes"


class PortType(enum.Enum):
    """Which side of a node a port sits on."""

    NONE = "none"
    IN = "in"
    OUT = "out"


def opposite_port(port_type: PortType) -> PortType:
    """Return the port type on the other end of a connection."""
    if port_type is PortType.IN:
        return PortType.OUT
    if port_type is PortType.OUT:
        return PortType.IN
    return PortType.NONE


@dataclass(frozen=True)
class NodeDataType:
    """Identifier and display name of the data carried by a port."""

    id: str = ""
    name: str = ""


class NodeData:
    """Base class for values passed along connections."""

    def type(self) -> NodeDataType:
        return NodeDataType()


TypeConverter = Callable[[Optional[NodeData]], Optional[NodeData]]


class NodeValidationState(enum.Enum):
    VALID = "valid"
    WARNING = "warning"
    ERROR = "error"


class Signal:
    """A minimal list of callbacks invoked in connection order."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> Callable[..., Any]:
        self._callbacks.append(callback)
        return callback

    def emit(self, *args: Any) -> None:
        for callback in list(self._callbacks):
            callback(*args)


class _InstanceSignal:
    """Gives every instance its own Signal, created on first access."""

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        signal = instance.__dict__.get(self._name)
        if signal is None:
            signal = instance.__dict__[self._name] = Signal()
        return signal


class NodeDataModel(ABC):
    """Describes the ports and behaviour of one kind of node."""

    data_updated = _InstanceSignal()
    data_invalidated = _InstanceSignal()
    input_created = _InstanceSignal()
    input_deleted = _InstanceSignal()
    output_created = _InstanceSignal()
    output_deleted = _InstanceSignal()

    port_captions_visible: bool = False

    @abstractmethod
    def caption(self) -> str:
        """Text shown in the node's title."""

    @abstractmethod
    def name(self) -> str:
        """Unique name under which the model is registered."""

    def caption_visible(self) -> bool:
        return True

    def port_caption(self, port_type: PortType, port_index: PortIndex) -> str:
        return ""

    def port_caption_visible(self, port_type: PortType, port_index: PortIndex) -> bool:
        return self.port_captions_visible

    @abstractmethod
    def n_ports(self, port_type: PortType) -> int:
        """Number of ports of the given type."""

    @abstractmethod
    def data_type(self, port_type: PortType, port_index: PortIndex) -> NodeDataType:
        """Type of the data at the given port."""

    @abstractmethod
    def out_data(self, port_index: PortIndex) -> Optional[NodeData]:
        """Data currently available at an output port."""

    @abstractmethod
    def set_in_data(self, data: Optional[NodeData], port_index: PortIndex) -> None:
        """Receive data arriving at an input port."""

    def validation_state(self) -> NodeValidationState:
        return NodeValidationState.VALID

    def validation_message(self) -> str:
        return ""

    def save(self) -> dict[str, Any]:
        return {"name": self.name()}

    def restore(self, state: Mapping[str, Any]) -> None:
        """Restore model state saved by save(); the base model keeps none."""

    def resizable(self) -> bool:
        return False

    def input_connection_created(self, connection: Any) -> None:
        """Called when a connection to one of the inputs is completed."""
        self.input_created.emit(connection)

    def input_connection_deleted(self, connection: Any) -> None:
        """Called when a connection to one of the inputs goes away."""
        self.input_deleted.emit(connection)

    def output_connection_created(self, connection: Any) -> None:
        """Called when a connection from one of the outputs is completed."""
        self.output_created.emit(connection)

    def output_connection_deleted(self, connection: Any) -> None:
        """Called when a connection from one of the outputs goes away."""
        self.output_deleted.emit(connection)


ModelFactory = Callable[[], NodeDataModel]


def _registered_name(factory: ModelFactory) -> str:
    static_name = getattr(factory, "static_name", None)
    if callable(static_name):
        return static_name()
    return factory().name()


class DataModelRegistry:
    """Registered model factories, their categories and type converters."""

    def __init__(self) -> None:
        self._creators: dict[str, ModelFactory] = {}
        self._model_categories: dict[str, str] = {}
        self._categories: set[str] = set()
        self._converters: dict[tuple[NodeDataType, NodeDataType], TypeConverter] = {}

    def register_model(self, factory: ModelFactory, category: str = DEFAULT_CATEGORY) -> None:
        """Register a model factory; a name that is already taken is ignored."""
        name = _registered_name(factory)
        if name in self._creators:
            return
        self._creators[name] = factory
        self._categories.add(category)
        self._model_categories[name] = category

    def create(self, model_name: str) -> Optional[NodeDataModel]:
        """Create a new model by registered name, or return None if unknown."""
        factory = self._creators.get(model_name)
        return factory() if factory is not None else None

    def registered_model_creators(self) -> Mapping[str, ModelFactory]:
        return MappingProxyType(self._creators)

    def registered_models_category_association(self) -> Mapping[str, str]:
        return MappingProxyType(self._model_categories)

    def categories(self) -> frozenset[str]:
        return frozenset(self._categories)

    def register_type_converter(
        self, type_pair: tuple[NodeDataType, NodeDataType], converter: TypeConverter
    ) -> None:
        self._converters[tuple(type_pair)] = converter

    def get_type_converter(self, d1: NodeDataType, d2: NodeDataType) -> Optional[TypeConverter]:
        """Return the converter from d1 to d2, or None if none is registered."""
        return self._converters.get((d1, d2))