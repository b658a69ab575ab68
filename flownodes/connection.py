"""Connections between node ports and the drag state of a connection."""

from __future__ import annotations

import uuid
from typing import Any, Optional, Protocol, runtime_checkable

from flownodes.core import (
    INVALID_PORT_INDEX,
    NodeData,
    NodeDataModel,
    NodeDataType,
    PortIndex,
    PortType,
    Signal,
    TypeConverter,
    opposite_port,
)
from flownodes.geometry import ConnectionGeometry


@runtime_checkable
class ConnectableNode(Protocol):
    """What a connection needs from the nodes at its ends."""

    id: Any
    model: NodeDataModel

    def propagate_data(self, data: Optional[NodeData], port_index: PortIndex) -> None:
        ...

    def reset_reaction_to_connection(self) -> None:
        ...


class ConnectionState:
    """Which end of a connection is still being dragged, and the node under it."""

    def __init__(self, required_port: PortType = PortType.NONE) -> None:
        self.required_port = required_port
        self.last_hovered_node: Optional[ConnectableNode] = None

    def set_required_port(self, port_type: PortType) -> None:
        self.required_port = port_type

    def set_no_required_port(self) -> None:
        self.required_port = PortType.NONE

    def requires_port(self) -> bool:
        return self.required_port is not PortType.NONE

    def interact_with_node(self, node: Optional[ConnectableNode]) -> None:
        """Remember the node under the dragged end, or forget the previous one."""
        if node is not None:
            self.last_hovered_node = node
        else:
            self.reset_last_hovered_node()

    def reset_last_hovered_node(self) -> None:
        """Tell the last hovered node to drop its reaction and forget it."""
        if self.last_hovered_node is not None:
            self.last_hovered_node.reset_reaction_to_connection()
        self.last_hovered_node = None


class Connection:
    """A link from an output port of one node to an input port of another.

    Signals, each emitted with the connection itself:
    ``updated`` after an end is attached, ``connection_completed`` when both
    ends become attached, ``connection_made_incomplete`` just before a
    complete connection loses an end or is closed.
    """

    def __init__(self, port_type: PortType, node: ConnectableNode, port_index: PortIndex) -> None:
        """Start a connection attached at one end, the other end still to be dragged."""
        self.id = uuid.uuid4()
        self.state = ConnectionState()
        self.geometry = ConnectionGeometry()
        self.updated = Signal()
        self.connection_completed = Signal()
        self.connection_made_incomplete = Signal()
        self._in_node: Optional[ConnectableNode] = None
        self._out_node: Optional[ConnectableNode] = None
        self._in_port_index: PortIndex = INVALID_PORT_INDEX
        self._out_port_index: PortIndex = INVALID_PORT_INDEX
        self._converter: Optional[TypeConverter] = None
        self._closed = False

        self.set_node_to_port(node, port_type, port_index)
        self.set_required_port(opposite_port(port_type))

    @classmethod
    def between(
        cls,
        node_in: ConnectableNode,
        port_index_in: PortIndex,
        node_out: ConnectableNode,
        port_index_out: PortIndex,
        converter: Optional[TypeConverter] = None,
    ) -> "Connection":
        """Create a complete connection from node_out to node_in."""
        connection = cls(PortType.OUT, node_out, port_index_out)
        connection._converter = converter
        connection.set_node_to_port(node_in, PortType.IN, port_index_in)
        return connection

    def save(self) -> dict[str, Any]:
        """Serialisable description of a complete connection; empty otherwise."""
        if not self.complete():
            return {}
        result: dict[str, Any] = {
            "in_id": str(self._in_node.id),
            "in_index": self._in_port_index,
            "out_id": str(self._out_node.id),
            "out_index": self._out_port_index,
        }
        if self._converter is not None:
            def type_json(port_type: PortType) -> dict[str, str]:
                data_type = self.data_type(port_type)
                return {"id": data_type.id, "name": data_type.name}

            result["converter"] = {"in": type_json(PortType.IN), "out": type_json(PortType.OUT)}
        return result

    def complete(self) -> bool:
        return self._in_node is not None and self._out_node is not None

    def set_required_port(self, dragging: PortType) -> None:
        """Mark an end as being dragged, detaching whatever node it had."""
        self.state.set_required_port(dragging)
        if dragging is PortType.OUT:
            self._out_node = None
            self._out_port_index = INVALID_PORT_INDEX
        elif dragging is PortType.IN:
            self._in_node = None
            self._in_port_index = INVALID_PORT_INDEX

    def required_port(self) -> PortType:
        return self.state.required_port

    def port_index(self, port_type: PortType) -> PortIndex:
        if port_type is PortType.IN:
            return self._in_port_index
        if port_type is PortType.OUT:
            return self._out_port_index
        return INVALID_PORT_INDEX

    def node(self, port_type: PortType) -> Optional[ConnectableNode]:
        if port_type is PortType.IN:
            return self._in_node
        if port_type is PortType.OUT:
            return self._out_node
        return None

    def set_node_to_port(
        self, node: ConnectableNode, port_type: PortType, port_index: PortIndex
    ) -> None:
        """Attach an end of the connection to a node port."""
        if port_type is PortType.NONE:
            raise ValueError("cannot attach a node to PortType.NONE")
        was_incomplete = not self.complete()
        if port_type is PortType.OUT:
            self._out_node = node
            self._out_port_index = port_index
        else:
            self._in_node = node
            self._in_port_index = port_index
        self.state.set_no_required_port()

        self.updated.emit(self)
        if self.complete() and was_incomplete:
            self.connection_completed.emit(self)

    def remove_from_nodes(self) -> None:
        """Ask the attached nodes, where they keep a record, to forget this connection."""
        for port_type, node, index in (
            (PortType.IN, self._in_node, self._in_port_index),
            (PortType.OUT, self._out_node, self._out_port_index),
        ):
            erase = getattr(node, "erase_connection", None)
            if erase is not None:
                erase(port_type, index, self.id)

    def clear_node(self, port_type: PortType) -> None:
        """Detach one end of the connection."""
        if port_type is PortType.NONE:
            raise ValueError("a connection has no PortType.NONE end")
        if self.complete():
            self.connection_made_incomplete.emit(self)
        if port_type is PortType.IN:
            self._in_node = None
            self._in_port_index = INVALID_PORT_INDEX
        else:
            self._out_node = None
            self._out_port_index = INVALID_PORT_INDEX

    def data_type(self, port_type: PortType) -> NodeDataType:
        """Type of the data at one end; a half connection answers for its attached end."""
        if self.complete():
            if port_type is PortType.IN:
                return self._in_node.model.data_type(PortType.IN, self._in_port_index)
            return self._out_node.model.data_type(PortType.OUT, self._out_port_index)
        if self._in_node is not None:
            return self._in_node.model.data_type(PortType.IN, self._in_port_index)
        if self._out_node is not None:
            return self._out_node.model.data_type(PortType.OUT, self._out_port_index)
        raise RuntimeError("connection is attached to no node")

    def set_type_converter(self, converter: Optional[TypeConverter]) -> None:
        self._converter = converter

    @property
    def type_converter(self) -> Optional[TypeConverter]:
        return self._converter

    def propagate_data(self, node_data: Optional[NodeData]) -> None:
        """Deliver data to the input node, through the converter if one is set."""
        if self._in_node is None:
            return
        if self._converter is not None:
            node_data = self._converter(node_data)
        self._in_node.propagate_data(node_data, self._in_port_index)

    def propagate_empty_data(self) -> None:
        self.propagate_data(None)

    def close(self) -> None:
        """Tear the connection down: announce it and send empty data downstream."""
        if self._closed:
            return
        self._closed = True
        if self.complete():
            self.connection_made_incomplete.emit(self)
        self.propagate_empty_data()
        self.state.reset_last_hovered_node()

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()