import pytest

from flownodes.core import (
    DataModelRegistry,
    NodeData,
    NodeDataModel,
    NodeDataType,
    NodeValidationState,
    PortType,
    Signal,
    opposite_port,
)


class StubNodeDataModel(NodeDataModel):
    def __init__(self):
        self._name = "name"
        self._caption = "caption"

    def name(self):
        return self._name

    def caption(self):
        return self._caption

    def n_ports(self, port_type):
        return 0

    def data_type(self, port_type, port_index):
        return NodeDataType()

    def out_data(self, port_index):
        return None

    def set_in_data(self, data, port_index):
        pass


class StubModelStaticName(StubNodeDataModel):
    @staticmethod
    def static_name():
        return "Name"


class OtherStub(StubNodeDataModel):
    def __init__(self):
        super().__init__()
        self._name = "other"


def test_register_stub_model():
    registry = DataModelRegistry()
    registry.register_model(StubNodeDataModel)
    model = registry.create("name")
    assert model.name() == "name"


def test_register_stub_model_with_static_name():
    registry = DataModelRegistry()
    registry.register_model(StubModelStaticName)
    model = registry.create("Name")
    assert model.name() == "name"
    assert registry.create("name") is None


def test_create_unknown_returns_none():
    assert DataModelRegistry().create("missing") is None


def test_create_returns_fresh_instances():
    registry = DataModelRegistry()
    registry.register_model(StubNodeDataModel)
    first = registry.create("name")
    second = registry.create("name")
    first._name = "changed"
    assert first.name() == "changed"
    assert second.name() == "name"


def test_default_category_and_association():
    registry = DataModelRegistry()
    registry.register_model(StubNodeDataModel)
    registry.register_model(OtherStub, "Operators")
    assert registry.categories() == frozenset({"Nodes", "Operators"})
    assert dict(registry.registered_models_category_association()) == {
        "name": "Nodes",
        "other": "Operators",
    }
    assert set(registry.registered_model_creators()) == {"name", "other"}


def test_duplicate_registration_keeps_first():
    registry = DataModelRegistry()
    registry.register_model(StubNodeDataModel, "First")
    registry.register_model(StubNodeDataModel, "Second")
    assert registry.registered_models_category_association()["name"] == "First"
    assert registry.categories() == frozenset({"First"})


def test_type_converters_are_directional():
    registry = DataModelRegistry()
    decimal = NodeDataType("decimal", "Decimal")
    integer = NodeDataType("integer", "Integer")

    def converter(data):
        return data

    registry.register_type_converter((decimal, integer), converter)
    assert registry.get_type_converter(decimal, integer) is converter
    assert registry.get_type_converter(integer, decimal) is None


def test_type_converter_lookup_uses_value_equality():
    registry = DataModelRegistry()

    def converter(data):
        return data

    registry.register_type_converter((NodeDataType("a", "A"), NodeDataType("b", "B")), converter)
    assert registry.get_type_converter(NodeDataType("a", "A"), NodeDataType("b", "B")) is converter


@pytest.mark.parametrize(
    "port, expected",
    [(PortType.IN, PortType.OUT), (PortType.OUT, PortType.IN), (PortType.NONE, PortType.NONE)],
)
def test_opposite_port(port, expected):
    assert opposite_port(port) is expected


def test_model_defaults():
    model = StubNodeDataModel()
    assert NodeDataModel.save(model) == {"name": "name"}
    assert NodeDataModel.validation_state(model) is NodeValidationState.VALID
    assert NodeDataModel.validation_message(model) == ""
    assert NodeDataModel.caption_visible(model) is True
    assert NodeDataModel.port_caption(model, PortType.IN, 0) == ""
    assert NodeDataModel.port_caption_visible(model, PortType.IN, 0) is False
    assert NodeDataModel.resizable(model) is False


def test_abstract_model_cannot_be_instantiated():
    with pytest.raises(TypeError):
        NodeDataModel()


def test_base_node_data_type_is_empty():
    assert NodeData().type() == NodeDataType("", "")


def test_signal_emits_in_order_with_arguments():
    signal = Signal()
    calls = []
    signal.connect(lambda value: calls.append(("first", value)))
    signal.connect(lambda value: calls.append(("second", value)))
    signal.emit(7)
    assert calls == [("first", 7), ("second", 7)]


def test_model_signals_are_per_instance():
    first, second = StubNodeDataModel(), StubNodeDataModel()
    received = []
    Signal.connect(first.data_updated, received.append)
    Signal.emit(second.data_updated, 1)
    Signal.emit(first.data_updated, 0)
    assert received == [0]
    assert first.data_updated is first.data_updated