import pytest

from flownodes.arithmetic import (
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
from flownodes.core import NodeDataType, NodeValidationState, PortType


def _feed(model, a, b):
    model.set_in_data(a, 0)
    model.set_in_data(b, 1)
    return model.out_data(0)


def test_data_types():
    assert DecimalData(1.0).type() == NodeDataType("decimal", "Decimal")
    assert IntegerData(1).type() == NodeDataType("integer", "Integer")


def test_number_as_text():
    assert DecimalData(1.5).number_as_text() == "1.500000"
    assert IntegerData(42).number_as_text() == "42"


def test_initial_state_is_warning():
    model = AdditionModel()
    assert model.validation_state() is NodeValidationState.WARNING
    assert model.validation_message() == "Missing or incorrect inputs"
    assert model.out_data(0) is None


def test_port_counts():
    model = MultiplicationModel()
    assert model.n_ports(PortType.IN) == 2
    assert model.n_ports(PortType.OUT) == 1
    assert ModuloModel().n_ports(PortType.IN) == 2
    assert ModuloModel().n_ports(PortType.OUT) == 1


def test_addition_is_commutative_and_valid():
    a, b = DecimalData(2.25), DecimalData(7.5)
    first = _feed(AdditionModel(), a, b)
    second = _feed(AdditionModel(), b, a)
    assert first == second
    model = AdditionModel()
    _feed(model, a, b)
    assert model.validation_state() is NodeValidationState.VALID
    assert model.validation_message() == ""


def test_subtraction_inverts_addition():
    a, b = DecimalData(10.0), DecimalData(4.0)
    difference = _feed(SubtractionModel(), a, b)
    total = _feed(AdditionModel(), difference, b)
    assert total.number == a.number


def test_multiplication_by_one_is_identity():
    a = DecimalData(3.75)
    assert _feed(MultiplicationModel(), a, DecimalData(1.0)) == a


def test_division_round_trip():
    a, b = DecimalData(9.0), DecimalData(3.0)
    quotient = _feed(DivisionModel(), a, b)
    assert _feed(MultiplicationModel(), quotient, b).number == pytest.approx(a.number)


def test_division_by_zero_is_error():
    model = DivisionModel()
    _feed(model, DecimalData(5.0), DecimalData(0.0))
    assert model.validation_state() is NodeValidationState.ERROR
    assert model.validation_message() == "Division by zero error"
    assert model.out_data(0) is None


def test_division_zero_divisor_without_dividend_is_error():
    model = DivisionModel()
    model.set_in_data(DecimalData(0.0), 1)
    assert model.validation_state() is NodeValidationState.ERROR


def test_wrong_data_type_clears_result():
    model = AdditionModel()
    _feed(model, DecimalData(1.0), DecimalData(2.0))
    model.set_in_data(IntegerData(1), 1)
    assert model.out_data(0) is None
    assert model.validation_state() is NodeValidationState.WARNING


def test_compute_emits_data_updated_on_port_zero():
    model = AdditionModel()
    calls = []
    model.data_updated.connect(calls.append)
    model.set_in_data(DecimalData(1.0), 0)
    assert calls == [0]


def test_signals_are_per_instance():
    first, second = AdditionModel(), AdditionModel()
    calls = []
    first.data_updated.connect(calls.append)
    second.set_in_data(DecimalData(1.0), 0)
    assert calls == []


def test_captions():
    assert DivisionModel().port_caption(PortType.IN, 0) == "Dividend"
    assert DivisionModel().port_caption(PortType.IN, 1) == "Divisor"
    assert SubtractionModel().port_caption(PortType.IN, 0) == "Minuend"
    assert SubtractionModel().port_caption(PortType.IN, 1) == "Subtrahend"
    assert ModuloModel().port_caption(PortType.OUT, 0) == "Result"
    assert DivisionModel().port_caption_visible(PortType.IN, 0) is True
    assert AdditionModel().port_caption_visible(PortType.IN, 0) is False
    assert AdditionModel().name() == "Addition"
    assert ModuloModel().caption() == "Modulo"


def test_modulo_valid_and_save():
    model = ModuloModel()
    result = _feed(model, IntegerData(9), IntegerData(3))
    assert result == IntegerData(0)
    assert model.validation_state() is NodeValidationState.VALID
    assert model.save() == {"name": "Modulo"}
    assert model.data_type(PortType.IN, 0) == IntegerData().type()


def test_modulo_sign_follows_dividend():
    assert _feed(ModuloModel(), IntegerData(-7), IntegerData(3)).number == -1


def test_modulo_by_zero_is_error():
    model = ModuloModel()
    _feed(model, IntegerData(4), IntegerData(0))
    assert model.validation_state() is NodeValidationState.ERROR
    assert model.validation_message() == "Division by zero error"
    assert model.out_data(0) is None


def test_decimal_to_integer_truncates():
    convert = DecimalToIntegerConverter()
    assert convert(DecimalData(2.9)) == IntegerData(2)
    assert convert(IntegerData(2)) is None
    assert convert(None) is None


def test_converters_round_trip():
    to_decimal, to_integer = IntegerToDecimalConverter(), DecimalToIntegerConverter()
    original = IntegerData(17)
    assert to_integer(to_decimal(original)) == original
    assert to_decimal(DecimalData(1.0)) is None