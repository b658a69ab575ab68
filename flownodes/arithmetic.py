"""Numeric node data, arithmetic operation models and number type converters."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Optional

from flownodes.core import (
    NodeData,
    NodeDataModel,
    NodeDataType,
    NodeValidationState,
    PortIndex,
    PortType,
)

MISSING_INPUTS = "Missing or incorrect inputs"
DIVISION_BY_ZERO = "Division by zero error"

_OUT_PORT_INDEX: PortIndex = 0


@dataclass(frozen=True)
class DecimalData(NodeData):
    """A floating-point number travelling along a connection."""

    number: float = 0.0

    def type(self) -> NodeDataType:
        return NodeDataType("decimal", "Decimal")

    def number_as_text(self) -> str:
        return f"{self.number:.6f}"


@dataclass(frozen=True)
class IntegerData(NodeData):
    """An integer travelling along a connection."""

    number: int = 0

    def type(self) -> NodeDataType:
        return NodeDataType("integer", "Integer")

    def number_as_text(self) -> str:
        return str(self.number)


def _operand_caption(port_type: PortType, port_index: PortIndex, first: str, second: str) -> str:
    if port_type is PortType.IN:
        if port_index == 0:
            return first
        if port_index == 1:
            return second
        return ""
    if port_type is PortType.OUT:
        return "Result"
    return ""


def _truncated_remainder(dividend: int, divisor: int) -> int:
    """Remainder whose sign follows the dividend, as with truncating division."""
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


class MathOperationDataModel(NodeDataModel):
    """Two decimal inputs, one decimal output, recomputed whenever an input changes."""

    def __init__(self) -> None:
        self._number1: Optional[DecimalData] = None
        self._number2: Optional[DecimalData] = None
        self._result: Optional[DecimalData] = None
        self._state = NodeValidationState.WARNING
        self._message = MISSING_INPUTS

    def n_ports(self, port_type: PortType) -> int:
        return 2 if port_type is PortType.IN else 1

    def data_type(self, port_type: PortType, port_index: PortIndex) -> NodeDataType:
        return DecimalData().type()

    def out_data(self, port_index: PortIndex) -> Optional[NodeData]:
        return self._result

    def set_in_data(self, data: Optional[NodeData], port_index: PortIndex) -> None:
        number = data if isinstance(data, DecimalData) else None
        if port_index == 0:
            self._number1 = number
        else:
            self._number2 = number
        self.compute()

    def validation_state(self) -> NodeValidationState:
        return self._state

    def validation_message(self) -> str:
        return self._message

    def _set_valid(self, value: float) -> None:
        self._state = NodeValidationState.VALID
        self._message = ""
        self._result = DecimalData(value)

    def _set_invalid(self, state: NodeValidationState, message: str) -> None:
        self._state = state
        self._message = message
        self._result = None

    @abstractmethod
    def compute(self) -> None:
        """Recalculate the result from the current inputs and announce it."""


class _BinaryOperationModel(MathOperationDataModel):
    """A math operation that is valid as soon as both operands are present."""

    @abstractmethod
    def _apply(self, a: float, b: float) -> float:
        """Combine the two operands."""

    def compute(self) -> None:
        n1, n2 = self._number1, self._number2
        if n1 is not None and n2 is not None:
            self._set_valid(self._apply(n1.number, n2.number))
        else:
            self._set_invalid(NodeValidationState.WARNING, MISSING_INPUTS)
        self.data_updated.emit(_OUT_PORT_INDEX)


class AdditionModel(_BinaryOperationModel):
    def caption(self) -> str:
        return "Addition"

    def name(self) -> str:
        return "Addition"

    def _apply(self, a: float, b: float) -> float:
        return a + b


class SubtractionModel(_BinaryOperationModel):
    port_captions_visible = True

    def caption(self) -> str:
        return "Subtraction"

    def name(self) -> str:
        return "Subtraction"

    def port_caption(self, port_type: PortType, port_index: PortIndex) -> str:
        return _operand_caption(port_type, port_index, "Minuend", "Subtrahend")

    def _apply(self, a: float, b: float) -> float:
        return a - b


class MultiplicationModel(_BinaryOperationModel):
    def caption(self) -> str:
        return "Multiplication"

    def name(self) -> str:
        return "Multiplication"

    def _apply(self, a: float, b: float) -> float:
        return a * b


class DivisionModel(MathOperationDataModel):
    port_captions_visible = True

    def caption(self) -> str:
        return "Division"

    def name(self) -> str:
        return "Division"

    def port_caption(self, port_type: PortType, port_index: PortIndex) -> str:
        return _operand_caption(port_type, port_index, "Dividend", "Divisor")

    def compute(self) -> None:
        n1, n2 = self._number1, self._number2
        if n2 is not None and n2.number == 0.0:
            self._set_invalid(NodeValidationState.ERROR, DIVISION_BY_ZERO)
        elif n1 is not None and n2 is not None:
            self._set_valid(n1.number / n2.number)
        else:
            self._set_invalid(NodeValidationState.WARNING, MISSING_INPUTS)
        self.data_updated.emit(_OUT_PORT_INDEX)


class ModuloModel(NodeDataModel):
    """Integer remainder of a dividend by a divisor."""

    port_captions_visible = True

    def __init__(self) -> None:
        self._number1: Optional[IntegerData] = None
        self._number2: Optional[IntegerData] = None
        self._result: Optional[IntegerData] = None
        self._state = NodeValidationState.WARNING
        self._message = MISSING_INPUTS

    def caption(self) -> str:
        return "Modulo"

    def name(self) -> str:
        return "Modulo"

    def caption_visible(self) -> bool:
        return True

    def port_caption(self, port_type: PortType, port_index: PortIndex) -> str:
        return _operand_caption(port_type, port_index, "Dividend", "Divisor")

    def n_ports(self, port_type: PortType) -> int:
        return 2 if port_type is PortType.IN else 1

    def data_type(self, port_type: PortType, port_index: PortIndex) -> NodeDataType:
        return IntegerData().type()

    def out_data(self, port_index: PortIndex) -> Optional[NodeData]:
        return self._result

    def set_in_data(self, data: Optional[NodeData], port_index: PortIndex) -> None:
        number = data if isinstance(data, IntegerData) else None
        if port_index == 0:
            self._number1 = number
        else:
            self._number2 = number

        n1, n2 = self._number1, self._number2
        if n2 is not None and n2.number == 0:
            self._state = NodeValidationState.ERROR
            self._message = DIVISION_BY_ZERO
            self._result = None
        elif n1 is not None and n2 is not None:
            self._state = NodeValidationState.VALID
            self._message = ""
            self._result = IntegerData(_truncated_remainder(n1.number, n2.number))
        else:
            self._state = NodeValidationState.WARNING
            self._message = MISSING_INPUTS
            self._result = None
        self.data_updated.emit(_OUT_PORT_INDEX)

    def validation_state(self) -> NodeValidationState:
        return self._state

    def validation_message(self) -> str:
        return self._message


class DecimalToIntegerConverter:
    """Turns decimal data into integer data, truncating toward zero."""

    def __init__(self) -> None:
        self._integer: Optional[IntegerData] = None

    def __call__(self, data: Optional[NodeData]) -> Optional[NodeData]:
        if isinstance(data, DecimalData):
            self._integer = IntegerData(int(data.number))
        else:
            self._integer = None
        return self._integer


class IntegerToDecimalConverter:
    """Turns integer data into decimal data."""

    def __init__(self) -> None:
        self._decimal: Optional[DecimalData] = None

    def __call__(self, data: Optional[NodeData]) -> Optional[NodeData]:
        if isinstance(data, IntegerData):
            self._decimal = DecimalData(float(data.number))
        else:
            self._decimal = None
        return self._decimal