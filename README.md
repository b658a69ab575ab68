# flownodes

A small, display-free model of a dataflow graph. Each kind of node is
described by a `NodeDataModel` subclass with typed input and output ports. A
`Connection` links an output port of one node to an input port of another and
delivers data along that link. Where the two port types differ, a type
converter can sit on the link.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `flownodes.core`
  - `PortType` (`NONE`, `IN`, `OUT`) and `opposite_port()`.
  - `NodeDataType`, a frozen `(id, name)` pair.
  - `NodeData`, the base class for values.
  - `NodeValidationState` (`VALID`, `WARNING`, `ERROR`).
  - `Signal`, a list of callbacks with `connect()` and `emit()`.
  - `NodeDataModel`, the abstract base class for models. Every model has its
    own `data_updated`, `data_invalidated`, `input_created`, `input_deleted`,
    `output_created` and `output_deleted` signals.
  - `DataModelRegistry`:
    - `register_model(factory, category="Nodes")` registers a factory. If a
      name is already taken, later registrations under it are ignored. The
      name comes from the factory's `static_name()` when it has one, and
      otherwise from `factory().name()`.
    - `create(name)` returns a new model, or `None` if the name is unknown.
    - `categories()`, `registered_model_creators()` and
      `registered_models_category_association()` report what is registered.
    - `register_type_converter((from_type, to_type), converter)` stores a
      converter, and `get_type_converter(d1, d2)` returns it, or `None` if there
      is none.
- `flownodes.geometry`
  - `Point` and `Rect`, with `normalized()` and `united()`.
  - `ConnectionGeometry`, which holds the two end points and the hover flag.
    - `points_c1_c2()` gives the control points of the cubic curve.
    - `bounding_rect(point_diameter=None)` gives the area the curve covers.
      When no diameter is passed, it uses the current style's
      `point_diameter`.
- `flownodes.style`
  - `ConnectionStyle`, a dataclass of colors and widths. Colors are CSS-style
    strings.
    - `load_json_text()` and `load_json_file()` override fields from the
      `"ConnectionStyle"` section of a JSON document. A color may be given as a
      name or as an `[r, g, b]` array. Invalid JSON and unreadable files are
      logged and skipped.
    - `normal_color_for(type_id)` gives a stable hex color for a data type id.
  - `set_connection_style(json_text)` replaces the shared style with the
    defaults overridden by `json_text`. `connection_style()` returns the
    shared style.
- `flownodes.connection`
  - `ConnectionState` records which end of a connection is still being
    dragged and which node was last under it.
  - `Connection(port_type, node, port_index)` starts a half-attached
    connection.
  - `Connection.between(node_in, in_index, node_out, out_index, converter=None)`
    creates a complete one.
  - Methods on a connection:
    - `save()`, `complete()` and `data_type()`.
    - `set_node_to_port()` and `clear_node()`.
    - `propagate_data()` and `propagate_empty_data()`.
    - `close()`. A connection can also be used as a context manager, which
      closes it on exit.
  - The signals `updated`, `connection_completed` and
    `connection_made_incomplete` are each emitted with the connection itself.
- `flownodes.arithmetic`
  - `DecimalData` and `IntegerData`.
  - `AdditionModel`, `SubtractionModel`, `MultiplicationModel`,
    `DivisionModel` and `ModuloModel`. Each sets its validation state to
    warning when inputs are missing and to error on division by zero.
  - `DecimalToIntegerConverter` and `IntegerToDecimalConverter`.
- `flownodes.calculator`
  - `NumberSourceDataModel`, which parses its text through `set_text()`.
  - `NumberDisplayDataModel`.
  - `register_data_models()`, which registers every calculator model and both
    converters.
  - `set_style()`, which turns on data-defined colors.
- `flownodes.text`
  - `TextData`, `TextSourceDataModel` and `TextDisplayDataModel`.
  - `register_data_models()`.
- `flownodes.demo`
  - `MyNodeData`, `SimpleNodeData`, `NaiveDataModel` and `MyDataModel`.
  - `register_naive_models()` and `register_styled_models()`.
  - `apply_colors_style()` and `apply_plain_style()`.

## Example

A connection needs objects at its ends that have an `id`, a `model`, and the
methods `propagate_data(data, port_index)` and
`reset_reaction_to_connection()`:

```python
import uuid

from flownodes.calculator import (
    NumberDisplayDataModel,
    NumberSourceDataModel,
    register_data_models,
)
from flownodes.connection import Connection


class Node:
    def __init__(self, model):
        self.id = uuid.uuid4()
        self.model = model

    def propagate_data(self, data, port_index):
        self.model.set_in_data(data, port_index)

    def reset_reaction_to_connection(self):
        pass


registry = register_data_models()
print(registry.create("Addition").caption())  # Addition

source = Node(NumberSourceDataModel())
display = Node(NumberDisplayDataModel())

with Connection.between(display, 0, source, 0) as link:
    source.model.set_text("2.5")
    link.propagate_data(source.model.out_data(0))
    print(display.model.text)  # 2.500000

print(display.model.validation_state())  # NodeValidationState.WARNING
```

Closing the connection sends empty data downstream. That is why the display
falls back to the warning state after the `with` block.

## What it does not do

This package models nodes, ports and connections only. It has no:

- scene or graph container that owns nodes and connections;
- drawing, editing window or mouse interaction;
- saving or loading of whole graphs;
- command-line program.

A connection does not push data on its own when it is completed. The caller
decides when to call `propagate_data()`. A connection also does not call the
models' `input_connection_created()` or `output_connection_created()` hooks,
nor the matching `*_deleted()` hooks. Whatever manages the graph must call
them.