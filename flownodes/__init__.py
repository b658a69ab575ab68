"""Dataflow node graph model: typed ports, connections, converters, styles and example nodes."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "calculator",
    "connection",
    "core",
    "demo",
    "geometry",
    "style",
    "text",
]