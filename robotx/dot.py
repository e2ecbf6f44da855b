"""Graphviz description of the node graph: record-shaped nodes joined port to port."""

from __future__ import annotations

from typing import Iterable, Mapping

from .edges import Edge
from .nodes import Node

DOT_DEFAULT_DPI = 72.0
GRAPH_NAME = "Robot-X"
GRAPH_ATTRS: Mapping[str, str] = {
    "overlap": "prism",
    "splines": "true",
    "nodesep": "2",
    "ranksep": "2",
    "rankdir": "LR",
}
NODE_SHAPE = "record"


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"port count must not be negative, got {count}")


def _port_fields(title: str, prefix: str, count: int) -> str:
    fields = [title]
    fields += [f"<{prefix}_{port_id}> Port_{port_id}" for port_id in range(count)]
    return " | ".join(fields)


def record_label(node_full_name: str, input_port_num: int, output_port_num: int) -> str:
    """The record label of a node: input ports, its name, then output ports."""
    _check_count(input_port_num)
    _check_count(output_port_num)
    inputs = _port_fields("Input", "in", input_port_num)
    outputs = _port_fields("Output", "out", output_port_num)
    return f"{{{{{inputs}}} | {node_full_name} | {{{outputs}}}}}"


def node_size_attrs(width: float, height: float) -> dict[str, str]:
    """The Graphviz size attributes, in inches, of a node drawn in pixels."""
    if width < 0 or height < 0:
        raise ValueError(f"node size must not be negative, got {width}x{height}")
    return {
        "height": f"{height / DOT_DEFAULT_DPI:g}",
        "width": f"{width / DOT_DEFAULT_DPI:g}",
    }


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _attr_list(attrs: Mapping[str, str]) -> str:
    return ", ".join(f"{key}={_quote(value)}" for key, value in attrs.items())


def tail_port(port_id: int) -> str:
    """The port spec an edge leaves an output port from."""
    return f"out_{port_id}:e"


def head_port(port_id: int) -> str:
    """The port spec an edge enters an input port at."""
    return f"in_{port_id}:w"


def render_dot(nodes: Iterable[Node], edges: Iterable[Edge]) -> str:
    """The DOT text of a directed graph of nodes and the edges between them.

    Raises ValueError when an edge names a node that is not given.
    """
    lines = [f"digraph {_quote(GRAPH_NAME)} {{", f"\tgraph [{_attr_list(GRAPH_ATTRS)}];"]
    known: set[str] = set()
    for node in nodes:
        if node.full_name in known:
            raise ValueError(f"duplicate node {node.full_name!r}")
        known.add(node.full_name)
        attrs = {
            "shape": NODE_SHAPE,
            "label": record_label(node.full_name, node.input_port_num, node.output_port_num),
        }
        lines.append(f"\t{_quote(node.full_name)} [{_attr_list(attrs)}];")
    for edge in edges:
        for end in (edge.output_node, edge.input_node):
            if end not in known:
                raise ValueError(f"edge {edge.tooltip()!r} names unknown node {end!r}")
        attrs = {
            "tailport": tail_port(edge.output_port),
            "headport": head_port(edge.input_port),
        }
        lines.append(
            f"\t{_quote(edge.output_node)} -> {_quote(edge.input_node)} [{_attr_list(attrs)}];"
        )
    lines.append("}")
    return "\n".join(lines) + "\n"