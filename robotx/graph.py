"""The editable node graph: nodes, the edges between their ports, and the ``.x`` file format."""

from __future__ import annotations

from pathlib import Path

from .dot import render_dot
from .edges import Edge
from .names import parse_node_name
from .nodes import DEFAULT_CONFIG_FILE, Node
from .ports import PortType

_FIELD_SEPARATOR = ","
_NODE_TAG = "N"
_EDGE_TAG = "E"
_NODE_FIELDS = 6
_EDGE_FIELDS = 5
_VIRTUAL_LIBRARY_FIELD = " "


class GraphError(LookupError):
    """Raised when an operation names a node, port or edge the graph does not hold."""


def _parse_count(text: str, what: str, line_number: int) -> int:
    stripped = text.strip()
    if not stripped.isdigit():
        raise GraphError(
            f"line {line_number}: {what} must be a non-negative integer, got {text!r}"
        )
    return int(stripped)


class XGraph:
    """Nodes keyed by full name and the edges that join their ports.

    Nodes are kept in name order; edges are kept in order of their
    (output node, input node) pair, the most recent first within a pair.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}
        self._edges: list[Edge] = []

    def __contains__(self, full_name: object) -> bool:
        return full_name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> list[Node]:
        """All nodes, ordered by full name."""
        return [self._nodes[name] for name in sorted(self._nodes)]

    @property
    def edges(self) -> list[Edge]:
        """All edges, ordered by (output node, input node), newest first within a pair."""
        return sorted(reversed(self._edges), key=lambda edge: edge.key)

    def node(self, full_name: str) -> Node:
        """The node of that full name."""
        try:
            return self._nodes[full_name]
        except KeyError:
            raise GraphError(f"no node named {full_name!r}") from None

    def add_node(
        self,
        full_name: str,
        library: str | None = None,
        config_file: str = DEFAULT_CONFIG_FILE,
    ) -> Node:
        """Add a node, or give an existing virtual node its library.

        Raises InvalidNodeName when the name is not ``NodeClass::NodeName[::ExName]``.
        """
        existing = self._nodes.get(full_name)
        if existing is None:
            parse_node_name(full_name)
            node = Node(full_name, library or None, config_file)
            self._nodes[full_name] = node
            return node
        if existing.is_virtual and library:
            existing.library = library
            existing.config_file = config_file
        return existing

    def remove_node(self, full_name: str) -> Node:
        """Remove a node together with every edge that touches it."""
        node = self.node(full_name)
        del self._nodes[full_name]
        self._edges = [edge for edge in self._edges if not edge.touches(full_name)]
        return node

    def rename_node(self, old_full_name: str, new_full_name: str) -> Node:
        """Change a node's extension name, carrying its edges along."""
        node = self.node(old_full_name)
        if new_full_name == old_full_name:
            return node
        if new_full_name in self._nodes:
            raise GraphError(f"a node named {new_full_name!r} already exists")
        node.rename(new_full_name)
        del self._nodes[old_full_name]
        self._nodes[new_full_name] = node
        self._edges = [edge.renamed(old_full_name, new_full_name) for edge in self._edges]
        return node

    def set_port_num(self, full_name: str, port_type: PortType, count: int) -> list[Edge]:
        """Change a node's port count; edges on ports that go away are removed and returned."""
        node = self.node(full_name)
        removed_edges: list[Edge] = []
        for port in node.set_port_num(PortType(port_type), count):
            removed_edges += self.remove_port(port.port_type, full_name, port.port_id)
        return removed_edges

    def _find_edge(self, edge: Edge) -> Edge | None:
        return next((known for known in self._edges if known == edge), None)

    def add_edge(
        self, output_node: str, output_port: int, input_node: str, input_port: int
    ) -> Edge:
        """Join an output port to an input port; an existing identical edge is reused."""
        source = self.node(output_node)
        target = self.node(input_node)
        if not 0 <= output_port < source.output_port_num:
            raise GraphError(f"{output_node!r} has no output Port_{output_port}")
        if not 0 <= input_port < target.input_port_num:
            raise GraphError(f"{input_node!r} has no input Port_{input_port}")
        edge = Edge(output_node, output_port, input_node, input_port)
        known = self._find_edge(edge)
        if known is not None:
            return known
        self._edges.append(edge)
        return edge

    def remove_edge(
        self, output_node: str, output_port: int, input_node: str, input_port: int
    ) -> Edge:
        """Remove one edge."""
        edge = Edge(output_node, output_port, input_node, input_port)
        if self._find_edge(edge) is None:
            raise GraphError(f"no edge {edge.tooltip()!r}")
        self._edges.remove(edge)
        return edge

    def remove_port(self, port_type: PortType, full_name: str, port_id: int) -> list[Edge]:
        """Remove every edge attached to one port of a node and return them."""
        self.node(full_name)
        port_type = PortType(port_type)

        def attached(edge: Edge) -> bool:
            if port_type is PortType.OUTPUT:
                return edge.output_node == full_name and edge.output_port == port_id
            return edge.input_node == full_name and edge.input_port == port_id

        removed = [edge for edge in self._edges if attached(edge)]
        self._edges = [edge for edge in self._edges if not attached(edge)]
        return removed

    def clear(self) -> None:
        """Remove every node and edge."""
        for full_name in sorted(self._nodes):
            self.remove_node(full_name)

    def load(self, path: str | Path) -> None:
        """Add the nodes and edges described in an ``.x`` file.

        Lines that are neither a node line of six fields nor an edge line of
        five fields are skipped.
        """
        text = Path(path).read_text(encoding="utf-8")
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line:
                continue
            fields = line.split(_FIELD_SEPARATOR)
            tag = fields[0].strip()
            if tag == _NODE_TAG and len(fields) == _NODE_FIELDS:
                full_name = fields[1].strip()
                inputs = _parse_count(fields[4], "input port count", line_number)
                outputs = _parse_count(fields[5], "output port count", line_number)
                self.add_node(full_name, fields[2].strip() or None, fields[3].strip())
                self.set_port_num(full_name, PortType.INPUT, inputs)
                self.set_port_num(full_name, PortType.OUTPUT, outputs)
            elif tag == _EDGE_TAG and len(fields) == _EDGE_FIELDS:
                self.add_edge(
                    fields[1].strip(),
                    _parse_count(fields[2], "output port id", line_number),
                    fields[3].strip(),
                    _parse_count(fields[4], "input port id", line_number),
                )

    def save(self, path: str | Path) -> None:
        """Write the graph as an ``.x`` file: node lines, then edge lines."""
        lines = [
            _FIELD_SEPARATOR.join(
                (
                    _NODE_TAG,
                    node.full_name,
                    _VIRTUAL_LIBRARY_FIELD if node.library is None else node.library,
                    node.config_file,
                    str(node.input_port_num),
                    str(node.output_port_num),
                )
            )
            for node in self.nodes
        ]
        lines += [
            _FIELD_SEPARATOR.join(
                (
                    _EDGE_TAG,
                    edge.output_node,
                    str(edge.output_port),
                    edge.input_node,
                    str(edge.input_port),
                )
            )
            for edge in self.edges
        ]
        Path(path).write_text("".join(line + "\n" for line in lines), encoding="utf-8")

    def to_dot(self) -> str:
        """The DOT text of the graph."""
        return render_dot(self.nodes, self.edges)