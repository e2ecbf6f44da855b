"""Edges joining an output port of one node to an input port of another."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Edge:
    """A connection from ``output_node``'s output port to ``input_node``'s input port."""

    output_node: str
    output_port: int
    input_node: str
    input_port: int

    @property
    def key(self) -> tuple[str, str]:
        """The (output node, input node) pair the edge is indexed by."""
        return (self.output_node, self.input_node)

    def tooltip(self) -> str:
        """The text shown when hovering the edge."""
        return (
            f"{self.output_node}~Port_{self.output_port} -> "
            f"{self.input_node}~Port_{self.input_port}"
        )

    def touches(self, node_full_name: str) -> bool:
        """Whether either end of the edge belongs to the named node."""
        return node_full_name in (self.output_node, self.input_node)

    def renamed(self, old_full_name: str, new_full_name: str) -> "Edge":
        """Return a copy with every end on ``old_full_name`` moved to ``new_full_name``."""
        edge = self
        if edge.output_node == old_full_name:
            edge = replace(edge, output_node=new_full_name)
        if edge.input_node == old_full_name:
            edge = replace(edge, input_node=new_full_name)
        return edge