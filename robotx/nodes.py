"""Nodes of the graph: their names, library, config file and ports."""

from __future__ import annotations

from dataclasses import dataclass, field

from .names import InvalidNodeName, parse_node_name
from .ports import PortRef, PortType

DEFAULT_CONFIG_FILE = "Config.xml"
VIRTUAL_LIBRARY_TEXT = "Developing..."
VIRTUAL_LIBRARY_TOOLTIP = "Virtual Node"
UNDEFINED_PORT_CLASS = "Undefined"


@dataclass
class Node:
    """A node of the graph.

    A node without a library is virtual: it exists only in the editor and
    can be given a library later.
    """

    full_name: str
    library: str | None = None
    config_file: str = DEFAULT_CONFIG_FILE
    input_port_num: int = 0
    output_port_num: int = 0
    input_port_classes: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        parse_node_name(self.full_name)
        for count in (self.input_port_num, self.output_port_num):
            if count < 0:
                raise ValueError(f"port count must not be negative, got {count}")
        if self.library == "":
            self.library = None

    @property
    def node_class(self) -> str:
        """The class part of the full name."""
        return parse_node_name(self.full_name).node_class

    @property
    def is_virtual(self) -> bool:
        """Whether the node has no library behind it."""
        return self.library is None

    @property
    def library_text(self) -> str:
        """What the library field of the node shows."""
        return VIRTUAL_LIBRARY_TEXT if self.library is None else self.library

    @property
    def library_tooltip(self) -> str:
        """The tooltip of the library field."""
        return VIRTUAL_LIBRARY_TOOLTIP if self.library is None else self.library

    def port_num(self, port_type: PortType) -> int:
        """The number of ports in one direction."""
        if port_type is PortType.INPUT:
            return self.input_port_num
        return self.output_port_num

    def set_port_num(self, port_type: PortType, count: int) -> list[PortRef]:
        """Change the number of ports in one direction.

        Returns the ports that were removed, highest id first.
        """
        port_type = PortType(port_type)
        if count < 0:
            raise ValueError(f"port count must not be negative, got {count}")
        removed = [
            PortRef(port_type, self.full_name, port_id)
            for port_id in range(self.port_num(port_type) - 1, count - 1, -1)
        ]
        if port_type is PortType.INPUT:
            self.input_port_num = count
        else:
            self.output_port_num = count
        return removed

    def ports(self, port_type: PortType) -> list[PortRef]:
        """The ports of one direction, in id order."""
        port_type = PortType(port_type)
        return [
            PortRef(port_type, self.full_name, port_id)
            for port_id in range(self.port_num(port_type))
        ]

    def input_port_tooltips(self) -> list[str]:
        """The node class expected on each input port."""
        classes = self.input_port_classes
        return [
            classes[port_id] if port_id < len(classes) else UNDEFINED_PORT_CLASS
            for port_id in range(self.input_port_num)
        ]

    def output_port_tooltips(self) -> list[str]:
        """The node class each output port carries: always the node's own."""
        return [self.node_class] * self.output_port_num

    def rename(self, new_full_name: str) -> str:
        """Give the node a new full name and return the old one.

        Only the extension name may change: the node class and node name
        must stay the same.
        """
        old = parse_node_name(self.full_name)
        new = parse_node_name(new_full_name)
        if (old.node_class, old.node_name) != (new.node_class, new.node_name):
            raise InvalidNodeName(
                f"only the extension name may change: {self.full_name!r} -> {new_full_name!r}"
            )
        previous = self.full_name
        self.full_name = new_full_name
        return previous