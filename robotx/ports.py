"""Ports of a node and the drag-and-drop protocol used to connect them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .edges import Edge

_MESSAGE_SEPARATOR = "~~"


class PortType(IntEnum):
    """Direction of a port; the value is what travels in drag messages."""

    INPUT = 0
    OUTPUT = 1


class DropHighlight(Enum):
    """Background colour a port takes while something is dragged over it."""

    NEUTRAL = "white"
    REJECT = "red"
    ACCEPT = "green"


@dataclass(frozen=True)
class PortRef:
    """One port of one node."""

    port_type: PortType
    node_full_name: str
    port_id: int

    def encode(self) -> str:
        """The drag message that identifies this port."""
        return _MESSAGE_SEPARATOR.join(
            (str(int(self.port_type)), self.node_full_name, str(self.port_id))
        )

    def label(self) -> str:
        """The two-line caption shown while the port is dragged."""
        direction = "Input" if self.port_type is PortType.INPUT else "Output"
        return f"{self.node_full_name}\n{direction} Port_{self.port_id}"


def _parse_unsigned(text: str, what: str) -> int:
    stripped = text.strip()
    if not stripped.isdigit():
        raise ValueError(f"{what} must be a non-negative integer, got {text!r}")
    return int(stripped)


def decode_drag_message(text: str) -> PortRef:
    """Decode a drag message made by :meth:`PortRef.encode`.

    Raises ValueError when the message is malformed.
    """
    parts = [part for part in text.split(_MESSAGE_SEPARATOR) if part]
    if len(parts) != 3:
        raise ValueError(f"drag message must have three parts, got {text!r}")
    type_text, node_full_name, id_text = parts
    try:
        port_type = PortType(_parse_unsigned(type_text, "port type"))
    except ValueError as exc:
        raise ValueError(f"unknown port type in drag message {text!r}") from exc
    return PortRef(port_type, node_full_name, _parse_unsigned(id_text, "port id"))


def _decode_or_none(message: str) -> PortRef | None:
    try:
        return decode_drag_message(message)
    except ValueError:
        return None


def drag_highlight(target: PortRef, message: str) -> DropHighlight | None:
    """How ``target`` reacts to ``message`` being dragged over it.

    Returns None when the message is not a port message and the drag is refused.
    """
    source = _decode_or_none(message)
    if source is None:
        return None
    if source.port_type is not target.port_type:
        return DropHighlight.ACCEPT
    if source != target:
        return DropHighlight.REJECT
    return DropHighlight.NEUTRAL


def drop_edge(target: PortRef, message: str) -> Edge | None:
    """The edge created by dropping ``message`` onto ``target``, if any.

    An edge is made only when the two ports face opposite directions; it
    always runs from the output port to the input port.
    """
    source = _decode_or_none(message)
    if source is None or source.port_type is target.port_type:
        return None
    if target.port_type is PortType.INPUT:
        output, input_ = source, target
    else:
        output, input_ = target, source
    return Edge(output.node_full_name, output.port_id, input_.node_full_name, input_.port_id)