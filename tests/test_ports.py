import pytest

from robotx.edges import Edge
from robotx.ports import (
    DropHighlight,
    PortRef,
    PortType,
    decode_drag_message,
    drag_highlight,
    drop_edge,
)

OUT = PortRef(PortType.OUTPUT, "CameraSensor::cam", 0)
IN = PortRef(PortType.INPUT, "ImageViewer::view", 1)


def test_encode_format():
    assert OUT.encode() == "1~~CameraSensor::cam~~0"


@pytest.mark.parametrize("port", [OUT, IN, PortRef(PortType.INPUT, "A::b::c", 7)])
def test_encode_decode_round_trip(port):
    assert decode_drag_message(port.encode()) == port


def test_labels():
    assert IN.label() == "ImageViewer::view\nInput Port_1"
    assert OUT.label() == "CameraSensor::cam\nOutput Port_0"


@pytest.mark.parametrize(
    "message", ["", "1~~name", "1~~a~~2~~3", "x~~a~~1", "5~~a~~1", "0~~a~~-1"]
)
def test_decode_rejects_malformed(message):
    with pytest.raises(ValueError):
        decode_drag_message(message)


def test_highlight_opposite_direction_accepts():
    assert drag_highlight(IN, OUT.encode()) is DropHighlight.ACCEPT


def test_highlight_same_direction_other_port_rejects():
    other = PortRef(PortType.INPUT, "ImageViewer::view", 2)
    assert drag_highlight(IN, other.encode()) is DropHighlight.REJECT


def test_highlight_same_port_is_neutral():
    assert drag_highlight(IN, IN.encode()) is DropHighlight.NEUTRAL


def test_highlight_refuses_foreign_text():
    assert drag_highlight(IN, "plain text") is None


def test_drop_on_input_runs_from_source():
    assert drop_edge(IN, OUT.encode()) == Edge("CameraSensor::cam", 0, "ImageViewer::view", 1)


def test_drop_direction_is_symmetric():
    assert drop_edge(OUT, IN.encode()) == drop_edge(IN, OUT.encode())


def test_drop_same_direction_makes_nothing():
    other = PortRef(PortType.OUTPUT, "X::y", 3)
    assert drop_edge(OUT, other.encode()) is None
    assert drop_edge(OUT, "garbage") is None