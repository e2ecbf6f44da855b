from robotx.edges import Edge


def make_edge():
    return Edge("CameraSensor::cam", 0, "ImageViewer::view", 2)


def test_tooltip_format():
    assert make_edge().tooltip() == "CameraSensor::cam~Port_0 -> ImageViewer::view~Port_2"


def test_key_is_node_pair():
    assert make_edge().key == ("CameraSensor::cam", "ImageViewer::view")


def test_touches_both_ends():
    edge = make_edge()
    assert edge.touches("CameraSensor::cam")
    assert edge.touches("ImageViewer::view")
    assert not edge.touches("Other::node")


def test_renamed_output_end():
    edge = make_edge().renamed("CameraSensor::cam", "CameraSensor::cam::x")
    assert edge.output_node == "CameraSensor::cam::x"
    assert edge.input_node == "ImageViewer::view"
    assert (edge.output_port, edge.input_port) == (0, 2)


def test_renamed_self_loop_moves_both_ends():
    edge = Edge("A::a", 1, "A::a", 0).renamed("A::a", "A::b")
    assert edge == Edge("A::b", 1, "A::b", 0)


def test_renamed_unrelated_is_unchanged():
    edge = make_edge()
    assert edge.renamed("X::y", "X::z") == edge