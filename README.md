# robotx

`robotx` models a graph of robot processing nodes and the edges that
connect their ports. It keeps the graph consistent as nodes are added,
renamed and removed and as port counts change, reads and writes graphs in
the line-based `.x` format, exports them as Graphviz `dot` text, and writes
starter header and source files for a node class.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Node names

A node's full name has the form `NodeClass::NodeName` or
`NodeClass::NodeName::ExName`. Empty parts are dropped. A name with fewer
than two or more than three parts raises `InvalidNodeName` (a `ValueError`).

```python
from robotx.names import parse_node_name, InvalidNodeName

name = parse_node_name("CameraSensor::front")
print(name.node_class, name.node_name, name.ex_name)   # CameraSensor front None
print(name)                                            # CameraSensor::front

try:
    parse_node_name("JustAClass")
except InvalidNodeName:
    ...
```

`robotx.names.window_title(argv)` builds a title such as
`Robot-X : my_graph` from a command line, replacing every character outside
`[a-zA-Z0-9/_$]` with `_`.

## Building a graph

```python
from robotx.graph import XGraph
from robotx.ports import PortType

graph = XGraph()
graph.add_node("CameraSensor::front", "", "Config.xml")   # no library: a virtual node
graph.add_node("ImageViewer::view", "", "Config.xml")
graph.set_port_num("CameraSensor::front", PortType.OUTPUT, 1)
graph.set_port_num("ImageViewer::view", PortType.INPUT, 1)

graph.add_edge("CameraSensor::front", 0, "ImageViewer::view", 0)

graph.rename_node("ImageViewer::view", "ImageViewer::view::big")
graph.save("pipeline.x")

print(graph.to_dot())
```

- `add_node` on a name that already exists returns that node; if it is
  virtual and a library is given, the node takes the library and config file.
- `add_edge` requires both nodes and both ports to exist, and returns the
  existing edge when an identical one is already there.
- `rename_node` may change only the ExName; the node's edges follow it.
- `remove_node`, `remove_port`, and `set_port_num` to a smaller count remove
  every edge attached to what goes away. `clear()` removes every node.
- Operations that name a missing node, port or edge raise `GraphError`.

`graph.nodes` lists nodes by full name; `graph.edges` lists edges by
(output node, input node).

## The `.x` file format

Each line describes one node or one edge, with comma-separated fields:

```
N,<full name>,<library file>,<config file>,<input ports>,<output ports>
E,<output node>,<output port>,<input node>,<input port>
```

A virtual node is saved with a single space as its library. `XGraph.load`
adds what a file describes to the graph; lines that match neither form are
skipped, while a port count or port id that is not a non-negative integer
raises `GraphError`.

## Ports and drag messages

`robotx.ports.PortRef` identifies one port; `encode()` gives the message
`<type>~~<node>~~<id>` used when a port is dragged, and
`decode_drag_message` reads it back. `drag_highlight` tells how a port
reacts to a message dragged over it, and `drop_edge` returns the `Edge`
made by dropping one port on another of the opposite direction.

## Dot export

Each node is drawn as a Graphviz `record` whose label lists its input
ports, its full name and its output ports. Edges leave `out_<n>:e` on the
producing node and enter `in_<n>:w` on the consuming node, and the graph is
laid out left to right. `robotx.dot.render_dot(nodes, edges)` renders nodes
and edges directly; `XGraph.to_dot()` renders a whole graph.

## Generating node code

```python
from robotx.codegen import generate_code

generate_code("src/modules", "ImageProcessor::proc::rotation", 1, 1)
```

This writes `ImageProcessor.h` and `ImageProcessor.cpp` into the directory
unless they are already there, and returns the paths it wrote. Each input
port gets a commented-out port declaration. When the name has an ExName, a
block of extended node functions is added for it; if the source file
already exists, only that block is appended. `render_header`,
`render_source` and `render_extension` return the same text as strings.

## Command line

The package installs a `robotx` command. Commands that change a graph
create the `.x` file if it does not exist yet.

```
robotx title [NAME]
robotx show GRAPH
robotx dot GRAPH [-o OUTPUT]
robotx add-node GRAPH NAME [--library LIB] [--config FILE]
robotx remove-node GRAPH NAME
robotx rename-node GRAPH OLD NEW
robotx ports GRAPH NAME {input,output} COUNT
robotx add-edge GRAPH OUTPUT_NODE OUTPUT_PORT INPUT_NODE INPUT_PORT
robotx remove-edge GRAPH OUTPUT_NODE OUTPUT_PORT INPUT_NODE INPUT_PORT
robotx clean GRAPH
robotx generate DIRECTORY NAME [--inputs N] [--outputs N] [--graph GRAPH]
```

`generate --graph` takes the port counts from the named node in that graph.
On an error the command prints `robotx: error: ...` and exits with status 1.

## What it does not do

`robotx` has no graphical editor: there is no canvas, menu or drag-and-drop
screen, only the model and the command line. It does not lay graphs out or
render images; it produces `dot` text for Graphviz to process. It does not
load, open, close or run node libraries, show their widgets, or edit the
parameter values inside a node's config file; a node's library and config
file are kept only as names.