"""Command line for editing node graphs, exporting them and generating node skeletons."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

from .codegen import generate_code
from .graph import GraphError, XGraph
from .names import InvalidNodeName, window_title
from .nodes import DEFAULT_CONFIG_FILE
from .ports import PortType

PROG = "robotx"

_PORT_TYPES = {"input": PortType.INPUT, "output": PortType.OUTPUT}


def _open_graph(path: Path, must_exist: bool) -> XGraph:
    graph = XGraph()
    if must_exist or path.exists():
        graph.load(path)
    return graph


def _edit(path: Path, change: Callable[[XGraph], None]) -> None:
    graph = _open_graph(path, must_exist=False)
    change(graph)
    graph.save(path)


def _cmd_title(args: argparse.Namespace) -> None:
    argv = [PROG] if args.name is None else [PROG, args.name]
    print(window_title(argv))


def _cmd_show(args: argparse.Namespace) -> None:
    graph = _open_graph(args.graph, must_exist=True)
    for node in graph.nodes:
        print(
            f"N {node.full_name} [{node.library_text}] {node.config_file} "
            f"in={node.input_port_num} out={node.output_port_num}"
        )
    for edge in graph.edges:
        print(f"E {edge.tooltip()}")


def _cmd_dot(args: argparse.Namespace) -> None:
    text = _open_graph(args.graph, must_exist=True).to_dot()
    if args.output is None:
        sys.stdout.write(text)
    else:
        args.output.write_text(text, encoding="utf-8")


def _cmd_add_node(args: argparse.Namespace) -> None:
    _edit(args.graph, lambda graph: graph.add_node(args.name, args.library, args.config))


def _cmd_remove_node(args: argparse.Namespace) -> None:
    _edit(args.graph, lambda graph: graph.remove_node(args.name))


def _cmd_rename_node(args: argparse.Namespace) -> None:
    _edit(args.graph, lambda graph: graph.rename_node(args.old, args.new))


def _cmd_ports(args: argparse.Namespace) -> None:
    _edit(
        args.graph,
        lambda graph: graph.set_port_num(args.name, _PORT_TYPES[args.direction], args.count),
    )


def _cmd_add_edge(args: argparse.Namespace) -> None:
    _edit(
        args.graph,
        lambda graph: graph.add_edge(
            args.output_node, args.output_port, args.input_node, args.input_port
        ),
    )


def _cmd_remove_edge(args: argparse.Namespace) -> None:
    _edit(
        args.graph,
        lambda graph: graph.remove_edge(
            args.output_node, args.output_port, args.input_node, args.input_port
        ),
    )


def _cmd_clean(args: argparse.Namespace) -> None:
    _edit(args.graph, lambda graph: graph.clear())


def _cmd_generate(args: argparse.Namespace) -> None:
    inputs, outputs = args.inputs, args.outputs
    if args.graph is not None:
        node = _open_graph(args.graph, must_exist=True).node(args.name)
        inputs, outputs = node.input_port_num, node.output_port_num
    for path in generate_code(args.directory, args.name, inputs, outputs):
        print(path)


def _add_edge_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("graph", type=Path)
    parser.add_argument("output_node")
    parser.add_argument("output_port", type=int)
    parser.add_argument("input_node")
    parser.add_argument("input_port", type=int)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Edit node graphs stored as .x files.")
    sub = parser.add_subparsers(dest="command", required=True)

    cmd = sub.add_parser("title", help="print the window title for a name")
    cmd.add_argument("name", nargs="?")
    cmd.set_defaults(run=_cmd_title)

    cmd = sub.add_parser("show", help="list the nodes and edges of a graph")
    cmd.add_argument("graph", type=Path)
    cmd.set_defaults(run=_cmd_show)

    cmd = sub.add_parser("dot", help="export a graph as a dot file")
    cmd.add_argument("graph", type=Path)
    cmd.add_argument("-o", "--output", type=Path)
    cmd.set_defaults(run=_cmd_dot)

    cmd = sub.add_parser("add-node", help="add a node, or give a virtual node its library")
    cmd.add_argument("graph", type=Path)
    cmd.add_argument("name")
    cmd.add_argument("--library")
    cmd.add_argument("--config", default=DEFAULT_CONFIG_FILE)
    cmd.set_defaults(run=_cmd_add_node)

    cmd = sub.add_parser("remove-node", help="remove a node and its edges")
    cmd.add_argument("graph", type=Path)
    cmd.add_argument("name")
    cmd.set_defaults(run=_cmd_remove_node)

    cmd = sub.add_parser("rename-node", help="change a node's extension name")
    cmd.add_argument("graph", type=Path)
    cmd.add_argument("old")
    cmd.add_argument("new")
    cmd.set_defaults(run=_cmd_rename_node)

    cmd = sub.add_parser("ports", help="change a node's port count")
    cmd.add_argument("graph", type=Path)
    cmd.add_argument("name")
    cmd.add_argument("direction", choices=sorted(_PORT_TYPES))
    cmd.add_argument("count", type=int)
    cmd.set_defaults(run=_cmd_ports)

    cmd = sub.add_parser("add-edge", help="join an output port to an input port")
    _add_edge_arguments(cmd)
    cmd.set_defaults(run=_cmd_add_edge)

    cmd = sub.add_parser("remove-edge", help="remove an edge")
    _add_edge_arguments(cmd)
    cmd.set_defaults(run=_cmd_remove_edge)

    cmd = sub.add_parser("clean", help="remove every node and edge")
    cmd.add_argument("graph", type=Path)
    cmd.set_defaults(run=_cmd_clean)

    cmd = sub.add_parser("generate", help="write skeleton code for a node")
    cmd.add_argument("directory", type=Path)
    cmd.add_argument("name")
    cmd.add_argument("--inputs", type=int, default=0)
    cmd.add_argument("--outputs", type=int, default=0)
    cmd.add_argument("--graph", type=Path, help="take the port counts from this graph")
    cmd.set_defaults(run=_cmd_generate)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        args.run(args)
    except (GraphError, InvalidNodeName, ValueError, OSError) as exc:
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())