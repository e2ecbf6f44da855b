"""Skeleton header and source files for a node class."""

from __future__ import annotations

from pathlib import Path

from .names import parse_node_name

_RULE = "//" + "=" * 49
_BODY = ["{", "\tNOUNUSEDWARNING;", "\treturn 1;", "}"]


def _check_counts(*counts: int) -> None:
    for count in counts:
        if count < 0:
            raise ValueError(f"port count must not be negative, got {count}")


def _type_section(title: str, kind: str) -> list[str]:
    upper = kind.upper()
    return [
        _RULE,
        f"//{title} types configuration",
        "",
        f"//If you need to refer {kind} type of other node class, please uncomment "
        f"below and comment its own {kind} type.",
        f"//NODE_{upper}_TYPE_REF(RefNodeClassName)",
        f"class NODE_{upper}_TYPE : public NODE_{upper}_BASE_TYPE",
        "{",
        "",
        "};",
        "",
    ]


def render_header(node_class: str, input_port_num: int, output_port_num: int) -> str:
    """The header skeleton declaring a node class and its port counts."""
    _check_counts(input_port_num, output_port_num)
    guard = node_class.upper()
    lines = [
        f"#ifndef {guard}",
        f"#define {guard}",
        "",
        _RULE,
        "//Please add headers here:",
        "",
        "",
        _RULE,
        "#include<RobotSDK.h>",
        "namespace RobotSDK_Module",
        "{",
        "",
        _RULE,
        "//Node configuration",
        "",
        "#undef NODE_CLASS",
        f"#define NODE_CLASS {node_class}",
        "",
        "#undef INPUT_PORT_NUM",
        f"#define INPUT_PORT_NUM {input_port_num}",
        "",
        "#undef OUTPUT_PORT_NUM",
        f"#define OUTPUT_PORT_NUM {output_port_num}",
        "",
    ]
    lines += _type_section("Params", "params")
    lines += _type_section("Vars", "vars")
    lines += _type_section("Data", "data")
    lines += [
        _RULE,
        "//You can declare functions here",
        "",
        "",
        _RULE,
        "}",
        "",
        "#endif",
    ]
    return "\n".join(lines) + "\n"


def _original_functions() -> list[str]:
    lines = [_RULE, "//Original node functions", ""]
    for name, verb in (
        ("initializeNode", "initialize node"),
        ("openNode", "manually open node"),
        ("closeNode", "manually close node"),
    ):
        lines.append(
            f"//If you don't need to {verb}, you can delete this code segment"
        )
        lines.append(f"NODE_FUNC_DEF_EXPORT(bool, {name})")
        lines += _BODY
        lines.append("")
    lines.append("//This is original main function, you must keep it")
    lines.append("NODE_FUNC_DEF_EXPORT(bool, main)")
    lines += _BODY
    return lines


def render_extension(ex_name: str) -> str:
    """The block of extended node functions for one extension name."""
    if not ex_name:
        raise ValueError("extension name must not be empty")
    lines = [_RULE, f"//Extended node functions ( {ex_name} )", ""]
    for name, verb in (
        ("initializeNode", "initialize node"),
        ("openNode", "manually open node"),
        ("closeNode", "manually close node"),
    ):
        lines.append(
            f"//If you don't need to {verb}, you can delete this code segment"
        )
        lines.append(f"NODE_EXFUNC_DEF_EXPORT(bool, {name}, {ex_name})")
        lines += _BODY
        lines.append("")
    lines.append(
        "//As an extended main function, if you delete this code segment, "
        "original main function will be used"
    )
    lines.append(f"NODE_EXFUNC_DEF_EXPORT(bool, main, {ex_name})")
    lines += _BODY
    lines.append("")
    return "\n".join(lines) + "\n"


def render_source(header_name: str, input_port_num: int, ex_name: str | None = None) -> str:
    """The source skeleton defining the node functions."""
    _check_counts(input_port_num)
    lines = [
        f'#include"{header_name}"',
        "using namespace RobotSDK_Module;",
        "",
        "//If you need to use extended node, please uncomment below and comment "
        "the using of default node",
        "//USE_EXTENDED_NODE(ExtendedNodeClass[,...])",
        "USE_DEFAULT_NODE",
        "",
    ]
    if input_port_num > 0:
        lines += [_RULE, "//Uncomment below PORT_DECL and set input node class name"]
        lines += [
            f"//PORT_DECL({port_id}, InputNodeClassName)"
            for port_id in range(input_port_num)
        ]
        lines.append("")
    lines += _original_functions()
    text = "\n".join(lines) + "\n"
    if ex_name:
        text += "\n" + render_extension(ex_name) + "\n"
    return text


def generate_code(
    directory: str | Path,
    node_full_name: str,
    input_port_num: int,
    output_port_num: int,
) -> list[Path]:
    """Write the skeleton files of a node into ``directory``.

    An existing header is left alone. An existing source file is left alone
    too, unless the name carries an extension name, whose functions are then
    appended. Returns the files that were written or appended to.
    """
    _check_counts(input_port_num, output_port_num)
    name = parse_node_name(node_full_name)
    directory = Path(directory)
    header = directory / f"{name.node_class}.h"
    source = directory / f"{name.node_class}.cpp"
    touched: list[Path] = []

    if not header.exists():
        header.write_text(
            render_header(name.node_class, input_port_num, output_port_num),
            encoding="utf-8",
        )
        touched.append(header)

    if not source.exists():
        source.write_text(
            render_source(header.name, input_port_num, name.ex_name),
            encoding="utf-8",
        )
        touched.append(source)
    elif name.ex_name:
        with source.open("a", encoding="utf-8") as stream:
            stream.write(render_extension(name.ex_name))
        touched.append(source)
    return touched