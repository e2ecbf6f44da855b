import pytest

from robotx.codegen import (
    generate_code,
    render_extension,
    render_header,
    render_source,
)
from robotx.names import InvalidNodeName


def test_header_guard_and_config():
    text = render_header("Camera", 2, 3)
    lines = text.splitlines()
    assert lines[0] == "#ifndef CAMERA"
    assert lines[1] == "#define CAMERA"
    assert "#define NODE_CLASS Camera" in lines
    assert "#define INPUT_PORT_NUM 2" in lines
    assert "#define OUTPUT_PORT_NUM 3" in lines
    assert lines[-1] == "#endif"


def test_header_has_three_type_classes():
    text = render_header("Camera", 0, 1)
    for kind in ("PARAMS", "VARS", "DATA"):
        assert f"class NODE_{kind}_TYPE : public NODE_{kind}_BASE_TYPE" in text
        assert f"//NODE_{kind}_TYPE_REF(RefNodeClassName)" in text


def test_header_rejects_negative_counts():
    with pytest.raises(ValueError):
        render_header("Camera", -1, 0)


def test_source_port_declarations_match_count():
    text = render_source("Camera.h", 3)
    decls = [line for line in text.splitlines() if line.startswith("//PORT_DECL(")]
    assert decls == [f"//PORT_DECL({i}, InputNodeClassName)" for i in range(3)]
    assert text.splitlines()[0] == '#include"Camera.h"'


def test_source_without_inputs_has_no_port_section():
    text = render_source("Camera.h", 0)
    assert "PORT_DECL" not in text
    assert "NODE_FUNC_DEF_EXPORT(bool, main)" in text
    assert "NODE_EXFUNC_DEF_EXPORT" not in text


def test_source_with_extension_includes_block():
    text = render_source("Camera.h", 1, "fast")
    assert render_extension("fast") in text
    assert text.endswith(render_extension("fast") + "\n")


def test_extension_declares_four_functions():
    text = render_extension("fast")
    for func in ("initializeNode", "openNode", "closeNode", "main"):
        assert f"NODE_EXFUNC_DEF_EXPORT(bool, {func}, fast)" in text
    assert "//Extended node functions ( fast )" in text


def test_extension_requires_name():
    with pytest.raises(ValueError):
        render_extension("")


def test_generate_creates_both_files(tmp_path):
    written = generate_code(tmp_path, "Camera::front", 1, 2)
    assert written == [tmp_path / "Camera.h", tmp_path / "Camera.cpp"]
    assert (tmp_path / "Camera.h").read_text(encoding="utf-8") == render_header("Camera", 1, 2)
    assert (tmp_path / "Camera.cpp").read_text(encoding="utf-8") == render_source("Camera.h", 1)


def test_generate_keeps_existing_files_without_extension(tmp_path):
    (tmp_path / "Camera.h").write_text("keep header", encoding="utf-8")
    (tmp_path / "Camera.cpp").write_text("keep source", encoding="utf-8")
    written = generate_code(tmp_path, "Camera::front", 1, 1)
    assert written == []
    assert (tmp_path / "Camera.h").read_text(encoding="utf-8") == "keep header"
    assert (tmp_path / "Camera.cpp").read_text(encoding="utf-8") == "keep source"


def test_generate_appends_extension_to_existing_source(tmp_path):
    (tmp_path / "Camera.cpp").write_text("keep source\n", encoding="utf-8")
    written = generate_code(tmp_path, "Camera::front::fast", 0, 1)
    assert written == [tmp_path / "Camera.h", tmp_path / "Camera.cpp"]
    assert (tmp_path / "Camera.cpp").read_text(encoding="utf-8") == (
        "keep source\n" + render_extension("fast")
    )


def test_generate_new_source_with_extension(tmp_path):
    generate_code(tmp_path, "Camera::front::fast", 2, 1)
    assert (tmp_path / "Camera.cpp").read_text(encoding="utf-8") == render_source(
        "Camera.h", 2, "fast"
    )


def test_generate_rejects_bad_name(tmp_path):
    with pytest.raises(InvalidNodeName):
        generate_code(tmp_path, "Camera", 0, 0)
    assert list(tmp_path.iterdir()) == []