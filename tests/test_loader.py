import io

import pytest

from wavobj import (
    ArityError,
    CSType,
    NumericFormatError,
    ObjParseError,
    PDegree,
    Step,
    UnknownTypeError,
    load_obj,
    parse_lines,
)


def test_cube_corner_scene(cube_corner_lines):
    scene = parse_lines(cube_corner_lines)
    assert len(scene.shapes) == 1
    data = scene.shape.vertex_data
    assert [v.coords for v in data.vertices] == [(0.0, 0.0, 0.0, 1.0), (1.0, 0.0, 0.0, 1.0)]
    assert [v.coords for v in data.normals] == [(0.0, 0.0, 1.0)]
    assert [v.coords for v in data.textures] == [(0.5, 0.5, 0.0)]
    assert data.points == ()
    assert scene.shape.attributes.is_empty()


def test_freeform_attributes(freeform_lines):
    attrs = parse_lines(freeform_lines).shape.attributes
    assert attrs.cstype == CSType(rat="rat", name="bezier")
    assert attrs.cstype.rational
    assert attrs.degree == PDegree(3, 3)
    assert attrs.step == Step(1, 1)
    assert attrs.bmatu is None and attrs.bmatv is None


def test_bmat_independent_of_statement_order():
    coefficients = " ".join(str(i) for i in range(16))
    bmat_first = parse_lines([f"bmat u {coefficients}", "deg 1 1"]).shape.attributes
    deg_first = parse_lines(["deg 1 1", f"bmat u {coefficients}"]).shape.attributes
    assert bmat_first == deg_first
    assert (deg_first.bmatu.rows, deg_first.bmatu.columns) == (4, 4)

    scene = parse_lines(["deg 3 3", "bmat u 1 2 3 4 5", "bmat v 1 0 0 1"])
    assert scene.shape.attributes.bmatu.elements == ((1.0, 2.0, 3.0, 4.0, 5.0),)
    assert scene.shape.attributes.bmatv.elements == ((1.0, 0.0), (0.0, 1.0))


def test_unrecognized_lines_are_skipped():
    scene = parse_lines(["o thing", "v 1 2 3", "f 1 1 1", "usemtl red", "vx 1 2"])
    assert len(scene.shape.vertex_data.vertices) == 1


def test_empty_input():
    scene = parse_lines([])
    assert scene.shape.vertex_data.counts() == {"vertices": 0, "normals": 0, "points": 0, "textures": 0}


def test_arity_error_context():
    with pytest.raises(ObjParseError) as excinfo:
        parse_lines(["# header", "v 0 0 0", "v 1 2"])
    err = excinfo.value
    assert err.line_number == 3
    assert err.line == "v 1 2"
    assert isinstance(err.cause, ArityError)
    assert err.__cause__ is err.cause
    assert "line 3" in str(err)


def test_numeric_error_context():
    with pytest.raises(ObjParseError) as excinfo:
        parse_lines(["v 1 2 abc"])
    assert isinstance(excinfo.value.cause, NumericFormatError)
    assert excinfo.value.cause.token == "abc"


def test_strict_cstype_switch():
    with pytest.raises(ObjParseError) as excinfo:
        parse_lines(["cstype nurbs"])
    assert isinstance(excinfo.value.cause, UnknownTypeError)
    scene = parse_lines(["cstype nurbs"], strict_cstype=False)
    assert scene.shape.attributes.cstype.name == "nurbs"


def test_parse_is_idempotent(cube_corner_lines, freeform_lines):
    lines = cube_corner_lines + freeform_lines
    assert parse_lines(lines) == parse_lines(lines)


def test_accepts_text_stream():
    stream = io.StringIO("v 1 2 3\r\nvn 0 1 0\n")
    scene = parse_lines(stream)
    assert scene.shape.vertex_data.normals[0].coords == (0.0, 1.0, 0.0)


def test_read_errors_propagate_unchanged():
    def broken_source():
        yield "v 1 2 3"
        raise OSError("disk went away")

    with pytest.raises(OSError, match="disk went away"):
        parse_lines(broken_source())


def test_load_obj(cube_corner_file):
    scene = load_obj(cube_corner_file)
    assert scene.source == str(cube_corner_file)
    assert len(scene.shape.vertex_data.vertices) == 2


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "missing.obj")
