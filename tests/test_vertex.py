import pytest

from wavobj.errors import ArityError, NumericFormatError
from wavobj.vertex import decode_vertex, new_vertex


def test_geometric_defaults_w():
    vertex = decode_vertex("v", " 1.5 -2 3e2")
    assert vertex.coords == (1.5, -2.0, 300.0, 1.0)
    assert vertex.vtype == "v"


def test_geometric_with_w_is_not_defaulted():
    assert decode_vertex("v", "1 2 3 0.25").coords == (1.0, 2.0, 3.0, 0.25)


def test_normal_has_no_defaulting():
    assert decode_vertex("vn", "0 0 1").coords == (0.0, 0.0, 1.0)


def test_parameter_space_defaults_w():
    assert decode_vertex("vp", "0.1 0.2").coords == (0.1, 0.2, 1.0)
    assert decode_vertex("vp", "0.1 0.2 0.3").coords == (0.1, 0.2, 0.3)


def test_texture_defaults():
    assert decode_vertex("vt", "0.5").coords == (0.5, 0.0, 0.0)
    assert decode_vertex("vt", "0.5 0.25").coords == (0.5, 0.25, 0.0)
    assert decode_vertex("vt", "0.5 0.25 0.75").coords == (0.5, 0.25, 0.75)


def test_extra_fields_preserved():
    assert decode_vertex("v", "1 2 3 4 5 6").coords == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert decode_vertex("vn", "1 2 3 4").coords == (1.0, 2.0, 3.0, 4.0)


@pytest.mark.parametrize(
    "kind,remainder,expected",
    [("v", "1 2", 3), ("vn", "1 2", 3), ("vp", "1", 2), ("vt", "", 1), ("v", "", 3)],
)
def test_arity_violations(kind, remainder, expected):
    with pytest.raises(ArityError) as excinfo:
        decode_vertex(kind, remainder)
    assert excinfo.value.expected == expected
    assert excinfo.value.actual == len(remainder.split())


def test_numeric_violation_names_token():
    with pytest.raises(NumericFormatError) as excinfo:
        decode_vertex("v", "1 2 abc")
    assert excinfo.value.token == "abc"
    assert "abc" in str(excinfo.value)


def test_arity_checked_before_numbers():
    with pytest.raises(ArityError):
        decode_vertex("v", "1 abc")


def test_not_a_vertex_statement():
    with pytest.raises(AssertionError):
        decode_vertex("deg", "3 3")


def test_new_vertex_is_immutable():
    vertex = new_vertex([1.0, 2.0, 3.0], "v")
    with pytest.raises(AttributeError):
        vertex.coords = (0.0,)


@pytest.mark.parametrize("token", ["1_0", "３", "١", "1e", ".", "0x1p3", "--1"])
def test_numbers_are_plain_ascii(token):
    with pytest.raises(NumericFormatError) as excinfo:
        decode_vertex("v", f"{token} 2 3")
    assert excinfo.value.token == token


def test_accepted_float_spellings():
    assert decode_vertex("v", "+1. .5 -2E-1 3e+2").coords == (1.0, 0.5, -0.2, 300.0)
    coords = decode_vertex("vn", "inf -Infinity nan").coords
    assert coords[0] == float("inf") and coords[1] == float("-inf") and coords[2] != coords[2]


@pytest.mark.parametrize("coords,vtype", [([1.0, 2.0], "v"), ([1.0], "vp"), ([], "vt"), ([0.0, 1.0], "vn")])
def test_new_vertex_checks_arity(coords, vtype):
    with pytest.raises(ArityError):
        new_vertex(coords, vtype)
