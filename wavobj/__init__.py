"""
Wavefront OBJ vertex and free-form attribute parsing.
"""

from .attributes import apply_attribute, decode_attribute
from .entities import (
    BasisMatrix,
    CSAttributes,
    CSType,
    PDegree,
    Scene,
    Shape,
    Statement,
    Step,
    Vertex,
    VertexData,
)
from .errors import ArityError, DecodeError, NumericFormatError, ObjParseError, UnknownTypeError
from .geometry import bounding_box, fuzzy_eq, project_points, vertex_array, vertices_match
from .loader import load_obj, parse_lines
from .logging import StatementLogger, log_unrecognized_statements
from .statements import KEYWORDS, SKIP, UNRECOGNIZED, classify, iter_statements, split_statement
from .vertex import decode_vertex, new_vertex, parse_floats

__all__ = [
    "apply_attribute",
    "decode_attribute",
    "BasisMatrix",
    "CSAttributes",
    "CSType",
    "PDegree",
    "Scene",
    "Shape",
    "Statement",
    "Step",
    "Vertex",
    "VertexData",
    "ArityError",
    "DecodeError",
    "NumericFormatError",
    "ObjParseError",
    "UnknownTypeError",
    "bounding_box",
    "fuzzy_eq",
    "project_points",
    "vertex_array",
    "vertices_match",
    "load_obj",
    "parse_lines",
    "StatementLogger",
    "log_unrecognized_statements",
    "KEYWORDS",
    "SKIP",
    "UNRECOGNIZED",
    "classify",
    "iter_statements",
    "split_statement",
    "decode_vertex",
    "new_vertex",
    "parse_floats",
]
