"""
Vertex statements:

    v  x y z [w]   geometric vertex, w defaults to 1.0
    vn i j k       vertex normal
    vp u v [w]     point in the parameter space of a curve/surface, w defaults to 1.0
    vt u [v] [w]   texture vertex, v and w default to 0.0

Fields past the defaulted length are kept as-is.
"""

from __future__ import annotations

import re
from typing import Dict, List, Sequence, Tuple

from .entities import GEOMETRIC, NORMAL, PARAMETER_SPACE, TEXTURE, Vertex
from .errors import ArityError, NumericFormatError

MIN_VERTEX_ARGS: Dict[str, int] = {
    GEOMETRIC: 3,
    NORMAL: 3,
    PARAMETER_SPACE: 2,
    TEXTURE: 1,
}

# (padded length, fill values appended in order)
VERTEX_DEFAULTS: Dict[str, Tuple[int, Tuple[float, ...]]] = {
    GEOMETRIC: (4, (1.0,)),
    NORMAL: (3, ()),
    PARAMETER_SPACE: (3, (1.0,)),
    TEXTURE: (3, (0.0, 0.0)),
}

VERTEX_USAGE = {
    GEOMETRIC: "v x y z [w]",
    NORMAL: "vn i j k",
    PARAMETER_SPACE: "vp u v [w]",
    TEXTURE: "vt u [v] [w]",
}

# Plain ASCII decimal literals plus inf/nan. No digit grouping, no non-ASCII digits.
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def parse_floats(tokens: Sequence[str]) -> List[float]:
    values: List[float] = []
    for token in tokens:
        if not FLOAT_PATTERN.fullmatch(token):
            raise NumericFormatError(token)
        values.append(float(token))
    return values


def _check_arity(vtype: str, count: int) -> None:
    min_args = MIN_VERTEX_ARGS[vtype]
    if count < min_args:
        raise ArityError(
            f"Expected at least {min_args} coordinates for '{VERTEX_USAGE[vtype]}', got {count}",
            expected=min_args,
            actual=count,
        )


def new_vertex(coords: Sequence[float], vtype: str) -> Vertex:
    """Pad ``coords`` with the defaults of ``vtype`` and freeze them into a Vertex."""

    _check_arity(vtype, len(coords))
    length, fill = VERTEX_DEFAULTS[vtype]
    padded = list(coords)
    missing = length - len(padded)
    if missing > 0:
        padded.extend(fill[len(fill) - missing:])
    return Vertex(coords=tuple(padded), vtype=vtype)


def decode_vertex(kind: str, remainder: str) -> Vertex:
    if kind not in MIN_VERTEX_ARGS:
        raise AssertionError(f"Not a vertex statement: {kind!r}")
    tokens = remainder.split()
    _check_arity(kind, len(tokens))
    return new_vertex(parse_floats(tokens), kind)
