from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

# Vertex keywords double as vertex type tags.
GEOMETRIC = "v"
NORMAL = "vn"
PARAMETER_SPACE = "vp"
TEXTURE = "vt"

VERTEX_TYPES = (GEOMETRIC, NORMAL, PARAMETER_SPACE, TEXTURE)

RATIONAL = "rat"
NON_RATIONAL = "non-rat"

BASIS_MATRIX = "bmatrix"
BEZIER = "bezier"
BSPLINE = "bspline"
CARDINAL = "cardinal"
TAYLOR = "taylor"

CS_TYPE_NAMES = frozenset({BASIS_MATRIX, BEZIER, BSPLINE, CARDINAL, TAYLOR})


@dataclass(frozen=True)
class Vertex:
    coords: Tuple[float, ...]
    vtype: str

    def to_list(self) -> list[float]:
        return list(self.coords)


@dataclass(frozen=True)
class CSType:
    rat: str = NON_RATIONAL
    name: str = ""

    @property
    def rational(self) -> bool:
        return self.rat == RATIONAL


@dataclass(frozen=True)
class PDegree:
    degu: int
    degv: int


@dataclass(frozen=True)
class BasisMatrix:
    direction: str
    elements: Tuple[Tuple[float, ...], ...]

    @property
    def rows(self) -> int:
        return len(self.elements)

    @property
    def columns(self) -> int:
        return len(self.elements[0]) if self.elements else 0


@dataclass(frozen=True)
class Step:
    stepu: int
    stepv: int


@dataclass(frozen=True)
class CSAttributes:
    """Free-form curve/surface attributes of one shape. Unset statements stay ``None``."""

    cstype: Optional[CSType] = None
    degree: Optional[PDegree] = None
    bmatu: Optional[BasisMatrix] = None
    bmatv: Optional[BasisMatrix] = None
    step: Optional[Step] = None

    def is_empty(self) -> bool:
        return all(value is None for value in (self.cstype, self.degree, self.bmatu, self.bmatv, self.step))

    def to_dict(self) -> dict:
        def _matrix(matrix: Optional[BasisMatrix]) -> list | None:
            if matrix is None:
                return None
            return [list(row) for row in matrix.elements]

        return {
            "cstype": None if self.cstype is None else {"rat": self.cstype.rat, "name": self.cstype.name},
            "degree": None if self.degree is None else [self.degree.degu, self.degree.degv],
            "bmatu": _matrix(self.bmatu),
            "bmatv": _matrix(self.bmatv),
            "step": None if self.step is None else [self.step.stepu, self.step.stepv],
        }


@dataclass(frozen=True)
class VertexData:
    vertices: Tuple[Vertex, ...] = ()
    normals: Tuple[Vertex, ...] = ()
    points: Tuple[Vertex, ...] = ()
    textures: Tuple[Vertex, ...] = ()

    def counts(self) -> dict[str, int]:
        return {
            "vertices": len(self.vertices),
            "normals": len(self.normals),
            "points": len(self.points),
            "textures": len(self.textures),
        }


@dataclass(frozen=True)
class Shape:
    vertex_data: VertexData = field(default_factory=VertexData)
    attributes: CSAttributes = field(default_factory=CSAttributes)

    def to_dict(self) -> dict:
        def _coords(vertices: Tuple[Vertex, ...]) -> list[list[float | None]]:
            # JSON has no NaN/inf literal.
            return [[value if math.isfinite(value) else None for value in v.coords] for v in vertices]

        data = self.vertex_data
        return {
            "counts": data.counts(),
            "vertices": _coords(data.vertices),
            "normals": _coords(data.normals),
            "points": _coords(data.points),
            "textures": _coords(data.textures),
            "attributes": self.attributes.to_dict(),
        }


@dataclass(frozen=True)
class Scene:
    shapes: Tuple[Shape, ...]
    source: Optional[str] = None

    @property
    def shape(self) -> Shape:
        return self.shapes[0]

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "shapes": [shape.to_dict() for shape in self.shapes],
        }


@dataclass(frozen=True)
class Statement:
    """One stripped input line tagged with its statement kind."""

    line_number: int
    raw: str
    kind: str
    remainder: str
