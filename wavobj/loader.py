"""
Scene assembly: drive the classifier and decoders over a line source and
freeze the result into a ``Scene``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

from .attributes import apply_attribute, decode_attribute
from .entities import GEOMETRIC, NORMAL, PARAMETER_SPACE, TEXTURE, CSAttributes, Scene, Shape, Vertex, VertexData
from .errors import DecodeError, ObjParseError
from .statements import ATTRIBUTE_STATEMENTS, UNRECOGNIZED, VERTEX_STATEMENTS, iter_statements
from .vertex import decode_vertex


class _ShapeBuilder:
    """Mutable accumulator owned by a single ``parse_lines`` call."""

    def __init__(self) -> None:
        self.vertex_lists: Dict[str, List[Vertex]] = {kind: [] for kind in VERTEX_STATEMENTS}
        self.attributes = CSAttributes()

    def add_vertex(self, vertex: Vertex) -> None:
        self.vertex_lists[vertex.vtype].append(vertex)

    def build(self) -> Shape:
        lists = self.vertex_lists
        data = VertexData(
            vertices=tuple(lists[GEOMETRIC]),
            normals=tuple(lists[NORMAL]),
            points=tuple(lists[PARAMETER_SPACE]),
            textures=tuple(lists[TEXTURE]),
        )
        return Shape(vertex_data=data, attributes=self.attributes)


def parse_lines(
    lines: Iterable[str],
    *,
    strict_cstype: bool = True,
    source: str | None = None,
) -> Scene:
    """
    Parse OBJ statements from ``lines`` into a Scene.

    The first statement that fails to decode aborts the parse with an
    ``ObjParseError`` pointing at the offending line. Read errors raised by
    the line source propagate untouched.
    """

    builder = _ShapeBuilder()
    for statement in iter_statements(lines):
        if statement.kind == UNRECOGNIZED:
            continue
        try:
            if statement.kind in VERTEX_STATEMENTS:
                builder.add_vertex(decode_vertex(statement.kind, statement.remainder))
            elif statement.kind in ATTRIBUTE_STATEMENTS:
                record = decode_attribute(statement.kind, statement.remainder, strict=strict_cstype)
                builder.attributes = apply_attribute(builder.attributes, record)
            else:
                raise AssertionError(f"No decoder for statement kind {statement.kind!r}")
        except DecodeError as exc:
            raise ObjParseError(statement.line_number, statement.raw, exc) from exc
    return Scene(shapes=(builder.build(),), source=source)


def load_obj(path: Path | str, *, strict_cstype: bool = True, encoding: str = "utf-8") -> Scene:
    path = Path(path)
    with path.open("r", encoding=encoding) as handle:
        return parse_lines(handle, strict_cstype=strict_cstype, source=str(path))
