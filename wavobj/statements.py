"""
Statement classification for Wavefront OBJ lines.

Only the vertex family and the free-form curve/surface attribute statements
are recognized. Everything else (faces, groups, materials, ...) classifies as
``UNRECOGNIZED`` so newer files still load.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from .entities import GEOMETRIC, NORMAL, PARAMETER_SPACE, TEXTURE, Statement

CSTYPE = "cstype"
DEGREE = "deg"
BMATRIX = "bmat"
STEP = "step"

SKIP = "skip"
UNRECOGNIZED = "unrecognized"

VERTEX_STATEMENTS = (GEOMETRIC, NORMAL, PARAMETER_SPACE, TEXTURE)
ATTRIBUTE_STATEMENTS = (CSTYPE, DEGREE, BMATRIX, STEP)

# Longest first so "vn" is tried before "v".
KEYWORDS: Tuple[str, ...] = tuple(
    sorted(VERTEX_STATEMENTS + ATTRIBUTE_STATEMENTS, key=len, reverse=True)
)


def _matches(line: str, keyword: str) -> bool:
    if not line.startswith(keyword):
        return False
    return len(line) == len(keyword) or line[len(keyword)].isspace()


def classify(line: str) -> str:
    """Return the statement keyword for ``line``, ``SKIP`` or ``UNRECOGNIZED``."""

    if not line or line[0] == "#":
        return SKIP
    for keyword in KEYWORDS:
        if _matches(line, keyword):
            return keyword
    return UNRECOGNIZED


def split_statement(line: str) -> Tuple[str, str]:
    kind = classify(line)
    if kind in (SKIP, UNRECOGNIZED):
        return kind, line
    return kind, line[len(kind):]


def iter_statements(lines: Iterable[str], *, include_skipped: bool = False) -> Iterator[Statement]:
    """
    Strip and classify every line of ``lines``. Blank lines and comments are
    dropped unless ``include_skipped`` is set; unrecognized statements are
    always yielded so callers can report them.
    """

    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        kind, remainder = split_statement(line)
        if kind == SKIP and not include_skipped:
            continue
        yield Statement(line_number=line_number, raw=line, kind=kind, remainder=remainder)
