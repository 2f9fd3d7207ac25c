"""
Free-form curve/surface attribute statements:

    cstype [rat] type        type is one of bmatrix, bezier, bspline, cardinal, taylor
    deg degu degv
    bmat u|v matrix          matrix is a flattened row-major coefficient table
    step stepu stepv

Each statement may appear any number of times; the last one wins.
"""

from __future__ import annotations

import dataclasses
import math
import re
from typing import List, Sequence, Union

from .entities import (
    CS_TYPE_NAMES,
    NON_RATIONAL,
    RATIONAL,
    BasisMatrix,
    CSAttributes,
    CSType,
    PDegree,
    Step,
)
from .errors import ArityError, NumericFormatError, UnknownTypeError
from .statements import BMATRIX, CSTYPE, DEGREE, STEP
from .vertex import parse_floats

AttributeRecord = Union[CSType, PDegree, BasisMatrix, Step]

BMAT_DIRECTIONS = ("u", "v")

INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_ints(tokens: Sequence[str]) -> List[int]:
    values: List[int] = []
    for token in tokens:
        if not INT_PATTERN.fullmatch(token):
            raise NumericFormatError(token, kind="integer")
        values.append(int(token))
    return values


def decode_cstype(remainder: str, *, strict: bool = True) -> CSType:
    tokens = remainder.split()
    if len(tokens) == 1:
        rat, name = NON_RATIONAL, tokens[0]
    elif len(tokens) == 2:
        rat, name = tokens
        if rat not in (RATIONAL, NON_RATIONAL):
            raise UnknownTypeError(f"Unknown rationality marker {rat!r}, expected 'rat'", value=rat)
    else:
        raise ArityError(
            f"Incorrect number of arguments for statement: cstype. Expected 'cstype [rat] type' got: {tokens}",
            expected="1 or 2",
            actual=len(tokens),
        )
    if strict and name not in CS_TYPE_NAMES:
        raise UnknownTypeError(
            f"Unknown curve/surface type {name!r}, expected one of {sorted(CS_TYPE_NAMES)}",
            value=name,
        )
    return CSType(rat=rat, name=name)


def _decode_int_pair(statement: str, usage: str, remainder: str) -> List[int]:
    tokens = remainder.split()
    if len(tokens) != 2:
        raise ArityError(
            f"Incorrect number of arguments for statement: {statement}. Expected '{usage}' got: {tokens}",
            expected=2,
            actual=len(tokens),
        )
    return parse_ints(tokens)


def decode_degree(remainder: str) -> PDegree:
    degu, degv = _decode_int_pair(DEGREE, "deg degu degv", remainder)
    return PDegree(degu=degu, degv=degv)


def decode_step(remainder: str) -> Step:
    stepu, stepv = _decode_int_pair(STEP, "step stepu stepv", remainder)
    return Step(stepu=stepu, stepv=stepv)


def decode_bmat(remainder: str) -> BasisMatrix:
    """
    Row-major coefficients; a perfect-square count is laid out as a square
    matrix, anything else as a single row.
    """

    tokens = remainder.split()
    if not tokens or tokens[0] not in BMAT_DIRECTIONS:
        raise ArityError(
            f"Incorrect arguments for statement: bmat. Expected 'bmat u|v matrix' got: {tokens}",
            expected="u|v",
            actual=len(tokens),
        )
    direction = tokens[0]
    values = parse_floats(tokens[1:])
    if not values:
        raise ArityError("Statement bmat carries no coefficients", expected=1, actual=0)
    side = math.isqrt(len(values))
    width = side if side * side == len(values) else len(values)
    rows = tuple(tuple(values[i : i + width]) for i in range(0, len(values), width))
    return BasisMatrix(direction=direction, elements=rows)


def decode_attribute(
    statement: str,
    remainder: str,
    *,
    strict: bool = True,
) -> AttributeRecord:
    if statement == CSTYPE:
        return decode_cstype(remainder, strict=strict)
    if statement == DEGREE:
        return decode_degree(remainder)
    if statement == BMATRIX:
        return decode_bmat(remainder)
    if statement == STEP:
        return decode_step(remainder)
    raise AssertionError(f"Unrecognized Curve/Surface statement: {statement!r}")


def apply_attribute(attributes: CSAttributes, record: AttributeRecord) -> CSAttributes:
    if isinstance(record, CSType):
        return dataclasses.replace(attributes, cstype=record)
    if isinstance(record, PDegree):
        return dataclasses.replace(attributes, degree=record)
    if isinstance(record, BasisMatrix):
        if record.direction == "u":
            return dataclasses.replace(attributes, bmatu=record)
        return dataclasses.replace(attributes, bmatv=record)
    if isinstance(record, Step):
        return dataclasses.replace(attributes, step=record)
    raise AssertionError(f"Not an attribute record: {record!r}")
