#!/usr/bin/env python3
"""
Summarize a Wavefront OBJ file: vertex counts per kind, the bounding box of
the geometric vertices and any free-form curve/surface attributes.

Optionally emits the full scene as JSON and a report of every statement the
parser skipped (faces, groups, materials, ...):

    python obj_summary.py model.obj --json model.json --skip-log skipped.txt
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from wavobj import (
    ObjParseError,
    Scene,
    UNRECOGNIZED,
    bounding_box,
    iter_statements,
    log_unrecognized_statements,
    parse_lines,
)


def _print_summary(scene: Scene) -> None:
    shape = scene.shape
    counts = shape.vertex_data.counts()
    print(
        f"[+] vertices={counts['vertices']} normals={counts['normals']} "
        f"points={counts['points']} textures={counts['textures']}"
    )
    if shape.vertex_data.vertices:
        lo, hi = bounding_box(shape.vertex_data.vertices)
        print(
            f"[+] bbox=({lo[0]:+.4f},{lo[1]:+.4f},{lo[2]:+.4f})-"
            f"({hi[0]:+.4f},{hi[1]:+.4f},{hi[2]:+.4f})"
        )
    attrs = shape.attributes
    if attrs.is_empty():
        return
    print("[attributes]")
    if attrs.cstype is not None:
        print(f"  cstype {attrs.cstype.rat} {attrs.cstype.name}")
    if attrs.degree is not None:
        print(f"  deg    {attrs.degree.degu} {attrs.degree.degv}")
    for matrix in (attrs.bmatu, attrs.bmatv):
        if matrix is not None:
            print(f"  bmat   {matrix.direction} {matrix.rows}x{matrix.columns}")
    if attrs.step is not None:
        print(f"  step   {attrs.step.stepu} {attrs.step.stepv}")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize a Wavefront OBJ file.")
    parser.add_argument("input", type=Path, help="Path to the .obj file")
    parser.add_argument("--json", type=Path, help="Optional destination for the parsed scene as JSON")
    parser.add_argument("--skip-log", type=Path, help="Optional report of statements the parser skipped")
    parser.add_argument("--encoding", default="utf-8", help="Text encoding of the input (default: utf-8)")
    parser.add_argument(
        "--lenient-cstype",
        action="store_true",
        help="Accept curve/surface type names outside bmatrix/bezier/bspline/cardinal/taylor",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        with args.input.open("r", encoding=args.encoding) as handle:
            lines = list(handle)
        scene = parse_lines(lines, strict_cstype=not args.lenient_cstype, source=str(args.input))
    except (ObjParseError, OSError) as exc:
        print(f"[!] {args.input}: {exc}", file=sys.stderr)
        return 1
    print(f"[+] Parsed {args.input} ({len(lines)} lines)")
    _print_summary(scene)
    if args.skip_log:
        skipped = [st for st in iter_statements(lines) if st.kind == UNRECOGNIZED]
        log_unrecognized_statements(skipped, args.skip_log)
        print(f"[i] {len(skipped)} unrecognized statement(s) logged to {args.skip_log}")
    if args.json:
        args.json.write_text(json.dumps(scene.to_dict(), indent=2), encoding="utf-8")
        print(f"[+] JSON summary written to {args.json}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
