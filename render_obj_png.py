#!/usr/bin/env python3
"""
Render the geometric vertices of a Wavefront OBJ file as a PNG point preview.

Vertices are projected onto one of the axis planes and drawn as dots; no
faces are drawn. Example:

    python render_obj_png.py bunny.obj --preview bunny_xy.png --size 512 --plane xy
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence, Tuple

from PIL import Image, ImageDraw

from wavobj import ObjParseError, Vertex, load_obj, project_points
from wavobj.geometry import PROJECTION_AXES


def _collect_bounds(points: Sequence[Tuple[float, float]]) -> Tuple[float, float, float, float]:
    if not points:
        raise RuntimeError("Unable to compute bounds for the requested geometry.")
    xs = [pt[0] for pt in points]
    ys = [pt[1] for pt in points]
    return min(xs), max(xs), min(ys), max(ys)


def _build_transform(
    bounds: Tuple[float, float, float, float],
    size_px: int,
    padding_ratio: float,
) -> Callable[[Tuple[float, float]], Tuple[float, float]]:
    """Fit the padded bounds into a square image, centred, y axis pointing up."""

    min_x, max_x, min_y, max_y = bounds
    span = max(max_x - min_x, max_y - min_y, 1e-9) * (1.0 + 2.0 * padding_ratio)
    scale = size_px / span
    mid_x = (min_x + max_x) / 2.0
    mid_y = (min_y + max_y) / 2.0
    half = size_px / 2.0

    def transform(point: Tuple[float, float]) -> Tuple[float, float]:
        return half + (point[0] - mid_x) * scale, half - (point[1] - mid_y) * scale

    return transform


def render_png(
    vertices: Sequence[Vertex],
    destination: Path,
    size_px: int,
    *,
    plane: str = "xy",
    padding_ratio: float = 0.05,
) -> None:
    points = project_points(vertices, plane)
    transform = _build_transform(_collect_bounds(points), size_px, padding_ratio)

    image = Image.new("RGBA", (size_px, size_px), (255, 255, 255, 0))
    draw = ImageDraw.Draw(image)
    radius = max(1, int(size_px / 256))

    for point in points:
        px, py = transform(point)
        draw.ellipse([px - radius, py - radius, px + radius, py + radius], fill="black")

    destination.parent.mkdir(parents=True, exist_ok=True)
    image.save(destination)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render Wavefront OBJ vertices to a PNG point preview.")
    parser.add_argument("input", type=Path, help="Source .obj file")
    parser.add_argument("--preview", type=Path, required=True, help="Destination PNG")
    parser.add_argument("--size", type=int, default=256, help="Image size in pixels (square, default: 256)")
    parser.add_argument("--plane", choices=sorted(PROJECTION_AXES), default="xy", help="Projection plane (default: xy)")
    parser.add_argument("--lenient-cstype", action="store_true", help="Accept unknown curve/surface type names")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        scene = load_obj(args.input, strict_cstype=not args.lenient_cstype)
    except (ObjParseError, OSError) as exc:
        print(f"[!] {args.input}: {exc}", file=sys.stderr)
        return 1
    vertices = scene.shape.vertex_data.vertices
    if not vertices:
        print(f"[!] {args.input}: no geometric vertices to render", file=sys.stderr)
        return 1
    render_png(vertices, args.preview, args.size, plane=args.plane)
    print(f"[+] Preview PNG written to {args.preview} ({len(vertices)} vertices, plane {args.plane})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
