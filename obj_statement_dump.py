#!/usr/bin/env python3
"""
Dump the statements of a Wavefront OBJ file as the parser classifies them.

Each output line shows the 1-based source line, the matched keyword (or
``unrecognized``) and the remaining fields, which makes it easy to see which
statements the loader will pick up and which it will skip.
"""

from __future__ import annotations

import argparse
import itertools
import sys
from pathlib import Path
from typing import Sequence

from wavobj import KEYWORDS, SKIP, UNRECOGNIZED, Statement, StatementLogger, iter_statements


def describe_statement(statement: Statement) -> str:
    parts = [f"line={statement.line_number}", f"kind={statement.kind}"]
    if statement.kind in (SKIP, UNRECOGNIZED):
        parts.append(f"raw={statement.raw!r}")
    else:
        fields = statement.remainder.split()
        parts.append(f"fields={len(fields)}")
        if fields:
            parts.append(" ".join(fields))
    return " | ".join(parts)


def _parse_kinds(value: str) -> frozenset[str]:
    kinds = frozenset(item.strip() for item in value.split(",") if item.strip())
    unknown = kinds - set(KEYWORDS) - {SKIP, UNRECOGNIZED}
    if unknown:
        raise argparse.ArgumentTypeError(f"unknown statement kind(s): {', '.join(sorted(unknown))}")
    return kinds


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dump classified statements from a Wavefront OBJ file.")
    parser.add_argument("input", type=Path, help="Path to the .obj file")
    parser.add_argument("--kinds", type=_parse_kinds, help="Comma separated statement kinds to keep (e.g. v,vn,cstype)")
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of statements to print (default: no limit)",
    )
    parser.add_argument(
        "--include-skipped",
        action="store_true",
        help="Also list blank lines and comments",
    )
    parser.add_argument("--log", type=Path, help="Optional file receiving the same listing")
    parser.add_argument("--encoding", default="utf-8", help="Text encoding of the input (default: utf-8)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        with args.input.open("r", encoding=args.encoding) as handle:
            lines = list(handle)
    except OSError as exc:
        print(f"[!] {args.input}: {exc}", file=sys.stderr)
        return 1
    statements = iter_statements(lines, include_skipped=args.include_skipped)
    if args.kinds:
        statements = (st for st in statements if st.kind in args.kinds)
    if args.limit is not None:
        statements = itertools.islice(statements, args.limit)
    logger = StatementLogger(args.log) if args.log else None
    count = 0
    for statement in statements:
        print(describe_statement(statement))
        if logger is not None:
            logger.record(statement)
        count += 1
    if logger is not None:
        logger.flush()
    if count == 0:
        print("No statements matched the requested filters.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
