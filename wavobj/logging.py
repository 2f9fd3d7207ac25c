from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from .entities import Statement


def log_unrecognized_statements(statements: Sequence[Statement], destination: Path) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    lines: List[str] = []
    for idx, entry in enumerate(statements, start=1):
        keyword = entry.raw.split(maxsplit=1)[0] if entry.raw else ""
        lines.append(f"#{idx:04d} line={entry.line_number} keyword={keyword!r}")
        lines.append(f"       {entry.raw}")
    destination.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")


@dataclass
class StatementLogger:
    destination: Path
    width: int = 10

    def __post_init__(self) -> None:
        self._lines: List[str] = []

    def record(self, statement: Statement, *, note: str | None = None) -> None:
        entry = f"line={statement.line_number:<6} kind={statement.kind:<{self.width}} | {statement.remainder.strip()}"
        if note:
            entry += f" | {note}"
        self._lines.append(entry)

    def flush(self) -> None:
        if not self._lines:
            return
        self.destination.parent.mkdir(parents=True, exist_ok=True)
        text = "\n".join(self._lines) + "\n"
        self.destination.write_text(text, encoding="utf-8")
