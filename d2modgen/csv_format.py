"""Reading and writing the game's tab-separated text tables."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_LINE_BREAK = re.compile(r"\r\n?|\n")


@dataclass
class Table:
    """A header row of column names and rows of string cells."""

    columns: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)


def read_csv(data: str) -> Table:
    """Parse tab-separated text; the first line names the columns.

    Lines may end with CR, LF or CR LF. Raises ValueError on empty input.
    """
    if not data:
        raise ValueError("table text is empty")
    lines = _LINE_BREAK.split(data)
    if data.endswith(("\r", "\n")):
        lines.pop()
    header, *body = lines
    return Table(columns=header.split("\t"), rows=[line.split("\t") for line in body])


def write_csv(table: Table) -> str:
    """Render a table as tab-separated text with CR LF line endings."""
    lines = ["\t".join(table.columns)]
    lines.extend("\t".join(row) for row in table.rows)
    return "".join(line + "\r\n" for line in lines)