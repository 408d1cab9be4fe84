"""CSV tokenizing and cell coercion utilities.

Everything here is pure: text in, strings and numbers out. Entity construction
lives in :mod:`civicfolio.services.importers`.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Sequence

Row = list[str]

_QUOTE = '"'
_DELIMITER = ","
# ASCII digits only; other Unicode digits are unparseable cells.
_FLOAT_PREFIX = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT_PREFIX = re.compile(r"^[+-]?[0-9]+")


def tokenize_line(line: str) -> Row:
    """Split one CSV line into trimmed fields.

    A double quote toggles the "inside quotes" state and is dropped from the
    output; commas only separate fields outside quotes. There is no escape for
    a literal quote inside a quoted field, so ``""`` simply toggles twice.
    """

    fields: Row = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == _QUOTE:
            in_quotes = not in_quotes
        elif char == _DELIMITER and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append("".join(current).strip())
    return fields


def tokenize(text: str) -> list[Row]:
    """Turn raw CSV text into rows of fields.

    Lines are split on ``\\n``; blank or whitespace-only lines are dropped rather
    than turned into empty rows. Quoted fields never span lines.
    """

    return [tokenize_line(line) for line in text.split("\n") if line.strip()]


@dataclass(frozen=True, slots=True)
class HeaderIndex:
    """Name to column-position map computed once per file.

    Lookups follow the first occurrence of a header name. Names are
    case-sensitive and must match exactly.
    """

    positions: dict[str, int]

    @classmethod
    def from_header(cls, header: Sequence[str]) -> "HeaderIndex":
        positions: dict[str, int] = {}
        for idx, name in enumerate(header):
            positions.setdefault(name, idx)
        return cls(positions=positions)

    def __contains__(self, name: object) -> bool:
        return name in self.positions

    def cell(self, row: Sequence[str], name: str) -> Optional[str]:
        """Return the raw cell for column ``name``.

        ``None`` means the column is absent from the header or the row is too
        short to reach it; an empty string means the cell exists but is blank.
        """

        idx = self.positions.get(name)
        if idx is None or idx >= len(row):
            return None
        return row[idx]

    def text(self, row: Sequence[str], name: str, default: str = "") -> str:
        """Cell text, or ``default`` when the cell is absent or empty."""

        value = self.cell(row, name)
        return value if value else default

    def optional_text(self, row: Sequence[str], name: str) -> Optional[str]:
        return self.cell(row, name) or None


def parse_float_prefix(raw: Optional[str]) -> Optional[float]:
    """Parse the leading decimal number of ``raw`` (``"2500000 USD"`` -> 2500000.0).

    Returns ``None`` when no number starts the (trimmed) text.
    """

    if not raw:
        return None
    match = _FLOAT_PREFIX.match(raw.strip())
    if match is None:
        return None
    return float(match.group(0))


def parse_int_prefix(raw: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``raw`` (``"7.9"`` -> 7)."""

    if not raw:
        return None
    match = _INT_PREFIX.match(raw.strip())
    if match is None:
        return None
    return int(match.group(0))


def coerce_amount(raw: Optional[str], default: float = 0.0) -> float:
    """Monetary cells: non-negative float, ``default`` when absent or unparseable."""

    value = parse_float_prefix(raw)
    if value is None or value < 0 or not math.isfinite(value):
        return default
    return value


def coerce_scale(raw: Optional[str], default: int = 5) -> int:
    """1-10 scale cells: integer prefix; absent, unparseable or zero gives ``default``.

    The range itself is not enforced.
    """

    value = parse_int_prefix(raw)
    return value if value else default


def coerce_date(raw: Optional[str], fallback: Callable[[], date]) -> date:
    """ISO ``YYYY-MM-DD`` cells; anything else yields ``fallback()``."""

    if raw:
        try:
            return date.fromisoformat(raw.strip()[:10])
        except ValueError:
            pass
    return fallback()


def split_list(raw: Optional[str], separator: str = ";") -> list[str]:
    """Split a delimited cell, dropping empty segments and keeping order."""

    if not raw:
        return []
    return [segment for segment in raw.split(separator) if segment]
