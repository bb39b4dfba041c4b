"""Line-based price series parser.

Accepted row shapes::

    2024-01-02, 432.18
    2024-01-02 432.18
    Jan 02 432.18
    432.18

Rows without a usable number are skipped and reported, never raised.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from pathlib import Path

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_FLOAT_PREFIX_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

MAX_REPORTED_LINES = 3


@dataclass(slots=True)
class ParsedSeries:
    """Parsed labels/values plus the rows that could not be read."""

    labels: list[str] = field(default_factory=list)
    values: list[float] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    error: str | None = None

    def __len__(self) -> int:
        return len(self.values)


def parse_float_prefix(text: str) -> float | None:
    """Return the finite float at the start of ``text`` or ``None``.

    Trailing garbage is ignored (``"12.5abc"`` -> 12.5).
    """
    match = _FLOAT_PREFIX_RE.match(text.strip())
    if match is None:
        return None
    try:
        value = float(match.group(0))
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _split_row(clean: str, line_number: int) -> tuple[str, str]:
    if "," in clean:
        parts = clean.split(",")
        label = parts[0].strip() or f"Point {line_number}"
        fragment = parts[1].strip() if len(parts) > 1 else ""
        return label, fragment

    parts = clean.split()
    if len(parts) == 1:
        return f"Point {line_number}", parts[0]
    return " ".join(parts[:-1]), parts[-1]


def format_skip_error(skipped: list[str]) -> str | None:
    if not skipped:
        return None
    preview = ", ".join(f'"{line}"' for line in skipped[:MAX_REPORTED_LINES])
    return f"Skipped {len(skipped)} line(s): {preview}"


def parse_series(raw: str | None) -> ParsedSeries:
    """Parse ``label, value`` or whitespace-delimited rows into a series."""
    trimmed = (raw or "").strip()
    if not trimmed:
        return ParsedSeries()

    parsed = ParsedSeries()
    for index, line in enumerate(_LINE_SPLIT_RE.split(trimmed)):
        clean = line.strip()
        if not clean:
            continue
        label, fragment = _split_row(clean, index + 1)
        value = parse_float_prefix(fragment)
        if value is None:
            parsed.skipped.append(clean)
            continue
        parsed.labels.append(label)
        parsed.values.append(value)

    parsed.error = format_skip_error(parsed.skipped)
    return parsed


def read_series_file(path: str | Path) -> ParsedSeries:
    """Read a UTF-8 text file and parse it with :func:`parse_series`."""
    return parse_series(Path(path).read_text(encoding="utf-8"))
