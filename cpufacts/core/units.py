"""
Conversion of "<magnitude> <unit>" text into a plain number of bytes.

Sources report sizes in different shapes ("8192 KB", "MemTotal: 16318252 kB",
"32768"). Everything is reduced to bytes here; text without a number
degrades to 0 instead of raising.
"""
import math
import re
from typing import Iterable, Optional, Union

_MAGNITUDE_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")

# Checked in order against the lower-cased text.
_UNIT_MULTIPLIERS = (
    ("gb", 1024 ** 3),
    ("mb", 1024 ** 2),
    ("kb", 1024),
)


def unit_multiplier(text: str) -> int:
    lowered = text.rstrip().lower()
    for suffix, multiplier in _UNIT_MULTIPLIERS:
        if lowered.endswith(suffix):
            return multiplier
    return 1


def normalize_memory_value(text: Optional[str]) -> Union[int, float]:
    """
    Return the first number found in `text` scaled by its kb/mb/gb suffix.

    >>> normalize_memory_value("1024 kb")
    1048576
    >>> normalize_memory_value("")
    0
    """
    if not text:
        return 0
    match = _MAGNITUDE_RE.search(text)
    if match is None:
        return 0
    value = float(match.group()) * unit_multiplier(text)
    if not math.isfinite(value):
        return 0
    return int(value) if value.is_integer() else value


def read_labeled_value(lines: Iterable[str], label: str) -> Union[int, float]:
    """
    Normalize the first line starting with `label` (meminfo style), or 0.
    """
    for line in lines:
        if line.startswith(label):
            return normalize_memory_value(line[len(label):])
    return 0


def to_float(text: Optional[str], default: float = 0.0) -> float:
    """Parse a numeric field; unparseable or non-finite text gives `default`."""
    try:
        value = float(text)
    except (TypeError, ValueError):
        return default
    return value if math.isfinite(value) else default


def to_int(text: Optional[str], default: int = 0) -> int:
    """Like to_float, truncated to an int ("6.0" -> 6)."""
    value = to_float(text, default=None)
    return default if value is None else int(value)
