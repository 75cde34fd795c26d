"""
Parsers for the line-oriented "key<sep>value" text produced by
/proc pseudo-files, sysctl and WMIC.

Both parsers are best-effort: a line that does not carry a usable pair is
skipped, never reported as an error.
"""
from typing import Dict, Iterable, List, Union

from cpufacts.core.records import KeyValueEntry
from cpufacts.internal.logging import get_logger

logger = get_logger(__name__)

HierarchicalRecord = Dict[str, Union["HierarchicalRecord", str]]


# ---------------------------------------------------------------------
# Flat parser
# ---------------------------------------------------------------------

def split_line(line: str, separator: str):
    """
    Split one line at the first `separator`.
    Returns a KeyValueEntry, or None when the line has no usable pair.
    """
    idx = line.find(separator)
    if idx <= 0 or idx == len(line) - 1:
        return None
    key = line[:idx].strip()
    value = line[idx + 1:].strip()
    if not key or not value:
        return None
    return KeyValueEntry(key, value)


def parse_key_values(lines: Iterable[str], separator: str = ":") -> List[KeyValueEntry]:
    """
    Parse `lines` into (key, value) entries in input order, keeping duplicates.

    Blank lines, lines without `separator`, lines starting with it and lines
    whose key or value is empty after trimming are dropped.
    """
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")

    entries = []
    skipped = 0
    for line in lines:
        if not line.strip():
            continue
        entry = split_line(line, separator)
        if entry is None:
            skipped += 1
            continue
        entries.append(entry)

    if skipped:
        logger.debug("Skipped lines without a key/value pair", separator=separator, skipped=skipped)
    return entries


# ---------------------------------------------------------------------
# Hierarchical parser
# ---------------------------------------------------------------------

def _merge(target: HierarchicalRecord, key: str, value) -> None:
    existing = target.get(key)
    if isinstance(existing, dict) and isinstance(value, dict):
        for child_key, child_value in value.items():
            _merge(existing, child_key, child_value)
    else:
        target[key] = value


def nest_entry(key: str, value: str):
    """
    Peel dot segments off `key` right to left, wrapping `value` once per
    segment: nest_entry("a.b.c", "v") -> ("a", {"b": {"c": "v"}}).
    """
    prefix = key
    nested: Union[HierarchicalRecord, str] = value
    while "." in prefix:
        prefix, _, suffix = prefix.rpartition(".")
        nested = {suffix: nested}
    return prefix, nested


def parse_hierarchical(lines: Iterable[str], namespace: str) -> HierarchicalRecord:
    """
    Parse sysctl style "namespace.a.b: value" lines into a nested record.

    The namespace prefix (e.g. "machdep.cpu.") is removed from each line
    before splitting, so "machdep.cpu.cache.size: 256" becomes
    {"cache": {"size": "256"}}. Keys sharing a prefix are merged.
    """
    prefix = namespace if namespace.endswith(".") else namespace + "."
    stripped = (line.replace(prefix, "", 1) for line in lines)

    record: HierarchicalRecord = {}
    for key, value in parse_key_values(stripped, ":"):
        top, nested = nest_entry(key, value)
        if not top:
            continue
        _merge(record, top, nested)
    return record


def lookup(record: HierarchicalRecord, path: str, default: str = "") -> str:
    """
    Walk a dotted `path` through `record`; missing paths and subtrees give `default`.
    """
    node = record
    for segment in path.split("."):
        if not isinstance(node, dict) or segment not in node:
            return default
        node = node[segment]
    return node if isinstance(node, str) else default
