"""
Collapsing of per-socket record blocks.

WMIC prints one full block of fields per physical socket, so a dual-socket
machine reports every key twice. All sockets are assumed to hold the same
processor: core counts are summed, every other field keeps its first value.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from cpufacts.core.records import KeyValueEntry
from cpufacts.core.units import to_float
from cpufacts.internal.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AggregatedEntries:
    entries: List[KeyValueEntry]
    socket_count: int

    def as_mapping(self) -> Dict[str, str]:
        return {entry.key: entry.value for entry in self.entries}

    def get(self, key: str, default: str = "") -> str:
        wanted = key.casefold()
        for entry in self.entries:
            if entry.key.casefold() == wanted:
                return entry.value
        return default


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


def count_repeats(entries: Sequence[KeyValueEntry]) -> int:
    """How many times the first key occurs; 0 for no entries."""
    if not entries:
        return 0
    first = entries[0].key.casefold()
    return sum(1 for entry in entries if entry.key.casefold() == first)


def aggregate_sockets(entries: Iterable[KeyValueEntry], summed_keys: Sequence[str] = ("NumberOfCores",)) -> AggregatedEntries:
    """
    Merge repeated per-socket blocks into a single block.

    With a single socket the entries are returned unchanged. Otherwise keys
    named in `summed_keys` hold the sum of their occurrences and every other
    key keeps its first occurrence, in first-occurrence order.
    """
    entries = list(entries)
    repeats = count_repeats(entries)
    if repeats <= 1:
        return AggregatedEntries(entries=entries, socket_count=1)

    summed = {key.casefold() for key in summed_keys}
    totals: Dict[str, float] = {}
    for entry in entries:
        folded = entry.key.casefold()
        if folded in summed:
            totals[folded] = totals.get(folded, 0.0) + to_float(entry.value)

    seen = set()
    merged = []
    for entry in entries:
        folded = entry.key.casefold()
        if folded in seen:
            continue
        seen.add(folded)
        if folded in totals:
            entry = KeyValueEntry(entry.key, _format_number(totals[folded]))
        merged.append(entry)

    logger.debug("Aggregated socket blocks", sockets=repeats, keys=len(merged))
    return AggregatedEntries(entries=merged, socket_count=repeats)
