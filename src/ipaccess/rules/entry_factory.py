from threading import Lock
from cachetools import LRUCache, cached

from .entry import AllowListEntry
from .exact_check import ExactEntry
from .range_check import RangeEntry
from .cidr_check import CIDREntry
from .wildcard_check import WildcardEntry

## Families are always tried in this order, whatever the order of the allow-list
FAMILY_ORDER = ("exact", "range", "cidr", "wildcard")

_CLASSIFY_CACHE = LRUCache(maxsize=1024)
_CLASSIFY_LOCK = Lock()

@cached(cache=_CLASSIFY_CACHE, lock=_CLASSIFY_LOCK)
def classify_entry(raw:str) -> dict[str, AllowListEntry]:
    """
    Work out which families an allow-list entry takes part in, by the shape of the string.
    Every entry is an exact entry; one with a '-' is also tried as a range, one with a '/' as a
    CIDR block and one ending in '*' as a wildcard.
    A family whose shape the entry does not fit is simply left out.
    """
    families = { "exact": ExactEntry(raw) }
    if '-' in raw:
        entry = RangeEntry.parse(raw)
        if entry is not None:
            families["range"] = entry
    if '/' in raw:
        entry = CIDREntry.parse(raw)
        if entry is not None:
            families["cidr"] = entry
    if raw.endswith('*'):
        families["wildcard"] = WildcardEntry(raw)
    return families

def entries_for_family(raw_entries:list[str], family:str) -> list[AllowListEntry]:
    """
    Get the entries of the allow-list that take part in the given family.
    """
    if family not in FAMILY_ORDER:
        raise ValueError(f"Invalid entry family: {family}")
    entries = []
    for raw in raw_entries:
        if not isinstance(raw, str):
            continue
        entry = classify_entry(raw).get(family, None)
        if entry is not None:
            entries.append(entry)
    return entries
