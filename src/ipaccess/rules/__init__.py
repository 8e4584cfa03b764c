
from .entry import AllowListEntry
from .exact_check import ExactEntry
from .range_check import RangeEntry
from .cidr_check import CIDREntry
from .wildcard_check import WildcardEntry

from .entry_factory import classify_entry, entries_for_family, FAMILY_ORDER
