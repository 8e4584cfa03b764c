from ipaddress import IPv4Address, AddressValueError
from .entry import AllowListEntry, parse_decimal

_ALL_BITS = 0xFFFFFFFF

def ip_to_int(ip:str) -> int:
    """
    Convert a dotted quad to its 32 bit value, returns None for anything that is not a valid IPv4 address.
    """
    if ip is None:
        return None
    try:
        return int(IPv4Address(ip))
    except AddressValueError:
        return None

class CIDREntry(AllowListEntry):
    """
    Match a client IP against a CIDR block, e.g. 192.168.1.0/24
    The client IP is masked and compared with the network exactly as written, the network
    itself is not masked (so 192.168.1.5/24 matches nothing).
    Masks outside 0-32 never match.
    """
    network:str
    mask_bits:int

    def __init__(self, source: str, network: str, mask_bits: int):
        self.network = network
        self.mask_bits = mask_bits
        super().__init__(source)

    @classmethod
    def parse(cls, source: str) -> "CIDREntry":
        """
        Parse a network/mask entry, returns None when the entry is not a usable CIDR block.
        """
        arr = source.split('/')
        if len(arr) != 2:
            return None
        mask_bits = parse_decimal(arr[1])
        if mask_bits is None or mask_bits > 32:
            return None
        return cls(source, arr[0], mask_bits)

    def netmask(self) -> int:
        return ~((1 << (32 - self.mask_bits)) - 1) & _ALL_BITS

    def matches(self, client_ip:str) -> bool:
        ip_val = ip_to_int(client_ip)
        net_val = ip_to_int(self.network)
        if ip_val is None or net_val is None:
            return False
        return (ip_val & self.netmask()) == net_val
