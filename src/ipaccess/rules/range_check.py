from .entry import AllowListEntry, parse_decimal

class RangeEntry(AllowListEntry):
    """
    Match a client IP against a range in the last dotted component, e.g. 192.168.1.50-100
    The bounds are plain integers and both ends are inclusive, so 192.168.1.050-100 covers
    192.168.1.50 but never 192.168.1.050.
    The range is textual: the client IP has to be the prefix followed by the decimal form of
    a number between start and end.
    The last component has to be exactly start-end, so 192.168.1.5-6-7 is not a range and never matches.
    """
    prefix:str
    start:int
    end:int

    def __init__(self, source: str, prefix: str, start: int, end: int):
        self.prefix = prefix
        self.start = start
        self.end = end
        super().__init__(source)

    @classmethod
    def parse(cls, source: str) -> "RangeEntry":
        """
        Parse a dash range, returns None when the entry is not a usable range.
        """
        dot_idx = source.rfind('.')
        if dot_idx == -1:
            return None

        prefix = source[:dot_idx + 1]
        arr = source[dot_idx + 1:].split('-')
        if len(arr) != 2:
            return None
        start = parse_decimal(arr[0])
        end = parse_decimal(arr[1])
        if start is None or end is None:
            return None
        return cls(source, prefix, start, end)

    def matches(self, client_ip:str) -> bool:
        if client_ip is None or not client_ip.startswith(self.prefix):
            return False

        ## Same as checking client_ip == prefix + str(i) for every i in [start, end]
        last = client_ip[len(self.prefix):]
        if not last.isascii() or not last.isdigit():
            return False
        if str(int(last)) != last:
            return False    # Leading zeros never come out of str(i)
        return self.start <= int(last) <= self.end
