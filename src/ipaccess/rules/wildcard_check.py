from .entry import AllowListEntry

class WildcardEntry(AllowListEntry):
    """
    Match a client IP that starts with the entry, minus its trailing wildcard, e.g. 192.168.1.* or 192.168.*
    The prefix is compared as plain text, so 192.168.1* matches 192.168.10.5 as well as 192.168.1.5
    """
    prefix_literal:str

    def __init__(self, source: str):
        self.prefix_literal = source[:-1] if source.endswith('*') else source
        super().__init__(source)

    def matches(self, client_ip:str) -> bool:
        if client_ip is None:
            return False
        return client_ip.startswith(self.prefix_literal)
