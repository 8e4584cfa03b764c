from .entry import AllowListEntry

class ExactEntry(AllowListEntry):
    """
    Match a client IP that is exactly equal to the entry, e.g. 192.168.178.8
    Every allow-list entry takes part in the exact check, whatever its shape.
    """
    ip:str

    def __init__(self, ip: str):
        self.ip = ip
        super().__init__(ip)

    def matches(self, client_ip:str) -> bool:
        if client_ip is None:
            return False
        return client_ip == self.ip
