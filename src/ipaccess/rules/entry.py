from abc import abstractmethod, ABC

class AllowListEntry(ABC):
    source:str

    def __init__(self, source: str):
        self.source = source

    @abstractmethod
    def matches(self, client_ip:str) -> bool:
        pass

    def __repr__(self):
        return f"{type(self).__name__}(source={self.source!r})"


def parse_decimal(value:str) -> int:
    """
    Parse a plain decimal number (surrounding whitespace allowed), returns None for anything else.
    """
    value = value.strip()
    if not value or not value.isascii() or not value.isdigit():
        return None
    return int(value)
