from dataclasses import dataclass

@dataclass(frozen=True)
class MatchResult:
    allowed:bool
    matched_entry:str = None    ## The allow-list entry that let the client in
    rule:str = None             ## disabled, empty-allow-list, exact, range, cidr or wildcard
    reason:str = "OK"
