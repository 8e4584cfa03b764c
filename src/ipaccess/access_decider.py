from .data import AccessConfig, MatchResult
from .rules import entries_for_family, FAMILY_ORDER

def decide(client_ip:str, config:AccessConfig) -> MatchResult:
    """
    Decide if the client IP is allowed in, given the access config.

    The restriction is opt-in: when it is not enabled, or when the allow-list is empty, everyone is allowed.
    NB: an enabled restriction with an empty allow-list is NOT a lock-out, it lets every client in.

    Otherwise the allow-list families are tried in a fixed order (exact, range, cidr, wildcard),
    and the first entry that matches lets the client in.
    Malformed entries never match, they never raise.
    """
    if config is None or not config.enabled:
        return MatchResult(True, rule="disabled", reason="IP restriction is not enabled")

    allowed_ips = config.allowed_ips
    if not allowed_ips:
        return MatchResult(True, rule="empty-allow-list", reason="No allowed IPs configured")

    for family in FAMILY_ORDER:
        for entry in entries_for_family(allowed_ips, family):
            if entry.matches(client_ip):
                return MatchResult(True, matched_entry=entry.source, rule=family)

    return MatchResult(False, reason=f"Client IP {client_ip} does not match any allowed IP")


def has_access(client_ip:str, config:AccessConfig) -> bool:
    return decide(client_ip, config).allowed
