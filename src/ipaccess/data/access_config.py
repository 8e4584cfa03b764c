from dataclasses import dataclass

_TRUE_VALUES = ("true", "1", "yes", "on")

def parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in _TRUE_VALUES

def parse_ip_list(value) -> tuple[str, ...]:
    """
    Parse an allow-list.
    A comma/newline separated string (e.g. from an environment variable) is split, trimmed and blanks dropped.
    A list is kept exactly as it is, entries are matched as written and an entry that reads as blank is still an entry.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(item.strip() for item in value.replace("\n", ",").split(",") if item.strip())
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Invalid allowed_ips value, should be a list or a comma separated string: {value!r}")
    return tuple(value)


@dataclass(frozen=True)
class AccessConfig:
    """
    The IP restriction settings.
    The restriction does nothing unless it is enabled, and an empty allow-list lets everyone in
    even when enabled.
    """
    enabled:bool = False
    allowed_ips:tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.allowed_ips, tuple):
            object.__setattr__(self, "allowed_ips", parse_ip_list(self.allowed_ips))

    @classmethod
    def from_dict(cls, data:dict) -> "AccessConfig":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Invalid access config, should be a dictionary")
        enabled = parse_bool(data.get("enabled", False))
        allowed_ips = data.get("allowed_ips", data.get("allowedIps", None))
        return cls(enabled, parse_ip_list(allowed_ips))
