
from .data import AccessConfig, MatchResult
from .access_decider import decide, has_access
