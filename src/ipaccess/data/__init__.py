
from .access_config import AccessConfig, parse_bool, parse_ip_list
from .match_result import MatchResult
from .request import Request, resolve_client_ip
