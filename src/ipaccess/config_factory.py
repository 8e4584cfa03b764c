import logging
import os
from threading import Lock

from cachetools import TTLCache
from .data import AccessConfig, parse_bool, parse_ip_list
from .dataaccess import CosmosDBConnection

log = logging.getLogger(__name__)

DEFAULT_CONFIG_TTL = 60

def config_ttl(value:str = None) -> int:
    """
    Get the number of seconds a loaded config is cached for (IP_ACCESS_CONFIG_TTL).
    """
    if value is None:
        value = os.environ.get('IP_ACCESS_CONFIG_TTL', None)
    if value is None or not str(value).strip():
        return DEFAULT_CONFIG_TTL
    try:
        ttl = int(value)
    except ValueError:
        ttl = -1
    if ttl < 0:
        log.warning("Invalid IP_ACCESS_CONFIG_TTL %r, using %d seconds", value, DEFAULT_CONFIG_TTL)
        return DEFAULT_CONFIG_TTL
    return ttl

_CONFIG_CACHE = TTLCache(maxsize=16, ttl=config_ttl())
_CONFIG_LOCK = Lock()
_COSMOS_DB_CONNECTION = None

def config_from_env(environ:dict[str,str] = None) -> AccessConfig:
    """
    Build the access config from the IP_ACCESS_* environment variables.
    """
    if environ is None:
        environ = os.environ
    enabled = parse_bool(environ.get('IP_ACCESS_ENABLED', None))
    allowed_ips = parse_ip_list(environ.get('IP_ACCESS_ALLOWED_IPS', None))
    return AccessConfig(enabled, allowed_ips)

def config_from_cosmos(item_id:str = None) -> AccessConfig:
    """
    Read the access config document from CosmosDB.
    A missing document means the restriction has not been set up, so it is treated as disabled.
    """
    global _COSMOS_DB_CONNECTION
    if not item_id:
        item_id = os.environ.get('IP_ACCESS_COSMOS_ITEM_ID', "ip-access")

    if not _COSMOS_DB_CONNECTION:
        container_name = os.environ.get('IP_ACCESS_COSMOS_CONTAINER', "config")
        db_name = os.environ.get('IP_ACCESS_COSMOS_DB', "config")
        endpoint = os.environ.get('COSMOS_ENDPOINT', None)
        _COSMOS_DB_CONNECTION = CosmosDBConnection(container_name, db_name, endpoint)

    data = _COSMOS_DB_CONNECTION.get_item(item_id)
    if not data:
        log.warning("Access config document %s not found, IP restriction is disabled", item_id)
        return AccessConfig()
    return AccessConfig.from_dict(dict(data))

def load_access_config(source:str = None) -> AccessConfig:
    """
    Get the access config from the cache, or load it from the configured source (env or cosmos).
    The cache expires so changes to the config are picked up between requests.
    """
    if not source:
        source = os.environ.get('IP_ACCESS_CONFIG_SOURCE', "env")
    source = source.lower()
    with _CONFIG_LOCK:
        config = _CONFIG_CACHE.get(source, None)
        if config is not None:
            return config

        if source == "env":
            config = config_from_env()
        elif source == "cosmos":
            config = config_from_cosmos()
        else:
            raise ValueError(f"Invalid access config source: {source}")

        if config.enabled and not config.allowed_ips:
            log.warning("IP restriction is enabled but the allow-list is empty, all clients are allowed")

        _CONFIG_CACHE[source] = config
        return config

def clear_config_cache():
    with _CONFIG_LOCK:
        _CONFIG_CACHE.clear()
