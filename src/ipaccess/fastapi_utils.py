import logging

from azurefunctions.extensions.http.fastapi import Request as FastApiRequest, Response as FastApiResponse

from .access_decider import decide
from .config_factory import load_access_config
from .data import AccessConfig, MatchResult, Request, resolve_client_ip
from .no_access import NO_ACCESS_STATUS, no_access_content

log = logging.getLogger(__name__)

def fastapi_req_to_request(req: FastApiRequest, override_path:str = None) -> Request:
    """
    Convert a FastAPI request to a Request object.
    """
    if type(req) is Request:
        return req

    path = override_path if override_path else req.url.path
    headers = dict(req.headers.items()) if req.headers else {}
    method = req.method
    if not method:
        method = "GET"

    peer_ip = req.client.host if req.client else None
    client_ip = resolve_client_ip(headers, peer_ip)
    return Request(method, path, headers, client_ip=client_ip)


def respond_no_access(error_page:str = None) -> FastApiResponse:
    content, media_type = no_access_content(error_page)
    return FastApiResponse(content, status_code=NO_ACCESS_STATUS, media_type=media_type)


def validate_admin_request(req: FastApiRequest, config:AccessConfig = None, error_page:str = None, override_path:str = None) -> tuple[bool, MatchResult, FastApiResponse]:
    """
    Check the request's client IP against the access config (loaded from the config source when not given).
    Returns the decision, and a 403 response to send back when the client is not allowed.
    """
    if config is None:
        config = load_access_config()

    request = fastapi_req_to_request(req, override_path)
    result = decide(request.client_ip, config)
    if result.allowed:
        log.debug("Allowed %s to %s (%s: %s)", request.client_ip, request.path(), result.rule, result.matched_entry)
        return True, result, None

    log.info("Denied %s to %s: %s", request.client_ip, request.path(), result.reason)
    return False, result, respond_no_access(error_page)
