import logging

import azure.functions as func

from .access_decider import decide
from .config_factory import load_access_config
from .data import AccessConfig, MatchResult, Request, resolve_client_ip
from .no_access import NO_ACCESS_STATUS, no_access_content

log = logging.getLogger(__name__)

def function_req_to_request(req: func.HttpRequest) -> Request:
    """
    Convert an Azure Function request to a Request object.
    Functions don't expose the connection's address, so the client IP only comes from the headers.
    """
    path = req.url
    if not path:
        raise ValueError("Path not found in request")
    if path.startswith("http://") or path.startswith("https://"):
        slash_idx = path.find("/", 8)
        path = path[slash_idx:] if slash_idx != -1 else "/"

    headers = dict(req.headers.items()) if req.headers else {}
    method = req.method
    if not method:
        method = "GET"

    return Request(method, path, headers, client_ip=resolve_client_ip(headers))


def respond_no_access(error_page:str = None) -> func.HttpResponse:
    content, mimetype = no_access_content(error_page)
    return func.HttpResponse(content, status_code=NO_ACCESS_STATUS, mimetype=mimetype)


def validate_function_request(req: func.HttpRequest, config:AccessConfig = None, error_page:str = None) -> tuple[bool, MatchResult, func.HttpResponse]:
    """
    Validate the request's client IP against the access config.
    """
    if req is None:
        return False, MatchResult(False, reason="Invalid Request"), func.HttpResponse("Invalid Request", status_code=400)

    if config is None:
        config = load_access_config()

    request = function_req_to_request(req)
    result = decide(request.client_ip, config)
    if result.allowed:
        log.debug("Allowed %s to %s (%s: %s)", request.client_ip, request.path(), result.rule, result.matched_entry)
        return True, result, None

    log.info("Denied %s to %s: %s", request.client_ip, request.path(), result.reason)
    return False, result, respond_no_access(error_page)
