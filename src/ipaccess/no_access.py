import logging
import os

log = logging.getLogger(__name__)

NO_ACCESS_STATUS = 403
NO_ACCESS_BODY = "The requested page could not be found."

def no_access_content(error_page:str = None) -> tuple[str, str]:
    """
    Get the body and mimetype for a denied request.
    Uses the custom error page (argument, or IP_ACCESS_ERROR_PAGE) when there is one and it can be read,
    otherwise a plain text message.
    """
    if error_page is None:
        error_page = os.environ.get('IP_ACCESS_ERROR_PAGE', None)
    if error_page:
        try:
            with open(error_page, "r", encoding="utf-8") as f:
                return f.read(), "text/html"
        except OSError as e:
            log.warning("Unable to read the error page %s, falling back to plain text: %s", error_page, e)
    return NO_ACCESS_BODY, "text/plain"
