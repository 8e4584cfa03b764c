
class Request:
    """
    The parts of an incoming request the access check cares about.
    """
    method:str
    urlpath:str
    headers:dict[str,str]
    client_ip:str

    def __init__(self, method:str, path:str, headers:dict[str,str] = None, client_ip:str = None):
        self.method = method
        self.urlpath = path
        self.headers = headers or {}
        self.client_ip = client_ip

    def path(self, exclude_query:bool=True) -> str:
        if exclude_query:
            return self.urlpath.split("?")[0]
        return self.urlpath

    def __repr__(self):
        return f"Request(method={self.method}, path={self.urlpath}, client_ip={self.client_ip})"


def resolve_client_ip(headers:dict[str,str], fallback:str = None) -> str:
    """
    Work out the client IP: the x-client-ip header, then the first x-forwarded-for address,
    then the address of the connection itself.
    Either header can be switched off by setting it to "ignore".
    """
    lower_headers = { key.lower(): value for key, value in (headers or {}).items() }

    client_ip = None
    if 'x-client-ip' in lower_headers and lower_headers['x-client-ip'] != "ignore":
        client_ip = lower_headers['x-client-ip'].strip()

    if not client_ip and 'x-forwarded-for' in lower_headers and lower_headers['x-forwarded-for'] != "ignore":
        forwarded_ips = lower_headers['x-forwarded-for']
        client_ip = forwarded_ips.split(",")[0].strip()

    if not client_ip:
        client_ip = fallback
    return client_ip
