import functools
import re
import sys

from requests import Session

from config import USER_AGENT


def get_http_client(*, auth: tuple | None = None, headers: dict | None = None, timeout: int = 30) -> Session:
    if not headers:
        headers = {}

    s = Session()
    s.auth = auth
    s.headers.update({'User-Agent': USER_AGENT} | headers)
    s.request = functools.partial(s.request, timeout=timeout)

    return s


ESCAPE_TABLE = str.maketrans({
    '"': '\\"',
    '\\': '\\\\'
})


def escape_overpass(unsafe: str) -> str:
    return unsafe.translate(ESCAPE_TABLE)


def escape_overpass_regex(unsafe: str) -> str:
    return escape_overpass(re.escape(unsafe))


def status(message: str) -> None:
    # stdout is reserved for results
    print(message, file=sys.stderr)
