"""Feeding server responses into a cookie jar."""

from multidict import CIMultiDict

from . import hdrs
from .cookiejar import CookieJar
from .log import jar_logger
from .typedefs import LooseHeaders, StrOrURL

__all__ = ("update_from_response",)


def update_from_response(
    jar: CookieJar, response_url: StrOrURL, headers: LooseHeaders
) -> int:
    """Apply every Set-Cookie header of a response to jar.

    Nothing is applied to a locked jar. Returns the number of
    Set-Cookie headers handed to the jar.
    """
    if jar.locked:
        jar_logger.debug("Jar is locked, ignoring cookies from %s", response_url)
        return 0

    if not isinstance(headers, CIMultiDict):
        headers = CIMultiDict(headers)

    applied = 0
    for raw_cookie in headers.getall(hdrs.SET_COOKIE, ()):
        jar.set_raw(response_url, raw_cookie)
        applied += 1
    return applied
