"""Various helper functions"""

import calendar
import re
from typing import TYPE_CHECKING

from yarl import URL

from .exceptions import InvalidURL
from .typedefs import StrOrURL

if TYPE_CHECKING:
    from .cookie import Cookie

__all__ = ("is_ip_address", "parse_cookie_date", "scope_url", "to_url")

SECURE_SCHEMES = frozenset(("https", "wss"))

# Characters that cannot appear in a bare host name
_BAD_HOST_RE = re.compile(r"[\s/?#@\\:]")

_DATE_TOKENS_RE = re.compile(
    r"[\x09\x20-\x2F\x3B-\x40\x5B-\x60\x7B-\x7E]*"
    r"(?P<token>[\x00-\x08\x0A-\x1F\d:a-zA-Z\x7F-\xFF]+)"
)
_DATE_HMS_TIME_RE = re.compile(r"(\d{1,2}):(\d{1,2}):(\d{1,2})")
_DATE_DAY_OF_MONTH_RE = re.compile(r"(\d{1,2})")
_DATE_MONTH_RE = re.compile(
    "(jan)|(feb)|(mar)|(apr)|(may)|(jun)|(jul)|(aug)|(sep)|(oct)|(nov)|(dec)",
    re.I,
)
_DATE_YEAR_RE = re.compile(r"(\d{2,4})")


def is_ip_address(host: str | None) -> bool:
    """Check if host looks like an IP Address.

    This check is only meant as a heuristic to ensure that
    a host is not a domain name.
    """
    if not host:
        return False
    # For a host to be an ipv4 address, it must be all numeric.
    # The host must contain a colon to be an IPv6 address.
    return ":" in host or host.replace(".", "").isdigit()


def to_url(url: StrOrURL) -> URL:
    """Coerce ``url`` to an absolute :class:`yarl.URL` with a host.

    Raises :exc:`InvalidURL` for anything else.
    """
    if isinstance(url, URL):
        result = url
    elif isinstance(url, str):
        try:
            result = URL(url)
        except (TypeError, ValueError) as exc:
            raise InvalidURL(url, str(exc)) from exc
    else:
        raise InvalidURL(url, f"expected str or URL, got {type(url).__name__}")

    if not result.is_absolute() or not result.host:
        raise InvalidURL(url, "absolute URL with a host is required")
    return result


def scope_url(cookie: "Cookie") -> URL | None:
    """Build the URL whose visible cookies may conflict with ``cookie``.

    Returns None for cookies without a domain.
    """
    domain = cookie.domain
    if not domain:
        return None

    # Exactly one leading dot is stripped
    if domain[0] == ".":
        domain = domain[1:]

    scheme = "https" if cookie.secure else "http"
    if not domain or _BAD_HOST_RE.search(domain):
        raise InvalidURL(f"{scheme}://{domain}", "invalid cookie domain")
    try:
        return URL.build(scheme=scheme, host=domain)
    except (TypeError, ValueError) as exc:
        raise InvalidURL(f"{scheme}://{domain}", str(exc)) from exc


def parse_cookie_date(date_str: str) -> float | None:
    """Implements date string parsing adhering to RFC 6265.

    Returns a POSIX timestamp, or None when the string is not a valid date.
    """
    if not date_str:
        return None

    found_time = False
    found_day = False
    found_month = False
    found_year = False

    hour = minute = second = 0
    day = 0
    month = 0
    year = 0

    for token_match in _DATE_TOKENS_RE.finditer(date_str):
        token = token_match.group("token")

        if not found_time:
            time_match = _DATE_HMS_TIME_RE.match(token)
            if time_match:
                found_time = True
                hour, minute, second = (int(s) for s in time_match.groups())
                continue

        if not found_day:
            day_match = _DATE_DAY_OF_MONTH_RE.match(token)
            if day_match:
                found_day = True
                day = int(day_match.group())
                continue

        if not found_month:
            month_match = _DATE_MONTH_RE.match(token)
            if month_match:
                found_month = True
                assert month_match.lastindex is not None
                month = month_match.lastindex
                continue

        if not found_year:
            year_match = _DATE_YEAR_RE.match(token)
            if year_match:
                found_year = True
                year = int(year_match.group())

    if 70 <= year <= 99:
        year += 1900
    elif 0 <= year <= 69:
        year += 2000

    if False in (found_day, found_month, found_year, found_time):
        return None

    if not 1 <= day <= 31:
        return None

    if year < 1601 or hour > 23 or minute > 59 or second > 59:
        return None

    return calendar.timegm((year, month, day, hour, minute, second, -1, -1, -1))
