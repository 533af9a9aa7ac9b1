"""
Internal cookie handling helpers.

Sanitizing and parsing of raw ``Set-Cookie`` text. These are not part
of the public API and may change without notice.
"""

import re
from http.cookies import Morsel

from .log import internal_logger

__all__ = ("filter_raw_cookie", "parse_set_cookie")

# Allow more characters in cookie names than RFC 6265 does, real servers
# send names with {} [] () and friends.
_COOKIE_NAME_RE = re.compile(r"^[!#$%&\'()*+\-./0-9:<=>?@A-Z\[\]^_`a-z{|}~]+$")
_COOKIE_KNOWN_ATTRS = frozenset(  # AKA Morsel._reserved
    (
        "path",
        "domain",
        "max-age",
        "expires",
        "secure",
        "httponly",
        "samesite",
        "version",
        "comment",
    )
)
_COOKIE_BOOL_ATTRS = frozenset(("secure", "httponly"))  # AKA Morsel._flags

_COOKIE_PATTERN = re.compile(
    r"""
    \s*                            # Optional whitespace at start of cookie
    (?P<key>                       # Start of group 'key'
    [\w\d!#%&'~_`><@,:/\$\*\+\-\.\^\|\)\(\?\}\{\=\[\]]+?
    )                              # End of group 'key'
    (                              # Optional group: there may not be a value.
    \s*=\s*                          # Equal Sign
    (?P<val>                         # Start of group 'val'
    "(?:[^\\"]|\\.)*"                  # Any double-quoted string
    |                                  # or
    "[^";]*                            # Unmatched opening quote
    |                                  # or
    (\w{3,6}day|\w{3}),\s              # RFC 1123 / RFC 850 expires date
    [\w\d\s-]{9,11}\s[\d:]{8}\s
    (GMT|[+-]\d{4})
    |                                  # or
    \w{3}\s+\w{3}\s+[\s\d]\d\s+\d{2}:\d{2}:\d{2}\s+\d{4}   # asctime() date
    |                                  # or
    [\w\d!#%&'~_`><@,:/\$\*\+\-\.\^\|\)\(\?\}\{\=\[\]]*      # Any word or empty string
    )                                # End of group 'val'
    )?                             # End of optional value group
    \s*                            # Any number of spaces.
    (\s+|;|$)                      # Ending either at space, semicolon, or EOS.
    """,
    re.VERBOSE | re.ASCII,
)

_EXPIRES_YEAR_RE = re.compile(
    r"(?P<prefix>expires\s*=[^;]*?)(?P<year>\d{5,})", re.IGNORECASE
)
_MAX_YEAR = "9999"


def filter_raw_cookie(raw_cookie: str) -> str:
    """Sanitize a raw ``Set-Cookie`` value before it is parsed.

    Surrounding whitespace is trimmed, a stray comma ending the first
    ``name=value`` pair is dropped and Expires years past 9999 are
    clamped so the date stays representable.
    """
    text = raw_cookie.strip()
    if not text:
        return text

    end = text.find(";")
    if end == -1:
        end = len(text)
    pair = text[:end].rstrip()
    if pair.endswith(","):
        text = pair[:-1] + text[end:]

    return _EXPIRES_YEAR_RE.sub(
        lambda m: m.group("prefix") + _MAX_YEAR, text
    )


def _unquote(text: str) -> str:
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        return text
    text = text[1:-1]
    return text.replace('\\"', '"').replace("\\\\", "\\")


def parse_set_cookie(raw_cookie: str) -> list[tuple[str, "Morsel[str]"]]:
    """Parse ``Set-Cookie`` text into ``(name, morsel)`` pairs.

    Follows the SimpleCookie algorithm, but an attribute or value the
    algorithm can't make sense of stops parsing instead of raising, and
    an unmatched quote does not drop the cookies after it.
    """
    parsed: list[tuple[str, Morsel[str]]] = []
    if not raw_cookie:
        return parsed

    i = 0
    n = len(raw_cookie)
    current: Morsel[str] | None = None
    seen = False

    while 0 <= i < n:
        match = _COOKIE_PATTERN.match(raw_cookie, i)
        if not match:
            break

        key, value = match.group("key"), match.group("val")
        i = match.end(0)
        lower_key = key.lower()

        if key[0] == "$":
            # "$Version" and friends before the first cookie apply to the
            # whole header and are ignored
            if seen and current is not None and lower_key[1:] in _COOKIE_KNOWN_ATTRS:
                current[lower_key[1:]] = value or ""
        elif lower_key in _COOKIE_KNOWN_ATTRS:
            if not seen:
                # attribute before any cookie
                break
            if lower_key in _COOKIE_BOOL_ATTRS:
                if current is not None:
                    current[lower_key] = True
            elif value is None:
                break
            elif current is not None:
                current[lower_key] = _unquote(value)
        elif value is not None:
            if not _COOKIE_NAME_RE.match(key):
                internal_logger.warning(
                    "Can not load cookies: Illegal cookie name %r", key
                )
                current = None
            else:
                current = Morsel()
                current.__setstate__(  # type: ignore[attr-defined]
                    {"key": key, "value": _unquote(value), "coded_value": value}
                )
                parsed.append((key, current))
                seen = True
        else:
            break

    return parsed
