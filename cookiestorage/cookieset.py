import time
from collections import defaultdict
from collections.abc import Iterable, Iterator

import attr
from yarl import URL

from ._cookie_helpers import parse_set_cookie
from .abc import AbstractCookieSet
from .cookie import Cookie
from .helpers import SECURE_SCHEMES, is_ip_address, parse_cookie_date
from .log import internal_logger

__all__ = ("CookieSet",)


class CookieSet(AbstractCookieSet):
    """Implements cookie storage adhering to RFC 6265."""

    __slots__ = ("_cookies", "_unsafe")

    def __init__(self, *, unsafe: bool = False) -> None:
        self._cookies: defaultdict[tuple[str, str], dict[str, Cookie]] = defaultdict(
            dict
        )
        self._unsafe = unsafe

    @property
    def unsafe(self) -> bool:
        return self._unsafe

    def __iter__(self) -> Iterator[Cookie]:
        for bucket in self._cookies.values():
            yield from bucket.values()

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._cookies.values())

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {len(self)} cookies>"

    def add(self, cookie: Cookie) -> None:
        # Store a copy, the caller keeps ownership of its record
        cookie = attr.evolve(cookie)
        domain = cookie.domain
        if domain.startswith("."):
            # Remove leading dot
            domain = domain[1:]
        cookie.domain = domain.lower()
        if not cookie.path.startswith("/"):
            cookie.path = "/"
        self._cookies[(cookie.domain, cookie.path)][cookie.name] = cookie

    def add_many(self, cookies: Iterable[Cookie]) -> None:
        for cookie in cookies:
            self.add(cookie)

    def query(self, url: URL) -> list[Cookie]:
        now = time.time()
        hostname = url.raw_host or ""
        hostname = hostname.rstrip(".").lower()
        is_not_secure = url.scheme not in SECURE_SCHEMES
        request_path = url.raw_path or "/"

        found = []
        for (domain, path), bucket in self._cookies.items():
            if domain:
                if not self._unsafe and is_ip_address(hostname):
                    continue
            for cookie in bucket.values():
                if not cookie.is_active(now):
                    continue
                if domain:
                    if cookie.host_only:
                        if domain != hostname:
                            continue
                    elif not self._is_domain_match(domain, hostname):
                        continue
                if not self._is_path_match(request_path, path):
                    continue
                if is_not_secure and cookie.secure:
                    continue
                found.append(cookie)

        # Longest path first, sort is stable
        found.sort(key=lambda c: len(c.path), reverse=True)
        return found

    def header_for(self, url: URL) -> str:
        return "; ".join(cookie.output() for cookie in self.query(url))

    def parse_and_merge(self, url: URL, raw_cookie: str) -> None:
        self.purge()

        hostname = (url.raw_host or "").rstrip(".").lower()
        if not self._unsafe and is_ip_address(hostname):
            # Don't accept cookies from IPs
            internal_logger.debug("Ignoring cookies set by IP host %s", hostname)
            return

        now = time.time()
        for name, morsel in parse_set_cookie(raw_cookie):
            domain = morsel["domain"]
            host_only = False

            # ignore domains with trailing dots
            if domain and domain[-1] == ".":
                domain = ""
            if domain.startswith("."):
                domain = domain[1:]
            domain = domain.lower()

            if not domain:
                domain = hostname
                host_only = True
            elif not self._is_domain_match(domain, hostname):
                internal_logger.warning(
                    "Rejected cookie %r for domain %r set by %s",
                    name,
                    domain,
                    hostname,
                )
                continue

            path = morsel["path"]
            if not path or not path.startswith("/"):
                path = self._default_path(url)

            cookie = Cookie.from_morsel(
                morsel,
                domain=domain,
                path=path,
                host_only=host_only,
                expires=self._expiry(morsel["max-age"], morsel["expires"], now),
            )
            self.add(cookie)

    def purge(self, now: float | None = None) -> int:
        if now is None:
            now = time.time()
        dropped = 0
        for key, bucket in list(self._cookies.items()):
            for name, cookie in list(bucket.items()):
                if not cookie.is_active(now):
                    del bucket[name]
                    dropped += 1
            if not bucket:
                del self._cookies[key]
        if dropped:
            internal_logger.debug("Purged %d inactive cookies", dropped)
        return dropped

    @staticmethod
    def _default_path(url: URL) -> str:
        path = url.raw_path
        if not path.startswith("/"):
            return "/"
        # Cut everything from the last slash to the end
        return "/" + path[1 : path.rfind("/")]

    @staticmethod
    def _expiry(max_age: str, expires: str, now: float) -> float | None:
        if max_age:
            try:
                delta_seconds = int(max_age)
            except ValueError:
                pass
            else:
                # non-positive Max-Age expires the cookie at once
                return now + delta_seconds if delta_seconds > 0 else now
        if expires:
            return parse_cookie_date(expires)
        return None

    @staticmethod
    def _is_domain_match(domain: str, hostname: str) -> bool:
        """Implements domain matching adhering to RFC 6265."""
        if hostname == domain:
            return True

        if not hostname.endswith(domain):
            return False

        non_matching = hostname[: -len(domain)]

        if not non_matching.endswith("."):
            return False

        return not is_ip_address(hostname)

    @staticmethod
    def _is_path_match(req_path: str, cookie_path: str) -> bool:
        """Implements path matching adhering to RFC 6265."""
        if not req_path.startswith("/"):
            req_path = "/"

        if req_path == cookie_path:
            return True

        if not req_path.startswith(cookie_path):
            return False

        if cookie_path.endswith("/"):
            return True

        non_matching = req_path[len(cookie_path) :]

        return non_matching.startswith("/")
