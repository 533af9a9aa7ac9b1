import os
import pathlib
from collections.abc import Callable, Iterable, Iterator

import attr

from ._cookie_helpers import filter_raw_cookie
from .abc import AbstractCookieSet, AbstractSnapshotStore
from .cookie import Cookie
from .cookieset import CookieSet
from .exceptions import SnapshotExistsError, SnapshotNotFoundError
from .helpers import scope_url, to_url
from .log import jar_logger
from .options import JarOptions
from .snapshot import JsonSnapshotStore, Snapshot
from .typedefs import PathLike, StrOrURL

__all__ = ("CookieJar",)

CookieSetFactory = Callable[[], AbstractCookieSet]


class CookieJar:
    """Per-client cookie jar.

    Wraps a cookie set and adds the replace-on-set policy: with
    ``expire_before_set`` enabled, setting a cookie first expires any
    stored cookie with the same domain and name, so at most one of them
    stays active.

    ``locked`` is advisory. The jar never checks it; response processing
    (see :func:`cookiestorage.response.update_from_response`) does.
    """

    def __init__(
        self,
        cookie_set: AbstractCookieSet | None = None,
        *,
        locked: bool = False,
        expire_before_set: bool = True,
        cookie_set_factory: CookieSetFactory = CookieSet,
    ) -> None:
        self._cookie_set_factory = cookie_set_factory
        if cookie_set is None:
            cookie_set = cookie_set_factory()
        self._cookie_set = cookie_set
        self.locked = locked
        self.expire_before_set = expire_before_set

    @classmethod
    def from_options(
        cls, options: JarOptions, cookie_set: AbstractCookieSet | None = None
    ) -> "CookieJar":
        def factory() -> AbstractCookieSet:
            return CookieSet(unsafe=options.unsafe)

        return cls(
            cookie_set,
            locked=options.locked,
            expire_before_set=options.expire_before_set,
            cookie_set_factory=factory,
        )

    @property
    def cookie_set(self) -> AbstractCookieSet:
        return self._cookie_set

    @property
    def count(self) -> int:
        return len(self._cookie_set)

    def __len__(self) -> int:
        return len(self._cookie_set)

    def __iter__(self) -> Iterator[Cookie]:
        return iter(self._cookie_set)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} cookies={len(self)} "
            f"locked={self.locked} expire_before_set={self.expire_before_set}>"
        )

    def add(self, cookie: Cookie) -> None:
        """Store a cookie without the replace policy."""
        self._cookie_set.add(cookie)

    def add_many(self, cookies: Iterable[Cookie]) -> None:
        self._cookie_set.add_many(cookies)

    def set(self, cookie: Cookie) -> None:
        """Add a cookie or replace the one stored for its domain and name."""
        if self.expire_before_set:
            # cookie may be the stored record itself, as returned by get_cookies
            cookie = attr.evolve(cookie)
            self._expire_slot(cookie)
        self._cookie_set.add(cookie)

    def set_many(self, cookies: Iterable[Cookie]) -> None:
        """Add or replace every cookie of a collection.

        A cookie with an invalid domain raises before anything is added,
        expiry already applied to earlier cookies is kept.
        """
        if not self.expire_before_set:
            self._cookie_set.add_many(cookies)
            return
        cookies = [attr.evolve(cookie) for cookie in cookies]
        for cookie in cookies:
            self._expire_slot(cookie)
        self._cookie_set.add_many(cookies)

    def set_value(self, name: str, value: str, domain: str, path: str = "/") -> None:
        self.set(Cookie(name=name, value=value, domain=domain, path=path))

    def set_raw(self, url: StrOrURL, raw_cookie: str) -> None:
        """Add or replace cookies from raw Set-Cookie text received from url."""
        url = to_url(url)
        text = filter_raw_cookie(raw_cookie)

        if self.expire_before_set:
            separator = text.find("=")
            # without a separator there is nothing to compare against
            if separator != -1:
                key = text[: separator + 1]
                for stored in self._cookie_set.query(url):
                    if stored.output().startswith(key):
                        self._expire(stored)

        self._cookie_set.parse_and_merge(url, text)

    def remove(self, url: StrOrURL, name: str | None = None) -> None:
        """Expire cookies visible at url, only those called name if given."""
        for cookie in self._cookie_set.query(to_url(url)):
            if name is None or cookie.name == name:
                self._expire(cookie)

    def get_cookies(self, url: StrOrURL) -> list[Cookie]:
        return self._cookie_set.query(to_url(url))

    def get_cookie_header(self, url: StrOrURL) -> str:
        return self._cookie_set.header_for(to_url(url))

    def contains(self, url: StrOrURL, name: str) -> bool:
        if len(self._cookie_set) == 0:
            return False
        return any(
            cookie.name == name for cookie in self._cookie_set.query(to_url(url))
        )

    def clear(self) -> None:
        """Drop every cookie by starting over with a new cookie set."""
        jar_logger.debug("Clearing %d cookies", len(self._cookie_set))
        self._cookie_set = self._cookie_set_factory()

    def purge(self) -> int:
        return self._cookie_set.purge()

    def snapshot(self) -> Snapshot:
        return Snapshot.capture(self.locked, self.expire_before_set, self._cookie_set)

    @classmethod
    def from_snapshot(
        cls,
        snapshot: Snapshot,
        *,
        cookie_set_factory: CookieSetFactory = CookieSet,
    ) -> "CookieJar":
        jar = cls(
            locked=snapshot.locked,
            expire_before_set=snapshot.expire_before_set,
            cookie_set_factory=cookie_set_factory,
        )
        jar.add_many(snapshot.cookies)
        return jar

    def save(
        self,
        file_path: PathLike,
        overwrite: bool = True,
        *,
        store: AbstractSnapshotStore | None = None,
    ) -> None:
        """Write the jar flags and every cookie to file_path.

        Raises :exc:`SnapshotExistsError` if the file exists and
        overwrite is False.
        """
        file_path = pathlib.Path(file_path)
        if store is None:
            store = JsonSnapshotStore()
        snapshot = self.snapshot()

        try:
            f = file_path.open(mode="wb" if overwrite else "xb")
        except FileExistsError:
            raise SnapshotExistsError(os.fspath(file_path)) from None
        with f:
            store.dump(snapshot, f)
        jar_logger.debug(
            "Saved %d cookies to %s", len(snapshot.cookies), os.fspath(file_path)
        )

    @classmethod
    def load(
        cls,
        file_path: PathLike,
        *,
        store: AbstractSnapshotStore | None = None,
        cookie_set_factory: CookieSetFactory = CookieSet,
    ) -> "CookieJar":
        """Restore a jar written by :meth:`save`."""
        file_path = pathlib.Path(file_path)
        if store is None:
            store = JsonSnapshotStore()

        try:
            f = file_path.open(mode="rb")
        except FileNotFoundError:
            raise SnapshotNotFoundError(os.fspath(file_path)) from None
        with f:
            snapshot = store.load(f)
        jar_logger.debug(
            "Loaded %d cookies from %s", len(snapshot.cookies), os.fspath(file_path)
        )
        return cls.from_snapshot(snapshot, cookie_set_factory=cookie_set_factory)

    def _expire_slot(self, cookie: Cookie) -> None:
        url = scope_url(cookie)
        if url is None:
            return
        for stored in self._cookie_set.query(url):
            if stored.name == cookie.name:
                self._expire(stored)

    def _expire(self, cookie: Cookie) -> None:
        jar_logger.debug("Expiring cookie %s for %r", cookie.name, cookie.domain)
        cookie.expired = True
