from abc import ABC, abstractmethod
from collections.abc import Iterable, Sized
from typing import IO, TYPE_CHECKING

from yarl import URL

from .cookie import Cookie

if TYPE_CHECKING:
    from .snapshot import Snapshot

    IterableBase = Iterable[Cookie]
else:
    IterableBase = Iterable


class AbstractCookieSet(Sized, IterableBase):
    """Abstract cookie storage with URL scoped lookups.

    Iteration yields every stored cookie, expired ones included until
    they are purged.
    """

    @abstractmethod
    def add(self, cookie: Cookie) -> None:
        """Store a cookie."""

    @abstractmethod
    def add_many(self, cookies: Iterable[Cookie]) -> None:
        """Store a collection of cookies."""

    @abstractmethod
    def query(self, url: URL) -> list[Cookie]:
        """Return active cookies visible at url."""

    @abstractmethod
    def header_for(self, url: URL) -> str:
        """Return the Cookie header value for url."""

    @abstractmethod
    def parse_and_merge(self, url: URL, raw_cookie: str) -> None:
        """Parse raw Set-Cookie text received from url and store the result."""

    @abstractmethod
    def purge(self, now: float | None = None) -> int:
        """Drop inactive cookies, return how many were dropped."""


class AbstractSnapshotStore(ABC):
    """Abstract jar snapshot serializer over binary file objects."""

    @abstractmethod
    def dump(self, snapshot: "Snapshot", fp: IO[bytes]) -> None:
        """Write snapshot into fp."""

    @abstractmethod
    def load(self, fp: IO[bytes]) -> "Snapshot":
        """Read a snapshot from fp."""
