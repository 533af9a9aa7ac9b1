"""Jar snapshots and their on-disk format.

A snapshot holds the jar flags and every stored cookie, soft-expired
ones included. :class:`JsonSnapshotStore` writes it as UTF-8 JSON::

    {
        "format": "cookiestorage.snapshot",
        "version": 1,
        "locked": false,
        "expire_before_set": true,
        "cookies": [{"name": "id", "value": "42", ...}]
    }
"""

import json
from collections.abc import Iterable
from typing import IO, Any

import attr

from .abc import AbstractSnapshotStore
from .cookie import Cookie
from .exceptions import SnapshotFormatError

__all__ = ("Snapshot", "JsonSnapshotStore")

SNAPSHOT_FORMAT = "cookiestorage.snapshot"
SNAPSHOT_VERSION = 1

_STR_FIELDS = ("name", "value", "domain", "path")
_BOOL_FIELDS = ("secure", "expired", "http_only", "host_only")


@attr.s(auto_attribs=True, frozen=True, slots=True)
class Snapshot:
    locked: bool
    expire_before_set: bool
    cookies: tuple[Cookie, ...] = attr.ib(converter=tuple, factory=tuple)

    @classmethod
    def capture(
        cls, locked: bool, expire_before_set: bool, cookies: Iterable[Cookie]
    ) -> "Snapshot":
        # copies, so later jar mutations don't leak into the snapshot
        return cls(
            locked=locked,
            expire_before_set=expire_before_set,
            cookies=tuple(attr.evolve(cookie) for cookie in cookies),
        )


def _cookie_to_dict(cookie: Cookie) -> dict[str, Any]:
    return attr.asdict(cookie)


def _cookie_from_dict(data: Any) -> Cookie:
    if not isinstance(data, dict):
        raise SnapshotFormatError(f"Cookie record must be an object, got {data!r}")
    for field in _STR_FIELDS:
        if not isinstance(data.get(field), str):
            raise SnapshotFormatError(f"Cookie field {field!r} must be a string")
    for field in _BOOL_FIELDS:
        if not isinstance(data.get(field), bool):
            raise SnapshotFormatError(f"Cookie field {field!r} must be a boolean")
    expires = data.get("expires")
    if expires is not None and (
        isinstance(expires, bool) or not isinstance(expires, (int, float))
    ):
        raise SnapshotFormatError("Cookie field 'expires' must be a number or null")
    return Cookie(
        name=data["name"],
        value=data["value"],
        domain=data["domain"],
        path=data["path"],
        secure=data["secure"],
        expired=data["expired"],
        expires=expires,
        http_only=data["http_only"],
        host_only=data["host_only"],
    )


class JsonSnapshotStore(AbstractSnapshotStore):
    """Explicit, versioned JSON schema for jar snapshots."""

    def __init__(self, *, indent: int | None = None) -> None:
        self._indent = indent

    def dump(self, snapshot: Snapshot, fp: IO[bytes]) -> None:
        payload = {
            "format": SNAPSHOT_FORMAT,
            "version": SNAPSHOT_VERSION,
            "locked": snapshot.locked,
            "expire_before_set": snapshot.expire_before_set,
            "cookies": [_cookie_to_dict(cookie) for cookie in snapshot.cookies],
        }
        fp.write(json.dumps(payload, indent=self._indent).encode("utf-8"))

    def load(self, fp: IO[bytes]) -> Snapshot:
        try:
            payload = json.loads(fp.read().decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            raise SnapshotFormatError(f"Corrupt cookie snapshot: {exc}") from exc

        if not isinstance(payload, dict) or payload.get("format") != SNAPSHOT_FORMAT:
            raise SnapshotFormatError("Not a cookie snapshot")
        version = payload.get("version")
        if version != SNAPSHOT_VERSION:
            raise SnapshotFormatError(f"Unsupported snapshot version {version!r}")

        locked = payload.get("locked")
        expire_before_set = payload.get("expire_before_set")
        cookies = payload.get("cookies")
        if not isinstance(locked, bool) or not isinstance(expire_before_set, bool):
            raise SnapshotFormatError("Snapshot flags must be booleans")
        if not isinstance(cookies, list):
            raise SnapshotFormatError("Snapshot cookies must be a list")

        return Snapshot(
            locked=locked,
            expire_before_set=expire_before_set,
            cookies=[_cookie_from_dict(item) for item in cookies],
        )
