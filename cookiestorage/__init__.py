__version__ = "1.0.0.dev0"

from typing import Tuple

from .abc import AbstractCookieSet, AbstractSnapshotStore
from .cookie import Cookie
from .cookiejar import CookieJar
from .cookieset import CookieSet
from .exceptions import (
    CookieStorageError,
    InvalidArgument,
    InvalidURL,
    SnapshotExistsError,
    SnapshotFormatError,
    SnapshotNotFoundError,
)
from .options import JarOptions
from .response import update_from_response
from .snapshot import JsonSnapshotStore, Snapshot

__all__: Tuple[str, ...] = (
    # abc
    "AbstractCookieSet",
    "AbstractSnapshotStore",
    # cookie
    "Cookie",
    # cookiejar
    "CookieJar",
    # cookieset
    "CookieSet",
    # exceptions
    "CookieStorageError",
    "InvalidArgument",
    "InvalidURL",
    "SnapshotExistsError",
    "SnapshotFormatError",
    "SnapshotNotFoundError",
    # options
    "JarOptions",
    # response
    "update_from_response",
    # snapshot
    "JsonSnapshotStore",
    "Snapshot",
)
