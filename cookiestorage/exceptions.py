"""Cookie storage errors."""

__all__ = (
    "CookieStorageError",
    "InvalidArgument",
    "InvalidURL",
    "SnapshotExistsError",
    "SnapshotNotFoundError",
    "SnapshotFormatError",
)


class CookieStorageError(Exception):
    """Base class for cookie storage errors."""


class InvalidArgument(CookieStorageError, ValueError):
    """Argument rejected before any state was touched."""

    # Derive from ValueError for callers catching the builtin


class InvalidURL(InvalidArgument):
    """Invalid URL.

    URL or cookie domain is malformed, e.g. it doesn't contain a host
    part."""

    def __init__(self, url: object, description: str = "") -> None:
        # The type of url is not yarl.URL because the exception can be raised
        # on URL(url) call
        self._url = url
        self._description = description

        if description:
            super().__init__(url, description)
        else:
            super().__init__(url)

    @property
    def url(self) -> object:
        return self._url

    @property
    def description(self) -> str:
        return self._description

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self}>"

    def __str__(self) -> str:
        if self._description:
            return f"{self._url} - {self._description}"
        return str(self._url)


class SnapshotExistsError(InvalidArgument):
    """Snapshot file already exists and overwriting was not allowed."""

    def __init__(self, path: object) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"Cookie snapshot file {str(self.path)!r} already exists"


class SnapshotNotFoundError(CookieStorageError, FileNotFoundError):
    """Snapshot file to load does not exist."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Cookie snapshot file {str(path)!r} not found")
        self.path = path


class SnapshotFormatError(CookieStorageError, ValueError):
    """Snapshot data is corrupt or was written by an incompatible version."""
