import time
from http.cookies import Morsel
from typing import Any

import attr

__all__ = ("Cookie",)


@attr.s(auto_attribs=True, slots=True, eq=True)
class Cookie:
    """A single stored cookie.

    Records are mutable: the jar soft-deletes a cookie by setting
    ``expired``, leaving physical removal to the cookie set.
    """

    name: str
    value: str = ""
    domain: str = ""
    path: str = "/"
    secure: bool = False
    expired: bool = False
    expires: float | None = None
    http_only: bool = False
    host_only: bool = False

    @property
    def slot(self) -> tuple[str, str]:
        """(domain, name) pair identifying the replaceable cookie slot."""
        return self.domain, self.name

    def is_active(self, now: float | None = None) -> bool:
        if self.expired:
            return False
        if self.expires is None:
            return True
        if now is None:
            now = time.time()
        return self.expires > now

    def output(self) -> str:
        return f"{self.name}={self.value}"

    def __str__(self) -> str:
        return self.output()

    @classmethod
    def from_morsel(cls, morsel: "Morsel[Any]", **kwargs: Any) -> "Cookie":
        """Build a cookie from a :class:`http.cookies.Morsel`.

        Expiry attributes are not interpreted here; pass ``expires``
        explicitly when needed.
        """
        return cls(
            name=morsel.key,
            value=morsel.value,
            domain=kwargs.pop("domain", morsel["domain"]),
            path=kwargs.pop("path", morsel["path"] or "/"),
            secure=bool(morsel["secure"]),
            http_only=bool(morsel["httponly"]),
            **kwargs,
        )
