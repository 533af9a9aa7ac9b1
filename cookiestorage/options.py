import os
from collections.abc import Mapping

import attr

from .exceptions import InvalidArgument

__all__ = ("JarOptions",)

ENV_PREFIX = "COOKIESTORAGE_"

_TRUE = frozenset(("1", "true", "yes", "on"))
_FALSE = frozenset(("0", "false", "no", "off"))


def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidArgument(f"{ENV_PREFIX}{name} must be a boolean flag, got {raw!r}")


@attr.s(auto_attribs=True, frozen=True, slots=True)
class JarOptions:
    """Construction defaults shared by the jars of one application.

    Pass an instance around explicitly instead of mutating module state.
    """

    locked: bool = False
    expire_before_set: bool = True
    unsafe: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "JarOptions":
        if environ is None:
            environ = os.environ
        defaults = cls()
        return cls(
            locked=_env_flag(environ, "LOCKED", defaults.locked),
            expire_before_set=_env_flag(
                environ, "EXPIRE_BEFORE_SET", defaults.expire_before_set
            ),
            unsafe=_env_flag(environ, "UNSAFE", defaults.unsafe),
        )
