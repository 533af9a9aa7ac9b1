"""HTTP Headers constants."""

from multidict import istr

SET_COOKIE = istr("Set-Cookie")
