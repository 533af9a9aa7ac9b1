from multidict import CIMultiDict, CIMultiDictProxy
from yarl import URL

from cookiestorage import CookieJar, update_from_response


def test_update_from_response() -> None:
    jar = CookieJar()
    headers = CIMultiDict(
        [
            ("Content-Type", "text/html"),
            ("Set-Cookie", "a=1; Path=/"),
            ("set-cookie", "b=2; Path=/"),
        ]
    )

    assert update_from_response(jar, URL("http://example.com/"), headers) == 2
    assert jar.get_cookie_header("http://example.com/") == "a=1; b=2"


def test_update_from_response_proxy_and_pairs() -> None:
    jar = CookieJar()
    proxy = CIMultiDictProxy(CIMultiDict([("Set-Cookie", "a=1; Path=/")]))
    assert update_from_response(jar, "http://example.com/", proxy) == 1

    pairs = [("SET-COOKIE", "a=2; Path=/")]
    assert update_from_response(jar, "http://example.com/", pairs) == 1
    assert jar.get_cookie_header("http://example.com/") == "a=2"


def test_update_from_response_plain_mapping() -> None:
    jar = CookieJar()
    assert update_from_response(jar, "http://example.com/", {"Set-Cookie": "a=1"}) == 1
    assert jar.contains("http://example.com/", "a")


def test_update_from_response_without_cookies() -> None:
    jar = CookieJar()
    assert update_from_response(jar, "http://example.com/", {}) == 0
    assert len(jar) == 0


def test_update_from_response_locked() -> None:
    jar = CookieJar(locked=True)
    headers = CIMultiDict([("Set-Cookie", "a=1; Path=/")])

    assert update_from_response(jar, "http://example.com/", headers) == 0
    assert len(jar) == 0

    jar.locked = False
    assert update_from_response(jar, "http://example.com/", headers) == 1


def test_update_from_response_locked_allows_manual_set() -> None:
    jar = CookieJar(locked=True)
    jar.set_raw("http://example.com/", "a=1; Path=/")
    assert jar.contains("http://example.com/", "a")
