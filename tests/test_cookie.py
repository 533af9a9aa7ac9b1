from http.cookies import SimpleCookie

from cookiestorage import Cookie


def test_defaults() -> None:
    cookie = Cookie("a")
    assert cookie.value == ""
    assert cookie.domain == ""
    assert cookie.path == "/"
    assert not cookie.secure
    assert not cookie.expired
    assert cookie.expires is None
    assert not cookie.http_only
    assert not cookie.host_only


def test_slot() -> None:
    assert Cookie("sid", "1", domain="example.com").slot == ("example.com", "sid")


def test_output() -> None:
    cookie = Cookie("id", "42", domain="a.com", path="/x")
    assert cookie.output() == "id=42"
    assert str(cookie) == "id=42"


def test_is_active() -> None:
    assert Cookie("a").is_active()
    assert not Cookie("a", expired=True).is_active()
    assert Cookie("a", expires=200.0).is_active(now=100.0)
    assert not Cookie("a", expires=200.0).is_active(now=200.0)
    assert not Cookie("a", expires=1.0).is_active()


def test_expire_in_place() -> None:
    cookie = Cookie("a", "1")
    cookie.expired = True
    assert not cookie.is_active()


def test_equality() -> None:
    assert Cookie("a", "1", domain="x.com") == Cookie("a", "1", domain="x.com")
    assert Cookie("a", "1", domain="x.com") != Cookie("a", "2", domain="x.com")


def test_from_morsel() -> None:
    morsel = SimpleCookie("id=42; Domain=example.com; Path=/app; Secure; HttpOnly")[
        "id"
    ]
    cookie = Cookie.from_morsel(morsel)
    assert cookie == Cookie(
        "id",
        "42",
        domain="example.com",
        path="/app",
        secure=True,
        http_only=True,
    )


def test_from_morsel_overrides() -> None:
    morsel = SimpleCookie("id=42")["id"]
    cookie = Cookie.from_morsel(
        morsel, domain="a.com", path="/x", host_only=True, expires=5.0
    )
    assert cookie.domain == "a.com"
    assert cookie.path == "/x"
    assert cookie.host_only
    assert cookie.expires == 5.0


def test_from_morsel_default_path() -> None:
    cookie = Cookie.from_morsel(SimpleCookie("id=42")["id"])
    assert cookie.path == "/"
