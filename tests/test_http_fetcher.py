import httpx

from lyricgrab.fetchers import http_fetcher
from lyricgrab.fetchers.http_fetcher import DEFAULT_USER_AGENT, build_headers


def test_default_user_agent(monkeypatch):
    monkeypatch.delenv("LYRICGRAB_USER_AGENT", raising=False)
    assert build_headers()["User-Agent"] == DEFAULT_USER_AGENT


def test_user_agent_from_env(monkeypatch):
    monkeypatch.setenv("LYRICGRAB_USER_AGENT", "custom/1.0")
    assert build_headers()["User-Agent"] == "custom/1.0"


def test_extra_headers_override(monkeypatch):
    monkeypatch.delenv("LYRICGRAB_USER_AGENT", raising=False)
    hdrs = build_headers(["User-Agent=mine", "X-Token = abc", "ignored"])
    assert hdrs["User-Agent"] == "mine"
    assert hdrs["X-Token"] == "abc"
    assert "ignored" not in hdrs


class _FakeClient:
    attempts = 0

    def __init__(self, **kwargs):
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def get(self, url):
        type(self).attempts += 1
        return httpx.Response(200, text="<p>ok</p>", request=httpx.Request("GET", url))


def test_negative_retries_still_fetch_once(monkeypatch):
    _FakeClient.attempts = 0
    monkeypatch.setattr(http_fetcher.httpx, "Client", _FakeClient)
    res = http_fetcher.fetch("https://example.com/", retries=-1)
    assert res.html == "<p>ok</p>"
    assert _FakeClient.attempts == 1
