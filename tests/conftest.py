from __future__ import annotations

import httpx
import pytest

from lyricgrab.fetchers import http_fetcher
from lyricgrab.fetchers.http_fetcher import FetchResult


SONG_HTML = """
<html><body>
  <nav>Home | Sign in</nav>
  <div class="song-lyrics">[Intro]<br>Na na na<br>Na na na na<br><br>[Verse]<br>First line here<br>Second line here</div>
  <footer>All rights reserved</footer>
</body></html>
"""


@pytest.fixture
def fake_fetch(monkeypatch):
    """Replace the HTTP fetcher with one that serves the given HTML."""
    calls = []

    def install(html_text: str = SONG_HTML):
        def _fetch(url, timeout=20.0, headers=None, retries=1):
            calls.append(url)
            return FetchResult(url=url, status_code=200, headers={}, html=html_text)

        monkeypatch.setattr(http_fetcher, "fetch", _fetch)
        return calls

    return install


@pytest.fixture
def failing_fetch(monkeypatch):
    def _fetch(url, timeout=20.0, headers=None, retries=1):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(http_fetcher, "fetch", _fetch)
