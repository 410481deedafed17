from __future__ import annotations

import os
import httpx
from dataclasses import dataclass
from typing import Dict, Iterable, Optional


DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) LyricsScraper/1.0 (+https://localhost)"

DEFAULT_HEADERS: Dict[str, str] = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate, br",
}


@dataclass
class FetchResult:
    url: str
    status_code: int
    headers: Dict[str, str]
    html: str


def build_headers(extra_headers: Optional[Iterable[str]] = None) -> Dict[str, str]:
    headers = dict(DEFAULT_HEADERS)
    headers["User-Agent"] = os.getenv("LYRICGRAB_USER_AGENT") or DEFAULT_USER_AGENT
    if extra_headers:
        for kv in extra_headers:
            if "=" in kv:
                k, v = kv.split("=", 1)
                headers[k.strip()] = v.strip()
    return headers


def fetch(url: str, timeout: float = 20.0, headers: Optional[Iterable[str]] = None, retries: int = 1) -> FetchResult:
    hdrs = build_headers(headers)
    retries = max(retries, 0)
    for attempt in range(retries + 1):
        try:
            with httpx.Client(http2=True, timeout=timeout, follow_redirects=True, headers=hdrs) as client:
                resp = client.get(url)
                resp.raise_for_status()
                return FetchResult(url=str(resp.url), status_code=resp.status_code, headers=dict(resp.headers), html=resp.text)
        except httpx.HTTPError:
            if attempt >= retries:
                raise
    raise AssertionError("unreachable")
