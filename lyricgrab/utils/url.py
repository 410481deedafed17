from __future__ import annotations

from urllib.parse import urlparse


DEFAULT_OUTPUT_NAME = "lyrics.txt"


def normalize_url(url: str) -> str:
    url = url.strip()
    if "://" not in url:
        url = "https://" + url
    return url


def default_output_name(url: str) -> str:
    """Derive a file name from host and path, e.g. ``example.com_songs_hey-joe.txt``."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return DEFAULT_OUTPUT_NAME
    if not parsed.hostname:
        return DEFAULT_OUTPUT_NAME
    safe = (parsed.hostname + parsed.path.replace("/", "_")).strip("_")
    return f"{safe}.txt" if safe else DEFAULT_OUTPUT_NAME
