from __future__ import annotations

import re
from html import unescape
from html.entities import html5


_trailing_ws_re = re.compile(r"[ \t]+\n")
_blank_run_re = re.compile(r"\n{3,}")
# Only semicolon-terminated references; "&not" in "this&nothing" is plain text
_entity_re = re.compile(r"&(#\d+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")

# Enough for any realistic nesting of escaped entities (&amp;amp;amp;...)
_MAX_UNESCAPE_PASSES = 8


def _replace_ref(m: re.Match) -> str:
    ref = m.group(1)
    # unknown names are left alone; unescape would match a legacy prefix ("&notx;")
    if ref.startswith("#") or ref + ";" in html5:
        return unescape(m.group(0))
    return m.group(0)


def _decode_once(text: str) -> str:
    return _entity_re.sub(_replace_ref, text)


def decode_entities(text: str) -> str:
    for _ in range(_MAX_UNESCAPE_PASSES):
        decoded = _decode_once(text)
        if decoded == text:
            break
        text = decoded
    return text


def post_process(text: str) -> str:
    """Final newline normalization applied to the extracted text.

    Running it twice gives the same result as running it once.
    """
    text = decode_entities(text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _trailing_ws_re.sub("\n", text)
    text = _blank_run_re.sub("\n\n", text)
    return text.strip()
