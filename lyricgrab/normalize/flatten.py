from __future__ import annotations

import re
from typing import FrozenSet, List

from lxml import html

from .html_cleaner import tag_name


BLOCK_TAGS: FrozenSet[str] = frozenset(
    {"p", "div", "section", "article", "pre", "li", "ul", "ol", "h1", "h2", "h3", "h4", "h5", "h6"}
)

_trailing_ws_re = re.compile(r"[ \t]+\n")
_blank_run_re = re.compile(r"\n{3,}")
_watermark_re = re.compile(r"(Lyrics provided by|All rights reserved|More on .+)", re.IGNORECASE)


def _walk(root: html.HtmlElement) -> str:
    parts: List[str] = []
    # (element, closing) pairs; closing entries emit the block break and the tail
    stack = [(root, False)]
    while stack:
        el, closing = stack.pop()
        tag = tag_name(el)
        if closing:
            if tag in BLOCK_TAGS:
                parts.append("\n")
            if el is not root and el.tail:
                parts.append(el.tail)
            continue
        if tag == "br":
            parts.append("\n")
            if el is not root and el.tail:
                parts.append(el.tail)
            continue
        if not tag:
            # comment: skip its body, keep the text that follows it
            if el is not root and el.tail:
                parts.append(el.tail)
            continue
        if el.text:
            parts.append(el.text)
        stack.append((el, True))
        for child in reversed(el):
            stack.append((child, False))
    return "".join(parts)


def is_watermark(line: str) -> bool:
    return _watermark_re.search(line) is not None


def normalize_lines(raw: str) -> str:
    raw = raw.replace("\r", "")
    raw = _trailing_ws_re.sub("\n", raw)
    raw = _blank_run_re.sub("\n\n", raw)
    lines = [line.rstrip() for line in raw.split("\n")]
    kept = [line for line in lines if line.strip() and not is_watermark(line)]
    return "\n".join(kept)


def flatten_text(el: html.HtmlElement) -> str:
    """Flatten a subtree to newline-delimited text.

    Block-level elements (see ``BLOCK_TAGS``) and ``<br>`` end a line; inline
    elements run together. Blank lines and site watermark lines are dropped.
    """
    return normalize_lines(_walk(el))
