from __future__ import annotations

from typing import Set

from lxml import html

from ..normalize.flatten import flatten_text
from ..normalize.html_cleaner import find_body, sanitize, tag_name


def best_effort_main_content(root: html.HtmlElement) -> str:
    """Pick the longest distinct text block under <body> (or the root).

    Used when no candidate was a confident match. Returns "" when the page has
    no text at all.
    """
    sanitize(root)
    body = find_body(root)
    best = ""
    seen: Set[str] = set()
    for el in body.iterdescendants():
        if not tag_name(el):
            continue
        text = flatten_text(el)
        if not text.strip() or text in seen:
            continue
        seen.add(text)
        if len(text) > len(best):
            best = text
    return best
