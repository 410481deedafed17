from __future__ import annotations

from typing import List, NamedTuple, Optional

from lxml import html

from ..normalize.flatten import flatten_text
from ..normalize.html_cleaner import tag_name
from .scoring import ScoringWeights, score_text


# Document-level containers are never candidates on their own
_CONTAINER_TAGS = {"html", "body"}


class Candidate(NamedTuple):
    element: html.HtmlElement
    score: int
    text: str


def has_content_signal(el: html.HtmlElement) -> bool:
    if el.get("data-lyrics-container") == "true":
        return True
    cls = el.get("class") or ""
    return "lyrics" in cls.lower() or "Lyrics__Container" in cls


def content_signal_elements(root: html.HtmlElement) -> List[html.HtmlElement]:
    return [el for el in root.iter() if tag_name(el) and has_content_signal(el)]


def candidate_elements(root: html.HtmlElement) -> List[html.HtmlElement]:
    # root.iter() visits each node once, so the union needs no extra de-dup
    out: List[html.HtmlElement] = []
    for el in root.iter():
        tag = tag_name(el)
        if not tag:
            continue
        if tag not in _CONTAINER_TAGS or has_content_signal(el):
            out.append(el)
    return out


def collect_candidates(root: html.HtmlElement, weights: Optional[ScoringWeights] = None) -> List[Candidate]:
    """Flatten and score every candidate element, in document order.

    Elements whose flattened text is blank are dropped.
    """
    candidates: List[Candidate] = []
    for el in candidate_elements(root):
        text = flatten_text(el)
        if not text.strip():
            continue
        candidates.append(Candidate(element=el, score=score_text(text, weights), text=text))
    return candidates
