from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from lxml import html

from ..normalize.html_cleaner import parse_html, sanitize
from ..normalize.postprocess import post_process
from ..utils.logging import get_logger
from .candidates import collect_candidates, content_signal_elements
from .fallback import best_effort_main_content
from .scoring import ScoringWeights
from .selector import select_best


class ExtractionResult(NamedTuple):
    text: str
    method: str  # "candidate", "fallback" or "empty"
    score: Optional[int] = None

    @property
    def used_fallback(self) -> bool:
        return self.method != "candidate"


def extract(
    root: html.HtmlElement,
    weights: Optional[ScoringWeights] = None,
    min_score: Optional[int] = None,
) -> ExtractionResult:
    """Extract the main lyrics block from a parsed document.

    The tree is sanitized in place. Never raises for a parsed document; a page
    without text yields an empty result.
    """
    logger = get_logger()
    sanitize(root)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Content-signal elements: {len(content_signal_elements(root))}")
    candidates = collect_candidates(root, weights)
    logger.debug(f"Scored {len(candidates)} candidates")
    best = select_best(candidates, min_score=min_score)
    if best is not None:
        logger.debug(f"Best candidate <{best.element.tag}> score={best.score}")
        return ExtractionResult(text=post_process(best.text), method="candidate", score=best.score)

    logger.debug("No confident candidate; falling back to the longest text block")
    text = post_process(best_effort_main_content(root))
    return ExtractionResult(text=text, method="fallback" if text else "empty")


def extract_html(
    html_text: str,
    weights: Optional[ScoringWeights] = None,
    min_score: Optional[int] = None,
) -> ExtractionResult:
    return extract(parse_html(html_text), weights=weights, min_score=min_score)
