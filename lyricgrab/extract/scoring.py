"""Heuristic relevance scoring for candidate text blocks.

Scores are only meaningful relative to other blocks from the same page. The
weights reward long, line-broken text with bracketed section tags (``[Chorus]``)
and medium line lengths, and penalize site boilerplate vocabulary.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


_bracket_section_re = re.compile(r"\[[^\]\r\n]{3,40}\]")
_boilerplate_re = re.compile(
    r"(cookie|privacy|sign in|subscribe|newsletter|advert|terms|policy)", re.IGNORECASE
)
_lyric_tag_re = re.compile(r"\[(chorus|verse|bridge|outro|intro|solo)\]", re.IGNORECASE)


@dataclass(frozen=True)
class ScoringWeights:
    length_divisor: int = 5
    newline_weight: int = 3
    bracket_section_weight: int = 50
    target_line_length: int = 45
    boilerplate_penalty: int = 200
    lyric_tag_bonus: int = 120
    short_line_max_avg: int = 80
    short_line_min_newlines: int = 5
    short_line_bonus: int = 50


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass
class ScoreSignals:
    length: int
    newlines: int
    bracket_sections: int
    avg_line_length: float
    has_boilerplate: bool
    has_lyric_tag: bool

    def is_short_lined(self, weights: ScoringWeights = DEFAULT_WEIGHTS) -> bool:
        return (
            self.avg_line_length < weights.short_line_max_avg
            and self.newlines > weights.short_line_min_newlines
        )


def average_line_length(text: str) -> float:
    lines = [line.strip() for line in text.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        return 0.0
    return sum(len(line) for line in lines) / len(lines)


def compute_signals(text: str) -> ScoreSignals:
    return ScoreSignals(
        length=len(text),
        newlines=text.count("\n"),
        bracket_sections=len(_bracket_section_re.findall(text)),
        avg_line_length=average_line_length(text),
        has_boilerplate=_boilerplate_re.search(text) is not None,
        has_lyric_tag=_lyric_tag_re.search(text) is not None,
    )


def score_signals(signals: ScoreSignals, weights: Optional[ScoringWeights] = None) -> int:
    w = weights or DEFAULT_WEIGHTS
    # int() truncates toward zero before taking the distance
    line_length_penalty = abs(int(signals.avg_line_length - w.target_line_length))
    score = (
        signals.length // w.length_divisor
        + signals.newlines * w.newline_weight
        + signals.bracket_sections * w.bracket_section_weight
        - line_length_penalty
    )
    if signals.has_boilerplate:
        score -= w.boilerplate_penalty
    if signals.has_lyric_tag:
        score += w.lyric_tag_bonus
    if signals.is_short_lined(w):
        score += w.short_line_bonus
    return score


def score_text(text: str, weights: Optional[ScoringWeights] = None) -> int:
    return score_signals(compute_signals(text), weights)
