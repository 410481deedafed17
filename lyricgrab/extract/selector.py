from __future__ import annotations

from typing import Iterable, Optional

from .candidates import Candidate


def select_best(candidates: Iterable[Candidate], min_score: Optional[int] = None) -> Optional[Candidate]:
    """Return the highest scoring candidate, or None when nothing is confident.

    Ties go to the candidate seen first. A blank winner, or one scoring below
    ``min_score`` when a threshold is given, counts as no match.
    """
    best: Optional[Candidate] = None
    for cand in candidates:
        if best is None or cand.score > best.score:
            best = cand
    if best is None or not best.text.strip():
        return None
    if min_score is not None and best.score < min_score:
        return None
    return best
