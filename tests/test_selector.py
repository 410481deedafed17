from lxml import html

from lyricgrab.extract.candidates import Candidate
from lyricgrab.extract.selector import select_best


def _cand(score: int, text: str) -> Candidate:
    return Candidate(element=html.Element("div"), score=score, text=text)


def test_highest_score_wins():
    low, high = _cand(1, "low"), _cand(9, "high")
    assert select_best([low, high]) is high


def test_tie_goes_to_first_seen():
    first, second = _cand(5, "first"), _cand(5, "second")
    assert select_best([first, second]) is first


def test_negative_scores_still_select():
    only = _cand(-300, "privacy policy")
    assert select_best([only]) is only


def test_empty_pool_is_no_match():
    assert select_best([]) is None


def test_blank_winner_is_no_match():
    assert select_best([_cand(5, "   ")]) is None


def test_min_score_threshold():
    c = _cand(5, "text")
    assert select_best([c], min_score=10) is None
    assert select_best([c], min_score=5) is c
