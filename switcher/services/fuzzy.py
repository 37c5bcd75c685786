"""
Goal: Score how well a short typed pattern fuzzy-matches a candidate string.

fuzzy_score(candidate, pattern) -> int | None
- None when the pattern's characters don't all appear, in order, in the candidate (case-insensitive).
- Otherwise a score; higher is better. Runs of consecutive characters, hits right after a word
  boundary or at a camelCase hump, and a first hit at the start of the string all earn bonuses.
  Gaps cost points (opening a gap costs more than stretching one).

The score is the best alignment found by a small dynamic program over (pattern, candidate)
positions, so "term" in "Terminal" beats "term" in "the_error_map".
"""

from __future__ import annotations

from typing import List, Optional

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

BONUS_BOUNDARY_WHITE = 10
BONUS_BOUNDARY_DELIMITER = 9
BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CAMEL = BONUS_BOUNDARY + SCORE_GAP_EXTENSION
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

DELIMITERS = "/,:;|"

_WHITE, _DELIMITER, _NON_WORD, _LOWER, _UPPER, _NUMBER = range(6)


def _char_class(ch: str) -> int:
    if ch.isspace():
        return _WHITE
    if ch in DELIMITERS:
        return _DELIMITER
    if ch.isdigit():
        return _NUMBER
    if ch.isalpha():
        return _UPPER if ch.isupper() else _LOWER
    return _NON_WORD


def _bonus_for(prev_class: int, cls: int) -> int:
    if cls > _NON_WORD:
        # word character
        if prev_class == _WHITE:
            return BONUS_BOUNDARY_WHITE
        if prev_class == _DELIMITER:
            return BONUS_BOUNDARY_DELIMITER
        if prev_class == _NON_WORD:
            return BONUS_BOUNDARY
    if (prev_class == _LOWER and cls == _UPPER) or (prev_class != _NUMBER and cls == _NUMBER):
        return BONUS_CAMEL
    if cls == _NON_WORD or cls == _DELIMITER:
        return BONUS_NON_WORD
    if cls == _WHITE:
        return BONUS_BOUNDARY_WHITE
    return 0


def _bonuses(candidate: str) -> List[int]:
    bonuses = []
    prev_class = _WHITE  # the start of the string counts as a word boundary
    for ch in candidate:
        cls = _char_class(ch)
        bonuses.append(_bonus_for(prev_class, cls))
        prev_class = cls
    return bonuses


def _is_subsequence(text: str, pattern: str) -> bool:
    it = iter(text)
    return all(ch in it for ch in pattern)


def _max_opt(a: Optional[int], b: Optional[int]) -> Optional[int]:
    if a is None:
        return b
    if b is None:
        return a
    return a if a >= b else b


def _fold(value: str) -> str:
    # lowercase without changing length, so bonuses line up with characters
    return "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in value)


def fuzzy_score(candidate: str, pattern: str) -> Optional[int]:
    if not pattern:
        return 0
    text = _fold(candidate)
    pat = _fold(pattern)
    if len(pat) > len(text) or not _is_subsequence(text, pat):
        return None

    n = len(text)
    bonuses = _bonuses(candidate)

    # Row for pattern[0]: each hit starts a fresh run
    prev_score: List[Optional[int]] = [None] * n
    prev_first_bonus = [0] * n
    for j, ch in enumerate(text):
        if ch == pat[0]:
            prev_score[j] = SCORE_MATCH + bonuses[j] * BONUS_FIRST_CHAR_MULTIPLIER
            prev_first_bonus[j] = bonuses[j]

    for pc in pat[1:]:
        score: List[Optional[int]] = [None] * n
        first_bonus = [0] * n
        # best previous-row score that can reach column j through a gap of length >= 1
        gap_best: Optional[int] = None
        for j in range(n):
            if j >= 2:
                entering = prev_score[j - 2]
                gap_best = _max_opt(
                    entering + SCORE_GAP_START if entering is not None else None,
                    gap_best + SCORE_GAP_EXTENSION if gap_best is not None else None,
                )
            if text[j] != pc:
                continue

            bonus = bonuses[j]
            best: Optional[int] = None
            best_first = bonus

            run = prev_score[j - 1] if j >= 1 else None
            if run is not None:
                chunk_bonus = prev_first_bonus[j - 1]
                if bonus >= BONUS_BOUNDARY and bonus > chunk_bonus:
                    chunk_bonus = bonus
                best = run + SCORE_MATCH + max(bonus, chunk_bonus, BONUS_CONSECUTIVE)
                best_first = chunk_bonus

            if gap_best is not None:
                gapped = gap_best + SCORE_MATCH + bonus
                if best is None or gapped > best:
                    best = gapped
                    best_first = bonus

            score[j] = best
            first_bonus[j] = best_first
        prev_score, prev_first_bonus = score, first_bonus

    result: Optional[int] = None
    for value in prev_score:
        result = _max_opt(result, value)
    return result
