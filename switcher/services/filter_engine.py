"""
Goal: Rank windows against the typed query.

rank(windows, query) -> list of indices into `windows`, best first.
- Empty query: every index in fetch order (no scoring at all).
- Otherwise name and info are scored separately; the better of the two wins, and a window
  matching neither is left out.
- Sorting is stable and keyed on score only, so equal scores keep fetch order and the same
  (windows, query) always gives the same list.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from switcher.models.schemas import WindowRecord
from switcher.services.fuzzy import fuzzy_score


def window_score(window: WindowRecord, query: str) -> Optional[int]:
    name_score = fuzzy_score(window.name, query)
    info_score = fuzzy_score(window.info, query)
    if name_score is None:
        return info_score
    if info_score is None:
        return name_score
    return max(name_score, info_score)


def rank(windows: Sequence[WindowRecord], query: str) -> List[int]:
    if not query:
        return list(range(len(windows)))

    scored: List[Tuple[int, int]] = []
    for idx, window in enumerate(windows):
        score = window_score(window, query)
        if score is not None:
            scored.append((idx, score))

    scored.sort(key=lambda item: item[1], reverse=True)
    return [idx for idx, _ in scored]
