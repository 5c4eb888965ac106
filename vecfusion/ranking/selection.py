"""Ordering and truncation of accumulated fusion scores."""

import math
from typing import List, Mapping, Tuple

from .normalize import as_float32

FusedResult = List[Tuple[str, float]]


def _rank_key(entry: Tuple[str, float]) -> Tuple[bool, float, str]:
    item_id, score = entry
    if math.isnan(score):
        return (True, 0.0, item_id)
    return (False, -score, item_id)


def select_top_n(scores: Mapping[str, float], topn: int) -> FusedResult:
    """Return the ``topn`` best ``(item_id, score)`` pairs.

    Ordering is descending by score. NaN scores sort after every number and
    exact ties are broken by ``item_id`` ascending, so the result does not
    depend on the order the scores were accumulated in. Scores are returned
    at float32 precision.
    """
    if topn <= 0 or not scores:
        return []

    ranked = sorted(scores.items(), key=_rank_key)[:topn]

    return [(item_id, as_float32(score)) for item_id, score in ranked]
