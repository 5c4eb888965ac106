"""Metric-aware score normalization.

Raw scores from different metrics live on different scales and point in
different directions (a small L2 distance is good, a small inner product is
not). ``normalize_score`` maps each onto a scale where larger means more
similar so weighted sums across lists are meaningful.
"""

import math
import numpy as np

from ..engine.types import MetricType


def as_float32(value: float) -> float:
    """Round a Python float to float32 precision."""
    return float(np.float32(value))


def normalize_score(score: float, metric: MetricType) -> float:
    """Normalize a raw engine score for ``metric``.

    - ``L2``: ``1 - 2/pi * atan(score)``, 1 at distance 0
    - ``IP``: ``0.5 + atan(score)/pi``, within (0, 1)
    - ``COSINE``: ``1 - score/2``, cosine distance in [0, 2] maps to [1, 0]
    - anything else: the raw score unchanged

    The raw score is read at float32 precision; non-finite values propagate.
    """
    raw = as_float32(score)
    if metric is MetricType.L2:
        return 1.0 - 2.0 * math.atan(raw) / math.pi
    if metric is MetricType.IP:
        return 0.5 + math.atan(raw) / math.pi
    if metric is MetricType.COSINE:
        return 1.0 - raw / 2.0
    return raw
