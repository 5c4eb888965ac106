"""Rank fusion components.

Combines several independently ranked result lists (one per vector field or
query variant) into a single ranking.

Contents
- ``normalize``: metric-aware score normalization
- ``selection``: ordering and top-N truncation of fused scores
- ``fusion``: RRF and weighted score fusion, plus factories
"""

from .fusion import (
    RankFusionAlgorithm,
    ReciprocalRankFusion,
    WeightedScoreFusion,
    create_fusion_algorithm,
    create_fusion_algorithm_from_config,
)
from .normalize import normalize_score
from .selection import select_top_n

__all__ = [
    "RankFusionAlgorithm",
    "ReciprocalRankFusion",
    "WeightedScoreFusion",
    "create_fusion_algorithm",
    "create_fusion_algorithm_from_config",
    "normalize_score",
    "select_top_n",
]
