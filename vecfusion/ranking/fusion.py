"""Rank fusion algorithms for multi-list search.

Both algorithms take a mapping of list name to ranked ``(item_id, score)``
pairs (one list per vector field or query variant) and return a single
ranking over the union of items, capped at ``topn``.

Fusers are configured at construction and never change afterwards; the
``with_*`` helpers return new instances. A configured fuser can therefore be
shared freely between threads and tasks.
"""

from abc import ABC, abstractmethod
import math
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union
import structlog

from ..common.config import FusionConfig
from ..engine.types import MetricType
from .normalize import normalize_score
from .selection import FusedResult, select_top_n

logger = structlog.get_logger("ranking.fusion")

RankedList = Sequence[Tuple[str, float]]
ListName = Union[str, bytes, Any]
NamedResultSet = Mapping[ListName, RankedList]


def list_name(key: ListName) -> str:
    """Text form of a result list key."""
    if isinstance(key, str):
        return key
    if isinstance(key, (bytes, bytearray)):
        return bytes(key).decode("utf-8")
    return str(key)


def _ordered_lists(query_results: NamedResultSet) -> List[Tuple[str, RankedList]]:
    # Fixed visiting order keeps float sums identical for any key order.
    named = [(list_name(key), docs) for key, docs in query_results.items()]
    named.sort(key=lambda entry: entry[0])
    return named


class RankFusionAlgorithm(ABC):
    """Base class for rank fusion algorithms."""

    name = "base"

    def __init__(self, topn: int):
        self._topn = topn

    @property
    def topn(self) -> int:
        return self._topn

    @abstractmethod
    def _accumulate(self, scores: Dict[str, float], name: str, docs: RankedList) -> None:
        """Add one list's contributions into ``scores``."""

    def rerank(self, query_results: NamedResultSet) -> FusedResult:
        """Fuse named result lists into one ranking of at most ``topn`` items."""
        scores: Dict[str, float] = {}
        input_count = 0

        for name, docs in _ordered_lists(query_results):
            self._accumulate(scores, name, docs)
            input_count += len(docs)

        fused = select_top_n(scores, self._topn)

        logger.debug(
            "Fusion completed",
            algorithm=self.name,
            list_count=len(query_results),
            input_count=input_count,
            distinct_count=len(scores),
            fused_count=len(fused),
        )

        return fused


class ReciprocalRankFusion(RankFusionAlgorithm):
    """Reciprocal Rank Fusion (RRF).

    An item at zero-based position ``rank`` in a list earns
    ``1 / (rank_constant + rank + 1)``; contributions are summed over all
    lists. Raw scores are ignored, so lists on incomparable scales can be
    combined.
    """

    name = "rrf"

    def __init__(self, topn: int, rank_constant: int = 60):
        super().__init__(topn)
        self._rank_constant = rank_constant

    @property
    def rank_constant(self) -> int:
        return self._rank_constant

    def with_rank_constant(self, rank_constant: int) -> "ReciprocalRankFusion":
        """Return a copy using ``rank_constant``."""
        return ReciprocalRankFusion(self._topn, rank_constant=rank_constant)

    def rrf_score(self, rank: int) -> float:
        denominator = self._rank_constant + rank + 1.0
        # negative rank constants can hit zero; score it as unbounded
        if denominator == 0.0:
            return math.inf
        return 1.0 / denominator

    def _accumulate(self, scores: Dict[str, float], name: str, docs: RankedList) -> None:
        for rank, (item_id, _score) in enumerate(docs):
            scores[item_id] = scores.get(item_id, 0.0) + self.rrf_score(rank)

    def __repr__(self) -> str:
        return f"ReciprocalRankFusion(topn={self._topn}, rank_constant={self._rank_constant})"


class WeightedScoreFusion(RankFusionAlgorithm):
    """Weighted score fusion.

    Each raw score is normalized for ``metric`` (see ``normalize_score``),
    multiplied by its list's weight and summed per item. Lists without an
    explicit weight count with ``1.0``. Weights are not validated: ``0``
    drops a list, a negative weight inverts its influence.
    """

    name = "weighted"
    default_weight = 1.0

    def __init__(
        self,
        topn: int,
        metric: MetricType,
        weights: Optional[Mapping[ListName, float]] = None
    ):
        super().__init__(topn)
        self._metric = MetricType.parse(metric)
        self._weights = MappingProxyType(
            {list_name(key): float(value) for key, value in (weights or {}).items()}
        )

    @property
    def metric(self) -> MetricType:
        return self._metric

    @property
    def weights(self) -> Mapping[str, float]:
        """Read-only view of the explicit per-list weights."""
        return self._weights

    def with_weight(self, field: ListName, weight: float) -> "WeightedScoreFusion":
        """Return a copy with ``field`` weighted by ``weight``."""
        weights = dict(self._weights)
        weights[list_name(field)] = weight
        return WeightedScoreFusion(self._topn, self._metric, weights)

    def with_weights(self, weights: Mapping[ListName, float]) -> "WeightedScoreFusion":
        """Return a copy whose weights are exactly ``weights``."""
        return WeightedScoreFusion(self._topn, self._metric, weights)

    def weight_for(self, name: ListName) -> float:
        return self._weights.get(list_name(name), self.default_weight)

    def _accumulate(self, scores: Dict[str, float], name: str, docs: RankedList) -> None:
        weight = self.weight_for(name)
        for item_id, score in docs:
            weighted = normalize_score(score, self._metric) * weight
            scores[item_id] = scores.get(item_id, 0.0) + weighted

    def __repr__(self) -> str:
        return (
            f"WeightedScoreFusion(topn={self._topn}, metric={self._metric.value}, "
            f"weights={dict(self._weights)})"
        )


def create_fusion_algorithm(algorithm: str, topn: int, **params) -> RankFusionAlgorithm:
    """Create a fusion algorithm instance.

    Parameters
    - algorithm: ``rrf`` or ``weighted``
    - topn: Maximum number of fused results
    - params: ``rank_constant`` for RRF; ``metric`` and ``weights`` for weighted
    """

    if algorithm == "rrf":
        rank_constant = params.get("rank_constant", 60)
        return ReciprocalRankFusion(topn, rank_constant=rank_constant)

    elif algorithm == "weighted":
        metric = params.get("metric", MetricType.UNDEFINED)
        weights = params.get("weights")
        return WeightedScoreFusion(topn, metric, weights)

    else:
        raise ValueError(f"Unknown fusion algorithm: {algorithm}")


def create_fusion_algorithm_from_config(config: FusionConfig) -> RankFusionAlgorithm:
    """Create the fusion algorithm selected by ``config``."""
    return create_fusion_algorithm(
        config.vf_fusion_algorithm,
        config.vf_fusion_topn,
        rank_constant=config.vf_rrf_rank_constant,
        metric=config.vf_weighted_metric,
        weights=config.vf_fusion_weights,
    )

