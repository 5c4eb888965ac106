"""Multi-vector search.

Runs one nearest-neighbour query per vector field (or per query variant)
against the engine concurrently, then merges the per-query rankings with a
configured fusion algorithm.
"""

import asyncio
import time
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union
import structlog

from .common.config import FusionConfig
from .common.logging import log_performance
from .common.metrics import FusionMetrics
from .engine.base import VectorEngine, VectorQuery
from .engine.errors import InvalidArgumentError, VectorEngineError
from .ranking.fusion import RankFusionAlgorithm, create_fusion_algorithm_from_config
from .ranking.selection import FusedResult

logger = structlog.get_logger("vecfusion.search")

QuerySet = Union[Sequence[VectorQuery], Mapping[str, VectorQuery]]


class MultiVectorSearcher:
    """Fan out vector queries and fuse their results.

    Responsibilities
    - Validate every query before anything is sent
    - Issue all queries to the engine concurrently
    - Fuse the per-query rankings and report metrics
    """

    def __init__(
        self,
        engine: VectorEngine,
        fusion: RankFusionAlgorithm,
        metrics: Optional[FusionMetrics] = None
    ):
        self.engine = engine
        self.fusion = fusion
        self.metrics = metrics

    @classmethod
    def from_config(cls, engine: VectorEngine, config: FusionConfig) -> "MultiVectorSearcher":
        """Build a searcher with the fusion algorithm and metrics ``config`` selects.

        Metrics are only collected when ``vf_metrics_enabled`` is set.
        """
        fusion = create_fusion_algorithm_from_config(config)
        metrics = FusionMetrics() if config.vf_metrics_enabled else None
        return cls(engine, fusion, metrics)

    @staticmethod
    def _name_queries(queries: QuerySet) -> Dict[str, VectorQuery]:
        if isinstance(queries, Mapping):
            return dict(queries)

        named: Dict[str, VectorQuery] = {}
        for query in queries:
            if query.field_name in named:
                raise InvalidArgumentError(
                    f"duplicate query for field '{query.field_name}'; pass a mapping to name them"
                )
            named[query.field_name] = query
        return named

    @staticmethod
    async def _cancel_pending(tasks: List["asyncio.Future"]) -> None:
        for task in tasks:
            if not task.done():
                task.cancel()
        # collect cancellations and sibling failures so none go unobserved
        await asyncio.gather(*tasks, return_exceptions=True)

    async def _run_query(self, name: str, query: VectorQuery) -> Tuple[str, List[Tuple[str, float]]]:
        docs = await self.engine.query(query)
        return name, [(doc.id, doc.score) for doc in docs]

    async def search(self, queries: QuerySet) -> FusedResult:
        """Query every field and return the fused ranking.

        Raises ``InvalidArgumentError`` for malformed queries and re-raises
        any error from the engine after cancelling the remaining queries.
        """
        named = self._name_queries(queries)
        if not named:
            return []

        for query in named.values():
            query.validate()

        start_time = time.perf_counter()
        tasks = [
            asyncio.ensure_future(self._run_query(name, query))
            for name, query in named.items()
        ]
        try:
            results = await asyncio.gather(*tasks)
        except Exception as e:
            await self._cancel_pending(tasks)
            if self.metrics:
                status = e.code.name.lower() if isinstance(e, VectorEngineError) else "error"
                self.metrics.record_engine_query(status)
            logger.error(
                "Engine query failed",
                fields=sorted(named),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        if self.metrics:
            self.metrics.record_engine_query("ok", len(results))

        fuse_start = time.perf_counter()
        fused = self.fusion.rerank(dict(results))
        fuse_duration = time.perf_counter() - fuse_start

        if self.metrics:
            self.metrics.record_fusion(self.fusion.name, fuse_duration, len(fused))

        logger.info(
            "Multi-vector search completed",
            algorithm=self.fusion.name,
            query_count=len(named),
            result_count=len(fused),
        )
        log_performance(
            "multi_vector_search",
            (time.perf_counter() - start_time) * 1000,
            algorithm=self.fusion.name,
            query_count=len(named),
        )

        return fused
