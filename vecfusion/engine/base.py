"""Base vector engine interface.

Defines the abstract contract the search layer depends on, independent of
how the native engine is reached (in-process bindings, a sidecar service,
a test double).

All methods are asynchronous so several per-field queries can be in flight
at once.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
import numpy as np

from .errors import InvalidArgumentError


@dataclass
class Doc:
    """A document as stored in, or returned by, the engine.

    ``score`` is only meaningful on query results and is expressed in the
    metric of the queried field.
    """
    id: str
    vectors: Dict[str, np.ndarray] = field(default_factory=dict)
    fields: Dict[str, Any] = field(default_factory=dict)
    score: float = 0.0


@dataclass
class VectorQuery:
    """A nearest-neighbour query against one vector field."""
    field_name: str
    vector: np.ndarray
    topk: int = 10
    filter: Optional[str] = None
    include_vector: bool = False

    def __post_init__(self):
        self.vector = np.asarray(self.vector, dtype=np.float32)

    def validate(self) -> None:
        """Raise ``InvalidArgumentError`` if the query cannot be sent."""
        if not self.field_name:
            raise InvalidArgumentError("query field name must not be empty")
        if self.topk <= 0:
            raise InvalidArgumentError(f"topk must be positive, got {self.topk}")
        if self.vector.ndim != 1 or self.vector.size == 0:
            raise InvalidArgumentError(
                f"query vector for '{self.field_name}' must be a non-empty 1-D array"
            )


class VectorEngine(ABC):
    """Abstract base class for the native engine.

    Implementations translate native status codes with
    ``vecfusion.engine.errors.check_status`` so callers only ever see
    ``VectorEngineError`` subclasses.
    """

    @abstractmethod
    async def insert(self, docs: Sequence[Doc]) -> int:
        """Insert documents.

        Returns the number of documents written.
        """
        pass

    @abstractmethod
    async def query(self, query: VectorQuery) -> List[Doc]:
        """Run a nearest-neighbour query.

        Returns at most ``query.topk`` documents ordered by descending
        relevance, each carrying its raw score.
        """
        pass

    @abstractmethod
    async def delete(self, ids: Sequence[str]) -> int:
        """Delete documents by id; returns how many were removed."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the engine is usable."""
        pass
