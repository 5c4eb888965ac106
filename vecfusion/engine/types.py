"""Enumerations shared with the engine."""

from enum import Enum
from typing import Union

from .errors import InvalidArgumentError


class MetricType(Enum):
    """Distance/similarity function an index was built with.

    ``L2`` and ``COSINE`` are distances (smaller is closer); ``IP`` is a
    similarity (larger is closer).
    """
    UNDEFINED = "undefined"
    L2 = "l2"
    IP = "ip"
    COSINE = "cosine"
    MIPSL2 = "mipsl2"

    @classmethod
    def parse(cls, value: Union[str, "MetricType"]) -> "MetricType":
        """Resolve a metric from its case-insensitive name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidArgumentError(f"unknown metric type: {value!r}") from None
