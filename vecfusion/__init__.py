"""Client-side layer for a vector similarity search engine.

Subpackages:
- ``vecfusion.common``: configuration, logging, and metrics.
- ``vecfusion.engine``: the abstract engine interface, metric types, and errors.
- ``vecfusion.ranking``: rank fusion of multiple named result lists.

Usage:
- ``from vecfusion.ranking import ReciprocalRankFusion, WeightedScoreFusion``
- ``from vecfusion.search import MultiVectorSearcher``
"""

__version__ = "0.1.0"
