"""Tests for the vecfusion package.

Unit tests cover score normalization, top-N selection, both fusion
algorithms, the engine error taxonomy, and multi-vector search against an
in-memory fake engine. No native engine or network access is needed.
"""
