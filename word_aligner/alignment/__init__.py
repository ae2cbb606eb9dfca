"""Alignment algorithm module

Token-level local alignment interface and implementation.
"""

from .base import AlignerBase, AlignmentPath
from .smith_waterman import SmithWatermanAligner, ScoringWeights

__all__ = [
    "AlignerBase",
    "AlignmentPath",
    "SmithWatermanAligner",
    "ScoringWeights",
]
